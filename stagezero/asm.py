"""A small assembler for the Knight instruction set, emitting annotated hex."""

from __future__ import annotations

import enum
import string
import sys
from collections.abc import Iterator
from dataclasses import dataclass

_MAX_STRING = 255
_ASCII_LIMIT = _MAX_STRING // 2
_C_SPACE = " \t\n\v\f\r"
_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_HEX_TABLE = "0123456789ABCDEF"


class TokenType(enum.IntFlag):
    EOL = 1
    COMMENT = 2
    LABEL = 4
    STRING = 8
    ABSOLUTE = 16


@dataclass
class Token:
    """One whitespace-separated word of assembly source."""

    text: str
    kind: TokenType = TokenType(0)
    size: int | None = None
    address: int = 0
    expression: str = ""


_FOUR_BYTE = {
    # 4OP integer group
    "ADD.CI": "0100", "ADD.CO": "0101", "ADD.CIO": "0102",
    "ADDU.CI": "0103", "ADDU.CO": "0104", "ADDU.CIO": "0105",
    "SUB.BI": "0106", "SUB.BO": "0107", "SUB.BIO": "0108",
    "SUBU.BI": "0109", "SUBU.BO": "010A", "SUBU.BIO": "010B",
    "MULTIPLY": "010C", "MULTIPLYU": "010D", "DIVIDE": "010E",
    "DIVIDEU": "010F", "MUX": "0110", "NMUX": "0111",
    "SORT": "0112", "SORTU": "0113",
    # 3OP integer group
    "ADD": "05000", "ADDU": "05001", "SUB": "05002", "SUBU": "05003",
    "CMP": "05004", "CMPU": "05005", "MUL": "05006", "MULH": "05007",
    "MULU": "05008", "MULUH": "05009", "DIV": "0500A", "MOD": "0500B",
    "DIVU": "0500C", "MODU": "0500D", "MAX": "05010", "MAXU": "05011",
    "MIN": "05012", "MINU": "05013", "AND": "05020", "OR": "05021",
    "XOR": "05022", "NAND": "05023", "NOR": "05024", "XNOR": "05025",
    "MPQ": "05026", "LPQ": "05027", "CPQ": "05028", "BPQ": "05029",
    "SAL": "05030", "SAR": "05031", "SL0": "05032", "SR0": "05033",
    "SL1": "05034", "SR1": "05035", "ROL": "05036", "ROR": "05037",
    "LOADX": "05038", "LOADX8": "05039", "LOADXU8": "0503A",
    "LOADX16": "0503B", "LOADXU16": "0503C", "LOADX32": "0503D",
    "LOADXU32": "0503E", "STOREX": "05048", "STOREX8": "05049",
    "STOREX16": "0504A", "STOREX32": "0504B",
    "CMPJUMP.G": "05050", "CMPJUMP.GE": "05051", "CMPJUMP.E": "05052",
    "CMPJUMP.NE": "05053", "CMPJUMP.LE": "05054", "CMPJUMP.L": "05055",
    "CMPJUMPU.G": "05060", "CMPJUMPU.GE": "05061",
    "CMPJUMPU.LE": "05064", "CMPJUMPU.L": "05065",
    # 2OP integer group
    "NEG": "090000", "ABS": "090001", "NABS": "090002", "SWAP": "090003",
    "COPY": "090004", "MOVE": "090005", "NOT": "090006",
    "BRANCH": "090100", "CALL": "090101",
    "PUSHR": "090200", "PUSH8": "090201", "PUSH16": "090202",
    "PUSH32": "090203", "POPR": "090280", "POP8": "090281",
    "POPU8": "090282", "POP16": "090283", "POPU16": "090284",
    "POP32": "090285", "POPU32": "090286",
    "CMPSKIP.G": "090300", "CMPSKIP.GE": "090301", "CMPSKIP.E": "090302",
    "CMPSKIP.NE": "090303", "CMPSKIP.LE": "090304", "CMPSKIP.L": "090305",
    "CMPSKIPU.G": "090380", "CMPSKIPU.GE": "090381",
    "CMPSKIPU.LE": "090384", "CMPSKIPU.L": "090385",
    # 1OP group
    "READPC": "0D00000", "READSCID": "0D00001", "FALSE": "0D00002",
    "TRUE": "0D00003", "JSR_COROUTINE": "0D01000", "RET": "0D01001",
    "PUSHPC": "0D02000", "POPPC": "0D02001",
    # 0OPI group
    "JUMP": "3C00",
    # HALCODE group
    "FOPEN_READ": "42100000", "FOPEN_WRITE": "42100001",
    "FCLOSE": "42100002", "REWIND": "42100003", "FSEEK": "42100004",
    "FGETC": "42100100", "FPUTC": "42100200", "HAL_MEM": "42110000",
    # 0OP group
    "NOP": "00000000", "HALT": "FFFFFFFF",
}

_SIX_BYTE = {
    # 2OPI group
    "ADDI": "E1000E", "ADDUI": "E1000F", "SUBI": "E10010", "SUBUI": "E10011",
    "CMPI": "E10012", "LOAD": "E10013", "LOAD8": "E10014",
    "LOADU8": "E10015", "LOAD16": "E10016", "LOADU16": "E10017",
    "LOAD32": "E10018", "LOADU32": "E10019", "CMPUI": "E1001F",
    "STORE": "E10020", "STORE8": "E10021", "STORE16": "E10022",
    "STORE32": "E10023", "ANDI": "E100B0", "ORI": "E100B1",
    "XORI": "E100B2", "NANDI": "E100B3", "NORI": "E100B4",
    "XNORI": "E100B5",
    "CMPJUMPI.G": "E100C0", "CMPJUMPI.GE": "E100C1", "CMPJUMPI.E": "E100C2",
    "CMPJUMPI.NE": "E100C3", "CMPJUMPI.LE": "E100C4", "CMPJUMPI.L": "E100C5",
    "CMPJUMPUI.G": "E100D0", "CMPJUMPUI.GE": "E100D1",
    "CMPJUMPUI.LE": "E100D4", "CMPJUMPUI.L": "E100D5",
    # 1OPI group
    "JUMP.C": "E0002C0", "JUMP.B": "E0002C1", "JUMP.O": "E0002C2",
    "JUMP.G": "E0002C3", "JUMP.GE": "E0002C4", "JUMP.E": "E0002C5",
    "JUMP.NE": "E0002C6", "JUMP.LE": "E0002C7", "JUMP.L": "E0002C8",
    "JUMP.Z": "E0002C9", "JUMP.NZ": "E0002CA", "JUMP.P": "E0002CB",
    "JUMP.NP": "E0002CC", "CALLI": "E0002D0", "LOADI": "E0002D1",
    "LOADUI": "E0002D2", "SALI": "E0002D3", "SARI": "E0002D4",
    "SL0I": "E0002D5", "SR0I": "E0002D6", "SL1I": "E0002D7",
    "SR1I": "E0002D8", "LOADR": "E0002E0", "LOADR8": "E0002E1",
    "LOADRU8": "E0002E2", "LOADR16": "E0002E3", "LOADRU16": "E0002E4",
    "LOADR32": "E0002E5", "LOADRU32": "E0002E6", "STORER": "E0002F0",
    "STORER8": "E0002F1", "STORER16": "E0002F2", "STORER32": "E0002F3",
    "CMPSKIPI.G": "E000A00", "CMPSKIPI.GE": "E000A01",
    "CMPSKIPI.E": "E000A02", "CMPSKIPI.NE": "E000A03",
    "CMPSKIPI.LE": "E000A04", "CMPSKIPI.L": "E000A05",
    "CMPSKIPUI.G": "E000A10", "CMPSKIPUI.GE": "E000A11",
    "CMPSKIPUI.LE": "E000A14", "CMPSKIPUI.L": "E000A15",
}

_OPCODES: dict[str, tuple[str, int]] = {
    **{f"R{n}": (f"{n:X}", 0) for n in range(16)},
    **{name: (code, 4) for name, code in _FOUR_BYTE.items()},
    **{name: (code, 6) for name, code in _SIX_BYTE.items()},
}


def _read_token(chars: Iterator[str]) -> tuple[Token, bool]:
    """Read one token; the flag tells whether the end of input was reached."""
    kind = TokenType(0)
    store: list[str] = []
    at_end = False
    while len(store) < _MAX_STRING:
        c = next(chars, None)
        if c is None:
            at_end = True
            break
        if c in "\n\r":
            kind |= TokenType.EOL
            if store:
                break
            continue
        plain = not kind & (TokenType.COMMENT | TokenType.STRING)
        if plain and c in " \t":
            if store:
                break
            continue
        if plain and c in "#;":
            kind |= TokenType.COMMENT
        elif plain and c in "\"'":
            kind |= TokenType.STRING
        elif plain and c == ":":
            kind |= TokenType.LABEL
        elif plain and c == "&":
            kind |= TokenType.ABSOLUTE
        elif kind & TokenType.STRING and c in "\"'":
            break
        store.append(c)
    return Token(text="".join(store), kind=kind), at_end


def tokenize(text: str) -> list[Token]:
    """Split assembly source into tokens.

    Quoted strings and comments keep their inner whitespace; a token never
    exceeds 255 characters. The token list always ends with the token read
    when the input ran out, which may be empty.
    """
    chars = iter(text)
    tokens: list[Token] = []
    at_end = False
    while not at_end:
        token, at_end = _read_token(chars)
        tokens.append(token)
    return tokens


def _strtol(text: str) -> int:
    """Parse the leading integer of *text* the way C's strtol does with base 0."""
    s = text.lstrip(_C_SPACE)
    negative = False
    if s[:1] in ("+", "-"):
        negative = s[0] == "-"
        s = s[1:]
    if s[:2].lower() == "0x" and len(s) > 2 and s[2] in string.hexdigits:
        base, valid, s = 16, string.hexdigits, s[2:]
    elif s.startswith("0"):
        base, valid = 8, string.octdigits
    else:
        base, valid = 10, string.digits
    digits = []
    for ch in s:
        if ch not in valid:
            break
        digits.append(ch)
    value = int("".join(digits), base) if digits else 0
    if negative:
        value = -value
    return max(_LONG_MIN, min(_LONG_MAX, value))


def _hexify(text: str) -> str:
    chars = text[:_ASCII_LIMIT]
    encoded = "".join(
        _HEX_TABLE[(ord(ch) & 0xFF) // 16] + _HEX_TABLE[(ord(ch) & 0xFF) % 16]
        for ch in chars
    )
    return encoded.ljust((len(chars) // 4 + 1) * 8, "0")


def _hex_size(text: str) -> int:
    return sum(1 for ch in text if ch in string.hexdigits) // 2


def _resolve(tokens: list[Token]) -> None:
    for token in tokens:
        if not token.kind & TokenType.COMMENT and token.text in _OPCODES:
            token.expression, token.size = _OPCODES[token.text]

    for token in tokens:
        if token.kind & TokenType.STRING:
            if token.text.startswith("'"):
                token.expression = token.text[1:]
                token.size = _hex_size(token.expression)
            elif token.text.startswith('"'):
                token.expression = _hexify(token.text[1:])
                token.size = min(len(token.expression), _MAX_STRING) // 2
        if token.kind & TokenType.ABSOLUTE:
            token.size = 4

    ip = 0
    previous: Token | None = None
    for token in tokens:
        if token.size is None:
            token.address = ip
        elif token.size == 0:
            token.address = previous.address if previous is not None else ip
        else:
            token.address = ip
            ip += token.size
        previous = token

    labels: dict[str, int] = {}
    for token in tokens:
        if token.kind & TokenType.LABEL:
            labels.setdefault(token.text, token.address)

    for token in tokens:
        if token.text[:1] not in ("@", "$", "&"):
            continue
        dest = labels.get(":" + token.text[1:])
        if dest is None:
            continue
        if token.text[0] == "@":
            token.expression = f"{(dest - token.address) & 0xFFFF:04x}"
        elif token.text[0] == "$":
            token.expression = f"{dest & 0xFFFF:04x}"
        else:
            token.expression = f"{dest & 0xFFFFFFFF:08x}"

    for token in tokens:
        if token.expression:
            continue
        value = _strtol(token.text) & 0xFFFF
        if token.text.startswith("0") or value:
            token.expression = f"{value:04x}"


def _line_text(tokens: list[Token], start: int) -> str:
    parts = []
    for token in tokens[start:]:
        parts.append(" " + token.text)
        if token.text.startswith('"'):
            parts.append('"')
        elif token.text.startswith("'"):
            parts.append("'")
        elif token.text.startswith(":"):
            parts.append(f" ; offset = {token.address:x}")
        if token.kind & TokenType.EOL:
            break
    return "".join(parts)


def _line_expression(tokens: list[Token], start: int) -> tuple[str, int]:
    parts = []
    for index, token in enumerate(tokens[start:], start):
        if token.kind & TokenType.COMMENT:
            return "".join(parts), index + 1
        parts.append(token.expression)
        if token.kind & TokenType.EOL:
            return "".join(parts), index + 1
    return "".join(parts), len(tokens)


def assemble(text: str) -> str:
    """Assemble *text*, returning pairs of '#'-commented source and hex lines."""
    tokens = tokenize(text)
    _resolve(tokens)
    out = []
    start = 0
    while start < len(tokens):
        out.append("#" + _line_text(tokens, start) + "\n")
        expression, start = _line_expression(tokens, start)
        out.append(expression + "\n")
    return "".join(out)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        sys.stderr.write(
            "Usage: asm $FileName\n"
            "Where $FileName is the name of the paper tape of the program being run\n"
        )
        return 1
    try:
        with open(args[0], encoding="latin-1", newline="") as handle:
            source = handle.read()
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    sys.stdout.flush()
    sys.stdout.buffer.write(assemble(source).encode("latin-1", errors="replace"))
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())