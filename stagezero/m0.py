"""The M0 macro assembler: DEFINE substitution, strings and immediates to hex2 text."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass

from stagezero.asm import _strtol as strtol
from stagezero.textutil import numerate_string

_WORD_END = "\t\n "
_QUOTES = "\"'"
_COMMENT = "#;"
_SIGILS = ":!@$%&"
_RANGE_MESSAGE = (
    "number exceeds range -32768 to 65535\n"
    "Please use '00 11 22 33' format instead to express such a large value\n"
)


class M0Error(ValueError):
    """The source could not be expanded.

    ``partial`` holds the output produced before the problem was found.
    """

    def __init__(self, message: str, partial: str = "") -> None:
        super().__init__(message)
        self.partial = partial


@dataclass
class _Token:
    text: str
    is_string: bool = False
    is_macro: bool = False
    expression: str | None = None


def _tokenize(text: str) -> Iterator[_Token]:
    pos = 0
    size = len(text)
    while pos < size:
        c = text[pos]
        pos += 1
        if c in _COMMENT:
            while pos < size and text[pos] not in "\n\r":
                pos += 1
            pos += 1
        elif c in _WORD_END:
            continue
        elif c in _QUOTES:
            end = text.find(c, pos)
            if end == -1:
                end = size
            yield _Token(c + text[pos:end], is_string=True)
            pos = end + 1
        else:
            end = pos
            while end < size and text[end] not in _WORD_END:
                end += 1
            yield _Token(text[pos - 1:end])
            pos = end + 1


def _identify_macros(tokens: list[_Token]) -> list[_Token]:
    result = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token.text == "DEFINE":
            if index + 2 >= len(tokens):
                raise M0Error("DEFINE needs a name and a value")
            name, value = tokens[index + 1], tokens[index + 2]
            expansion = value.text[1:] if value.is_string else value.text
            result.append(_Token(name.text, is_macro=True, expression=expansion))
            index += 3
        else:
            result.append(token)
            index += 1
    return result


def _hex_bytes(content: str) -> bytes:
    return bytes(ord(ch) & 0xFF for ch in content)


def _hexify(content: str) -> str:
    data = _hex_bytes(content)
    return data.hex().upper().ljust((len(data) // 4 + 1) * 8, "0")


def expand(text: str) -> str:
    """Expand M0 source into hex2 text, one item per line.

    A DEFINE applies to the tokens that follow it; a later DEFINE of the
    same name takes over from there. Double-quoted strings become
    NUL-padded hex, single-quoted strings are copied, numbers become
    four lower-case hex digits and anything else is passed through.
    """
    tokens = _identify_macros(list(_tokenize(text)))

    definitions: dict[str, str | None] = {}
    for token in tokens:
        if token.is_macro:
            definitions[token.text] = token.expression
        elif token.text in definitions:
            token.expression = definitions[token.text]

    for token in tokens:
        if token.is_string:
            if token.text.startswith("'"):
                token.expression = token.text[1:]
            elif token.text.startswith('"'):
                token.expression = _hexify(token.text[1:])

    for token in tokens:
        if token.expression is None and not token.is_macro:
            value = strtol(token.text) & 0xFFFF
            if token.text.startswith("0") or value:
                token.expression = f"{value:04x}"
            else:
                token.expression = token.text

    body = "".join(f"\n{t.expression}" for t in tokens if not t.is_macro)
    return body + "\n"


class _CompactReader:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def getc(self) -> str | None:
        if self._pos < len(self._text):
            c = self._text[self._pos]
            self._pos += 1
            return c
        return None

    def read_token(self) -> tuple[str, str | None]:
        """Return the next token and the character that ended it (None at EOF)."""
        c = self.getc()
        if c is None:
            return "", None
        if c in _COMMENT:
            while c is not None and c != "\n":
                c = self.getc()
            return "", c
        if c in _QUOTES:
            quote = c
            chars = [c]
            c = self.getc()
            while c is not None and c != quote:
                chars.append(c)
                c = self.getc()
            return "".join(chars), self.getc()
        chars = []
        while c is not None and c not in _WORD_END:
            chars.append(c)
            c = self.getc()
        return "".join(chars), c


def _collect_defines(text: str) -> dict[str, str]:
    reader = _CompactReader(text)
    definitions: dict[str, str] = {}
    while True:
        token, c = reader.read_token()
        if token == "DEFINE":
            name, _ = reader.read_token()
            value, c = reader.read_token()
            definitions[name] = value
        if c is None:
            return definitions


def _hexify_compact(content: str) -> str:
    data = _hex_bytes(content) + b"\0"
    data += b"\0" * (-len(data) % 4)
    return data.hex().upper()


def expand_compact(text: str) -> str:
    """Expand M0 source in a single streaming pass after collecting all DEFINEs.

    Definitions apply anywhere in the file, the last one winning. Numbers
    become four upper-case hex digits and must lie in -32768..65535.
    Raises M0Error for out-of-range numbers and unknown words.
    """
    definitions = _collect_defines(text)
    reader = _CompactReader(text)
    out: list[str] = []
    while True:
        token, c = reader.read_token()
        if token:
            if token[0] in _SIGILS:
                out.append(token + "\n")
            elif token == "DEFINE":
                reader.read_token()
                _, c = reader.read_token()
            elif token[0] == '"':
                out.append(_hexify_compact(token[1:]) + "\n")
            elif token[0] == "'":
                out.append(token[1:] + "\n")
            elif token in definitions:
                out.append(definitions[token] + "\n")
            else:
                value = numerate_string(token)
                if value == 0 and token[0] != "0":
                    raise M0Error(
                        f"\nUnknown other: {token}\nAborting to prevent problems",
                        "".join(out),
                    )
                if value > 65535 or value < -32768:
                    raise M0Error(_RANGE_MESSAGE, "".join(out))
                out.append(f"{value & 0xFFFF:04X}\n")
        if c is None:
            return "".join(out)


def _read_source(args: list[str]) -> str | None:
    if not args:
        sys.stderr.write(
            "Usage: m0 $FileName\n"
            "Where $FileName is the name of the paper tape of the program being run\n"
        )
        return None
    try:
        with open(args[0], encoding="latin-1", newline="") as handle:
            return handle.read()
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        return None


def main(argv: list[str] | None = None) -> int:
    source = _read_source(sys.argv[1:] if argv is None else argv)
    if source is None:
        return 1
    try:
        sys.stdout.write(expand(source))
    except M0Error as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    sys.stdout.flush()
    return 0


def main_compact(argv: list[str] | None = None) -> int:
    source = _read_source(sys.argv[1:] if argv is None else argv)
    if source is None:
        return 1
    try:
        sys.stdout.write(expand_compact(source))
    except M0Error as exc:
        sys.stdout.write(exc.partial + str(exc))
        sys.stdout.flush()
        return 1
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())