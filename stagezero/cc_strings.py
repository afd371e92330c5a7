"""Conversion of C string literals into assembler string forms."""

from __future__ import annotations

from stagezero.textutil import char2hex

_PRINTABLE = frozenset(
    "\t\n !#$%&'()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "[\\]^_`abcdefghijklmnopqrstuvwxyz{|}~"
)
_SIMPLE_ESCAPES = {
    "t": 9,
    "n": 10,
    "v": 11,
    "f": 12,
    "r": 13,
    "e": 27,
    '"': 34,
    "'": 39,
    "\\": 92,
}


def _at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def _hexify(c: str, high: bool) -> int:
    value = char2hex(c) if c else None
    if value is None:
        raise ValueError("Tried to print non-hex number")
    return value << 4 if high else value


def escape_lookup(text: str) -> int:
    """Return the character code at the start of *text*, decoding an escape.

    Raises ValueError for an unknown escape or a bad '\\x' sequence.
    """
    first = _at(text, 0)
    if first != "\\":
        return ord(first) if first else 0
    kind = _at(text, 1)
    if kind == "x":
        return _hexify(_at(text, 2), True) + _hexify(_at(text, 3), False)
    if kind in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[kind]
    raise ValueError(f"Unknown escape recieved: {text} Unable to process")


def weird(string: str) -> bool:
    """Tell whether a literal (opening quote included) needs hex-byte output."""
    i = 1
    while True:
        ch = _at(string, i)
        if not ch:
            return False
        value = ord(ch)
        if ch == "\\":
            value = escape_lookup(string[i:])
            if _at(string, i + 1) == "x":
                i += 2
            i += 1
        decoded = chr(value)
        if decoded not in _PRINTABLE:
            return True
        if decoded in " \t\n\r" and _at(string, i + 1) == ":":
            return True
        i += 1


def collect_regular_string(string: str) -> str:
    """Decode escapes and close the literal with '"' and a newline."""
    out: list[str] = []
    i = 0
    while True:
        if _at(string, i) == "\\":
            out.append(chr(escape_lookup(string[i:])))
            if _at(string, i + 1) == "x":
                i += 2
            i += 2
        else:
            out.append(_at(string, i))
            i += 1
        if not _at(string, i):
            break
    return ("".join(out) + '"\n').split("\0", 1)[0]


def collect_weird_string(string: str) -> str:
    """Render a literal as quoted hex bytes ending in a NUL byte."""
    parts = ["'"]
    i = 0
    while True:
        i += 1
        value = escape_lookup(string[i:])
        parts.append(f" {value & 0xFF:02X}")
        if _at(string, i) == "\\":
            if _at(string, i + 1) == "x":
                i += 2
            i += 1
        if not _at(string, i + 1):
            break
    parts.append(" 00'\n")
    return "".join(parts)


def parse_string(string: str) -> str:
    """Convert a literal to the regular or hex-byte form, whichever fits."""
    if weird(string):
        return collect_weird_string(string)
    return collect_regular_string(string)