"""Small helpers for converting between characters, digits and numbers."""

from __future__ import annotations


def _code(c: str | int) -> int:
    return ord(c) if isinstance(c, str) else c


def char2hex(c: str | int) -> int | None:
    """Return the value of a hexadecimal digit, or None if *c* is not one."""
    code = _code(c)
    if ord("0") <= code <= ord("9"):
        return code - ord("0")
    if ord("a") <= code <= ord("f"):
        return code - ord("a") + 10
    if ord("A") <= code <= ord("F"):
        return code - ord("A") + 10
    return None


def hex2char(value: int) -> str | None:
    """Return the upper-case hexadecimal digit for *value*, or None if out of range."""
    if 0 <= value <= 9:
        return chr(ord("0") + value)
    if 10 <= value <= 15:
        return chr(ord("A") + value - 10)
    return None


def char2dec(c: str | int) -> int | None:
    """Return the value of a decimal digit, or None if *c* is not one."""
    code = _code(c)
    if ord("0") <= code <= ord("9"):
        return code - ord("0")
    return None


def dec2char(value: int) -> str | None:
    """Return the decimal digit for *value*, or None if out of range."""
    if 0 <= value <= 9:
        return chr(ord("0") + value)
    return None


def numerate_number(value: int) -> str:
    """Render an integer in decimal, with a leading '-' for negatives."""
    return str(int(value))


def numerate_string(text: str) -> int:
    """Parse a decimal or '0x'-prefixed hexadecimal number.

    A '-' may follow the '0x' prefix or start a decimal number. Any
    character that is not a digit of the base makes the result 0, as
    does an empty string.
    """
    if not text:
        return 0
    if text.startswith("0x"):
        digits, base, convert = text[2:], 16, char2hex
    else:
        digits, base, convert = text, 10, char2dec

    negative = digits.startswith("-")
    if negative:
        digits = digits[1:]

    count = 0
    for ch in digits:
        digit = convert(ch)
        if digit is None:
            return 0
        count = count * base + digit
    return -count if negative else count