import pytest

from stagezero.textutil import (
    char2dec,
    char2hex,
    dec2char,
    hex2char,
    numerate_number,
    numerate_string,
)


def test_numerate_number_zero():
    assert numerate_number(0) == "0"


@pytest.mark.parametrize("value", [1, 7, 10, 99, 1000, 123456789, -1, -4096, -32768])
def test_numerate_round_trip(value):
    assert numerate_string(numerate_number(value)) == value


@pytest.mark.parametrize("value", [0, 1, 255, 4096, 65535])
def test_hex_strings_match_python(value):
    assert numerate_string(f"0x{value:x}") == value
    assert numerate_string(f"0x{value:X}") == value
    assert numerate_string(f"0x-{value:x}") == -value


def test_invalid_text_is_zero():
    assert numerate_string("") == 0
    assert numerate_string("12a") == 0
    assert numerate_string("0xZZ") == 0
    assert numerate_string("0X10") == 0


def test_negative_decimal():
    assert numerate_string("-42") == -int("42")


@pytest.mark.parametrize("value", range(16))
def test_hex_digit_round_trip(value):
    ch = hex2char(value)
    assert char2hex(ch) == value
    assert char2hex(ch.lower()) == value
    assert char2hex(ord(ch)) == value


@pytest.mark.parametrize("value", range(10))
def test_dec_digit_round_trip(value):
    assert char2dec(dec2char(value)) == value


def test_out_of_range_digits():
    assert char2hex("g") is None
    assert char2dec("a") is None
    assert hex2char(16) is None
    assert hex2char(-1) is None
    assert dec2char(10) is None