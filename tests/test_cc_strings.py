import pytest

from stagezero.cc_strings import (
    collect_regular_string,
    collect_weird_string,
    escape_lookup,
    parse_string,
    weird,
)


def hex_payload(rendered):
    return bytes.fromhex(rendered.strip("'\n"))


@pytest.mark.parametrize(
    "text, expected",
    [("\\t", 9), ("\\n", 10), ("\\v", 11), ("\\f", 12), ("\\r", 13),
     ("\\e", 27), ('\\"', 34), ("\\'", 39), ("\\\\", 92)],
)
def test_simple_escapes(text, expected):
    assert escape_lookup(text) == expected


def test_plain_character():
    assert escape_lookup("q") == ord("q")


def test_hex_escape():
    assert escape_lookup("\\x41") == ord("A")
    assert escape_lookup("\\xff") == 0xFF


def test_unknown_escape_raises():
    with pytest.raises(ValueError):
        escape_lookup("\\q")


def test_bad_hex_escape_raises():
    with pytest.raises(ValueError):
        escape_lookup("\\xZZ")


def test_weird_detection():
    assert weird('"hello world') is False
    assert weird('"a:b') is False
    assert weird('"a\\x01') is True
    assert weird('"a\\rb') is True
    assert weird('"x :y') is True


def test_regular_string():
    assert collect_regular_string('"hello') == '"hello"\n'
    assert collect_regular_string('"a\\nb') == '"a\nb"\n'


def test_weird_string_single_char():
    assert collect_weird_string('"a') == "' 61 00'\n"


def test_weird_string_round_trip():
    rendered = collect_weird_string('"\\x01ab\\n')
    assert rendered.startswith("'")
    assert rendered.endswith(" 00'\n")
    assert hex_payload(rendered) == b"\x01ab\n\x00"


def test_parse_string_dispatch():
    assert parse_string('"plain') == collect_regular_string('"plain')
    odd = parse_string('"\\x02z')
    assert hex_payload(odd) == b"\x02z\x00"