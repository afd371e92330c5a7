import pytest

from stagezero.m0 import M0Error, expand, expand_compact, main, main_compact


def _check_ascii(body: str, content: str, word_hex: int = 8) -> None:
    encoded = content.encode("latin-1").hex().upper()
    assert body.startswith(encoded)
    padding = body[len(encoded):]
    assert len(padding) >= 2
    assert set(padding) == {"0"}
    assert len(body) % word_hex == 0


def test_define_substitutes_later_uses():
    assert expand("DEFINE ADD 05000\nADD\n") == "\n05000\n"


def test_define_does_not_reach_back():
    assert expand("ADD\nDEFINE ADD 05000\n") == "\nADD\n"


def test_later_define_takes_over():
    assert expand("DEFINE X 01\nX\nDEFINE X 02\nX\n") == "\n01\n02\n"


def test_quoted_define_value_loses_quote():
    assert expand("DEFINE X 'ABCD'\nX\n") == "\nABCD\n"


def test_raw_hex_string_is_copied():
    assert expand("'00 11'\n") == "\n00 11\n"


@pytest.mark.parametrize("content", ["A", "Hi", "Hell", "Hello world"])
def test_ascii_string_is_padded_hex(content):
    body = expand(f'"{content}"\n').strip("\n")
    _check_ascii(body, content)


@pytest.mark.parametrize(
    "word, value", [("12", 12), ("0x1F", 31), ("-1", 0xFFFF), ("010", 8), ("0", 0)]
)
def test_numbers_become_four_hex_digits(word, value):
    body = expand(word + "\n").strip("\n")
    assert len(body) == 4
    assert body == body.lower()
    assert int(body, 16) == value


def test_labels_and_pointers_pass_through():
    assert expand(":main @main &x\n") == "\n:main\n@main\n&x\n"


def test_comments_are_dropped():
    assert expand("# comment ADD\n; other\n:a\n") == "\n:a\n"


def test_define_without_value_raises():
    with pytest.raises(ValueError):
        expand("DEFINE X")


def test_compact_defines_apply_everywhere():
    assert expand_compact("ADD\nDEFINE ADD 05000\n") == "05000\n"


def test_compact_last_define_wins():
    assert expand_compact("DEFINE X 01\nX\nDEFINE X 02\nX\n") == "02\n02\n"


def test_compact_define_value_keeps_quote():
    assert expand_compact("DEFINE X 'AB'\nX\n") == "'AB\n"


def test_compact_raw_hex_string():
    assert expand_compact("'00 11'\n") == "00 11\n"


@pytest.mark.parametrize("content", ["A", "ABC", "Hell", "Hello world"])
def test_compact_ascii_string(content):
    body = expand_compact(f'"{content}"\n').strip("\n")
    _check_ascii(body, content)


@pytest.mark.parametrize(
    "word, value", [("12", 12), ("0x1f", 31), ("-1", 0xFFFF), ("010", 10), ("65535", 0xFFFF)]
)
def test_compact_numbers(word, value):
    body = expand_compact(word + "\n").strip("\n")
    assert body == body.upper()
    assert int(body, 16) == value


def test_compact_sigils_pass_through():
    text = ":a !1 @b $c %d &e\n"
    assert expand_compact(text) == text.replace(" ", "\n")


def test_compact_without_final_newline():
    assert expand_compact(":a") == ":a\n"


@pytest.mark.parametrize("word", ["70000", "-40000"])
def test_compact_number_out_of_range(word):
    with pytest.raises(M0Error, match="number exceeds range"):
        expand_compact(word + "\n")


def test_compact_unknown_word_raises_with_partial_output():
    with pytest.raises(M0Error, match="Unknown other: foo") as info:
        expand_compact(":start\nfoo\n")
    assert info.value.partial == ":start\n"


def test_main_writes_expansion(tmp_path, capsys):
    text = "DEFINE NOP 00000000\n:a\nNOP\n"
    path = tmp_path / "source.s"
    path.write_text(text)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == expand(text)


def test_main_compact_reports_error(tmp_path, capsys):
    path = tmp_path / "source.s"
    path.write_text("bogus\n")
    assert main_compact([str(path)]) == 1
    assert "Unknown other: bogus" in capsys.readouterr().out


def test_main_without_arguments_fails():
    assert main([]) == 1