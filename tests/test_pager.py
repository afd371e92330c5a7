import io

import pytest

from stagezero.pager import main, paginate


def _lines(count):
    return "".join(f"line {n}\n" for n in range(count))


def test_output_matches_input():
    text = _lines(25)
    out = io.StringIO()
    paginate(text, out, lambda: None)
    assert out.getvalue() == text


def test_pauses_after_every_ten_lines():
    out = io.StringIO()
    snapshots = []
    pauses = paginate(_lines(25), out, lambda: snapshots.append(out.getvalue()))
    assert pauses == 2
    assert [s.count("\n") for s in snapshots] == [10, 20]
    assert all(s.endswith("\n") for s in snapshots)


def test_exact_page_pauses_once():
    calls = []
    pauses = paginate(_lines(10), io.StringIO(), lambda: calls.append(1))
    assert pauses == 1
    assert len(calls) == 1


def test_custom_page_size():
    pauses = paginate(_lines(9), io.StringIO(), lambda: None, page_lines=3)
    assert pauses == 3


def test_text_without_trailing_newline_is_kept():
    out = io.StringIO()
    pauses = paginate("a\nb", out, lambda: None)
    assert out.getvalue() == "a\nb"
    assert pauses == 0


def test_carriage_returns_do_not_count_as_lines():
    text = "x\r\n" * 10
    out = io.StringIO()
    assert paginate(text, out, lambda: None) == 1
    assert out.getvalue() == text


def test_invalid_page_size():
    with pytest.raises(ValueError):
        paginate("a\n", io.StringIO(), lambda: None, page_lines=0)


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1


def test_main_short_file(tmp_path, capsys):
    path = tmp_path / "short.txt"
    path.write_text(_lines(3))
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == _lines(3)