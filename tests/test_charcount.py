from stagezero.charcount import count_characters, main


def test_classification():
    counts = count_characters(b"aB3 \r")
    assert (counts.numbers, counts.uppers, counts.lowers, counts.others) == (1, 1, 1, 1)
    assert counts.unexpected == [13]


def test_every_byte_is_classified_once():
    data = bytes(range(256))
    counts = count_characters(data)
    total = counts.numbers + counts.uppers + counts.lowers + counts.others
    assert total + len(counts.unexpected) == len(data)
    assert counts.numbers == 10
    assert counts.uppers == 26
    assert counts.lowers == 26


def test_empty():
    counts = count_characters(b"")
    assert counts.numbers + counts.uppers + counts.lowers + counts.others == 0
    assert counts.unexpected == []


def test_main_reports(tmp_path, capsys):
    path = tmp_path / "sample"
    path.write_bytes(b"ab\xff")
    assert main([str(path)]) == 0
    err = capsys.readouterr().err
    assert err.startswith("read FF\nReached end of File\n")
    assert "Found 2 lowers\n" in err


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent")]) == 1
    assert "Was unable to open file" in capsys.readouterr().err