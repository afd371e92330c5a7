import struct

import pytest

from stagezero.execve_image import build_image, main


def _trailer(image, count):
    words = struct.unpack(f">{count + 5}I", image[-4 * (count + 5):])
    return words


def test_no_arguments():
    image = build_image(b"\xAA\xBB", [])
    assert image[:2] == b"\xAA\xBB"
    assert _trailer(image, 0) == (0, 0, 2, 0, 0)


@pytest.mark.parametrize(
    "args",
    [["a"], ["abc"], ["abcd"], ["prog", "one", "twotwo"], [""]],
)
def test_layout(args):
    binary = b"\x01\x02\x03"
    image = build_image(binary, args)
    sizes = [(len(a) | 3) + 1 for a in args]
    table = len(binary) + sum(sizes)
    assert len(image) == table + 4 * (len(args) + 5)
    words = _trailer(image, len(args))
    pointers = words[: len(args)]
    assert words[len(args):] == (0, len(args), table, 0, 0)
    for pointer, arg, size in zip(pointers, args, sizes):
        chunk = image[pointer:pointer + size]
        assert chunk == arg.encode() + b"\0" * (size - len(arg))


def test_four_byte_string_pads_to_eight():
    image = build_image(b"", ["abcd"])
    assert image[:8] == b"abcd\0\0\0\0"


def test_main_writes_image(tmp_path, capsysbinary):
    path = tmp_path / "prog"
    path.write_bytes(b"\x10\x20\x30\x40")
    assert main([str(path), "x"]) == 0
    out = capsysbinary.readouterr().out
    assert out == build_image(b"\x10\x20\x30\x40", [str(path), "x"])


def test_main_missing_image(tmp_path, capsys):
    assert main([str(tmp_path / "absent")]) == 1
    assert "aborting hard" in capsys.readouterr().err