"""Build a program image followed by its argument strings and argv table."""

from __future__ import annotations

import os
import struct
import sys
from collections.abc import Sequence


def _padded_size(arg: bytes) -> int:
    return (len(arg) | 0x3) + 1


def _word(value: int) -> bytes:
    return struct.pack(">I", value & 0xFFFFFFFF)


def build_image(binary: bytes, args: Sequence[str | bytes]) -> bytes:
    """Append NUL-padded *args*, their pointer table, argc and argv to *binary*.

    Each string is padded with NULs to the next multiple of four bytes
    (always at least one NUL). After the strings come big-endian pointers
    to each string, a zero word, argc, the address of the pointer table,
    and two zero words.
    """
    encoded = [a if isinstance(a, bytes) else os.fsencode(a) for a in args]
    out = bytearray(binary)
    addresses = []
    for arg in encoded:
        addresses.append(len(out))
        size = _padded_size(arg)
        out += arg[:size].ljust(size, b"\0")

    table = len(out)
    for address in addresses:
        out += _word(address)
    out += _word(0)
    out += _word(len(encoded))
    out += _word(table)
    out += _word(0)
    out += _word(0)
    return bytes(out)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        sys.stderr.write("Usage: execve_image $Image [arguments...]\n")
        return 1
    image = args[0]
    try:
        with open(image, "rb") as handle:
            binary = handle.read()
    except OSError:
        sys.stderr.write(
            f"Was unable to open input binary: {image}\naborting hard\n"
        )
        return 1
    sys.stdout.buffer.write(build_image(binary, args))
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())