"""Concatenate input files into an output file."""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Iterable

_OUTPUT_MODE = 0o600


def concatenate(output: str | os.PathLike, inputs: Iterable[str | os.PathLike]) -> int:
    """Write the contents of *inputs*, in order, to *output*.

    The output is created with mode 0600 if it does not exist and is
    truncated if it does. Returns the number of bytes written.
    """
    try:
        fd = os.open(output, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _OUTPUT_MODE)
    except OSError as exc:
        raise OSError(f"The file: {output} is not a valid output file name") from exc

    written = 0
    with os.fdopen(fd, "wb") as out:
        for path in inputs:
            try:
                source = open(path, "rb")
            except OSError as exc:
                raise OSError(
                    f"The file: {path} is not a valid input file name"
                ) from exc
            with source:
                shutil.copyfileobj(source, out)
                written += source.tell()
    return written


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        sys.stderr.write("catm requires 2 or more arguments\n")
        return 1
    try:
        concatenate(args[0], args[1:])
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())