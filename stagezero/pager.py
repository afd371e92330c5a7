"""Show a file ten lines at a time, waiting for a key between pages."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Callable
from typing import TextIO

_LINES = re.compile(r"[^\n]*\n|[^\n]+")


def paginate(
    text: str,
    output: TextIO,
    wait: Callable[[], object],
    page_lines: int = 10,
) -> int:
    """Write *text* to *output*, calling *wait* after every *page_lines* newlines.

    Returns how many times *wait* was called.
    """
    if page_lines < 1:
        raise ValueError("page_lines must be at least 1")
    pauses = 0
    remaining = page_lines
    for line in _LINES.findall(text):
        output.write(line)
        if line.endswith("\n"):
            remaining -= 1
            if remaining == 0:
                output.flush()
                wait()
                pauses += 1
                remaining = page_lines
    return pauses


def _getchar() -> str:
    """Read one key from standard input, unbuffered when it is a terminal."""
    stream = sys.stdin
    if not stream.isatty():
        return stream.read(1)
    try:
        import termios
        import tty
    except ImportError:
        return stream.read(1)
    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return os.read(fd, 1).decode("latin-1")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        sys.stderr.write(
            "Usage: pager $FileName\n"
            "Where $FileName is the name of the paper tape of the program being run\n"
        )
        return 1
    try:
        with open(args[0], encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    paginate(text, sys.stdout, _getchar)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())