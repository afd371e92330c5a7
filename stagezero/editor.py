"""A tiny line editor driven by single-key commands."""

from __future__ import annotations

import functools
import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from stagezero.pager import _getchar

_MAX_LINE = 255
HELP = (
    "? for help\n"
    "e to edit the line\n"
    "d to delete the line\n"
    "p print line\n"
    "f to move to next line\n"
    "b to move to previous line\n"
    "i to insert a newline before this one\n"
    "a to insert a newline after this one\n"
    "w to write out to file\n"
    "q to quit\n"
)


def _read_line(getc: Callable[[], str]) -> tuple[str, bool]:
    """Read up to 255 characters; a '\\n' or '\\r' ends the line as '\\n'."""
    chars: list[str] = []
    while len(chars) < _MAX_LINE:
        c = getc()
        if not c:
            return "".join(chars), True
        if c in "\n\r":
            chars.append("\n")
            break
        chars.append(c)
    return "".join(chars), False


def load_lines(text: str) -> list[str]:
    """Split *text* into editor lines.

    Each line keeps its newline ('\\r' is turned into '\\n'); lines longer
    than 255 characters are split. The text after the last newline is
    always a final line, possibly empty.
    """
    getc = functools.partial(next, iter(text), "")
    lines = []
    at_end = False
    while not at_end:
        line, at_end = _read_line(getc)
        lines.append(line)
    return lines


class Editor:
    """A buffer of lines with a current position."""

    def __init__(self, lines: Iterable[str | None], file_name: str) -> None:
        self.lines: list[str | None] = list(lines)
        self.file_name = file_name
        self.current = 0

    def text(self) -> str:
        """The buffer as it would be written; blank new lines count as '\\n'."""
        return "".join("\n" if line is None else line for line in self.lines)

    def handle(self, command: str, input_stream: TextIO, output: TextIO) -> bool:
        """Carry out one command; return False when the command is 'q'."""
        if command == "q":
            return False
        if command in ("a", "i"):
            if not self.lines:
                self.lines.append(None)
                self.current = 0
            elif command == "a":
                self.lines.insert(self.current + 1, None)
            else:
                self.lines.insert(self.current, None)
                self.current += 1
        elif command == "b":
            if self.current > 0:
                self.current -= 1
        elif command == "f":
            if self.current + 1 < len(self.lines):
                self.current += 1
        elif command == "d":
            if self.lines:
                del self.lines[self.current]
                self.current = max(0, min(self.current, len(self.lines) - 1))
        elif command == "e":
            if self.lines:
                line, _ = _read_line(functools.partial(input_stream.read, 1))
                self.lines[self.current] = line
        elif command == "p":
            if self.lines:
                output.write(f"Showing contents of line {self.current:04x}:\n")
                output.write(self.lines[self.current] or "")
        elif command == "w":
            with open(self.file_name, "w", encoding="latin-1", newline="") as handle:
                handle.write(self.text())
        else:
            output.write(HELP)
        return True

    def run(self, keys: Iterable[str], input_stream: TextIO, output: TextIO) -> None:
        """Handle each key in turn until 'q' or the keys run out."""
        for key in keys:
            if not self.handle(key, input_stream, output):
                return


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        sys.stderr.write(
            "Usage: editor $FileName\n"
            "Where $FileName is the name of the paper tape of the program being run\n"
        )
        return 1
    file_name = args[0][:_MAX_LINE]
    try:
        with open(file_name, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    editor = Editor(load_lines(text), file_name)
    editor.run(iter(_getchar, ""), sys.stdin, sys.stdout)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())