"""Count digits, letters and other printable characters in a file."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

_OTHER = frozenset(
    [9, 10, *range(32, 48), *range(58, 65), *range(91, 97), *range(123, 127)]
)


@dataclass
class CharacterCounts:
    numbers: int = 0
    uppers: int = 0
    lowers: int = 0
    others: int = 0
    unexpected: list[int] = field(default_factory=list)


def count_characters(data: bytes) -> CharacterCounts:
    """Classify every byte of *data*."""
    counts = CharacterCounts()
    for byte in data:
        if 48 <= byte <= 57:
            counts.numbers += 1
        elif 65 <= byte <= 90:
            counts.uppers += 1
        elif 97 <= byte <= 122:
            counts.lowers += 1
        elif byte in _OTHER:
            counts.others += 1
        else:
            counts.unexpected.append(byte)
    return counts


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        sys.stderr.write(
            "Usage: charcount $FileName\n"
            "Where $FileName is the name of the file being examined\n"
        )
        return 1
    path = args[0]
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError:
        sys.stderr.write(
            f"Was unable to open file: {path} please verify the file exits\n"
        )
        return 1

    counts = count_characters(data)
    for byte in counts.unexpected:
        sys.stderr.write(f"read {byte:02X}\n")
    sys.stderr.write("Reached end of File\n")
    sys.stderr.write(
        f"Found {counts.numbers} numbers\n"
        f"Found {counts.uppers} uppers\n"
        f"Found {counts.lowers} lowers\n"
        f"Found {counts.others} others\n"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())