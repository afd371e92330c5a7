"""Counting of executed instruction names."""

from __future__ import annotations

_MAX_NAME = 255


class InstructionTrace:
    """Tallies how often each instruction name was recorded, in first-seen order."""

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def record(self, name: str) -> None:
        """Count one more occurrence of *name*."""
        key = name[:_MAX_NAME]
        self._counts[key] = self._counts.get(key, 0) + 1

    @property
    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def report(self) -> str:
        """Return one 'name<TAB>count' line per recorded name."""
        return "".join(f"{name}\t{count}\n" for name, count in self._counts.items())