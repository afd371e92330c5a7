"""Tokenizer for the C subset accepted by the bootstrap compiler."""

from __future__ import annotations

import string
from dataclasses import dataclass

_KEYWORD = frozenset(string.ascii_letters + string.digits + "_")
_SYMBOL = frozenset("<=>|&!-")
_QUOTES = "'\""


@dataclass
class Token:
    """One token of C source with where it was found."""

    text: str
    filename: str
    line: int


class _Reader:
    def __init__(self, text: str, filename: str) -> None:
        self._text = text
        self._pos = 0
        self._hold: list[str] = []
        self.filename = filename
        self.line = 1
        self.tokens: list[Token] = []

    def getc(self) -> str | None:
        if self._pos < len(self._text):
            c = self._text[self._pos]
            self._pos += 1
            return c
        return None

    def _consume(self, c: str) -> str | None:
        self._hold.append(c)
        return self.getc()

    def _skip_space(self, c: str | None) -> str | None:
        while c is not None and c in " \t\n":
            if c == "\n":
                self.line += 1
            c = self.getc()
        return c

    def _keyword(self, c: str | None) -> str | None:
        while c is not None and c in _KEYWORD:
            c = self._consume(c)
        if c == ":":
            self._hold.insert(0, ":")
            return " "
        return c

    def _symbol(self, c: str | None) -> str | None:
        while c is not None and c in _SYMBOL:
            c = self._consume(c)
        return c

    def _quoted(self, quote: str) -> str | None:
        escape = False
        c: str | None = quote
        while True:
            escape = (not escape) and c == "\\"
            c = self._consume(c)
            if c is None:
                raise ValueError(
                    f"{self.filename}:{self.line}: unterminated {quote} literal"
                )
            if not escape and c == quote:
                return self.getc()

    def _block_comment(self) -> None:
        c = self.getc()
        while c != "/":
            while c != "*":
                c = self.getc()
                if c is None:
                    raise ValueError(
                        f"{self.filename}:{self.line}: unterminated comment"
                    )
                if c == "\n":
                    self.line += 1
            c = self.getc()
            if c is None:
                raise ValueError(f"{self.filename}:{self.line}: unterminated comment")
            if c == "\n":
                self.line += 1

    def next_token(self, c: str | None) -> str | None:
        """Read one token starting at *c*; return the character after it."""
        while True:
            self._hold = []
            c = self._skip_space(c)
            if c is None:
                return None
            if c == "#":
                while c is not None and c != "\n":
                    c = self.getc()
                continue
            if c in _KEYWORD:
                c = self._keyword(c)
            elif c in _SYMBOL:
                c = self._symbol(c)
            elif c in _QUOTES:
                c = self._quoted(c)
            elif c == "/":
                c = self._consume(c)
                if c == "*":
                    self._block_comment()
                    c = self.getc()
                    continue
                if c == "/":
                    c = self.getc()
                    continue
            else:
                c = self._consume(c)
            self.tokens.append(Token("".join(self._hold), self.filename, self.line))
            return c


def tokenize(text: str, filename: str = "tape_01") -> list[Token]:
    """Split C source into tokens, in source order.

    Lines starting with '#' are dropped, block comments are skipped, and
    a name followed by ':' becomes a ':name' label token. Quoted literals
    keep their opening quote but not their closing one. Raises ValueError
    for an unterminated literal or comment.
    """
    reader = _Reader(text, filename)
    c = reader.getc()
    while c is not None:
        c = reader.next_token(c)
    return reader.tokens