"""MathLang scanner: produces tokens one at a time from source text."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from mathlang.errors import MalformedInputError
from mathlang.literals import parse_number, trim_string
from mathlang.tokens import (
    QUOTE,
    Position,
    Span,
    Token,
    TokenType,
    is_breakpoint,
    is_symbol,
    is_whitespace,
)


class TokenReader(Protocol):
    """What a parser pulls tokens from.

    ``next()`` returns the next token, or None once the input is exhausted.
    A MalformedInputError from ``next()`` is fatal for the current parse.
    """

    def next(self) -> Token | None: ...


class Scanner:
    """Scan MathLang source text into String, Number, Name and Symbol tokens.

    The scanner holds nothing but the source and a cursor; every call to
    ``next()`` moves the cursor forward past exactly one token.
    """

    def __init__(self, source: str) -> None:
        if source is None:
            raise MalformedInputError("source must not be None", Position(1, 1, 0), "")
        self._source = source
        self._pos = 0
        # Line bookkeeping for positions; only ever moves forward with _pos.
        self._line = 1
        self._line_start = 0
        self._mark = 0

    @property
    def position(self) -> int:
        """Offset of the cursor into the source."""
        return self._pos

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next()
            if token is None:
                return
            yield token

    def next(self) -> Token | None:
        """Return the next token, or None at end of input."""
        self._skip_whitespace()
        if self._pos >= len(self._source):
            return None

        ch = self._source[self._pos]

        if ch == QUOTE:
            return self._scan_string()

        cutoff = self._find_cutoff()

        # '+' is always a symbol, never the sign of a number
        if ch != "+":
            number = parse_number(self._source[self._pos : cutoff])
            if number is not None:
                return self._emit(TokenType.NUMBER, number, cutoff)

        if is_symbol(ch):
            return self._emit(TokenType.SYMBOL, ch, self._pos + 1)

        return self._emit(TokenType.NAME, self._source[self._pos : cutoff], cutoff)

    # ------------------------------------------------------------------
    # Scanning helpers
    # ------------------------------------------------------------------

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._source) and is_whitespace(self._source[self._pos]):
            self._pos += 1

    def _find_cutoff(self) -> int:
        """Index of the first whitespace or symbol after the cursor, else end of source."""
        for idx in range(self._pos + 1, len(self._source)):
            if is_breakpoint(self._source[idx]):
                return idx
        return len(self._source)

    def _scan_string(self) -> Token:
        close = self._source.find(QUOTE, self._pos + 1)
        if close == -1:
            raise self._error("unterminated string literal")
        content = self._source[self._pos + 1 : close]
        return self._emit(TokenType.STRING, trim_string(content), close + 1)

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _position_at(self, offset: int) -> Position:
        # Offsets are requested in non-decreasing order, so only the text
        # since the previous request needs to be searched for newlines.
        newlines = self._source.count("\n", self._mark, offset)
        if newlines:
            self._line += newlines
            self._line_start = self._source.rfind("\n", self._mark, offset) + 1
        self._mark = offset
        return Position(self._line, offset - self._line_start + 1, offset)

    def _emit(self, tt: TokenType, value: str | float, end: int) -> Token:
        start = self._position_at(self._pos)
        raw = self._source[self._pos : end]
        self._pos = end
        return Token(tt, value, raw, Span(start, self._position_at(end)))

    def _error(self, message: str) -> MalformedInputError:
        return MalformedInputError(message, self._position_at(self._pos), self._source)


def tokenize(source: str) -> list[Token]:
    """Convenience function: scan source text and return every token."""
    return list(Scanner(source))
