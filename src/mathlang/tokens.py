"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    STRING = auto()  # "..." with surrounding whitespace trimmed
    NUMBER = auto()  # plain decimal literal, value is a float
    NAME = auto()  # anything that is not one of the others
    SYMBOL = auto()  # ; + = -


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanner token with resolved value and original source text."""

    type: TokenType
    value: str | float
    raw: str
    span: Span


SYMBOLS = frozenset(";+=-")
WHITESPACE = frozenset(" \n")
QUOTE = '"'


def is_symbol(ch: str) -> bool:
    """Return True if ch is one of the recognized symbol characters."""
    return ch in SYMBOLS


def is_whitespace(ch: str) -> bool:
    """Return True if ch separates tokens (space or newline)."""
    return ch in WHITESPACE


def is_breakpoint(ch: str) -> bool:
    """Return True if a name or number run stops before ch."""
    return ch in WHITESPACE or ch in SYMBOLS
