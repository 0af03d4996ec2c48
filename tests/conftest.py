"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from mathlang.lexer import tokenize
from mathlang.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the token list."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str | float]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def pairs(tokens: list[Token]) -> list[tuple[TokenType, str | float]]:
    """Reduce tokens to (type, value) pairs for compact comparisons."""
    return [(t.type, t.value) for t in tokens]
