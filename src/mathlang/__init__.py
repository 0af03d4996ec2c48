"""MathLang expression language scanner."""

from __future__ import annotations

from mathlang.errors import MalformedInputError
from mathlang.lexer import Scanner, TokenReader, tokenize
from mathlang.tokens import Token, TokenType

__version__ = "0.1.0"

__all__ = [
    "MalformedInputError",
    "Scanner",
    "Token",
    "TokenReader",
    "TokenType",
    "tokenize",
]
