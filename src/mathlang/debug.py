"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from mathlang.tokens import Token, TokenType


def format_token(token: Token, *, spans: bool = False) -> str:
    """Render one token as ``KIND value``, optionally followed by ``@line:col``."""
    if token.type == TokenType.NUMBER:
        text = f"{token.type.name} {token.value}"
    else:
        text = f"{token.type.name} {token.value!r}"
    if spans:
        start = token.span.start
        text += f" @{start.line}:{start.column}"
    return text


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr, spans: bool = True) -> None:
    """Print a human-readable token listing to *file*."""
    for token in tokens:
        file.write(format_token(token, spans=spans) + "\n")
