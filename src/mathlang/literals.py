"""Literal helpers for numbers and quoted strings."""

from __future__ import annotations

import re

# Optional minus, then digits with an optional fraction, or a bare fraction.
_DECIMAL = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def parse_number(text: str) -> float | None:
    """Return the value of text as a plain decimal literal, or None.

    Only an optional leading ``-``, digits, and a fractional part are
    accepted: ``12``, ``1.5``, ``1.``, ``.5``, ``-3``. Exponents, ``nan``,
    ``inf``, a leading ``+`` and underscores are all rejected.
    """
    if _DECIMAL.fullmatch(text) is None:
        return None
    return float(text)


def trim_string(content: str) -> str:
    """Strip leading and trailing whitespace from quoted string content."""
    return content.strip()
