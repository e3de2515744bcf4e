"""Instrument symbol helpers."""

from typing import Optional


def normalize_symbol(symbol: Optional[str]) -> str:
    """Strip whitespace and uppercase; None becomes the empty string."""
    if symbol is None:
        return ""
    return symbol.strip().upper()
