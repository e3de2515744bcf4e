"""Core utilities and shared functionality."""

from tradefolio.core.timezone import now_utc, to_utc, UTC
from tradefolio.core.symbols import normalize_symbol
from tradefolio.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    QuoteProviderNotConfiguredError,
    QuoteFetchError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "UTC",
    "normalize_symbol",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "QuoteProviderNotConfiguredError",
    "QuoteFetchError",
]
