"""Enumerations for domain models."""

from enum import Enum


class TradeType(str, Enum):
    """Direction of a ledger trade."""

    BUY = "BUY"
    SELL = "SELL"


class QuoteFailure(str, Enum):
    """Reasons a price lookup produced no price."""

    NOT_CONFIGURED = "NOT_CONFIGURED"  # provider has no credential; network skipped
    FETCH_ERROR = "FETCH_ERROR"  # network, timeout or malformed payload
    INVALID_PRICE = "INVALID_PRICE"  # price field missing or not a finite number
