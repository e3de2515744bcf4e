"""Domain layer - pure business models with no external dependencies."""

from tradefolio.domain.models import (
    TradeRecord,
    TradeType,
    PriceCacheEntry,
)

__all__ = [
    "TradeRecord",
    "TradeType",
    "PriceCacheEntry",
]
