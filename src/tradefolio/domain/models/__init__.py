"""Domain models package."""

from tradefolio.domain.models.enums import TradeType, QuoteFailure
from tradefolio.domain.models.trade import TradeRecord
from tradefolio.domain.models.price_cache import PriceCacheEntry

__all__ = [
    "TradeType",
    "QuoteFailure",
    "TradeRecord",
    "PriceCacheEntry",
]
