"""Repository layer - data access abstractions and implementations."""

from tradefolio.repositories.protocols import TradeRepository

__all__ = [
    "TradeRepository",
]
