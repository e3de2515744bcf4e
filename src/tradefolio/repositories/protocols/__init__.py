"""Repository protocol definitions (interfaces)."""

from tradefolio.repositories.protocols.trade_repo import TradeRepository

__all__ = [
    "TradeRepository",
]
