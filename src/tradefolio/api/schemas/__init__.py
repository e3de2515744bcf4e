"""Pydantic schemas for API request/response."""

from tradefolio.api.schemas.trade import (
    TradeCreateRequest,
    TradeResponse,
    DeleteTradeResponse,
)
from tradefolio.api.schemas.portfolio import (
    PortfolioRowResponse,
    PortfolioResponse,
)

__all__ = [
    "TradeCreateRequest",
    "TradeResponse",
    "DeleteTradeResponse",
    "PortfolioRowResponse",
    "PortfolioResponse",
]
