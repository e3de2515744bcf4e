"""Pydantic schemas for the portfolio endpoint."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from tradefolio.domain.views import PortfolioRow, PortfolioView


def _to_float(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None


class PortfolioRowResponse(BaseModel):
    """One open position; price fields are null when the price is unknown."""

    symbol: str
    net_quantity: float
    average_price: Optional[float] = None
    current_price: Optional[float] = None
    market_value: Optional[float] = None

    @classmethod
    def from_view(cls, row: PortfolioRow) -> "PortfolioRowResponse":
        return cls(
            symbol=row.symbol,
            net_quantity=float(row.net_quantity),
            average_price=_to_float(row.average_price),
            current_price=_to_float(row.current_price),
            market_value=_to_float(row.market_value),
        )


class PortfolioResponse(BaseModel):
    """Open positions with current prices and the portfolio total."""

    positions: list[PortfolioRowResponse]
    total_value: float

    @classmethod
    def from_view(cls, view: PortfolioView) -> "PortfolioResponse":
        return cls(
            positions=[PortfolioRowResponse.from_view(r) for r in view.positions],
            total_value=float(view.total_value),
        )
