"""View models for service outputs."""

from tradefolio.domain.views.portfolio import (
    Position,
    PortfolioRow,
    PortfolioView,
)
from tradefolio.domain.views.quote import RawQuote, QuoteResult

__all__ = [
    "Position",
    "PortfolioRow",
    "PortfolioView",
    "RawQuote",
    "QuoteResult",
]
