"""View models for portfolio outputs."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Position:
    """Net holding of one symbol derived from the ledger."""

    symbol: str
    net_quantity: Decimal
    average_price: Optional[Decimal] = None


@dataclass(frozen=True)
class PortfolioRow:
    """A position enriched with its current price and market value."""

    symbol: str
    net_quantity: Decimal
    average_price: Optional[Decimal] = None
    current_price: Optional[Decimal] = None
    market_value: Optional[Decimal] = None


@dataclass
class PortfolioView:
    """Live-valued portfolio."""

    positions: list[PortfolioRow] = field(default_factory=list)
    total_value: Decimal = field(default_factory=lambda: Decimal("0"))
