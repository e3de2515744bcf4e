"""Service layer - business logic orchestration."""

from tradefolio.services.ledger_service import LedgerService, TradeCreate
from tradefolio.services.position_aggregator import aggregate
from tradefolio.services.price_resolver import PriceCache, PriceResolver, parse_price
from tradefolio.services.portfolio_service import PortfolioService, build_view, market_value

__all__ = [
    "LedgerService",
    "TradeCreate",
    "aggregate",
    "PriceCache",
    "PriceResolver",
    "parse_price",
    "PortfolioService",
    "build_view",
    "market_value",
]
