"""Portfolio valuation: combine net positions with resolved prices."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from tradefolio.domain.views import Position, PortfolioRow, PortfolioView
from tradefolio.repositories.protocols import TradeRepository
from tradefolio.services.position_aggregator import aggregate
from tradefolio.services.price_resolver import PriceResolver

MARKET_VALUE_QUANTUM = Decimal("0.0001")


def market_value(net_quantity: Decimal, current_price: Optional[Decimal]) -> Optional[Decimal]:
    """
    net_quantity * current_price rounded to 4 places, half away from zero.

    None when the price is unknown.
    """
    if current_price is None:
        return None
    return (net_quantity * current_price).quantize(MARKET_VALUE_QUANTUM, rounding=ROUND_HALF_UP)


def build_view(positions: Iterable[Position], resolver: PriceResolver) -> PortfolioView:
    """
    Price each position and total the portfolio.

    Rows with an unknown price keep market_value None; they contribute zero
    to total_value.
    """
    rows: list[PortfolioRow] = []
    total_value = Decimal("0")

    for position in positions:
        current_price = resolver.resolve_price(position.symbol)
        value = market_value(position.net_quantity, current_price)
        if value is not None:
            total_value += value
        rows.append(
            PortfolioRow(
                symbol=position.symbol,
                net_quantity=position.net_quantity,
                average_price=position.average_price,
                current_price=current_price,
                market_value=value,
            )
        )

    return PortfolioView(positions=rows, total_value=total_value)


class PortfolioService:
    """
    Builds the live portfolio from the ledger.

    Positions are recomputed from every trade on each request; prices come
    from the shared resolver.
    """

    def __init__(
        self,
        trade_repo: TradeRepository,
        price_resolver: PriceResolver,
    ):
        self._trade_repo = trade_repo
        self._resolver = price_resolver

    def get_positions(self) -> list[Position]:
        """Net positions across the whole ledger."""
        return aggregate(self._trade_repo.list_all())

    def get_portfolio(self) -> PortfolioView:
        """Positions valued at current prices. Stale cache entries are dropped first."""
        self._resolver.evict_expired()
        return build_view(self.get_positions(), self._resolver)
