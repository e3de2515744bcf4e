"""Position aggregation: reduce the trade ledger into net holdings."""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable

from tradefolio.core.symbols import normalize_symbol
from tradefolio.domain.models import TradeRecord
from tradefolio.domain.views import Position


def aggregate(trades: Iterable[TradeRecord]) -> list[Position]:
    """
    Reduce trades into one Position per symbol.

    - net_quantity: BUY quantities minus SELL quantities
    - average_price: arithmetic mean of price over every trade of the symbol,
      BUY and SELL alike (not a cost basis)
    - symbols whose net quantity is exactly zero are omitted

    Positions are returned sorted by symbol. Recomputed from scratch on
    every call.
    """
    net_quantities: dict[str, Decimal] = defaultdict(lambda: Decimal("0"))
    price_totals: dict[str, Decimal] = defaultdict(lambda: Decimal("0"))
    trade_counts: dict[str, int] = defaultdict(int)

    for trade in trades:
        symbol = normalize_symbol(trade.symbol)
        net_quantities[symbol] += trade.signed_quantity
        price_totals[symbol] += trade.price
        trade_counts[symbol] += 1

    positions: list[Position] = []
    for symbol in sorted(net_quantities):
        net_quantity = net_quantities[symbol]
        if net_quantity == Decimal("0"):
            continue
        count = trade_counts[symbol]
        positions.append(
            Position(
                symbol=symbol,
                net_quantity=net_quantity,
                average_price=price_totals[symbol] / count if count else None,
            )
        )
    return positions
