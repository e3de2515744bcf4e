"""Stub quote provider for offline/testing use."""

from decimal import Decimal
from typing import Optional

from tradefolio.domain.views import RawQuote


# Deterministic fake prices for common symbols
_STUB_PRICES: dict[str, Decimal] = {
    "AAPL": Decimal("185.50"),
    "GOOGL": Decimal("142.75"),
    "MSFT": Decimal("378.25"),
    "AMZN": Decimal("178.50"),
    "TSLA": Decimal("248.75"),
    "NVDA": Decimal("485.25"),
    "META": Decimal("505.50"),
    "SPY": Decimal("485.25"),
    "QQQ": Decimal("418.75"),
    "VTI": Decimal("252.30"),
}


class StubQuoteProvider:
    """
    Stub provider with deterministic fake data for offline operation.

    Unknown symbols have no price.
    """

    name = "stub"

    def __init__(self, prices: Optional[dict[str, Decimal]] = None):
        self._prices = dict(_STUB_PRICES if prices is None else prices)

    @property
    def is_configured(self) -> bool:
        return True

    def fetch_quote(self, symbol: str) -> RawQuote:
        """Return the stub price for symbol, if one is known."""
        price = self._prices.get(symbol.upper())
        return RawQuote(symbol=symbol, price=str(price) if price is not None else None)
