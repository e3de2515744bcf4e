"""Quote providers module."""

from tradefolio.providers.quote_provider import QuoteProvider
from tradefolio.providers.alpha_vantage_provider import AlphaVantageQuoteProvider
from tradefolio.providers.yfinance_provider import YFinanceQuoteProvider
from tradefolio.providers.stub_provider import StubQuoteProvider
from tradefolio.providers.factory import build_quote_provider

__all__ = [
    "QuoteProvider",
    "AlphaVantageQuoteProvider",
    "YFinanceQuoteProvider",
    "StubQuoteProvider",
    "build_quote_provider",
]
