"""Quote provider selection from settings."""

from tradefolio.config.settings import Settings
from tradefolio.core.exceptions import ValidationError
from tradefolio.providers.quote_provider import QuoteProvider
from tradefolio.providers.alpha_vantage_provider import AlphaVantageQuoteProvider
from tradefolio.providers.yfinance_provider import YFinanceQuoteProvider
from tradefolio.providers.stub_provider import StubQuoteProvider


def build_quote_provider(settings: Settings) -> QuoteProvider:
    """Create the provider named by settings.quote_provider."""
    name = settings.quote_provider.strip().lower()
    if name == "alphavantage":
        return AlphaVantageQuoteProvider(
            api_key=settings.alpha_vantage_key,
            timeout=settings.quote_timeout_seconds,
        )
    if name == "yfinance":
        return YFinanceQuoteProvider(timeout=settings.quote_timeout_seconds)
    if name == "stub":
        return StubQuoteProvider()
    raise ValidationError(f"Unknown quote provider: {settings.quote_provider}")
