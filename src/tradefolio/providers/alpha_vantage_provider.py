"""Alpha Vantage GLOBAL_QUOTE provider."""

import logging
from typing import Optional

import requests

from tradefolio.core.exceptions import QuoteFetchError, QuoteProviderNotConfiguredError
from tradefolio.domain.views import RawQuote

logger = logging.getLogger(__name__)

ALPHA_VANTAGE_URL = "https://www.alphavantage.co/query"


class AlphaVantageQuoteProvider:
    """
    Fetches current prices from the Alpha Vantage GLOBAL_QUOTE endpoint.

    The price is read from ``["Global Quote"]["05. price"]`` and returned as
    unparsed text. Rate-limit notices come back as HTTP 200 without a quote
    block; they yield a RawQuote with no price.
    """

    name = "alphavantage"

    def __init__(
        self,
        api_key: Optional[str],
        timeout: float = 10.0,
        base_url: str = ALPHA_VANTAGE_URL,
        session: Optional[requests.Session] = None,
    ):
        self._api_key = api_key
        self._timeout = timeout
        self._base_url = base_url
        self._session = session or requests.Session()

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def fetch_quote(self, symbol: str) -> RawQuote:
        """Fetch a GLOBAL_QUOTE for symbol."""
        if not self.is_configured:
            raise QuoteProviderNotConfiguredError(self.name)

        params = {
            "function": "GLOBAL_QUOTE",
            "symbol": symbol,
            "apikey": self._api_key,
        }
        try:
            response = self._session.get(self._base_url, params=params, timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise QuoteFetchError(symbol, str(e)) from e
        except ValueError as e:
            raise QuoteFetchError(symbol, f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise QuoteFetchError(symbol, "unexpected payload shape")

        if "Note" in data or "Information" in data:
            logger.warning("Alpha Vantage notice for %s: %s", symbol, data.get("Note") or data.get("Information"))

        quote = data.get("Global Quote") or {}
        price = quote.get("05. price") if isinstance(quote, dict) else None
        return RawQuote(symbol=symbol, price=price or None)
