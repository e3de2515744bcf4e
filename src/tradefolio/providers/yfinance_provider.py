"""Yahoo Finance provider via yfinance."""

from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError

from tradefolio.core.exceptions import QuoteFetchError
from tradefolio.domain.views import RawQuote


# Lazy import so tests can patch before import
def _get_yf():
    import yfinance as yf
    return yf


class YFinanceQuoteProvider:
    """
    Fetches current prices from Yahoo Finance.

    Needs no credential. The blocking yfinance call runs in a worker thread so
    it can be abandoned after ``timeout`` seconds.
    """

    name = "yfinance"

    def __init__(self, timeout: float = 10.0):
        self._timeout = timeout

    @property
    def is_configured(self) -> bool:
        return True

    def fetch_quote(self, symbol: str) -> RawQuote:
        """Fetch the current price for symbol from ticker info."""
        executor = ThreadPoolExecutor(max_workers=1)
        try:
            future = executor.submit(self._fetch_info, symbol)
            info = future.result(timeout=self._timeout)
        except FuturesTimeoutError as e:
            raise QuoteFetchError(symbol, f"timed out after {self._timeout}s") from e
        except Exception as e:
            raise QuoteFetchError(symbol, str(e)) from e
        finally:
            executor.shutdown(wait=False)

        if not isinstance(info, dict):
            raise QuoteFetchError(symbol, "unexpected ticker info")

        # currentPrice preferred, then regularMarketPrice
        price = info.get("currentPrice")
        if price is None:
            price = info.get("regularMarketPrice")
        return RawQuote(symbol=symbol, price=str(price) if price is not None else None)

    @staticmethod
    def _fetch_info(symbol: str):
        yf = _get_yf()
        return yf.Ticker(symbol).info
