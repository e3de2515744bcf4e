"""Quote provider protocol."""

from typing import Protocol

from tradefolio.domain.views import RawQuote


class QuoteProvider(Protocol):
    """
    Protocol for current-price providers.

    Implementations fetch one symbol at a time and own their request timeout.
    They raise QuoteFetchError (or any other exception) on failure; callers
    treat every raised error the same way.
    """

    name: str

    @property
    def is_configured(self) -> bool:
        """False when the provider lacks the credential it needs to be called."""
        ...

    def fetch_quote(self, symbol: str) -> RawQuote:
        """
        Fetch the current quote for symbol.

        Raises QuoteProviderNotConfiguredError when is_configured is False.
        """
        ...
