"""Quote payloads and lookup results."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from tradefolio.domain.models.enums import QuoteFailure


@dataclass(frozen=True)
class RawQuote:
    """Quote as returned by a provider: the price is still unparsed text."""

    symbol: str
    price: Optional[str] = None


@dataclass(frozen=True)
class QuoteResult:
    """Outcome of one provider lookup: a price, or the reason there is none."""

    symbol: str
    price: Optional[Decimal] = None
    failure: Optional[QuoteFailure] = None

    @classmethod
    def success(cls, symbol: str, price: Decimal) -> "QuoteResult":
        return cls(symbol=symbol, price=price)

    @classmethod
    def failed(cls, symbol: str, failure: QuoteFailure) -> "QuoteResult":
        return cls(symbol=symbol, failure=failure)

    @property
    def ok(self) -> bool:
        return self.failure is None
