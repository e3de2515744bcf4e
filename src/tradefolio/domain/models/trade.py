"""Trade record domain model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from tradefolio.domain.models.enums import TradeType


@dataclass(frozen=True)
class TradeRecord:
    """
    Ledger trade entry (source of truth).

    Immutable once created; removed only by explicit deletion.
    - symbol is stored uppercase
    - quantity and price are positive Decimals (fractional shares allowed)
    """

    trade_id: str
    symbol: str
    quantity: Decimal
    price: Decimal
    trade_type: TradeType
    executed_at: datetime

    def __post_init__(self) -> None:
        if isinstance(self.trade_type, str) and not isinstance(self.trade_type, TradeType):
            object.__setattr__(self, "trade_type", TradeType(self.trade_type))

    @property
    def signed_quantity(self) -> Decimal:
        """Quantity with direction applied: positive for BUY, negative for SELL."""
        if self.trade_type == TradeType.BUY:
            return self.quantity
        return -self.quantity
