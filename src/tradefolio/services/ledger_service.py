"""Ledger service for trade management."""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from tradefolio.core.exceptions import ValidationError, NotFoundError
from tradefolio.core.symbols import normalize_symbol
from tradefolio.core.timezone import now_utc, to_utc
from tradefolio.domain.models import TradeRecord, TradeType
from tradefolio.repositories.protocols import TradeRepository

logger = logging.getLogger(__name__)

# Quantities and prices are stored as exact decimal text
MAX_DECIMAL_DIGITS = 28


@dataclass
class TradeCreate:
    """Input data for recording a trade."""

    symbol: str
    quantity: Decimal
    price: Decimal
    trade_type: Union[TradeType, str]
    executed_at: Optional[datetime] = None


class LedgerService:
    """
    Service for managing the trade ledger.

    Validates trade input before it is stored; the ledger is the source of
    truth for every portfolio computation.
    """

    def __init__(self, trade_repo: TradeRepository):
        self._trade_repo = trade_repo

    def record_trade(self, data: TradeCreate) -> TradeRecord:
        """
        Validate and store a new trade.

        Symbol and trade type are uppercased; executed_at defaults to now.
        """
        symbol, trade_type = self._validate_trade_create(data)

        trade = TradeRecord(
            trade_id=str(uuid.uuid4()),
            symbol=symbol,
            quantity=data.quantity,
            price=data.price,
            trade_type=trade_type,
            executed_at=to_utc(data.executed_at) if data.executed_at else now_utc(),
        )
        created = self._trade_repo.insert(trade)
        logger.info(
            "Recorded %s %s %s @ %s",
            created.trade_type.value,
            created.quantity,
            created.symbol,
            created.price,
        )
        return created

    def list_trades(self) -> list[TradeRecord]:
        """List all trades, newest first."""
        return self._trade_repo.list_all()

    def get_trade(self, trade_id: str) -> TradeRecord:
        """Get trade by ID."""
        trade = self._trade_repo.get_by_id(trade_id)
        if not trade:
            raise NotFoundError("Trade", trade_id)
        return trade

    def delete_trade(self, trade_id: str) -> None:
        """Delete a trade. Deleting an unknown ID is a no-op."""
        if self._trade_repo.delete(trade_id):
            logger.info("Deleted trade %s", trade_id)

    @staticmethod
    def _validate_trade_create(data: TradeCreate) -> tuple[str, TradeType]:
        """Validate trade input; returns the normalized symbol and type."""
        symbol = normalize_symbol(data.symbol)
        if not symbol:
            raise ValidationError("Trade requires a symbol")

        raw_type = data.trade_type.value if isinstance(data.trade_type, TradeType) else str(data.trade_type)
        try:
            trade_type = TradeType(raw_type.strip().upper())
        except ValueError:
            raise ValidationError(f"Invalid trade type: {data.trade_type}")

        if data.quantity is None or not data.quantity.is_finite() or data.quantity <= 0:
            raise ValidationError(f"{trade_type.value} requires quantity > 0")
        if data.price is None or not data.price.is_finite() or data.price <= 0:
            raise ValidationError(f"{trade_type.value} requires price > 0")
        for field, value in (("quantity", data.quantity), ("price", data.price)):
            if len(value.as_tuple().digits) > MAX_DECIMAL_DIGITS:
                raise ValidationError(
                    f"{field} allows at most {MAX_DECIMAL_DIGITS} significant digits"
                )
        return symbol, trade_type
