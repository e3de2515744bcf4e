"""Pydantic schemas for trade endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tradefolio.domain.models import TradeRecord, TradeType


class TradeCreateRequest(BaseModel):
    """Request schema for recording a trade."""

    model_config = ConfigDict(populate_by_name=True)

    symbol: str = Field(..., min_length=1, max_length=20, description="Instrument symbol")
    quantity: Decimal = Field(
        ..., gt=0, max_digits=28, allow_inf_nan=False, description="Number of shares"
    )
    price: Decimal = Field(
        ..., gt=0, max_digits=28, allow_inf_nan=False, description="Price per share"
    )
    trade_type: TradeType = Field(..., alias="type", description="BUY or SELL")
    executed_at: Optional[datetime] = Field(
        default=None,
        description="Execution time; defaults to now",
    )

    @field_validator("symbol")
    @classmethod
    def uppercase_symbol(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("trade_type", mode="before")
    @classmethod
    def uppercase_type(cls, v: Any) -> Any:
        return v.strip().upper() if isinstance(v, str) else v


class TradeResponse(BaseModel):
    """Response schema for a single trade."""

    model_config = ConfigDict(populate_by_name=True)

    trade_id: str
    symbol: str
    quantity: Decimal
    price: Decimal
    trade_type: TradeType = Field(..., alias="type")
    executed_at: datetime

    @classmethod
    def from_domain(cls, trade: TradeRecord) -> "TradeResponse":
        return cls(
            trade_id=trade.trade_id,
            symbol=trade.symbol,
            quantity=trade.quantity,
            price=trade.price,
            trade_type=trade.trade_type,
            executed_at=trade.executed_at,
        )


class DeleteTradeResponse(BaseModel):
    """Response schema for trade deletion."""

    success: bool = True
