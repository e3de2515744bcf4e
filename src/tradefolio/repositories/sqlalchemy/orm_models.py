"""SQLAlchemy ORM model definitions."""

from sqlalchemy import (
    Column,
    String,
    DateTime,
    Enum as SqlEnum,
)

from tradefolio.repositories.sqlalchemy.database import Base
from tradefolio.domain.models.enums import TradeType


class TradeORM(Base):
    """SQLAlchemy model for TradeRecord (ledger entry)."""

    __tablename__ = "trades"

    trade_id = Column(String(36), primary_key=True)
    symbol = Column(String(20), nullable=False, index=True)
    # Decimal text, stored verbatim so no precision is lost
    quantity = Column(String(64), nullable=False)
    price = Column(String(64), nullable=False)
    trade_type = Column(SqlEnum(TradeType), nullable=False)
    executed_at = Column(DateTime(timezone=True), nullable=False)
