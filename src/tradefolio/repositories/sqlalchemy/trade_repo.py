"""SQLAlchemy implementation of TradeRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from tradefolio.core.timezone import to_utc
from tradefolio.domain.models import TradeRecord
from tradefolio.repositories.sqlalchemy.orm_models import TradeORM


class SqlAlchemyTradeRepository:
    """SQLAlchemy-backed trade repository."""

    def __init__(self, db: Session):
        self._db = db

    def insert(self, trade: TradeRecord) -> TradeRecord:
        """Persist a new trade."""
        orm_trade = self._to_orm(trade)
        self._db.add(orm_trade)
        self._db.commit()
        self._db.refresh(orm_trade)
        return self._to_domain(orm_trade)

    def get_by_id(self, trade_id: str) -> Optional[TradeRecord]:
        """Retrieve trade by ID."""
        orm_trade = self._db.query(TradeORM).filter(
            TradeORM.trade_id == trade_id
        ).first()
        return self._to_domain(orm_trade) if orm_trade else None

    def list_all(self) -> list[TradeRecord]:
        """List all trades, newest first."""
        query = self._db.query(TradeORM).order_by(
            TradeORM.executed_at.desc(),
            TradeORM.trade_id,
        )
        return [self._to_domain(t) for t in query.all()]

    def delete(self, trade_id: str) -> bool:
        """Delete a trade (hard delete). Returns False if nothing was removed."""
        deleted = self._db.query(TradeORM).filter(
            TradeORM.trade_id == trade_id
        ).delete()
        self._db.commit()
        return deleted > 0

    @staticmethod
    def _to_orm(trade: TradeRecord) -> TradeORM:
        """Convert domain model to ORM model."""
        return TradeORM(
            trade_id=trade.trade_id,
            symbol=trade.symbol,
            quantity=str(trade.quantity),
            price=str(trade.price),
            trade_type=trade.trade_type,
            executed_at=trade.executed_at,
        )

    @staticmethod
    def _to_domain(orm: TradeORM) -> TradeRecord:
        """Convert ORM model to domain model."""
        return TradeRecord(
            trade_id=orm.trade_id,
            symbol=orm.symbol,
            quantity=Decimal(orm.quantity),
            price=Decimal(orm.price),
            trade_type=orm.trade_type,
            executed_at=to_utc(orm.executed_at),
        )
