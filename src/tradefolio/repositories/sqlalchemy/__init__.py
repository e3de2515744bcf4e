"""SQLAlchemy repository implementations."""

from tradefolio.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    reset_database,
    Base,
)
from tradefolio.repositories.sqlalchemy.trade_repo import SqlAlchemyTradeRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyTradeRepository",
]
