"""Dependency injection for FastAPI."""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from tradefolio.repositories.sqlalchemy.database import get_db
from tradefolio.repositories.sqlalchemy import SqlAlchemyTradeRepository
from tradefolio.services import LedgerService, PortfolioService, PriceResolver


def get_trade_repo(db: Session = Depends(get_db)) -> SqlAlchemyTradeRepository:
    """Provide TradeRepository instance."""
    return SqlAlchemyTradeRepository(db)


def get_price_resolver(request: Request) -> PriceResolver:
    """Provide the process-wide PriceResolver built at startup."""
    return request.app.state.price_resolver


def get_ledger_service(
    trade_repo: SqlAlchemyTradeRepository = Depends(get_trade_repo),
) -> LedgerService:
    """Provide LedgerService instance."""
    return LedgerService(trade_repo=trade_repo)


def get_portfolio_service(
    trade_repo: SqlAlchemyTradeRepository = Depends(get_trade_repo),
    price_resolver: PriceResolver = Depends(get_price_resolver),
) -> PortfolioService:
    """Provide PortfolioService instance."""
    return PortfolioService(
        trade_repo=trade_repo,
        price_resolver=price_resolver,
    )
