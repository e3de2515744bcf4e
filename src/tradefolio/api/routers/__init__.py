"""API routers package."""

from tradefolio.api.routers.trades import router as trades_router
from tradefolio.api.routers.portfolio import router as portfolio_router

__all__ = [
    "trades_router",
    "portfolio_router",
]
