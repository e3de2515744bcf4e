"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tradefolio.config.settings import get_settings
from tradefolio.config.logging_config import setup_logging
from tradefolio.core.exceptions import AppError, NotFoundError
from tradefolio.providers import build_quote_provider
from tradefolio.repositories.sqlalchemy.database import init_db
from tradefolio.services import PriceCache, PriceResolver
from tradefolio.api.routers import trades_router, portfolio_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    init_db()
    settings = get_settings()
    price_cache = PriceCache(ttl_seconds=settings.price_cache_ttl_seconds)
    provider = build_quote_provider(settings)
    app.state.price_cache = price_cache
    app.state.price_resolver = PriceResolver(provider=provider, cache=price_cache)
    logger.info(
        "Price resolver ready (provider=%s, configured=%s, ttl=%ss)",
        provider.name,
        provider.is_configured,
        settings.price_cache_ttl_seconds,
    )
    yield
    # Shutdown
    price_cache.clear()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Trade ledger with live portfolio valuation",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(trades_router)
app.include_router(portfolio_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    status_code = 404 if isinstance(exc, NotFoundError) else 400
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and answer with a generic 500."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "SERVER_ERROR", "message": "Server error"},
    )


@app.get("/api/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}
