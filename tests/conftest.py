"""
Pytest configuration and fixtures for trade portfolio tests.

This module provides:
- In-memory SQLite database fixtures
- Factory helpers for trade records
- Deterministic, failing and unconfigured quote providers
- A manually advanced clock for cache TTL tests
- Service and repository fixtures
"""

import threading
import uuid
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from tradefolio.main import app
from tradefolio.api.deps import get_price_resolver
from tradefolio.config.settings import Settings, set_settings, reset_settings
from tradefolio.core.exceptions import QuoteProviderNotConfiguredError
from tradefolio.core.timezone import UTC
from tradefolio.domain.models import TradeRecord, TradeType
from tradefolio.domain.views import RawQuote
from tradefolio.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from tradefolio.repositories.sqlalchemy import orm_models  # noqa: F401
from tradefolio.repositories.sqlalchemy import SqlAlchemyTradeRepository
from tradefolio.services import (
    LedgerService,
    PortfolioService,
    PriceCache,
    PriceResolver,
)


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create an aware UTC datetime."""
    return UTC.localize(datetime(year, month, day, hour, minute, second))


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return utc_datetime(2024, 6, 15, 14, 30, 0)


@pytest.fixture
def clock(fixed_now) -> FakeClock:
    """Manually advanced clock starting at fixed_now."""
    return FakeClock(fixed_now)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Reset settings for clean state
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def trade_repo(test_session) -> SqlAlchemyTradeRepository:
    """Provide test TradeRepository."""
    return SqlAlchemyTradeRepository(test_session)


# =============================================================================
# QUOTE PROVIDER FIXTURES
# =============================================================================


class CountingQuoteProvider:
    """
    Deterministic provider that records every call.

    Symbols missing from ``prices`` come back with no price.
    """

    name = "counting"

    def __init__(self, prices: Optional[dict[str, Optional[str]]] = None):
        self.prices = dict(prices or {})
        self.calls: list[str] = []

    @property
    def is_configured(self) -> bool:
        return True

    def fetch_quote(self, symbol: str) -> RawQuote:
        self.calls.append(symbol)
        return RawQuote(symbol=symbol, price=self.prices.get(symbol))


class FailingQuoteProvider:
    """Provider whose every call raises."""

    name = "failing"

    def __init__(self, error: Optional[Exception] = None):
        self.error = error or ConnectionError("Network unavailable")
        self.calls: list[str] = []

    @property
    def is_configured(self) -> bool:
        return True

    def fetch_quote(self, symbol: str) -> RawQuote:
        self.calls.append(symbol)
        raise self.error


class UnconfiguredQuoteProvider:
    """Provider without a credential; records calls that should never happen."""

    name = "unconfigured"

    def __init__(self):
        self.calls: list[str] = []

    @property
    def is_configured(self) -> bool:
        return False

    def fetch_quote(self, symbol: str) -> RawQuote:
        self.calls.append(symbol)
        raise QuoteProviderNotConfiguredError(self.name)


class BlockingQuoteProvider(CountingQuoteProvider):
    """Counting provider that holds each call until ``release`` is set."""

    def __init__(self, prices: Optional[dict[str, Optional[str]]] = None):
        super().__init__(prices)
        self.started = threading.Event()
        self.release = threading.Event()

    def fetch_quote(self, symbol: str) -> RawQuote:
        self.started.set()
        self.release.wait(timeout=5)
        return super().fetch_quote(symbol)


DEFAULT_PRICES = {
    "AAPL": "185.50",
    "MSFT": "378.25",
    "GOOGL": "142.75",
}


@pytest.fixture
def quote_provider() -> CountingQuoteProvider:
    """Provide a counting provider with fixed prices."""
    return CountingQuoteProvider(DEFAULT_PRICES)


@pytest.fixture
def failing_provider() -> FailingQuoteProvider:
    """Provide a provider that always fails."""
    return FailingQuoteProvider()


@pytest.fixture
def unconfigured_provider() -> UnconfiguredQuoteProvider:
    """Provide a provider with no credential."""
    return UnconfiguredQuoteProvider()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def price_cache() -> PriceCache:
    """Provide an empty price cache with the default 60s TTL."""
    return PriceCache(ttl_seconds=60)


@pytest.fixture
def price_resolver(quote_provider, price_cache, clock) -> PriceResolver:
    """Provide a resolver over the counting provider and fake clock."""
    return PriceResolver(provider=quote_provider, cache=price_cache, clock=clock)


@pytest.fixture
def ledger_service(trade_repo) -> LedgerService:
    """Provide test LedgerService."""
    return LedgerService(trade_repo=trade_repo)


@pytest.fixture
def portfolio_service(trade_repo, price_resolver) -> PortfolioService:
    """Provide test PortfolioService."""
    return PortfolioService(trade_repo=trade_repo, price_resolver=price_resolver)


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


def make_trade(
    symbol: str,
    trade_type: TradeType,
    quantity: str,
    price: str,
    executed_at: Optional[datetime] = None,
) -> TradeRecord:
    """Build an in-memory TradeRecord."""
    return TradeRecord(
        trade_id=str(uuid.uuid4()),
        symbol=symbol,
        quantity=Decimal(quantity),
        price=Decimal(price),
        trade_type=trade_type,
        executed_at=executed_at or utc_datetime(2024, 6, 14),
    )


@pytest.fixture
def trade_factory(trade_repo) -> Callable[..., TradeRecord]:
    """Factory for persisting test trades."""

    def _create_trade(
        symbol: str,
        trade_type: TradeType,
        quantity: str,
        price: str,
        executed_at: Optional[datetime] = None,
    ) -> TradeRecord:
        return trade_repo.insert(make_trade(symbol, trade_type, quantity, price, executed_at))

    return _create_trade


# =============================================================================
# API FIXTURES
# =============================================================================


@pytest.fixture
def client(test_engine, price_resolver) -> TestClient:
    """Provide FastAPI test client with test database and resolver."""
    set_settings(Settings(database_url="sqlite:///:memory:", quote_provider="stub"))
    reset_database()
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_price_resolver] = lambda: price_resolver
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()
