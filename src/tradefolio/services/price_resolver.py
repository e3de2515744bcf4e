"""Price resolution with a time-bounded cache in front of the quote provider."""

import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Callable, Iterator, Optional

from tradefolio.core.exceptions import QuoteProviderNotConfiguredError, ValidationError
from tradefolio.core.symbols import normalize_symbol
from tradefolio.core.timezone import now_utc
from tradefolio.domain.models import PriceCacheEntry, QuoteFailure
from tradefolio.domain.views import QuoteResult
from tradefolio.providers.quote_provider import QuoteProvider

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60


class PriceCache:
    """
    In-memory price cache keyed by uppercase symbol.

    One entry per symbol, overwritten on every refresh. Built once at service
    start and shared by every resolver call.
    """

    def __init__(self, ttl_seconds: float = DEFAULT_TTL_SECONDS):
        self._ttl = timedelta(seconds=ttl_seconds)
        self._entries: dict[str, PriceCacheEntry] = {}
        self._lock = threading.Lock()

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def get(self, symbol: str) -> Optional[PriceCacheEntry]:
        """Return the entry for symbol regardless of age."""
        with self._lock:
            return self._entries.get(symbol)

    def get_fresh(self, symbol: str, now: datetime) -> Optional[PriceCacheEntry]:
        """Return the entry for symbol only if it is younger than the TTL."""
        entry = self.get(symbol)
        if entry is not None and entry.is_fresh(now, self._ttl):
            return entry
        return None

    def put(self, entry: PriceCacheEntry) -> None:
        """Store entry, replacing any previous entry for the symbol."""
        with self._lock:
            self._entries[entry.symbol] = entry

    def evict_expired(self, now: datetime) -> int:
        """Drop stale entries. Returns the number removed."""
        with self._lock:
            stale = [s for s, e in self._entries.items() if not e.is_fresh(now, self._ttl)]
            for symbol in stale:
                del self._entries[symbol]
        return len(stale)

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class PriceResolver:
    """
    Resolves current prices through a PriceCache.

    A fresh cache entry is returned without touching the provider. Otherwise
    the provider is called exactly once and its outcome, success or failure,
    is cached with fetched_at = now. Failures surface as None, never as an
    exception. Refreshes are serialized per symbol so concurrent lookups of
    the same stale symbol share one provider call; a symbol's lock exists
    only while a lookup for it is in progress.
    """

    def __init__(
        self,
        provider: QuoteProvider,
        cache: PriceCache,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._provider = provider
        self._cache = cache
        self._clock = clock
        self._symbol_locks: dict[str, list] = {}  # symbol -> [lock, users]
        self._locks_guard = threading.Lock()

    @property
    def cache(self) -> PriceCache:
        return self._cache

    def resolve_price(self, symbol: str, now: Optional[datetime] = None) -> Optional[Decimal]:
        """Return the current price for symbol, or None when unknown."""
        key = normalize_symbol(symbol)
        if not key:
            raise ValidationError("Symbol is required to resolve a price")

        with self._symbol_lock(key):
            if now is None:
                now = self._clock()

            entry = self._cache.get_fresh(key, now)
            if entry is not None:
                return entry.price

            result = self._fetch(key)
            self._cache.put(PriceCacheEntry(symbol=key, price=result.price, fetched_at=now))
            return result.price

    def _fetch(self, symbol: str) -> QuoteResult:
        """Call the provider once and classify the outcome."""
        if not self._provider.is_configured:
            logger.debug("Quote provider %s not configured; skipping %s", self._provider.name, symbol)
            return QuoteResult.failed(symbol, QuoteFailure.NOT_CONFIGURED)

        try:
            raw = self._provider.fetch_quote(symbol)
        except QuoteProviderNotConfiguredError:
            return QuoteResult.failed(symbol, QuoteFailure.NOT_CONFIGURED)
        except Exception as e:
            logger.warning("Price fetch error for %s: %s", symbol, e)
            return QuoteResult.failed(symbol, QuoteFailure.FETCH_ERROR)

        price = parse_price(raw.price)
        if price is None:
            logger.warning("No usable price for %s in provider response: %r", symbol, raw.price)
            return QuoteResult.failed(symbol, QuoteFailure.INVALID_PRICE)
        return QuoteResult.success(symbol, price)

    def evict_expired(self, now: Optional[datetime] = None) -> int:
        """Drop stale cache entries. Returns the number removed."""
        removed = self._cache.evict_expired(now if now is not None else self._clock())
        if removed:
            logger.debug("Evicted %d stale price entries", removed)
        return removed

    @contextmanager
    def _symbol_lock(self, symbol: str) -> Iterator[None]:
        """Hold the refresh lock for symbol; the lock is dropped once no caller uses it."""
        with self._locks_guard:
            slot = self._symbol_locks.get(symbol)
            if slot is None:
                slot = self._symbol_locks[symbol] = [threading.Lock(), 0]
            slot[1] += 1
        try:
            with slot[0]:
                yield
        finally:
            with self._locks_guard:
                slot[1] -= 1
                if slot[1] == 0:
                    del self._symbol_locks[symbol]


def parse_price(value: Optional[str]) -> Optional[Decimal]:
    """Parse a provider price string; None unless it is a finite number."""
    if value is None:
        return None
    try:
        price = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not price.is_finite():
        return None
    return price
