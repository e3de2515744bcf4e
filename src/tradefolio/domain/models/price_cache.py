"""Cache model for resolved market prices."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PriceCacheEntry:
    """
    Last price lookup for one symbol.

    price is None when the lookup failed or the provider is not configured;
    that outcome is cached like any other so the upstream is not retried
    until the entry goes stale.
    """

    symbol: str
    price: Optional[Decimal]
    fetched_at: datetime

    def is_fresh(self, now: datetime, ttl: timedelta) -> bool:
        """Return True while the entry is younger than ttl."""
        return now - self.fetched_at < ttl
