"""Timezone utilities. All ledger and cache timestamps are UTC."""

from datetime import datetime

import pytz

UTC = pytz.utc


def now_utc() -> datetime:
    """Return current time in UTC."""
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC."""
    if dt.tzinfo is None:
        # SQLite drops tzinfo; stored values are already UTC
        return UTC.localize(dt)
    return dt.astimezone(UTC)
