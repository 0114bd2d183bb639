"""
Time Utilities

UTC normalization and time calculations.

Functions:
- utc_now(): Current time as an aware UTC datetime
- ensure_utc(dt): Treat naive datetimes as UTC, convert aware ones
- whole_minutes_between(start, end): Elapsed minutes, truncated toward zero
"""

from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def whole_minutes_between(start: datetime, end: datetime) -> int:
    """
    Return the whole minutes from start to end, dropping any remainder.

    Negative spans truncate toward zero as well, so -30s is 0 minutes and
    10m59s is 10 minutes.
    """
    delta = ensure_utc(end) - ensure_utc(start)
    minutes = abs(delta) // timedelta(minutes=1)
    return minutes if delta >= timedelta(0) else -minutes
