"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system are timezone-aware UTC.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current UTC datetime with timezone info."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is timezone-aware UTC.

    Naive values (e.g. from a driver that drops tzinfo) are assumed to be UTC.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def isoformat_utc(dt: datetime) -> str:
    """ISO-8601 string with a trailing Z, as stored in activity log JSON and notes."""
    return ensure_utc(dt).isoformat().replace("+00:00", "Z")
