"""UTC datetime helpers.

Record timestamps are timezone-aware UTC everywhere above the store. SQLite
(tests) returns naive values and query strings may omit an offset; both are
normalized with ensure_utc.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Return dt as aware UTC; naive values are taken to already be UTC.

    Used at repository boundaries and for query-string bounds so range
    comparisons never mix naive and aware datetimes.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
