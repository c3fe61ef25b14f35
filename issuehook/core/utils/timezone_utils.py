"""
Timezone utilities module.

Provides unified time handling functions for embed timestamps.
Discord renders embed timestamps in the reader's local timezone, so
everything produced here is UTC with an explicit offset.
"""

from datetime import datetime, timezone
from typing import Optional


def get_utc_now() -> datetime:
    """
    Get the current UTC time.

    Returns:
        datetime: Current time with UTC timezone info.
    """
    return datetime.now(timezone.utc)


def to_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Convert a datetime object to UTC time.

    Args:
        dt: The datetime object to convert.

    Returns:
        datetime: UTC time, or None if input is None.
    """
    if dt is None:
        return None

    if dt.tzinfo is not None:
        return dt.astimezone(timezone.utc)

    # Naive datetimes are assumed to already be UTC
    return dt.replace(tzinfo=timezone.utc)


def format_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Format a datetime to ISO 8601 string (with timezone info).

    Args:
        dt: The datetime object to format.

    Returns:
        str: ISO 8601 formatted string, e.g., "2025-11-29T10:30:00+00:00"
             Returns None if input is None.
    """
    if dt is None:
        return None

    return to_utc(dt).isoformat()


def utc_now_iso() -> str:
    """Return the current UTC time as an ISO 8601 string."""
    return format_datetime_iso(get_utc_now())
