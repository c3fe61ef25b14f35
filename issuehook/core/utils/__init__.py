"""
Core utilities module.
"""

from issuehook.core.utils.timezone_utils import (
    format_datetime_iso,
    get_utc_now,
    to_utc,
    utc_now_iso,
)

__all__ = [
    'get_utc_now',
    'to_utc',
    'format_datetime_iso',
    'utc_now_iso',
]
