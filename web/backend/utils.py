#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

from typing import Optional, Any, List
from datetime import datetime, timezone


def safe_int(value: Optional[Any], default: int = 0) -> int:
    """
    Safely convert value to int.

    Args:
        value: Value to convert.
        default: Default value if conversion fails or value is None.

    Returns:
        Integer value.
    """
    if value is None:
        return default

    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def optional_int(value: Optional[Any]) -> Optional[int]:
    """Like safe_int, but keeps None (and unconvertible values) as None."""
    if value is None:
        return None
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


def safe_str(value: Optional[Any], default: str = "") -> str:
    if value is None:
        return default
    return str(value)


def safe_list(value: Optional[Any]) -> List[str]:
    """Coerce a stored JSON list (or None) into a list of strings."""
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value]


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Safely convert datetime to ISO format string.

    Naive datetimes (SQLite returns these) are stamped as UTC.

    Args:
        dt: Datetime object.

    Returns:
        ISO format string or None.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.isoformat()
