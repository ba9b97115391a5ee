"""
Centralized DateTime Utilities
==============================

All persisted timestamps are timezone-aware UTC (BSON Date). Values shown to
clients are rendered in the timezone configured by LOCAL_TIMEZONE.

Functions:
- utc_now(): timezone-aware UTC datetime for persistence
- ensure_utc(): normalize naive/aware datetimes read back from MongoDB
- now_iso(): ISO 8601 string in the application timezone
- to_iso(): convert a datetime to an ISO 8601 string
"""
import logging
import zoneinfo
from datetime import datetime, timezone as dt_timezone, tzinfo
from typing import Optional

from ..core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().local_timezone

    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Invalid timezone '{tz_str}', falling back to UTC")
        return dt_timezone.utc


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string in the application timezone.
    Naive datetimes are treated as UTC.

    Returns:
        ISO 8601 formatted string ("Z" suffix for UTC), or None if dt is None
    """
    if dt is None:
        return None

    app_tz = _get_app_timezone()
    dt = ensure_utc(dt).astimezone(app_tz)
    if app_tz == dt_timezone.utc:
        return dt.replace(microsecond=0).isoformat().replace("+00:00", "Z")
    return dt.replace(microsecond=0).isoformat()


def now_iso() -> str:
    """Current time as an ISO 8601 string in the application timezone."""
    return to_iso(utc_now())
