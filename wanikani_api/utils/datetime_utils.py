from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

import os
from zoneinfo import ZoneInfo

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def get_local_tz():
    """
    Resolve the local timezone to use for display.
    Priority:
      1) TIMEZONE env var (IANA tz name like 'Asia/Tokyo')
      2) System local timezone via datetime.now().astimezone().tzinfo
    """
    tz_env = os.getenv("TIMEZONE")
    if tz_env:
        try:
            return ZoneInfo(tz_env)
        except (KeyError, ValueError):
            pass
    return datetime.now().astimezone().tzinfo or timezone.utc


def ensure_utc(dt: datetime) -> datetime:
    """Return dt as an aware UTC datetime. Naive values are assumed to be UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_timestamp(value: str) -> datetime:
    """
    Parse API ISO8601 timestamps into aware UTC datetimes.
    WaniKani returns UTC with 'Z', rounded to the microsecond.
    Example: '2018-03-29T23:13:14.064836Z'.
    """
    if not value:
        raise ValueError("Empty datetime string")
    normalized = value.replace("Z", "+00:00")
    return ensure_utc(datetime.fromisoformat(normalized))


def to_rfc3339(dt: datetime) -> str:
    """
    Format a datetime as RFC3339 for filter query parameters.
    Sub-second precision is kept whenever the value has microseconds.
    """
    return ensure_utc(dt).isoformat()


def from_epoch_seconds(seconds: int) -> datetime:
    """Convert epoch seconds (as sent in rate limit headers) to an aware UTC datetime."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def to_local(dt_or_str: datetime | str) -> datetime:
    """
    Convert a UTC timestamp (datetime or ISO string) to local timezone datetime.
    If a string is provided, it will be parsed via parse_timestamp first.
    """
    if isinstance(dt_or_str, str):
        dt = parse_timestamp(dt_or_str)
    else:
        dt = ensure_utc(dt_or_str)
    return dt.astimezone(get_local_tz())


def format_local(dt_or_str: Optional[datetime | str], fmt: str = "%b %d, %Y, %I:%M %p") -> str:
    """Format a UTC datetime (or ISO string) in the local timezone using fmt."""
    if dt_or_str is None:
        return "never"
    return to_local(dt_or_str).strftime(fmt)
