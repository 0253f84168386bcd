"""Utilities package for helper functions."""

from .datetime_utils import (
    EPOCH,
    get_local_tz,
    ensure_utc,
    parse_timestamp,
    to_rfc3339,
    from_epoch_seconds,
    to_local,
    format_local,
)

__all__ = [
    'EPOCH',
    'get_local_tz',
    'ensure_utc',
    'parse_timestamp',
    'to_rfc3339',
    'from_epoch_seconds',
    'to_local',
    'format_local',
]
