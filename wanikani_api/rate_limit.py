"""
Client-side throttling driven by the API's rate limit headers.

Every response reports the request quota through ``RateLimit-Limit``,
``RateLimit-Remaining`` and ``RateLimit-Reset`` (epoch seconds). The limiter
keeps the latest values and makes callers wait for the reset once nothing
remains, so a shared client does not run into 429 responses.
"""

import logging
import threading
import time
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Callable, Mapping

from .constants import (
    DEFAULT_RATE_LIMIT,
    RATE_LIMIT_LIMIT_HEADER,
    RATE_LIMIT_REMAINING_HEADER,
    RATE_LIMIT_RESET_HEADER,
    RATE_LIMIT_RESET_PADDING,
)
from .utils.datetime_utils import EPOCH, from_epoch_seconds

logger = logging.getLogger(__name__)


@dataclass
class RateLimitState:
    """Quota for the current rate limit period."""
    limit: int = DEFAULT_RATE_LIMIT
    remaining: int = DEFAULT_RATE_LIMIT
    reset_at: datetime = EPOCH


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_reset_header(headers: Mapping[str, str]) -> datetime:
    """
    Read the Ratelimit-Reset header as an aware UTC datetime.

    A missing or malformed header yields the epoch and a warning; it never
    raises.
    """
    value = headers.get(RATE_LIMIT_RESET_HEADER)
    if value is None:
        logger.warning("%s header not found", RATE_LIMIT_RESET_HEADER)
        return EPOCH
    try:
        return from_epoch_seconds(int(value))
    except (TypeError, ValueError, OverflowError, OSError):
        logger.warning('%s header is not a number, is "%s"', RATE_LIMIT_RESET_HEADER, value)
        return EPOCH


def _parse_count(headers: Mapping[str, str], name: str) -> int:
    value = headers.get(name)
    if value is None:
        logger.warning("%s header not found, assuming %d", name, DEFAULT_RATE_LIMIT)
        return DEFAULT_RATE_LIMIT
    try:
        count = int(value)
    except (TypeError, ValueError):
        logger.warning('%s header is not a number, is "%s"', name, value)
        return DEFAULT_RATE_LIMIT
    return max(count, 0)


class RateLimiter:
    """Shared rate limit counters for one client, safe to use from several threads."""

    def __init__(
        self,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._lock = threading.Lock()
        self._state = RateLimitState()
        self._sleep = sleep
        self._clock = clock

    @property
    def state(self) -> RateLimitState:
        """A snapshot of the current counters."""
        with self._lock:
            return replace(self._state)

    def acquire(self) -> None:
        """Reserve one request, blocking until the reset time if the quota is used up."""
        while True:
            with self._lock:
                now = self._clock()
                if self._state.remaining <= 0 and now >= self._state.reset_at:
                    # The period is over; start a fresh one with the last known limit
                    self._state.remaining = self._state.limit
                if self._state.remaining > 0:
                    self._state.remaining -= 1
                    return
                delay = (self._state.reset_at - now).total_seconds() + RATE_LIMIT_RESET_PADDING

            logger.warning("Rate limit exhausted, waiting %.1f seconds", delay)
            self._sleep(delay)

    def update(self, headers: Mapping[str, str]) -> None:
        """
        Record the counters reported by a response.

        Within the same period the lower of the local and reported remaining
        counts wins, since responses can arrive after later requests were
        already reserved. A new reset time starts a new period and the
        reported values are taken as they are.
        """
        limit = _parse_count(headers, RATE_LIMIT_LIMIT_HEADER)
        remaining = _parse_count(headers, RATE_LIMIT_REMAINING_HEADER)
        reset_at = parse_reset_header(headers)
        with self._lock:
            if reset_at == self._state.reset_at:
                remaining = min(remaining, self._state.remaining)
            self._state = RateLimitState(limit=limit, remaining=remaining, reset_at=reset_at)

    def record_exhausted(self, reset_at: datetime) -> None:
        """Mark the quota as used up until reset_at, as reported by a 429 response."""
        with self._lock:
            self._state.remaining = 0
            self._state.reset_at = reset_at

