"""
Client-side error taxonomy.

Every failure raised by the client is a WKClientError:

- TransportError: the request could not be completed (connection, TLS,
  timeout), or a body could not be decoded (DecodeError).
- APIError: the API answered with an error status and a readable error body.
- RateLimitError: the API answered 429; carries the time the limit resets.
"""

from datetime import datetime
from typing import Optional

from .models.common import WanikaniError


class WKClientError(Exception):
    """Base exception for WaniKani client errors."""
    pass


class TransportError(WKClientError):
    """The HTTP request itself failed."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class DecodeError(TransportError):
    """A response body did not match the expected type."""
    pass


class APIError(WKClientError):
    """The API returned an error body with a non-success status."""

    def __init__(self, error: WanikaniError, status_code: int):
        self.error = error
        self.status_code = status_code
        super().__init__(f"WaniKani error: {error}")

    @property
    def code(self) -> int:
        return self.error.code

    @property
    def message(self) -> Optional[str]:
        return self.error.error


class RateLimitError(WKClientError):
    """The API refused the request because the rate limit was exceeded."""

    def __init__(self, error: WanikaniError, reset_time: datetime):
        self.error = error
        self.reset_time = reset_time
        super().__init__(f"WaniKani error: {error}. Limit will reset at {reset_time.isoformat()}")
