"""WaniKani API client for making authenticated requests."""

import logging
from functools import lru_cache
from typing import Any, Iterator, Optional, Type, TypeVar, Union

import requests
from pydantic import HttpUrl, TypeAdapter, ValidationError

from .config import MAX_RATE_LIMIT_RETRIES, REQUEST_TIMEOUT, WANIKANI_API_KEY, WANIKANI_BASE_URL
from .constants import API_REVISION, REVISION_HEADER
from .endpoints import EndpointsMixin
from .errors import APIError, DecodeError, RateLimitError, TransportError, WKClientError
from .models.common import Collection, WanikaniError
from .rate_limit import RateLimiter, parse_reset_header

logger = logging.getLogger(__name__)

R = TypeVar("R")
C = TypeVar("C", bound=Collection)


@lru_cache(maxsize=64)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


class WKClient(EndpointsMixin):
    """
    Client for interacting with the WaniKani v2 API.

    One client may be shared between threads. Its rate limit counters are
    updated from every response and requests wait for the reset time once the
    quota is used up.
    """

    def __init__(
        self,
        token: Optional[str] = WANIKANI_API_KEY,
        base_url: Optional[str] = WANIKANI_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = REQUEST_TIMEOUT,
        max_rate_limit_retries: int = MAX_RATE_LIMIT_RETRIES,
        rate_limiter: Optional[RateLimiter] = None,
    ) -> None:
        """Initialize the WaniKani API client."""
        if not base_url or not token:
            raise ValueError("WaniKani API base URL and token are required")
        if max_rate_limit_retries < 0:
            raise ValueError("max_rate_limit_retries cannot be negative")

        self.base_url = base_url.rstrip('/')
        self.headers = {
            "Authorization": f"Bearer {token}",
            REVISION_HEADER: API_REVISION,
            "Content-Type": "application/json",
        }
        self.session = session or requests.Session()
        self.timeout = timeout
        self.max_rate_limit_retries = max_rate_limit_retries
        self._rate_limiter = rate_limiter or RateLimiter()

    def __repr__(self) -> str:
        return f"WKClient(base_url={self.base_url!r})"

    def get_resource_by_url(self, url: Union[str, HttpUrl], result_type: Type[R]) -> R:
        """
        GET an absolute URL and decode the body as result_type.

        Used to follow pagination links and to refresh a resource through its
        canonical ``url``.
        """
        return self._request("GET", str(url), result_type)

    def iter_pages(self, collection: C) -> Iterator[C]:
        """Yield collection and then every following page until next_url runs out."""
        page = collection
        yield page
        while page.pages.next_url is not None:
            logger.debug("Fetching next page %s", page.pages.next_url)
            page = self.get_resource_by_url(page.pages.next_url, type(page))
            yield page

    def _request(self, method: str, url: str, result_type: Type[R], body: Any = None) -> R:
        """Send a request, retrying rate-limited calls until the retry cap is reached."""
        attempt = 0
        while True:
            try:
                return self._send(method, url, result_type, body)
            except RateLimitError as e:
                if attempt >= self.max_rate_limit_retries:
                    raise
                attempt += 1
                logger.warning(
                    "Rate limited on %s %s, retry %d of %d after %s",
                    method, url, attempt, self.max_rate_limit_retries, e.reset_time.isoformat(),
                )

    def _send(self, method: str, url: str, result_type: Type[R], body: Any = None) -> R:
        self._rate_limiter.acquire()
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method, url, headers=self.headers, json=body, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"WaniKani API request failed: {e}", e) from e

        self._rate_limiter.update(response.headers)
        logger.debug("%s %s -> %s", method, url, response.status_code)

        if response.status_code != 200:
            error = self._handle_error(response)
            if isinstance(error, RateLimitError):
                self._rate_limiter.record_exhausted(error.reset_time)
            raise error

        try:
            return _adapter(result_type).validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(f"Could not decode response from {url}: {e}", e) from e

    def _handle_error(self, response: requests.Response) -> WKClientError:
        """Turn a non-200 response into the matching client error."""
        logger.error("Received status code %s from %s", response.status_code, response.url)
        try:
            error = WanikaniError.model_validate_json(response.content)
        except ValidationError as e:
            return DecodeError(
                f"Could not decode error body for status {response.status_code}: {e}", e
            )

        if response.status_code == 429:
            return RateLimitError(error, parse_reset_header(response.headers))
        return APIError(error, response.status_code)
