"""WaniKani v2 API client package."""

from .client import WKClient
from .errors import APIError, DecodeError, RateLimitError, TransportError, WKClientError
from .filters import (
    AssignmentFilter,
    Filter,
    IdFilter,
    ReviewStatisticFilter,
    StudyMaterialFilter,
    SubjectFilter,
)
from .rate_limit import RateLimiter, RateLimitState

__all__ = [
    'WKClient',
    'WKClientError',
    'TransportError',
    'DecodeError',
    'APIError',
    'RateLimitError',
    'Filter',
    'IdFilter',
    'AssignmentFilter',
    'ReviewStatisticFilter',
    'StudyMaterialFilter',
    'SubjectFilter',
    'RateLimiter',
    'RateLimitState',
]
