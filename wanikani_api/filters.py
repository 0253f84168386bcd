"""
Collection filters and their query-string encoding.

Filters are passed as URL parameters. Array values are sent as a single
comma-delimited parameter (``?subject_ids=8,16,64``), timestamps as RFC3339,
tri-state booleans as ``true``/``false`` only when set, and pure flags such as
``immediately_available_for_lessons`` as a bare key with no value.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, List, Optional, Sequence, Tuple
from urllib.parse import quote

from .constants import QUERY_SAFE_CHARS
from .models.common import SubjectType
from .utils.datetime_utils import to_rfc3339

QueryPair = Tuple[str, Optional[str]]


def _join(values: Iterable[Any]) -> str:
    return ",".join(str(value) for value in values)


def _bool(value: bool) -> str:
    return "true" if value else "false"


class Filter:
    """Base class for filter records."""

    def query_pairs(self) -> List[QueryPair]:
        """Return (key, value) pairs in wire order. A value of None marks a bare key."""
        raise NotImplementedError

    def query_string(self) -> str:
        """Encode the filter as a query string without the leading '?'."""
        parts: List[str] = []
        for key, value in self.query_pairs():
            if value is None:
                parts.append(key)
            else:
                parts.append(f"{key}={quote(value, safe=QUERY_SAFE_CHARS)}")
        return "&".join(parts)

    def apply_filters(self, url: str) -> str:
        """Append the filter to url. An empty filter leaves the url untouched."""
        query = self.query_string()
        if not query:
            return url
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}{query}"


class _PairBuilder:
    """Accumulates query pairs, skipping unset values."""

    def __init__(self) -> None:
        self.pairs: List[QueryPair] = []

    def sequence(self, key: str, values: Optional[Sequence[Any]]) -> None:
        if values is not None:
            self.pairs.append((key, _join(values)))

    def timestamp(self, key: str, value: Optional[datetime]) -> None:
        if value is not None:
            self.pairs.append((key, to_rfc3339(value)))

    def boolean(self, key: str, value: Optional[bool]) -> None:
        if value is not None:
            self.pairs.append((key, _bool(value)))

    def flag(self, key: str, value: bool) -> None:
        if value:
            self.pairs.append((key, None))

    def number(self, key: str, value: Optional[int]) -> None:
        if value is not None:
            self.pairs.append((key, str(value)))


@dataclass
class IdFilter(Filter):
    """Filter for voice actors, level progressions and resets."""

    # Only resources where data.id matches one of the values are returned
    ids: Optional[List[int]] = None
    # Only resources updated after this time are returned
    updated_after: Optional[datetime] = None

    def query_pairs(self) -> List[QueryPair]:
        builder = _PairBuilder()
        builder.sequence("ids", self.ids)
        builder.timestamp("updated_after", self.updated_after)
        return builder.pairs


@dataclass
class AssignmentFilter(Filter):
    """
    Filter for the assignments collection.

    burned, hidden, started and unlocked are tri-state: None leaves the
    collection unfiltered, True/False select assignments with or without the
    matching timestamp. The immediately_available_* and in_review fields are
    pure flags and are only sent when True.
    """

    available_after: Optional[datetime] = None
    available_before: Optional[datetime] = None
    burned: Optional[bool] = None
    hidden: Optional[bool] = None
    ids: Optional[List[int]] = None
    immediately_available_for_lessons: bool = False
    immediately_available_for_review: bool = False
    in_review: bool = False
    levels: Optional[List[int]] = None
    srs_stages: Optional[List[int]] = None
    started: Optional[bool] = None
    subject_ids: Optional[List[int]] = None
    subject_types: Optional[List[SubjectType]] = None
    unlocked: Optional[bool] = None
    updated_after: Optional[datetime] = None

    def query_pairs(self) -> List[QueryPair]:
        builder = _PairBuilder()
        builder.timestamp("available_after", self.available_after)
        builder.timestamp("available_before", self.available_before)
        builder.boolean("burned", self.burned)
        builder.boolean("hidden", self.hidden)
        builder.sequence("ids", self.ids)
        builder.flag("immediately_available_for_lessons", self.immediately_available_for_lessons)
        builder.flag("immediately_available_for_review", self.immediately_available_for_review)
        builder.flag("in_review", self.in_review)
        builder.sequence("levels", self.levels)
        builder.sequence("srs_stages", self.srs_stages)
        builder.boolean("started", self.started)
        builder.sequence("subject_ids", self.subject_ids)
        builder.sequence("subject_types", self.subject_types)
        builder.boolean("unlocked", self.unlocked)
        builder.timestamp("updated_after", self.updated_after)
        return builder.pairs


@dataclass
class ReviewStatisticFilter(Filter):
    hidden: Optional[bool] = None
    ids: Optional[List[int]] = None
    percentages_greater_than: Optional[int] = None
    percentages_less_than: Optional[int] = None
    subject_ids: Optional[List[int]] = None
    subject_types: Optional[List[SubjectType]] = None
    updated_after: Optional[datetime] = None

    def query_pairs(self) -> List[QueryPair]:
        builder = _PairBuilder()
        builder.sequence("ids", self.ids)
        builder.sequence("subject_ids", self.subject_ids)
        builder.sequence("subject_types", self.subject_types)
        builder.boolean("hidden", self.hidden)
        builder.timestamp("updated_after", self.updated_after)
        builder.number("percentages_greater_than", self.percentages_greater_than)
        builder.number("percentages_less_than", self.percentages_less_than)
        return builder.pairs


@dataclass
class StudyMaterialFilter(Filter):
    hidden: Optional[bool] = None
    ids: Optional[List[int]] = None
    subject_ids: Optional[List[int]] = None
    subject_types: Optional[List[SubjectType]] = None
    updated_after: Optional[datetime] = None

    def query_pairs(self) -> List[QueryPair]:
        builder = _PairBuilder()
        builder.sequence("ids", self.ids)
        builder.sequence("subject_ids", self.subject_ids)
        builder.sequence("subject_types", self.subject_types)
        builder.boolean("hidden", self.hidden)
        builder.timestamp("updated_after", self.updated_after)
        return builder.pairs


@dataclass
class SubjectFilter(Filter):
    ids: Optional[List[int]] = None
    types: Optional[List[SubjectType]] = None
    slugs: Optional[List[str]] = None
    levels: Optional[List[int]] = None
    # Subjects which are or are not hidden from the user-facing application
    hidden: Optional[bool] = None
    updated_after: Optional[datetime] = None

    def query_pairs(self) -> List[QueryPair]:
        builder = _PairBuilder()
        builder.sequence("ids", self.ids)
        builder.sequence("types", self.types)
        builder.sequence("slugs", self.slugs)
        builder.sequence("levels", self.levels)
        builder.boolean("hidden", self.hidden)
        builder.timestamp("updated_after", self.updated_after)
        return builder.pairs
