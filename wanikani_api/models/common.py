"""
Envelope types shared by every WaniKani response.

Every successful response carries ``object``, ``url`` and
``data_updated_at`` at the top level. Singular resources add an ``id`` and a
``data`` payload; collections add ``pages``, ``total_count`` and a list of
resources as ``data``. The wire format is flat, so the envelopes inherit the
common fields rather than nesting them, and expose them grouped through the
``common`` property.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, model_validator

T = TypeVar("T")


class ResourceType(str, Enum):
    """Object tag present on every response."""

    COLLECTION = "collection"
    REPORT = "report"
    ASSIGNMENT = "assignment"
    KANA_VOCABULARY = "kana_vocabulary"
    KANJI = "kanji"
    LEVEL_PROGRESSION = "level_progression"
    RADICAL = "radical"
    RESET = "reset"
    REVIEW_STATISTIC = "review_statistic"
    STUDY_MATERIAL = "study_material"
    USER = "user"
    VOCABULARY = "vocabulary"
    VOICE_ACTOR = "voice_actor"


class SubjectType(str, Enum):
    """The four kinds of subject, as used in filters and foreign keys."""

    RADICAL = "radical"
    KANJI = "kanji"
    VOCABULARY = "vocabulary"
    KANA_VOCABULARY = "kana_vocabulary"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_resource_type(cls, resource_type: ResourceType) -> "SubjectType":
        """Convert a resource tag to a subject type, raising ValueError for non-subjects."""
        try:
            return cls(ResourceType(resource_type).value)
        except ValueError:
            raise ValueError(f"{resource_type!r} is not a subject type.") from None

    def to_resource_type(self) -> ResourceType:
        return ResourceType(self.value)


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class LessonPresentationOrder(str, Enum):
    """Order in which the user is presented new lessons."""

    ASCENDING_LEVEL_THEN_SUBJECT = "ascending_level_then_subject"
    SHUFFLED = "shuffled"
    ASCENDING_LEVEL_THEN_SHUFFLED = "ascending_level_then_shuffled"


class WanikaniModel(BaseModel):
    """Base for every payload model."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ResourceCommon(WanikaniModel):
    """Fields present on every resource, report and collection."""

    object: ResourceType
    url: HttpUrl
    data_updated_at: Optional[datetime] = None

    @property
    def common(self) -> "ResourceCommon":
        return ResourceCommon(
            object=self.object,
            url=self.url,
            data_updated_at=self.data_updated_at,
        )


class Pages(WanikaniModel):
    """Cursor links of a collection. The first page has no previous URL, the last no next URL."""

    next_url: Optional[HttpUrl] = None
    previous_url: Optional[HttpUrl] = None
    per_page: int = Field(ge=0)


class Resource(ResourceCommon, Generic[T]):
    """A single addressable API entity."""

    id: int = Field(ge=0)
    data: T

    @model_validator(mode="after")
    def _check_object_tag(self) -> "Resource[T]":
        # Concrete subject payloads must arrive under their own tag
        expected = getattr(type(self.data), "resource_type", None)
        if expected is not None and self.object != expected:
            raise ValueError(
                f"object is {self.object.value!r} but {type(self.data).__name__} "
                f"expects {expected.value!r}"
            )
        return self


class Collection(ResourceCommon, Generic[T]):
    """A page of resources plus the total count of the filtered scope."""

    pages: Pages
    total_count: int = Field(ge=0)
    data: List[Resource[T]]


class WanikaniError(WanikaniModel):
    """Error body returned by the API alongside a non-200 status."""

    code: int
    error: Optional[str] = None

    def __str__(self) -> str:
        if self.error is None:
            return f"Error code {self.code} received"
        return self.error


def dump_body(model: BaseModel) -> Any:
    """Serialize a request model to JSON-compatible data, omitting unset optional fields."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)
