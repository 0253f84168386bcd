"""
The user endpoint returns basic information for the user making the API
request, identified by their API key, and lets them update their preferences.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import Field, HttpUrl

from .common import LessonPresentationOrder, ResourceCommon, WanikaniModel


class Preferences(WanikaniModel):
    default_voice_actor_id: int
    extra_study_autoplay_audio: bool
    lessons_autoplay_audio: bool
    lessons_batch_size: int = Field(ge=0)
    lessons_presentation_order: LessonPresentationOrder
    reviews_autoplay_audio: bool
    reviews_display_srs_indicator: bool


class SubscriptionType(str, Enum):
    FREE = "free"
    RECURRING = "recurring"
    LIFETIME = "lifetime"
    UNKNOWN = "unknown"


class Subscription(WanikaniModel):
    active: bool
    max_level_granted: int = Field(ge=0)
    period_ends_at: Optional[datetime] = None
    subscription_type: SubscriptionType = Field(alias="type")


class UserData(WanikaniModel):
    id: UUID
    current_vacation_started_at: Optional[datetime] = None
    level: int = Field(ge=0)
    preferences: Preferences
    profile_url: HttpUrl
    started_at: datetime
    subscription: Subscription
    username: str


class User(ResourceCommon):
    data: UserData


class UpdatePreferences(WanikaniModel):
    """Partial preferences update. Fields left as None are not sent."""

    default_voice_actor_id: Optional[int] = None
    extra_study_autoplay_audio: Optional[bool] = None
    lessons_autoplay_audio: Optional[bool] = None
    lessons_batch_size: Optional[int] = Field(default=None, ge=0)
    lessons_presentation_order: Optional[LessonPresentationOrder] = None
    reviews_autoplay_audio: Optional[bool] = None
    reviews_display_srs_indicator: Optional[bool] = None

    @classmethod
    def from_preferences(cls, preferences: Preferences) -> "UpdatePreferences":
        """Build an update that sets every preference to the given values."""
        return cls(**preferences.model_dump())


class UpdateUser(WanikaniModel):
    preferences: UpdatePreferences = Field(default_factory=UpdatePreferences)
