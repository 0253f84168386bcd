"""Voice actors used for vocabulary reading pronunciation audio."""

from datetime import datetime

from .common import Gender, WanikaniModel


class VoiceActor(WanikaniModel):
    created_at: datetime
    name: str
    gender: Gender
    description: str
