"""
Level progressions contain information about a user's progress through the
WaniKani levels. A level progression is created when a user has met the
prerequisites for leveling up.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import WanikaniModel


class LevelProgression(WanikaniModel):
    # Set when the user abandons the level, mainly through a reset
    abandoned_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    created_at: datetime
    level: int = Field(ge=0)
    passed_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    unlocked_at: Optional[datetime] = None
