"""
Users can reset their progress back to any level at or below their current
level. Resets record when that happened, the starting level and the target
level.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import WanikaniModel


class Reset(WanikaniModel):
    confirmed_at: Optional[datetime] = None
    created_at: datetime
    original_level: int = Field(ge=0)
    # Always less than or equal to original_level
    target_level: int = Field(ge=0)
