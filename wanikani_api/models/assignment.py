"""
Assignments contain information about a user's progress on a particular
subject, including their current state and timestamps for various progress
milestones. Assignments are created when a user has passed all the components
of the given subject and the assignment is at or below their current level
for the first time.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import SubjectType, WanikaniModel


class Assignment(WanikaniModel):
    available_at: Optional[datetime] = None
    burned_at: Optional[datetime] = None
    created_at: datetime
    hidden: bool
    passed_at: Optional[datetime] = None
    resurrected_at: Optional[datetime] = None
    srs_stage: int = Field(ge=0)
    started_at: Optional[datetime] = None
    subject_id: int = Field(ge=0)
    subject_type: SubjectType
    unlocked_at: Optional[datetime] = None


class AssignmentStart(WanikaniModel):
    """
    Body for starting an assignment. When started_at is omitted the server
    uses the current time. It must not be earlier than the assignment's
    unlocked_at; the server rejects the request otherwise.
    """

    started_at: Optional[datetime] = None
