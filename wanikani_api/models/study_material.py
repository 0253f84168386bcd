"""
Study materials store user-specific notes and synonyms for a given subject.
The records are created as soon as the user enters any study information.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import SubjectType, WanikaniModel


class StudyMaterial(WanikaniModel):
    created_at: datetime
    hidden: bool
    meaning_note: Optional[str] = None
    meaning_synonyms: List[str]
    reading_note: Optional[str] = None
    subject_id: int = Field(ge=0)
    subject_type: SubjectType


class CreateStudyMaterial(WanikaniModel):
    """New study material. Only one may exist per subject_id for a user."""

    subject_id: int = Field(ge=0)
    meaning_note: Optional[str] = None
    reading_note: Optional[str] = None
    meaning_synonyms: Optional[List[str]] = None


class UpdateStudyMaterial(WanikaniModel):
    """Fields left unset are not sent, so the server keeps their current values."""

    meaning_note: Optional[str] = None
    reading_note: Optional[str] = None
    meaning_synonyms: Optional[List[str]] = None
