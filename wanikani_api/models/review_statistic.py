"""
Review statistics summarize the activity recorded in reviews: the number of
correct and incorrect answers for both meaning and reading, current and
maximum streaks of correct answers, and the overall percentage of correct
answers. A review statistic is created when the user has done their first
review on the related subject.
"""

from datetime import datetime

from pydantic import Field

from .common import SubjectType, WanikaniModel


class ReviewStatistic(WanikaniModel):
    created_at: datetime
    hidden: bool
    meaning_correct: int = Field(ge=0)
    meaning_current_streak: int = Field(ge=0)
    meaning_incorrect: int = Field(ge=0)
    meaning_max_streak: int = Field(ge=0)
    percentage_correct: int = Field(ge=0)
    reading_correct: int = Field(ge=0)
    reading_current_streak: int = Field(ge=0)
    reading_incorrect: int = Field(ge=0)
    reading_max_streak: int = Field(ge=0)
    subject_id: int = Field(ge=0)
    subject_type: SubjectType
