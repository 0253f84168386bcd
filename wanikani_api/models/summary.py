"""
The summary report contains currently available lessons and reviews and the
reviews that will become available in the next 24 hours, grouped by the hour.
"""

from datetime import datetime
from typing import List, Optional

from .common import ResourceCommon, WanikaniModel


class ReviewLessonSummary(WanikaniModel):
    """Subjects available for lessons or reviews at a given hour."""

    available_at: datetime
    subject_ids: List[int]


class SummaryData(WanikaniModel):
    lessons: List[ReviewLessonSummary]
    # None when the user has no reviews scheduled
    next_reviews_at: Optional[datetime] = None
    # Available now plus each of the next 24 hours
    reviews: List[ReviewLessonSummary]


class Summary(ResourceCommon):
    data: SummaryData
