"""Summary service layer for formatting lesson and review availability."""

from typing import List

from ..models.summary import Summary
from ..utils.datetime_utils import format_local


def get_formatted_summary(summary: Summary) -> List[str]:
    """Return display lines for the lessons and reviews in a summary report."""
    data = summary.data
    lessons = sum(len(group.subject_ids) for group in data.lessons)
    formatted: List[str] = [f"Lessons available: {lessons}"]

    reviews = [group for group in data.reviews if group.subject_ids]
    if not reviews:
        formatted.append("No reviews in the next 24 hours.")
    for group in reviews:
        formatted.append(
            f"{format_local(group.available_at)} – {len(group.subject_ids)} reviews"
        )

    formatted.append(f"Next reviews: {format_local(data.next_reviews_at)}")
    return formatted
