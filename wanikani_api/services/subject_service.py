"""Subject helpers built on top of the client: full downloads and lesson ordering."""

import logging
import random
from typing import List, Optional, Sequence, TypeVar

from ..client import WKClient
from ..models.common import Collection, LessonPresentationOrder, Resource
from ..models.subject import Subject

logger = logging.getLogger(__name__)

T = TypeVar("T")


def fetch_all(client: WKClient, first_page: Collection[T]) -> List[Resource[T]]:
    """Walk every page starting at first_page and return all resources in order."""
    resources: List[Resource[T]] = []
    for page in client.iter_pages(first_page):
        resources.extend(page.data)
        logger.info(
            "Total of %d resources to download, have %d", page.total_count, len(resources)
        )
    return resources


def sort_subjects(
    subjects: Sequence[Resource[Subject]],
    order: LessonPresentationOrder,
    rng: Optional[random.Random] = None,
) -> List[Resource[Subject]]:
    """
    Order subjects the way lessons are presented for the given preference.

    - ascending_level_then_subject: by level, then lesson_position
    - shuffled: random order
    - ascending_level_then_shuffled: by level, random order within a level
    """
    if order == LessonPresentationOrder.ASCENDING_LEVEL_THEN_SUBJECT:
        return sorted(subjects, key=lambda s: (s.data.level, s.data.lesson_position))

    rng = rng or random.Random()
    shuffled = list(subjects)
    rng.shuffle(shuffled)
    if order == LessonPresentationOrder.SHUFFLED:
        return shuffled
    # sorted() is stable, so the shuffle survives within each level
    return sorted(shuffled, key=lambda s: s.data.level)
