"""WaniKani API endpoint methods."""

from typing import Any, Optional, Type, TypeVar

from .constants import (
    ASSIGNMENT_PATH,
    ASSIGNMENT_START_SEGMENT,
    LEVEL_PROGRESSION_PATH,
    RESET_PATH,
    REVIEW_STATISTIC_PATH,
    STUDY_MATERIAL_PATH,
    SUBJECT_PATH,
    SUMMARY_PATH,
    USER_PATH,
    VOICE_ACTOR_PATH,
)
from .filters import (
    AssignmentFilter,
    IdFilter,
    ReviewStatisticFilter,
    StudyMaterialFilter,
    SubjectFilter,
)
from .models.assignment import Assignment, AssignmentStart
from .models.common import Collection, Resource, dump_body
from .models.level_progression import LevelProgression
from .models.reset import Reset
from .models.review_statistic import ReviewStatistic
from .models.study_material import CreateStudyMaterial, StudyMaterial, UpdateStudyMaterial
from .models.subject import Subject
from .models.summary import Summary
from .models.user import UpdateUser, User
from .models.voice_actor import VoiceActor

S = TypeVar("S")


def _study_material_body(study_material: Any) -> Any:
    # The API expects study material fields nested under "study_material"
    return {"study_material": dump_body(study_material)}


class EndpointsMixin:
    """
    One method per WaniKani endpoint.

    Methods only build the URL and body; sending, decoding and error
    classification are done by the client's request executor.
    """

    base_url: str

    def _url(self, *segments: Any) -> str:
        return "/".join([self.base_url, *(str(segment) for segment in segments)])

    # Summary and user

    def get_summary(self) -> Summary:
        """Get a summary report of available and upcoming lessons and reviews."""
        return self._request("GET", self._url(SUMMARY_PATH), Summary)

    def get_user_information(self) -> User:
        """Get basic information for the user owning the API key."""
        return self._request("GET", self._url(USER_PATH), User)

    def update_user_information(self, user: UpdateUser) -> User:
        """Update the user's preferences. Only the preferences that are set are sent."""
        return self._request("PUT", self._url(USER_PATH), User, dump_body(user))

    # Voice actors

    def get_voice_actors(self, filters: Optional[IdFilter] = None) -> Collection[VoiceActor]:
        url = (filters or IdFilter()).apply_filters(self._url(VOICE_ACTOR_PATH))
        return self._request("GET", url, Collection[VoiceActor])

    def get_specific_voice_actor(self, id: int) -> Resource[VoiceActor]:
        return self._request("GET", self._url(VOICE_ACTOR_PATH, id), Resource[VoiceActor])

    # Level progressions

    def get_level_progressions(
        self, filters: Optional[IdFilter] = None
    ) -> Collection[LevelProgression]:
        url = (filters or IdFilter()).apply_filters(self._url(LEVEL_PROGRESSION_PATH))
        return self._request("GET", url, Collection[LevelProgression])

    def get_specific_level_progression(self, id: int) -> Resource[LevelProgression]:
        return self._request(
            "GET", self._url(LEVEL_PROGRESSION_PATH, id), Resource[LevelProgression]
        )

    # Resets

    def get_resets(self, filters: Optional[IdFilter] = None) -> Collection[Reset]:
        url = (filters or IdFilter()).apply_filters(self._url(RESET_PATH))
        return self._request("GET", url, Collection[Reset])

    def get_specific_reset(self, id: int) -> Resource[Reset]:
        return self._request("GET", self._url(RESET_PATH, id), Resource[Reset])

    # Review statistics

    def get_review_statistics(
        self, filters: Optional[ReviewStatisticFilter] = None
    ) -> Collection[ReviewStatistic]:
        url = (filters or ReviewStatisticFilter()).apply_filters(self._url(REVIEW_STATISTIC_PATH))
        return self._request("GET", url, Collection[ReviewStatistic])

    def get_specific_review_statistic(self, id: int) -> Resource[ReviewStatistic]:
        return self._request(
            "GET", self._url(REVIEW_STATISTIC_PATH, id), Resource[ReviewStatistic]
        )

    # Study materials

    def get_study_materials(
        self, filters: Optional[StudyMaterialFilter] = None
    ) -> Collection[StudyMaterial]:
        url = (filters or StudyMaterialFilter()).apply_filters(self._url(STUDY_MATERIAL_PATH))
        return self._request("GET", url, Collection[StudyMaterial])

    def get_specific_study_material(self, id: int) -> Resource[StudyMaterial]:
        return self._request("GET", self._url(STUDY_MATERIAL_PATH, id), Resource[StudyMaterial])

    def create_study_material(self, study_material: CreateStudyMaterial) -> Resource[StudyMaterial]:
        """Create study material for a subject. The server allows one per subject."""
        return self._request(
            "POST",
            self._url(STUDY_MATERIAL_PATH),
            Resource[StudyMaterial],
            _study_material_body(study_material),
        )

    def update_study_material(
        self, id: int, study_material: UpdateStudyMaterial
    ) -> Resource[StudyMaterial]:
        """Update the notes and synonyms of existing study material."""
        return self._request(
            "PUT",
            self._url(STUDY_MATERIAL_PATH, id),
            Resource[StudyMaterial],
            _study_material_body(study_material),
        )

    # Subjects

    def get_subjects(self, filters: Optional[SubjectFilter] = None) -> Collection[Subject]:
        url = (filters or SubjectFilter()).apply_filters(self._url(SUBJECT_PATH))
        return self._request("GET", url, Collection[Subject])

    def get_specific_subject(self, id: int, subject_type: Type[S] = Subject) -> Resource[S]:
        """
        Get a single subject.

        By default the payload is decoded as whichever variant it matches.
        Passing a concrete type such as Kanji decodes it as that type only and
        raises DecodeError when the subject is of a different kind.
        """
        return self._request("GET", self._url(SUBJECT_PATH, id), Resource[subject_type])

    # Assignments

    def get_assignments(self, filters: Optional[AssignmentFilter] = None) -> Collection[Assignment]:
        url = (filters or AssignmentFilter()).apply_filters(self._url(ASSIGNMENT_PATH))
        return self._request("GET", url, Collection[Assignment])

    def get_specific_assignment(self, id: int) -> Resource[Assignment]:
        return self._request("GET", self._url(ASSIGNMENT_PATH, id), Resource[Assignment])

    def start_assignment(
        self, id: int, start: Optional[AssignmentStart] = None
    ) -> Resource[Assignment]:
        """
        Mark an assignment as started, moving it from lessons to reviews.

        started_at must not be before the assignment's unlocked_at; the API
        rejects such a request and it surfaces as an APIError.
        """
        body = dump_body(start or AssignmentStart())
        return self._request(
            "PUT",
            self._url(ASSIGNMENT_PATH, id, ASSIGNMENT_START_SEGMENT),
            Resource[Assignment],
            body,
        )
