"""Typed models for WaniKani API resources."""

from .common import (
    Collection,
    Gender,
    LessonPresentationOrder,
    Pages,
    Resource,
    ResourceCommon,
    ResourceType,
    SubjectType,
    WanikaniError,
    dump_body,
)
from .assignment import Assignment, AssignmentStart
from .level_progression import LevelProgression
from .reset import Reset
from .review_statistic import ReviewStatistic
from .study_material import CreateStudyMaterial, StudyMaterial, UpdateStudyMaterial
from .subject import (
    AudioMetadata,
    AuxiliaryMeaning,
    CharacterImage,
    ContextSentence,
    KanaVocabulary,
    Kanji,
    KanjiReading,
    KanjiReadingType,
    Meaning,
    MeaningType,
    PngImageMetadata,
    PronunciationAudio,
    Radical,
    Subject,
    SubjectCommon,
    SvgImageMetadata,
    Vocabulary,
    VocabularyReading,
)
from .summary import ReviewLessonSummary, Summary, SummaryData
from .user import (
    Preferences,
    Subscription,
    SubscriptionType,
    UpdatePreferences,
    UpdateUser,
    User,
    UserData,
)
from .voice_actor import VoiceActor

__all__ = [
    'Collection',
    'Gender',
    'LessonPresentationOrder',
    'Pages',
    'Resource',
    'ResourceCommon',
    'ResourceType',
    'SubjectType',
    'WanikaniError',
    'dump_body',
    'Assignment',
    'AssignmentStart',
    'LevelProgression',
    'Reset',
    'ReviewStatistic',
    'CreateStudyMaterial',
    'StudyMaterial',
    'UpdateStudyMaterial',
    'AudioMetadata',
    'AuxiliaryMeaning',
    'CharacterImage',
    'ContextSentence',
    'KanaVocabulary',
    'Kanji',
    'KanjiReading',
    'KanjiReadingType',
    'Meaning',
    'MeaningType',
    'PngImageMetadata',
    'PronunciationAudio',
    'Radical',
    'Subject',
    'SubjectCommon',
    'SvgImageMetadata',
    'Vocabulary',
    'VocabularyReading',
    'ReviewLessonSummary',
    'Summary',
    'SummaryData',
    'Preferences',
    'Subscription',
    'SubscriptionType',
    'UpdatePreferences',
    'UpdateUser',
    'User',
    'UserData',
    'VoiceActor',
]
