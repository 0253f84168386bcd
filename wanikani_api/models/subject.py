"""
Subjects are the radicals, kanji, vocabulary and kana vocabulary that are
learned through lessons and reviews. They contain basic dictionary
information, such as meanings and/or readings, and information about their
relationship to other items within WaniKani, like their level.

Mnemonics and hints may contain WaniKani markup (``<radical>``, ``<kanji>``,
``<vocabulary>``, ``<meaning>``, ``<reading>``); it is passed through as-is.

The ``data`` object of a subject carries no type tag, so :data:`Subject`
picks the variant from the keys that are present. The checks run in a fixed
order:

1. ``character_images`` -> :class:`Radical`
2. ``visually_similar_subject_ids`` -> :class:`Kanji`
3. ``readings`` -> :class:`Vocabulary`
4. ``context_sentences`` -> :class:`KanaVocabulary`

The chosen variant must then validate in full.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, ClassVar, List, Optional, Union

from pydantic import Discriminator, Field, HttpUrl, Tag

from .common import Gender, ResourceType, WanikaniModel


class MeaningType(str, Enum):
    WHITELIST = "whitelist"
    BLACKLIST = "blacklist"


class KanjiReadingType(str, Enum):
    KUNYOMI = "kunyomi"
    NANORI = "nanori"
    ONYOMI = "onyomi"


class Meaning(WanikaniModel):
    meaning: str
    primary: bool
    accepted_answer: bool


class AuxiliaryMeaning(WanikaniModel):
    """Extra meanings accepted (whitelist) or rejected with a hint (blacklist)."""

    meaning: str
    meaning_type: MeaningType = Field(alias="type")


class SubjectCommon(WanikaniModel):
    """Attributes shared by every subject variant."""

    resource_type: ClassVar[Optional[ResourceType]] = None

    auxiliary_meanings: List[AuxiliaryMeaning]
    created_at: datetime
    document_url: HttpUrl
    hidden_at: Optional[datetime] = None
    lesson_position: int = Field(ge=0)
    level: int = Field(ge=0)
    meaning_mnemonic: str
    meanings: List[Meaning]
    slug: str
    spaced_repetition_system_id: int = Field(ge=0)


class SvgImageMetadata(WanikaniModel):
    inline_styles: bool


class PngImageMetadata(WanikaniModel):
    color: str
    dimensions: str
    style_name: str


class CharacterImage(WanikaniModel):
    url: HttpUrl
    content_type: str
    metadata: Union[SvgImageMetadata, PngImageMetadata]


class Radical(SubjectCommon):
    resource_type: ClassVar[Optional[ResourceType]] = ResourceType.RADICAL

    amalgamation_subject_ids: List[int]
    # Some radicals only exist as images
    characters: Optional[str] = None
    character_images: List[CharacterImage]


class KanjiReading(WanikaniModel):
    reading: str
    primary: bool
    accepted_answer: bool
    reading_type: KanjiReadingType = Field(alias="type")


class Kanji(SubjectCommon):
    resource_type: ClassVar[Optional[ResourceType]] = ResourceType.KANJI

    amalgamation_subject_ids: List[int]
    characters: str
    component_subject_ids: List[int]
    meaning_hint: Optional[str] = None
    reading_hint: Optional[str] = None
    reading_mnemonic: str
    readings: List[KanjiReading]
    visually_similar_subject_ids: List[int]


class ContextSentence(WanikaniModel):
    en: str
    ja: str


class AudioMetadata(WanikaniModel):
    gender: Gender
    source_id: int
    pronunciation: str
    voice_actor_id: int
    voice_actor_name: str
    voice_description: str


class PronunciationAudio(WanikaniModel):
    url: HttpUrl
    content_type: str
    metadata: AudioMetadata


class VocabularyReading(WanikaniModel):
    accepted_answer: bool
    primary: bool
    reading: str


class Vocabulary(SubjectCommon):
    resource_type: ClassVar[Optional[ResourceType]] = ResourceType.VOCABULARY

    characters: str
    component_subject_ids: List[int]
    context_sentences: List[ContextSentence]
    parts_of_speech: List[str]
    pronunciation_audios: List[PronunciationAudio]
    readings: List[VocabularyReading]
    reading_mnemonic: str


class KanaVocabulary(SubjectCommon):
    resource_type: ClassVar[Optional[ResourceType]] = ResourceType.KANA_VOCABULARY

    characters: str
    context_sentences: List[ContextSentence]
    parts_of_speech: List[str]
    pronunciation_audios: List[PronunciationAudio]


_SUBJECT_MARKERS = (
    ("character_images", ResourceType.RADICAL),
    ("visually_similar_subject_ids", ResourceType.KANJI),
    ("readings", ResourceType.VOCABULARY),
    ("context_sentences", ResourceType.KANA_VOCABULARY),
)


def subject_discriminator(value: Any) -> Optional[str]:
    """Name the subject variant for a raw ``data`` object or an already-built model."""
    if isinstance(value, SubjectCommon):
        return value.resource_type.value if value.resource_type else None
    if not isinstance(value, dict):
        return None
    for marker, resource_type in _SUBJECT_MARKERS:
        if marker in value:
            return resource_type.value
    return None


Subject = Annotated[
    Union[
        Annotated[Radical, Tag(ResourceType.RADICAL.value)],
        Annotated[Kanji, Tag(ResourceType.KANJI.value)],
        Annotated[Vocabulary, Tag(ResourceType.VOCABULARY.value)],
        Annotated[KanaVocabulary, Tag(ResourceType.KANA_VOCABULARY.value)],
    ],
    Discriminator(subject_discriminator),
]
"""Any one of the four subject payloads."""
