"""Domain models and fixed vocabularies for define-cli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and no dependencies
on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Fixed vocabularies and defaults
# ---------------------------------------------------------------------------

API_URL: str = "https://api.wordnik.com/v4/word.json"
"""Base URL of the Wordnik word endpoints."""

DEFAULT_DICTIONARY: str = "ahd-5"
"""Dictionary used when none is requested, and for every pronunciation lookup."""

DEFAULT_LIMIT: int = 5

DEFAULT_PRONUNCIATION_FORMAT: str = "ahd-5"

DEFAULT_AUDIO_LIMIT: int = 50
"""Number of candidate clips requested from the audio endpoint."""

PARTS_OF_SPEECH: tuple[str, ...] = (
    "noun",
    "adjective",
    "verb",
    "adverb",
    "interjection",
    "pronoun",
    "preposition",
    "abbreviation",
    "affix",
    "article",
    "auxiliary-verb",
    "conjunction",
    "definite-article",
    "family-name",
    "given-name",
    "idiom",
    "imperative",
    "noun-plural",
    "noun-posessive",
    "past-participle",
    "phrasal-prefix",
    "proper-noun",
    "proper-noun-plural",
    "proper-noun-posessive",
    "suffix",
    "verb-intransitive",
    "verb-transitive",
)
"""Part-of-speech tags accepted by the remote service (spelling is the API's)."""

PRONUNCIATION_FORMATS: tuple[str, ...] = (
    "ahd-5",
    "arpabet",
    "gcide-diacritical",
    "IPA",
)


# ---------------------------------------------------------------------------
# Request descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """Everything a single invocation asks for, built once by the parser."""

    word: str
    """The word to look up (first command-line argument)."""

    dictionaries: tuple[str, ...] = (DEFAULT_DICTIONARY,)
    """Source dictionaries, in the order given, without duplicates."""

    part_of_speech: str | None = None
    limit: int = DEFAULT_LIMIT

    audio: bool = False
    include_related: bool = False
    use_canonical: bool = False
    etymology: bool = False
    examples: bool = False
    hyphenation: bool = False
    thesaurus: bool = False

    frequency: bool = False
    start_year: int | None = None
    end_year: int | None = None
    """Only ever set once :attr:`start_year` is set."""

    pronunciation: bool = False
    pronunciation_format: str = DEFAULT_PRONUNCIATION_FORMAT

    @property
    def year_range(self) -> tuple[int, int | None] | None:
        """``(start, end)`` for frequency queries, or ``None`` when unset."""
        if self.start_year is None:
            return None
        return (self.start_year, self.end_year)


# ---------------------------------------------------------------------------
# Lookup results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LookupRecord:
    """One dictionary entry from the definitions response."""

    headword: str
    gloss: str
    """Definition text; may contain one ``<em>…</em>`` emphasis span."""

    part_of_speech: str
    attribution_text: str
    source_dictionary_id: str


@dataclass(frozen=True, slots=True)
class PronunciationResult:
    """The single pronunciation fetched for the literal input word."""

    raw_transcription: str


@dataclass(frozen=True, slots=True)
class AudioClip:
    """A fetched audio payload together with the URL it came from."""

    url: str
    payload: bytes


@dataclass(frozen=True, slots=True)
class WordGroup:
    """All records sharing one headword, in original response order."""

    headword: str
    records: tuple[LookupRecord, ...]
    pronunciation: PronunciationResult | None = None

    def __len__(self) -> int:
        return len(self.records)


@dataclass(frozen=True, slots=True)
class LookupResult:
    """Everything the dispatcher gathered for one invocation."""

    records: tuple[LookupRecord, ...]
    pronunciation: PronunciationResult | None = None
    audio: AudioClip | None = None


# ---------------------------------------------------------------------------
# Enrichment outcome
# ---------------------------------------------------------------------------

class FetchStatus(Enum):
    """Why an enrichment call did or did not produce a value."""

    OK = "ok"
    EMPTY = "empty"
    TRANSPORT_ERROR = "transport_error"
    DECODE_ERROR = "decode_error"


@dataclass(frozen=True)
class FetchOutcome(Generic[T]):
    """Result of an enrichment call.

    ``value`` is set only when ``status`` is :attr:`FetchStatus.OK`.
    Callers that only care about presence use :attr:`ok`; the status
    kind is kept for logging and tests.
    """

    status: FetchStatus
    value: T | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.OK

    @classmethod
    def success(cls, value: T) -> FetchOutcome[T]:
        return cls(FetchStatus.OK, value)

    @classmethod
    def failure(cls, status: FetchStatus, detail: str | None = None) -> FetchOutcome[T]:
        return cls(status, None, detail)
