"""Raw JSON payload → domain-model decoders.

Every function here is a pure transformation of already-decoded JSON.
Malformed definition entries are skipped with a logged warning instead
of aborting the whole lookup; only a payload of the wrong overall shape
is an error.
"""

from __future__ import annotations

import logging
from typing import Any

from define_cli.core.models import AudioClip, LookupRecord, PronunciationResult
from define_cli.exceptions import MalformedResponseError

logger = logging.getLogger(__name__)

_REQUIRED_TEXT_FIELDS: tuple[str, ...] = ("word", "text")
_OPTIONAL_TEXT_FIELDS: tuple[str, ...] = (
    "partOfSpeech",
    "attributionText",
    "sourceDictionary",
)


def _require_list(payload: Any, what: str) -> list[Any]:
    if not isinstance(payload, list):
        raise MalformedResponseError(
            f"Expected a JSON array from the {what} endpoint, "
            f"got {type(payload).__name__}.",
        )
    return payload


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------

def decode_record(entry: Any) -> LookupRecord:
    """Convert one definitions-array element to a :class:`LookupRecord`.

    Raises
    ------
    MalformedResponseError
        If *entry* is not an object or lacks a string ``word``/``text``,
        or an optional field holds something other than a string.
    """
    if not isinstance(entry, dict):
        raise MalformedResponseError(f"entry is a {type(entry).__name__}, not an object")

    for key in _REQUIRED_TEXT_FIELDS:
        if not isinstance(entry.get(key), str):
            raise MalformedResponseError(f"missing or non-string '{key}'")

    optional: dict[str, str] = {}
    for key in _OPTIONAL_TEXT_FIELDS:
        value = entry.get(key)
        if value is None:
            optional[key] = ""
        elif isinstance(value, str):
            optional[key] = value
        else:
            raise MalformedResponseError(f"non-string '{key}'")

    return LookupRecord(
        headword=entry["word"],
        gloss=entry["text"],
        part_of_speech=optional["partOfSpeech"],
        attribution_text=optional["attributionText"],
        source_dictionary_id=optional["sourceDictionary"],
    )


def decode_definitions(payload: Any) -> list[LookupRecord]:
    """Decode a definitions payload, skipping entries that do not fit.

    Raises
    ------
    MalformedResponseError
        If *payload* is not a JSON array.
    """
    records: list[LookupRecord] = []
    for index, entry in enumerate(_require_list(payload, "definitions")):
        try:
            records.append(decode_record(entry))
        except MalformedResponseError as exc:
            logger.warning("Skipping definition #%d: %s", index, exc)
    return records


# ---------------------------------------------------------------------------
# Enrichment payloads
# ---------------------------------------------------------------------------

def decode_pronunciation(payload: Any) -> PronunciationResult | None:
    """Return the first entry's ``raw`` transcription, or ``None`` if empty.

    Raises
    ------
    MalformedResponseError
        If the payload is not an array or its first entry has no
        string ``raw`` field.
    """
    entries = _require_list(payload, "pronunciations")
    if not entries:
        return None
    first = entries[0]
    raw = first.get("raw") if isinstance(first, dict) else None
    if not isinstance(raw, str):
        raise MalformedResponseError("pronunciation entry has no string 'raw'")
    return PronunciationResult(raw_transcription=raw)


def decode_audio_url(payload: Any) -> str | None:
    """Return the first clip's ``fileUrl``, or ``None`` if there are no clips.

    Raises
    ------
    MalformedResponseError
        If the payload is not an array or its first entry has no
        string ``fileUrl`` field.
    """
    entries = _require_list(payload, "audio")
    if not entries:
        return None
    first = entries[0]
    url = first.get("fileUrl") if isinstance(first, dict) else None
    if not isinstance(url, str) or not url:
        raise MalformedResponseError("audio entry has no 'fileUrl'")
    return url


def build_clip(url: str, payload: bytes) -> AudioClip | None:
    """Wrap a fetched clip, treating an empty body as nothing to play."""
    if not payload:
        return None
    return AudioClip(url=url, payload=payload)
