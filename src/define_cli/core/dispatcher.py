"""Core query dispatcher — sequences the remote lookups for one word.

The dispatcher depends on a :class:`~define_cli.core.protocols.Transport`
injected at construction time.  Calls run strictly one after another:

1. **definitions** — mandatory; any failure propagates.
2. **pronunciation** — always issued; failures degrade to "absent".
3. **audio** — only when requested; list lookup then a raw clip fetch,
   failures degrade to "nothing to play".

Guarantees
----------
* No ``print()``, no retries, no parallel requests.
* Only :class:`~define_cli.exceptions.DefineError` subclasses escape,
  and only from the definitions call.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from define_cli.core.decoding import (
    build_clip,
    decode_audio_url,
    decode_definitions,
    decode_pronunciation,
)
from define_cli.core.models import (
    API_URL,
    DEFAULT_AUDIO_LIMIT,
    DEFAULT_DICTIONARY,
    AudioClip,
    FetchOutcome,
    FetchStatus,
    LookupRecord,
    LookupResult,
    PronunciationResult,
    RequestDescriptor,
)
from define_cli.core.protocols import Transport
from define_cli.exceptions import (
    DefineError,
    MalformedResponseError,
    NoDefinitionsError,
    TransportError,
)

logger = logging.getLogger(__name__)


def _flag(value: bool) -> str:
    return "true" if value else "false"


class QueryDispatcher:
    """Issues the definitions, pronunciation and audio calls in order.

    Parameters
    ----------
    transport:
        Any object satisfying the :class:`Transport` protocol.
    api_key:
        Secret sent as ``api_key`` with every service call.
    api_url:
        Base URL of the word endpoints.
    """

    def __init__(
        self,
        transport: Transport,
        api_key: str,
        *,
        api_url: str = API_URL,
        audio_batch_size: int = DEFAULT_AUDIO_LIMIT,
    ) -> None:
        self._transport: Transport = transport
        self._api_key: str = api_key
        self._api_url: str = api_url.rstrip("/")
        self._audio_batch_size: int = audio_batch_size

    def _endpoint(self, word: str, resource: str) -> str:
        return f"{self._api_url}/{quote(word, safe='')}/{resource}"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def dispatch(self, descriptor: RequestDescriptor) -> LookupResult:
        """Run every call *descriptor* asks for and collect the results.

        Raises
        ------
        TransportError, MalformedResponseError, NoDefinitionsError
            From the definitions call only.
        """
        records = self.fetch_definitions(descriptor)
        pronunciation = self.fetch_pronunciation(descriptor)
        audio: FetchOutcome[AudioClip] | None = None
        if descriptor.audio:
            audio = self.fetch_audio(descriptor)

        return LookupResult(
            records=tuple(records),
            pronunciation=pronunciation.value,
            audio=audio.value if audio is not None else None,
        )

    def fetch_definitions(self, descriptor: RequestDescriptor) -> list[LookupRecord]:
        """Fetch and decode the definitions for ``descriptor.word``.

        Raises
        ------
        TransportError
            If the request itself fails.
        MalformedResponseError
            If the body is not a JSON array.
        NoDefinitionsError
            If no usable record remains after decoding.
        """
        params = {
            "api_key": self._api_key,
            "includeRelated": _flag(descriptor.include_related),
            "useCanonical": _flag(descriptor.use_canonical),
            "sourceDictionaries": ",".join(descriptor.dictionaries),
            "limit": str(descriptor.limit),
        }
        payload = self._get_json(descriptor.word, "definitions", params)
        records = decode_definitions(payload)
        if not records:
            raise NoDefinitionsError(
                f"No definitions found for '{descriptor.word}'.",
                hint="Check the spelling, or try other dictionaries with -d.",
            )
        return records

    def fetch_pronunciation(
        self, descriptor: RequestDescriptor,
    ) -> FetchOutcome[PronunciationResult]:
        """Fetch one pronunciation from the default dictionary.

        Independent of the user's dictionary filter.  Never raises.
        """
        params = {
            "api_key": self._api_key,
            "useCanonical": _flag(descriptor.use_canonical),
            "sourceDictionary": DEFAULT_DICTIONARY,
            "typeFormat": descriptor.pronunciation_format,
            "limit": "1",
        }
        try:
            payload = self._get_json(descriptor.word, "pronunciations", params)
            result = decode_pronunciation(payload)
        except TransportError as exc:
            return self._absorb("pronunciation", FetchStatus.TRANSPORT_ERROR, exc)
        except MalformedResponseError as exc:
            return self._absorb("pronunciation", FetchStatus.DECODE_ERROR, exc)

        if result is None:
            return FetchOutcome.failure(FetchStatus.EMPTY)
        return FetchOutcome.success(result)

    def fetch_audio(self, descriptor: RequestDescriptor) -> FetchOutcome[AudioClip]:
        """Look up candidate clips and fetch the bytes of the first one.

        Never raises: an empty list, a bad entry, or a failed request at
        either stage all come back as a non-OK outcome.
        """
        params = {
            "api_key": self._api_key,
            "useCanonical": _flag(descriptor.use_canonical),
            "limit": str(self._audio_batch_size),
        }
        try:
            payload = self._get_json(descriptor.word, "audio", params)
            url = decode_audio_url(payload)
            if url is None:
                return FetchOutcome.failure(FetchStatus.EMPTY)
            clip = build_clip(url, self._get_bytes(url))
        except TransportError as exc:
            return self._absorb("audio", FetchStatus.TRANSPORT_ERROR, exc)
        except MalformedResponseError as exc:
            return self._absorb("audio", FetchStatus.DECODE_ERROR, exc)

        if clip is None:
            return FetchOutcome.failure(FetchStatus.EMPTY)
        return FetchOutcome.success(clip)

    # ------------------------------------------------------------------
    # Transport delegation (safe boundary)
    # ------------------------------------------------------------------

    def _get_json(self, word: str, resource: str, params: dict[str, str]) -> Any:
        """Call the transport and ensure only our exceptions escape."""
        try:
            return self._transport.get_json(self._endpoint(word, resource), params)
        except DefineError:
            raise
        except Exception as exc:
            raise TransportError(f"Unexpected transport error: {exc}") from exc

    def _get_bytes(self, url: str) -> bytes:
        try:
            return self._transport.get_bytes(url)
        except DefineError:
            raise
        except Exception as exc:
            raise TransportError(f"Unexpected transport error: {exc}") from exc

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _absorb(call: str, status: FetchStatus, exc: DefineError) -> FetchOutcome:
        logger.debug("%s lookup absorbed (%s): %s", call, status.value, exc)
        return FetchOutcome.failure(status, str(exc))
