"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so the dispatcher can be driven by fakes in tests.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class Transport(Protocol):
    """Contract for the HTTP capability used by the dispatcher.

    Any object that implements :meth:`get_json` and :meth:`get_bytes`
    with the correct signatures satisfies this protocol structurally.
    """

    def get_json(self, url: str, params: Mapping[str, str]) -> Any:
        """GET *url* with query *params* and return the decoded JSON body.

        Raises
        ------
        TransportError
            On network failure or a non-success HTTP status.
        MalformedResponseError
            When the body is not valid JSON.
        """
        ...  # pragma: no cover

    def get_bytes(self, url: str) -> bytes:
        """GET *url* and return the raw response body.

        Raises
        ------
        TransportError
            On network failure or a non-success HTTP status.
        """
        ...  # pragma: no cover


class AudioOutput(Protocol):
    """Contract for playing a fetched audio clip."""

    def play(self, payload: bytes, *, timeout: float) -> None:
        """Play *payload* and block until playback finishes.

        Implementations must give up after *timeout* seconds rather
        than wait forever.

        Raises
        ------
        PlaybackError
            When no player is available, playback fails, or the
            timeout elapses.
        """
        ...  # pragma: no cover
