"""httpx-backed implementation of :class:`~define_cli.core.protocols.Transport`.

This module is the **only** place in the codebase that imports ``httpx``.
All httpx exceptions are caught here and re-raised as typed
:class:`~define_cli.exceptions.DefineError` subclasses — nothing raw
escapes the infrastructure boundary.  Error messages never echo the
request URL, which carries the API key in its query string.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from define_cli.exceptions import MalformedResponseError, TransportError

_AUTH_STATUSES: frozenset[int] = frozenset({401, 403})


class HttpxTransport:
    """Concrete :class:`Transport` backed by a synchronous ``httpx.Client``.

    Usage::

        with HttpxTransport() as transport:
            payload = transport.get_json(url, {"api_key": key})

    An existing client may be injected (tests pass one built on
    ``httpx.MockTransport``); it is closed together with the transport.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client: httpx.Client = (
            client if client is not None else httpx.Client(follow_redirects=True)
        )

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *_args: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def get_json(self, url: str, params: Mapping[str, str]) -> Any:
        """GET *url* and decode the JSON body.

        Raises
        ------
        TransportError
            For connection problems, timeouts, and non-2xx statuses.
        MalformedResponseError
            When the body is not valid JSON.
        """
        response = self._send(url, params)
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                "The dictionary service returned a body that is not valid JSON.",
            ) from exc

    def get_bytes(self, url: str) -> bytes:
        """GET *url* and return the raw body."""
        return self._send(url, None).content

    # ------------------------------------------------------------------
    # Exception mapping
    # ------------------------------------------------------------------

    def _send(self, url: str, params: Mapping[str, str] | None) -> httpx.Response:
        try:
            response = self._client.get(url, params=dict(params) if params else None)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            hint = None
            if status in _AUTH_STATUSES:
                hint = "Check the DEFINE_API_KEY value in your config file."
            raise TransportError(
                f"The dictionary service answered HTTP {status} "
                f"({exc.response.reason_phrase}).",
                hint=hint,
            ) from exc
        except httpx.TimeoutException as exc:
            raise TransportError(
                "The dictionary service did not respond in time.",
                hint="Check your network connection and try again.",
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                f"Could not reach the dictionary service: {type(exc).__name__}: {exc}",
            ) from exc
        return response
