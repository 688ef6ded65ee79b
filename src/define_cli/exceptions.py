"""Custom exception hierarchy for define-cli.

All exceptions that cross layer boundaries must inherit from
:class:`DefineError`.  Raw third-party exceptions (httpx, subprocess,
OS errors) must NEVER propagate beyond the infrastructure layer — they
are caught there and re-raised as a typed subclass defined here.

Hierarchy
---------
DefineError
├── UsageError
├── ConfigError
├── TransportError
├── MalformedResponseError
├── NoDefinitionsError
└── PlaybackError

:class:`HelpRequested` is deliberately *not* a :class:`DefineError`:
asking for help is a successful outcome, not a failure.
"""

from __future__ import annotations


class DefineError(Exception):
    """Base exception for all define-cli errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


class HelpRequested(Exception):
    """Raised by the argument parser when ``-u``/``--usage``/``--help`` is seen."""


# --- Command line ----------------------------------------------------------

class UsageError(DefineError):
    """Raised for malformed, missing, or unrecognised command-line input."""


# --- Configuration ---------------------------------------------------------

class ConfigError(DefineError):
    """Raised when the per-user configuration cannot be used."""


# --- Remote service --------------------------------------------------------

class TransportError(DefineError):
    """Raised when a request fails at the network or HTTP-status level."""


class MalformedResponseError(DefineError):
    """Raised when a successful response has an unexpected shape."""


class NoDefinitionsError(DefineError):
    """Raised when the definitions lookup yields no usable entries."""


# --- Audio -----------------------------------------------------------------

class PlaybackError(DefineError):
    """Raised when an audio clip cannot be played to completion."""
