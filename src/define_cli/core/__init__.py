"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O (remote calls go through ``Transport``).
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from define_cli.core.aggregator import aggregate
from define_cli.core.arguments import parse
from define_cli.core.dispatcher import QueryDispatcher
from define_cli.core.emphasis import ResolvedGloss, resolve_emphasis
from define_cli.core.models import (
    AudioClip,
    FetchOutcome,
    FetchStatus,
    LookupRecord,
    LookupResult,
    PronunciationResult,
    RequestDescriptor,
    WordGroup,
)
from define_cli.core.protocols import AudioOutput, Transport

__all__: list[str] = [
    "AudioClip",
    "AudioOutput",
    "FetchOutcome",
    "FetchStatus",
    "LookupRecord",
    "LookupResult",
    "PronunciationResult",
    "QueryDispatcher",
    "RequestDescriptor",
    "ResolvedGloss",
    "Transport",
    "WordGroup",
    "aggregate",
    "parse",
    "resolve_emphasis",
]
