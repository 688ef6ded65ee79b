"""Command-line argument parsing as an explicit finite-state automaton.

The parser turns a flat token list (``sys.argv[1:]``) into a
:class:`~define_cli.core.models.RequestDescriptor`.  It is pure: it
never prints and never exits.  Failures raise
:class:`~define_cli.exceptions.UsageError`; a help request raises
:class:`~define_cli.exceptions.HelpRequested`.

States
------
* **Idle** — no option is waiting for a value.
* **Collecting(option)** — values are being gathered for ``option``.

Transition table
----------------
==================  ===========  ==========================================
state               token        effect → next state
==================  ===========  ==========================================
Idle                option       toggle: set flag → Idle;
                                 valued / unknown: → Collecting(option)
Idle                value        UsageError
Collecting(opt)     option       variable-arity ``opt``: close, re-read the
                                 same token from Idle; otherwise UsageError
Collecting(opt)     value        consume per ``opt``; → Idle once closed
==================  ===========  ==========================================

Token 0 is always the word and must not look like an option.  At end of
input a pending Collecting state keeps whatever it gathered.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from define_cli.core.models import (
    DEFAULT_DICTIONARY,
    DEFAULT_LIMIT,
    DEFAULT_PRONUNCIATION_FORMAT,
    PARTS_OF_SPEECH,
    PRONUNCIATION_FORMATS,
    RequestDescriptor,
)
from define_cli.exceptions import HelpRequested, UsageError

OPTION_MARKER: str = "-"

_MAX_LIMIT: int = 255
_MAX_YEAR: int = 65535


# ---------------------------------------------------------------------------
# Token classification
# ---------------------------------------------------------------------------

class TokenClass(Enum):
    OPTION = "option"
    VALUE = "value"


def looks_like_option(token: str) -> bool:
    """Return ``True`` when *token* starts with the option marker."""
    return token.startswith(OPTION_MARKER)


def classify(token: str) -> TokenClass:
    return TokenClass.OPTION if looks_like_option(token) else TokenClass.VALUE


def normalize_option(token: str) -> str:
    """Strip leading markers and case-fold: ``--useCanonical`` → ``usecanonical``."""
    return token.lstrip(OPTION_MARKER).lower()


# ---------------------------------------------------------------------------
# Option table
# ---------------------------------------------------------------------------

class Arity(Enum):
    """How many values an option consumes."""

    TOGGLE = "toggle"
    ONE = "one"
    TWO = "two"
    MANY = "many"


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """One recognised option and its aliases (already normalized)."""

    name: str
    aliases: tuple[str, ...]
    arity: Arity
    variadic: bool = False
    """Whether an option-looking token may close collection early."""


OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec("dictionaries", ("d", "dictionary", "dictionaries"), Arity.MANY, variadic=True),
    OptionSpec("part_of_speech", ("s", "partofspeech"), Arity.ONE),
    OptionSpec("limit", ("l", "limit"), Arity.ONE),
    OptionSpec("audio", ("a", "audio"), Arity.TOGGLE),
    OptionSpec("include_related", ("r", "includerelated"), Arity.TOGGLE),
    OptionSpec("use_canonical", ("c", "usecanonical"), Arity.TOGGLE),
    OptionSpec("etymology", ("e", "etymology"), Arity.TOGGLE),
    OptionSpec("examples", ("x", "examples"), Arity.TOGGLE),
    OptionSpec("frequency", ("f", "frequency"), Arity.TWO),
    OptionSpec("hyphenation", ("h", "hyphenation"), Arity.TOGGLE),
    OptionSpec("pronunciation", ("p", "pronunciation"), Arity.ONE, variadic=True),
    OptionSpec("thesaurus", ("t", "thesaurus"), Arity.TOGGLE),
    OptionSpec("help", ("u", "usage", "help"), Arity.TOGGLE),
)

_BY_ALIAS: dict[str, OptionSpec] = {
    alias: spec for spec in OPTIONS for alias in spec.aliases
}


def lookup_option(name: str) -> OptionSpec | None:
    """Return the :class:`OptionSpec` for a normalized option *name*, or ``None``."""
    return _BY_ALIAS.get(name)


# ---------------------------------------------------------------------------
# Parser state
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class State:
    """Automaton state.  ``pending is None`` means Idle."""

    pending: str | None = None
    """Normalized option name being collected (may be unrecognised)."""

    @property
    def idle(self) -> bool:
        return self.pending is None


IDLE = State()


@dataclass(slots=True)
class _Draft:
    """Mutable accumulator; frozen into a descriptor at the end."""

    word: str
    dictionaries: list[str] = field(default_factory=list)
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
    pronunciation: bool = False
    pronunciation_format: str = DEFAULT_PRONUNCIATION_FORMAT

    def build(self) -> RequestDescriptor:
        dictionaries = tuple(dict.fromkeys(self.dictionaries)) or (DEFAULT_DICTIONARY,)
        return RequestDescriptor(
            word=self.word,
            dictionaries=dictionaries,
            part_of_speech=self.part_of_speech,
            limit=self.limit,
            audio=self.audio,
            include_related=self.include_related,
            use_canonical=self.use_canonical,
            etymology=self.etymology,
            examples=self.examples,
            hyphenation=self.hyphenation,
            thesaurus=self.thesaurus,
            frequency=self.frequency,
            start_year=self.start_year,
            end_year=self.end_year,
            pronunciation=self.pronunciation,
            pronunciation_format=self.pronunciation_format,
        )


@dataclass(frozen=True, slots=True)
class Step:
    """Outcome of one transition."""

    state: State
    reread: bool = False
    """Process the same token again from :attr:`state`."""


# ---------------------------------------------------------------------------
# Value consumers — return True once the option is closed
# ---------------------------------------------------------------------------

def _parse_bounded_int(token: str, what: str, upper: int) -> int:
    if not (token.isascii() and token.isdigit()):
        raise UsageError(f"{what} must be a non-negative integer, got '{token}'")
    value = int(token)
    if value > upper:
        raise UsageError(f"{what} must be at most {upper}, got {value}")
    return value


def _consume_dictionary(draft: _Draft, token: str) -> bool:
    draft.dictionaries.append(token)
    return False


def _consume_limit(draft: _Draft, token: str) -> bool:
    draft.limit = _parse_bounded_int(token, "limit", _MAX_LIMIT)
    return True


def _consume_year(draft: _Draft, token: str) -> bool:
    if draft.start_year is None:
        draft.start_year = _parse_bounded_int(token, "start year", _MAX_YEAR)
        return False
    draft.end_year = _parse_bounded_int(token, "end year", _MAX_YEAR)
    return True


def _consume_part_of_speech(draft: _Draft, token: str) -> bool:
    if token not in PARTS_OF_SPEECH:
        raise UsageError(
            f"Unsupported part of speech specified: '{token}'",
            hint="Supported parts of speech: " + ", ".join(PARTS_OF_SPEECH),
        )
    draft.part_of_speech = token
    return True


def _consume_pronunciation(draft: _Draft, token: str) -> bool:
    if token not in PRONUNCIATION_FORMATS:
        raise UsageError(
            f"Unsupported pronunciation type format: '{token}'",
            hint="Supported formats: " + ", ".join(PRONUNCIATION_FORMATS),
        )
    draft.pronunciation_format = token
    return True


_RECORDED_FLAGS: frozenset[str] = frozenset({"frequency", "pronunciation"})
"""Valued options whose presence is itself recorded on the descriptor."""

_CONSUMERS: dict[str, Callable[[_Draft, str], bool]] = {
    "dictionaries": _consume_dictionary,
    "limit": _consume_limit,
    "frequency": _consume_year,
    "part_of_speech": _consume_part_of_speech,
    "pronunciation": _consume_pronunciation,
}


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def _open_option(draft: _Draft, state: State, token: str) -> Step:
    name = normalize_option(token)
    spec = lookup_option(name)
    if spec is None:
        # Tentatively accepted; rejected only if a value arrives for it.
        return Step(State(pending=name))
    if spec.name == "help":
        raise HelpRequested()

    if spec.arity is Arity.TOGGLE:
        setattr(draft, spec.name, True)
        return Step(IDLE)
    if spec.name in _RECORDED_FLAGS:
        setattr(draft, spec.name, True)
    return Step(State(pending=name))


def _reject_stray_value(draft: _Draft, state: State, token: str) -> Step:
    raise UsageError(f"unable to parse arguments; unexpected value '{token}'")


def _close_or_reject(draft: _Draft, state: State, token: str) -> Step:
    spec = lookup_option(state.pending or "")
    if spec is not None and spec.variadic:
        return Step(IDLE, reread=True)
    raise UsageError(
        f"unable to parse arguments; '{token}' found while "
        f"'{state.pending}' still expects a value"
    )


def _consume_value(draft: _Draft, state: State, token: str) -> Step:
    spec = lookup_option(state.pending or "")
    if spec is None:
        raise UsageError(f"unable to parse arguments; unknown operator '{state.pending}'")
    closed = _CONSUMERS[spec.name](draft, token)
    return Step(IDLE if closed else state)


TRANSITIONS: dict[tuple[bool, TokenClass], Callable[[_Draft, State, str], Step]] = {
    (True, TokenClass.OPTION): _open_option,
    (True, TokenClass.VALUE): _reject_stray_value,
    (False, TokenClass.OPTION): _close_or_reject,
    (False, TokenClass.VALUE): _consume_value,
}
"""Keyed by ``(state.idle, token class)``."""


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def parse(tokens: Sequence[str]) -> RequestDescriptor:
    """Parse command-line *tokens* (without the program name).

    Raises
    ------
    UsageError
        For an empty token list, a leading option, a stray value, a
        value for an unknown option, an invalid enumerated value, or a
        non-numeric integer argument.
    HelpRequested
        When a help option is encountered.
    """
    if not tokens:
        raise UsageError("wrong number of arguments: expected at least 1, got 0")

    word = tokens[0]
    if looks_like_option(word):
        raise UsageError("the first argument must be a word")

    draft = _Draft(word=word)
    state = IDLE
    index = 1
    while index < len(tokens):
        token = tokens[index]
        step = TRANSITIONS[(state.idle, classify(token))](draft, state, token)
        state = step.state
        if not step.reread:
            index += 1

    return draft.build()
