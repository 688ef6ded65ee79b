"""Tests for the argument-parsing automaton (core/arguments.py).

Every test drives :func:`parse` with a synthetic token list — no process
boundary, no ``sys.argv``.

Coverage:
* Word position and option-looking first tokens.
* Toggles, aliases, and case folding.
* Variable-arity options closed by the next option (re-read).
* Limit / frequency integer handling.
* Enumerated values (part of speech, pronunciation format).
* Unknown options: tentative acceptance, failure on value.
* End-of-input with a pending option.
* Transition-table shape.
"""

from __future__ import annotations

import pytest

from define_cli.core.arguments import (
    IDLE,
    TRANSITIONS,
    State,
    TokenClass,
    classify,
    lookup_option,
    normalize_option,
    parse,
)
from define_cli.core.models import (
    DEFAULT_DICTIONARY,
    DEFAULT_LIMIT,
    DEFAULT_PRONUNCIATION_FORMAT,
    PARTS_OF_SPEECH,
    PRONUNCIATION_FORMATS,
    RequestDescriptor,
)
from define_cli.exceptions import HelpRequested, UsageError


# ---------------------------------------------------------------------------
# Token helpers
# ---------------------------------------------------------------------------

class TestTokenHelpers:
    @pytest.mark.parametrize("token", ["-d", "--limit", "-", "--useCanonical"])
    def test_option_tokens(self, token: str) -> None:
        assert classify(token) is TokenClass.OPTION

    @pytest.mark.parametrize("token", ["cat", "ahd-5", "well-being", "1950"])
    def test_value_tokens(self, token: str) -> None:
        assert classify(token) is TokenClass.VALUE

    def test_normalize_strips_markers_and_folds_case(self) -> None:
        assert normalize_option("--useCanonical") == "usecanonical"
        assert normalize_option("-D") == "d"

    def test_lookup_known_and_unknown(self) -> None:
        spec = lookup_option("dictionaries")
        assert spec is not None and spec.variadic
        assert lookup_option("nope") is None

    def test_transition_table_is_total(self) -> None:
        assert set(TRANSITIONS) == {
            (idle, cls) for idle in (True, False) for cls in TokenClass
        }

    def test_idle_state(self) -> None:
        assert IDLE.idle
        assert not State(pending="limit").idle


# ---------------------------------------------------------------------------
# Word position
# ---------------------------------------------------------------------------

class TestWord:
    @pytest.mark.parametrize("word", ["cat", "well-being", "Zeitgeist", "ahd-5"])
    def test_word_is_first_token(self, word: str) -> None:
        assert parse([word]).word == word

    def test_empty_stream_fails(self) -> None:
        with pytest.raises(UsageError, match="expected at least 1"):
            parse([])

    @pytest.mark.parametrize("first", ["-d", "--audio", "-help", "-"])
    def test_option_first_fails(self, first: str) -> None:
        with pytest.raises(UsageError, match="first argument must be a word"):
            parse([first, "cat"])

    def test_stray_value_after_word_fails(self) -> None:
        with pytest.raises(UsageError, match="unexpected value 'dog'"):
            parse(["cat", "dog"])


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

class TestDefaults:
    def test_word_only(self) -> None:
        descriptor = parse(["cat"])
        assert descriptor == RequestDescriptor(word="cat")
        assert descriptor.dictionaries == (DEFAULT_DICTIONARY,)
        assert descriptor.limit == DEFAULT_LIMIT
        assert descriptor.pronunciation_format == DEFAULT_PRONUNCIATION_FORMAT
        assert descriptor.part_of_speech is None
        assert descriptor.year_range is None

    def test_descriptor_is_frozen(self) -> None:
        descriptor = parse(["cat"])
        with pytest.raises(AttributeError):
            descriptor.word = "dog"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Toggles
# ---------------------------------------------------------------------------

class TestToggles:
    @pytest.mark.parametrize(
        ("tokens", "attr"),
        [
            (["-a"], "audio"),
            (["--audio"], "audio"),
            (["-r"], "include_related"),
            (["--includeRelated"], "include_related"),
            (["-c"], "use_canonical"),
            (["--useCanonical"], "use_canonical"),
            (["-e"], "etymology"),
            (["-x"], "examples"),
            (["--examples"], "examples"),
            (["-h"], "hyphenation"),
            (["--hyphenation"], "hyphenation"),
            (["-t"], "thesaurus"),
            (["--THESAURUS"], "thesaurus"),
        ],
    )
    def test_toggle_sets_flag(self, tokens: list[str], attr: str) -> None:
        descriptor = parse(["cat", *tokens])
        assert getattr(descriptor, attr) is True

    def test_toggles_combine(self) -> None:
        descriptor = parse(["cat", "-a", "-r", "-c"])
        assert descriptor.audio and descriptor.include_related and descriptor.use_canonical

    @pytest.mark.parametrize("token", ["-u", "--usage", "--help", "-HELP"])
    def test_help_short_circuits(self, token: str) -> None:
        with pytest.raises(HelpRequested):
            parse(["cat", token, "garbage"])

    def test_help_wins_over_later_errors(self) -> None:
        with pytest.raises(HelpRequested):
            parse(["cat", "-l", "3", "--help", "-s", "notareal"])

    @pytest.mark.parametrize("token", ["-", "--"])
    def test_bare_marker_pending_at_end_is_dropped(self, token: str) -> None:
        assert parse(["cat", token]) == RequestDescriptor(word="cat")

    def test_value_after_bare_marker_fails(self) -> None:
        with pytest.raises(UsageError, match="unknown operator ''"):
            parse(["cat", "--", "ahd-5"])

    def test_option_after_bare_marker_fails(self) -> None:
        with pytest.raises(UsageError, match="unable to parse arguments"):
            parse(["cat", "-", "-a"])


# ---------------------------------------------------------------------------
# Dictionaries (variable arity)
# ---------------------------------------------------------------------------

class TestDictionaries:
    def test_repeated_flag(self) -> None:
        descriptor = parse(["cat", "-d", "ahd-5", "-d", "century", "-l", "3"])
        assert descriptor.dictionaries == ("ahd-5", "century")
        assert descriptor.limit == 3

    def test_several_values_after_one_flag(self) -> None:
        descriptor = parse(["cat", "--dictionaries", "ahd-5", "century", "wiktionary"])
        assert descriptor.dictionaries == ("ahd-5", "century", "wiktionary")

    def test_option_closes_collection_and_is_reread(self) -> None:
        descriptor = parse(["cat", "-d", "century", "-a"])
        assert descriptor.dictionaries == ("century",)
        assert descriptor.audio is True

    def test_zero_values_then_option(self) -> None:
        descriptor = parse(["cat", "-d", "-a"])
        assert descriptor.dictionaries == (DEFAULT_DICTIONARY,)
        assert descriptor.audio is True

    def test_zero_values_at_end(self) -> None:
        assert parse(["cat", "--dictionary"]).dictionaries == (DEFAULT_DICTIONARY,)

    def test_duplicates_removed_in_order(self) -> None:
        descriptor = parse(["cat", "-d", "century", "ahd-5", "century"])
        assert descriptor.dictionaries == ("century", "ahd-5")

    def test_value_after_closed_collection_fails(self) -> None:
        with pytest.raises(UsageError):
            parse(["cat", "-d", "century", "-a", "wordnet"])


# ---------------------------------------------------------------------------
# Limit
# ---------------------------------------------------------------------------

class TestLimit:
    def test_limit(self) -> None:
        assert parse(["cat", "--limit", "10"]).limit == 10

    def test_limit_returns_to_idle(self) -> None:
        with pytest.raises(UsageError, match="unexpected value '4'"):
            parse(["cat", "-l", "3", "4"])

    @pytest.mark.parametrize("value", ["three", "3.5", "256", "²"])
    def test_invalid_limit_fails(self, value: str) -> None:
        with pytest.raises(UsageError, match="limit"):
            parse(["cat", "-l", value])

    def test_option_while_limit_pending_fails(self) -> None:
        with pytest.raises(UsageError, match="unable to parse arguments"):
            parse(["cat", "-l", "-a"])

    def test_pending_limit_at_end_keeps_default(self) -> None:
        assert parse(["cat", "-l"]).limit == DEFAULT_LIMIT


# ---------------------------------------------------------------------------
# Frequency
# ---------------------------------------------------------------------------

class TestFrequency:
    def test_two_years(self) -> None:
        descriptor = parse(["cat", "-f", "1950", "2000"])
        assert descriptor.frequency is True
        assert descriptor.start_year == 1950
        assert descriptor.end_year == 2000
        assert descriptor.year_range == (1950, 2000)

    def test_single_year_at_end(self) -> None:
        descriptor = parse(["cat", "-f", "1950"])
        assert descriptor.start_year == 1950
        assert descriptor.end_year is None

    def test_flag_alone_at_end(self) -> None:
        descriptor = parse(["cat", "--frequency"])
        assert descriptor.frequency is True
        assert descriptor.year_range is None

    def test_closed_after_two_values(self) -> None:
        with pytest.raises(UsageError, match="unexpected value '2010'"):
            parse(["cat", "-f", "1950", "2000", "2010"])

    def test_option_between_years_fails(self) -> None:
        with pytest.raises(UsageError, match="still expects a value"):
            parse(["cat", "-f", "1950", "-a", "2000"])

    def test_non_numeric_year_fails(self) -> None:
        with pytest.raises(UsageError, match="start year"):
            parse(["cat", "-f", "nineteen"])


# ---------------------------------------------------------------------------
# Part of speech
# ---------------------------------------------------------------------------

class TestPartOfSpeech:
    def test_there_are_27_tags(self) -> None:
        assert len(PARTS_OF_SPEECH) == 27

    @pytest.mark.parametrize("tag", ["noun", "verb-transitive", "proper-noun-posessive"])
    def test_valid_tag(self, tag: str) -> None:
        assert parse(["cat", "-s", tag]).part_of_speech == tag

    def test_long_alias(self) -> None:
        assert parse(["cat", "--partOfSpeech", "adverb"]).part_of_speech == "adverb"

    def test_invalid_tag_lists_valid_set(self) -> None:
        with pytest.raises(UsageError, match="Unsupported part of speech") as exc_info:
            parse(["cat", "-s", "notareal"])
        hint = exc_info.value.hint
        assert hint is not None
        assert all(tag in hint for tag in PARTS_OF_SPEECH)


# ---------------------------------------------------------------------------
# Pronunciation format
# ---------------------------------------------------------------------------

class TestPronunciation:
    @pytest.mark.parametrize("fmt", PRONUNCIATION_FORMATS)
    def test_valid_format(self, fmt: str) -> None:
        descriptor = parse(["cat", "-p", fmt])
        assert descriptor.pronunciation is True
        assert descriptor.pronunciation_format == fmt

    def test_invalid_format_lists_valid_set(self) -> None:
        with pytest.raises(UsageError, match="pronunciation type format") as exc_info:
            parse(["cat", "-p", "ipa"])
        assert exc_info.value.hint is not None
        assert "IPA" in exc_info.value.hint

    def test_zero_values_closed_by_option(self) -> None:
        descriptor = parse(["cat", "-p", "-a"])
        assert descriptor.pronunciation is True
        assert descriptor.pronunciation_format == DEFAULT_PRONUNCIATION_FORMAT
        assert descriptor.audio is True


# ---------------------------------------------------------------------------
# Unknown options
# ---------------------------------------------------------------------------

class TestUnknownOptions:
    def test_pending_unknown_at_end_is_dropped(self) -> None:
        assert parse(["cat", "--someday"]) == RequestDescriptor(word="cat")

    def test_value_for_unknown_fails(self) -> None:
        with pytest.raises(UsageError, match="unknown operator 'zzz'"):
            parse(["cat", "-zzz", "value"])

    def test_option_after_unknown_fails(self) -> None:
        with pytest.raises(UsageError, match="unable to parse arguments"):
            parse(["cat", "-zzz", "-a"])
