"""Shared pytest fixtures and configuration for the define-cli test suite.

Guidelines
----------
* No internet access in any test.
* The transport and audio output must be mocked at the core boundary.
* Core tests must be pure — no side effects.
* Tests must not depend on OS state (config dir is redirected).
"""

from __future__ import annotations

from pathlib import Path

import pytest

from define_cli.core.models import LookupRecord


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point the config store at a temp dir and clear ``DEFINE_*`` overrides."""
    for name in (
        "DEFINE_API_KEY",
        "DEFINE_API_URL",
        "DEFINE_PLAYBACK_TIMEOUT",
        "DEFINE_LOG_LEVEL",
        "XDG_CONFIG_HOME",
    ):
        monkeypatch.delenv(name, raising=False)
    config_dir = tmp_path / "config"
    monkeypatch.setenv("DEFINE_CONFIG_DIR", str(config_dir))
    return config_dir


def make_record(headword: str = "cat", gloss: str = "A small feline.", **overrides: str) -> LookupRecord:
    """Factory for a :class:`LookupRecord` with sensible defaults."""
    fields = {
        "part_of_speech": "noun",
        "attribution_text": "from The American Heritage® Dictionary",
        "source_dictionary_id": "ahd-5",
    }
    fields.update(overrides)
    return LookupRecord(headword=headword, gloss=gloss, **fields)


def raw_definition(word: str = "cat", text: str = "A small feline.", **overrides: object) -> dict[str, object]:
    """Factory for one element of the definitions response array."""
    entry: dict[str, object] = {
        "word": word,
        "text": text,
        "partOfSpeech": "noun",
        "attributionText": "from The American Heritage® Dictionary",
        "sourceDictionary": "ahd-5",
    }
    entry.update(overrides)
    return entry
