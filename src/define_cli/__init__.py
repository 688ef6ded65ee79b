"""define-cli — look up words in the dictionary of your choice.

A terminal client for the Wordnik word API: definitions grouped by
headword, with pronunciation and optional spoken audio.
"""

from define_cli.version import __version__

__all__: list[str] = ["__version__"]
