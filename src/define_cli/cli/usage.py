"""Usage text for ``define``."""

from __future__ import annotations

from define_cli.cli.console import console

USAGE: str = r"""
Usage:
    define <word> [OPTIONS]

Options:
    -D --dictionary --dictionaries  [...]    Source dictionaries to return definitions from, separated by a space
    -S --partOfSpeech               [...]    The part of speech of the word whose definition is requested
    -L --limit                      [...]    Maximum number of results to return
    -A --audio                               Request an audio pronunciation of the word
    -R --includeRelated                      Request related words with definitions
    -C --useCanonical                        Tries to return the correct word root (e.g. 'cats' -> 'cat')
    -E --etymology                           Request etymology data
    -X --examples                            Request examples for the word
    -F --frequency                  [...]    Request word usage over time (start and end year)
    -H --hyphenation                         Request syllable information for the word
    -P --pronunciation              [...]    Request text pronunciation for the word with the specified pronunciation type
    -T --thesaurus                           Request synonym and antonym information for the word
    -U --usage --help                        Display this usage guide
"""


def print_usage() -> None:
    """Write the banner and option table to stderr."""
    console.print(
        "[green]define[/green] - look up words in the dictionary of your choice",
    )
    console.print(USAGE, markup=False, highlight=False)
