"""Render aggregated word groups to the terminal.

Layout per group::

    headword (pronunciation)

    part-of-speech - attribution
        * gloss

The gloss emphasis span is applied as a Rich style on a
:class:`~rich.text.Text`; glosses are never parsed as Rich markup.
The indent before each gloss is a literal tab on stdout.
"""

from __future__ import annotations

from collections.abc import Mapping

from rich.console import Console, ConsoleOptions, RenderResult
from rich.text import Text

from define_cli.core.emphasis import resolve_emphasis
from define_cli.core.models import LookupRecord, WordGroup

HEADWORD_STYLE: str = "bold blue"
PRONUNCIATION_STYLE: str = "red"
ATTRIBUTION_STYLE: str = "italic yellow"
EMPHASIS_STYLE: str = "bold italic"


def render_gloss(gloss: str) -> Text:
    """Return *gloss* with markers stripped and its span emphasised."""
    resolved = resolve_emphasis(gloss)
    text = Text(resolved.text)
    if resolved.span is not None:
        start, end = resolved.span
        text.stylize(EMPHASIS_STYLE, start, end)
    return text


def render_record(record: LookupRecord) -> Text:
    text = Text()
    text.append(record.part_of_speech)
    text.append(" - ")
    text.append(record.attribution_text, style=ATTRIBUTION_STYLE)
    text.append("\n\t* ")
    text.append_text(render_gloss(record.gloss))
    text.append("\n\n")
    return text


def render_group(group: WordGroup) -> Text:
    """Build the full block for one headword."""
    text = Text()
    text.append(group.headword, style=HEADWORD_STYLE)
    if group.pronunciation is not None:
        text.append(" (")
        text.append(group.pronunciation.raw_transcription, style=PRONUNCIATION_STYLE)
        text.append(")")
    text.append("\n\n")
    for record in group.records:
        text.append_text(render_record(record))
    return text


class Verbatim:
    """Emit a :class:`Text` as styled segments, tabs and line breaks intact.

    ``Text`` renders through Rich's wrapper, which expands tabs to spaces;
    the record layout needs a literal tab before each gloss.
    """

    def __init__(self, text: Text) -> None:
        self.text = text

    def __rich_console__(
        self, console: Console, options: ConsoleOptions,
    ) -> RenderResult:
        yield from self.text.render(console)


def present(groups: Mapping[str, WordGroup], out: Console) -> None:
    """Print every group in mapping order."""
    for group in groups.values():
        out.print(Verbatim(render_group(group)), end="", soft_wrap=True)
