"""Resolution of the inline ``<em>…</em>`` span inside a gloss.

Only the outermost bracketing is honoured: the span runs from the first
opening marker to the last closing marker after it, so
``"<em>a</em> and <em>b</em>"`` emphasises ``"a and b"`` as a whole.
Positions are computed on the text with every marker removed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

OPEN_MARKER: str = "<em>"
CLOSE_MARKER: str = "</em>"

_MARKER_RE = re.compile(f"({re.escape(OPEN_MARKER)}|{re.escape(CLOSE_MARKER)})")


@dataclass(frozen=True, slots=True)
class ResolvedGloss:
    """Marker-free gloss text plus the emphasised range, if any."""

    text: str
    span: tuple[int, int] | None = None
    """Half-open ``(start, end)`` offsets into :attr:`text`."""

    @property
    def before(self) -> str:
        return self.text if self.span is None else self.text[: self.span[0]]

    @property
    def emphasized(self) -> str:
        return "" if self.span is None else self.text[self.span[0] : self.span[1]]

    @property
    def after(self) -> str:
        return "" if self.span is None else self.text[self.span[1] :]


def resolve_emphasis(gloss: str) -> ResolvedGloss:
    """Strip emphasis markers from *gloss* and locate the emphasised range.

    Without an opening marker the gloss is returned untouched (closing
    markers included).  When no closing marker follows the first opening
    one, the span extends to the end of the text.
    """
    if OPEN_MARKER not in gloss:
        return ResolvedGloss(text=gloss)

    pieces: list[str] = []
    length = 0
    start: int | None = None
    end: int | None = None
    for part in _MARKER_RE.split(gloss):
        if part == OPEN_MARKER:
            if start is None:
                start = length
        elif part == CLOSE_MARKER:
            if start is not None:
                end = length
        else:
            pieces.append(part)
            length += len(part)

    if start is None:
        return ResolvedGloss(text=gloss)
    return ResolvedGloss(text="".join(pieces), span=(start, length if end is None else end))
