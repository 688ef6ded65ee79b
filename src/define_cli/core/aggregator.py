"""Group lookup records by headword.

A pure transformation: deterministic, side-effect free, and idempotent.
Groups come out in first-seen headword order and every record keeps its
relative position within its group.
"""

from __future__ import annotations

from collections.abc import Iterable

from define_cli.core.models import LookupRecord, PronunciationResult, WordGroup


def aggregate(
    records: Iterable[LookupRecord],
    pronunciation: PronunciationResult | None = None,
) -> dict[str, WordGroup]:
    """Return ``headword -> WordGroup`` in first-seen headword order.

    Membership is keyed by exact string equality on
    :attr:`LookupRecord.headword` (no case folding).  The single
    *pronunciation* is attached to every group: it was fetched for the
    literal input word, not per headword.
    """
    buckets: dict[str, list[LookupRecord]] = {}
    for record in records:
        buckets.setdefault(record.headword, []).append(record)

    return {
        headword: WordGroup(
            headword=headword,
            records=tuple(members),
            pronunciation=pronunciation,
        )
        for headword, members in buckets.items()
    }
