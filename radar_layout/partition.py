"""Bucketing of entries by segment and sequential ID assignment."""

from __future__ import annotations

import logging
import unicodedata
from typing import Iterable, Iterator, List, Tuple

from .model import QUADRANT_COUNT, RING_COUNT, Buckets, Entry

logger = logging.getLogger(__name__)

# Legend columns are numbered top-left, top-right, bottom-left, bottom-right.
QUADRANT_ID_ORDER: Tuple[int, ...] = (2, 3, 1, 0)


def _primary_weight(ch: str) -> str:
    if ch.isdigit():
        return "1"
    if ch.isalpha():
        return "2"
    return "0"


def label_sort_key(label: str) -> Tuple[str, str, str]:
    """Collation key approximating a locale-aware string comparison.

    Primary level ignores accents and case and ranks spaces, punctuation and
    symbols before digits and digits before letters, so `~` sorts before `a`.
    Secondary keeps accents, tertiary orders lower case before upper case.
    """

    decomposed = unicodedata.normalize("NFKD", label)
    base = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    primary = "".join(_primary_weight(ch) + ch for ch in base.casefold())
    return (primary, decomposed.casefold(), label.swapcase())


def empty_buckets() -> Buckets:
    return [[[] for _ in range(RING_COUNT)] for _ in range(QUADRANT_COUNT)]


def partition_entries(entries: Iterable[Entry]) -> Buckets:
    """Group ``entries`` into a quadrant x ring grid, keeping input order per bucket."""

    buckets = empty_buckets()
    count = 0
    for entry in entries:
        buckets[entry.quadrant][entry.ring].append(entry)
        count += 1
    logger.info("Partitioned %d entries into %d segments", count, QUADRANT_COUNT * RING_COUNT)
    return buckets


def iter_buckets(buckets: Buckets) -> Iterator[Tuple[int, int, List[Entry]]]:
    """Yield ``(quadrant, ring, bucket)`` in ID visitation order."""

    for quadrant in QUADRANT_ID_ORDER:
        for ring in range(RING_COUNT):
            yield quadrant, ring, buckets[quadrant][ring]


def assign_ids(buckets: Buckets, start: int = 1) -> int:
    """Sort every bucket by label and number its entries; return the next free ID."""

    next_id = start
    for _, _, bucket in iter_buckets(buckets):
        bucket.sort(key=lambda entry: label_sort_key(entry.label))
        for entry in bucket:
            entry.id = str(next_id)
            next_id += 1
    logger.info("Assigned %d entry ids", next_id - start)
    return next_id


def ordered_entries(buckets: Buckets) -> List[Entry]:
    return [entry for _, _, bucket in iter_buckets(buckets) for entry in bucket]


__all__ = [
    "QUADRANT_ID_ORDER",
    "assign_ids",
    "empty_buckets",
    "iter_buckets",
    "label_sort_key",
    "ordered_entries",
    "partition_entries",
]
