"""Legend stacking and description reflow.

Each (quadrant, ring) bucket is rendered as a vertical stack of text rows
under its ring header. Rings 0/1 and 2/3 share a column: the odd ring starts
below the even ring's rows, so any change in the even bucket's height cascades
into its partner. Expanding an entry's description splices wrapped text lines
right after the entry, and the whole bucket (and its partner) is re-stacked.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from .model import (
    QUADRANT_COUNT,
    RING_COUNT,
    Entry,
    EntryId,
    LegendBucket,
    LegendLayout,
    LegendRow,
    Point,
    QuadrantConfig,
    RingConfig,
)

logger = logging.getLogger(__name__)

DESCRIPTION_LINE_LENGTH = 20


@dataclass(frozen=True)
class LegendGeometry:
    column_offsets: Tuple[Tuple[float, float], ...] = (
        (450.0, 90.0),
        (-675.0, 90.0),
        (-675.0, -310.0),
        (450.0, -310.0),
    )
    line_height: float = 12.0
    header_dy: float = -16.0
    odd_ring_gap: float = 36.0
    outer_ring_dx: float = 120.0
    title_dy: float = -45.0
    description_width: int = DESCRIPTION_LINE_LENGTH


@dataclass(frozen=True)
class DescriptionLine:
    """Synthetic legend row holding one wrapped line of an entry's description."""

    text: str
    owner_id: EntryId
    is_description: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Selection:
    entry_id: EntryId
    lines: Tuple[str, ...] = ()


DisplayItem = Union[Entry, DescriptionLine]


def wrap_description(text: Optional[str], width: int = DESCRIPTION_LINE_LENGTH) -> List[str]:
    """Cut ``text`` into consecutive chunks of at most ``width`` characters."""

    if width <= 0:
        raise ValueError("description width must be positive")
    if not text:
        return []
    return [text[pos : pos + width] for pos in range(0, len(text), width)]


def toggle_selection(
    current: Optional[Selection],
    entry: Entry,
    width: int = DESCRIPTION_LINE_LENGTH,
) -> Optional[Selection]:
    """Return the selection after clicking ``entry``.

    Clicking the expanded entry collapses it; clicking any other entry replaces
    the current expansion, so at most one description is open.
    """

    if entry.id is None:
        raise ValueError(f"entry {entry.label!r} has no id; assign ids before selecting")
    if current is not None and current.entry_id == entry.id:
        return None
    return Selection(entry_id=entry.id, lines=tuple(wrap_description(entry.description, width)))


def reflow(bucket: Sequence[Entry], selection: Optional[Selection]) -> Tuple[DisplayItem, ...]:
    """Rebuild the display list of ``bucket`` for the given ``selection``."""

    items: List[DisplayItem] = []
    for entry in bucket:
        items.append(entry)
        if selection is not None and entry.id == selection.entry_id:
            items.extend(DescriptionLine(text=line, owner_id=entry.id) for line in selection.lines)
    return tuple(items)


def legend_offset(
    quadrant: int,
    ring: int,
    row_counts: Sequence[Sequence[int]],
    index: Optional[int] = None,
    geometry: LegendGeometry = LegendGeometry(),
) -> Point:
    """Offset of row ``index`` of a bucket, or of its ring header when ``index`` is ``None``.

    ``row_counts[q][r]`` is the number of rendered rows (description lines
    included) in each bucket.
    """

    dx = 0.0 if ring < 2 else geometry.outer_ring_dx
    dy = geometry.header_dy if index is None else index * geometry.line_height
    if ring % 2 == 1:
        dy += geometry.odd_ring_gap + row_counts[quadrant][ring - 1] * geometry.line_height
    base_x, base_y = geometry.column_offsets[quadrant]
    return Point(base_x + dx, base_y + dy)


def _row(item: DisplayItem, offset: Point) -> LegendRow:
    if isinstance(item, DescriptionLine):
        return LegendRow(kind="description", text=item.text, offset=offset, owner_id=item.owner_id)
    return LegendRow(kind="entry", text=f"{item.id}. {item.label}", offset=offset, entry_id=item.id)


def layout_legend(
    buckets: Sequence[Sequence[Sequence[Entry]]],
    selection: Optional[Selection],
    quadrants: Sequence[QuadrantConfig],
    rings: Sequence[RingConfig],
    geometry: LegendGeometry = LegendGeometry(),
) -> LegendLayout:
    """Stack every bucket with ``selection`` applied and return the full legend."""

    display = [[reflow(buckets[q][r], selection) for r in range(RING_COUNT)] for q in range(QUADRANT_COUNT)]
    row_counts = [[len(items) for items in rings_items] for rings_items in display]

    titles = []
    for q in range(QUADRANT_COUNT):
        base_x, base_y = geometry.column_offsets[q]
        titles.append((quadrants[q].name, Point(base_x, base_y + geometry.title_dy)))

    legend_buckets = []
    for q in range(QUADRANT_COUNT):
        for r in range(RING_COUNT):
            rows = tuple(
                _row(item, legend_offset(q, r, row_counts, i, geometry))
                for i, item in enumerate(display[q][r])
            )
            legend_buckets.append(
                LegendBucket(
                    quadrant=q,
                    ring=r,
                    header=rings[r].name,
                    header_offset=legend_offset(q, r, row_counts, None, geometry),
                    rows=rows,
                )
            )

    expanded = selection.entry_id if selection is not None else None
    logger.info(
        "Laid out legend with %d rows (expanded=%s)",
        sum(sum(counts) for counts in row_counts),
        expanded,
    )
    return LegendLayout(titles=tuple(titles), buckets=tuple(legend_buckets), expanded_id=expanded)


__all__ = [
    "DESCRIPTION_LINE_LENGTH",
    "DescriptionLine",
    "DisplayItem",
    "LegendGeometry",
    "Selection",
    "layout_legend",
    "legend_offset",
    "reflow",
    "toggle_selection",
    "wrap_description",
]
