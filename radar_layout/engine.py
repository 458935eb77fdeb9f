"""Radar layout façade: full render pipeline and selection commands."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .collision import resolve_collisions
from .config import LayoutConstants, get_layout_constants
from .legend import Selection, layout_legend, toggle_selection
from .logging_utils import apply_debug_logging
from .model import Buckets, Entry, EntryId, LegendLayout, Moved, PlacedEntry, RadarConfig, RenderResult
from .partition import assign_ids, ordered_entries, partition_entries
from .segments import QUADRANT_GEOMETRY, build_segments
from .sequence import DeterministicSequence
from .validate import validate

logger = logging.getLogger(__name__)

_LETTER_RE = re.compile(r"[a-z]", re.IGNORECASE)

_MARKERS = {
    Moved.UP: "triangle-up",
    Moved.DOWN: "triangle-down",
    Moved.NONE: "circle",
}


class EntryNotFoundError(LookupError):
    """Raised when a selection refers to an ID the last render did not assign."""

    def __init__(self, entry_id: str):
        super().__init__(f"no entry with id {entry_id!r} in the current layout")
        self.entry_id = entry_id


@dataclass
class _RenderState:
    config: RadarConfig
    buckets: Buckets
    by_id: Dict[EntryId, Entry] = field(default_factory=dict)
    selection: Optional[Selection] = None
    legend: Optional[LegendLayout] = None


def resolve_color(entry: Entry, config: RadarConfig) -> str:
    if entry.active or config.print_layout:
        return config.rings[entry.ring].color
    return config.colors.inactive


def blip_text(entry: Entry, config: RadarConfig) -> Optional[str]:
    """Text drawn inside a blip: its ID when printing, else the label's first letter."""

    if config.print_layout:
        return entry.id
    if not entry.active:
        return None
    match = _LETTER_RE.search(entry.label)
    return match.group(0) if match else None


def viewbox(quadrant: int, extent: float = 400.0, padding: float = 20.0) -> Tuple[float, float, float, float]:
    geometry = QUADRANT_GEOMETRY[quadrant]
    reach = extent + padding
    return (
        max(0.0, geometry.factor_x * extent) - reach,
        max(0.0, geometry.factor_y * extent) - reach,
        extent + 2 * padding,
        extent + 2 * padding,
    )


def _placed(entry: Entry, config: RadarConfig) -> PlacedEntry:
    assert entry.id is not None and entry.color is not None
    link = entry.link if (entry.active and not config.print_layout) else None
    return PlacedEntry(
        id=entry.id,
        label=entry.label,
        quadrant=entry.quadrant,
        ring=entry.ring,
        x=entry.x,
        y=entry.y,
        color=entry.color,
        marker=_MARKERS[entry.moved],
        blip_text=blip_text(entry, config),
        link=link,
    )


class RadarEngine:
    """Computes radar layouts and keeps the selection state between redraws.

    Not reentrant: callers must let one ``render`` finish before starting
    another on the same engine.
    """

    def __init__(self, constants: Optional[LayoutConstants] = None) -> None:
        self.constants = constants if constants is not None else get_layout_constants()
        self._state: Optional[_RenderState] = None

    @property
    def selection(self) -> Optional[Selection]:
        return self._state.selection if self._state else None

    @property
    def legend(self) -> Optional[LegendLayout]:
        return self._state.legend if self._state else None

    def render(self, config: RadarConfig) -> RenderResult:
        """Run partition, ID assignment, placement, relaxation and legend layout."""

        constants = self.constants
        validate(config, center_radius=constants.center_radius, clip_margin=constants.clip_margin)
        sequence = DeterministicSequence(constants.seed)
        sequence.reset()

        segments = build_segments(
            config.ring_radii,
            center_radius=constants.center_radius,
            margin=constants.clip_margin,
            box_margin=constants.box_margin,
        )
        buckets = partition_entries(config.entries)
        assign_ids(buckets)
        entries = ordered_entries(buckets)

        for entry in entries:
            entry.segment = segments[entry.quadrant][entry.ring]
            start = entry.segment.sample(sequence)
            entry.x = start.x
            entry.y = start.y
            entry.color = resolve_color(entry, config)

        report = resolve_collisions(
            entries,
            [segments[entry.quadrant][entry.ring] for entry in entries],
            sequence,
            constants.collision,
        )

        if config.zoomed_quadrant is not None:
            box = viewbox(config.zoomed_quadrant, constants.zoom_extent, constants.zoom_padding)
            origin = None
        else:
            box = None
            origin = (config.width / 2, config.height / 2)

        state = _RenderState(config=config, buckets=buckets)
        state.by_id = {entry.id: entry for entry in entries if entry.id is not None}
        state.legend = self._layout(state)
        self._state = state

        logger.info(
            "Rendered radar '%s': %d entries, %d ticks, %d overlaps",
            config.svg_id,
            len(entries),
            report.ticks,
            report.overlaps,
        )
        return RenderResult(
            entries=tuple(_placed(entry, config) for entry in entries),
            legend=state.legend,
            title=config.title,
            origin=origin,
            viewbox=box,
            ticks=report.ticks,
            overlaps=report.overlaps,
        )

    def select(self, entry_id: EntryId) -> LegendLayout:
        """Toggle the description of ``entry_id`` and return the reflowed legend."""

        state = self._require_state()
        entry = state.by_id.get(str(entry_id))
        if entry is None:
            raise EntryNotFoundError(str(entry_id))
        state.selection = toggle_selection(
            state.selection, entry, self.constants.legend.description_width
        )
        state.legend = self._layout(state)
        return state.legend

    def clear_selection(self) -> LegendLayout:
        state = self._require_state()
        state.selection = None
        state.legend = self._layout(state)
        return state.legend

    def placed_entries(self) -> List[PlacedEntry]:
        state = self._require_state()
        return [_placed(entry, state.config) for entry in ordered_entries(state.buckets)]

    def _layout(self, state: _RenderState) -> LegendLayout:
        return layout_legend(
            state.buckets,
            state.selection,
            state.config.quadrants,
            state.config.rings,
            self.constants.legend,
        )

    def _require_state(self) -> _RenderState:
        if self._state is None:
            raise RuntimeError("render() must be called before selecting entries")
        return self._state


apply_debug_logging(globals(), logger=logger, skip={"_placed", "RadarEngine._layout", "RadarEngine._require_state"})


__all__ = [
    "EntryNotFoundError",
    "RadarEngine",
    "blip_text",
    "resolve_color",
    "viewbox",
]
