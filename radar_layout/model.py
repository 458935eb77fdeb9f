"""Core data structures for the radar layout pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .segments import Segment

EntryId = str
Buckets = List[List["Entry"]]

QUADRANT_COUNT = 4
RING_COUNT = 4


class Moved(Enum):
    """Movement marker of an entry since the previous radar edition."""

    DOWN = -1
    NONE = 0
    UP = 1


@dataclass
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class PolarPoint:
    angle: float
    radius: float


@dataclass
class Entry:
    """A single blip on the chart.

    ``id``, ``x``, ``y``, ``color`` and ``segment`` are owned by the engine and
    rewritten in place on every render.
    """

    label: str
    quadrant: int
    ring: int
    active: bool = True
    moved: Moved = Moved.NONE
    description: Optional[str] = None
    link: Optional[str] = None
    id: Optional[EntryId] = None
    x: float = 0.0
    y: float = 0.0
    color: Optional[str] = None
    segment: Optional["Segment"] = field(default=None, repr=False, compare=False)


@dataclass
class QuadrantConfig:
    name: str


@dataclass
class RingConfig:
    name: str
    color: str
    radius: float


@dataclass
class RadarColors:
    background: str = "#fff"
    grid: str = "#bbb"
    inactive: str = "#ddd"


@dataclass
class RadarConfig:
    """Validated radar input as consumed by :class:`~radar_layout.engine.RadarEngine`."""

    quadrants: List[QuadrantConfig]
    rings: List[RingConfig]
    entries: List[Entry] = field(default_factory=list)
    colors: RadarColors = field(default_factory=RadarColors)
    svg_id: str = "radar"
    width: float = 1450.0
    height: float = 1000.0
    title: str = ""
    print_layout: bool = False
    zoomed_quadrant: Optional[int] = None

    @property
    def ring_radii(self) -> Tuple[float, ...]:
        return tuple(float(ring.radius) for ring in self.rings)


@dataclass(frozen=True)
class LegendRow:
    """One line of a legend bucket: a real entry or a wrapped description line."""

    kind: str  # 'entry' or 'description'
    text: str
    offset: Point
    entry_id: Optional[EntryId] = None
    owner_id: Optional[EntryId] = None

    @property
    def is_description(self) -> bool:
        return self.kind == "description"


@dataclass(frozen=True)
class LegendBucket:
    quadrant: int
    ring: int
    header: str
    header_offset: Point
    rows: Tuple[LegendRow, ...]


@dataclass(frozen=True)
class LegendLayout:
    titles: Tuple[Tuple[str, Point], ...]
    buckets: Tuple[LegendBucket, ...]
    expanded_id: Optional[EntryId] = None

    def bucket(self, quadrant: int, ring: int) -> LegendBucket:
        return self.buckets[quadrant * RING_COUNT + ring]

    def rows(self) -> List[LegendRow]:
        return [row for bucket in self.buckets for row in bucket.rows]


@dataclass(frozen=True)
class PlacedEntry:
    id: EntryId
    label: str
    quadrant: int
    ring: int
    x: float
    y: float
    color: str
    marker: str
    blip_text: Optional[str] = None
    link: Optional[str] = None


@dataclass(frozen=True)
class RenderResult:
    entries: Tuple[PlacedEntry, ...]
    legend: LegendLayout
    title: str = ""
    origin: Optional[Tuple[float, float]] = None
    viewbox: Optional[Tuple[float, float, float, float]] = None
    ticks: int = 0
    overlaps: int = 0

    def positions(self) -> Dict[EntryId, Tuple[float, float]]:
        return {entry.id: (entry.x, entry.y) for entry in self.entries}


__all__ = [
    "Buckets",
    "Entry",
    "EntryId",
    "LegendBucket",
    "LegendLayout",
    "LegendRow",
    "Moved",
    "PlacedEntry",
    "Point",
    "PolarPoint",
    "QUADRANT_COUNT",
    "QuadrantConfig",
    "RING_COUNT",
    "RadarColors",
    "RadarConfig",
    "RenderResult",
    "RingConfig",
]
