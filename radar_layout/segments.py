"""Per (quadrant, ring) segment geometry: bounds, clipping and sampling."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Protocol, Sequence, Tuple

from .coords import clamp_box, clamp_radius, to_cartesian, to_polar
from .model import QUADRANT_COUNT, RING_COUNT, Point, PolarPoint
from .sequence import DeterministicSequence

logger = logging.getLogger(__name__)

DEFAULT_RING_RADII: Tuple[float, ...] = (130.0, 220.0, 310.0, 400.0)
CENTER_RADIUS = 30.0
CLIP_MARGIN = 15.0
BOX_MARGIN = 15.0


@dataclass(frozen=True)
class QuadrantGeometry:
    radial_min: float  # multiples of pi
    radial_max: float
    factor_x: int
    factor_y: int


QUADRANT_GEOMETRY: Tuple[QuadrantGeometry, ...] = (
    QuadrantGeometry(0.0, 0.5, 1, 1),
    QuadrantGeometry(0.5, 1.0, -1, 1),
    QuadrantGeometry(-1.0, -0.5, -1, -1),
    QuadrantGeometry(-0.5, 0.0, 1, -1),
)


class Positioned(Protocol):
    x: float
    y: float


@dataclass(frozen=True)
class Segment:
    quadrant: int
    ring: int
    angle_min: float
    angle_max: float
    radius_min: float
    radius_max: float
    box_min: Point
    box_max: Point
    margin: float = CLIP_MARGIN

    @property
    def clip_radius_min(self) -> float:
        return self.radius_min + self.margin

    @property
    def clip_radius_max(self) -> float:
        return self.radius_max - self.margin

    def clipped(self, point: Point) -> Point:
        boxed = clamp_box(point, self.box_min, self.box_max)
        polar = clamp_radius(to_polar(boxed), self.clip_radius_min, self.clip_radius_max)
        return to_cartesian(polar)

    def clip(self, item: Positioned) -> Positioned:
        """Move ``item`` into the segment's clipped band, writing x/y back in place."""

        target = self.clipped(Point(item.x, item.y))
        item.x = target.x
        item.y = target.y
        return item

    def sample(self, sequence: DeterministicSequence) -> Point:
        angle = sequence.between(self.angle_min, self.angle_max)
        radius = sequence.triangular_between(self.radius_min, self.radius_max)
        return to_cartesian(PolarPoint(angle=angle, radius=radius))

    def contains(self, point: Point, tol: float = 1e-9) -> bool:
        """Return ``True`` when ``point`` lies inside the clipped band and angular range."""

        polar = to_polar(point)
        if not (self.clip_radius_min - tol <= polar.radius <= self.clip_radius_max + tol):
            return False
        angle = polar.angle
        # atan2 reports -pi for points on the negative x axis with y == -0.0
        if self.angle_max >= math.pi - tol and angle <= -math.pi + tol:
            angle = math.pi
        if self.angle_min <= -math.pi + tol and angle >= math.pi - tol:
            angle = -math.pi
        return self.angle_min - tol <= angle <= self.angle_max + tol


def build_segment(
    quadrant: int,
    ring: int,
    radii: Sequence[float] = DEFAULT_RING_RADII,
    *,
    center_radius: float = CENTER_RADIUS,
    margin: float = CLIP_MARGIN,
    box_margin: float = BOX_MARGIN,
) -> Segment:
    geometry = QUADRANT_GEOMETRY[quadrant]
    outer = float(radii[-1])
    return Segment(
        quadrant=quadrant,
        ring=ring,
        angle_min=geometry.radial_min * math.pi,
        angle_max=geometry.radial_max * math.pi,
        radius_min=center_radius if ring == 0 else float(radii[ring - 1]),
        radius_max=float(radii[ring]),
        box_min=Point(box_margin * geometry.factor_x, box_margin * geometry.factor_y),
        box_max=Point(outer * geometry.factor_x, outer * geometry.factor_y),
        margin=margin,
    )


def build_segments(
    radii: Sequence[float] = DEFAULT_RING_RADII,
    *,
    center_radius: float = CENTER_RADIUS,
    margin: float = CLIP_MARGIN,
    box_margin: float = BOX_MARGIN,
) -> List[List[Segment]]:
    """Build the full quadrant x ring grid of segments."""

    grid = [
        [
            build_segment(
                q, r, radii, center_radius=center_radius, margin=margin, box_margin=box_margin
            )
            for r in range(RING_COUNT)
        ]
        for q in range(QUADRANT_COUNT)
    ]
    logger.info("Built %d segments for ring radii %s", QUADRANT_COUNT * RING_COUNT, tuple(radii))
    return grid


__all__ = [
    "BOX_MARGIN",
    "CENTER_RADIUS",
    "CLIP_MARGIN",
    "DEFAULT_RING_RADII",
    "Positioned",
    "QUADRANT_GEOMETRY",
    "QuadrantGeometry",
    "Segment",
    "build_segment",
    "build_segments",
]
