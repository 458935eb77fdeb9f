"""Collision relaxation that declusters blips while keeping them in their segment."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np
from scipy.spatial import cKDTree

from .logging_utils import apply_debug_logging
from .model import Entry
from .segments import Segment
from .sequence import DeterministicSequence

logger = logging.getLogger(__name__)


@dataclass
class CollisionOptions:
    """Relaxation knobs for the collide step and its cooling schedule."""

    radius: float = 12.0
    strength: float = 0.85
    velocity_decay: float = 0.19
    alpha: float = 1.0
    alpha_min: float = 0.001
    alpha_decay: float = 1.0 - 0.001 ** (1.0 / 300.0)
    alpha_target: float = 0.0
    jiggle_scale: float = 1e-6


@dataclass
class CollisionReport:
    ticks: int
    overlaps: int
    alpha: float


def iteration_budget(options: Optional[CollisionOptions] = None) -> int:
    """Number of ticks the cooling schedule runs before alpha drops below ``alpha_min``."""

    if options is None:
        options = CollisionOptions()
    if options.alpha_decay <= 0.0:
        raise ValueError("alpha_decay must be positive for a bounded relaxation")
    alpha = options.alpha
    ticks = 0
    while True:
        alpha += (options.alpha_target - alpha) * options.alpha_decay
        ticks += 1
        if alpha < options.alpha_min:
            return ticks
        if ticks > 100000:
            raise ValueError("cooling schedule never reaches alpha_min")


def _neighbour_lists(predicted: np.ndarray, reach: float) -> Dict[int, List[int]]:
    pairs = cKDTree(predicted).query_pairs(reach, output_type="ndarray")
    neighbours: Dict[int, List[int]] = {}
    if pairs.size == 0:
        return neighbours
    order = np.lexsort((pairs[:, 1], pairs[:, 0]))
    for i, j in pairs[order]:
        neighbours.setdefault(int(i), []).append(int(j))
    return neighbours


def _collide_step(
    pos: np.ndarray,
    vel: np.ndarray,
    options: CollisionOptions,
    sequence: DeterministicSequence,
) -> None:
    """Push overlapping pairs apart by adjusting velocities in place."""

    radius = options.radius
    reach = 2.0 * radius
    neighbours = _neighbour_lists(pos + vel, reach)
    # equal radii split every correction evenly between the two blips
    weight = (radius * radius) / (radius * radius + radius * radius)

    for i in sorted(neighbours):
        xi = pos[i, 0] + vel[i, 0]
        yi = pos[i, 1] + vel[i, 1]
        for j in neighbours[i]:
            dx = xi - pos[j, 0] - vel[j, 0]
            dy = yi - pos[j, 1] - vel[j, 1]
            dist_sq = dx * dx + dy * dy
            if dist_sq >= reach * reach:
                continue
            if dx == 0.0:
                dx = (sequence.next() - 0.5) * options.jiggle_scale
                dist_sq += dx * dx
            if dy == 0.0:
                dy = (sequence.next() - 0.5) * options.jiggle_scale
                dist_sq += dy * dy
            dist = math.sqrt(dist_sq)
            scale = (reach - dist) / dist * options.strength
            dx *= scale
            dy *= scale
            vel[i, 0] += dx * weight
            vel[i, 1] += dy * weight
            vel[j, 0] -= dx * (1.0 - weight)
            vel[j, 1] -= dy * (1.0 - weight)


def count_overlaps(entries: Sequence[Entry], radius: float, tol: float = 1e-6) -> int:
    if len(entries) < 2:
        return 0
    pos = np.array([(entry.x, entry.y) for entry in entries], dtype=float)
    return len(cKDTree(pos).query_pairs(max(2.0 * radius - tol, 0.0)))


def _clip_all(entries: Sequence[Entry], segments: Sequence[Segment], pos: np.ndarray) -> None:
    for idx, (entry, segment) in enumerate(zip(entries, segments)):
        entry.x = float(pos[idx, 0])
        entry.y = float(pos[idx, 1])
        segment.clip(entry)
        pos[idx, 0] = entry.x
        pos[idx, 1] = entry.y


def resolve_collisions(
    entries: Sequence[Entry],
    segments: Sequence[Segment],
    sequence: DeterministicSequence,
    options: Optional[CollisionOptions] = None,
) -> CollisionReport:
    """Relax ``entries`` apart, re-clipping each into its own segment after every tick.

    ``segments[i]`` is the segment of ``entries[i]``. Entry positions are
    updated in place; the run is bounded by the cooling schedule.
    """

    if options is None:
        options = CollisionOptions()
    if len(entries) != len(segments):
        raise ValueError("resolve_collisions requires one segment per entry")
    if not entries:
        return CollisionReport(ticks=0, overlaps=0, alpha=options.alpha)

    ticks = iteration_budget(options)
    pos = np.array([(entry.x, entry.y) for entry in entries], dtype=float)
    vel = np.zeros_like(pos)
    damping = 1.0 - options.velocity_decay
    alpha = options.alpha

    for _ in range(ticks):
        alpha += (options.alpha_target - alpha) * options.alpha_decay
        if len(entries) > 1:
            _collide_step(pos, vel, options, sequence)
        vel *= damping
        pos += vel
        _clip_all(entries, segments, pos)

    overlaps = count_overlaps(entries, options.radius)
    logger.info(
        "Resolved collisions for %d entries in %d ticks (%d overlapping pairs left)",
        len(entries),
        ticks,
        overlaps,
    )
    return CollisionReport(ticks=ticks, overlaps=overlaps, alpha=alpha)


apply_debug_logging(globals(), logger=logger, skip={"_collide_step", "_neighbour_lists", "_clip_all"})


__all__ = [
    "CollisionOptions",
    "CollisionReport",
    "count_overlaps",
    "iteration_budget",
    "resolve_collisions",
]
