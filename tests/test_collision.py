import inspect
import math

import pytest

from radar_layout.collision import (
    CollisionOptions,
    count_overlaps,
    iteration_budget,
    resolve_collisions,
)
from radar_layout.model import Entry, Point
from radar_layout.segments import build_segment
from radar_layout.sequence import DeterministicSequence


def _cluster(n, quadrant=0, ring=0, angle=math.pi / 4, radius=80.0):
    entries = []
    for i in range(n):
        entries.append(
            Entry(
                f'e{i}',
                quadrant,
                ring,
                x=radius * math.cos(angle) + 0.1 * i,
                y=radius * math.sin(angle) - 0.05 * i,
            )
        )
    return entries


def test_iteration_budget_of_default_schedule():
    assert 300 <= iteration_budget() <= 301


def test_iteration_budget_rejects_non_decaying_schedule():
    with pytest.raises(ValueError):
        iteration_budget(CollisionOptions(alpha_decay=0.0))


def test_empty_input_runs_no_ticks():
    report = resolve_collisions([], [], DeterministicSequence())

    assert report.ticks == 0
    assert report.overlaps == 0


def test_mismatched_segments_rejected():
    with pytest.raises(ValueError):
        resolve_collisions(_cluster(2), [build_segment(0, 0)], DeterministicSequence())


def test_pair_is_pushed_apart_and_stays_in_segment():
    entries = _cluster(2)
    seg = build_segment(0, 0)

    report = resolve_collisions(entries, [seg, seg], DeterministicSequence())

    assert report.ticks == iteration_budget()
    distance = math.hypot(entries[0].x - entries[1].x, entries[0].y - entries[1].y)
    assert distance > 12.0
    for entry in entries:
        assert seg.contains(Point(entry.x, entry.y))


def test_crowded_segment_keeps_every_entry_inside():
    entries = _cluster(25, quadrant=1, ring=3, angle=0.75 * math.pi, radius=350.0)
    seg = build_segment(1, 3)

    resolve_collisions(entries, [seg] * len(entries), DeterministicSequence())

    for entry in entries:
        assert seg.contains(Point(entry.x, entry.y))


def test_neighbouring_segments_never_bleed():
    left = Entry('left', 0, 1, x=5.0, y=170.0)
    right = Entry('right', 1, 1, x=-5.0, y=170.0)
    seg_left = build_segment(0, 1)
    seg_right = build_segment(1, 1)

    resolve_collisions([left, right], [seg_left, seg_right], DeterministicSequence())

    assert seg_left.contains(Point(left.x, left.y))
    assert seg_right.contains(Point(right.x, right.y))
    assert left.x > 0.0 > right.x


def test_relaxation_is_deterministic():
    seg = build_segment(3, 2)
    a = _cluster(6, quadrant=3, ring=2, angle=-math.pi / 4, radius=260.0)
    b = _cluster(6, quadrant=3, ring=2, angle=-math.pi / 4, radius=260.0)

    resolve_collisions(a, [seg] * 6, DeterministicSequence())
    resolve_collisions(b, [seg] * 6, DeterministicSequence())

    assert [(e.x, e.y) for e in a] == [(e.x, e.y) for e in b]


def test_count_overlaps():
    entries = [Entry('a', 0, 0, x=0.0, y=0.0), Entry('b', 0, 0, x=10.0, y=0.0), Entry('c', 0, 0, x=100.0, y=0.0)]

    assert count_overlaps(entries, 12.0) == 1
    assert count_overlaps(entries[:1], 12.0) == 0


def test_default_options_are_built_per_call():
    assert iteration_budget() == iteration_budget(CollisionOptions())
    assert inspect.signature(resolve_collisions).parameters['options'].default is None
