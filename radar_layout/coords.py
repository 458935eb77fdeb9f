from __future__ import annotations

import math

from .model import Point, PolarPoint


def to_polar(point: Point) -> PolarPoint:
    return PolarPoint(angle=math.atan2(point.y, point.x), radius=math.hypot(point.x, point.y))


def to_cartesian(polar: PolarPoint) -> Point:
    return Point(polar.radius * math.cos(polar.angle), polar.radius * math.sin(polar.angle))


def clamp_scalar(value: float, a: float, b: float) -> float:
    """Clamp ``value`` into ``[min(a, b), max(a, b)]``."""

    low = min(a, b)
    high = max(a, b)
    return min(max(value, low), high)


def clamp_radius(polar: PolarPoint, r_min: float, r_max: float) -> PolarPoint:
    return PolarPoint(angle=polar.angle, radius=clamp_scalar(polar.radius, r_min, r_max))


def clamp_box(point: Point, lo: Point, hi: Point) -> Point:
    """Clamp each axis independently against the ``lo``/``hi`` rectangle.

    Not a radial clamp: a point beyond an off-axis corner keeps neither its
    direction from the origin nor its angle.
    """

    return Point(clamp_scalar(point.x, lo.x, hi.x), clamp_scalar(point.y, lo.y, hi.y))


__all__ = ["clamp_box", "clamp_radius", "clamp_scalar", "to_cartesian", "to_polar"]
