import math

import pytest

from radar_layout.coords import clamp_box, clamp_radius, clamp_scalar, to_cartesian, to_polar
from radar_layout.model import Point, PolarPoint


def test_polar_round_trip_of_known_point():
    polar = to_polar(Point(3.0, 4.0))

    assert polar.radius == pytest.approx(5.0)
    assert polar.angle == pytest.approx(math.atan2(4.0, 3.0))

    back = to_cartesian(polar)
    assert back.x == pytest.approx(3.0)
    assert back.y == pytest.approx(4.0)


@pytest.mark.parametrize('a, b', [(10.0, 20.0), (20.0, 10.0)])
def test_clamp_scalar_is_order_independent(a, b):
    assert clamp_scalar(5.0, a, b) == 10.0
    assert clamp_scalar(25.0, a, b) == 20.0
    assert clamp_scalar(15.0, a, b) == 15.0


def test_clamp_radius_keeps_angle():
    clamped = clamp_radius(PolarPoint(angle=1.2, radius=500.0), 45.0, 115.0)

    assert clamped.angle == 1.2
    assert clamped.radius == 115.0


def test_clamp_box_clamps_axes_independently():
    lo = Point(-15.0, -15.0)
    hi = Point(-400.0, -400.0)

    clamped = clamp_box(Point(-500.0, -10.0), lo, hi)

    assert clamped == Point(-400.0, -15.0)


def test_clamp_box_does_not_preserve_direction():
    point = Point(500.0, 100.0)

    clamped = clamp_box(point, Point(15.0, 15.0), Point(400.0, 400.0))

    assert clamped == Point(400.0, 100.0)
    assert to_polar(clamped).angle != pytest.approx(to_polar(point).angle)
