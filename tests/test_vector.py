"""Tests for geom/vector.py point arithmetic."""
import math
from geom.types import Point
from geom.vector import add, sub, scale, dot, cross, distance


def test_add_sub():
    a = Point(1.0, 2.0); b = Point(3.0, -4.0)
    assert add(a, b) == Point(4.0, -2.0)
    assert sub(a, b) == Point(-2.0, 6.0)
    assert add(sub(a, b), b) == a


def test_scale_either_side():
    p = Point(1.5, -2.0)
    assert scale(p, 2.0) == Point(3.0, -4.0)
    assert scale(2.0, p) == scale(p, 2.0)


def test_dot_and_cross():
    assert dot(Point(1, 2), Point(3, 4)) == 11
    assert cross(Point(1, 0), Point(0, 1)) == 1
    assert cross(Point(0, 1), Point(1, 0)) == -1


def test_distance_345():
    assert distance(Point(0.0, 0.0), Point(3.0, 4.0)) == 5.0


def test_distance_symmetric_nonnegative():
    pairs = [(Point(1.2, -3.4), Point(-7.0, 0.25)), (Point(1e6, 1e-6), Point(-2.0, 3.0))]
    for a, b in pairs:
        assert distance(a, b) == distance(b, a)
        assert distance(a, b) > 0


def test_distance_zero_only_for_identical_points():
    p = Point(0.1, 0.2)
    assert distance(p, p) == 0.0
    assert distance(p, Point(0.1, 0.2 + 1e-15)) > 0


def test_nan_propagates():
    assert math.isnan(distance(Point(math.nan, 0.0), Point(0.0, 0.0)))
    assert math.isnan(add(Point(math.nan, 0.0), Point(1.0, 1.0)).x)
