"""Shared shape fixtures for geom tests."""
import math
import pytest
from geom.types import Point, PointShape, LineSeg, ArcSeg


@pytest.fixture(scope="session")
def origin():
    return Point(0.0, 0.0)


@pytest.fixture(scope="session")
def seg10():
    """Horizontal segment (0,0) -> (10,0)."""
    return LineSeg(Point(0.0, 0.0), Point(10.0, 0.0))


@pytest.fixture(scope="session")
def quarter_arc():
    """CCW quarter circle of radius 10 from (10,0) to (0,10)."""
    return ArcSeg(Point(0.0, 0.0), 10.0, 0.0, math.pi/2)


@pytest.fixture(scope="session")
def two_turn_arc():
    """Unit circle swept twice CCW starting at (1,0)."""
    return ArcSeg(Point(0.0, 0.0), 1.0, 0.0, 4*math.pi)


@pytest.fixture(scope="session")
def unit_circle():
    return ArcSeg(Point(0.0, 0.0), 1.0, 0.0, 2*math.pi)
