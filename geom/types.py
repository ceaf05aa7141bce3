"""Value types: the 2D point and the closed shape union."""
from typing import NamedTuple


class Point(NamedTuple):
    x: float; y: float


class PointShape(NamedTuple):
    """Degenerate shape located at a single point."""
    p: Point


class LineSeg(NamedTuple):
    """Straight segment from a (t=0) to b (t=1)."""
    a: Point; b: Point


class ArcSeg(NamedTuple):
    """Circular arc. circ is the signed sweep (CCW positive) and may exceed 2*pi."""
    center: Point; radius: float
    start: float; circ: float


class Candidate(NamedTuple):
    """A locally nearest position on a shape: distance to the query and its parameter."""
    distance: float; t: float


Shape = PointShape | LineSeg | ArcSeg
