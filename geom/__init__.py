"""Parametric 2D points, segments and arcs with nearest-point and intersection queries."""

from .types import Point, PointShape, LineSeg, ArcSeg, Shape, Candidate
from .vector import add, sub, scale, dot, cross, distance
from .angles import normalize, angle_delta
from .shapes import param, nearpoints
from .intersect import intersect
from .sampling import (
    GeometryError,
    approximate, approximate_all, closest_points, project,
)
