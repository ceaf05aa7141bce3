"""Polyline sampling and point projection for display clients."""
import numpy as np
from .types import Point, Candidate, Shape
from .shapes import param, nearpoints

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry requests."""

# ============================================================
# Sampling
# ============================================================
def approximate(shape: Shape, num: int) -> list[Point]:
    """num+1 points at evenly spaced t from 0 to 1 inclusive."""
    if num < 1:
        raise GeometryError(f"Need at least one polyline piece: num={num}")
    return [param(shape, float(t)) for t in np.linspace(0.0, 1.0, num + 1)]

def approximate_all(shapes: list[Shape], num: int) -> list[Point]:
    """Sampled points of every shape, concatenated in order."""
    pts = []
    for shape in shapes:
        pts.extend(approximate(shape, num))
    return pts

# ============================================================
# Projection
# ============================================================
def closest_points(shapes: list[Shape], point: Point) -> list[Point]:
    """Every locally nearest point on every shape."""
    return [param(shape, t) for shape in shapes for _, t in nearpoints(shape, point)]

def project(shape: Shape, point: Point) -> tuple[Point, Candidate]:
    """Nearest point on *shape* to *point* and the candidate it came from.

    Raises GeometryError when the search has no candidates (NaN input).
    """
    cands = nearpoints(shape, point)
    if not cands:
        raise GeometryError(f"No nearest point on {shape!r} for {point!r}")
    best = min(cands, key=lambda c: c.distance)
    return param(shape, best.t), best
