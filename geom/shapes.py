"""Shape parametrization and nearest-point search.

Every shape maps a scalar t onto the plane: t=0 is the start, t=1 the end.
``param`` accepts any real t (no clamping); ``nearpoints`` returns every
locally nearest (distance, t) candidate so callers can choose by their own
criterion (minimum distance, continuity with a previous t, ...).
"""
import math
from .types import Point, PointShape, LineSeg, ArcSeg, Candidate, Shape
from .vector import add, sub, scale, dot, distance
from .angles import angle_delta
from .constants import TAU


# ============================================================
# Parametrization
# ============================================================
def param(shape: Shape, t: float) -> Point:
    """Point on *shape* at parameter *t*."""
    if isinstance(shape, PointShape):
        return shape.p
    if isinstance(shape, LineSeg):
        a, b = shape
        return Point(b.x*t + (1.0-t)*a.x, b.y*t + (1.0-t)*a.y)
    if isinstance(shape, ArcSeg):
        ang = shape.start + t*shape.circ
        return add(shape.center, scale(Point(math.cos(ang), math.sin(ang)), shape.radius))
    raise TypeError(f"Not a shape: {shape!r}")


# ============================================================
# Nearest-Point Search
# ============================================================
def arc_theta(arc: ArcSeg, point: Point) -> float:
    """Polar angle of *point* about the arc center, in the arc's own angle convention.

    A negative radius mirrors the circle, so the angle is turned by pi.
    """
    d = sub(point, arc.center)
    theta = math.atan2(d.y, d.x)
    if arc.radius < 0:
        theta += math.pi
    return theta

def arc_feet(arc: ArcSeg, theta: float) -> list[float]:
    """Parameters where the arc passes through angle *theta*, one per revolution."""
    size = abs(arc.circ)
    if not math.isfinite(size):
        return []
    # swept angle from the start to theta, in [0, 2*pi)
    current = math.copysign(1.0, arc.circ) * angle_delta(arc.start, theta)
    if current < 0:
        current += TAU
    ts = []
    while current <= size:
        ts.append(current/size)
        current += TAU
    return ts

def nearpoints(shape: Shape, point: Point) -> list[Candidate]:
    """Locally nearest candidates on *shape* to *point*, ordered by ascending t.

    Point and segment shapes give exactly one candidate. Arcs give the start
    and end points when they are boundary minima, plus one foot per
    revolution the sweep passes through the query direction.
    """
    if isinstance(shape, PointShape):
        return [Candidate(distance(shape.p, point), 0.0)]
    if isinstance(shape, LineSeg):
        a, b = shape
        ab = sub(b, a); len_sq = dot(ab, ab)
        if len_sq == 0:
            t = 0.0  # zero-length segment: same as a point
        else:
            t = dot(ab, sub(point, a)) / len_sq
            t = 0.0 if t < 0 else 1.0 if t > 1 else t
        return [Candidate(distance(param(shape, t), point), t)]
    if isinstance(shape, ArcSeg):
        if shape.circ == 0:
            return [Candidate(distance(param(shape, 0.0), point), 0.0)]
        theta = arc_theta(shape, point)
        sgn = math.copysign(1.0, shape.circ)
        ts = []
        if sgn*angle_delta(shape.start, theta) < 0:
            ts.append(0.0)
        ts.extend(arc_feet(shape, theta))
        if sgn*angle_delta(shape.start + shape.circ, theta) > 0 and ts[-1:] != [1.0]:
            ts.append(1.0)
        return [Candidate(distance(param(shape, t), point), t) for t in ts]
    raise TypeError(f"Not a shape: {shape!r}")
