"""Intersection of two shapes.

A point intersects another shape only where the nearest-point search finds
an exact zero distance. Segment and arc pairs are solved analytically with
the tolerances in ``geom.constants``; overlapping collinear segments and
coincident arcs come back as the shared piece rather than as points.
"""
import math
from .types import Point, PointShape, LineSeg, ArcSeg, Shape
from .vector import add, sub, scale, dot, cross, distance
from .angles import normalize, angle_delta
from .shapes import param, nearpoints, arc_theta
from .constants import TAU, PARALLEL_EPS, ON_SHAPE_EPS


def intersect(shape: Shape, other: Shape) -> list[Shape]:
    """Shapes common to *shape* and *other*: points, or overlapping pieces."""
    if isinstance(shape, PointShape):
        if isinstance(other, PointShape):
            p, q = shape.p, other.p
            return [shape] if (p.x == q.x and p.y == q.y) else []
        if isinstance(other, (LineSeg, ArcSeg)):
            return [PointShape(param(other, t)) for d, t in nearpoints(other, shape.p) if d == 0]
        raise TypeError(f"Not a shape: {other!r}")
    if isinstance(other, PointShape):
        return intersect(other, shape)

    shape, other = _collapse(shape), _collapse(other)
    if isinstance(shape, PointShape) or isinstance(other, PointShape):
        return intersect(shape, other)
    if isinstance(shape, LineSeg) and isinstance(other, LineSeg):
        return _seg_seg(shape, other)
    if isinstance(shape, LineSeg) and isinstance(other, ArcSeg):
        return _seg_arc(shape, other)
    if isinstance(shape, ArcSeg) and isinstance(other, LineSeg):
        return _seg_arc(other, shape)
    if isinstance(shape, ArcSeg) and isinstance(other, ArcSeg):
        return _arc_arc(shape, other)
    raise TypeError(f"Not a shape pair: {shape!r}, {other!r}")


# ============================================================
# Helpers
# ============================================================
def _collapse(shape: Shape) -> Shape:
    """Zero-length segments and zero-size arcs become the point they occupy."""
    if isinstance(shape, LineSeg):
        a, b = shape
        return PointShape(a) if (a.x == b.x and a.y == b.y) else shape
    if isinstance(shape, ArcSeg):
        if shape.circ == 0 or shape.radius == 0:
            return PointShape(param(shape, 0.0))
        return shape
    raise TypeError(f"Not a shape: {shape!r}")

def _clamp01(t: float) -> float:
    return min(max(t, 0.0), 1.0)

def _in_range(t: float) -> bool:
    return -ON_SHAPE_EPS <= t <= 1.0 + ON_SHAPE_EPS

def _on_arc(arc: ArcSeg, pt: Point) -> bool:
    """True when *pt*, assumed on the arc's circle, lies within the sweep."""
    size = abs(arc.circ)
    if size >= TAU:
        return True
    d = math.copysign(1.0, arc.circ) * angle_delta(arc.start, arc_theta(arc, pt))
    if d < -ON_SHAPE_EPS:
        d += TAU
    return d <= size + ON_SHAPE_EPS

def _ccw_span(arc: ArcSeg) -> tuple[float, float]:
    """(start, size) of the same point set swept counter-clockwise with positive radius."""
    start = arc.start + (math.pi if arc.radius < 0 else 0.0)
    if arc.circ < 0:
        start += arc.circ
    return start, abs(arc.circ)

def _unique(points: list[Point]) -> list[Shape]:
    out = []
    for p in points:
        if all(distance(p, q.p) > ON_SHAPE_EPS for q in out):
            out.append(PointShape(p))
    return out

def _circle_point(center: Point, r: float, ang: float) -> Point:
    return add(center, scale(Point(math.cos(ang), math.sin(ang)), r))


# ============================================================
# Pairwise Solvers
# ============================================================
def _seg_seg(s1: LineSeg, s2: LineSeg) -> list[Shape]:
    """Crossing point, collinear overlap, or nothing."""
    p, r = s1.a, sub(s1.b, s1.a)
    q, s = s2.a, sub(s2.b, s2.a)
    qp = sub(q, p)
    denom = cross(r, s); len_r = math.sqrt(dot(r, r))
    if abs(denom) > PARALLEL_EPS * len_r * math.sqrt(dot(s, s)):
        t = cross(qp, s) / denom; u = cross(qp, r) / denom
        if _in_range(t) and _in_range(u):
            return [PointShape(param(s1, _clamp01(t)))]
        return []
    if abs(cross(qp, r)) > ON_SHAPE_EPS * len_r:
        return []  # parallel, apart
    len_sq = dot(r, r)
    t0 = dot(qp, r) / len_sq; t1 = dot(sub(s2.b, p), r) / len_sq
    lo = max(0.0, min(t0, t1)); hi = min(1.0, max(t0, t1))
    if hi - lo > ON_SHAPE_EPS:
        return [LineSeg(param(s1, lo), param(s1, hi))]
    if hi - lo >= -ON_SHAPE_EPS:
        return [PointShape(param(s1, lo))]
    return []

def _seg_arc(seg: LineSeg, arc: ArcSeg) -> list[Shape]:
    """Line/circle roots that fall inside both the segment and the sweep."""
    d = sub(seg.b, seg.a); A = dot(d, d)
    tf = dot(sub(arc.center, seg.a), d) / A  # foot of the perpendicular from the center
    foot = param(seg, tf)
    r = abs(arc.radius)
    h_sq = r*r - dot(sub(foot, arc.center), sub(foot, arc.center))
    if h_sq < -ON_SHAPE_EPS:
        return []
    dt = math.sqrt(max(0.0, h_sq) / A)
    hits = []
    for t in (tf - dt, tf + dt):
        if _in_range(t):
            pt = param(seg, _clamp01(t))
            if _on_arc(arc, pt):
                hits.append(pt)
    return _unique(hits)

def _arc_arc(a1: ArcSeg, a2: ArcSeg) -> list[Shape]:
    """Circle/circle intersection restricted to both sweeps; coincident circles overlap."""
    c1, r1 = a1.center, abs(a1.radius)
    c2, r2 = a2.center, abs(a2.radius)
    d = distance(c1, c2)
    if d <= ON_SHAPE_EPS:
        if abs(r1 - r2) <= ON_SHAPE_EPS:
            return _arc_overlap(a1, a2)
        return []  # concentric
    if d > r1 + r2 + ON_SHAPE_EPS or d < abs(r1 - r2) - ON_SHAPE_EPS:
        return []
    a = (r1*r1 - r2*r2 + d*d) / (2*d)
    h = math.sqrt(max(0.0, r1*r1 - a*a))
    u = scale(sub(c2, c1), 1.0/d)
    m = add(c1, scale(u, a))
    perp = Point(-u.y, u.x)
    hits = [pt for pt in (add(m, scale(perp, h)), sub(m, scale(perp, h)))
            if _on_arc(a1, pt) and _on_arc(a2, pt)]
    return _unique(hits)

def _arc_overlap(a1: ArcSeg, a2: ArcSeg) -> list[Shape]:
    """Common pieces of two arcs on the same circle, as CCW arcs or touching points."""
    center, r = a1.center, abs(a1.radius)
    st1, size1 = _ccw_span(a1)
    st2, size2 = _ccw_span(a2)
    if size1 >= TAU and size2 >= TAU:
        return [ArcSeg(center, r, st1, TAU)]
    if size1 >= TAU:
        return [ArcSeg(center, r, st2, size2)]
    if size2 >= TAU:
        return [ArcSeg(center, r, st1, size1)]
    b = st1 + normalize(st2 - st1)[0]
    out = []
    for lo2 in (b - TAU, b):
        lo = max(st1, lo2); hi = min(st1 + size1, lo2 + size2)
        if hi - lo > ON_SHAPE_EPS:
            out.append(ArcSeg(center, r, lo, hi - lo))
        elif hi - lo >= -ON_SHAPE_EPS:
            out.append(PointShape(_circle_point(center, r, lo)))
    return out
