"""Print a small scene: sampled polylines and the points nearest a probe.

Usage: python -m geom.demo [x y]
"""
import math, sys

from .types import Point, PointShape, LineSeg, ArcSeg, Shape
from .sampling import approximate, closest_points, project
from .intersect import intersect
from .constants import DEMO_SAMPLES


def build_scene() -> list[Shape]:
    """One of each kind, plus a two-turn clockwise arc."""
    return [
        PointShape(Point(-5.0, 5.0)),
        LineSeg(Point(0.0, 0.0), Point(10.0, 0.0)),
        ArcSeg(Point(0.0, 0.0), 10.0, 0.0, math.pi/2),
        ArcSeg(Point(5.0, 5.0), 2.0, math.pi, -4*math.pi),
    ]

def fmt_pt(p: Point) -> str:
    return f"({p.x:8.4f}, {p.y:8.4f})"

def main(argv: list[str] | None = None):
    argv = sys.argv[1:] if argv is None else argv
    probe = Point(float(argv[0]), float(argv[1])) if len(argv) >= 2 else Point(10.0, 10.0)
    scene = build_scene()

    print(f"=== SCENE ({len(scene)} shapes, {DEMO_SAMPLES} pieces each) ===")
    for shape in scene:
        pts = approximate(shape, DEMO_SAMPLES)
        print(f"  {type(shape).__name__:<10s} {fmt_pt(pts[0])} -> {fmt_pt(pts[-1])}")

    print(f"=== NEAREST TO {fmt_pt(probe)} ===")
    for shape in scene:
        near, cand = project(shape, probe)
        print(f"  {type(shape).__name__:<10s} t={cand.t:.4f}  d={cand.distance:.4f}  at {fmt_pt(near)}")
    print(f"  local candidates: {len(closest_points(scene, probe))}")

    print("=== INTERSECTIONS ===")
    for i in range(len(scene)):
        for j in range(i+1, len(scene)):
            for hit in intersect(scene[i], scene[j]):
                print(f"  {i} x {j}: {hit!r}")


if __name__ == "__main__":
    main()
