"""Point arithmetic. Every operation returns a new Point."""
import math
from .types import Point


def add(a: Point, b: Point) -> Point:
    return Point(a.x+b.x, a.y+b.y)

def sub(a: Point, b: Point) -> Point:
    return Point(a.x-b.x, a.y-b.y)

def scale(p, k) -> Point:
    """Multiply a point by a scalar; the scalar may come first or second."""
    if isinstance(p, Point):
        return Point(p.x*k, p.y*k)
    return Point(k.x*p, k.y*p)

def dot(a: Point, b: Point) -> float:
    return a.x*b.x + a.y*b.y

def distance(a: Point, b: Point) -> float:
    """Euclidean distance. Zero only for bit-identical points; no tolerance applied."""
    d = sub(a, b)
    return math.sqrt(dot(d, d))

def cross(a: Point, b: Point) -> float:
    """z component of the 3D cross product; positive when b is CCW of a."""
    return a.x*b.y - a.y*b.x
