"""Angle reduction with revolution counting."""
import math
from .constants import TAU


def normalize(angle: float) -> tuple[float, int]:
    """Reduce *angle* to [0, 2*pi) and report the whole revolutions removed.

    Returns (residue, revs) with angle ~= residue + revs*TAU. Non-finite
    input gives (nan, 0).
    """
    if not math.isfinite(angle):
        return math.nan, 0
    revs = math.floor(angle / TAU)
    residue = angle - revs*TAU
    # floor of the quotient can be off by one after rounding
    if residue >= TAU:
        residue -= TAU; revs += 1
    elif residue < 0:
        residue += TAU; revs -= 1
        if residue >= TAU:
            residue = 0.0; revs += 1
    return residue, revs

def angle_delta(start: float, end: float) -> float:
    """Signed shortest turn from *start* to *end*, in (-pi, pi]."""
    x, _ = normalize(end - start)
    if x > math.pi:
        return x - TAU
    return x
