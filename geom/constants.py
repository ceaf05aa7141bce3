"""Named numeric constants for the geometry core.

Angles in radians. Tolerances apply only to the intersection solver;
parametrization and nearest-point search are exact.
"""
import math

TAU = 2.0 * math.pi               # one full revolution

# Intersection tolerances
PARALLEL_EPS = 1e-12              # |cross| below this: lines treated as parallel
ON_SHAPE_EPS = 1e-9               # slack on parameters, discriminants, radii

# Demo scene
DEMO_SAMPLES = 16                 # polyline pieces per shape
