# core/utils.py
from core.vector import Vector3

# Bias applied along the normal for over_point / under_point.
EPSILON = 1e-5

# Plane parallelism tolerance on the object-space ray direction.
PLANE_EPSILON = 1e-4

# Slab, cylinder and cone degeneracy tolerance.
AXIS_EPSILON = 1e-5

# Only guards a zero-length object-space direction for spheres.
DEGENERATE_EPSILON = 1e-12

# reflective / transparency values below this contribute nothing.
FACTOR_THRESHOLD = 1e-5

# Default recursion budget for reflection and refraction bounces.
DEFAULT_DEPTH = 5

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)