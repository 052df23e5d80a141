# geometry/solvers.py
"""
Scalar root-finding kernels shared by the analytic primitives.

These run for every ray against every primitive, so they are compiled with
numba. They only take and return plain floats so that the shape classes can
stay ordinary Python objects.
"""
import math
from numba import njit

@njit
def quadratic_roots(a, b, c):
    """
    Real roots of a*t^2 + b*t + c = 0 as (count, t0, t1) with t0 <= t1.

    count is 0 when the discriminant is negative, otherwise 2 (a tangent ray
    yields two equal roots, both of which are kept). The caller guards a ~ 0.
    """
    disc = b * b - 4.0 * a * c
    if disc < 0.0:
        return 0, 0.0, 0.0
    sqrt_disc = math.sqrt(disc)
    t0 = (-b - sqrt_disc) / (2.0 * a)
    t1 = (-b + sqrt_disc) / (2.0 * a)
    if t0 > t1:
        t0, t1 = t1, t0
    return 2, t0, t1

@njit
def check_axis(origin, direction, epsilon):
    """
    Slab interval (tmin, tmax) of one axis of the [-1, 1] cube.

    A direction component below epsilon never reaches the other slab face, so
    the bounds are pushed to +/-inf by the sign of the numerator instead of
    dividing by (almost) zero. An origin lying on either face counts as inside
    the slab.
    """
    tmin_numerator = -1.0 - origin
    tmax_numerator = 1.0 - origin
    if abs(direction) >= epsilon:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        tmin = math.inf if tmin_numerator > 0.0 else -math.inf
        tmax = math.inf if tmax_numerator >= 0.0 else -math.inf
    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax

@njit
def cube_roots(ox, oy, oz, dx, dy, dz, epsilon):
    """Returns (count, tmin, tmax) for the axis-aligned [-1, 1] cube."""
    xtmin, xtmax = check_axis(ox, dx, epsilon)
    ytmin, ytmax = check_axis(oy, dy, epsilon)
    ztmin, ztmax = check_axis(oz, dz, epsilon)
    tmin = max(xtmin, ytmin, ztmin)
    tmax = min(xtmax, ytmax, ztmax)
    if tmin > tmax:
        return 0, 0.0, 0.0
    return 2, tmin, tmax

@njit
def within_radius(ox, oz, dx, dz, t, radius_squared):
    """True when the ray at t lies within sqrt(radius_squared) of the y axis."""
    x = ox + t * dx
    z = oz + t * dz
    return x * x + z * z <= radius_squared
