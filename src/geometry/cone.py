# geometry/cone.py
import math
from typing import List
from core.vector import Point3, Vector3
from core.ray import Ray
from core.utils import AXIS_EPSILON, EPSILON
from geometry.hittable import TruncatedHittable
from geometry.solvers import quadratic_roots

# Normal returned at the apex, where the surface has no defined tangent plane.
APEX_NORMAL = Vector3(0.0, 1.0, 0.0)

class Cone(TruncatedHittable):
    """
    Double-napped cone around the object-space y axis; the radius at height y
    is |y| and the two nappes meet at the origin.
    """
    def local_intersect(self, ray: Ray) -> List[float]:
        o, d = ray.origin, ray.direction
        ts = []

        a = d.x * d.x - d.y * d.y + d.z * d.z
        b = 2.0 * (o.x * d.x - o.y * d.y + o.z * d.z)
        c = o.x * o.x - o.y * o.y + o.z * o.z

        if abs(a) < AXIS_EPSILON:
            # Parallel to one nappe: at most one crossing of the other.
            if abs(b) >= AXIS_EPSILON:
                t = -c / (2.0 * b)
                if self.within_bounds(o.y + t * d.y):
                    ts.append(t)
        else:
            count, t0, t1 = quadratic_roots(a, b, c)
            if count:
                for t in (t0, t1):
                    if self.within_bounds(o.y + t * d.y):
                        ts.append(t)

        ts.extend(self.cap_intersections(ray))
        return ts

    def cap_radius_squared(self, y: float) -> float:
        return y * y

    def local_normal_at(self, point: Point3) -> Vector3:
        if abs(point.y) <= EPSILON:
            return APEX_NORMAL
        cap = self.cap_normal(point, abs(point.y))
        if cap is not None:
            return cap

        dist = math.sqrt(point.x * point.x + point.z * point.z)
        if point.y > 0.0:
            return Vector3(point.x, -dist, point.z)
        return Vector3(point.x, dist, point.z)
