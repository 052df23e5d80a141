# geometry/cylinder.py
from typing import List
from core.vector import Point3, Vector3
from core.ray import Ray
from core.utils import AXIS_EPSILON
from geometry.hittable import TruncatedHittable
from geometry.solvers import quadratic_roots

class Cylinder(TruncatedHittable):
    """
    Unit-radius tube around the object-space y axis, optionally truncated to
    (minimum, maximum) and capped.
    """
    def local_intersect(self, ray: Ray) -> List[float]:
        o, d = ray.origin, ray.direction
        ts = []

        # A ray parallel to the axis can only meet the caps.
        a = d.x * d.x + d.z * d.z
        if abs(a) >= AXIS_EPSILON:
            b = 2.0 * (o.x * d.x + o.z * d.z)
            c = o.x * o.x + o.z * o.z - 1.0
            count, t0, t1 = quadratic_roots(a, b, c)
            if count:
                for t in (t0, t1):
                    if self.within_bounds(o.y + t * d.y):
                        ts.append(t)

        ts.extend(self.cap_intersections(ray))
        return ts

    def cap_radius_squared(self, y: float) -> float:
        return 1.0

    def local_normal_at(self, point: Point3) -> Vector3:
        cap = self.cap_normal(point, 1.0)
        if cap is not None:
            return cap
        return Vector3(point.x, 0.0, point.z)
