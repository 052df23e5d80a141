# geometry/plane.py
from typing import List
from core.vector import Point3, Vector3
from core.ray import Ray
from core.utils import PLANE_EPSILON
from geometry.hittable import Hittable

class Plane(Hittable):
    """
    The infinite xz plane (y = 0) in object space.
    """
    def local_intersect(self, ray: Ray) -> List[float]:
        # Parallel or coplanar rays never cross the plane.
        if abs(ray.direction.y) <= PLANE_EPSILON:
            return []
        return [-ray.origin.y / ray.direction.y]

    def local_normal_at(self, point: Point3) -> Vector3:
        return Vector3(0.0, 1.0, 0.0)
