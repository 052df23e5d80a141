# geometry/sphere.py
from typing import List
from core.vector import Point3, Vector3, ORIGIN
from core.ray import Ray
from core.utils import DEGENERATE_EPSILON
from geometry.hittable import Hittable
from geometry.solvers import quadratic_roots

class Sphere(Hittable):
    """
    Unit sphere centred on the object-space origin. Position and radius come
    from the transform.
    """
    def local_intersect(self, ray: Ray) -> List[float]:
        sphere_to_ray = ray.origin - ORIGIN
        a = ray.direction.dot(ray.direction)
        if a < DEGENERATE_EPSILON:
            return []
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        count, t0, t1 = quadratic_roots(a, b, c)
        if count == 0:
            return []
        return [t0, t1]

    def local_normal_at(self, point: Point3) -> Vector3:
        return point - ORIGIN
