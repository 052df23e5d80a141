# geometry/cube.py
from typing import List
from core.vector import Point3, Vector3
from core.ray import Ray
from core.utils import AXIS_EPSILON
from geometry.hittable import Hittable
from geometry.solvers import cube_roots

class Cube(Hittable):
    """
    Axis-aligned cube spanning [-1, 1] on every object-space axis.
    """
    def local_intersect(self, ray: Ray) -> List[float]:
        o, d = ray.origin, ray.direction
        count, tmin, tmax = cube_roots(o.x, o.y, o.z, d.x, d.y, d.z, AXIS_EPSILON)
        if count == 0:
            return []
        return [tmin, tmax]

    def local_normal_at(self, point: Point3) -> Vector3:
        abs_x, abs_y, abs_z = abs(point.x), abs(point.y), abs(point.z)
        maxc = max(abs_x, abs_y, abs_z)

        # The face is picked by the dominant component; x wins ties, then y.
        if maxc == abs_x:
            return Vector3(1.0 if point.x >= 0 else -1.0, 0.0, 0.0)
        if maxc == abs_y:
            return Vector3(0.0, 1.0 if point.y >= 0 else -1.0, 0.0)
        return Vector3(0.0, 0.0, 1.0 if point.z >= 0 else -1.0)
