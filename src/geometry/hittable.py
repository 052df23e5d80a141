# geometry/hittable.py
import math
from typing import List, Optional
from core.vector import Point3, Vector3
from core.ray import Ray
from core.transform import Transform
from core.utils import AXIS_EPSILON, EPSILON
from geometry.solvers import within_radius
from materials.material import Material

class Intersection:
    """
    Records a ray parameter t at which a ray meets a shape.

    Two records are only ever the same record by identity; the shading code
    relies on this to find the hit inside a candidate list.
    """
    __slots__ = ("t", "object")

    def __init__(self, t: float, obj: "Hittable"):
        self.t = t              # Ray parameter at intersection.
        self.object = obj       # The shape that was hit.

    def __repr__(self) -> str:
        return f"Intersection(t={self.t}, object={self.object!r})"

class Hittable:
    """
    Abstract base for the analytic shapes.

    Each shape lives in its own object space; intersect() and normal_at()
    take world-space input, move it into object space through the cached
    inverse transform and defer to local_intersect() / local_normal_at().
    """
    def __init__(self, transform: Optional[Transform] = None, material: Optional[Material] = None):
        self.material = material if material is not None else Material()
        self.set_transform(transform if transform is not None else Transform())

    def set_transform(self, transform: Transform):
        """
        Sets the object-to-world transform.

        Raises:
            ValueError: If the transform cannot be inverted.
        """
        inverse = transform.inverse()
        self.transform = transform
        self.inverse = inverse
        self.normal_transform = inverse.transpose()

    def set_material(self, material: Material):
        self.material = material

    def world_to_object(self, point: Point3) -> Point3:
        return self.inverse.apply(point)

    def intersect(self, ray: Ray) -> List[Intersection]:
        """
        Intersects a world-space ray with the shape. The result is ordered by
        ascending t; equal roots are both kept.
        """
        local_ray = ray.transform(self.inverse)
        return [Intersection(t, self) for t in sorted(self.local_intersect(local_ray))]

    def normal_at(self, point: Point3) -> Vector3:
        """
        World-space unit normal at a world-space point on the surface.
        """
        local_normal = self.local_normal_at(self.world_to_object(point))
        # Applying as a vector drops the homogeneous component of the
        # inverse-transpose product.
        return self.normal_transform.apply(local_normal).normalize()

    def local_intersect(self, ray: Ray) -> List[float]:
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    def local_normal_at(self, point: Point3) -> Vector3:
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={id(self):#x})"

class TruncatedHittable(Hittable):
    """
    Base for shapes that extend along the object-space y axis (cylinders and
    cones) and can be cut at y = minimum / y = maximum, optionally capped.

    Untruncated bounds are -inf / +inf; caps are never tested on an infinite
    bound.
    """
    def __init__(self, minimum: float = -math.inf, maximum: float = math.inf, closed: bool = False,
                 transform: Optional[Transform] = None, material: Optional[Material] = None):
        super().__init__(transform, material)
        self.set_truncation(minimum, maximum)
        self.closed = closed

    def set_truncation(self, minimum: float, maximum: float):
        """
        Raises:
            ValueError: If minimum is greater than maximum.
        """
        if math.isnan(minimum) or math.isnan(maximum) or minimum > maximum:
            raise ValueError(f"Invalid truncation range [{minimum}, {maximum}]")
        self.minimum = float(minimum)
        self.maximum = float(maximum)

    def set_closed(self, closed: bool):
        self.closed = closed

    def within_bounds(self, y: float) -> bool:
        return self.minimum < y < self.maximum

    def cap_radius_squared(self, y: float) -> float:
        raise NotImplementedError("cap_radius_squared() must be implemented by subclasses.")

    def cap_intersections(self, ray: Ray) -> List[float]:
        o, d = ray.origin, ray.direction
        if not self.closed or abs(d.y) <= AXIS_EPSILON:
            return []
        ts = []
        for bound in (self.minimum, self.maximum):
            if not math.isfinite(bound):
                continue
            t = (bound - o.y) / d.y
            if within_radius(o.x, o.z, d.x, d.z, t, self.cap_radius_squared(bound)):
                ts.append(t)
        return ts

    def cap_normal(self, point: Point3, radius: float) -> Optional[Vector3]:
        """
        Normal of the end cap containing point, or None when point is on the
        side wall or the shape is open.
        """
        if not self.closed:
            return None
        dist = math.sqrt(point.x * point.x + point.z * point.z)
        if dist <= radius and point.y >= self.maximum - EPSILON:
            return Vector3(0.0, 1.0, 0.0)
        if dist <= radius and point.y <= self.minimum + EPSILON:
            return Vector3(0.0, -1.0, 0.0)
        return None
