# materials/patterns.py
import math
from typing import Optional
from core.vector import Point3, Vector3
from core.transform import Transform

class Pattern:
    """Base class for all procedural color patterns."""
    def __init__(self, transform: Optional[Transform] = None):
        self.set_transform(transform if transform is not None else Transform())

    def set_transform(self, transform: Transform):
        self.transform = transform
        self.inverse = transform.inverse()

    def color_at(self, point: Point3) -> Vector3:
        """Sample the pattern at a point in pattern space."""
        raise NotImplementedError("color_at() must be implemented by pattern subclasses.")

    def color_at_object(self, shape, point: Point3) -> Vector3:
        """Sample the pattern at a world-space point on the given shape."""
        object_point = shape.world_to_object(point)
        pattern_point = self.inverse.apply(object_point)
        return self.color_at(pattern_point)

class SolidPattern(Pattern):
    """A single flat color."""
    def __init__(self, color: Vector3, transform: Optional[Transform] = None):
        super().__init__(transform)
        self.color = color

    def color_at(self, point: Point3) -> Vector3:
        return self.color

class TwoColorPattern(Pattern):
    def __init__(self, a: Vector3, b: Vector3, transform: Optional[Transform] = None):
        super().__init__(transform)
        self.a = a
        self.b = b

    def alternate(self, n: int) -> Vector3:
        return self.a if n % 2 == 0 else self.b

class StripePattern(TwoColorPattern):
    """Alternates between a and b every unit along x."""
    def color_at(self, point: Point3) -> Vector3:
        return self.alternate(math.floor(point.x))

class GradientPattern(TwoColorPattern):
    """Blends linearly from a to b across each unit of x."""
    def color_at(self, point: Point3) -> Vector3:
        fraction = point.x - math.floor(point.x)
        return self.a + (self.b - self.a) * fraction

class RingPattern(TwoColorPattern):
    """Concentric rings around the y axis."""
    def color_at(self, point: Point3) -> Vector3:
        return self.alternate(math.floor(math.sqrt(point.x * point.x + point.z * point.z)))

class CheckerPattern(TwoColorPattern):
    """A 3D checker pattern."""
    def color_at(self, point: Point3) -> Vector3:
        return self.alternate(math.floor(point.x) + math.floor(point.y) + math.floor(point.z))
