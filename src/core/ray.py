# core/ray.py
from core.vector import Point3, Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin and direction.

    The direction is not normalized here; callers that need a unit direction
    (shadow, reflection and camera rays) normalize before constructing.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Point3, direction: Vector3):
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Point3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transform(self, matrix) -> "Ray":
        """
        Returns this ray carried through a Transform; origin as a point,
        direction as a vector. The direction is left unnormalized so that t
        keeps its meaning between object and world space.
        """
        return Ray(matrix.apply(self.origin), matrix.apply(self.direction))

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
