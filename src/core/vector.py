# core/vector.py
import math

class Vector3:
    """
    A 3D vector (homogeneous w = 0) supporting arithmetic, dot and cross products,
    and normalization. Colors reuse this class with r, g, b stored in x, y, z.
    """
    w = 0.0

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    def __add__(self, other: "Vector3") -> "Vector3":
        if isinstance(other, Point3):
            return Point3(self.x + other.x, self.y + other.y, self.z + other.z)
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if isinstance(other, Point3):
            raise TypeError("cannot subtract a point from a vector")
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        # Scalar multiplication.
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        # Element-wise (Hadamard) product, used to blend colors.
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3) or isinstance(other, Point3) != isinstance(self, Point3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        l = self.length()
        if l == 0:
            return Vector3(0, 0, 0)
        return self / l

    def isclose(self, other: "Vector3", tol: float = 1e-5) -> bool:
        return (abs(self.x - other.x) <= tol and
                abs(self.y - other.y) <= tol and
                abs(self.z - other.z) <= tol)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


class Point3(Vector3):
    """
    A position in space (homogeneous w = 1).

    point - point gives a Vector3, point +/- vector stays a Point3.
    """
    w = 1.0

    __slots__ = ()

    def __add__(self, other: Vector3) -> "Point3":
        if isinstance(other, Point3):
            raise TypeError("cannot add two points")
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3):
        if isinstance(other, Point3):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self):
        raise TypeError("cannot negate a point")

    def __repr__(self) -> str:
        return f"Point3({self.x}, {self.y}, {self.z})"


ORIGIN = Point3(0.0, 0.0, 0.0)
BLACK = Vector3(0.0, 0.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)
