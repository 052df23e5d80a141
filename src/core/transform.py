# core/transform.py
import math
import numpy as np
from core.vector import Point3, Vector3

# Determinants smaller than this are treated as a degenerate scale.
SINGULAR_EPSILON = 1e-12

class Transform:
    """
    An affine 4x4 transform backed by a numpy matrix.

    Builder methods return a new Transform with the operation applied after
    the existing one, so Transform().translate(...).rotate_y(...) translates
    first and rotates second.
    """
    __slots__ = ("matrix", "_rows")

    def __init__(self, matrix=None):
        if matrix is None:
            matrix = np.identity(4, dtype=np.float64)
        self.matrix = np.asarray(matrix, dtype=np.float64)
        if self.matrix.shape != (4, 4):
            raise ValueError(f"Transform needs a 4x4 matrix, got shape {self.matrix.shape}")
        # Plain floats are much faster than numpy for single 4-vectors.
        self._rows = tuple(tuple(float(v) for v in row) for row in self.matrix[:3])

    def __getstate__(self):
        return self.matrix

    def __setstate__(self, state):
        self.__init__(state)

    def _then(self, op: np.ndarray) -> "Transform":
        return Transform(op @ self.matrix)

    def translate(self, x: float, y: float, z: float) -> "Transform":
        op = np.identity(4)
        op[0, 3] = x
        op[1, 3] = y
        op[2, 3] = z
        return self._then(op)

    def scale(self, x: float, y: float, z: float) -> "Transform":
        return self._then(np.diag([x, y, z, 1.0]))

    def rotate_x(self, radians: float) -> "Transform":
        c, s = math.cos(radians), math.sin(radians)
        op = np.identity(4)
        op[1, 1] = c
        op[1, 2] = -s
        op[2, 1] = s
        op[2, 2] = c
        return self._then(op)

    def rotate_y(self, radians: float) -> "Transform":
        c, s = math.cos(radians), math.sin(radians)
        op = np.identity(4)
        op[0, 0] = c
        op[0, 2] = s
        op[2, 0] = -s
        op[2, 2] = c
        return self._then(op)

    def rotate_z(self, radians: float) -> "Transform":
        c, s = math.cos(radians), math.sin(radians)
        op = np.identity(4)
        op[0, 0] = c
        op[0, 1] = -s
        op[1, 0] = s
        op[1, 1] = c
        return self._then(op)

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> "Transform":
        op = np.identity(4)
        op[0, 1] = xy
        op[0, 2] = xz
        op[1, 0] = yx
        op[1, 2] = yz
        op[2, 0] = zx
        op[2, 1] = zy
        return self._then(op)

    def is_invertible(self) -> bool:
        return abs(np.linalg.det(self.matrix)) > SINGULAR_EPSILON

    def inverse(self) -> "Transform":
        """
        Returns the inverse transform.

        Raises:
            ValueError: If the matrix is singular (e.g. a zero scale factor).
        """
        if not self.is_invertible():
            raise ValueError("Transform is not invertible (degenerate scale?)")
        return Transform(np.linalg.inv(self.matrix))

    def transpose(self) -> "Transform":
        return Transform(self.matrix.T)

    def apply(self, v: Vector3) -> Vector3:
        """
        Applies the transform to a Point3 (w = 1) or Vector3 (w = 0) and
        returns the same kind. The resulting w is dropped.
        """
        r0, r1, r2 = self._rows
        x, y, z = v.x, v.y, v.z
        if isinstance(v, Point3):
            return Point3(
                r0[0] * x + r0[1] * y + r0[2] * z + r0[3],
                r1[0] * x + r1[1] * y + r1[2] * z + r1[3],
                r2[0] * x + r2[1] * y + r2[2] * z + r2[3],
            )
        return Vector3(
            r0[0] * x + r0[1] * y + r0[2] * z,
            r1[0] * x + r1[1] * y + r1[2] * z,
            r2[0] * x + r2[1] * y + r2[2] * z,
        )

    def __matmul__(self, other: "Transform") -> "Transform":
        return Transform(self.matrix @ other.matrix)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(np.allclose(self.matrix, other.matrix, atol=1e-9))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Transform({self.matrix.tolist()})"


def view_transform(from_point: Point3, to: Point3, up: Vector3) -> Transform:
    """
    Builds the world-to-eye transform for an eye at from_point looking at to.
    """
    forward = (to - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = np.array([
        [left.x, left.y, left.z, 0.0],
        [true_up.x, true_up.y, true_up.z, 0.0],
        [-forward.x, -forward.y, -forward.z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])
    return Transform(orientation) @ Transform().translate(-from_point.x, -from_point.y, -from_point.z)
