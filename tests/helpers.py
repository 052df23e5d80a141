"""Shared assertions and test doubles for the ray tracer tests."""

import math

from core.vector import Vector3
from materials.patterns import Pattern

SQRT2_2 = math.sqrt(2) / 2


def assert_color(actual, expected, tol=1e-4):
    """Assert each channel of actual is within tol of expected."""
    expected = Vector3(*expected)
    assert actual.isclose(expected, tol), f"{actual!r} != {expected!r}"


class PointPattern(Pattern):
    """Returns the pattern-space point as a color, to see where a ray landed."""

    def color_at(self, point):
        return Vector3(point.x, point.y, point.z)
