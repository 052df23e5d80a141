"""Pytest configuration for ray tracer tests.

Provides the shared two-sphere scene most shading tests are written against.
"""

import pytest

from core.transform import Transform
from core.vector import Point3, Vector3
from geometry.sphere import Sphere
from geometry.world import World
from materials.light import PointLight
from materials.material import Material


@pytest.fixture
def default_world():
    """Two concentric spheres lit from the upper left front.

    The outer unit sphere is green-ish and dull, the inner one is scaled to
    radius 0.5 with the default material.
    """
    outer = Sphere(material=Material(Vector3(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere(Transform().scale(0.5, 0.5, 0.5))
    light = PointLight(Point3(-10, 10, -10), Vector3(1, 1, 1))
    return World([outer, inner], light)
