"""Unit tests for per-hit shading state and Schlick reflectance.

Tests cover:
- prepare_computations geometry (point, eye, normal, inside flag)
- Biased over/under points and the reflection vector
- n1/n2 through nested transparent volumes
- Schlick reflectance, including total internal reflection
"""

import math

import pytest

from core.ray import Ray
from core.transform import Transform
from core.utils import EPSILON
from core.vector import Point3, Vector3
from geometry import Intersection, Plane, Sphere
from materials.presets import glass_sphere
from renderer.shading import prepare_computations, refractive_indices, schlick, schlick_reflectance
from helpers import SQRT2_2


class TestPrepareComputations:
    """Tests for the shading context of a single hit."""

    def test_outside_hit(self):
        r = Ray(Point3(0, 0, -5), Vector3(0, 0, 1))
        shape = Sphere()
        comps = prepare_computations(Intersection(4, shape), r)
        assert comps.t == 4
        assert comps.object is shape
        assert comps.point == Point3(0, 0, -1)
        assert comps.eyev == Vector3(0, 0, -1)
        assert comps.normalv == Vector3(0, 0, -1)
        assert comps.inside is False

    def test_inside_hit_flips_normal(self):
        r = Ray(Point3(0, 0, 0), Vector3(0, 0, 1))
        comps = prepare_computations(Intersection(1, Sphere()), r)
        assert comps.point == Point3(0, 0, 1)
        assert comps.eyev == Vector3(0, 0, -1)
        assert comps.inside is True
        assert comps.normalv == Vector3(0, 0, -1)

    def test_over_point_is_offset_above_surface(self):
        r = Ray(Point3(0, 0, -5), Vector3(0, 0, 1))
        shape = Sphere(Transform().translate(0, 0, 1))
        comps = prepare_computations(Intersection(5, shape), r)
        assert comps.over_point.z < -EPSILON / 2
        assert comps.point.z > comps.over_point.z

    def test_under_point_is_offset_below_surface(self):
        r = Ray(Point3(0, 0, -5), Vector3(0, 0, 1))
        shape = glass_sphere(Transform().translate(0, 0, 1))
        i = Intersection(5, shape)
        comps = prepare_computations(i, r, [i])
        assert comps.under_point.z > EPSILON / 2
        assert comps.point.z < comps.under_point.z

    def test_reflection_vector(self):
        r = Ray(Point3(0, 1, -1), Vector3(0, -SQRT2_2, SQRT2_2))
        comps = prepare_computations(Intersection(math.sqrt(2), Plane()), r)
        assert comps.reflectv.isclose(Vector3(0, SQRT2_2, SQRT2_2))

    def test_computations_are_immutable(self):
        r = Ray(Point3(0, 0, -5), Vector3(0, 0, 1))
        comps = prepare_computations(Intersection(4, Sphere()), r)
        with pytest.raises(AttributeError):
            comps.t = 5

    def test_default_candidates_is_the_hit_alone(self):
        r = Ray(Point3(0, 0, -5), Vector3(0, 0, 1))
        shape = glass_sphere()
        comps = prepare_computations(Intersection(4, shape), r)
        assert (comps.n1, comps.n2) == (1.0, 1.5)


class TestRefractiveIndices:
    """n1/n2 follow the stack of volumes the ray is inside."""

    def test_nested_glass_spheres(self):
        a = glass_sphere(Transform().scale(2, 2, 2), 1.5)
        b = glass_sphere(Transform().translate(0, 0, -0.25), 2.0)
        c = glass_sphere(Transform().translate(0, 0, 0.25), 2.5)
        r = Ray(Point3(0, 0, -4), Vector3(0, 0, 1))
        xs = [Intersection(2, a), Intersection(2.75, b), Intersection(3.25, c),
              Intersection(4.75, b), Intersection(5.25, c), Intersection(6, a)]
        expected = [(1.0, 1.5), (1.5, 2.0), (2.0, 2.5), (2.5, 2.5), (2.5, 1.5), (1.5, 1.0)]
        for i, (n1, n2) in zip(xs, expected):
            comps = prepare_computations(i, r, xs)
            assert (comps.n1, comps.n2) == (n1, n2)

    def test_shapes_matched_by_identity(self):
        # Two distinct shapes with identical materials are separate volumes.
        a = glass_sphere()
        b = glass_sphere()
        xs = [Intersection(1, a), Intersection(2, b), Intersection(3, a), Intersection(4, b)]
        assert refractive_indices(xs[2], xs) == (1.5, 1.5)
        assert refractive_indices(xs[3], xs) == (1.5, 1.0)

    def test_hit_missing_from_candidates(self):
        s = glass_sphere()
        assert refractive_indices(Intersection(1, s), [Intersection(1, s)]) == (1.0, 1.0)


class TestSchlick:
    """Tests for the Fresnel approximation."""

    def test_total_internal_reflection(self):
        shape = glass_sphere()
        r = Ray(Point3(0, 0, SQRT2_2), Vector3(0, 1, 0))
        xs = [Intersection(-SQRT2_2, shape), Intersection(SQRT2_2, shape)]
        comps = prepare_computations(xs[1], r, xs)
        assert schlick(comps) == 1.0

    def test_perpendicular_view(self):
        shape = glass_sphere()
        r = Ray(Point3(0, 0, 0), Vector3(0, 1, 0))
        xs = [Intersection(-1, shape), Intersection(1, shape)]
        comps = prepare_computations(xs[1], r, xs)
        assert schlick(comps) == pytest.approx(0.04, abs=1e-5)

    def test_small_angle_with_n2_greater(self):
        shape = glass_sphere()
        r = Ray(Point3(0, 0.99, -2), Vector3(0, 0, 1))
        xs = [Intersection(1.8589, shape)]
        comps = prepare_computations(xs[0], r, xs)
        assert schlick(comps) == pytest.approx(0.48873, abs=1e-4)

    def test_matching_indices_reflect_nothing_head_on(self):
        assert schlick_reflectance(1.0, 1.5, 1.5) == 0.0

    def test_result_in_unit_interval(self):
        for cos in (0.0, 0.1, 0.5, 0.9, 1.0):
            for n1, n2 in ((1.0, 1.5), (1.5, 1.0), (1.0, 2.417)):
                assert 0.0 <= schlick_reflectance(cos, n1, n2) <= 1.0
