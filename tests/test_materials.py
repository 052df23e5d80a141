"""Unit tests for materials, patterns, presets and Phong lighting."""

import math

import pytest

from core.transform import Transform
from core.vector import BLACK, WHITE, Point3, Vector3
from geometry import Sphere
from materials.light import PointLight
from materials.lighting import lighting
from materials.material import Material
from materials.patterns import (CheckerPattern, GradientPattern, RingPattern, SolidPattern,
                                StripePattern)
from materials.presets import (ColorPresets, DielectricPresets, MetalPresets, PatternPresets,
                               glass_sphere)
from helpers import SQRT2_2, PointPattern, assert_color


class TestMaterial:
    """Tests for defaults and validation."""

    def test_defaults(self):
        m = Material()
        assert m.color == WHITE
        assert (m.ambient, m.diffuse, m.specular, m.shininess) == (0.1, 0.9, 0.9, 200.0)
        assert (m.reflective, m.transparency, m.refractive_index) == (0.0, 0.0, 1.0)
        assert m.pattern is None

    @pytest.mark.parametrize("field", ["ambient", "diffuse", "specular", "shininess",
                                       "reflective", "transparency"])
    def test_negative_factor_rejected(self, field):
        with pytest.raises(ValueError):
            Material(**{field: -0.1})

    @pytest.mark.parametrize("index", [0.0, -1.5])
    def test_non_positive_refractive_index_rejected(self, index):
        with pytest.raises(ValueError):
            Material(refractive_index=index)

    def test_pattern_overrides_color(self):
        m = Material(Vector3(1, 0, 0), pattern=SolidPattern(Vector3(0, 0, 1)))
        assert m.color_at_object(Sphere(), Point3(0, 0, -1)) == Vector3(0, 0, 1)


class TestPatterns:
    """Tests for the procedural patterns."""

    def test_stripes_alternate_in_x_only(self):
        p = StripePattern(WHITE, BLACK)
        for y in (0, 1, 2):
            assert p.color_at(Point3(0, y, 0)) is WHITE
        for z in (0, 1, 2):
            assert p.color_at(Point3(0, 0, z)) is WHITE
        assert p.color_at(Point3(0.9, 0, 0)) is WHITE
        assert p.color_at(Point3(1, 0, 0)) is BLACK
        assert p.color_at(Point3(-0.1, 0, 0)) is BLACK
        assert p.color_at(Point3(-1, 0, 0)) is BLACK
        assert p.color_at(Point3(-1.1, 0, 0)) is WHITE

    def test_gradient_interpolates(self):
        p = GradientPattern(WHITE, BLACK)
        assert p.color_at(Point3(0, 0, 0)) == WHITE
        assert_color(p.color_at(Point3(0.25, 0, 0)), (0.75, 0.75, 0.75))
        assert_color(p.color_at(Point3(0.5, 0, 0)), (0.5, 0.5, 0.5))
        assert_color(p.color_at(Point3(0.75, 0, 0)), (0.25, 0.25, 0.25))

    def test_ring_extends_in_x_and_z(self):
        p = RingPattern(WHITE, BLACK)
        assert p.color_at(Point3(0, 0, 0)) is WHITE
        assert p.color_at(Point3(1, 0, 0)) is BLACK
        assert p.color_at(Point3(0, 0, 1)) is BLACK
        assert p.color_at(Point3(0.708, 0, 0.708)) is BLACK

    @pytest.mark.parametrize("point, expected_white", [
        ((0, 0, 0), True), ((0.99, 0, 0), True), ((1.01, 0, 0), False),
        ((0, 0.99, 0), True), ((0, 1.01, 0), False),
        ((0, 0, 0.99), True), ((0, 0, 1.01), False),
    ])
    def test_checkers_repeat_in_three_dimensions(self, point, expected_white):
        p = CheckerPattern(WHITE, BLACK)
        assert (p.color_at(Point3(*point)) is WHITE) == expected_white

    def test_object_transform(self):
        shape = Sphere(Transform().scale(2, 2, 2))
        p = PointPattern()
        assert_color(p.color_at_object(shape, Point3(2, 3, 4)), (1, 1.5, 2))

    def test_pattern_transform(self):
        p = PointPattern(Transform().scale(2, 2, 2))
        assert_color(p.color_at_object(Sphere(), Point3(2, 3, 4)), (1, 1.5, 2))

    def test_object_and_pattern_transform(self):
        shape = Sphere(Transform().scale(2, 2, 2))
        p = PointPattern(Transform().translate(0.5, 1, 1.5))
        assert_color(p.color_at_object(shape, Point3(2.5, 3, 3.5)), (0.75, 0.5, 0.25))

    def test_singular_pattern_transform_rejected(self):
        with pytest.raises(ValueError):
            StripePattern(WHITE, BLACK, Transform().scale(0, 1, 1))


class TestPresets:
    """Tests for the preset factories."""

    def test_glass_sphere(self):
        s = glass_sphere()
        assert s.transform == Transform()
        assert s.material.transparency == 1.0
        assert s.material.refractive_index == 1.5

    def test_presets_are_fresh_instances(self):
        assert DielectricPresets.glass() is not DielectricPresets.glass()

    def test_dielectrics_are_transparent(self):
        for factory in (DielectricPresets.glass, DielectricPresets.water,
                        DielectricPresets.diamond, DielectricPresets.air_bubble):
            m = factory()
            assert m.transparency > 0 and m.refractive_index >= 1.0

    def test_metals_reflect(self):
        for factory in (MetalPresets.mirror, MetalPresets.chrome, MetalPresets.gold):
            assert factory().reflective > 0

    def test_pattern_presets(self):
        assert isinstance(PatternPresets.checkerboard().pattern, CheckerPattern)
        stripes = PatternPresets.stripes(ColorPresets.RED, ColorPresets.BLUE)
        assert isinstance(stripes.pattern, StripePattern)
        assert ColorPresets.matte(ColorPresets.RED).specular == 0.0


class TestLighting:
    """Tests for the Phong model with a single point light."""

    position = Point3(0, 0, 0)
    normalv = Vector3(0, 0, -1)

    def test_eye_between_light_and_surface(self):
        light = PointLight(Point3(0, 0, -10), Vector3(1, 1, 1))
        result = lighting(Material(), light, self.position, Vector3(0, 0, -1), self.normalv)
        assert_color(result, (1.9, 1.9, 1.9))

    def test_eye_offset_45_degrees(self):
        light = PointLight(Point3(0, 0, -10), Vector3(1, 1, 1))
        result = lighting(Material(), light, self.position, Vector3(0, SQRT2_2, -SQRT2_2), self.normalv)
        assert_color(result, (1.0, 1.0, 1.0))

    def test_light_offset_45_degrees(self):
        light = PointLight(Point3(0, 10, -10), Vector3(1, 1, 1))
        result = lighting(Material(), light, self.position, Vector3(0, 0, -1), self.normalv)
        assert_color(result, (0.7364, 0.7364, 0.7364))

    def test_eye_in_reflection_path(self):
        light = PointLight(Point3(0, 10, -10), Vector3(1, 1, 1))
        result = lighting(Material(), light, self.position, Vector3(0, -SQRT2_2, -SQRT2_2), self.normalv)
        assert_color(result, (1.6364, 1.6364, 1.6364))

    def test_light_behind_surface(self):
        light = PointLight(Point3(0, 0, 10), Vector3(1, 1, 1))
        result = lighting(Material(), light, self.position, Vector3(0, 0, -1), self.normalv)
        assert_color(result, (0.1, 0.1, 0.1))

    def test_surface_in_shadow(self):
        light = PointLight(Point3(0, 0, -10), Vector3(1, 1, 1))
        result = lighting(Material(), light, self.position, Vector3(0, 0, -1), self.normalv, True)
        assert_color(result, (0.1, 0.1, 0.1))

    def test_pattern_applied(self):
        m = Material(ambient=1, diffuse=0, specular=0, pattern=StripePattern(WHITE, BLACK))
        light = PointLight(Point3(0, 0, -10), Vector3(1, 1, 1))
        eyev = Vector3(0, 0, -1)
        shape = Sphere()
        c1 = lighting(m, light, Point3(0.9, 0, 0), eyev, self.normalv, False, shape)
        c2 = lighting(m, light, Point3(1.1, 0, 0), eyev, self.normalv, False, shape)
        assert c1 == WHITE
        assert c2 == BLACK

    def test_light_intensity_tints_result(self):
        light = PointLight(Point3(0, 0, -10), Vector3(1, 0, 0))
        result = lighting(Material(), light, self.position, Vector3(0, 0, -1), self.normalv)
        assert_color(result, (1.9, 0, 0))
