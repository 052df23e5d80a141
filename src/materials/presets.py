# materials/presets.py
from typing import Optional
from core.vector import Vector3
from core.transform import Transform
from materials.material import Material
from materials.patterns import CheckerPattern, StripePattern
from geometry.sphere import Sphere

def glass_sphere(transform: Optional[Transform] = None, refractive_index: float = 1.5) -> Sphere:
    """A fully transparent unit sphere, handy for nesting refractive volumes."""
    return Sphere(transform, Material(transparency=1.0, refractive_index=refractive_index))

class DielectricPresets:
    """Predefined transparent materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Material:
        return Material(Vector3(0.05, 0.05, 0.05), ambient=0.0, diffuse=0.1, specular=1.0,
                        shininess=300.0, reflective=0.9, transparency=0.9, refractive_index=1.5)

    @staticmethod
    def water() -> Material:
        return Material(Vector3(0.02, 0.05, 0.08), ambient=0.0, diffuse=0.1, specular=1.0,
                        shininess=300.0, reflective=0.9, transparency=0.9, refractive_index=1.333)

    @staticmethod
    def diamond() -> Material:
        return Material(Vector3(0.02, 0.02, 0.02), ambient=0.0, diffuse=0.1, specular=1.0,
                        shininess=300.0, reflective=0.9, transparency=0.9, refractive_index=2.417)

    @staticmethod
    def air_bubble() -> Material:
        return Material(Vector3(0.0, 0.0, 0.0), ambient=0.0, diffuse=0.0, specular=0.9,
                        shininess=300.0, reflective=0.9, transparency=0.9, refractive_index=1.0000034)

class MetalPresets:
    """Mirror-like materials."""

    @staticmethod
    def mirror() -> Material:
        return Material(Vector3(0.1, 0.1, 0.1), ambient=0.0, diffuse=0.1, specular=1.0,
                        shininess=300.0, reflective=1.0)

    @staticmethod
    def chrome() -> Material:
        return Material(Vector3(0.6, 0.6, 0.6), ambient=0.05, diffuse=0.3, specular=0.9,
                        shininess=250.0, reflective=0.6)

    @staticmethod
    def gold() -> Material:
        return Material(Vector3(1.0, 0.78, 0.34), ambient=0.1, diffuse=0.5, specular=0.8,
                        shininess=150.0, reflective=0.35)

class ColorPresets:
    """Common color presets for materials."""

    # Warm colors
    RED = Vector3(0.9, 0.2, 0.2)
    ORANGE = Vector3(0.9, 0.6, 0.1)
    YELLOW = Vector3(0.9, 0.9, 0.1)

    # Cool colors
    BLUE = Vector3(0.2, 0.3, 0.9)
    GREEN = Vector3(0.2, 0.8, 0.2)
    PURPLE = Vector3(0.6, 0.2, 0.8)

    # Neutral colors
    WHITE = Vector3(0.9, 0.9, 0.9)
    GRAY = Vector3(0.5, 0.5, 0.5)
    BLACK = Vector3(0.1, 0.1, 0.1)

    @staticmethod
    def matte(color: Vector3) -> Material:
        """Create a matte material with the given color."""
        return Material(color, diffuse=0.9, specular=0.0)

    @staticmethod
    def glossy(color: Vector3, reflective: float = 0.1) -> Material:
        return Material(color, diffuse=0.7, specular=0.3, shininess=200.0, reflective=reflective)

class PatternPresets:
    """Predefined patterned materials."""

    @staticmethod
    def checkerboard(color1: Optional[Vector3] = None, color2: Optional[Vector3] = None,
                     reflective: float = 0.0) -> Material:
        """Create a checkerboard floor material with default or custom colors."""
        if color1 is None:
            color1 = ColorPresets.WHITE
        if color2 is None:
            color2 = ColorPresets.BLACK
        return Material(specular=0.0, reflective=reflective, pattern=CheckerPattern(color1, color2))

    @staticmethod
    def stripes(color1: Vector3, color2: Vector3, width: float = 0.25) -> Material:
        return Material(specular=0.2, pattern=StripePattern(color1, color2, Transform().scale(width, 1.0, 1.0)))
