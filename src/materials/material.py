# materials/material.py
from typing import Optional
from core.vector import Point3, Vector3, WHITE
from materials.patterns import Pattern

class Material:
    """
    Phong surface description plus the reflective / transparent factors used
    by the recursive shader.

    ambient, diffuse, specular are typically in [0, 1]; shininess is typically
    10 to 200. A pattern, when set, overrides the flat color.
    """
    def __init__(self, color: Vector3 = WHITE, ambient: float = 0.1, diffuse: float = 0.9,
                 specular: float = 0.9, shininess: float = 200.0, reflective: float = 0.0,
                 transparency: float = 0.0, refractive_index: float = 1.0,
                 pattern: Optional[Pattern] = None):
        for name, value in (("ambient", ambient), ("diffuse", diffuse), ("specular", specular),
                            ("shininess", shininess), ("reflective", reflective),
                            ("transparency", transparency)):
            if value < 0:
                raise ValueError(f"Material {name} must be non-negative, got {value}")
        if refractive_index <= 0:
            raise ValueError(f"Material refractive_index must be positive, got {refractive_index}")

        self.color = color
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess
        self.reflective = reflective
        self.transparency = transparency
        self.refractive_index = refractive_index
        self.pattern = pattern

    def color_at_object(self, shape, point: Point3) -> Vector3:
        """
        Surface color at a world-space point of shape.
        """
        if self.pattern is None:
            return self.color
        return self.pattern.color_at_object(shape, point)

    def __repr__(self) -> str:
        return (f"Material(color={self.color!r}, ambient={self.ambient}, diffuse={self.diffuse}, "
                f"specular={self.specular}, shininess={self.shininess}, reflective={self.reflective}, "
                f"transparency={self.transparency}, refractive_index={self.refractive_index})")
