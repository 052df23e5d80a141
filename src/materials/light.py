# materials/light.py
from core.vector import Point3, Vector3

class PointLight:
    """
    A point light with no size; the only light source a world carries.
    """
    def __init__(self, position: Point3, intensity: Vector3):
        self.position = position
        self.intensity = intensity

    def __repr__(self) -> str:
        return f"PointLight({self.position!r}, {self.intensity!r})"
