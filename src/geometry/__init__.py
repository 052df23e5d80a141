from geometry.hittable import Hittable, Intersection, TruncatedHittable
from geometry.sphere import Sphere
from geometry.plane import Plane
from geometry.cube import Cube
from geometry.cylinder import Cylinder
from geometry.cone import Cone
from geometry.world import World, hit

__all__ = [
    "Hittable",
    "TruncatedHittable",
    "Intersection",
    "Sphere",
    "Plane",
    "Cube",
    "Cylinder",
    "Cone",
    "World",
    "hit",
]
