# geometry/world.py
from typing import Iterable, List, Optional
from core.ray import Ray
from core.vector import Vector3, BLACK
from geometry.hittable import Hittable, Intersection
from materials.light import PointLight

class World:
    """
    The scene: a flat list of shapes and a single point light.

    There is no acceleration structure; every ray is tested against every
    object. The world must not be mutated while a render is in flight.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None,
                 light: Optional[PointLight] = None, background: Vector3 = BLACK):
        self.objects: List[Hittable] = list(objects) if objects is not None else []
        self.light = light
        self.background = background

    def add(self, obj: Hittable) -> Hittable:
        self.objects.append(obj)
        return obj

    def clear(self):
        self.objects.clear()

    def intersect(self, ray: Ray) -> List[Intersection]:
        """
        Returns every intersection of the ray with every object, ordered by
        ascending t. The sort is stable, so equal t keep discovery order.
        """
        xs: List[Intersection] = []
        for obj in self.objects:
            xs.extend(obj.intersect(ray))
        xs.sort(key=lambda i: i.t)
        return xs

def hit(xs: List[Intersection]) -> Optional[Intersection]:
    """
    The nearest intersection with t >= 0, or None when every intersection
    lies behind the ray origin. Ties go to the earlier entry.
    """
    return min((i for i in xs if i.t >= 0.0), key=lambda i: i.t, default=None)
