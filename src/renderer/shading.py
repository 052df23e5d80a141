# renderer/shading.py
"""
Per-hit shading state and the Schlick reflectance estimate.

prepare_computations() turns the chosen Intersection into everything the
shader needs: the surface point, eye and normal vectors, the biased points
used as origins for secondary rays, the mirror direction and the refractive
indices on both sides of the surface.
"""
import math
from typing import List, Optional
from numba import njit
from core.ray import Ray
from core.vector import Point3, Vector3
from core.utils import EPSILON, reflect
from geometry.hittable import Hittable, Intersection

# Refractive index of the space outside every object.
VACUUM_INDEX = 1.0

class Computations:
    """
    Immutable shading context for one hit.

    Attributes:
        t: Ray parameter of the hit.
        object: The shape that was hit.
        point: World-space surface point.
        eyev: Unit vector from the point back towards the ray origin.
        normalv: Unit normal, flipped to face eyev when the hit is from inside.
        inside: True when the normal had to be flipped.
        over_point: point nudged EPSILON along normalv (shadow/reflection origin).
        under_point: point nudged EPSILON against normalv (refraction origin).
        reflectv: Incoming direction mirrored about normalv.
        n1: Refractive index of the medium being left.
        n2: Refractive index of the medium being entered.
    """
    __slots__ = ("t", "object", "point", "eyev", "normalv", "inside",
                 "over_point", "under_point", "reflectv", "n1", "n2")

    def __init__(self, t: float, obj: Hittable, point: Point3, eyev: Vector3, normalv: Vector3,
                 inside: bool, over_point: Point3, under_point: Point3, reflectv: Vector3,
                 n1: float, n2: float):
        object.__setattr__(self, "t", t)
        object.__setattr__(self, "object", obj)
        object.__setattr__(self, "point", point)
        object.__setattr__(self, "eyev", eyev)
        object.__setattr__(self, "normalv", normalv)
        object.__setattr__(self, "inside", inside)
        object.__setattr__(self, "over_point", over_point)
        object.__setattr__(self, "under_point", under_point)
        object.__setattr__(self, "reflectv", reflectv)
        object.__setattr__(self, "n1", n1)
        object.__setattr__(self, "n2", n2)

    def __setattr__(self, name, value):
        raise AttributeError("Computations is immutable")

    def __repr__(self) -> str:
        return (f"Computations(t={self.t}, object={self.object!r}, inside={self.inside}, "
                f"n1={self.n1}, n2={self.n2})")

def refractive_indices(hit: Intersection, xs: List[Intersection]):
    """
    Replays the candidate list up to the hit, tracking which transparent
    volumes the ray is inside, and returns (n1, n2) for the hit.

    Entering a shape pushes it, leaving removes it; shapes are matched by
    identity so distinct shapes with equal materials stay distinct.
    """
    containers: List[Hittable] = []
    for i in xs:
        is_hit = i is hit
        if is_hit:
            n1 = containers[-1].material.refractive_index if containers else VACUUM_INDEX

        for index, shape in enumerate(containers):
            if shape is i.object:
                del containers[index]
                break
        else:
            containers.append(i.object)

        if is_hit:
            n2 = containers[-1].material.refractive_index if containers else VACUUM_INDEX
            return n1, n2
    return VACUUM_INDEX, VACUUM_INDEX

def prepare_computations(hit: Intersection, ray: Ray, xs: Optional[List[Intersection]] = None) -> Computations:
    """
    Builds the shading context for a hit.

    Args:
        hit: The intersection being shaded.
        ray: The ray that produced it.
        xs: The full ascending candidate list the hit was selected from;
            needed for n1/n2. Defaults to [hit].

    Returns:
        Computations: The populated shading context.
    """
    if xs is None:
        xs = [hit]

    point = ray.position(hit.t)
    normalv = hit.object.normal_at(point)
    eyev = -ray.direction

    inside = False
    if eyev.dot(normalv) < 0:
        inside = True
        normalv = -normalv

    bias = normalv * EPSILON
    over_point = point + bias
    under_point = point - bias
    reflectv = reflect(ray.direction, normalv)
    n1, n2 = refractive_indices(hit, xs)

    return Computations(hit.t, hit.object, point, eyev, normalv, inside,
                        over_point, under_point, reflectv, n1, n2)

@njit
def schlick_reflectance(cos, n1, n2):
    """
    Schlick's approximation to the Fresnel reflectance for an interface with
    incidence cosine cos going from index n1 into n2.
    """
    if n1 > n2:
        n = n1 / n2
        sin2_t = n * n * (1.0 - cos * cos)
        if sin2_t > 1.0:
            # Total internal reflection.
            return 1.0
        cos = math.sqrt(1.0 - sin2_t)
    r0 = ((n1 - n2) / (n1 + n2)) ** 2
    return r0 + (1.0 - r0) * (1.0 - cos) ** 5

def schlick(comps: Computations) -> float:
    """Fraction of light reflected at the hit described by comps, in [0, 1]."""
    return schlick_reflectance(float(comps.eyev.dot(comps.normalv)), float(comps.n1), float(comps.n2))
