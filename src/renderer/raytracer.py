# renderer/raytracer.py
"""
Recursive Whitted-style shading and the image render loop.

color_at() is the entry point for a single ray: it finds the nearest hit,
lights it with the Phong model (with a hard shadow test against the single
point light) and adds reflected and refracted light by recursing with one
less unit of depth. Running out of depth, missing everything and total
internal reflection are ordinary zero-valued outcomes.

Each call is a pure function of (world, ray, remaining), so rows of an image
can be rendered in separate processes without any coordination.
"""
import logging
import math
import time
from concurrent.futures import ProcessPoolExecutor
from core.ray import Ray
from core.vector import Point3, Vector3, BLACK
from core.utils import DEFAULT_DEPTH, FACTOR_THRESHOLD
from geometry.world import World, hit
from materials.lighting import lighting
from renderer.canvas import Canvas
from renderer.shading import Computations, prepare_computations, schlick

logger = logging.getLogger(__name__)

def is_shadowed(world: World, point: Point3) -> bool:
    """
    True when something lies between point and the world's light.

    point should be an over_point so the surface being shaded cannot occlude
    itself.

    Raises:
        ValueError: If the world has no light.
    """
    if world.light is None:
        raise ValueError("World has no light")
    to_light = world.light.position - point
    distance = to_light.length()
    shadow_ray = Ray(point, to_light.normalize())
    h = hit(world.intersect(shadow_ray))
    return h is not None and 0.0 <= h.t < distance

def reflected_color(world: World, comps: Computations, remaining: int) -> Vector3:
    if remaining <= 0:
        return BLACK
    reflective = comps.object.material.reflective
    if reflective < FACTOR_THRESHOLD:
        return BLACK

    reflect_ray = Ray(comps.over_point, comps.reflectv)
    return color_at(world, reflect_ray, remaining - 1) * reflective

def refracted_color(world: World, comps: Computations, remaining: int) -> Vector3:
    transparency = comps.object.material.transparency
    if remaining <= 0 or transparency < FACTOR_THRESHOLD:
        return BLACK

    # Snell's law; sin2_t >= 1 is total internal reflection.
    n_ratio = comps.n1 / comps.n2
    cos_i = comps.eyev.dot(comps.normalv)
    sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
    if sin2_t >= 1.0:
        return BLACK

    cos_t = math.sqrt(1.0 - sin2_t)
    direction = comps.normalv * (n_ratio * cos_i - cos_t) - comps.eyev * n_ratio
    refract_ray = Ray(comps.under_point, direction)
    return color_at(world, refract_ray, remaining - 1) * transparency

def shade_hit(world: World, comps: Computations, remaining: int = DEFAULT_DEPTH) -> Vector3:
    """
    Local Phong color at the hit plus its reflected and refracted light.
    """
    material = comps.object.material
    shadowed = is_shadowed(world, comps.over_point)
    surface = lighting(material, world.light, comps.over_point, comps.eyev,
                       comps.normalv, shadowed, comps.object)

    reflected = reflected_color(world, comps, remaining)
    refracted = refracted_color(world, comps, remaining)

    if material.reflective > 0 and material.transparency > 0:
        reflectance = schlick(comps)
        return surface + reflected * reflectance + refracted * (1.0 - reflectance)
    return surface + reflected + refracted

def color_at(world: World, ray: Ray, remaining: int = DEFAULT_DEPTH) -> Vector3:
    """
    Color seen along ray.

    Args:
        world: The scene.
        ray: The ray to trace.
        remaining: How many more reflective/refractive bounces may be taken.

    Returns:
        Vector3: The color, or the world background when nothing is hit.

    Raises:
        ValueError: If the ray hits something and the world has no light.
    """
    xs = world.intersect(ray)
    h = hit(xs)
    if h is None:
        return world.background
    comps = prepare_computations(h, ray, xs)
    return shade_hit(world, comps, remaining)

def render_row(world: World, camera, y: int, depth: int):
    return [tuple(color_at(world, camera.ray_for_pixel(x, y), depth)) for x in range(camera.hsize)]

# Per-process scene for pool workers, set once by the pool initializer.
_worker_scene = {}

def _init_worker(world: World, camera, depth: int):
    _worker_scene["scene"] = (world, camera, depth)

def _render_row_in_worker(y: int):
    world, camera, depth = _worker_scene["scene"]
    return y, render_row(world, camera, y, depth)

class Renderer:
    """
    Renders a world through a camera into a Canvas.

    Args:
        depth: Recursion budget per primary ray.
        workers: Number of processes; 1 renders in the calling process.
    """
    def __init__(self, depth: int = DEFAULT_DEPTH, workers: int = 1):
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.depth = depth
        self.workers = workers

    def render(self, camera, world: World) -> Canvas:
        if world.light is None:
            raise ValueError("World has no light")

        canvas = Canvas(camera.hsize, camera.vsize)
        logger.info("Rendering %dx%d, %d objects, depth %d, %d worker(s)",
                    camera.hsize, camera.vsize, len(world.objects), self.depth, self.workers)
        start = time.perf_counter()

        if self.workers == 1:
            for y in range(camera.vsize):
                canvas.write_row(y, render_row(world, camera, y, self.depth))
                logger.debug("Row %d/%d done", y + 1, camera.vsize)
        else:
            with ProcessPoolExecutor(max_workers=self.workers, initializer=_init_worker,
                                     initargs=(world, camera, self.depth)) as pool:
                for y, row in pool.map(_render_row_in_worker, range(camera.vsize)):
                    canvas.write_row(y, row)
                    logger.debug("Row %d/%d done", y + 1, camera.vsize)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return canvas
