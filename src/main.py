# main.py
import argparse
import logging
import math
import sys
from core.vector import Point3, Vector3
from core.transform import Transform, view_transform
from camera.camera import Camera
from geometry.world import World
from geometry.plane import Plane
from geometry.sphere import Sphere
from geometry.cube import Cube
from geometry.cylinder import Cylinder
from geometry.cone import Cone
from materials.light import PointLight
from materials.material import Material
from materials.patterns import RingPattern
from materials.presets import ColorPresets, DielectricPresets, MetalPresets, PatternPresets
from renderer.raytracer import Renderer

# Render settings per quality level.
QUALITY_LEVELS = {
    "preview": {"width": 160, "height": 90, "depth": 2},
    "balanced": {"width": 480, "height": 270, "depth": 4},
    "high_quality": {"width": 1280, "height": 720, "depth": 6},
}

def create_world() -> World:
    """
    Demo scene: a reflective checker floor holding one of each primitive,
    a glass sphere with an air bubble inside it and a mirror cube.
    """
    print("\n=== Creating World ===")
    world = World(light=PointLight(Point3(-10, 10, -10), Vector3(1, 1, 1)))

    world.add(Plane(material=PatternPresets.checkerboard(reflective=0.25)))
    print("Added checker floor plane at y=0")

    wall = Material(ColorPresets.GRAY, specular=0.0,
                    pattern=RingPattern(ColorPresets.WHITE, ColorPresets.GRAY, Transform().scale(0.5, 0.5, 0.5)))
    world.add(Plane(Transform().rotate_x(math.pi / 2).translate(0, 0, 10), wall))
    print("Added ring-patterned back wall at z=10")

    glass = world.add(Sphere(Transform().translate(-0.5, 1, 0.5), DielectricPresets.glass()))
    world.add(Sphere(Transform().scale(0.5, 0.5, 0.5).translate(-0.5, 1, 0.5), DielectricPresets.air_bubble()))
    print(f"Added glass sphere with an air bubble, IOR: {glass.material.refractive_index}")

    world.add(Cube(Transform().scale(0.6, 0.6, 0.6).rotate_y(math.pi / 5).translate(2.2, 0.6, 2.5),
                   MetalPresets.mirror()))
    print("Added mirror cube at (2.2, 0.6, 2.5)")

    world.add(Cylinder(0.0, 1.5, closed=True,
                       transform=Transform().scale(0.5, 1, 0.5).translate(-2.6, 0, 2.0),
                       material=ColorPresets.glossy(ColorPresets.BLUE)))
    print("Added closed cylinder at (-2.6, 0, 2.0)")

    world.add(Cone(-1.0, 0.0, closed=True,
                   transform=Transform().scale(0.5, 1, 0.5).translate(1.2, 1, -0.8),
                   material=ColorPresets.glossy(ColorPresets.ORANGE)))
    print("Added capped cone at (1.2, 1, -0.8)")

    world.add(Sphere(Transform().scale(0.35, 0.35, 0.35).translate(0.6, 0.35, -1.6),
                     ColorPresets.glossy(ColorPresets.GREEN, reflective=0.3)))
    print(f"World contains {len(world.objects)} objects")
    return world

def create_camera(width: int, height: int) -> Camera:
    return Camera(width, height, math.pi / 3,
                  view_transform(Point3(0, 1.5, -5), Point3(0, 1, 0), Vector3(0, 1, 0)))

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render the demo scene with the Whitted ray tracer.")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default="preview",
                        help="Preset resolution and recursion depth")
    parser.add_argument("--width", type=int, help="Override image width")
    parser.add_argument("--height", type=int, help="Override image height")
    parser.add_argument("--depth", type=int, help="Override reflection/refraction depth")
    parser.add_argument("--workers", type=int, default=1, help="Render processes")
    parser.add_argument("--tone-map", choices=["clamp", "reinhard", "auto"], default="clamp")
    parser.add_argument("-o", "--output", default="render.png", help="Output image path")
    parser.add_argument("--preview", action="store_true", help="Show the result in a window")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    settings = dict(QUALITY_LEVELS[args.quality])
    for key in ("width", "height", "depth"):
        value = getattr(args, key)
        if value is not None:
            settings[key] = value

    print("\n=== Initializing Renderer ===")
    print(f"Render resolution: {settings['width']}x{settings['height']}")
    print(f"Quality settings: {args.quality}")
    print(f"Max depth: {settings['depth']}")

    try:
        world = create_world()
        camera = create_camera(settings["width"], settings["height"])
        renderer = Renderer(depth=settings["depth"], workers=args.workers)
    except ValueError as e:
        print(f"Invalid render settings: {e}", file=sys.stderr)
        return 2

    canvas = renderer.render(camera, world)
    canvas.save(args.output, tone_map=args.tone_map)
    print(f"Saved image to {args.output}")

    if args.preview:
        from renderer.preview import show
        show(canvas, tone_map=args.tone_map)
    return 0

if __name__ == "__main__":
    sys.exit(main())
