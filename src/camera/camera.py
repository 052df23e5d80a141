# camera/camera.py
import math
from typing import Optional
from core.vector import Point3, ORIGIN
from core.ray import Ray
from core.transform import Transform

class Camera:
    """
    Pinhole camera looking down -z in its own space, with the image plane one
    unit in front of the eye. transform is the world-to-camera view transform.
    """
    def __init__(self, hsize: int, vsize: int, field_of_view: float,
                 transform: Optional[Transform] = None):
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.set_transform(transform if transform is not None else Transform())
        self.update_camera()

    def set_transform(self, transform: Transform):
        self.transform = transform
        self.inverse = transform.inverse()

    def update_camera(self):
        """Recomputes the half extents and pixel size of the image plane."""
        half_view = math.tan(self.field_of_view / 2)
        aspect = self.hsize / self.vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / self.hsize

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Generates the unit-direction ray through the centre of pixel (px, py)."""
        x_offset = (px + 0.5) * self.pixel_size
        y_offset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left.
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        pixel = self.inverse.apply(Point3(world_x, world_y, -1.0))
        origin = self.inverse.apply(ORIGIN)
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)
