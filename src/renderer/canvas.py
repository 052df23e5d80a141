# renderer/canvas.py
import logging
import os
import numpy as np
from PIL import Image
from core.vector import Vector3
from renderer.tone_mapping import TONE_MAPPERS

logger = logging.getLogger(__name__)

class Canvas:
    """
    A linear-radiance framebuffer of shape (height, width, 3), row 0 at the top.
    """
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)

    def _check(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def write_pixel(self, x: int, y: int, color: Vector3):
        self._check(x, y)
        self.pixels[y, x] = (color.x, color.y, color.z)

    def write_row(self, y: int, colors):
        self.pixels[y] = colors

    def pixel_at(self, x: int, y: int) -> Vector3:
        self._check(x, y)
        r, g, b = self.pixels[y, x]
        return Vector3(float(r), float(g), float(b))

    def to_array(self, tone_map: str = "clamp") -> np.ndarray:
        """8-bit RGB array after tone mapping."""
        try:
            mapper = TONE_MAPPERS[tone_map]
        except KeyError:
            raise ValueError(f"Unknown tone map {tone_map!r}; expected one of {sorted(TONE_MAPPERS)}") from None
        return mapper(self.pixels)

    def to_image(self, tone_map: str = "clamp") -> Image.Image:
        return Image.fromarray(self.to_array(tone_map))

    def save(self, path: str, tone_map: str = "clamp") -> str:
        """
        Encode the canvas to an image file; the format follows the extension.
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.to_image(tone_map).save(path)
        logger.info("Saved %dx%d image to %s", self.width, self.height, path)
        return path
