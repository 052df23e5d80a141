# renderer/preview.py
import os
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pygame
from renderer.canvas import Canvas

def canvas_to_surface(canvas: Canvas, tone_map: str = "clamp") -> pygame.Surface:
    """
    Convert a canvas to a pygame surface. surfarray indexes (x, y), so the
    (row, column) image is transposed first.
    """
    rgb = canvas.to_array(tone_map)
    return pygame.surfarray.make_surface(np.ascontiguousarray(rgb.swapaxes(0, 1)))

def show(canvas: Canvas, tone_map: str = "clamp", title: str = "Ray Tracer", scale: int = 1):
    """
    Open a window showing the canvas until it is closed or Esc/Q is pressed.
    """
    pygame.init()
    try:
        surface = canvas_to_surface(canvas, tone_map)
        if scale != 1:
            surface = pygame.transform.scale(surface, (canvas.width * scale, canvas.height * scale))
        screen = pygame.display.set_mode(surface.get_size())
        pygame.display.set_caption(title)
        screen.blit(surface, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()
