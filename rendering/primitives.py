"""Alpha-blended drawing primitives shared by the renderers."""

import pygame
import pygame.gfxdraw


def blend_line(surface: pygame.Surface, start, end, color):
    """Draw a one-pixel line whose RGBA color is blended into the surface."""
    x1, y1 = int(round(start[0])), int(round(start[1]))
    x2, y2 = int(round(end[0])), int(round(end[1]))
    pygame.gfxdraw.line(surface, x1, y1, x2, y2, color)
