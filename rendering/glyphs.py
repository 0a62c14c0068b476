"""Boid glyph rendering: one translucent triangle per boid."""

import math
from typing import List, Tuple

import pygame
import pygame.gfxdraw

from config import boids as config


def glyph_points(sprite) -> List[Tuple[float, float]]:
    """Triangle corners for a sprite, nose pointing along its screen heading."""
    tri = sprite.size * 2
    cos_a = math.cos(sprite.angle)
    sin_a = math.sin(sprite.angle)
    local = ((tri * 0.5, 0.0), (-tri * 0.5, -tri * 0.3), (-tri * 0.5, tri * 0.3))
    return [
        (sprite.screen_x + x * cos_a - y * sin_a, sprite.screen_y + x * sin_a + y * cos_a)
        for x, y in local
    ]


class BoidRenderer:
    """Draws sprites in the order given (back-to-front)."""

    def __init__(self):
        self.color = config.COLORS["boid"]

    def draw(self, surface: pygame.Surface, sprites):
        r, g, b = self.color
        for sprite in sprites:
            alpha = int(round(sprite.opacity * 255))
            points = [(int(round(x)), int(round(y))) for x, y in glyph_points(sprite)]
            pygame.gfxdraw.filled_polygon(surface, points, (r, g, b, alpha))
