"""Wind field visualization: a lattice of arrows pointing along the wind."""

import math

import numpy as np
import pygame

from config import boids as config
from .primitives import blend_line
from .projection import project_segments


def lattice(bounds, spacing: float = config.WIND_FIELD["spacing"]) -> np.ndarray:
    """Arrow origins every ``spacing`` units from the negative corner."""
    xs = np.arange(-bounds.half_width, bounds.half_width + 1e-9, spacing)
    ys = np.arange(-bounds.half_height, bounds.half_height + 1e-9, spacing)
    zs = np.arange(-bounds.half_depth, bounds.half_depth + 1e-9, spacing)
    grid = np.stack(np.meshgrid(xs, ys, zs, indexing="ij"), axis=-1)
    return grid.reshape(-1, 3)


def arrow_strokes(p1, p2, head_length: float = config.WIND_FIELD["head_length"]):
    """
    Screen-space strokes for one projected arrow.

    Args:
        p1: Projected tail (screen_x, screen_y, scale, depth)
        p2: Projected tip

    Returns:
        List of ((x0, y0), (x1, y1)) strokes, empty for arrows under a pixel
    """
    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]
    if math.hypot(dx, dy) < 1:
        return []

    head = min(head_length, head_length * p2[2])
    angle = math.atan2(dy, dx)
    tip = (p2[0], p2[1])
    return [
        ((p1[0], p1[1]), tip),
        (tip, (tip[0] - head * math.cos(angle - math.pi / 6), tip[1] - head * math.sin(angle - math.pi / 6))),
        (tip, (tip[0] - head * math.cos(angle + math.pi / 6), tip[1] - head * math.sin(angle + math.pi / 6))),
    ]


class WindField:
    """Draws the wind direction across the whole volume."""

    def __init__(self):
        self.line_length = config.WIND_FIELD["line_length"]
        self.color = config.WIND_FIELD["color"]

    def segments(self, bounds, wind):
        starts = lattice(bounds)
        ends = starts + wind.as_array() * self.line_length
        return starts, ends

    def draw(self, surface: pygame.Surface, camera, bounds, wind):
        width, height = surface.get_size()
        starts, ends = self.segments(bounds, wind)
        for p1, p2 in project_segments(camera, starts, ends, width, height):
            for a, b in arrow_strokes(p1, p2):
                blend_line(surface, a, b, self.color)
