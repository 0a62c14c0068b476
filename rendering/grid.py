"""Reference grid planes drawn on three walls of the volume."""

import numpy as np
import pygame

from config import boids as config
from .primitives import blend_line
from .projection import project_segments


def grid_segments(bounds, divisions: int = config.GRID["divisions"]):
    """
    World-space line segments for the bottom, back and left grid planes.

    Returns:
        (starts, ends): two (m, 3) arrays
    """
    hw, hh, hd = bounds.half_width, bounds.half_height, bounds.half_depth
    step_w = bounds.width / divisions
    step_h = bounds.height / divisions
    step_d = bounds.depth / divisions

    starts = []
    ends = []

    def line(a, b):
        starts.append(a)
        ends.append(b)

    # Bottom plane (XZ at y = +hh)
    for i in range(divisions + 1):
        w = -hw + i * step_w
        d = -hd + i * step_d
        line((w, hh, -hd), (w, hh, hd))
        line((-hw, hh, d), (hw, hh, d))

    # Back plane (XY at z = -hd)
    for i in range(divisions + 1):
        w = -hw + i * step_w
        h = -hh + i * step_h
        line((w, -hh, -hd), (w, hh, -hd))
        line((-hw, h, -hd), (hw, h, -hd))

    # Left plane (YZ at x = -hw)
    for i in range(divisions + 1):
        h = -hh + i * step_h
        d = -hd + i * step_d
        line((-hw, -hh, d), (-hw, hh, d))
        line((-hw, h, -hd), (-hw, h, hd))

    return np.array(starts, dtype=np.float64), np.array(ends, dtype=np.float64)


class Grid:
    """Draws the reference planes as translucent lines."""

    def __init__(self):
        self.divisions = config.GRID["divisions"]
        self.color = config.GRID["color"]
        self._bounds = None
        self._segments = None

    def _segments_for(self, bounds):
        if bounds != self._bounds:
            self._segments = grid_segments(bounds, self.divisions)
            self._bounds = bounds
        return self._segments

    def draw(self, surface: pygame.Surface, camera, bounds):
        """Blend the grid lines into the surface."""
        width, height = surface.get_size()
        starts, ends = self._segments_for(bounds)
        for p1, p2 in project_segments(camera, starts, ends, width, height):
            blend_line(surface, (p1[0], p1[1]), (p2[0], p2[1]), self.color)
