"""Rendering components for the 3D boids simulation."""

from .grid import Grid
from .wind_field import WindField
from .glyphs import BoidRenderer
from .text import TextRenderer

__all__ = ["Grid", "WindField", "BoidRenderer", "TextRenderer"]
