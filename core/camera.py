"""Orbital perspective camera with chase-mode tracking."""

import math
from typing import NamedTuple, Optional, Sequence, Tuple

from config import boids as config
from boids.vector import Vector3


class Projection(NamedTuple):
    """Screen-space result of projecting a world point."""
    screen_x: float
    screen_y: float
    scale: float
    depth: float


class Camera:
    """
    Orbital camera looking at ``target`` from ``distance`` away.

    The view is built by yawing the scene by ``-azimuth`` and pitching it by
    ``-elevation``; the scene then sits at negative depth in front of the
    eye. ``distance`` and ``elevation`` clamp on assignment.
    """

    def __init__(self):
        self.target = Vector3(0.0, 0.0, 0.0)
        self._distance = config.CAMERA["initial_distance"]
        self.azimuth = config.CAMERA["initial_azimuth"]
        self._elevation = config.CAMERA["initial_elevation"]
        self.focal_length = config.CAMERA["focal_length"]

        self.chase_mode = False
        self.show_grid = True
        self.show_wind = False

    @property
    def distance(self) -> float:
        return self._distance

    @distance.setter
    def distance(self, value: float):
        self._distance = max(
            config.CAMERA["min_distance"],
            min(config.CAMERA["max_distance"], value)
        )

    @property
    def elevation(self) -> float:
        return self._elevation

    @elevation.setter
    def elevation(self, value: float):
        self._elevation = max(
            config.CAMERA["min_elevation"],
            min(config.CAMERA["max_elevation"], value)
        )

    def orbit(self, d_azimuth: float, d_elevation: float):
        """Rotate the camera around its target by the given angles in radians."""
        self.azimuth += d_azimuth
        self.elevation = self.elevation + d_elevation

    def zoom(self, delta: float):
        """Move the camera toward (negative) or away from (positive) the target."""
        self.distance = self.distance + delta

    def set_chase_mode(self, enabled: bool):
        self.chase_mode = bool(enabled)

    def rotation(self) -> Tuple[float, float, float, float]:
        """(cos_az, sin_az, cos_el, sin_el) of the inverse view rotation."""
        return (
            math.cos(-self.azimuth),
            math.sin(-self.azimuth),
            math.cos(-self.elevation),
            math.sin(-self.elevation),
        )

    def project(self, point: Vector3, width: float, height: float) -> Optional[Projection]:
        """
        Project a world point to screen coordinates.

        Args:
            point: World-space position
            width: Viewport width in pixels
            height: Viewport height in pixels

        Returns:
            The projection, or None when the point lies at or in front of
            the near plane (``depth >= -focal_length``)
        """
        p = point - self.target
        cos_az, sin_az, cos_el, sin_el = self.rotation()

        x1 = p.x * cos_az - p.z * sin_az
        z1 = p.x * sin_az + p.z * cos_az

        y2 = p.y * cos_el - z1 * sin_el
        z2 = p.y * sin_el + z1 * cos_el

        depth = z2 - self.distance
        if depth >= -self.focal_length:
            return None

        scale = self.focal_length / -depth
        return Projection(
            x1 * scale + width / 2,
            y2 * scale + height / 2,
            scale,
            depth
        )

    def get_position(self) -> Vector3:
        """Get the camera's world position."""
        cos_el = math.cos(self.elevation)
        return Vector3(
            self.target.x - self.distance * math.sin(self.azimuth) * cos_el,
            self.target.y - self.distance * math.sin(self.elevation),
            self.target.z - self.distance * math.cos(self.azimuth) * cos_el
        )

    def update(self, boids: Sequence):
        """Ease the target toward the flock centroid while chasing."""
        if not self.chase_mode or len(boids) == 0:
            return
        center = Vector3()
        for boid in boids:
            center.add(boid.position)
        center.div(len(boids))

        delta = center - self.target
        delta.mult(config.CAMERA["chase_smoothing"])
        self.target.add(delta)

    def screen_to_world(self, screen_x: float, screen_y: float, width: float, height: float) -> Vector3:
        """
        Approximate the world point under a screen position.

        Offsets from the projected target are taken one-to-one as world
        units on the target's z plane. This is not a true un-projection.
        """
        anchor = self.project(self.target, width, height)
        if anchor is None:
            anchor_x, anchor_y = width / 2, height / 2
        else:
            anchor_x, anchor_y = anchor.screen_x, anchor.screen_y
        return Vector3(
            self.target.x + (screen_x - anchor_x),
            self.target.y + (screen_y - anchor_y),
            self.target.z
        )
