"""Flock management: ordered boid collection, resizing, and per-tick update."""

import math
from typing import List, NamedTuple, Optional

import numpy as np

from config import boids as config
from .boid import Boid
from .environment import Bounds, ConfigurationError, Environment, FlockingFactors
from .vector import Vector3


class BoidSprite(NamedTuple):
    """Everything a renderer needs to draw one boid."""
    screen_x: float
    screen_y: float
    scale: float
    depth: float
    angle: float
    size: float
    opacity: float
    heading: Vector3


class Flock:
    """
    Ordered collection of boids.

    The list keeps insertion order until a tick re-sorts it back-to-front by
    distance from the camera. Boids are then integrated in that order, each
    one seeing the already-updated state of those before it.
    """

    def __init__(
        self,
        num_boids: int = config.BOIDS["count"],
        bounds: Optional[Bounds] = None,
        rng: Optional[np.random.Generator] = None
    ):
        self.bounds = bounds if bounds is not None else Bounds()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.boids: List[Boid] = []
        self.resize(num_boids)
        print(f"[Boids] Initialized {len(self.boids):,} boids")

    def __len__(self) -> int:
        return len(self.boids)

    def __iter__(self):
        return iter(self.boids)

    @property
    def num_boids(self) -> int:
        return len(self.boids)

    def resize(self, count: int):
        """
        Grow or shrink the flock to ``count`` boids.

        New boids are appended; removal takes boids from the front of the
        list, so the oldest (or, after a tick, farthest) go first.
        """
        if count < 0:
            raise ConfigurationError(f"Flock size must not be negative, got {count}")
        diff = count - len(self.boids)
        if diff > 0:
            for _ in range(diff):
                self.boids.append(Boid.spawn(self.bounds, self.rng))
        elif diff < 0:
            del self.boids[:-diff]

    def set_bounds(self, bounds: Bounds):
        """Resize the volume. Existing boids steer back inside on their own."""
        self.bounds = bounds

    def sort_for_camera(self, camera_position: Vector3):
        """Order boids back-to-front (descending squared distance)."""
        self.boids.sort(key=lambda boid: boid.distance_sq_to(camera_position), reverse=True)

    def tick(self, camera, environment: Environment, factors: FlockingFactors):
        """
        Run one simulation step.

        Boids are processed in descending camera distance, and each one
        reacts to the flock as already updated this tick.
        """
        self.sort_for_camera(camera.get_position())
        bounds = environment.bounds
        repel_point = environment.repel_point
        wind = environment.wind
        for boid in self.boids:
            boid.boundaries(bounds)
            boid.flock(self.boids, factors, repel_point, wind)
            boid.update()

    def centroid(self) -> Optional[Vector3]:
        if not self.boids:
            return None
        center = Vector3()
        for boid in self.boids:
            center.add(boid.position)
        return center.div(len(self.boids))

    def render_data(self, camera, width: float, height: float) -> List[BoidSprite]:
        """
        Project every visible boid, in current (back-to-front) order.

        The glyph angle comes from projecting a point a short distance ahead
        along the heading; it is 0 when that point is clipped.
        """
        sprites = []
        look_ahead = config.BOIDS["look_ahead"]
        glyph_size = config.BOIDS["glyph_size"]
        for boid in self.boids:
            proj = camera.project(boid.position, width, height)
            if proj is None:
                continue

            heading = boid.heading()
            ahead = camera.project(heading * look_ahead + boid.position, width, height)
            angle = 0.0
            if ahead is not None:
                angle = math.atan2(ahead.screen_y - proj.screen_y, ahead.screen_x - proj.screen_x)

            sprites.append(BoidSprite(
                proj.screen_x,
                proj.screen_y,
                proj.scale,
                proj.depth,
                angle,
                max(0.5, glyph_size * proj.scale),
                max(0.1, min(1.0, proj.scale * 1.2)),
                heading
            ))
        return sprites
