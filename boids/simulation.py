"""Frame driver tying the flock, environment, factors and camera together."""

from dataclasses import replace
from typing import Optional

import numpy as np

from config import boids as config
from .environment import Bounds, ConfigurationError, Environment, FlockingFactors
from .flock import Flock
from .vector import Vector3


class Simulation:
    """
    One simulation instance, advanced exactly once per frame by its host.

    Attributes:
        camera: View used for draw ordering and chase tracking
        environment: Bounds, wind and repel point
        factors: Tuning record passed to every boid each tick
        flock: The boids
    """

    def __init__(
        self,
        camera,
        num_boids: int = config.BOIDS["count"],
        bounds: Optional[Bounds] = None,
        factors: Optional[FlockingFactors] = None,
        environment: Optional[Environment] = None,
        seed: Optional[int] = None
    ):
        self.camera = camera
        if environment is None:
            environment = Environment(bounds=bounds if bounds is not None else Bounds())
        self.environment = environment
        self.factors = factors if factors is not None else FlockingFactors()
        self.flock = Flock(num_boids, self.environment.bounds, np.random.default_rng(seed))
        self.frame = 0

    def step(self, now: Optional[float] = None):
        """Advance the whole simulation by one tick."""
        self.camera.update(self.flock.boids)
        self.environment.update_wind()
        self.environment.expire_repel_point(now)
        self.flock.tick(self.camera, self.environment, self.factors)
        self.frame += 1

    def resize(self, count: int):
        self.flock.resize(count)
        print(f"[Boids] Flock size: {len(self.flock):,}")

    def set_factors(self, **changes):
        """Replace individual tuning values, validating the new record."""
        self.factors = replace(self.factors, **changes)

    def adjust_factor(self, name: str, steps: int) -> float:
        """
        Move one tuning value by whole steps within its configured range.

        Returns:
            The new value
        """
        if name not in config.FACTOR_CONTROLS:
            raise ConfigurationError(f"Unknown flocking factor: {name}")
        low, high, step = config.FACTOR_CONTROLS[name]
        value = getattr(self.factors, name) + steps * step
        value = round(min(high, max(low, value)), 6)
        self.set_factors(**{name: value})
        print(f"[Boids] {name}: {value:g}")
        return value

    def set_bounds(self, bounds: Bounds):
        self.environment.bounds = bounds
        self.flock.set_bounds(bounds)

    def set_repel_point(self, point: Vector3, now: Optional[float] = None):
        self.environment.set_repel_point(point, now)

    def clear_repel_point(self):
        self.environment.clear_repel_point()

    def click(self, screen_x: float, screen_y: float, width: float, height: float,
              now: Optional[float] = None) -> Vector3:
        """Place a repel point under a click and return it."""
        point = self.camera.screen_to_world(screen_x, screen_y, width, height)
        self.set_repel_point(point, now)
        return point
