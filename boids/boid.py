"""Individual boid entity with position, velocity, and steering behaviors."""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from config import boids as config
from .environment import Bounds, ConfigurationError, FlockingFactors
from .vector import Vector3


@dataclass
class Boid:
    """
    A single boid (bird-oid object) in the simulation.

    Attributes:
        position: 3D position vector
        velocity: 3D velocity vector
        acceleration: 3D force accumulator (reset each tick)
        max_speed: Maximum velocity magnitude
        max_force: Maximum steering force magnitude
        perception_radius: Neighbor sensing distance, set from the factors each tick
    """
    position: Vector3 = field(default_factory=Vector3)
    velocity: Vector3 = field(default_factory=Vector3)
    acceleration: Vector3 = field(default_factory=Vector3)
    max_speed: float = config.BOIDS["max_speed"]
    max_force: float = config.BOIDS["max_force"]
    perception_radius: float = config.FLOCKING["perception_radius"]

    def __post_init__(self):
        if self.max_speed < 0:
            raise ConfigurationError(f"max_speed must not be negative, got {self.max_speed}")
        if self.max_force < 0:
            raise ConfigurationError(f"max_force must not be negative, got {self.max_force}")

    @classmethod
    def spawn(cls, bounds: Bounds, rng: Optional[np.random.Generator] = None) -> "Boid":
        """Create a boid at a random position in bounds with a random heading."""
        rng = rng if rng is not None else np.random.default_rng()
        position = Vector3(
            float(rng.random()) * bounds.width - bounds.half_width,
            float(rng.random()) * bounds.height - bounds.half_height,
            float(rng.random()) * bounds.depth - bounds.half_depth
        )
        velocity = Vector3.random_unit(rng)
        low = config.BOIDS["min_spawn_speed"]
        high = config.BOIDS["max_spawn_speed"]
        velocity.mult(float(rng.random()) * (high - low) + low)
        return cls(position=position, velocity=velocity)

    def apply_force(self, force: Vector3):
        """Add a force to the boid's acceleration."""
        self.acceleration.add(force)

    def update(self):
        """Advance one tick of explicit Euler integration."""
        self.position.add(self.velocity)
        self.velocity.add(self.acceleration)
        self.velocity.limit(self.max_speed)
        self.acceleration.zero()

    def heading(self) -> Vector3:
        """Unit direction of travel (zero when stationary)."""
        return self.velocity.copy().normalize()

    def seek(self, target: Vector3) -> Vector3:
        """Calculate steering force toward a target."""
        desired = target - self.position
        desired.normalize()
        desired.mult(self.max_speed)
        steer = desired - self.velocity
        steer.limit(self.max_force)
        return steer

    def flee(self, point: Vector3) -> Vector3:
        """Steering force away from a point: a negated, amplified seek."""
        force = self.seek(point)
        force.mult(-config.REPEL["strength"])
        return force

    def neighbors(self, boids: Sequence["Boid"]) -> List[Tuple["Boid", Vector3, float]]:
        """
        Other boids within the perception radius.

        Returns ``(other, self.position - other.position, distance)`` tuples in
        flock order. Coincident boids are skipped so no force divides by zero.
        """
        found = []
        for other in boids:
            if other is self:
                continue
            diff = self.position - other.position
            d = diff.mag()
            if 0 < d < self.perception_radius:
                found.append((other, diff, d))
        return found

    def _steer_towards(self, direction: Vector3) -> Vector3:
        direction.normalize()
        direction.mult(self.max_speed)
        direction.sub(self.velocity)
        direction.limit(self.max_force)
        return direction

    def separation_push(self, boids: Sequence["Boid"], neighbors=None) -> Vector3:
        """Mean inverse-square repulsion from neighbors, before steering."""
        neighbors = self.neighbors(boids) if neighbors is None else neighbors
        push = Vector3()
        for _, diff, d in neighbors:
            push.add(diff.copy().div(d * d))
        if neighbors:
            push.div(len(neighbors))
        return push

    def separation(self, boids: Sequence["Boid"], weight: float, neighbors=None) -> Vector3:
        neighbors = self.neighbors(boids) if neighbors is None else neighbors
        steering = self.separation_push(boids, neighbors)
        if neighbors:
            self._steer_towards(steering)
        steering.mult(weight)
        return steering

    def alignment(self, boids: Sequence["Boid"], weight: float, neighbors=None) -> Vector3:
        neighbors = self.neighbors(boids) if neighbors is None else neighbors
        steering = Vector3()
        for other, _, _ in neighbors:
            steering.add(other.velocity)
        if neighbors:
            steering.div(len(neighbors))
            self._steer_towards(steering)
        steering.mult(weight)
        return steering

    def cohesion(self, boids: Sequence["Boid"], weight: float, neighbors=None) -> Vector3:
        neighbors = self.neighbors(boids) if neighbors is None else neighbors
        if not neighbors:
            return Vector3()
        center = Vector3()
        for other, _, _ in neighbors:
            center.add(other.position)
        center.div(len(neighbors))
        force = self.seek(center)
        force.mult(weight)
        return force

    def follow(self, wind: Vector3, weight: float) -> Vector3:
        """Steer toward the (unit) wind direction at full speed."""
        desired = wind * self.max_speed
        steer = desired - self.velocity
        steer.limit(self.max_force)
        steer.mult(weight)
        return steer

    def boundaries(self, bounds: Bounds) -> Vector3:
        """
        Apply a steering force away from any wall closer than the margin.

        Each axis independently gets an inward component when the boid is
        near one of its walls. The combined force is stronger than the
        flocking forces so boids cannot leave the volume.

        Returns:
            The applied force (zero when no wall is near)
        """
        margin = config.BOIDS["boundary_margin"]
        steer = Vector3()
        limits = (
            (self.position.x, bounds.half_width),
            (self.position.y, bounds.half_height),
            (self.position.z, bounds.half_depth),
        )
        components = []
        for value, half in limits:
            if value < -half + margin:
                components.append(self.max_speed)
            elif value > half - margin:
                components.append(-self.max_speed)
            else:
                components.append(0.0)
        steer.set(*components)

        if steer.mag() > 0:
            steer.normalize()
            steer.mult(self.max_speed)
            steer.sub(self.velocity)
            steer.limit(self.max_force * config.BOIDS["boundary_force"])
            self.apply_force(steer)
        return steer

    def flock(
        self,
        boids: Sequence["Boid"],
        factors: FlockingFactors,
        repel_point: Optional[Vector3],
        wind: Vector3
    ):
        """Accumulate the flocking, wind and repulsion forces for this tick."""
        self.perception_radius = factors.perception_radius
        neighbors = self.neighbors(boids)

        self.apply_force(self.separation(boids, factors.separation, neighbors))
        self.apply_force(self.alignment(boids, factors.alignment, neighbors))
        self.apply_force(self.cohesion(boids, factors.cohesion, neighbors))
        self.apply_force(self.follow(wind, factors.wind_strength))

        if repel_point is not None:
            d = (self.position - repel_point).mag()
            if d < config.REPEL["radius"]:
                self.apply_force(self.flee(repel_point))

    def distance_sq_to(self, point: Vector3) -> float:
        return (self.position - point).mag_sq()
