"""Boid flocking simulation core."""

from .vector import Vector3
from .environment import Bounds, ConfigurationError, Environment, FlockingFactors
from .boid import Boid
from .flock import BoidSprite, Flock
from .simulation import Simulation

__all__ = [
    "Vector3",
    "Bounds",
    "ConfigurationError",
    "Environment",
    "FlockingFactors",
    "Boid",
    "BoidSprite",
    "Flock",
    "Simulation",
]
