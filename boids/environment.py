"""Shared simulation environment: bounds, wind, repel point and tuning factors."""

import math
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from config import boids as config
from .vector import Vector3


class ConfigurationError(ValueError):
    """Raised when a simulation parameter is outside its valid range."""


def _require_finite(name: str, value: float):
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be finite, got {value!r}")


@dataclass(frozen=True)
class Bounds:
    """
    Full extents of the simulated volume, centered on the origin.

    Boids are kept inside ``[-extent / 2, +extent / 2]`` on each axis.
    """
    width: float = float(config.WINDOW["width"])
    height: float = float(config.WINDOW["height"])
    depth: float = config.BOIDS["depth"]

    def __post_init__(self):
        for name in ("width", "height", "depth"):
            value = getattr(self, name)
            _require_finite(name, value)
            if value <= 0:
                raise ConfigurationError(f"Bounds {name} must be positive, got {value}")

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2

    @property
    def half_depth(self) -> float:
        return self.depth / 2


@dataclass(frozen=True)
class FlockingFactors:
    """Tuning record read by every boid on every tick."""
    perception_radius: float = config.FLOCKING["perception_radius"]
    separation: float = config.FLOCKING["separation"]
    alignment: float = config.FLOCKING["alignment"]
    cohesion: float = config.FLOCKING["cohesion"]
    wind_strength: float = config.FLOCKING["wind_strength"]

    def __post_init__(self):
        for name in ("perception_radius", "separation", "alignment", "cohesion", "wind_strength"):
            _require_finite(name, getattr(self, name))
        if self.perception_radius < 0:
            raise ConfigurationError(
                f"perception_radius must not be negative, got {self.perception_radius}"
            )


@dataclass
class Environment:
    """
    World state shared by the whole flock.

    Attributes:
        bounds: Extents of the volume
        wind: Unit wind direction, renormalized on every update
        automatic_wind: Drive the wind from a slowly advancing phase
        wind_azimuth: Manual wind heading in degrees
        wind_elevation: Manual wind pitch in degrees
        clock: Monotonic time source in seconds, used for repel expiry
    """
    bounds: Bounds = field(default_factory=Bounds)
    wind: Vector3 = field(default_factory=lambda: Vector3(1.0, 0.0, 0.0))
    automatic_wind: bool = config.WIND["automatic"]
    wind_azimuth: float = config.WIND["azimuth"]
    wind_elevation: float = config.WIND["elevation"]
    wind_time: float = 0.0
    clock: Callable[[], float] = time.monotonic
    repel_duration: float = config.REPEL["duration_ms"] / 1000.0
    _repel_point: Optional[Vector3] = field(default=None, init=False, repr=False)
    _repel_deadline: float = field(default=0.0, init=False, repr=False)

    def update_wind(self):
        """Advance the wind for one tick and renormalize it."""
        if self.automatic_wind:
            self.wind_time += config.WIND["time_step"]
            t = self.wind_time
            self.wind.set(
                math.cos(t),
                math.sin(t * config.WIND["y_rate"]),
                math.sin(t * config.WIND["z_rate"])
            )
            self.wind.normalize()
        else:
            self.set_wind(self._manual_wind())

    def _manual_wind(self) -> Vector3:
        az = self.wind_azimuth * math.pi / 180
        el = self.wind_elevation * math.pi / 180
        return Vector3(
            math.cos(el) * math.cos(az),
            math.sin(el),
            math.cos(el) * math.sin(az)
        )

    def set_wind(self, wind: Vector3):
        """Set the wind directly. The stored copy is normalized."""
        self.wind = wind.copy().normalize()

    def set_wind_angles(self, azimuth: float, elevation: float):
        """
        Set the manual wind heading in degrees.

        Azimuth wraps into [0, 360) and elevation is clamped to +/-90. In
        manual mode the wind turns immediately instead of on the next tick.
        """
        _require_finite("wind_azimuth", azimuth)
        _require_finite("wind_elevation", elevation)
        limit = config.WIND["max_elevation"]
        self.wind_azimuth = azimuth % 360.0
        self.wind_elevation = max(-limit, min(limit, elevation))
        if not self.automatic_wind:
            self.set_wind(self._manual_wind())

    def set_repel_point(self, point: Vector3, now: Optional[float] = None):
        """Place a repel point, replacing any existing one."""
        now = self.clock() if now is None else now
        self._repel_point = point.copy()
        self._repel_deadline = now + self.repel_duration

    def clear_repel_point(self):
        self._repel_point = None

    def expire_repel_point(self, now: Optional[float] = None):
        """Drop the repel point once its deadline has passed."""
        if self._repel_point is None:
            return
        now = self.clock() if now is None else now
        if now >= self._repel_deadline:
            self._repel_point = None

    @property
    def repel_point(self) -> Optional[Vector3]:
        return self._repel_point
