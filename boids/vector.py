"""Mutable 3D vector used for all boid kinematics."""

import math
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np


@dataclass
class Vector3:
    """
    A 3D vector with in-place arithmetic.

    The operators (``+``, ``-``, ``*``) return new vectors; the named
    methods (``add``, ``sub``, ``mult``, ``div``, ``normalize``, ``limit``)
    mutate in place. Owners copy vectors they hand out instead of sharing
    them.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def random_unit(rng: Optional[np.random.Generator] = None) -> "Vector3":
        """
        Uniformly distributed point on the unit sphere.

        Samples the azimuth and the z coordinate uniformly, which gives a
        uniform surface density (no clustering at the poles).
        """
        rng = rng if rng is not None else np.random.default_rng()
        angle = float(rng.random()) * math.pi * 2
        vz = float(rng.random()) * 2 - 1
        vz_p = math.sqrt(1 - vz * vz)
        return Vector3(vz_p * math.cos(angle), vz_p * math.sin(angle), vz)

    def copy(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def add(self, other: "Vector3") -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def sub(self, other: "Vector3") -> "Vector3":
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def mult(self, scalar: float) -> "Vector3":
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def div(self, scalar: float) -> "Vector3":
        """Divide in place. Callers must guard against a zero divisor."""
        self.x /= scalar
        self.y /= scalar
        self.z /= scalar
        return self

    scale = mult
    divide = div

    def mag(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def mag_sq(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    magnitude = mag
    magnitude_squared = mag_sq

    def normalize(self) -> "Vector3":
        """Scale to unit length in place. A zero vector is left untouched."""
        m = self.mag()
        if m != 0:
            self.div(m)
        return self

    def limit(self, max_value: float) -> "Vector3":
        """Clamp the magnitude to ``max_value`` without changing direction."""
        if self.mag() > max_value:
            self.normalize()
            self.mult(max_value)
        return self

    def set(self, x: float, y: float, z: float) -> "Vector3":
        self.x = x
        self.y = y
        self.z = z
        return self

    def zero(self) -> "Vector3":
        return self.set(0.0, 0.0, 0.0)
