"""Pytest configuration for the boids tests."""

import os
import sys
from pathlib import Path

import pytest

# Headless pygame: tests never open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure the repository root is importable without installation
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from boids import Bounds, Environment, FlockingFactors  # noqa: E402
from core.camera import Camera  # noqa: E402


@pytest.fixture
def bounds():
    return Bounds(1000.0, 1000.0, 1000.0)


@pytest.fixture
def still_factors():
    """All behaviors off."""
    return FlockingFactors(
        perception_radius=0.0,
        separation=0.0,
        alignment=0.0,
        cohesion=0.0,
        wind_strength=0.0
    )


@pytest.fixture
def camera():
    return Camera()


@pytest.fixture
def environment(bounds):
    return Environment(bounds=bounds)
