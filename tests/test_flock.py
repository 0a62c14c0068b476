"""Flock resizing, draw ordering, tick semantics and render data."""

import numpy as np
import pytest

from boids import Boid, Bounds, ConfigurationError, Environment, Flock, FlockingFactors, Vector3
from core.camera import Camera


class FixedCamera:
    """Camera stand-in with a fixed world position."""

    def __init__(self, position):
        self.position = position

    def get_position(self):
        return self.position.copy()


def _flock(boids, bounds):
    flock = Flock(0, bounds)
    flock.boids.extend(boids)
    return flock


def test_shrink_removes_oldest_first(bounds):
    flock = Flock(10, bounds, np.random.default_rng(0))
    original = list(flock.boids)

    flock.resize(4)

    assert len(flock) == 4
    assert all(a is b for a, b in zip(flock.boids, original[6:]))


def test_grow_appends_new_boids(bounds):
    flock = Flock(3, bounds, np.random.default_rng(0))
    original = list(flock.boids)

    flock.resize(8)

    assert len(flock) == 8
    assert all(a is b for a, b in zip(flock.boids[:3], original))


def test_resize_to_zero_and_negative(bounds):
    flock = Flock(5, bounds)
    flock.resize(0)
    assert len(flock) == 0
    with pytest.raises(ConfigurationError):
        flock.resize(-1)


def test_sort_for_camera_is_back_to_front(bounds):
    boids = [Boid(position=Vector3(x, 0.0, 0.0)) for x in (10.0, 300.0, -50.0, 120.0)]
    flock = _flock(boids, bounds)

    flock.sort_for_camera(Vector3(0.0, 0.0, 0.0))

    assert [b.position.x for b in flock] == [300.0, 120.0, -50.0, 10.0]


def test_tick_orders_by_camera_distance(bounds, still_factors):
    environment = Environment(bounds=bounds, wind=Vector3(0.0, 0.0, 0.0))
    boids = [Boid(position=Vector3(0.0, 0.0, z)) for z in (-100.0, 200.0, 50.0)]
    flock = _flock(boids, bounds)

    flock.tick(FixedCamera(Vector3(0.0, 0.0, -400.0)), environment, still_factors)

    assert [b.position.z for b in flock] == [200.0, 50.0, -100.0]


def test_tick_is_sequential_within_a_tick(bounds):
    # The far boid moves first; the near boid's cohesion then targets the
    # far boid's new position, which has a +y component.
    far = Boid(position=Vector3(0.0, 0.0, 0.0), velocity=Vector3(0.0, 3.0, 0.0))
    near = Boid(position=Vector3(20.0, 0.0, 0.0))
    flock = _flock([near, far], bounds)
    environment = Environment(bounds=bounds, wind=Vector3(0.0, 0.0, 0.0))
    factors = FlockingFactors(separation=0.0, alignment=0.0, cohesion=1.0, wind_strength=0.0)

    flock.tick(FixedCamera(Vector3(100.0, 0.0, 0.0)), environment, factors)

    assert flock.boids[0] is far
    assert near.velocity.y > 0.0
    assert near.velocity.x < 0.0


def test_tick_is_deterministic_for_a_seed(bounds):
    camera = Camera()
    results = []
    for _ in range(2):
        flock = Flock(40, bounds, np.random.default_rng(99))
        environment = Environment(bounds=bounds)
        for _ in range(20):
            environment.update_wind()
            flock.tick(camera, environment, FlockingFactors())
        results.append([tuple(b.position) for b in flock])
    assert results[0] == results[1]


def test_tick_keeps_speed_limit(bounds):
    flock = Flock(60, bounds, np.random.default_rng(5))
    environment = Environment(bounds=bounds)
    environment.set_repel_point(Vector3(0.0, 0.0, 0.0), now=0.0)
    factors = FlockingFactors(separation=3.0, alignment=2.0, cohesion=2.0, wind_strength=1.0)
    for _ in range(30):
        flock.tick(Camera(), environment, factors)
        assert all(b.velocity.mag() <= b.max_speed + 1e-9 for b in flock)


def test_centroid(bounds):
    flock = _flock([Boid(position=Vector3(x, 2.0, 0.0)) for x in (0.0, 10.0, 20.0)], bounds)
    assert flock.centroid() == Vector3(10.0, 2.0, 0.0)
    assert Flock(0, bounds).centroid() is None


def test_render_data_projects_visible_boids(bounds):
    camera = Camera()
    camera.azimuth = 0.0
    camera.elevation = 0.0
    visible = Boid(position=Vector3(0.0, 0.0, 0.0), velocity=Vector3(1.0, 0.0, 0.0))
    clipped = Boid(position=Vector3(0.0, 0.0, 500.0), velocity=Vector3(1.0, 0.0, 0.0))
    flock = _flock([clipped, visible], bounds)

    sprites = flock.render_data(camera, 1280, 720)

    assert len(sprites) == 1
    sprite = sprites[0]
    scale = 300.0 / 700.0
    assert sprite.screen_x == pytest.approx(640.0)
    assert sprite.screen_y == pytest.approx(360.0)
    assert sprite.scale == pytest.approx(scale)
    assert sprite.size == pytest.approx(4.0 * scale)
    assert sprite.opacity == pytest.approx(1.2 * scale)
    assert sprite.angle == pytest.approx(0.0)
    assert sprite.heading == Vector3(1.0, 0.0, 0.0)


def test_render_data_size_and_opacity_floors(bounds):
    camera = Camera()
    camera.distance = 2000.0
    flock = _flock([Boid(position=Vector3(0.0, 0.0, 0.0), velocity=Vector3(0.0, 1.0, 0.0))], bounds)
    far_camera_sprite = flock.render_data(camera, 800, 600)[0]
    assert far_camera_sprite.size == pytest.approx(max(0.5, 4.0 * 300.0 / 2000.0))
    assert far_camera_sprite.opacity == pytest.approx(max(0.1, 1.2 * 300.0 / 2000.0))
