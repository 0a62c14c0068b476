"""Environment: wind modes, repel point lifetime, and parameter validation."""

import math

import pytest

from boids import Bounds, ConfigurationError, Environment, FlockingFactors, Vector3


def test_automatic_wind_is_unit_length():
    env = Environment()
    for _ in range(500):
        env.update_wind()
        assert env.wind.mag() == pytest.approx(1.0)
    assert env.wind_time == pytest.approx(500 * 0.005)


def test_automatic_wind_follows_phase():
    env = Environment()
    env.update_wind()
    t = 0.005
    raw = Vector3(math.cos(t), math.sin(t * 0.7), math.sin(t * 0.3))
    expected = raw.copy().normalize()
    assert env.wind.x == pytest.approx(expected.x)
    assert env.wind.y == pytest.approx(expected.y)
    assert env.wind.z == pytest.approx(expected.z)


def test_manual_wind_from_angles():
    env = Environment(automatic_wind=False, wind_azimuth=90.0, wind_elevation=0.0)
    env.update_wind()
    assert env.wind.x == pytest.approx(0.0, abs=1e-12)
    assert env.wind.y == pytest.approx(0.0)
    assert env.wind.z == pytest.approx(1.0)

    env.wind_elevation = 90.0
    env.update_wind()
    assert env.wind.y == pytest.approx(1.0)
    assert env.wind_time == 0.0


def test_set_wind_normalizes_a_copy():
    env = Environment()
    source = Vector3(0.0, 3.0, 4.0)
    env.set_wind(source)
    assert env.wind == Vector3(0.0, 0.6, 0.8)
    assert source == Vector3(0.0, 3.0, 4.0)


def test_manual_wind_angles_turn_the_wind_immediately():
    env = Environment(automatic_wind=False)
    env.set_wind_angles(90.0, 0.0)

    assert env.wind.x == pytest.approx(0.0, abs=1e-12)
    assert env.wind.z == pytest.approx(1.0)
    assert env.wind_time == 0.0


def test_wind_angles_wrap_and_clamp():
    env = Environment(automatic_wind=False)
    env.set_wind_angles(-30.0, 120.0)
    assert env.wind_azimuth == pytest.approx(330.0)
    assert env.wind_elevation == 90.0

    env.set_wind_angles(725.0, -95.0)
    assert env.wind_azimuth == pytest.approx(5.0)
    assert env.wind_elevation == -90.0
    assert env.wind.y == pytest.approx(-1.0)


def test_wind_angles_wait_for_manual_mode():
    env = Environment()
    env.set_wind_angles(90.0, 0.0)
    assert env.wind == Vector3(1.0, 0.0, 0.0)

    env.automatic_wind = False
    env.update_wind()
    assert env.wind.z == pytest.approx(1.0)


def test_non_finite_wind_angles_rejected():
    env = Environment(automatic_wind=False)
    with pytest.raises(ConfigurationError):
        env.set_wind_angles(float("nan"), 0.0)
    assert env.wind_azimuth == 0.0


def test_repel_point_expires_after_two_seconds():
    env = Environment()
    env.set_repel_point(Vector3(1.0, 2.0, 3.0), now=10.0)

    env.expire_repel_point(now=11.999)
    assert env.repel_point == Vector3(1.0, 2.0, 3.0)

    env.expire_repel_point(now=12.0)
    assert env.repel_point is None


def test_newer_repel_point_replaces_and_extends():
    env = Environment()
    env.set_repel_point(Vector3(1.0, 0.0, 0.0), now=0.0)
    env.set_repel_point(Vector3(2.0, 0.0, 0.0), now=1.5)

    env.expire_repel_point(now=3.0)
    assert env.repel_point == Vector3(2.0, 0.0, 0.0)
    env.expire_repel_point(now=3.5)
    assert env.repel_point is None


def test_repel_point_uses_injected_clock():
    ticks = iter([100.0, 101.0, 103.0])
    env = Environment(clock=lambda: next(ticks))
    env.set_repel_point(Vector3())
    env.expire_repel_point()
    assert env.repel_point is not None
    env.expire_repel_point()
    assert env.repel_point is None


def test_clear_repel_point():
    env = Environment()
    env.set_repel_point(Vector3(), now=0.0)
    env.clear_repel_point()
    assert env.repel_point is None


def test_repel_point_is_copied():
    env = Environment()
    point = Vector3(5.0, 5.0, 5.0)
    env.set_repel_point(point, now=0.0)
    point.add(Vector3(1.0, 1.0, 1.0))
    assert env.repel_point == Vector3(5.0, 5.0, 5.0)


def test_bounds_halves():
    bounds = Bounds(1280.0, 720.0, 500.0)
    assert (bounds.half_width, bounds.half_height, bounds.half_depth) == (640.0, 360.0, 250.0)


@pytest.mark.parametrize("extents", [(0.0, 1.0, 1.0), (1.0, -5.0, 1.0), (1.0, 1.0, float("nan"))])
def test_invalid_bounds_rejected(extents):
    with pytest.raises(ConfigurationError):
        Bounds(*extents)


def test_factor_validation():
    FlockingFactors(perception_radius=0.0)
    with pytest.raises(ConfigurationError):
        FlockingFactors(perception_radius=-1.0)
    with pytest.raises(ConfigurationError):
        FlockingFactors(cohesion=float("inf"))
    with pytest.raises(ValueError):
        FlockingFactors(separation=float("nan"))
