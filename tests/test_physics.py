import math

import numpy as np
import pytest

from physviz.core.config import SimulationConstants
from physviz.core.model import Body, CentralMass
from physviz.core.physics import (
    ProximityError,
    circular_speed,
    energy_specific,
    gravitational_acceleration,
    step,
)


def _central(dims):
    return CentralMass(mass=1000.0, position=np.zeros(dims))


def test_single_step_2d(constants_2d):
    """
    a = G*M/r^2 = 50*1000/150^2 toward the origin
      v' = v + a*dt
      x' = x + v'*dt
    """
    body = Body(position=(150.0, 0.0), velocity=(0.0, 2.5))
    out = step(body, _central(2), constants_2d)

    np.testing.assert_array_almost_equal(out.velocity, [-0.022222, 2.5], decimal=6)
    np.testing.assert_array_almost_equal(out.position, [149.999778, 0.025], decimal=6)
    np.testing.assert_array_almost_equal(out.acceleration, [-2.222222, 0.0], decimal=6)


def test_single_step_3d(constants_3d):
    body = Body(position=(150.0, 0.0, 0.0), velocity=(0.0, 0.0, 15.0))
    out = step(body, _central(3), constants_3d)

    np.testing.assert_array_almost_equal(out.velocity, [-0.022222, 0.0, 15.0], decimal=6)
    np.testing.assert_array_almost_equal(out.position, [149.999778, 0.0, 0.15], decimal=6)


def test_velocity_is_updated_before_position(constants_2d):
    body = Body(position=(150.0, 0.0), velocity=(0.0, 0.0))
    out = step(body, _central(2), constants_2d)
    # explicit Euler would leave the position untouched on the first step
    assert out.position[0] < 150.0
    assert out.position[0] == pytest.approx(150.0 + out.velocity[0] * constants_2d.dt)


def test_step_is_deterministic_and_pure(constants_2d):
    body = Body(position=(150.0, 0.0), velocity=(0.0, 2.5))
    first = step(body, _central(2), constants_2d)
    second = step(body, _central(2), constants_2d)

    assert np.array_equal(first.position, second.position)
    assert np.array_equal(first.velocity, second.velocity)
    np.testing.assert_array_equal(body.position, [150.0, 0.0])
    np.testing.assert_array_equal(body.velocity, [0.0, 2.5])


def test_proximity_raises_without_mutating(constants_2d):
    body = Body(position=(0.5, 0.0), velocity=(0.0, 1.0))
    with pytest.raises(ProximityError) as info:
        step(body, _central(2), constants_2d)

    assert info.value.distance == pytest.approx(0.5)
    assert info.value.threshold == 1.0
    np.testing.assert_array_equal(body.position, [0.5, 0.0])
    np.testing.assert_array_equal(body.velocity, [0.0, 1.0])


def test_proximity_threshold_3d(constants_3d):
    body = Body(position=(3.0, 0.0, 3.9), velocity=(0.0, 0.0, 0.0))
    with pytest.raises(ProximityError):
        step(body, _central(3), constants_3d)

    outside = Body(position=(3.0, 0.0, 4.1), velocity=(0.0, 0.0, 0.0))
    step(outside, _central(3), constants_3d)


def test_acceleration_points_at_central_mass(constants_2d):
    central = CentralMass(mass=1000.0, position=np.array([10.0, 10.0]))
    acc = gravitational_acceleration(np.array([10.0, 110.0]), central, constants_2d)
    assert acc[0] == pytest.approx(0.0)
    assert acc[1] == pytest.approx(-50.0 * 1000.0 / 100.0**2)


def test_field_strength_comes_from_central_body(constants_2d):
    heavy = CentralMass(mass=4000.0, position=np.zeros(2))
    acc = gravitational_acceleration(np.array([100.0, 0.0]), heavy, constants_2d)
    assert acc[0] == pytest.approx(-50.0 * 4000.0 / 100.0**2)
    body = Body(position=(100.0, 0.0), velocity=(0.0, 0.0))
    assert energy_specific(body, heavy, constants_2d) == pytest.approx(-50.0 * 4000.0 / 100.0)


def test_circular_orbit_stays_near_radius(constants_2d):
    r0 = 150.0
    v0 = circular_speed(50.0, 1000.0, r0)
    body = Body(position=(r0, 0.0), velocity=(0.0, v0))
    central = _central(2)

    radii = []
    for _ in range(10_000):
        body = step(body, central, constants_2d)
        radii.append(float(np.linalg.norm(body.position)))

    assert min(radii) > r0 * 0.99
    assert max(radii) < r0 * 1.01


def test_mixed_dimensions_rejected(constants_2d):
    body = Body(position=(150.0, 0.0, 0.0), velocity=(0.0, 0.0, 1.0))
    with pytest.raises(ValueError):
        step(body, _central(2), constants_2d)
    with pytest.raises(ValueError):
        Body(position=(1.0, 2.0), velocity=(1.0, 2.0, 3.0))
    with pytest.raises(ValueError):
        Body(position=(1.0,), velocity=(1.0,))


def test_energy_and_circular_speed(constants_2d):
    v = circular_speed(50.0, 1000.0, 150.0)
    assert v == pytest.approx(math.sqrt(50_000.0 / 150.0))
    body = Body(position=(150.0, 0.0), velocity=(0.0, v))
    # circular orbit: E = -GM / 2r
    assert energy_specific(body, _central(2), constants_2d) == pytest.approx(-50_000.0 / 300.0)
    with pytest.raises(ValueError):
        circular_speed(50.0, 1000.0, 0.0)


def test_constants_validation():
    with pytest.raises(ValueError):
        SimulationConstants(dt=0.0)
    with pytest.raises(ValueError):
        SimulationConstants(central_mass=0.0)
    with pytest.raises(ValueError):
        SimulationConstants(start_position=np.zeros(3), start_velocity=np.zeros(2))
    with pytest.raises(ValueError):
        CentralMass(mass=-1.0)
