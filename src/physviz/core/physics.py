"""Physics helpers for the two-body gravity sketch."""
from __future__ import annotations

import math

import numpy as np

from .config import SimulationConstants
from .model import Body, CentralMass


class ProximityError(RuntimeError):
    """Raised when the body comes closer to the central mass than allowed."""

    def __init__(self, distance: float, threshold: float) -> None:
        super().__init__(
            f"Body too close to central mass: distance {distance:.6g} "
            f"< threshold {threshold:.6g}"
        )
        self.distance = distance
        self.threshold = threshold


def gravitational_acceleration(
    position: np.ndarray,
    central: CentralMass,
    constants: SimulationConstants,
) -> np.ndarray:
    """Inverse-square acceleration at ``position`` toward ``central``.

    Raises :class:`ProximityError` inside the collision threshold, which also
    keeps the division well away from zero.
    """

    d = central.position - position
    distance = float(np.linalg.norm(d))
    if distance < constants.collision_threshold or distance == 0.0:
        raise ProximityError(distance, constants.collision_threshold)
    magnitude = constants.gravitational_constant * central.mass / (distance**2)
    return magnitude * (d / distance)


def step(body: Body, central: CentralMass, constants: SimulationConstants) -> Body:
    """Advance ``body`` one fixed time step with semi-implicit Euler.

    The velocity is updated from the current acceleration first and the
    position is then moved with the already-updated velocity. ``body`` is
    left untouched; a new :class:`Body` is returned.
    """

    if body.position.shape != central.position.shape:
        raise ValueError("body and central mass must share the same dimensionality")

    acceleration = gravitational_acceleration(body.position, central, constants)
    dt = constants.dt
    velocity = body.velocity + acceleration * dt
    position = body.position + velocity * dt
    return Body(position=position, velocity=velocity, acceleration=acceleration)


def circular_speed(gravitational_constant: float, mass: float, radius: float) -> float:
    """Speed of a circular orbit of ``radius`` around ``mass``."""

    if radius <= 0.0:
        raise ValueError("radius must be positive")
    return math.sqrt(gravitational_constant * mass / radius)


def energy_specific(body: Body, central: CentralMass, constants: SimulationConstants) -> float:
    """Specific orbital energy of ``body`` in the field of ``central``."""

    distance = float(np.linalg.norm(central.position - body.position))
    speed_sq = float(np.dot(body.velocity, body.velocity))
    return 0.5 * speed_sq - constants.gravitational_constant * central.mass / distance


__all__ = [
    "ProximityError",
    "circular_speed",
    "energy_specific",
    "gravitational_acceleration",
    "step",
]
