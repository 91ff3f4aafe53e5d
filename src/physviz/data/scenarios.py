"""Preset starting conditions for the gravity sketches."""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from physviz.core.config import SimulationConstants


@dataclass(frozen=True)
class Scenario:
    key: str
    name: str
    gravitational_constant: float
    central_mass: float
    dt: float
    position: tuple[float, ...]
    velocity: tuple[float, ...]
    collision_threshold: float
    description: str
    body_mass: float = 1.0
    trail_capacity: int = 1000

    @property
    def dims(self) -> int:
        return len(self.position)

    def constants(self) -> SimulationConstants:
        return SimulationConstants(
            gravitational_constant=self.gravitational_constant,
            central_mass=self.central_mass,
            body_mass=self.body_mass,
            dt=self.dt,
            collision_threshold=self.collision_threshold,
            start_position=np.array(self.position, dtype=float),
            start_velocity=np.array(self.velocity, dtype=float),
            trail_capacity=self.trail_capacity,
        )


_CIRCULAR_SPEED = math.sqrt(50.0 * 1000.0 / 150.0)

SCENARIO_DEFINITIONS: tuple[Scenario, ...] = (
    Scenario(
        key="gravity2d",
        name="Canvas orbit",
        gravitational_constant=1000.0,
        central_mass=1000.0,
        dt=0.005,
        position=(150.0, 0.0),
        velocity=(0.0, 2.5),
        collision_threshold=1.0,
        description="Flat canvas sketch: slow start, plunging elliptical orbit.",
    ),
    Scenario(
        key="gravity3d",
        name="Orbit over the well",
        gravitational_constant=50.0,
        central_mass=1000.0,
        dt=0.01,
        position=(150.0, 0.0, 0.0),
        velocity=(0.0, 0.0, 15.0),
        collision_threshold=math.sqrt(25.0),
        description="Orbit in the XZ plane above the deformed spacetime grid.",
    ),
    Scenario(
        key="circular2d",
        name="Circular orbit",
        gravitational_constant=50.0,
        central_mass=1000.0,
        dt=0.01,
        position=(150.0, 0.0),
        velocity=(0.0, _CIRCULAR_SPEED),
        collision_threshold=1.0,
        description=f"Circular speed sqrt(GM/r) (~{_CIRCULAR_SPEED:.2f} units/s).",
    ),
)

SCENARIOS: dict[str, Scenario] = {scenario.key: scenario for scenario in SCENARIO_DEFINITIONS}
SCENARIO_DISPLAY_ORDER: list[str] = [scenario.key for scenario in SCENARIO_DEFINITIONS]
DEFAULT_SCENARIO_KEY = SCENARIO_DISPLAY_ORDER[0]


def get_scenario(key: str) -> Scenario:
    try:
        return SCENARIOS[key]
    except KeyError:
        raise ValueError(
            f"Unknown scenario {key!r}; choose from {', '.join(SCENARIO_DISPLAY_ORDER)}"
        ) from None


__all__ = [
    "DEFAULT_SCENARIO_KEY",
    "SCENARIO_DEFINITIONS",
    "SCENARIO_DISPLAY_ORDER",
    "SCENARIOS",
    "Scenario",
    "get_scenario",
]
