"""Data models for the two-body simulation state."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np

from .config import SimulationConstants
from .trail import TrailBuffer


def _as_vector(values, name: str) -> np.ndarray:
    vector = np.array(values, dtype=float)
    if vector.shape not in ((2,), (3,)):
        raise ValueError(f"{name} must have 2 or 3 components, got shape {vector.shape}")
    return vector


@dataclass
class Body:
    """State of the moving secondary mass.

    ``acceleration`` is the value used by the step that produced this body; it
    is informational only and never fed back into the next step.
    """

    position: np.ndarray
    velocity: np.ndarray
    acceleration: np.ndarray | None = None

    def __post_init__(self) -> None:
        self.position = _as_vector(self.position, "position")
        self.velocity = _as_vector(self.velocity, "velocity")
        if self.position.shape != self.velocity.shape:
            raise ValueError("position and velocity must share the same dimensionality")
        if self.acceleration is not None:
            self.acceleration = _as_vector(self.acceleration, "acceleration")

    @property
    def dims(self) -> int:
        return int(self.position.shape[0])

    def copy(self) -> "Body":
        acceleration = None if self.acceleration is None else self.acceleration.copy()
        return Body(self.position.copy(), self.velocity.copy(), acceleration)


@dataclass(frozen=True)
class CentralMass:
    """Immovable attractor the body orbits."""

    mass: float
    position: np.ndarray = field(
        default_factory=lambda: np.zeros(2, dtype=float)
    )

    def __post_init__(self) -> None:
        if self.mass <= 0.0:
            raise ValueError("Central mass must be positive")
        object.__setattr__(self, "position", _as_vector(self.position, "position"))


class RunState(Enum):
    STOPPED = auto()
    RUNNING = auto()


@dataclass
class SimulationState:
    """Everything one simulation run owns.

    Built by :func:`physviz.core.control.new_state` and replaced wholesale on
    reset; nothing survives a reset.
    """

    constants: SimulationConstants
    central: CentralMass
    body: Body
    trail: TrailBuffer
    run_state: RunState = RunState.STOPPED
    time: float = 0.0
    steps: int = 0
    collided: bool = False

    @property
    def running(self) -> bool:
        return self.run_state is RunState.RUNNING

    @property
    def distance(self) -> float:
        return float(np.linalg.norm(self.central.position - self.body.position))


__all__ = ["Body", "CentralMass", "RunState", "SimulationState"]
