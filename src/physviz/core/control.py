"""Run control for the two-body simulation.

A run is either stopped or running. The host calls :func:`tick` once per
frame; only a running state advances. Every function takes the owned
:class:`SimulationState` and returns the state the caller should keep using,
which is a fresh object after a reset.
"""
from __future__ import annotations

import numpy as np

from .config import SimulationConstants
from .logging_utils import RunLogger
from .model import Body, CentralMass, RunState, SimulationState
from .physics import ProximityError, energy_specific, step
from .trail import TrailBuffer


def new_state(
    constants: SimulationConstants,
    central: CentralMass | None = None,
) -> SimulationState:
    """Build a stopped state with the initial body and an empty trail."""

    if central is None:
        central = CentralMass(
            mass=constants.central_mass,
            position=np.zeros(constants.dims, dtype=float),
        )
    elif central.position.shape[0] != constants.dims:
        raise ValueError("central mass and constants must share the same dimensionality")
    body = Body(
        position=constants.start_position.copy(),
        velocity=constants.start_velocity.copy(),
    )
    return SimulationState(
        constants=constants,
        central=central,
        body=body,
        trail=TrailBuffer(constants.trail_capacity),
    )


def log_state(state: SimulationState, logger: RunLogger | None) -> None:
    if logger is None:
        return
    body = state.body
    logger.log_ts(
        [
            float(state.time),
            state.steps,
            *(float(c) for c in body.position),
            *(float(c) for c in body.velocity),
            state.distance,
            float(np.linalg.norm(body.velocity)),
            energy_specific(body, state.central, state.constants),
        ]
    )


def _log_event(
    state: SimulationState,
    logger: RunLogger | None,
    kind: str,
    details: str = "",
) -> None:
    if logger is None:
        return
    logger.log_event([float(state.time), state.steps, kind, state.distance, details])


def reset(state: SimulationState, logger: RunLogger | None = None) -> SimulationState:
    """Return a stopped state back at the initial conditions."""

    fresh = new_state(state.constants, state.central)
    _log_event(fresh, logger, "reset")
    log_state(fresh, logger)
    print("Orbit simulation reset.")
    return fresh


def start(state: SimulationState, logger: RunLogger | None = None) -> SimulationState:
    if state.running:
        return state
    if state.collided:
        print("Run ended in a collision; reset before starting again.")
        return state
    state.run_state = RunState.RUNNING
    _log_event(state, logger, "start")
    print("Orbit simulation started.")
    return state


def stop(
    state: SimulationState,
    logger: RunLogger | None = None,
    *,
    reason: str = "",
) -> SimulationState:
    if not state.running:
        return state
    state.run_state = RunState.STOPPED
    _log_event(state, logger, "stop", reason)
    print("Orbit simulation stopped.")
    return state


def tick(state: SimulationState, logger: RunLogger | None = None) -> SimulationState:
    """Advance a running state by one step and record the new position."""

    if not state.running:
        return state
    try:
        body = step(state.body, state.central, state.constants)
    except ProximityError as exc:
        print(f"Warning: {exc}")
        state.collided = True
        _log_event(state, logger, "proximity", f"threshold={exc.threshold:g}")
        return stop(state, logger, reason="proximity")

    state.body = body
    state.trail.push(body.position)
    state.time += state.constants.dt
    state.steps += 1
    if state.steps % max(1, state.constants.log_every_steps) == 0:
        log_state(state, logger)
    return state


def run_steps(
    state: SimulationState,
    count: int,
    logger: RunLogger | None = None,
) -> SimulationState:
    """Tick a running state up to ``count`` times, stopping early if it halts."""

    for _ in range(count):
        if not state.running:
            break
        state = tick(state, logger)
    return state


__all__ = [
    "log_state",
    "new_state",
    "reset",
    "run_steps",
    "start",
    "stop",
    "tick",
]
