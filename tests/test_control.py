import csv

import numpy as np
import pytest

from physviz.core import control
from physviz.core.config import SimulationConstants
from physviz.core.logging_utils import RunLogger
from physviz.core.model import CentralMass, RunState


def _assert_initial(state, constants):
    assert state.run_state is RunState.STOPPED
    np.testing.assert_array_equal(state.body.position, constants.start_position)
    np.testing.assert_array_equal(state.body.velocity, constants.start_velocity)
    assert len(state.trail) == 0
    assert state.time == 0.0
    assert state.steps == 0
    assert not state.collided


def test_new_state_is_stopped(constants_2d):
    state = control.new_state(constants_2d)
    _assert_initial(state, constants_2d)
    np.testing.assert_array_equal(state.central.position, [0.0, 0.0])
    assert state.central.mass == 1000.0


def test_start_and_stop_transitions(constants_2d):
    state = control.start(control.new_state(constants_2d))
    assert state.running

    again = control.start(state)
    assert again is state
    assert again.running

    state = control.stop(state)
    assert state.run_state is RunState.STOPPED
    assert control.stop(state).run_state is RunState.STOPPED


def test_tick_only_advances_running_state(constants_2d):
    state = control.new_state(constants_2d)
    state = control.tick(state)
    assert state.steps == 0
    assert len(state.trail) == 0

    state = control.start(state)
    state = control.tick(state)
    assert state.steps == 1
    assert state.time == pytest.approx(0.01)
    assert state.trail.iterate() == [tuple(state.body.position)]
    np.testing.assert_array_almost_equal(state.body.position, [149.999778, 0.025], decimal=6)


def test_trail_follows_ticks_in_order(constants_2d):
    state = control.start(control.new_state(constants_2d))
    positions = []
    for _ in range(5):
        state = control.tick(state)
        positions.append(tuple(state.body.position))
    assert state.trail.iterate() == positions


def test_reset_is_idempotent(constants_2d):
    state = control.start(control.new_state(constants_2d))
    state = control.run_steps(state, 25)

    once = control.reset(state)
    twice = control.reset(once)
    _assert_initial(once, constants_2d)
    _assert_initial(twice, constants_2d)
    assert once.constants is twice.constants


def test_reset_keeps_custom_central_mass():
    constants = SimulationConstants(
        gravitational_constant=50.0,
        start_position=np.array([100.0, 0.0]),
        start_velocity=np.array([0.0, 1.0]),
    )
    central = CentralMass(mass=1000.0, position=np.array([10.0, 0.0]))
    state = control.reset(control.new_state(constants, central))
    assert state.central is central


def test_central_mass_dimensions_must_match(constants_3d):
    with pytest.raises(ValueError):
        control.new_state(constants_3d, CentralMass(mass=1.0))


def test_proximity_stops_run_until_reset():
    constants = SimulationConstants(
        start_position=np.array([0.5, 0.0]),
        start_velocity=np.array([0.0, 0.0]),
        collision_threshold=1.0,
    )
    state = control.start(control.new_state(constants))
    state = control.tick(state)

    assert state.run_state is RunState.STOPPED
    assert state.collided
    assert state.steps == 0
    assert len(state.trail) == 0
    np.testing.assert_array_equal(state.body.position, [0.5, 0.0])

    state = control.start(state)
    assert not state.running

    state = control.start(control.reset(state))
    assert state.running
    assert not state.collided


def test_run_steps_stops_early_on_collision():
    constants = SimulationConstants(
        gravitational_constant=1000.0,
        start_position=np.array([5.0, 0.0]),
        start_velocity=np.array([0.0, 0.0]),
        collision_threshold=4.0,
        dt=0.001,
    )
    state = control.start(control.new_state(constants))
    state = control.run_steps(state, 10_000)
    assert state.collided
    assert state.steps < 10_000


def test_run_logging(tmp_path, constants_2d):
    logger = RunLogger(tmp_path, run_id="orbit", dims=2)
    state = control.start(control.new_state(constants_2d), logger)
    state = control.run_steps(state, 40, logger)
    state = control.stop(state, logger)
    state = control.reset(state, logger)
    logger.close()

    with logger.timeseries_path.open(newline="") as fh:
        rows = list(csv.DictReader(fh))
    # every 20 steps plus the reset snapshot
    assert [int(row["step"]) for row in rows] == [20, 40, 0]
    assert float(rows[1]["t"]) == pytest.approx(0.4)

    with logger.events_path.open(newline="") as fh:
        events = [row["type"] for row in csv.DictReader(fh)]
    assert events == ["start", "stop", "reset"]


def test_proximity_is_logged(tmp_path):
    constants = SimulationConstants(
        start_position=np.array([0.5, 0.0]),
        start_velocity=np.array([0.0, 0.0]),
    )
    with RunLogger(tmp_path, dims=2) as logger:
        state = control.start(control.new_state(constants), logger)
        control.tick(state, logger)

    with logger.events_path.open(newline="") as fh:
        events = list(csv.DictReader(fh))
    assert [row["type"] for row in events] == ["start", "proximity", "stop"]
    assert events[2]["details"] == "proximity"
