import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from physviz.core.config import SimulationConstants


@pytest.fixture
def constants_2d():
    return SimulationConstants(
        gravitational_constant=50.0,
        central_mass=1000.0,
        dt=0.01,
        start_position=np.array([150.0, 0.0]),
        start_velocity=np.array([0.0, 2.5]),
        collision_threshold=1.0,
    )


@pytest.fixture
def constants_3d():
    return SimulationConstants(
        gravitational_constant=50.0,
        central_mass=1000.0,
        dt=0.01,
        start_position=np.array([150.0, 0.0, 0.0]),
        start_velocity=np.array([0.0, 0.0, 15.0]),
        collision_threshold=5.0,
    )
