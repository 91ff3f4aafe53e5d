"""Configuration dataclasses for the physics visualizations."""
from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class SimulationConstants:
    """Fixed inputs for one two-body run.

    The constants are tuned for plausible on-screen trajectories and are not
    calibrated to any physical unit system.
    """

    gravitational_constant: float = 1000.0
    central_mass: float = 1000.0
    body_mass: float = 1.0
    dt: float = 0.005
    collision_threshold: float = 1.0
    start_position: np.ndarray = field(
        default_factory=lambda: np.array([150.0, 0.0], dtype=float)
    )
    start_velocity: np.ndarray = field(
        default_factory=lambda: np.array([0.0, 2.5], dtype=float)
    )
    trail_capacity: int = 1000
    log_every_steps: int = 20

    def __post_init__(self) -> None:
        if self.dt <= 0.0:
            raise ValueError("dt must be positive")
        if self.central_mass <= 0.0:
            raise ValueError("central_mass must be positive")
        if self.body_mass <= 0.0:
            raise ValueError("body_mass must be positive")
        if self.collision_threshold < 0.0:
            raise ValueError("collision_threshold must not be negative")
        position = np.asarray(self.start_position, dtype=float)
        velocity = np.asarray(self.start_velocity, dtype=float)
        if position.shape != velocity.shape or position.shape not in ((2,), (3,)):
            raise ValueError("start position and velocity must both be 2-D or 3-D")
        object.__setattr__(self, "start_position", position)
        object.__setattr__(self, "start_velocity", velocity)

    @property
    def dims(self) -> int:
        return int(self.start_position.shape[0])

    def as_meta(self) -> dict[str, object]:
        return {
            "G": self.gravitational_constant,
            "M_central": self.central_mass,
            "m_body": self.body_mass,
            "dt": self.dt,
            "collision_threshold": self.collision_threshold,
            "R0": self.start_position.tolist(),
            "V0": self.start_velocity.tolist(),
            "trail_capacity": self.trail_capacity,
            "log_every_steps": self.log_every_steps,
            "dims": self.dims,
            "integrator": "semi-implicit Euler",
        }


@dataclass(frozen=True)
class GravityRenderCfg:
    width: int = 600
    height: int = 600
    pixels_per_unit: float = 1.5
    frame_rate: int = 60
    background_color: tuple[int, int, int] = (17, 17, 17)
    star_color: tuple[int, int, int] = (255, 255, 0)
    star_pixel_radius: int = 10
    planet_color: tuple[int, int, int] = (0, 0, 255)
    planet_pixel_radius: int = 5
    trail_color: tuple[int, int, int, int] = (0, 0, 255, 128)
    trail_line_width: int = 1
    grid_spacing: int = 20
    grid_color: tuple[int, int, int, int] = (100, 100, 100, 128)
    well_strength: float = 15_000.0
    well_softening: float = 100.0
    hud_text_color: tuple[int, int, int] = (234, 241, 255)
    button_color: tuple[int, int, int, int] = (8, 32, 64, int(255 * 0.78))
    button_hover_color: tuple[int, int, int, int] = (18, 52, 94, int(255 * 0.88))
    button_text_color: tuple[int, int, int] = (234, 241, 255)
    button_border_color: tuple[int, int, int, int] = (88, 140, 255, int(255 * 0.55))
    button_radius: int = 10
    button_size: tuple[int, int] = (96, 32)
    button_margin: int = 10


@dataclass(frozen=True)
class WellGridCfg:
    width: float = 600.0
    height: float = 600.0
    segments: int = 50
    well_strength: float = 4000.0
    well_softening: float = 250.0
    plane_offset: float = -15.0
    line_color: str = "white"
    line_alpha: float = 0.6
    background_color: str = "black"
    star_color: str = "gold"
    planet_color: str = "dodgerblue"
    trail_color: str = "deepskyblue"
    interval_ms: int = 16


@dataclass(frozen=True)
class SolenoidCfg:
    width: int = 600
    height: int = 400
    rect_width: int = 300
    rect_height: int = 80
    coil_count: int = 15
    sample_spacing: int = 30
    arrow_length: float = 20.0
    arrow_head_length: int = 6
    arrow_head_angle: float = math.pi / 6
    min_magnitude: float = 0.05
    outside_strength: float = 50_000.0
    outside_softening: float = 1000.0
    outside_scale: float = 0.5
    background_color: tuple[int, int, int] = (240, 240, 240)
    body_color: tuple[int, int, int] = (255, 0, 0)
    body_line_width: int = 3
    coil_color: tuple[int, int, int] = (139, 0, 0)
    arrow_color: tuple[int, int, int] = (0, 0, 255)

    @property
    def rect_x(self) -> float:
        return (self.width - self.rect_width) / 2

    @property
    def rect_y(self) -> float:
        return (self.height - self.rect_height) / 2


@dataclass(frozen=True)
class Solenoid3DCfg:
    radius: float = 30.0
    length: float = 150.0
    turns: int = 25
    wire_thickness: float = 2.5
    helix_samples: int = 300
    inside_lines: int = 6
    outside_lines: int = 9
    curve_samples: int = 64
    inside_overhang: float = 15.0
    inside_spread: float = 0.85
    outside_base_factor: float = 1.4
    outside_step_factor: float = 0.4
    outside_end_factor: float = 0.8
    coil_color: str = "#b87333"
    field_color: str = "blue"
    background_color: str = "#eeeeff"


GRAVITY_RENDER_CFG = GravityRenderCfg()
WELL_GRID_CFG = WellGridCfg()
SOLENOID_CFG = SolenoidCfg()
SOLENOID_3D_CFG = Solenoid3DCfg()


__all__ = [
    "GRAVITY_RENDER_CFG",
    "GravityRenderCfg",
    "SOLENOID_3D_CFG",
    "SOLENOID_CFG",
    "SimulationConstants",
    "Solenoid3DCfg",
    "SolenoidCfg",
    "WELL_GRID_CFG",
    "WellGridCfg",
]
