"""Matplotlib 3-D scenes for the well and solenoid views.

The simulation treats y as "up" and orbits in the XZ plane; matplotlib's 3-D
axes use z as up, so points are drawn as ``(x, z, y)``.
"""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D

from physviz.core.config import SOLENOID_3D_CFG, WELL_GRID_CFG, Solenoid3DCfg, WellGridCfg
from physviz.core.fields import helix_points, inside_field_lines, outside_field_lines
from physviz.core.model import SimulationState
from physviz.core.wells import well_surface


def to_plot_axes(points: np.ndarray) -> np.ndarray:
    """Reorder ``(n, 3)`` simulation points to matplotlib's ``(x, z, y)``."""

    pts = np.asarray(points, dtype=float)
    if pts.size == 0:
        return np.empty((0, 3), dtype=float)
    return pts[:, [0, 2, 1]]


@dataclass
class GravitySceneArtists:
    figure: plt.Figure
    axes: object
    planet: Line2D
    trail: Line2D
    status: object
    grid: object | None


def _style_axes(ax, background: str, extent: float) -> None:
    ax.set_facecolor(background)
    ax.set_xlim(-extent, extent)
    ax.set_ylim(-extent, extent)
    ax.set_zlim(-extent / 2, extent / 2)
    ax.set_axis_off()


def build_gravity_scene(
    state: SimulationState,
    cfg: WellGridCfg = WELL_GRID_CFG,
    *,
    show_grid: bool = True,
) -> GravitySceneArtists:
    if state.constants.dims != 3:
        raise ValueError("The 3-D gravity scene needs a 3-D simulation state")
    fig = plt.figure(figsize=(8, 8), facecolor=cfg.background_color)
    ax = fig.add_subplot(projection="3d")
    _style_axes(ax, cfg.background_color, cfg.width / 2)

    grid = None
    if show_grid:
        center = (float(state.central.position[0]), float(state.central.position[2]))
        grid_x, grid_z, grid_y = well_surface(
            cfg.width,
            cfg.height,
            cfg.segments,
            center,
            strength=cfg.well_strength,
            softening=cfg.well_softening,
            offset=cfg.plane_offset,
        )
        grid = ax.plot_wireframe(
            grid_x,
            grid_z,
            grid_y,
            color=cfg.line_color,
            alpha=cfg.line_alpha,
            linewidth=0.5,
        )

    star = to_plot_axes(state.central.position[np.newaxis, :])[0]
    ax.scatter([star[0]], [star[1]], [star[2]], color=cfg.star_color, s=120)
    (trail,) = ax.plot([], [], [], color=cfg.trail_color, alpha=0.5, linewidth=1)
    (planet,) = ax.plot([], [], [], "o", color=cfg.planet_color, markersize=6)
    status = ax.text2D(0.02, 0.98, "", transform=ax.transAxes, va="top", color="white")
    artists = GravitySceneArtists(fig, ax, planet, trail, status, grid)
    update_gravity_scene(artists, state)
    return artists


def update_gravity_scene(artists: GravitySceneArtists, state: SimulationState) -> None:
    body = to_plot_axes(state.body.position[np.newaxis, :])[0]
    artists.planet.set_data_3d([body[0]], [body[1]], [body[2]])
    trail = to_plot_axes(state.trail.as_array())
    artists.trail.set_data_3d(trail[:, 0], trail[:, 1], trail[:, 2])
    label = "running" if state.running else "stopped"
    if state.collided:
        label = "collided (press r to reset)"
    artists.status.set_text(
        f"t = {state.time:.2f}\n|r| = {state.distance:.1f}\n{label}"
    )


def build_solenoid_scene(cfg: Solenoid3DCfg = SOLENOID_3D_CFG) -> tuple[plt.Figure, object]:
    fig = plt.figure(figsize=(8, 6), facecolor=cfg.background_color)
    ax = fig.add_subplot(projection="3d")
    ax.set_facecolor(cfg.background_color)

    coil = helix_points(cfg.radius, cfg.length, cfg.turns, cfg.helix_samples)
    ax.plot(
        coil[:, 0],
        coil[:, 1],
        coil[:, 2],
        color=cfg.coil_color,
        linewidth=cfg.wire_thickness,
    )
    for line in inside_field_lines(cfg) + outside_field_lines(cfg):
        ax.plot(line[:, 0], line[:, 1], line[:, 2], color=cfg.field_color, linewidth=1)

    extent = cfg.length * 0.75
    ax.set_xlim(-extent, extent)
    ax.set_ylim(-extent, extent)
    ax.set_zlim(-extent, extent)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("z (axis)")
    return fig, ax


__all__ = [
    "GravitySceneArtists",
    "build_gravity_scene",
    "build_solenoid_scene",
    "to_plot_axes",
    "update_gravity_scene",
]
