"""Cosmetic "spacetime well" geometry.

Nothing here feeds back into the physics; these helpers only bend grid lines
for display. The 2-D variant works in canvas pixels, the 3-D variant in scene
units on the horizontal plane.
"""
from __future__ import annotations

import numpy as np


def displace_toward(
    points: np.ndarray,
    center: np.ndarray | tuple[float, float],
    strength: float,
    softening: float = 100.0,
) -> np.ndarray:
    """Pull 2-D ``points`` toward ``center`` with a softened radial falloff.

    Each point ``p`` moves by ``d * strength / (|d|^2 + softening) / sqrt(|d|^2 + 1)``
    toward the centre, where ``d = p - center``.
    """

    pts = np.asarray(points, dtype=float)
    d = pts - np.asarray(center, dtype=float)
    dist_sq = np.sum(d * d, axis=-1, keepdims=True)
    factor = strength / (dist_sq + softening)
    offset = d * factor / np.sqrt(dist_sq + 1.0)
    return pts - offset


def well_grid_lines(
    size: tuple[int, int],
    spacing: float,
    center: np.ndarray | tuple[float, float],
    strength: float,
    softening: float = 100.0,
    *,
    sample_step: float = 1.0,
) -> list[np.ndarray]:
    """Return the bent vertical and horizontal grid lines as polylines."""

    if spacing <= 0.0:
        raise ValueError("Grid spacing must be positive")
    width, height = size
    ys = np.arange(0.0, height + sample_step * 0.5, sample_step)
    xs = np.arange(0.0, width + sample_step * 0.5, sample_step)
    lines: list[np.ndarray] = []
    for x in np.arange(0.0, width + spacing * 0.5, spacing):
        straight = np.column_stack((np.full_like(ys, x), ys))
        lines.append(displace_toward(straight, center, strength, softening))
    for y in np.arange(0.0, height + spacing * 0.5, spacing):
        straight = np.column_stack((xs, np.full_like(xs, y)))
        lines.append(displace_toward(straight, center, strength, softening))
    return lines


def well_depth(
    x: np.ndarray | float,
    z: np.ndarray | float,
    center: tuple[float, float] = (0.0, 0.0),
    strength: float = 4000.0,
    softening: float = 250.0,
) -> np.ndarray:
    """Height of the well surface at plane coordinates ``(x, z)``."""

    dx = np.asarray(x, dtype=float) - center[0]
    dz = np.asarray(z, dtype=float) - center[1]
    return -strength / (dx * dx + dz * dz + softening)


def well_surface(
    width: float,
    height: float,
    segments: int,
    center: tuple[float, float] = (0.0, 0.0),
    *,
    strength: float = 4000.0,
    softening: float = 250.0,
    offset: float = 0.0,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Sample a ``segments x segments`` plane centred on the origin.

    Returns ``(X, Z, Y)`` meshes where ``Y`` is the dipped height, shifted by
    ``offset``.
    """

    if segments < 1:
        raise ValueError("segments must be at least 1")
    xs = np.linspace(-width / 2.0, width / 2.0, segments + 1)
    zs = np.linspace(-height / 2.0, height / 2.0, segments + 1)
    grid_x, grid_z = np.meshgrid(xs, zs)
    grid_y = well_depth(grid_x, grid_z, center, strength, softening) + offset
    return grid_x, grid_z, grid_y


__all__ = ["displace_toward", "well_depth", "well_grid_lines", "well_surface"]
