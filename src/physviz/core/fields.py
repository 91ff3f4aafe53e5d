"""Conceptual solenoid field geometry for the 2-D and 3-D displays."""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .config import SOLENOID_3D_CFG, SOLENOID_CFG, Solenoid3DCfg, SolenoidCfg


@dataclass(frozen=True)
class FieldSample:
    x: float
    y: float
    bx: float
    by: float
    magnitude: float


def field_at(x: float, y: float, cfg: SolenoidCfg = SOLENOID_CFG) -> FieldSample:
    """Conceptual field direction and strength at canvas point ``(x, y)``.

    Inside the coil the field points along +x at full strength. Left and right
    of the coil it fans away from the centre and bends back toward the axis,
    decaying with squared distance. Above and below the coil body there is no
    arrow.
    """

    left = cfg.rect_x
    right = cfg.rect_x + cfg.rect_width
    top = cfg.rect_y
    bottom = cfg.rect_y + cfg.rect_height
    if left < x < right and top < y < bottom:
        return FieldSample(x, y, 1.0, 0.0, 1.0)

    bx = by = magnitude = 0.0
    if x < left or x > right:
        center_x = left + cfg.rect_width / 2
        center_y = top + cfg.rect_height / 2
        dx = x - center_x
        dy = y - center_y
        decay = cfg.outside_strength / (dx * dx + dy * dy + cfg.outside_softening)
        bx = -abs(dx) if x < center_x else abs(dx)
        by = -dy
        magnitude = decay * cfg.outside_scale

    length = math.hypot(bx, by)
    if length > 0.01:
        return FieldSample(x, y, bx / length, by / length, magnitude)
    return FieldSample(x, y, 0.0, 0.0, 0.0)


def sample_field(cfg: SolenoidCfg = SOLENOID_CFG) -> list[FieldSample]:
    half = cfg.sample_spacing / 2
    samples: list[FieldSample] = []
    for x in np.arange(half, cfg.width, cfg.sample_spacing):
        for y in np.arange(half, cfg.height, cfg.sample_spacing):
            samples.append(field_at(float(x), float(y), cfg))
    return samples


def field_arrows(
    cfg: SolenoidCfg = SOLENOID_CFG,
) -> list[tuple[tuple[float, float], tuple[float, float]]]:
    """Arrow segments for every sample strong enough to draw."""

    arrows = []
    for sample in sample_field(cfg):
        if sample.magnitude <= cfg.min_magnitude:
            continue
        scale = cfg.arrow_length * sample.magnitude
        end = (sample.x + sample.bx * scale, sample.y + sample.by * scale)
        arrows.append(((sample.x, sample.y), end))
    return arrows


def arrow_head(
    start: tuple[float, float],
    end: tuple[float, float],
    head_length: float,
    head_angle: float = math.pi / 6,
) -> tuple[tuple[float, float], tuple[float, float]]:
    angle = math.atan2(end[1] - start[1], end[0] - start[0])
    left = (
        end[0] - head_length * math.cos(angle - head_angle),
        end[1] - head_length * math.sin(angle - head_angle),
    )
    right = (
        end[0] - head_length * math.cos(angle + head_angle),
        end[1] - head_length * math.sin(angle + head_angle),
    )
    return left, right


def coil_lines(cfg: SolenoidCfg = SOLENOID_CFG) -> list[tuple[tuple[float, float], tuple[float, float]]]:
    lines = []
    for i in range(cfg.coil_count + 1):
        x = cfg.rect_x + (i / cfg.coil_count) * cfg.rect_width
        lines.append(((x, cfg.rect_y), (x, cfg.rect_y + cfg.rect_height)))
    return lines


# --- 3-D ---


def rotate_about_z(points: np.ndarray, angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    rotation = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
    return np.asarray(points, dtype=float) @ rotation.T


def helix_points(radius: float, length: float, turns: float, samples: int) -> np.ndarray:
    """Points along a helix wound around the z axis and centred on the origin."""

    t = np.linspace(0.0, 1.0, samples + 1)
    angle = 2.0 * math.pi * turns * t
    return np.column_stack(
        (radius * np.cos(angle), radius * np.sin(angle), length * (t - 0.5))
    )


def catmull_rom(control_points: np.ndarray, samples: int) -> np.ndarray:
    """Sample an open uniform Catmull-Rom spline through ``control_points``.

    Uses the uniform parameterisation (alpha = 0), not the centripetal
    variant that three.js ``CatmullRomCurve3`` defaults to. The first and
    last segments use mirrored phantom points. Returns ``samples + 1``
    points evenly spaced in the curve parameter.
    """

    pts = np.asarray(control_points, dtype=float)
    n = len(pts)
    if n < 2:
        raise ValueError("Catmull-Rom spline needs at least two points")
    padded = np.vstack((2 * pts[0] - pts[1], pts, 2 * pts[-1] - pts[-2]))
    out = np.empty((samples + 1, pts.shape[1]), dtype=float)
    for k in range(samples + 1):
        p = (k / samples) * (n - 1)
        idx = int(math.floor(p))
        w = p - idx
        if idx >= n - 1:
            idx = n - 2
            w = 1.0
        p0, p1, p2, p3 = padded[idx], padded[idx + 1], padded[idx + 2], padded[idx + 3]
        w2 = w * w
        w3 = w2 * w
        out[k] = 0.5 * (
            2 * p1
            + (-p0 + p2) * w
            + (2 * p0 - 5 * p1 + 4 * p2 - p3) * w2
            + (-p0 + 3 * p1 - 3 * p2 + p3) * w3
        )
    return out


def inside_field_lines(cfg: Solenoid3DCfg = SOLENOID_3D_CFG) -> list[np.ndarray]:
    """Straight axial lines spread across the bore, including the axis."""

    lines = []
    z_end = cfg.length / 2 + cfg.inside_overhang
    count = cfg.inside_lines
    for i in range(count):
        r = cfg.radius * cfg.inside_spread * i / max(1, count - 1)
        segment = np.array([[r, 0.0, -z_end], [r, 0.0, z_end]])
        lines.append(rotate_about_z(segment, (i / count) * 2 * math.pi))
    return lines


def outside_field_lines(cfg: Solenoid3DCfg = SOLENOID_3D_CFG) -> list[np.ndarray]:
    """Return loops that leave one end of the coil and re-enter the other."""

    lines = []
    edge = cfg.radius * cfg.outside_end_factor
    for i in range(cfg.outside_lines):
        mid = cfg.radius * (cfg.outside_base_factor + i * cfg.outside_step_factor)
        control = np.array(
            [
                [edge, 0.0, -cfg.length / 2],
                [mid, 0.0, 0.0],
                [edge, 0.0, cfg.length / 2],
            ]
        )
        curve = catmull_rom(control, cfg.curve_samples)
        lines.append(rotate_about_z(curve, (i / cfg.outside_lines) * 2 * math.pi))
    return lines


__all__ = [
    "FieldSample",
    "arrow_head",
    "catmull_rom",
    "coil_lines",
    "field_arrows",
    "field_at",
    "helix_points",
    "inside_field_lines",
    "outside_field_lines",
    "rotate_about_z",
    "sample_field",
]
