from __future__ import annotations

import numpy as np


def _clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


class Camera:
    """Maps simulation units to canvas pixels.

    The simulation origin sits at the canvas centre and +y points up, so the
    screen y axis is flipped.
    """

    def __init__(
        self,
        size: tuple[int, int],
        pixels_per_unit: float,
        *,
        min_ppu: float = 0.1,
        max_ppu: float = 20.0,
    ) -> None:
        self._size = size
        self._min_ppu = min_ppu
        self._max_ppu = max_ppu
        self._default_ppu = _clamp(pixels_per_unit, min_ppu, max_ppu)
        self._ppu = self._default_ppu

    @property
    def ppu(self) -> float:
        return self._ppu

    def zoom_by_factor(self, factor: float) -> None:
        self._ppu = _clamp(self._ppu * factor, self._min_ppu, self._max_ppu)

    def reset_view(self) -> None:
        self._ppu = self._default_ppu

    def world_to_screen(self, x: float, y: float) -> tuple[int, int]:
        width, height = self._size
        sx = width / 2 + x * self._ppu
        sy = height / 2 - y * self._ppu
        return int(round(sx)), int(round(sy))

    def screen_to_world(self, sx: float, sy: float) -> tuple[float, float]:
        width, height = self._size
        x = (sx - width / 2.0) / self._ppu
        y = (height / 2.0 - sy) / self._ppu
        return x, y

    def points_to_screen(self, points: np.ndarray) -> list[tuple[int, int]]:
        """Project an ``(n, 2+)`` array of world points; extra axes are ignored."""

        pts = np.asarray(points, dtype=float)
        if pts.size == 0:
            return []
        width, height = self._size
        sx = width / 2 + pts[:, 0] * self._ppu
        sy = height / 2 - pts[:, 1] * self._ppu
        return [(int(round(x)), int(round(y))) for x, y in zip(sx, sy)]
