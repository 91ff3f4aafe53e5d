"""Bounded path history for rendering fading trails."""
from __future__ import annotations

from collections import deque
from typing import Iterator, Sequence

import numpy as np


class TrailBuffer:
    """Sliding window over the most recent body positions.

    Points are kept in visiting order, oldest first, so renderers can draw
    them directly as a connected polyline. Once ``capacity`` points are held,
    each push drops the oldest one.
    """

    def __init__(self, capacity: int = 1000) -> None:
        if capacity < 1:
            raise ValueError("Trail capacity must be at least 1")
        self._capacity = int(capacity)
        self._points: deque[tuple[float, ...]] = deque(maxlen=self._capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return iter(self.iterate())

    def push(self, point: Sequence[float] | np.ndarray) -> None:
        self._points.append(tuple(float(c) for c in point))

    def clear(self) -> None:
        self._points.clear()

    def iterate(self) -> list[tuple[float, ...]]:
        """Return the stored points oldest-to-newest without consuming them."""

        return list(self._points)

    def as_array(self) -> np.ndarray:
        if not self._points:
            return np.empty((0, 0), dtype=float)
        return np.array(self._points, dtype=float)

    def latest(self) -> tuple[float, ...] | None:
        if not self._points:
            return None
        return self._points[-1]


__all__ = ["TrailBuffer"]
