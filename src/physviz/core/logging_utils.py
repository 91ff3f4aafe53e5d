"""Run logging for the gravity simulation."""
from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

_AXES = ("x", "y", "z")


def timeseries_header(dims: int) -> list[str]:
    position = list(_AXES[:dims])
    velocity = [f"v{axis}" for axis in _AXES[:dims]]
    return ["t", "step", *position, *velocity, "r", "v", "energy"]


class RunLogger:
    """Buffered CSV logger, one directory per run.

    Each run directory holds ``timeseries.csv``, ``events.csv`` and
    ``meta.json``. The time series columns follow the dimensionality of the
    run (``x, y`` or ``x, y, z``).
    """

    EVENTS_HEADER = ["t", "step", "type", "r", "details"]

    def __init__(
        self,
        root_dir: str | Path = "data/runs",
        run_id: Optional[str] = None,
        *,
        dims: int = 2,
        flush_threshold: int = 200,
    ) -> None:
        if dims not in (2, 3):
            raise ValueError("dims must be 2 or 3")
        self.dims = dims
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)

        base = run_id or datetime.now().strftime("%Y%m%d_%H%M%S_run")
        candidate = base
        suffix = 1
        while (self.root_dir / candidate).exists():
            candidate = f"{base}_{suffix:02d}"
            suffix += 1
        self.run_id = candidate
        self.run_dir = self.root_dir / self.run_id
        self.run_dir.mkdir(parents=True, exist_ok=False)

        self.timeseries_path = self.run_dir / "timeseries.csv"
        self.events_path = self.run_dir / "events.csv"
        self.meta_path = self.run_dir / "meta.json"

        self._ts_file = self.timeseries_path.open("w", newline="", encoding="utf-8")
        self._ts_file.write(",".join(timeseries_header(dims)) + "\n")
        self._ev_file = self.events_path.open("w", newline="", encoding="utf-8")
        self._ev_file.write(",".join(self.EVENTS_HEADER) + "\n")

        self._ts_buffer: list[str] = []
        self._ev_buffer: list[str] = []
        self._threshold = max(1, flush_threshold)
        self.closed = False

    def write_meta(self, meta: dict) -> None:
        with self.meta_path.open("w", encoding="utf-8") as fh:
            json.dump(meta, fh, indent=2, sort_keys=True)

    def log_ts(self, values: Sequence[float]) -> None:
        expected = len(timeseries_header(self.dims))
        if len(values) != expected:
            raise ValueError(f"Expected {expected} time series values, got {len(values)}")
        self._ts_buffer.append(",".join(_format_value(v) for v in values))
        if len(self._ts_buffer) >= self._threshold:
            self._flush(self._ts_file, self._ts_buffer)

    def log_event(self, values: Sequence[object]) -> None:
        # events are written through
        self._ev_buffer.append(",".join(_format_value(v) for v in values))
        self._flush(self._ev_file, self._ev_buffer)

    def flush(self) -> None:
        self._flush(self._ts_file, self._ts_buffer)
        self._flush(self._ev_file, self._ev_buffer)

    def close(self) -> None:
        if self.closed:
            return
        self.flush()
        self._ts_file.close()
        self._ev_file.close()
        self.closed = True

    @staticmethod
    def _flush(fh, buffer: list[str]) -> None:
        if buffer:
            fh.write("\n".join(buffer) + "\n")
            fh.flush()
            buffer.clear()

    def __enter__(self) -> "RunLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (int, float)):
        return f"{value:.10g}"
    return str(value).replace(",", ";")


__all__ = ["RunLogger", "timeseries_header"]
