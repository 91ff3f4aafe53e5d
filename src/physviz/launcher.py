"""Command line entry point: pick a visualization or run the orbit headless."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from physviz.core import control
from physviz.core.logging_utils import RunLogger
from physviz.core.physics import energy_specific
from physviz.data.scenarios import SCENARIO_DISPLAY_ORDER, Scenario, get_scenario


def _open_logger(log_dir: str | None, dims: int) -> RunLogger | None:
    if not log_dir:
        return None
    return RunLogger(Path(log_dir), dims=dims)


def simulate(scenario: Scenario, steps: int, logger: RunLogger | None = None) -> dict[str, object]:
    """Run ``steps`` ticks without a display and summarise the outcome."""

    state = control.new_state(scenario.constants())
    if logger is not None:
        logger.write_meta({"scenario": scenario.key, **state.constants.as_meta()})
    energy_start = energy_specific(state.body, state.central, state.constants)
    state = control.start(state, logger)
    state = control.run_steps(state, steps, logger)
    if state.steps % max(1, state.constants.log_every_steps) != 0:
        control.log_state(state, logger)
    energy_end = energy_specific(state.body, state.central, state.constants)
    denom = energy_start if abs(energy_start) > 1e-12 else 1.0
    return {
        "scenario": scenario.key,
        "steps": state.steps,
        "time": state.time,
        "distance": state.distance,
        "trail_points": len(state.trail),
        "collided": state.collided,
        "energy_drift": (energy_end - energy_start) / denom,
    }


def print_summary(summary: dict[str, object]) -> None:
    print(f"Scenario: {summary['scenario']}")
    print(f" Steps run: {summary['steps']} (t = {summary['time']:.3f})")
    print(f" Final distance |r| = {summary['distance']:.4f}")
    print(f" Trail points: {summary['trail_points']}")
    print(f" Relative energy drift dE/E = {summary['energy_drift']:.3e}")
    outcome = "collision" if summary["collided"] else "completed"
    print(f" Outcome: {outcome}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="physviz",
        description="Interactive gravity-well and solenoid visualizations.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    gravity = sub.add_parser("gravity", help="2-D orbit with the spacetime grid (pygame)")
    gravity.add_argument("--scenario", default="gravity2d", choices=SCENARIO_DISPLAY_ORDER)
    gravity.add_argument("--no-grid", action="store_true", help="start with the grid hidden")
    gravity.add_argument("--log-dir", help="write run logs below this directory")

    gravity3d = sub.add_parser("gravity3d", help="3-D orbit above the well (matplotlib)")
    gravity3d.add_argument("--scenario", default="gravity3d", choices=SCENARIO_DISPLAY_ORDER)
    gravity3d.add_argument("--no-grid", action="store_true")
    gravity3d.add_argument("--steps-per-frame", type=int, default=1)
    gravity3d.add_argument("--log-dir")

    sub.add_parser("solenoid", help="2-D solenoid field arrows (pygame)")
    sub.add_parser("solenoid3d", help="3-D coil and field lines (matplotlib)")

    sim = sub.add_parser("simulate", help="run the orbit headless and print a summary")
    sim.add_argument("--scenario", default="gravity2d", choices=SCENARIO_DISPLAY_ORDER)
    sim.add_argument("--steps", type=int, default=10_000)
    sim.add_argument("--log-dir")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "solenoid":
        from physviz.views import solenoid2d

        solenoid2d.run()
        return 0
    if args.command == "solenoid3d":
        from physviz.views import solenoid3d

        solenoid3d.run()
        return 0

    scenario = get_scenario(args.scenario)
    if args.command == "simulate":
        if args.steps < 0:
            parser.error("--steps must not be negative")
        logger = _open_logger(args.log_dir, scenario.dims)
        try:
            summary = simulate(scenario, args.steps, logger)
        finally:
            if logger is not None:
                logger.close()
        print_summary(summary)
        if logger is not None:
            print(f" Logged to {logger.run_dir}")
        return 0

    expected_dims = 2 if args.command == "gravity" else 3
    if scenario.dims != expected_dims:
        parser.error(f"scenario {scenario.key!r} is {scenario.dims}-D; {args.command} needs {expected_dims}-D")
    logger = _open_logger(args.log_dir, scenario.dims)
    try:
        if args.command == "gravity":
            from physviz.views import gravity2d

            gravity2d.run(scenario, show_grid=not args.no_grid, logger=logger)
        else:
            from physviz.views import gravity3d

            gravity3d.run(
                scenario,
                show_grid=not args.no_grid,
                steps_per_frame=max(1, args.steps_per_frame),
                logger=logger,
            )
    finally:
        if logger is not None:
            logger.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
