"""Animated 3-D orbit above the spacetime well (matplotlib)."""
from __future__ import annotations

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from physviz.core import control
from physviz.core.config import WELL_GRID_CFG, WellGridCfg
from physviz.core.logging_utils import RunLogger
from physviz.data.scenarios import Scenario
from physviz.render.scene3d import build_gravity_scene, update_gravity_scene

KEY_HELP = "space: start/stop   r: reset   g: toggle grid"


def run(
    scenario: Scenario,
    *,
    cfg: WellGridCfg = WELL_GRID_CFG,
    show_grid: bool = True,
    steps_per_frame: int = 1,
    logger: RunLogger | None = None,
) -> None:
    if scenario.dims != 3:
        raise ValueError(f"Scenario {scenario.key!r} is not a 3-D scenario")

    for name, key in (("keymap.home", "r"), ("keymap.grid", "g")):
        if key in plt.rcParams[name]:
            plt.rcParams[name].remove(key)

    state = control.new_state(scenario.constants())
    if logger is not None:
        logger.write_meta({"scenario": scenario.key, **state.constants.as_meta()})
    artists = build_gravity_scene(state, cfg, show_grid=show_grid)
    artists.figure.suptitle(KEY_HELP, color="white", fontsize=9)

    def on_key(event) -> None:
        nonlocal state
        if event.key == " ":
            if state.running:
                state = control.stop(state, logger)
            else:
                state = control.start(state, logger)
        elif event.key == "r":
            state = control.reset(state, logger)
        elif event.key == "g" and artists.grid is not None:
            artists.grid.set_visible(not artists.grid.get_visible())
            state = control.reset(state, logger)
        update_gravity_scene(artists, state)

    def update(_frame):
        nonlocal state
        state = control.run_steps(state, steps_per_frame, logger)
        update_gravity_scene(artists, state)
        return artists.planet, artists.trail, artists.status

    artists.figure.canvas.mpl_connect("key_press_event", on_key)
    state = control.start(state, logger)
    # blit is off: 3-D axes redraw the whole scene anyway
    anim = FuncAnimation(  # noqa: F841 - must stay referenced while the window is open
        artists.figure,
        update,
        interval=cfg.interval_ms,
        blit=False,
        cache_frame_data=False,
    )
    plt.show()
