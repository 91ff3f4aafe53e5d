"""Pygame canvas for the 2-D gravity sketch."""
from __future__ import annotations

import numpy as np
import pygame

from physviz.core import control
from physviz.core.config import GRAVITY_RENDER_CFG, GravityRenderCfg
from physviz.core.logging_utils import RunLogger
from physviz.core.model import SimulationState
from physviz.core.wells import well_grid_lines
from physviz.data.scenarios import Scenario
from physviz.render import (
    ButtonVisualStyle,
    Camera,
    draw_body,
    draw_polyline,
    draw_text_lines,
    draw_well_grid,
    layout_button_row,
    load_font,
)


def draw_scene(
    surface: pygame.Surface,
    state: SimulationState,
    camera: Camera,
    *,
    cfg: GravityRenderCfg = GRAVITY_RENDER_CFG,
    show_grid: bool = True,
    grid_lines: list[np.ndarray] | None = None,
) -> None:
    """Render one frame from ``state`` without touching it."""

    surface.fill(cfg.background_color)
    star_screen = camera.world_to_screen(*state.central.position[:2])
    if show_grid:
        if grid_lines is None:
            grid_lines = well_grid_lines(
                surface.get_size(),
                cfg.grid_spacing,
                star_screen,
                cfg.well_strength,
                cfg.well_softening,
            )
        draw_well_grid(surface, grid_lines, color=cfg.grid_color)
    draw_polyline(
        surface,
        cfg.trail_color,
        camera.points_to_screen(state.trail.as_array()),
        cfg.trail_line_width,
    )
    draw_body(surface, star_screen, cfg.star_pixel_radius, color=cfg.star_color)
    draw_body(
        surface,
        camera.world_to_screen(*state.body.position[:2]),
        cfg.planet_pixel_radius,
        color=cfg.planet_color,
    )


def run(
    scenario: Scenario,
    *,
    cfg: GravityRenderCfg = GRAVITY_RENDER_CFG,
    show_grid: bool = True,
    logger: RunLogger | None = None,
) -> None:
    if scenario.dims != 2:
        raise ValueError(f"Scenario {scenario.key!r} is not a 2-D scenario")

    pygame.init()
    screen = pygame.display.set_mode((cfg.width, cfg.height))
    pygame.display.set_caption(f"Gravity - {scenario.name}")
    clock = pygame.time.Clock()
    font = load_font(["Segoe UI", "Helvetica", "Arial"], 16)
    camera = Camera((cfg.width, cfg.height), cfg.pixels_per_unit)

    state = control.new_state(scenario.constants())
    if logger is not None:
        logger.write_meta({"scenario": scenario.key, **state.constants.as_meta()})
    grid_cache: list[np.ndarray] | None = None
    grid_enabled = show_grid

    def on_start() -> None:
        nonlocal state
        state = control.start(state, logger)

    def on_stop() -> None:
        nonlocal state
        state = control.stop(state, logger)

    def on_reset() -> None:
        nonlocal state
        state = control.reset(state, logger)

    def on_toggle_grid() -> None:
        nonlocal grid_enabled
        grid_enabled = not grid_enabled
        on_reset()

    def invalidate_grid() -> None:
        nonlocal grid_cache
        grid_cache = None

    style = ButtonVisualStyle(
        base_color=cfg.button_color,
        hover_color=cfg.button_hover_color,
        text_color=cfg.button_text_color,
        radius=cfg.button_radius,
        border_color=cfg.button_border_color,
        border_width=1,
    )
    buttons = layout_button_row(
        [
            ("Start", on_start, None),
            ("Stop", on_stop, None),
            ("Reset", on_reset, None),
            ("Grid", on_toggle_grid, lambda: "Grid: on" if grid_enabled else "Grid: off"),
        ],
        origin=(cfg.button_margin, cfg.height - cfg.button_size[1] - cfg.button_margin),
        size=cfg.button_size,
        margin=cfg.button_margin,
        style=style,
    )

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    if state.running:
                        on_stop()
                    else:
                        on_start()
                elif event.key == pygame.K_r:
                    on_reset()
                elif event.key == pygame.K_g:
                    on_toggle_grid()
                elif event.key in (pygame.K_EQUALS, pygame.K_PLUS):
                    camera.zoom_by_factor(1.2)
                    invalidate_grid()
                elif event.key == pygame.K_MINUS:
                    camera.zoom_by_factor(1 / 1.2)
                    invalidate_grid()
                elif event.key == pygame.K_0:
                    camera.reset_view()
                    invalidate_grid()
            elif event.type == pygame.MOUSEWHEEL and event.y != 0:
                camera.zoom_by_factor(1.1 ** event.y)
                invalidate_grid()
            for button in buttons:
                button.handle_event(event)

        state = control.tick(state, logger)

        if grid_enabled and grid_cache is None:
            grid_cache = well_grid_lines(
                screen.get_size(),
                cfg.grid_spacing,
                camera.world_to_screen(*state.central.position[:2]),
                cfg.well_strength,
                cfg.well_softening,
            )
        draw_scene(
            screen,
            state,
            camera,
            cfg=cfg,
            show_grid=grid_enabled,
            grid_lines=grid_cache,
        )
        status = "running" if state.running else "stopped"
        if state.collided:
            status = "collided - press Reset"
        draw_text_lines(
            screen,
            font,
            [
                f"t = {state.time:,.2f}",
                f"|r| = {state.distance:,.1f}",
                f"|v| = {float(np.linalg.norm(state.body.velocity)):,.2f}",
                status,
                f"{clock.get_fps():.0f} fps",
            ],
            (cfg.button_margin, cfg.button_margin),
            color=cfg.hud_text_color,
        )
        mouse_pos = pygame.mouse.get_pos()
        for button in buttons:
            button.draw(screen, font, mouse_pos)
        pygame.display.flip()
        clock.tick(cfg.frame_rate)

    pygame.quit()

