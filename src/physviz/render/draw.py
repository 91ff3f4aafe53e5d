from __future__ import annotations

from typing import Iterable, Sequence, TYPE_CHECKING

import numpy as np
import pygame

from physviz.core.fields import arrow_head, coil_lines, field_arrows

from .assets import Color, get_text_surface

if TYPE_CHECKING:  # pragma: no cover
    from physviz.core.config import SolenoidCfg


def _has_alpha(color: Color) -> bool:
    return len(color) == 4 and color[3] < 255


def _overlay(surface: pygame.Surface) -> pygame.Surface:
    return pygame.Surface(surface.get_size(), pygame.SRCALPHA)


def draw_body(
    surface: pygame.Surface,
    position: tuple[int, int],
    radius: int,
    *,
    color: tuple[int, int, int],
) -> None:
    if radius <= 0:
        return
    pygame.draw.circle(surface, color, position, radius)


def draw_polyline(
    surface: pygame.Surface,
    color: Color,
    points: Sequence[tuple[int, int]],
    width: int = 1,
) -> None:
    """Draw an open polyline; translucent colours go through an alpha overlay."""

    if len(points) < 2:
        return
    target = _overlay(surface) if _has_alpha(color) else surface
    if width <= 1:
        pygame.draw.aalines(target, color, False, points)
    else:
        pygame.draw.lines(target, color, False, points, width)
    if target is not surface:
        surface.blit(target, (0, 0))


def draw_well_grid(
    surface: pygame.Surface,
    lines: Iterable[np.ndarray],
    *,
    color: Color,
    width: int = 1,
) -> None:
    target = _overlay(surface) if _has_alpha(color) else surface
    for line in lines:
        points = [(float(x), float(y)) for x, y in line]
        if len(points) < 2:
            continue
        if width <= 1:
            pygame.draw.aalines(target, color, False, points)
        else:
            pygame.draw.lines(target, color, False, points, width)
    if target is not surface:
        surface.blit(target, (0, 0))


def draw_arrow(
    surface: pygame.Surface,
    start: tuple[float, float],
    end: tuple[float, float],
    *,
    color: tuple[int, int, int],
    head_length: float,
    width: int = 1,
) -> None:
    left, right = arrow_head(start, end, head_length)
    pygame.draw.line(surface, color, start, end, width)
    pygame.draw.line(surface, color, end, left, width)
    pygame.draw.line(surface, color, end, right, width)


def draw_solenoid(surface: pygame.Surface, cfg: SolenoidCfg) -> None:
    surface.fill(cfg.background_color)
    rect = pygame.Rect(
        int(cfg.rect_x), int(cfg.rect_y), cfg.rect_width, cfg.rect_height
    )
    pygame.draw.rect(surface, cfg.body_color, rect, cfg.body_line_width)
    for start, end in coil_lines(cfg):
        pygame.draw.line(surface, cfg.coil_color, start, end, 1)
    for start, end in field_arrows(cfg):
        draw_arrow(
            surface,
            start,
            end,
            color=cfg.arrow_color,
            head_length=cfg.arrow_head_length,
        )


def draw_text_lines(
    surface: pygame.Surface,
    font: pygame.font.Font,
    lines: Sequence[str],
    position: tuple[int, int],
    *,
    color: tuple[int, int, int],
) -> None:
    x, y = position
    for text in lines:
        if text:
            surface.blit(get_text_surface(font, text, color), (x, y))
        y += font.get_linesize()
