from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

import pygame

from .assets import Color, get_text_surface


@dataclass(frozen=True)
class ButtonVisualStyle:
    base_color: Color
    hover_color: Color
    text_color: tuple[int, int, int]
    radius: int
    border_color: Color | None = None
    border_width: int = 0


class Button:
    """Rectangular button with hover feedback; clicking runs ``callback``."""

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        callback: Callable[[], None],
        text_getter: Callable[[], str] | None = None,
        *,
        style: ButtonVisualStyle,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self._text = text
        self._callback = callback
        self._text_getter = text_getter
        self._style = style

    def get_text(self) -> str:
        if self._text_getter is not None:
            return self._text_getter()
        return self._text

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        mouse_pos: tuple[int, int] | None = None,
    ) -> None:
        if mouse_pos is None:
            mouse_pos = pygame.mouse.get_pos()
        style = self._style
        color = style.hover_color if self.rect.collidepoint(mouse_pos) else style.base_color
        button_surface = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        pygame.draw.rect(
            button_surface,
            color,
            button_surface.get_rect(),
            border_radius=style.radius,
        )
        if style.border_color is not None and style.border_width > 0:
            pygame.draw.rect(
                button_surface,
                style.border_color,
                button_surface.get_rect(),
                style.border_width,
                border_radius=style.radius,
            )
        surface.blit(button_surface, self.rect.topleft)
        text_surf = get_text_surface(font, self.get_text(), style.text_color)
        surface.blit(text_surf, text_surf.get_rect(center=self.rect.center))

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self._callback()
                return True
        return False


def layout_button_row(
    specs: Sequence[tuple[str, Callable[[], None], Callable[[], str] | None]],
    *,
    origin: tuple[int, int],
    size: tuple[int, int],
    margin: int,
    style: ButtonVisualStyle,
) -> list[Button]:
    """Place buttons left to right starting at ``origin``."""

    x, y = origin
    width, height = size
    buttons = []
    for text, callback, text_getter in specs:
        buttons.append(Button((x, y, width, height), text, callback, text_getter, style=style))
        x += width + margin
    return buttons
