"""Pygame rendering helpers for the 2-D views."""

from .camera import Camera
from .assets import Color, get_text_surface, load_font
from .draw import (
    draw_arrow,
    draw_body,
    draw_polyline,
    draw_solenoid,
    draw_text_lines,
    draw_well_grid,
)
from .ui import Button, ButtonVisualStyle, layout_button_row

__all__ = [
    "Button",
    "ButtonVisualStyle",
    "Camera",
    "Color",
    "draw_arrow",
    "draw_body",
    "draw_polyline",
    "draw_solenoid",
    "draw_text_lines",
    "draw_well_grid",
    "get_text_surface",
    "layout_button_row",
    "load_font",
]
