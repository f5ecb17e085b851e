"""Rendering of computed axis ticks."""

from tickplanner.rendering.axis_renderer import AxisRenderer, draw_line, get_font

__all__ = [
    "AxisRenderer",
    "draw_line",
    "get_font",
]
