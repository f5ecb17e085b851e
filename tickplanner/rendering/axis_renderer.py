"""Axis rendering: grid lines, axis line, labels and limit lines."""

import logging
import math
from typing import Optional

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from tickplanner.core.axis import (
    AxisDependency,
    AxisOrientation,
    AxisSpec,
    AxisStyle,
    LabelPosition,
    LimitLabelPosition,
    LimitLine,
    TickSet,
)
from tickplanner.core.config import DEFAULTS
from tickplanner.ticks.planner import AxisTickPlanner
from tickplanner.ticks.tick_formatter import format_tick_labels
from tickplanner.utils.coordinate_transform import Transformer, ViewPort

logger = logging.getLogger(__name__)

# Pixels of slack when deciding whether a position lies inside the content rect
_CLIP_TOLERANCE = 0.5


def get_font(size: int = 12):
    """Get a font, falling back to default if system fonts not available."""
    for path in DEFAULTS.FONT_PATHS:
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            continue
    return ImageFont.load_default()


def text_size(draw: ImageDraw.ImageDraw, text: str, font) -> tuple[int, int]:
    bbox = draw.textbbox((0, 0), text, font=font)
    return bbox[2] - bbox[0], bbox[3] - bbox[1]


def draw_line(
    draw: ImageDraw.ImageDraw,
    start: tuple[float, float],
    end: tuple[float, float],
    fill,
    width: int = 1,
    dash_lengths: Optional[tuple[int, int]] = None,
) -> None:
    """Stroke a straight line, optionally dashed as (on, off) pixel lengths."""
    if not dash_lengths:
        draw.line([start, end], fill=fill, width=width)
        return

    on, off = dash_lengths
    length = math.hypot(end[0] - start[0], end[1] - start[1])
    if length == 0 or on <= 0:
        return

    ux = (end[0] - start[0]) / length
    uy = (end[1] - start[1]) / length
    pos = 0.0
    while pos < length:
        seg_end = min(pos + on, length)
        draw.line(
            [(start[0] + ux * pos, start[1] + uy * pos), (start[0] + ux * seg_end, start[1] + uy * seg_end)],
            fill=fill,
            width=width,
        )
        pos = seg_end + max(off, 0)


class AxisRenderer:
    """Renders one axis of a chart onto a PIL image.

    The renderer owns the axis' current TickSet: compute_axis() replaces it,
    the render_* methods only read it.
    """

    def __init__(
        self,
        viewport: ViewPort,
        transformer: Transformer,
        spec: Optional[AxisSpec] = None,
        style: Optional[AxisStyle] = None,
        orientation: AxisOrientation = AxisOrientation.Y,
        planner: Optional[AxisTickPlanner] = None,
    ):
        """Initialize axis renderer.

        Args:
            viewport: Content rect and zoom state
            transformer: Value/pixel mapping for this axis
            spec: Tick layout settings
            style: Display options
            orientation: Whether this is an X or a Y axis
            planner: Tick planner, created for the orientation if omitted
        """
        self.viewport = viewport
        self.transformer = transformer
        self.spec = spec if spec is not None else AxisSpec()
        self.style = style if style is not None else AxisStyle()
        self.orientation = orientation
        self.planner = planner if planner is not None else AxisTickPlanner(orientation)
        self.tick_set = TickSet.empty()

    @property
    def is_vertical(self) -> bool:
        return self.orientation is AxisOrientation.Y

    def compute_axis(self, min_value: float, max_value: float, inverted: bool = False) -> TickSet:
        """Recompute the tick set for the visible range and store it."""
        self.tick_set = self.planner.plan(min_value, max_value, inverted, self.viewport, self.transformer, self.spec)
        return self.tick_set

    def draw(self, canvas: Image.Image) -> Image.Image:
        """Draw the whole axis on the canvas.

        Args:
            canvas: PIL Image covering the chart area

        Returns:
            Canvas with the axis drawn
        """
        if not self.style.enabled:
            return canvas

        draw = ImageDraw.Draw(canvas)
        self.render_grid_lines(draw)
        self.render_limit_lines(draw)
        self.render_axis_line(draw)
        self.render_axis_labels(draw)
        return canvas

    # ========== POSITIONS ==========

    def _value_pixels(self, values) -> np.ndarray:
        """Pixel coordinate along this axis for each value."""
        values = np.asarray(values, dtype=float)
        if values.size == 0:
            return values
        zeros = np.zeros_like(values)
        if self.is_vertical:
            return self.transformer.points_to_pixel(np.column_stack([zeros, values]))[:, 1]
        return self.transformer.points_to_pixel(np.column_stack([values, zeros]))[:, 0]

    def _in_content(self, pixel: float) -> bool:
        vp = self.viewport
        if self.is_vertical:
            low, high = vp.content_top, vp.content_bottom
        else:
            low, high = vp.content_left, vp.content_right
        return low - _CLIP_TOLERANCE <= pixel <= high + _CLIP_TOLERANCE

    def _cross_line(self, pixel: float) -> tuple[tuple[float, float], tuple[float, float]]:
        """Line across the content rect at a pixel position along the axis."""
        vp = self.viewport
        if self.is_vertical:
            return (vp.content_left, pixel), (vp.content_right, pixel)
        return (pixel, vp.content_top), (pixel, vp.content_bottom)

    # ========== GRID ==========

    def render_grid_lines(self, draw: ImageDraw.ImageDraw) -> None:
        """Draw the grid lines belonging to the axis, and the zero line."""
        style = self.style
        if not style.enabled:
            return

        if style.draw_grid_lines_enabled:
            pixels = self._value_pixels(self.tick_set.entries)
            logger.debug("Drawing %d %s grid lines", len(pixels), self.orientation.name)
            for pixel in pixels:
                if not self._in_content(pixel):
                    continue
                start, end = self._cross_line(pixel)
                draw_line(draw, start, end, style.grid_color, style.grid_line_width, style.grid_line_dash_lengths)

        if style.draw_zero_line_enabled:
            pixel = self._value_pixels([0.0])[0]
            if self._in_content(pixel):
                start, end = self._cross_line(pixel)
                draw_line(draw, start, end, style.zero_line_color, style.zero_line_width, style.zero_line_dash_lengths)

    # ========== AXIS LINE ==========

    def render_axis_line(self, draw: ImageDraw.ImageDraw) -> None:
        """Draw the line that goes alongside the axis."""
        style = self.style
        if not style.enabled or not style.draw_axis_line_enabled:
            return

        vp = self.viewport
        if self.is_vertical:
            x = vp.content_left if style.axis_dependency is AxisDependency.LEFT else vp.content_right
            start, end = (x, vp.content_top), (x, vp.content_bottom)
        else:
            start, end = (vp.content_left, vp.content_bottom), (vp.content_right, vp.content_bottom)

        draw_line(draw, start, end, style.axis_line_color, style.axis_line_width, style.axis_line_dash_lengths)

    # ========== LABELS ==========

    def _y_label_anchor(self) -> tuple[float, bool]:
        """Fixed x position of Y labels and whether they are right aligned."""
        vp = self.viewport
        style = self.style
        outside = style.label_position is LabelPosition.OUTSIDE_CHART

        if style.axis_dependency is AxisDependency.LEFT:
            if outside:
                return vp.offset_left - style.x_offset, True
            return vp.offset_left + style.x_offset, False

        if outside:
            return vp.content_right + style.x_offset, False
        return vp.content_right - style.x_offset, True

    def render_axis_labels(self, draw: ImageDraw.ImageDraw) -> None:
        """Draw the axis labels next to the content rect."""
        style = self.style
        if not style.enabled or not style.draw_labels_enabled:
            return

        tick_set = self.tick_set
        labels = format_tick_labels(tick_set, self.spec.snap_policy)
        pixels = self._value_pixels(tick_set.label_positions())
        font = get_font(style.label_font_size)
        count = len(labels)

        anchor_x, right_aligned = self._y_label_anchor() if self.is_vertical else (0.0, False)

        for i, (label, pixel) in enumerate(zip(labels, pixels)):
            if not style.draw_top_label_entry_enabled and i >= count - 1:
                break
            if not self._in_content(pixel):
                continue

            label_width, label_height = text_size(draw, label, font)
            if self.is_vertical:
                x = anchor_x - label_width if right_aligned else anchor_x
                y = pixel - label_height // 2 + style.y_offset
            else:
                x = pixel - label_width // 2 + style.x_offset
                y = self.viewport.content_bottom + DEFAULTS.X_LABEL_GAP + style.y_offset
            draw.text((x, y), label, fill=style.label_color, font=font)

    # ========== LIMIT LINES ==========

    def render_limit_lines(self, draw: ImageDraw.ImageDraw) -> None:
        """Draw the limit lines associated with this axis."""
        if not self.style.enabled:
            return

        for line in self.style.limit_lines:
            if not line.enabled:
                continue

            pixel = self._value_pixels([line.limit])[0]
            if not self._in_content(pixel):
                continue

            start, end = self._cross_line(pixel)
            draw_line(draw, start, end, line.line_color, line.line_width, line.dash_lengths)

            if line.draw_label_enabled and line.label:
                self._draw_limit_label(draw, line, pixel)

    def _draw_limit_label(self, draw: ImageDraw.ImageDraw, line: LimitLine, pixel: float) -> None:
        vp = self.viewport
        font = get_font(line.font_size)
        label_width, label_height = text_size(draw, line.label, font)
        x_offset = 4 + line.x_offset
        y_offset = line.line_width + label_height + line.y_offset
        position = line.label_position

        right = position in (LimitLabelPosition.RIGHT_TOP, LimitLabelPosition.RIGHT_BOTTOM)
        top = position in (LimitLabelPosition.RIGHT_TOP, LimitLabelPosition.LEFT_TOP)

        if self.is_vertical:
            x = vp.content_right - x_offset - label_width if right else vp.content_left + x_offset
            y = pixel - y_offset if top else pixel + y_offset - label_height
        else:
            x = pixel + x_offset if right else pixel - x_offset - label_width
            y = vp.content_top + y_offset - label_height if top else vp.content_bottom - y_offset

        draw.text((x, y), line.label, fill=line.label_color, font=font)
