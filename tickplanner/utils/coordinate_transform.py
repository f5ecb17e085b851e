"""Coordinate transformation utilities for pixel <-> value conversion."""

import numpy as np

from tickplanner.core.config import DEFAULTS


def _translation(tx: float, ty: float) -> np.ndarray:
    return np.array([[1.0, 0.0, tx], [0.0, 1.0, ty], [0.0, 0.0, 1.0]])


def _scale(sx: float, sy: float) -> np.ndarray:
    return np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])


class ViewPort:
    """Chart area, content rect and current zoom/pan state.

    The content rect is the chart area minus the offsets (margins). Zoom and
    pan are kept in a touch matrix applied in content-relative pixel space and
    are clamped so the data always covers the whole content rect.
    """

    def __init__(
        self,
        chart_width: float = DEFAULTS.CHART_WIDTH,
        chart_height: float = DEFAULTS.CHART_HEIGHT,
        offset_left: float = DEFAULTS.MARGIN_LEFT,
        offset_top: float = DEFAULTS.MARGIN_TOP,
        offset_right: float = DEFAULTS.MARGIN_RIGHT,
        offset_bottom: float = DEFAULTS.MARGIN_BOTTOM,
    ):
        self.chart_width = float(chart_width)
        self.chart_height = float(chart_height)
        self.offset_left = float(offset_left)
        self.offset_top = float(offset_top)
        self.offset_right = float(offset_right)
        self.offset_bottom = float(offset_bottom)

        self.scale_x = 1.0
        self.scale_y = 1.0
        self.trans_x = 0.0
        self.trans_y = 0.0
        self.min_scale_x = DEFAULTS.MIN_SCALE
        self.min_scale_y = DEFAULTS.MIN_SCALE
        self.max_scale_x = DEFAULTS.MAX_SCALE
        self.max_scale_y = DEFAULTS.MAX_SCALE

    # ========== CONTENT RECT ==========

    @property
    def content_left(self) -> float:
        return self.offset_left

    @property
    def content_right(self) -> float:
        return self.chart_width - self.offset_right

    @property
    def content_top(self) -> float:
        return self.offset_top

    @property
    def content_bottom(self) -> float:
        return self.chart_height - self.offset_bottom

    @property
    def content_width(self) -> float:
        return self.content_right - self.content_left

    @property
    def content_height(self) -> float:
        return self.content_bottom - self.content_top

    def set_chart_dimens(self, width: float, height: float) -> None:
        """Resize the chart area, keeping offsets and zoom."""
        self.chart_width = float(width)
        self.chart_height = float(height)
        self._limit_trans_and_scale()

    # ========== ZOOM STATE ==========

    @property
    def touch_matrix(self) -> np.ndarray:
        return np.array(
            [
                [self.scale_x, 0.0, self.trans_x],
                [0.0, self.scale_y, self.trans_y],
                [0.0, 0.0, 1.0],
            ]
        )

    @property
    def is_fully_zoomed_out_x(self) -> bool:
        return not (self.scale_x > self.min_scale_x or self.min_scale_x > 1.0)

    @property
    def is_fully_zoomed_out_y(self) -> bool:
        return not (self.scale_y > self.min_scale_y or self.min_scale_y > 1.0)

    @property
    def is_fully_zoomed_out(self) -> bool:
        return self.is_fully_zoomed_out_x and self.is_fully_zoomed_out_y

    def zoom(self, scale_x: float, scale_y: float, x: float = 0.0, y: float = 0.0) -> None:
        """Multiply the current zoom, keeping the content point (x, y) in place.

        Args:
            scale_x: Zoom factor along x (1.0 = unchanged)
            scale_y: Zoom factor along y (1.0 = unchanged)
            x: Pixel x of the zoom center, relative to content_left
            y: Pixel y of the zoom center, relative to content_bottom (negative upwards)
        """
        self.trans_x = x - (x - self.trans_x) * scale_x
        self.trans_y = y - (y - self.trans_y) * scale_y
        self.scale_x *= scale_x
        self.scale_y *= scale_y
        self._limit_trans_and_scale()

    def translate(self, dx: float, dy: float) -> None:
        """Pan the content by (dx, dy) pixels."""
        self.trans_x += dx
        self.trans_y += dy
        self._limit_trans_and_scale()

    def reset_zoom(self) -> None:
        self.scale_x = self.min_scale_x
        self.scale_y = self.min_scale_y
        self.trans_x = 0.0
        self.trans_y = 0.0

    def _limit_trans_and_scale(self) -> None:
        self.scale_x = min(max(self.scale_x, self.min_scale_x), self.max_scale_x)
        self.scale_y = min(max(self.scale_y, self.min_scale_y), self.max_scale_y)

        # x grows to the right from content_left: visible while trans_x in [-(s-1)w, 0]
        max_trans_x = -self.content_width * (self.scale_x - 1.0)
        self.trans_x = min(max(self.trans_x, max_trans_x), 0.0)

        # y grows upwards from content_bottom: visible while trans_y in [0, (s-1)h]
        max_trans_y = self.content_height * (self.scale_y - 1.0)
        self.trans_y = max(min(self.trans_y, max_trans_y), 0.0)


class Transformer:
    """Maps data values to pixels and back for one axis pair.

    The value-to-pixel matrix is the product of three affine parts:
    value scaling (data range onto the content rect), the viewport's touch
    matrix (zoom/pan) and the offset into the chart area.

    Example usage:
        viewport = ViewPort(400, 300, 0, 0, 0, 0)
        transformer = Transformer(viewport)
        transformer.prepare_matrix_value_px(0.0, 10.0, 100.0, 0.0)
        transformer.prepare_matrix_offset(inverted=False)
        x_px, y_px = transformer.point_value_to_pixel(5.0, 50.0)
    """

    def __init__(self, viewport: ViewPort):
        self.viewport = viewport
        self._matrix_value_to_px = np.identity(3)
        self._matrix_offset = np.identity(3)

    def prepare_matrix_value_px(self, x_min: float, delta_x: float, delta_y: float, y_min: float) -> None:
        """Scale the value range onto the content rect.

        Args:
            x_min: Smallest x value shown when fully zoomed out
            delta_x: Extent of the x values
            delta_y: Extent of the y values
            y_min: Smallest y value shown when fully zoomed out
        """
        if delta_x == 0:
            delta_x = 1.0
        if delta_y == 0:
            delta_y = 1.0

        scale_x = self.viewport.content_width / delta_x
        scale_y = self.viewport.content_height / delta_y

        # y is flipped so larger values sit higher on screen
        self._matrix_value_to_px = _scale(scale_x, -scale_y) @ _translation(-x_min, -y_min)

    def prepare_matrix_offset(self, inverted: bool) -> None:
        """Move the origin into the content rect.

        Args:
            inverted: If True, the y axis grows downwards from content_top
        """
        vp = self.viewport
        if not inverted:
            self._matrix_offset = _translation(vp.offset_left, vp.chart_height - vp.offset_bottom)
        else:
            self._matrix_offset = _translation(vp.offset_left, vp.offset_top) @ _scale(1.0, -1.0)

    @property
    def value_to_pixel_matrix(self) -> np.ndarray:
        return self._matrix_offset @ self.viewport.touch_matrix @ self._matrix_value_to_px

    @property
    def pixel_to_value_matrix(self) -> np.ndarray:
        return np.linalg.inv(self.value_to_pixel_matrix)

    def point_value_to_pixel(self, x: float, y: float) -> tuple[float, float]:
        """Convert a data point to pixel coordinates."""
        px, py, _ = self.value_to_pixel_matrix @ np.array([x, y, 1.0])
        return (float(px), float(py))

    def points_to_pixel(self, points: np.ndarray) -> np.ndarray:
        """Convert an (N, 2) array of data points to pixel coordinates.

        Args:
            points: Array of (x, y) value pairs

        Returns:
            (N, 2) float array of pixel coordinates
        """
        pts = np.asarray(points, dtype=float).reshape(-1, 2)
        homogeneous = np.column_stack([pts, np.ones(len(pts))])
        return (homogeneous @ self.value_to_pixel_matrix.T)[:, :2]

    def value_for_touch_point(self, x: float, y: float) -> tuple[float, float]:
        """Convert a pixel position (e.g. a content rect corner) to data values."""
        vx, vy, _ = self.pixel_to_value_matrix @ np.array([x, y, 1.0])
        return (float(vx), float(vy))
