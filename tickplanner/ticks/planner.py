"""Per-frame tick planning for a zoomable axis."""

import logging
from typing import Optional

from tickplanner.core.axis import AxisOrientation, AxisSpec, TickSet
from tickplanner.core.config import DEFAULTS
from tickplanner.ticks.interval_solver import solve
from tickplanner.utils.coordinate_transform import Transformer, ViewPort

logger = logging.getLogger(__name__)


class AxisTickPlanner:
    """Computes the TickSet of one axis for the currently visible range.

    When the viewport is zoomed in, the data range passed by the caller is
    wider than what is on screen, so the visible range is read back from the
    transformer at the content rect corners before solving.

    Usage:
        planner = AxisTickPlanner(AxisOrientation.Y)
        ticks = planner.plan(0.0, 100.0, False, viewport, transformer, AxisSpec())
    """

    def __init__(self, orientation: AxisOrientation = AxisOrientation.Y):
        self.orientation = orientation

    def visible_range(
        self,
        data_min: float,
        data_max: float,
        inverted: bool,
        viewport: Optional[ViewPort],
        transformer: Optional[Transformer],
    ) -> tuple[float, float]:
        """Return the (min, max) value range the ticks should cover.

        Args:
            data_min: Smallest data value on the axis
            data_max: Largest data value on the axis
            inverted: Whether the axis runs against the screen direction
            viewport: Content rect and zoom state, or None
            transformer: Value/pixel mapping, or None

        Returns:
            Remapped range under partial zoom, otherwise the data range
        """
        if viewport is None or transformer is None:
            return data_min, data_max

        if viewport.content_width <= DEFAULTS.MIN_CONTENT_EXTENT:
            return data_min, data_max

        if self.orientation is AxisOrientation.Y:
            if viewport.is_fully_zoomed_out_y:
                return data_min, data_max
            top = transformer.value_for_touch_point(viewport.content_left, viewport.content_top)[1]
            bottom = transformer.value_for_touch_point(viewport.content_left, viewport.content_bottom)[1]
            low, high = (top, bottom) if inverted else (bottom, top)
        else:
            if viewport.is_fully_zoomed_out_x:
                return data_min, data_max
            left = transformer.value_for_touch_point(viewport.content_left, viewport.content_top)[0]
            right = transformer.value_for_touch_point(viewport.content_right, viewport.content_top)[0]
            # the transformer never mirrors x, so left is always the low end
            low, high = left, right

        logger.debug("Remapped %s axis range [%s, %s] -> [%s, %s]", self.orientation.name, data_min, data_max, low, high)
        return low, high

    def plan(
        self,
        data_min: float,
        data_max: float,
        inverted: bool,
        viewport: Optional[ViewPort],
        transformer: Optional[Transformer],
        spec: AxisSpec,
    ) -> TickSet:
        """Compute a fresh TickSet for the visible part of the axis.

        Reads but never mutates viewport, transformer and spec.
        """
        low, high = self.visible_range(data_min, data_max, inverted, viewport, transformer)
        label_count = min(spec.label_count, DEFAULTS.MAX_LABEL_COUNT)

        return solve(
            low,
            high,
            label_count,
            granularity_enabled=spec.granularity_enabled,
            granularity=spec.granularity,
            snap_policy=spec.snap_policy,
            force_label_count=spec.force_labels_enabled,
            center_labels=spec.center_labels_enabled,
            show_only_min_max=spec.show_only_min_max_enabled,
        )
