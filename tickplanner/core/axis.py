"""Axis data model shared by the solver, the planner and the renderer.

AxisSpec persists across frames and is owned by the axis. TickSet is the
output of every computation and is replaced wholesale, never patched.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from tickplanner.core.config import DEFAULTS


class SnapPolicy(Enum):
    """Interval snapping applied after the significant-digit rounding."""

    NONE = auto()  # standard bands, floor at 1
    DECIMAL_ALLOWED = auto()  # standard bands, floor at 0.5
    TIME_MINUTES = auto()  # 1, 5, 15, 30 ... 720
    TIME_SECONDS = auto()  # 1, 10, 30, 60 ... 43200


class AxisOrientation(Enum):
    """Which viewport axis the values run along."""

    X = auto()
    Y = auto()


class AxisDependency(Enum):
    """Side of the content rect a Y axis is attached to."""

    LEFT = auto()
    RIGHT = auto()


class LabelPosition(Enum):
    """Whether axis labels sit outside or inside the content rect."""

    OUTSIDE_CHART = auto()
    INSIDE_CHART = auto()


class LimitLabelPosition(Enum):
    """Corner of a limit line its label is anchored to."""

    RIGHT_TOP = auto()
    RIGHT_BOTTOM = auto()
    LEFT_TOP = auto()
    LEFT_BOTTOM = auto()


@dataclass
class AxisSpec:
    """Layout settings of one axis, read by the planner on every frame."""

    label_count: int = DEFAULTS.LABEL_COUNT
    granularity_enabled: bool = False
    granularity: float = 1.0
    center_labels_enabled: bool = False
    force_labels_enabled: bool = False
    show_only_min_max_enabled: bool = False
    snap_policy: SnapPolicy = SnapPolicy.NONE


@dataclass(frozen=True)
class TickSet:
    """Computed tick positions for one axis.

    Attributes:
        entries: Tick values, ascending
        centered_entries: Entries shifted by half an interval (centering only)
        decimals: Suggested number of fractional digits for labels
        interval: Resolved spacing between entries (0.0 when empty)
    """

    entries: tuple[float, ...] = ()
    centered_entries: tuple[float, ...] = ()
    decimals: int = 0
    interval: float = 0.0

    @classmethod
    def empty(cls) -> "TickSet":
        return cls()

    @property
    def entry_count(self) -> int:
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def label_positions(self) -> tuple[float, ...]:
        """Values labels are drawn at: centered entries when present."""
        return self.centered_entries if self.centered_entries else self.entries


@dataclass
class LimitLine:
    """Horizontal (Y axis) or vertical (X axis) marker at a fixed value."""

    limit: float
    label: str = ""
    line_color: tuple = DEFAULTS.LIMIT_LINE_COLOR
    line_width: int = 2
    dash_lengths: Optional[tuple[int, int]] = None
    label_position: LimitLabelPosition = LimitLabelPosition.RIGHT_TOP
    enabled: bool = True
    draw_label_enabled: bool = True
    label_color: tuple = DEFAULTS.LABEL_COLOR
    font_size: int = DEFAULTS.LABEL_FONT_SIZE
    x_offset: int = 0
    y_offset: int = 0


@dataclass
class AxisStyle:
    """Display options consumed by AxisRenderer."""

    enabled: bool = True
    draw_labels_enabled: bool = True
    draw_grid_lines_enabled: bool = True
    draw_axis_line_enabled: bool = True
    draw_zero_line_enabled: bool = False
    draw_top_label_entry_enabled: bool = True

    axis_dependency: AxisDependency = AxisDependency.LEFT
    label_position: LabelPosition = LabelPosition.OUTSIDE_CHART

    axis_line_color: tuple = DEFAULTS.AXIS_COLOR
    axis_line_width: int = 1
    axis_line_dash_lengths: Optional[tuple[int, int]] = None
    grid_color: tuple = DEFAULTS.GRID_COLOR
    grid_line_width: int = 1
    grid_line_dash_lengths: Optional[tuple[int, int]] = None
    zero_line_color: tuple = DEFAULTS.ZERO_LINE_COLOR
    zero_line_width: int = 1
    zero_line_dash_lengths: Optional[tuple[int, int]] = None
    label_color: tuple = DEFAULTS.LABEL_COLOR
    label_font_size: int = DEFAULTS.LABEL_FONT_SIZE

    x_offset: int = DEFAULTS.LABEL_X_OFFSET
    y_offset: int = DEFAULTS.LABEL_Y_OFFSET

    limit_lines: list[LimitLine] = field(default_factory=list)

    def add_limit_line(self, line: LimitLine) -> None:
        self.limit_lines.append(line)

    def remove_limit_line(self, line: LimitLine) -> None:
        if line in self.limit_lines:
            self.limit_lines.remove(line)
