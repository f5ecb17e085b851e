"""Core modules for tickplanner: axis data model and configuration."""

from tickplanner.core.axis import (
    AxisDependency,
    AxisOrientation,
    AxisSpec,
    AxisStyle,
    LabelPosition,
    LimitLabelPosition,
    LimitLine,
    SnapPolicy,
    TickSet,
)
from tickplanner.core.config import DEFAULTS

__all__ = [
    "AxisSpec",
    "AxisStyle",
    "AxisOrientation",
    "AxisDependency",
    "LabelPosition",
    "LimitLine",
    "LimitLabelPosition",
    "SnapPolicy",
    "TickSet",
    "DEFAULTS",
]
