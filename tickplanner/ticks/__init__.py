"""Tick interval solving, per-frame planning and label formatting."""

from tickplanner.ticks.interval_solver import (
    compute_interval,
    next_up,
    round_to_next_significant,
    snap_interval,
    solve,
)
from tickplanner.ticks.planner import AxisTickPlanner
from tickplanner.ticks.tick_formatter import (
    format_axis_value,
    format_tick_labels,
    format_time_label,
)

__all__ = [
    "solve",
    "compute_interval",
    "snap_interval",
    "round_to_next_significant",
    "next_up",
    "AxisTickPlanner",
    "format_axis_value",
    "format_time_label",
    "format_tick_labels",
]
