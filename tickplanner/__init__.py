"""
tickplanner: Stable "nice" tick positions for zoomable chart axes.

Computes deterministic, human friendly tick values for a visible value range
and renders them as grid lines and labels.
"""

__version__ = "0.1.0"

from tickplanner.core.axis import AxisSpec, SnapPolicy, TickSet
from tickplanner.ticks.interval_solver import solve
from tickplanner.ticks.planner import AxisTickPlanner

__all__ = ["AxisSpec", "SnapPolicy", "TickSet", "AxisTickPlanner", "solve", "__version__"]
