"""Axis tick label formatting utilities."""

from tickplanner.core.axis import SnapPolicy, TickSet


def format_axis_value(value: float, decimals: int) -> str:
    """Format a tick value with a fixed number of fractional digits.

    Values that round to zero are printed without a minus sign.

    Args:
        value: The tick value to format
        decimals: Number of fractional digits (TickSet.decimals)

    Returns:
        Formatted string for the tick label
    """
    decimals = max(int(decimals), 0)
    if round(value, decimals) == 0:
        value = 0.0
    return f"{value:.{decimals}f}"


def _split_clock(total: int, with_seconds: bool) -> str:
    if with_seconds:
        hours, rest = divmod(total, 3600)
        minutes, seconds = divmod(rest, 60)
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    hours, minutes = divmod(total, 60)
    return f"{hours}:{minutes:02d}"


def format_time_label(value: float, policy: SnapPolicy, decimals: int = 0) -> str:
    """Format a tick value for the time snapping policies.

    TIME_MINUTES values are minutes and print as H:MM, TIME_SECONDS values are
    seconds and print as H:MM:SS. Other policies fall back to
    format_axis_value.

    Args:
        value: Tick value
        policy: Snap policy the ticks were computed with
        decimals: Precision used for non-time policies

    Returns:
        Formatted label
    """
    if policy not in (SnapPolicy.TIME_MINUTES, SnapPolicy.TIME_SECONDS):
        return format_axis_value(value, decimals)

    total = int(round(abs(value)))
    sign = "-" if value < 0 and total != 0 else ""
    return sign + _split_clock(total, with_seconds=policy is SnapPolicy.TIME_SECONDS)


def format_tick_labels(tick_set: TickSet, policy: SnapPolicy = SnapPolicy.NONE) -> list[str]:
    """Format every entry of a TickSet.

    Label text always comes from the entries, also when labels are drawn at
    the centered positions.
    """
    return [format_time_label(v, policy, tick_set.decimals) for v in tick_set.entries]
