"""Axis interval and tick entry calculation.

Turns a value range and a desired label count into evenly spaced, human
friendly tick values. The result must be identical for identical input, since
it is recomputed on every pan/zoom frame and any drift shows up as jittering
grid lines.
"""

import math

from tickplanner.core.axis import SnapPolicy, TickSet

# (low, high): an interval strictly between low and high becomes high.
# Bands are applied in order to the current value, so a rewritten interval can
# be picked up again by a later band.
STANDARD_BANDS = (
    (0.5, 1.0),
    (1.0, 5.0),
    (5.0, 10.0),
    (10.0, 20.0),
    (20.0, 25.0),
    (25.0, 50.0),
    (50.0, 100.0),
)

TIME_MINUTE_BANDS = (
    (1.0, 5.0),
    (5.0, 15.0),
    (15.0, 30.0),
    (30.0, 60.0),
    (60.0, 120.0),
    (120.0, 180.0),
    (180.0, 240.0),
    (240.0, 360.0),
    (360.0, 720.0),
)

TIME_SECOND_BANDS = (
    (1.0, 10.0),
    (10.0, 30.0),
    (30.0, 60.0),
    (60.0, 300.0),
    (300.0, 900.0),
    (900.0, 1800.0),
    (1800.0, 3600.0),
    (3600.0, 7200.0),
    (7200.0, 10800.0),
    (10800.0, 14400.0),
    (14400.0, 21600.0),
    (21600.0, 43200.0),
)

# policy -> (smallest allowed interval, bands)
_POLICY_BANDS = {
    SnapPolicy.NONE: (1.0, STANDARD_BANDS),
    SnapPolicy.DECIMAL_ALLOWED: (0.5, STANDARD_BANDS),
    SnapPolicy.TIME_MINUTES: (1.0, TIME_MINUTE_BANDS),
    SnapPolicy.TIME_SECONDS: (1.0, TIME_SECOND_BANDS),
}


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def round_to_next_significant(number: float) -> float:
    """Round a number to a single significant digit.

    Halves round away from zero, so 0.25 becomes 0.3 and 19.4 becomes 20.
    Zero, infinities and NaN are returned unchanged.
    """
    if math.isinf(number) or math.isnan(number) or number == 0:
        return number

    d = math.ceil(math.log10(abs(number)))
    pw = 1 - d
    if pw > 308:
        # subnormal input, the scale factor is not representable
        return number

    magnitude = 10.0 ** pw
    shifted = _round_half_away(number * magnitude)
    return shifted / magnitude


def next_up(value: float) -> float:
    """Return the next representable float above value."""
    return math.nextafter(value, math.inf)


def snap_interval(interval: float, policy: SnapPolicy = SnapPolicy.NONE) -> float:
    """Snap an interval to the preferred values of a snapping policy.

    Comparisons are strict: an interval sitting exactly on a band edge
    (e.g. 5 under SnapPolicy.NONE) is kept as is.

    Args:
        interval: Interval after significant-digit rounding
        policy: Active snapping policy

    Returns:
        Snapped interval
    """
    floor_value, bands = _POLICY_BANDS[policy]

    if interval < floor_value:
        interval = floor_value

    for low, high in bands:
        if low < interval < high:
            interval = high

    return interval


def _decimals_for(interval: float) -> int:
    if 0 < interval < 1:
        return int(math.ceil(-math.log10(interval)))
    return 0


def _normalize_interval(interval: float) -> float:
    """Bump intervals with a leading digit above 5 to the next power of ten."""
    magnitude = round_to_next_significant(10.0 ** math.floor(math.log10(interval)))
    if magnitude == 0:
        return interval

    sig_digit = int(interval / magnitude)
    if sig_digit > 5:
        # 0.9 or 90 read poorly, use one order of magnitude higher
        interval = math.floor(10.0 * magnitude)
    return float(interval)


def compute_interval(
    value_range: float,
    label_count: int,
    granularity_enabled: bool = False,
    granularity: float = 1.0,
    snap_policy: SnapPolicy = SnapPolicy.NONE,
) -> float:
    """Compute the snapped tick interval for a positive, finite range.

    Returns 0.0 when the interval cannot be represented.
    """
    raw_interval = value_range / label_count
    interval = round_to_next_significant(raw_interval)

    # Do not go below the granularity, avoids repeated labels after rounding
    if granularity_enabled and interval < granularity:
        interval = granularity

    if not math.isfinite(interval) or interval <= 0:
        return 0.0

    interval = _normalize_interval(interval)
    return snap_interval(interval, snap_policy)


def _forced_entries(min_value: float, value_range: float, label_count: int) -> tuple[list[float], float]:
    if label_count == 1:
        return [min_value + 0.0], value_range

    interval = value_range / (label_count - 1)
    entries = []
    v = min_value
    for _ in range(label_count):
        entries.append(0.0 if v == 0.0 else v)
        v += interval
    return entries, interval


def _stepped_entries(
    min_value: float,
    max_value: float,
    interval: float,
    center_labels: bool,
) -> list[float]:
    n = 1 if center_labels else 0

    first = 0.0 if interval == 0.0 else math.ceil(min_value / interval) * interval
    if center_labels:
        first -= interval

    last = 0.0 if interval == 0.0 else next_up(math.floor(max_value / interval) * interval)

    if interval != 0.0 and last != first:
        steps = 0
        while first + steps * interval <= last:
            steps += 1
        n += steps

    entries = []
    f = first
    for _ in range(n):
        if f == 0.0:
            # Store negative zero as positive zero
            f = 0.0
        entries.append(float(f))
        f += interval
    return entries


def solve(
    min_value: float,
    max_value: float,
    label_count: int,
    granularity_enabled: bool = False,
    granularity: float = 1.0,
    snap_policy: SnapPolicy = SnapPolicy.NONE,
    force_label_count: bool = False,
    center_labels: bool = False,
    show_only_min_max: bool = False,
) -> TickSet:
    """Compute tick entries for an axis range.

    Degenerate input (no labels, empty, infinite or NaN range) yields an empty
    TickSet rather than an error.

    Args:
        min_value: Lower end of the visible range (may exceed max_value)
        max_value: Upper end of the visible range
        label_count: Desired number of labels, not guaranteed exactly
        granularity_enabled: Whether granularity is a lower bound on the interval
        granularity: Minimum interval when granularity_enabled
        snap_policy: Interval snapping policy
        force_label_count: Emit exactly label_count evenly spaced entries from min_value
        center_labels: Shift entries one interval left and add centered entries
        show_only_min_max: Emit only the two range ends

    Returns:
        A fresh TickSet
    """
    value_range = abs(max_value - min_value)

    if label_count <= 0 or not value_range > 0 or math.isinf(value_range):
        return TickSet.empty()

    if show_only_min_max and not force_label_count:
        low, high = sorted((min_value + 0.0, max_value + 0.0))
        return TickSet(entries=(low, high), decimals=_decimals_for(value_range), interval=value_range)

    if force_label_count:
        entries, interval = _forced_entries(min_value, value_range, label_count)
    else:
        interval = compute_interval(value_range, label_count, granularity_enabled, granularity, snap_policy)
        if interval == 0.0:
            return TickSet.empty()
        entries = _stepped_entries(min_value, max_value, interval, center_labels)
        if not entries:
            return TickSet.empty()

    centered_entries: tuple[float, ...] = ()
    if center_labels:
        offset = interval / 2.0
        centered_entries = tuple(v + offset for v in entries)

    return TickSet(
        entries=tuple(entries),
        centered_entries=centered_entries,
        decimals=_decimals_for(interval),
        interval=interval,
    )
