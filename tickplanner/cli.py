"""Command-line interface for tickplanner.

This module provides the Click-based CLI for printing and previewing ticks.
Negative range ends must follow ``--`` so they are not read as options.
"""

import logging

import click
from PIL import Image

from tickplanner.core.axis import AxisSpec, AxisStyle, LimitLine, SnapPolicy
from tickplanner.core.config import DEFAULTS, SNAP_POLICY_NAMES
from tickplanner.logging_conf import setup_logging
from tickplanner.rendering.axis_renderer import AxisRenderer
from tickplanner.ticks.interval_solver import solve
from tickplanner.ticks.tick_formatter import format_tick_labels
from tickplanner.utils.coordinate_transform import Transformer, ViewPort

logger = logging.getLogger(__name__)


def _policy_from_name(name: str) -> SnapPolicy:
    return SnapPolicy[SNAP_POLICY_NAMES[name]]


_policy_option = click.option(
    "--policy",
    type=click.Choice(sorted(SNAP_POLICY_NAMES)),
    default="none",
    show_default=True,
    help="Interval snapping policy",
)
_labels_option = click.option(
    "--labels",
    "-l",
    "label_count",
    type=click.IntRange(min=0, max=DEFAULTS.MAX_LABEL_COUNT, clamp=True),
    default=DEFAULTS.LABEL_COUNT,
    show_default=True,
    help="Desired number of labels",
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose):
    """tickplanner - nice tick values for chart axes.

    \b
    Examples:
        tickplanner ticks 0 97                       # Standard intervals
        tickplanner ticks 0 1440 --policy minutes    # Minutes of day
        tickplanner ticks -- -5 5 --policy decimal   # Negative minimum
        tickplanner render 0 100 axis.png --zoom 2   # Preview image
    """
    if verbose:
        setup_logging(logging.DEBUG)


@main.command()
@click.argument("min_value", type=float)
@click.argument("max_value", type=float)
@_labels_option
@_policy_option
@click.option("--granularity", type=float, default=None, help="Minimum interval between ticks")
@click.option("--force", is_flag=True, help="Emit exactly --labels evenly spaced ticks")
@click.option("--center", is_flag=True, help="Also compute centered label positions")
@click.option("--min-max", "min_max", is_flag=True, help="Only emit the range ends")
def ticks(min_value, max_value, label_count, policy, granularity, force, center, min_max):
    """Print the tick values for the range MIN_VALUE..MAX_VALUE."""
    snap_policy = _policy_from_name(policy)
    if granularity is not None and granularity <= 0:
        raise click.BadParameter("must be positive", param_hint="--granularity")

    tick_set = solve(
        min_value,
        max_value,
        label_count,
        granularity_enabled=granularity is not None,
        granularity=granularity if granularity is not None else 1.0,
        snap_policy=snap_policy,
        force_label_count=force,
        center_labels=center,
        show_only_min_max=min_max,
    )

    if tick_set.is_empty:
        click.echo("Warning: no ticks for this range", err=True)
        return

    for label in format_tick_labels(tick_set, snap_policy):
        click.echo(label)
    if tick_set.centered_entries:
        centered = ", ".join(f"{v:g}" for v in tick_set.centered_entries)
        click.echo(f"# centered: {centered}")
    click.echo(f"# interval={tick_set.interval:g} decimals={tick_set.decimals}")


@main.command()
@click.argument("min_value", type=float)
@click.argument("max_value", type=float)
@click.argument("output", type=click.Path(dir_okay=False, writable=True))
@_labels_option
@_policy_option
@click.option("--width", "-W", type=click.IntRange(min=1), default=DEFAULTS.CHART_WIDTH, show_default=True)
@click.option("--height", "-H", type=click.IntRange(min=1), default=DEFAULTS.CHART_HEIGHT, show_default=True)
@click.option("--zoom", type=click.FloatRange(min=1.0), default=1.0, show_default=True, help="Vertical zoom factor")
@click.option("--inverted", is_flag=True, help="Draw larger values at the bottom")
@click.option("--limit", "limits", type=float, multiple=True, help="Add a limit line (repeatable)")
@click.option("--center", is_flag=True, help="Draw labels between grid lines")
def render(min_value, max_value, output, label_count, policy, width, height, zoom, inverted, limits, center):
    """Render a Y axis preview for MIN_VALUE..MAX_VALUE to OUTPUT (PNG)."""
    viewport = ViewPort(width, height)
    transformer = Transformer(viewport)
    transformer.prepare_matrix_value_px(0.0, 1.0, max_value - min_value, min_value)
    transformer.prepare_matrix_offset(inverted)
    if zoom > 1.0:
        viewport.zoom(1.0, zoom, 0.0, -viewport.content_height / 2.0)

    spec = AxisSpec(label_count=label_count, center_labels_enabled=center, snap_policy=_policy_from_name(policy))
    style = AxisStyle(draw_zero_line_enabled=True)
    for value in limits:
        style.add_limit_line(LimitLine(limit=value, label=f"{value:g}", dash_lengths=(6, 4)))

    renderer = AxisRenderer(viewport, transformer, spec=spec, style=style)
    tick_set = renderer.compute_axis(min_value, max_value, inverted)
    logger.info("Rendering %d ticks (interval %s)", tick_set.entry_count, tick_set.interval)

    canvas = Image.new("RGBA", (width, height), DEFAULTS.BACKGROUND_COLOR)
    renderer.draw(canvas)
    canvas.save(output)
    click.echo(f"Wrote {output} ({tick_set.entry_count} ticks)")


if __name__ == "__main__":
    main()
