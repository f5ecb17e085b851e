"""Logging setup for the command line interface."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level=logging.INFO):
    """Route tickplanner log records to stderr.

    Stdout is reserved for command output (tick labels), so log lines never
    interleave with it.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)
    logging.getLogger("PIL").setLevel(max(level, logging.INFO))
