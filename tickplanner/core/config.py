"""Configuration constants and default settings."""


# Default axis and rendering settings
class DEFAULTS:
    """Default configuration values."""

    # Axis layout
    LABEL_COUNT = 6
    MAX_LABEL_COUNT = 25

    # Viewport remapping is skipped below this content width (pixels)
    MIN_CONTENT_EXTENT = 10.0

    # Zoom limits
    MIN_SCALE = 1.0
    MAX_SCALE = 1000.0

    # Image dimensions
    CHART_WIDTH = 480
    CHART_HEIGHT = 320

    # Margins
    MARGIN_LEFT = 60
    MARGIN_RIGHT = 60
    MARGIN_TOP = 20
    MARGIN_BOTTOM = 40

    # Labels
    LABEL_FONT_SIZE = 12
    LABEL_X_OFFSET = 5
    LABEL_Y_OFFSET = 0
    X_LABEL_GAP = 5

    # Colors (RGBA tuples)
    BACKGROUND_COLOR = (255, 255, 255, 255)
    AXIS_COLOR = (136, 136, 136, 255)
    LABEL_COLOR = (68, 68, 68, 255)
    GRID_COLOR = (220, 220, 220, 255)
    ZERO_LINE_COLOR = (90, 90, 90, 255)
    LIMIT_LINE_COLOR = (237, 91, 91, 255)

    # Font search path, first hit wins
    FONT_PATHS = (
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/TTF/DejaVuSans.ttf",
    )


# CLI names for snap policies
SNAP_POLICY_NAMES = {
    "none": "NONE",
    "decimal": "DECIMAL_ALLOWED",
    "minutes": "TIME_MINUTES",
    "seconds": "TIME_SECONDS",
}
