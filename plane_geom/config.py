"""
Configuration constants for plane-geom.

Default values used by the region and circle helpers when the caller
does not pass them explicitly.
"""

from enum import Enum


class RegionType(str, Enum):
    """Shape of the hit-test area around a point."""
    ROUND = "round"
    SQUARE = "square"


class StartDirection(str, Enum):
    """Reference direction that angles on a circle are measured from."""
    RIGHT = "right"
    TOP = "top"
    LEFT = "left"
    BOTTOM = "bottom"


# =============================================================================
# REGION DEFAULTS
# =============================================================================

DEFAULT_REGION_RADIUS = 5
DEFAULT_REGION_TYPE = RegionType.ROUND

# =============================================================================
# CIRCLE DEFAULTS
# =============================================================================

DEFAULT_START_DIRECTION = StartDirection.RIGHT

# Degrees added to the angle for each start direction. Unknown directions
# fall back to 0 (same as RIGHT).
START_DIRECTION_OFFSETS = {
    StartDirection.RIGHT: 0,
    StartDirection.TOP: 90,
    StartDirection.LEFT: 180,
    StartDirection.BOTTOM: 270,
}

# Decimal places kept on computed circle coordinates
COORDINATE_PRECISION = 2
