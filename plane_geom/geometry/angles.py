"""Angle and circle helpers.

Angles are in degrees throughout.
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from ..config import (
    COORDINATE_PRECISION,
    DEFAULT_START_DIRECTION,
    START_DIRECTION_OFFSETS,
    StartDirection,
)
from .distance import distance_between_points
from .types import Point


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _round_coordinate(value: float) -> float:
    """Round to COORDINATE_PRECISION places, ties away from zero.

    Works on the exact binary value, so 0.625 becomes 0.63 while 1.005
    (stored as 1.00499...) becomes 1.0.
    """
    # Non-finite, or large enough that the float holds no fractional digits
    if not math.isfinite(value) or abs(value) >= 2 ** 52:
        return value
    quantum = Decimal(1).scaleb(-COORDINATE_PRECISION)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def angle_to_x_axis(p1: Point, p2: Point, is_direction: bool = False) -> int:
    """Angle between the ray p1 -> p2 and the x-axis, in whole degrees.

    Computed as ``asin(dy / distance)``, so the plain result lies in
    [-90, 90]. With ``is_direction`` set, rays pointing left (p2.x < p1.x)
    are reflected to ``180 - angle``. This does not separate every quadrant
    the way atan2 would. Coincident points give 0.
    """
    dy = p2.y - p1.y
    dis = distance_between_points(p1, p2)
    if dis > 0:
        # Rounding in the distance can push the ratio just outside [-1, 1]
        ratio = max(-1.0, min(1.0, dy / dis))
        angle = _round_half_up(math.degrees(math.asin(ratio)))
    else:
        angle = 0

    if is_direction and p2.x < p1.x:
        angle = 180 - angle

    return angle


def point_on_circle(
    center: Point,
    angle: float,
    radius: float,
    start_direction: Union[str, StartDirection] = DEFAULT_START_DIRECTION,
    clockwise: bool = False,
) -> Point:
    """Offset of a point on a circle of ``radius``, ``angle`` degrees round.

    NOTE: ``center`` is not added to the result. The returned point is the
    offset from the circle's centre; add ``center`` to get an absolute
    position.

    Args:
        center: Circle centre (unused, see above)
        angle: Angle in degrees from ``start_direction``
        radius: Circle radius
        start_direction: ``"right"``, ``"top"``, ``"left"`` or ``"bottom"``;
            anything else is treated as ``"right"``
        clockwise: Measure the angle in the opposite rotation sense

    Returns:
        Point with both coordinates rounded to 2 decimal places
    """
    try:
        offset = START_DIRECTION_OFFSETS.get(StartDirection(start_direction), 0)
    except ValueError:
        offset = 0

    radian = math.radians(angle + offset)
    if clockwise:
        radian = -radian

    return Point(
        _round_coordinate(math.cos(radian) * radius),
        _round_coordinate(math.sin(radian) * radius),
    )
