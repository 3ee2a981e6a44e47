"""Hit-testing points against regions around other points."""

from typing import Sequence, Union

from ..config import DEFAULT_REGION_RADIUS, DEFAULT_REGION_TYPE, RegionType
from ..log import get_logger
from .types import Point, PointInfo

logger = get_logger(__name__)


def point_in_region(
    point: Point,
    area_point: Point,
    radius: float = DEFAULT_REGION_RADIUS,
    region_type: Union[str, RegionType] = DEFAULT_REGION_TYPE,
) -> bool:
    """Check whether ``point`` lies in the region centred on ``area_point``.

    Args:
        point: The point being tested
        area_point: Centre of the region
        radius: Circle radius, or half-width of the square
        region_type: ``"round"`` for a circle, ``"square"`` for an
            axis-aligned square

    Returns:
        True if the point is inside or on the boundary. An unknown
        ``region_type`` is logged as a warning and gives False.
    """
    dx = point.x - area_point.x
    dy = point.y - area_point.y

    if region_type == RegionType.ROUND:
        return dx * dx + dy * dy <= radius * radius
    if region_type == RegionType.SQUARE:
        return abs(dx) <= radius and abs(dy) <= radius

    try:
        logger.warning(
            "Invalid region type %r in point_in_region, expected %r or %r",
            region_type, RegionType.ROUND.value, RegionType.SQUARE.value,
        )
    except Exception:
        # A failing log handler never changes the hit-test result
        pass
    return False


def point_on_any_node(
    point: Point,
    points: Sequence[Point],
    radius: float = DEFAULT_REGION_RADIUS,
    region_type: Union[str, RegionType] = DEFAULT_REGION_TYPE,
) -> PointInfo:
    """Find which node of ``points`` the given point sits on.

    Every node is tested; when several regions contain the point the last
    one in the sequence wins. Returns ``PointInfo(-1, Point(0, 0))`` when no
    node matches.
    """
    result = PointInfo.not_found()

    for i, node in enumerate(points):
        if point_in_region(point, node, radius, region_type):
            result = PointInfo(index=i, data=Point(node.x, node.y))

    return result
