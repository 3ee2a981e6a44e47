"""Nearest-point search."""

from typing import Sequence

from ..errors import InvalidArgumentError
from .distance import distance_between_points
from .types import Point, PointInfo


def nearest_point(point: Point, points: Sequence[Point]) -> PointInfo:
    """Find the point in ``points`` closest to ``point``.

    Ties go to the earliest candidate.

    Raises:
        InvalidArgumentError: if ``points`` is empty
    """
    if len(points) == 0:
        raise InvalidArgumentError("nearest_point requires at least one candidate point")

    closest_idx = 0
    closest_dist = distance_between_points(point, points[0])

    for i, candidate in enumerate(points):
        d = distance_between_points(point, candidate)
        if d < closest_dist:
            closest_dist = d
            closest_idx = i

    best = points[closest_idx]
    return PointInfo(index=closest_idx, data=Point(best.x, best.y))
