"""Geometry utilities for plane-geom."""

from .types import Point, PointInfo
from .distance import (
    distance_between_points,
    distance_to_segment,
    distance_to_line,
)
from .region import point_in_region, point_on_any_node
from .angles import angle_to_x_axis, point_on_circle
from .search import nearest_point

__all__ = [
    "Point",
    "PointInfo",
    "distance_between_points",
    "distance_to_segment",
    "distance_to_line",
    "point_in_region",
    "point_on_any_node",
    "angle_to_x_axis",
    "point_on_circle",
    "nearest_point",
]
