"""plane-geom: 2D planar geometry helpers for hit-testing and drawing."""

__version__ = "0.1.0"

from .geometry import (
    Point,
    PointInfo,
    distance_between_points,
    distance_to_segment,
    distance_to_line,
    point_in_region,
    point_on_any_node,
    angle_to_x_axis,
    point_on_circle,
    nearest_point,
)
from .errors import PlaneGeometryError, InvalidArgumentError

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
    "PlaneGeometryError",
    "InvalidArgumentError",
]
