"""Distance calculations between points, segments and lines."""

import math
from .types import Point


def distance_between_points(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def distance_to_segment(point: Point, line_start: Point, line_end: Point) -> float:
    """Shortest distance from a point to the segment line_start-line_end.

    The point is projected onto the line through the segment as a parameter
    ``r`` (0 at line_start, 1 at line_end). Projections outside [0, 1] are
    clamped to the nearest endpoint.
    """
    dx = line_end.x - line_start.x
    dy = line_end.y - line_start.y
    length_sq = dx * dx + dy * dy

    # Equal endpoints, or endpoints so close that the squared length underflows
    if length_sq == 0:
        return distance_between_points(point, line_start)

    r = ((point.x - line_start.x) * dx + (point.y - line_start.y) * dy) / length_sq

    if r <= 0:
        return distance_between_points(point, line_start)
    if r >= 1:
        return distance_between_points(point, line_end)

    closest = Point(line_start.x + dx * r, line_start.y + dy * r)
    return distance_between_points(point, closest)


def distance_to_line(point: Point, line_start: Point, line_end: Point) -> float:
    """Shortest distance from a point to the infinite line through two points."""
    if line_start.x - line_end.x == 0:
        # Vertical line (or both points coincide)
        return abs(point.x - line_start.x)

    # y = A*x + B
    a = (line_start.y - line_end.y) / (line_start.x - line_end.x)
    b = line_start.y - a * line_start.x
    return abs((a * point.x + b - point.y) / math.sqrt(a * a + 1))
