"""Type definitions for plane-geom geometry."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """2D point."""
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class PointInfo:
    """A point picked out of a sequence, with its position in that sequence.

    ``index`` is -1 when nothing was found, in which case ``data`` is the
    ``Point(0, 0)`` sentinel.
    """
    index: int
    data: Point

    @property
    def found(self) -> bool:
        return self.index >= 0

    @classmethod
    def not_found(cls) -> "PointInfo":
        return cls(index=-1, data=Point(0, 0))
