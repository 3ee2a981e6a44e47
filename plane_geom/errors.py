"""Exception types for plane-geom."""


class PlaneGeometryError(Exception):
    """Base error for the project."""


class InvalidArgumentError(PlaneGeometryError, ValueError):
    """An argument violates a precondition (e.g. an empty point sequence)."""
