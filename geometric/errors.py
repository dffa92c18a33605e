"""Typed errors for the geometric package."""


class GeometryError(Exception):
    """Base error for the package."""


class GeometryValidationError(GeometryError, ValueError):
    """Input does not have the shape of a point, line or polygon."""
