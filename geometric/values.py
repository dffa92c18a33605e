"""
Geometric value types and input coercion.

Points, lines and polygons are accepted as any nested numeric sequence and
converted to fresh float64 arrays before they reach the numba kernels, so a
kernel never sees (or mutates) the caller's object.
"""

import numpy as np
from typing import Sequence, Union

from .errors import GeometryValidationError

PointLike = Union[Sequence[float], np.ndarray]
LineLike = Union[Sequence[PointLike], np.ndarray]
PolygonLike = Union[Sequence[PointLike], np.ndarray]


def _to_array(value, what: str) -> np.ndarray:
    try:
        # np.array (not asarray) so the kernels always work on a copy
        return np.array(value, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise GeometryValidationError(f"{what} must be numeric, got {value!r}") from exc


def as_point(point: PointLike) -> np.ndarray:
    """Convert to a (2,) float64 array."""
    arr = _to_array(point, "point")
    if arr.shape != (2,):
        raise GeometryValidationError(f"point must have 2 coordinates, got shape {arr.shape}")
    return arr


def as_line(line: LineLike) -> np.ndarray:
    """Convert to a (2, 2) float64 array of [start, end]."""
    arr = _to_array(line, "line")
    if arr.shape != (2, 2):
        raise GeometryValidationError(f"line must be 2 points, got shape {arr.shape}")
    return arr


def as_points(points: PolygonLike) -> np.ndarray:
    """Convert to an (N, 2) float64 array; N may be anything, including 0."""
    arr = _to_array(points, "points")
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise GeometryValidationError(f"points must be an Nx2 array, got shape {arr.shape}")
    return arr


def as_polygon(vertices: PolygonLike) -> np.ndarray:
    """Convert to an (N, 2) float64 array with N >= 3."""
    arr = as_points(vertices)
    if len(arr) < 3:
        raise GeometryValidationError(f"polygon must have at least 3 vertices, got {len(arr)}")
    return arr


def as_bounds(bounds) -> np.ndarray:
    """Convert to a (2, 2) float64 array of [[min_x, min_y], [max_x, max_y]]."""
    arr = _to_array(bounds, "bounds")
    if arr.shape != (2, 2):
        raise GeometryValidationError(f"bounds must be 2 points, got shape {arr.shape}")
    return arr
