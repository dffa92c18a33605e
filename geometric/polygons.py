"""
Polygon Metrics & Transforms - Numba-accelerated operations on vertex rings.

A polygon is an (N, 2) ring of vertices, N >= 3, closed implicitly from the
last vertex back to the first. Transforms return new arrays; the caller's
vertices are never modified.
"""

import numpy as np
from numba import njit
from typing import Optional, Tuple

from .config import CONFIG
from .lines import _angle, _length
from .log import get_logger
from .orientation import _shoelace
from .points import _rotate, _translate
from .values import PointLike, PolygonLike, as_point, as_polygon

logger = get_logger(__name__)


# =============================================================================
# METRIC KERNELS
# =============================================================================

@njit(cache=CONFIG.jit.cache, fastmath=CONFIG.jit.fastmath)
def _bounds(vertices: np.ndarray) -> Tuple[float, float, float, float]:
    """
    Get axis-aligned bounding box for vertices.

    Returns:
        (min_x, min_y, max_x, max_y)
    """
    min_x = vertices[0, 0]
    max_x = vertices[0, 0]
    min_y = vertices[0, 1]
    max_y = vertices[0, 1]

    for i in range(1, len(vertices)):
        x = vertices[i, 0]
        y = vertices[i, 1]

        if x < min_x:
            min_x = x
        elif x > max_x:
            max_x = x

        if y < min_y:
            min_y = y
        elif y > max_y:
            max_y = y

    return min_x, min_y, max_x, max_y


@njit(cache=CONFIG.jit.cache)
def _centroid_sums(vertices: np.ndarray) -> Tuple[float, float, float]:
    """
    Accumulate the area-weighted centroid terms.

    Returns:
        (twice the signed area, sum of (x0 + x1) * f, sum of (y0 + y1) * f)
        where f is the cross product of consecutive vertices
    """
    n = len(vertices)
    a = 0.0
    x = 0.0
    y = 0.0
    for i in range(n):
        j = (i + 1) % n
        f = vertices[i, 0] * vertices[j, 1] - vertices[j, 0] * vertices[i, 1]
        a += f
        x += (vertices[i, 0] + vertices[j, 0]) * f
        y += (vertices[i, 1] + vertices[j, 1]) * f
    return a, x, y


@njit(cache=CONFIG.jit.cache, fastmath=CONFIG.jit.fastmath)
def _mean(vertices: np.ndarray) -> Tuple[float, float]:
    n = len(vertices)
    x = 0.0
    y = 0.0
    for i in range(n):
        x += vertices[i, 0]
        y += vertices[i, 1]
    return x / n, y / n


@njit(cache=CONFIG.jit.cache, fastmath=CONFIG.jit.fastmath)
def _perimeter(vertices: np.ndarray) -> float:
    n = len(vertices)
    perimeter = 0.0
    for i in range(n):
        j = (i + 1) % n
        perimeter += _length(vertices[i, 0], vertices[i, 1], vertices[j, 0], vertices[j, 1])
    return perimeter


# =============================================================================
# TRANSFORM KERNELS
# =============================================================================

@njit(cache=CONFIG.jit.cache)
def _rotate_vertices(vertices: np.ndarray, angle_deg: float, ox: float, oy: float) -> np.ndarray:
    n = len(vertices)
    rotated = np.empty((n, 2), dtype=np.float64)

    for i in range(n):
        x, y = _rotate(vertices[i, 0], vertices[i, 1], angle_deg, ox, oy)
        rotated[i, 0] = x
        rotated[i, 1] = y

    return rotated


@njit(cache=CONFIG.jit.cache)
def _translate_vertices(vertices: np.ndarray, angle_deg: float, distance: float) -> np.ndarray:
    n = len(vertices)
    translated = np.empty((n, 2), dtype=np.float64)

    for i in range(n):
        x, y = _translate(vertices[i, 0], vertices[i, 1], angle_deg, distance)
        translated[i, 0] = x
        translated[i, 1] = y

    return translated


@njit(cache=CONFIG.jit.cache)
def _scale_vertices(vertices: np.ndarray, scale: float, ox: float, oy: float) -> np.ndarray:
    """
    Re-place each vertex at scale times its distance from (ox, oy), along the
    same heading. A negative scale flips the vertex through the origin.
    """
    n = len(vertices)
    scaled = np.empty((n, 2), dtype=np.float64)

    for i in range(n):
        d = _length(ox, oy, vertices[i, 0], vertices[i, 1])
        a = _angle(ox, oy, vertices[i, 0], vertices[i, 1])
        x, y = _translate(ox, oy, a, d * scale)
        scaled[i, 0] = x
        scaled[i, 1] = y

    return scaled


# =============================================================================
# PUBLIC API - METRICS
# =============================================================================

def polygon_area(vertices: PolygonLike) -> float:
    """
    Unsigned polygon area using the shoelace formula.

    Correct for convex and simple concave polygons. Self-intersecting rings
    are not supported.
    """
    return abs(_shoelace(as_polygon(vertices)) / 2.0)


def polygon_bounds(vertices: PolygonLike) -> np.ndarray:
    """
    Axis-aligned bounds of a polygon.

    Returns:
        [[min_x, min_y], [max_x, max_y]] as a (2, 2) array
    """
    min_x, min_y, max_x, max_y = _bounds(as_polygon(vertices))
    return np.array([[min_x, min_y], [max_x, max_y]])


def polygon_centroid(vertices: PolygonLike) -> Optional[np.ndarray]:
    """
    Area-weighted centroid of a polygon.

    Args:
        vertices: (N, 2) ring, N >= 3

    Returns:
        Centroid as a (2,) array, or None when the signed area is exactly
        zero (all vertices collinear or coincident)
    """
    a, x, y = _centroid_sums(as_polygon(vertices))
    if a == 0.0:
        logger.debug("Centroid not computable: polygon has zero signed area")
        return None

    d = a * 3.0
    return np.array([x / d, y / d])


def polygon_mean(vertices: PolygonLike) -> np.ndarray:
    """
    Arithmetic mean of the vertices.

    Cheaper than the centroid but weighted by vertex count, not area: a side
    with many vertices pulls the mean towards it.
    """
    x, y = _mean(as_polygon(vertices))
    return np.array([x, y])


def polygon_length(vertices: PolygonLike) -> float:
    """Perimeter of a polygon, including the edge from the last vertex to the first."""
    return _perimeter(as_polygon(vertices))


# =============================================================================
# PUBLIC API - TRANSFORMS
# =============================================================================

def polygon_rotate(vertices: PolygonLike, angle: float, origin: Optional[PointLike] = None) -> np.ndarray:
    """
    Rotate a polygon by an angle in degrees around an origin.

    Args:
        vertices: (N, 2) ring
        angle: Rotation in degrees, counter-clockwise in a y-up frame
        origin: Center of rotation; None means (0, 0)

    Returns:
        Rotated vertices (N, 2)
    """
    verts = as_polygon(vertices)
    ox, oy = (0.0, 0.0) if origin is None else as_point(origin)
    return _rotate_vertices(verts, float(angle), float(ox), float(oy))


def polygon_scale(vertices: PolygonLike, scale: float, origin: Optional[PointLike] = None) -> Optional[np.ndarray]:
    """
    Scale a polygon about an origin.

    Args:
        vertices: (N, 2) ring
        scale: Scale factor; 1 is identity, (0, 1) shrinks, > 1 grows,
            negative values invert through the origin
        origin: Fixed point of the scaling; None means the polygon's centroid

    Returns:
        Scaled vertices (N, 2), or None when origin is defaulted and the
        centroid is not computable
    """
    verts = as_polygon(vertices)

    if origin is None:
        origin = polygon_centroid(verts)
        if origin is None:
            logger.debug("Scale not computable: no origin given and centroid is undefined")
            return None

    ox, oy = as_point(origin)
    return _scale_vertices(verts, float(scale), float(ox), float(oy))


def polygon_translate(vertices: PolygonLike, angle: float, distance: float) -> np.ndarray:
    """
    Translate every vertex of a polygon by a distance along a direction.

    Args:
        vertices: (N, 2) ring
        angle: Direction of travel in degrees
        distance: Distance to travel

    Returns:
        Translated vertices (N, 2)
    """
    return _translate_vertices(as_polygon(vertices), float(angle), float(distance))


# =============================================================================
# WARMUP
# =============================================================================

def warmup():
    """Warm up JIT compilation by calling all kernels once."""
    verts = np.array([
        [0.0, 0.0],
        [2.0, 0.0],
        [2.0, 2.0],
        [0.0, 2.0]
    ], dtype=np.float64)

    _ = _bounds(verts)
    _ = _centroid_sums(verts)
    _ = _mean(verts)
    _ = _perimeter(verts)
    _ = _rotate_vertices(verts, 45.0, 1.0, 1.0)
    _ = _translate_vertices(verts, 45.0, 1.0)
    _ = _scale_vertices(verts, 2.0, 1.0, 1.0)

    logger.info("JIT warmup complete for polygons module")


if __name__ == "__main__":
    warmup()
