"""
Relationships - Intersection, containment and side-of-line predicates.

Boundary semantics:
- Segments that only touch at an endpoint do not intersect.
- Parallel and collinear segments never intersect, even when they overlap.
- Points exactly on a polygon edge may be reported inside or outside.

Polygons are iterated as closed rings (edge i runs from v[i] to
v[(i + 1) % n]); nothing here appends a closing vertex to the caller's data.
"""

import numpy as np
from numba import njit

from .config import CONFIG
from .log import get_logger
from .orientation import _cross
from .polygons import _bounds
from .values import LineLike, PointLike, PolygonLike, as_bounds, as_line, as_point, as_polygon

logger = get_logger(__name__)


# =============================================================================
# AXIS-ALIGNED BOUNDING BOX (AABB) CHECKS
# =============================================================================

@njit(cache=CONFIG.jit.cache)
def _bounds_overlap(
    b1_min_x: float, b1_min_y: float, b1_max_x: float, b1_max_y: float,
    b2_min_x: float, b2_min_y: float, b2_max_x: float, b2_max_y: float
) -> bool:
    """
    Check if two AABBs overlap.

    Returns True if overlapping or touching, False if separated.
    """
    return not (
        b1_max_x < b2_min_x or b2_max_x < b1_min_x or
        b1_max_y < b2_min_y or b2_max_y < b1_min_y
    )


# =============================================================================
# SEGMENT KERNELS
# =============================================================================

@njit(cache=CONFIG.jit.cache)
def _segments_intersect(
    a: float, b: float, c: float, d: float,
    p: float, q: float, r: float, s: float
) -> bool:
    """
    Segment (a, b)-(c, d) against segment (p, q)-(r, s).

    Solves for the parameters lambda (along the first segment) and gamma
    (along the second) at the crossing point. Both must lie strictly inside
    (0, 1).
    """
    det = (c - a) * (s - q) - (r - p) * (d - b)
    if det == 0.0:
        return False

    lam = ((s - q) * (r - a) + (p - r) * (s - b)) / det
    gamma = ((b - d) * (r - a) + (c - a) * (s - b)) / det
    return (0.0 < lam and lam < 1.0) and (0.0 < gamma and gamma < 1.0)


@njit(cache=CONFIG.jit.cache)
def _segment_intersects_ring(
    x0: float, y0: float, x1: float, y1: float, vertices: np.ndarray
) -> bool:
    n = len(vertices)
    for i in range(n):
        j = (i + 1) % n
        if _segments_intersect(
            x0, y0, x1, y1,
            vertices[i, 0], vertices[i, 1], vertices[j, 0], vertices[j, 1]
        ):
            return True
    return False


@njit(cache=CONFIG.jit.cache)
def _rings_intersect(verts1: np.ndarray, verts2: np.ndarray) -> bool:
    """True if any edge of verts1 crosses any edge of verts2."""
    n1 = len(verts1)
    for i in range(n1):
        j = (i + 1) % n1
        if _segment_intersects_ring(
            verts1[i, 0], verts1[i, 1], verts1[j, 0], verts1[j, 1], verts2
        ):
            return True
    return False


# =============================================================================
# CONTAINMENT KERNELS
# =============================================================================

@njit(cache=CONFIG.jit.cache)
def _point_in_ring(x: float, y: float, vertices: np.ndarray) -> bool:
    """Even-odd ray casting with a horizontal ray towards +x."""
    n = len(vertices)
    inside = False
    j = n - 1
    for i in range(n):
        xi = vertices[i, 0]
        yi = vertices[i, 1]
        xj = vertices[j, 0]
        yj = vertices[j, 1]

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside
        j = i
    return inside


@njit(cache=CONFIG.jit.cache)
def _ring_in_ring(verts1: np.ndarray, verts2: np.ndarray) -> bool:
    """True if every vertex of verts1 lies inside verts2."""
    for i in range(len(verts1)):
        if not _point_in_ring(verts1[i, 0], verts1[i, 1], verts2):
            return False
    return True


# =============================================================================
# PUBLIC API
# =============================================================================

def bounds_overlap(bounds_a, bounds_b) -> bool:
    """
    Check if two bounds ([[min_x, min_y], [max_x, max_y]]) overlap.

    Touching boxes count as overlapping.
    """
    a = as_bounds(bounds_a)
    b = as_bounds(bounds_b)
    return _bounds_overlap(
        a[0, 0], a[0, 1], a[1, 0], a[1, 1],
        b[0, 0], b[0, 1], b[1, 0], b[1, 1]
    )


def line_intersects_line(line_a: LineLike, line_b: LineLike) -> bool:
    """
    Determine whether two line segments cross.

    Returns False for parallel or collinear segments (including overlapping
    collinear ones) and for segments that only touch at an endpoint.
    """
    a = as_line(line_a)
    b = as_line(line_b)
    return _segments_intersect(
        a[0, 0], a[0, 1], a[1, 0], a[1, 1],
        b[0, 0], b[0, 1], b[1, 0], b[1, 1]
    )


def line_intersects_polygon(line: LineLike, polygon: PolygonLike) -> bool:
    """Determine whether a line segment crosses any edge of a polygon."""
    seg = as_line(line)
    return _segment_intersects_ring(seg[0, 0], seg[0, 1], seg[1, 0], seg[1, 1], as_polygon(polygon))


def point_in_polygon(point: PointLike, polygon: PolygonLike) -> bool:
    """
    Determine whether a point is inside a polygon (even-odd rule).

    Points exactly on the boundary have no guaranteed result.
    """
    p = as_point(point)
    return _point_in_ring(p[0], p[1], as_polygon(polygon))


def _upward(line: np.ndarray) -> np.ndarray:
    # Returns [bottom, top]: the endpoint with greater y goes last
    return line if line[1, 1] > line[0, 1] else line[::-1]


def point_left_of_line(point: PointLike, line: LineLike) -> bool:
    """
    Determine whether a point is left of a line.

    The line is oriented so that it points up (towards greater y), which
    makes the result independent of the order of its endpoints.
    """
    p = as_point(point)
    t = _upward(as_line(line))
    return _cross(p[0], p[1], t[1, 0], t[1, 1], t[0, 0], t[0, 1]) < 0.0


def point_right_of_line(point: PointLike, line: LineLike) -> bool:
    """Determine whether a point is right of a line, oriented as in point_left_of_line."""
    p = as_point(point)
    t = _upward(as_line(line))
    return _cross(p[0], p[1], t[1, 0], t[1, 1], t[0, 0], t[0, 1]) > 0.0


def point_on_line(point: PointLike, line: LineLike) -> bool:
    """
    Determine whether a point is exactly collinear with a line.

    Uses exact zero comparison; tests the infinite line through the
    segment, not the segment itself.
    """
    p = as_point(point)
    seg = as_line(line)
    return _cross(p[0], p[1], seg[0, 0], seg[0, 1], seg[1, 0], seg[1, 1]) == 0.0


def polygon_in_polygon(polygon_a: PolygonLike, polygon_b: PolygonLike) -> bool:
    """
    Determine whether polygon_a is contained by polygon_b.

    Only the vertices of polygon_a are tested. A polygon whose vertices are
    all inside polygon_b but whose edges leave it (polygon_b concave) is
    still reported as inside.
    """
    return _ring_in_ring(as_polygon(polygon_a), as_polygon(polygon_b))


def polygon_intersects_polygon(polygon_a: PolygonLike, polygon_b: PolygonLike) -> bool:
    """
    Determine whether the edges of two polygons cross.

    Full containment without any edge crossing is not an intersection;
    combine with polygon_in_polygon to tell disjoint, intersecting and
    contained apart.
    """
    verts1 = as_polygon(polygon_a)
    verts2 = as_polygon(polygon_b)

    # Quick AABB check
    min_x1, min_y1, max_x1, max_y1 = _bounds(verts1)
    min_x2, min_y2, max_x2, max_y2 = _bounds(verts2)
    if not _bounds_overlap(min_x1, min_y1, max_x1, max_y1, min_x2, min_y2, max_x2, max_y2):
        return False

    return _rings_intersect(verts1, verts2)


# =============================================================================
# WARMUP
# =============================================================================

def warmup():
    """Warm up JIT compilation."""
    verts = np.array([
        [0.0, 0.0],
        [1.0, 0.0],
        [1.0, 1.0],
        [0.0, 1.0]
    ], dtype=np.float64)

    _ = _bounds_overlap(0.0, 0.0, 1.0, 1.0, 0.5, 0.5, 1.5, 1.5)
    _ = _segments_intersect(0.0, 0.0, 1.0, 1.0, 0.0, 1.0, 1.0, 0.0)
    _ = _segment_intersects_ring(-1.0, 0.5, 2.0, 0.5, verts)
    _ = _rings_intersect(verts, verts + 0.5)
    _ = _point_in_ring(0.5, 0.5, verts)
    _ = _ring_in_ring(verts * 0.5, verts)

    logger.info("JIT warmup complete for relationships module")


if __name__ == "__main__":
    warmup()
