"""
Convex Hull - Andrew's monotone chain.

Points are sorted by (x, y), then a lower chain is built left to right and an
upper chain right to left. A point is popped whenever the last three make a
non-left turn (cross <= 0), so collinear points on the boundary never
survive. O(n log n) for the sort, O(n) for the chains.
"""

import numpy as np
from numba import njit
from typing import Optional

from .config import CONFIG
from .log import get_logger
from .orientation import _cross
from .values import PolygonLike, as_points

logger = get_logger(__name__)


@njit(cache=CONFIG.jit.cache)
def _monotone_chain(points: np.ndarray) -> np.ndarray:
    """
    Build the hull of points already sorted by (x, y).

    Args:
        points: (N, 2) sorted array, N >= 3

    Returns:
        (K, 2) hull vertices, counter-clockwise, first vertex not repeated
    """
    n = len(points)
    hull = np.empty((2 * n, 2), dtype=np.float64)
    k = 0

    # Lower chain
    for i in range(n):
        while k >= 2 and _cross(
            hull[k - 2, 0], hull[k - 2, 1], hull[k - 1, 0], hull[k - 1, 1],
            points[i, 0], points[i, 1]
        ) <= 0.0:
            k -= 1
        hull[k, 0] = points[i, 0]
        hull[k, 1] = points[i, 1]
        k += 1

    # Upper chain; the last lower point is its first point
    lower_size = k + 1
    for i in range(n - 2, -1, -1):
        while k >= lower_size and _cross(
            hull[k - 2, 0], hull[k - 2, 1], hull[k - 1, 0], hull[k - 1, 1],
            points[i, 0], points[i, 1]
        ) <= 0.0:
            k -= 1
        hull[k, 0] = points[i, 0]
        hull[k, 1] = points[i, 1]
        k += 1

    # The upper chain ends on the first point again
    return hull[:k - 1].copy()


def polygon_hull(points: PolygonLike) -> Optional[np.ndarray]:
    """
    Convex hull of a set of points.

    Args:
        points: (N, 2) points in any order; not reordered in place

    Returns:
        (K, 2) hull vertices in counter-clockwise order (y-up) starting at
        the lowest-x, lowest-y point, or None for fewer than 3 points.
        If every point is collinear the two extreme points are returned.
    """
    pts = as_points(points)
    if len(pts) < 3:
        logger.debug("Hull not computable from %d points", len(pts))
        return None

    # Sort by x, then y (lexsort uses the last key as primary)
    order = np.lexsort((pts[:, 1], pts[:, 0]))
    return _monotone_chain(pts[order])


# =============================================================================
# WARMUP
# =============================================================================

def warmup():
    """Warm up JIT compilation."""
    pts = np.array([
        [0.0, 0.0],
        [0.0, 2.0],
        [1.0, 1.0],
        [2.0, 0.0],
        [2.0, 2.0]
    ], dtype=np.float64)

    _ = _monotone_chain(pts)

    logger.info("JIT warmup complete for hull module")


if __name__ == "__main__":
    warmup()
