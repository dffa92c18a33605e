"""
Orientation - Scalar cross product and signed polygon area.

Both are exact-arithmetic primitives: no tolerance is applied, so results
for nearly collinear input are subject to floating-point error.
"""

import numpy as np
from numba import njit

from .config import CONFIG
from .log import get_logger
from .values import PointLike, PolygonLike, as_point, as_polygon

logger = get_logger(__name__)


@njit(cache=CONFIG.jit.cache)
def _cross(ax: float, ay: float, bx: float, by: float, ox: float, oy: float) -> float:
    """(a - o) x (b - o). Positive when o -> a -> b turns counter-clockwise."""
    return (ax - ox) * (by - oy) - (ay - oy) * (bx - ox)


@njit(cache=CONFIG.jit.cache)
def _shoelace(vertices: np.ndarray) -> float:
    """Twice the signed area of a closed ring."""
    n = len(vertices)
    a = 0.0
    for i in range(n):
        j = (i + 1) % n
        a += vertices[i, 0] * vertices[j, 1]
        a -= vertices[j, 0] * vertices[i, 1]
    return a


def cross(a: PointLike, b: PointLike, o: PointLike) -> float:
    """
    Scalar 2-D cross product of (a - o) and (b - o).

    > 0: counter-clockwise turn o -> a -> b
    < 0: clockwise turn
    = 0: collinear
    """
    pa = as_point(a)
    pb = as_point(b)
    po = as_point(o)
    return _cross(pa[0], pa[1], pb[0], pb[1], po[0], po[1])


def polygon_signed_area(vertices: PolygonLike) -> float:
    """Shoelace area, positive for counter-clockwise winding in a y-up frame."""
    return _shoelace(as_polygon(vertices)) / 2.0


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

    _ = _cross(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
    _ = _shoelace(verts)

    logger.info("JIT warmup complete for orientation module")


if __name__ == "__main__":
    warmup()
