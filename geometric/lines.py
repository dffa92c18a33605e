"""
Line Metrics - Angle, length and midpoint of a line segment.

A line is a pair of points (start, end). The scalar kernels take raw
coordinates so the polygon and predicate kernels can call them directly.
"""

import math
import numpy as np
from numba import njit

from .config import CONFIG
from .log import get_logger
from .values import LineLike, as_line

logger = get_logger(__name__)


# =============================================================================
# SCALAR KERNELS
# =============================================================================

@njit(cache=CONFIG.jit.cache)
def _angle(x0: float, y0: float, x1: float, y1: float) -> float:
    """Direction from (x0, y0) to (x1, y1) in degrees, range (-180, 180]."""
    return math.atan2(y1 - y0, x1 - x0) * 180.0 / math.pi


@njit(cache=CONFIG.jit.cache)
def _length(x0: float, y0: float, x1: float, y1: float) -> float:
    """Euclidean distance between (x0, y0) and (x1, y1)."""
    dx = x1 - x0
    dy = y1 - y0
    return math.sqrt(dx * dx + dy * dy)


# =============================================================================
# PUBLIC API
# =============================================================================

def line_angle(line: LineLike) -> float:
    """
    Angle of a line segment in degrees.

    Direction matters: reversing the endpoints changes the result by 180.

    Args:
        line: [[x0, y0], [x1, y1]]

    Returns:
        atan2 of the segment's delta, in degrees in (-180, 180]
    """
    seg = as_line(line)
    return _angle(seg[0, 0], seg[0, 1], seg[1, 0], seg[1, 1])


def line_length(line: LineLike) -> float:
    """Euclidean length of a line segment. Zero iff the endpoints coincide."""
    seg = as_line(line)
    return _length(seg[0, 0], seg[0, 1], seg[1, 0], seg[1, 1])


def line_midpoint(line: LineLike) -> np.ndarray:
    """Midpoint of a line segment as a (2,) array."""
    seg = as_line(line)
    return (seg[0] + seg[1]) / 2.0


# =============================================================================
# WARMUP
# =============================================================================

def warmup():
    """Warm up JIT compilation."""
    _ = _angle(0.0, 0.0, 1.0, 1.0)
    _ = _length(0.0, 0.0, 3.0, 4.0)

    logger.info("JIT warmup complete for lines module")


if __name__ == "__main__":
    warmup()
