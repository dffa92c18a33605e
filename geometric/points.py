"""
Point Transforms - Rotation about an origin and translation along a heading.

Rotation is counter-clockwise for positive angles in a y-up frame. Callers in
screen space (y-down) should negate the angle.
"""

import math
import numpy as np
from numba import njit
from typing import Optional, Tuple

from .config import CONFIG
from .log import get_logger
from .values import PointLike, as_point

logger = get_logger(__name__)


# =============================================================================
# SCALAR KERNELS
# =============================================================================

@njit(cache=CONFIG.jit.cache)
def _rotate(x: float, y: float, angle_deg: float, ox: float, oy: float) -> Tuple[float, float]:
    """Rotate (x, y) about (ox, oy) by angle_deg."""
    angle_rad = angle_deg / 180.0 * math.pi
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)

    # Rotate relative to the origin, then move back
    dx = x - ox
    dy = y - oy
    return dx * cos_a - dy * sin_a + ox, dx * sin_a + dy * cos_a + oy


@njit(cache=CONFIG.jit.cache)
def _translate(x: float, y: float, angle_deg: float, distance: float) -> Tuple[float, float]:
    """Move (x, y) by distance along angle_deg."""
    angle_rad = angle_deg / 180.0 * math.pi
    return x + distance * math.cos(angle_rad), y + distance * math.sin(angle_rad)


# =============================================================================
# PUBLIC API
# =============================================================================

def point_rotate(point: PointLike, angle: float, origin: Optional[PointLike] = None) -> np.ndarray:
    """
    Rotate a point by an angle in degrees around an origin.

    Args:
        point: [x, y]
        angle: Rotation in degrees, counter-clockwise in a y-up frame
        origin: Center of rotation; None means (0, 0)

    Returns:
        Rotated point as a (2,) array
    """
    p = as_point(point)
    ox, oy = (0.0, 0.0) if origin is None else as_point(origin)
    x, y = _rotate(p[0], p[1], float(angle), float(ox), float(oy))
    return np.array([x, y])


def point_translate(point: PointLike, angle: float, distance: float) -> np.ndarray:
    """
    Translate a point by a distance along a direction.

    Args:
        point: [x, y]
        angle: Direction of travel in degrees
        distance: Distance to travel

    Returns:
        (x + d*cos(angle), y + d*sin(angle)) as a (2,) array
    """
    p = as_point(point)
    x, y = _translate(p[0], p[1], float(angle), float(distance))
    return np.array([x, y])


# =============================================================================
# WARMUP
# =============================================================================

def warmup():
    """Warm up JIT compilation."""
    _ = _rotate(1.0, 0.0, 90.0, 0.0, 0.0)
    _ = _translate(0.0, 0.0, 45.0, 1.0)

    logger.info("JIT warmup complete for points module")


if __name__ == "__main__":
    warmup()
