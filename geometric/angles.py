"""
Angle Utilities - Unit conversion and reflection.

Angles are in degrees everywhere in the public API unless a name says radians.
"""

import math
from numba import njit

from .config import CONFIG
from .log import get_logger

logger = get_logger(__name__)


@njit(cache=CONFIG.jit.cache)
def degrees_to_radians(angle: float) -> float:
    """Convert degrees to radians."""
    return angle / 180.0 * math.pi


@njit(cache=CONFIG.jit.cache)
def radians_to_degrees(angle: float) -> float:
    """Convert radians to degrees."""
    return angle * 180.0 / math.pi


@njit(cache=CONFIG.jit.cache)
def angle_reflect(incidence_angle: float, surface_angle: float) -> float:
    """
    Angle of reflection for a ray hitting a surface.

    The result is 2 * surface - incidence wrapped into [0, 360) by adding or
    subtracting 360 once. Inputs far outside [0, 360) are not fully
    normalized.

    Args:
        incidence_angle: Direction of the incoming ray in degrees
        surface_angle: Direction of the surface in degrees

    Returns:
        Direction of the reflected ray in degrees
    """
    a = surface_angle * 2.0 - incidence_angle
    if a >= 360.0:
        return a - 360.0
    if a < 0.0:
        return a + 360.0
    return a


# =============================================================================
# WARMUP
# =============================================================================

def warmup():
    """Warm up JIT compilation."""
    _ = degrees_to_radians(90.0)
    _ = radians_to_degrees(math.pi)
    _ = angle_reflect(45.0, 90.0)

    logger.info("JIT warmup complete for angles module")


if __name__ == "__main__":
    warmup()
