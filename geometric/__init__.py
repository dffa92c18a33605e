"""
Geometric - Planar geometry primitives with Numba-accelerated kernels.

Line and point measurements, polygon metrics, rotate/translate/scale
transforms, intersection and containment predicates, and a convex hull.
"""

import logging

from .angles import (
    angle_reflect,
    degrees_to_radians,
    radians_to_degrees,
)

from .lines import (
    line_angle,
    line_length,
    line_midpoint,
)

from .points import (
    point_rotate,
    point_translate,
)

from .orientation import (
    cross,
    polygon_signed_area,
)

from .polygons import (
    polygon_area,
    polygon_bounds,
    polygon_centroid,
    polygon_length,
    polygon_mean,
    polygon_rotate,
    polygon_scale,
    polygon_translate,
)

from .relationships import (
    bounds_overlap,
    line_intersects_line,
    line_intersects_polygon,
    point_in_polygon,
    point_left_of_line,
    point_on_line,
    point_right_of_line,
    polygon_in_polygon,
    polygon_intersects_polygon,
)

from .hull import polygon_hull

from .errors import GeometryError, GeometryValidationError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.1.0"

__all__ = [
    'angle_reflect',
    'degrees_to_radians',
    'radians_to_degrees',
    'line_angle',
    'line_length',
    'line_midpoint',
    'point_rotate',
    'point_translate',
    'cross',
    'polygon_signed_area',
    'polygon_area',
    'polygon_bounds',
    'polygon_centroid',
    'polygon_length',
    'polygon_mean',
    'polygon_rotate',
    'polygon_scale',
    'polygon_translate',
    'bounds_overlap',
    'line_intersects_line',
    'line_intersects_polygon',
    'point_in_polygon',
    'point_left_of_line',
    'point_on_line',
    'point_right_of_line',
    'polygon_in_polygon',
    'polygon_intersects_polygon',
    'polygon_hull',
    'GeometryError',
    'GeometryValidationError',
    'warmup',
]


def warmup():
    """Warm up JIT compilation for all modules."""
    from . import angles, hull, lines, orientation, points, polygons, relationships

    for module in (angles, lines, points, orientation, polygons, relationships, hull):
        module.warmup()

    logging.getLogger(__name__).info("JIT warmup complete")
