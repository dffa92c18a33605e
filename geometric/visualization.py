"""
Visualization - Plotting polygons, hulls and bounds.

Debugging aid; requires matplotlib (install the `plot` extra). Nothing is
written to disk, every function draws on (and returns) a matplotlib axes.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon as MplPolygon
from typing import Tuple

from .hull import polygon_hull
from .polygons import polygon_bounds
from .values import PolygonLike, as_points, as_polygon


def _get_axes(ax, figsize: Tuple[int, int]):
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=figsize)
    return ax


def plot_polygon(
    vertices: PolygonLike,
    ax=None,
    color='tab:green',
    alpha: float = 0.5,
    edgecolor='black',
    figsize: Tuple[int, int] = (6, 6)
):
    """
    Plot a polygon as a filled closed patch.

    Args:
        vertices: (N, 2) ring
        ax: Matplotlib axes (creates new if None)
        color: Fill color
        alpha: Transparency
        edgecolor: Outline color
        figsize: Figure size if creating new figure

    Returns:
        ax: Matplotlib axes
    """
    verts = as_polygon(vertices)
    ax = _get_axes(ax, figsize)

    ax.add_patch(MplPolygon(verts, closed=True, facecolor=color, edgecolor=edgecolor, alpha=alpha))
    ax.autoscale_view()
    ax.set_aspect('equal')
    ax.grid(True, alpha=0.3)

    return ax


def plot_bounds(vertices: PolygonLike, ax=None, figsize: Tuple[int, int] = (6, 6)):
    """Draw the axis-aligned bounds of a polygon as a dashed rectangle."""
    (min_x, min_y), (max_x, max_y) = polygon_bounds(vertices)
    ax = _get_axes(ax, figsize)

    rect = plt.Rectangle(
        (min_x, min_y),
        max_x - min_x, max_y - min_y,
        fill=False,
        edgecolor='blue',
        linestyle='--',
        linewidth=1.5
    )
    ax.add_patch(rect)
    ax.autoscale_view()

    return ax


def plot_hull(points: PolygonLike, ax=None, figsize: Tuple[int, int] = (6, 6)):
    """
    Scatter a point set and outline its convex hull.

    The outline is omitted when the hull is not computable.
    """
    pts = as_points(points)
    ax = _get_axes(ax, figsize)

    if len(pts):
        ax.scatter(pts[:, 0], pts[:, 1], s=12, color='black', zorder=3)

    hull = polygon_hull(pts)
    if hull is not None:
        closed = np.vstack([hull, hull[0]])
        ax.plot(closed[:, 0], closed[:, 1], color='red', linewidth=1.5)

    ax.set_aspect('equal')
    ax.grid(True, alpha=0.3)

    return ax
