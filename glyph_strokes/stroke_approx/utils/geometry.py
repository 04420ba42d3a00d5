"""Geometric utility functions.

This module provides the plain-function geometry used by the cover
evaluator and the renderers. These functions supplement the methods on the
domain objects (Point, LineStroke) with additional operations.

The module provides the following functions:
    point_to_segment_distance: Distance from a point to a line segment.
    denormalize_point: Map centred output coordinates back to pixels.
    is_finite_point: Check that both coordinates are finite.

Example usage:
    Segment distance::

        from stroke_approx.domain import Point
        from stroke_approx.utils.geometry import point_to_segment_distance

        d = point_to_segment_distance(Point(1, 1), Point(0, 0), Point(2, 0))
        # d == 1.0
"""

from __future__ import annotations

import math

from ..domain.geometry import Point


def point_to_segment_distance(p: Point, a: Point, b: Point) -> float:
    """Minimum distance between point ``p`` and the segment ``ab``.

    The projection of ``p`` onto the line through ``a`` and ``b`` is clamped
    to the segment, so points beyond either end measure to that endpoint
    rather than to the infinite line.

    Args:
        p: Query point.
        a: Segment start.
        b: Segment end. May equal ``a`` (degenerate segment).

    Returns:
        Non-negative distance. NaN inputs propagate to a NaN result.

    Example:
        >>> point_to_segment_distance(Point(3, 4), Point(0, 0), Point(0, 0))
        5.0
        >>> point_to_segment_distance(Point(5, 1), Point(0, 0), Point(2, 0))
        3.1622776601683795
    """
    seg = b - a
    l2 = seg.dot(seg)
    if l2 == 0.0:
        return p.distance_to(a)
    # Parameterize the line as a + t (b - a) and clamp t to [0, 1]
    t = max(0.0, min(1.0, (p - a).dot(seg) / l2))
    projection = a + seg * t
    return p.distance_to(projection)


def denormalize_point(x: float, y: float, width: int, height: int) -> tuple[float, float]:
    """Map ``[-0.5, 0.5)`` centred coordinates back to pixel coordinates."""
    return (x + .5) * width, (y + .5) * height


def is_finite_point(p: Point) -> bool:
    return math.isfinite(p.x) and math.isfinite(p.y)
