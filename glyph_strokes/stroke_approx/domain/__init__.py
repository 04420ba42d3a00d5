"""Domain objects for stroke approximation.

This module provides the value objects and state shared by the rasterizer,
the cover evaluator and the optimizer.

The module exports the following classes:

Geometry classes:
    Point: Immutable 2D point with vector operations.
    LineStroke: Straight stroke between two endpoints in pixel coordinates.

Coverage classes:
    Cover: Legal coverage score of a candidate stroke.
    Rejected: Marker type for overdrawing candidates (``REJECTED``).

Ink classes:
    InkField: Remaining and original ink grids of one glyph.

Example usage:
    Working with strokes and ink::

        from stroke_approx.domain import InkField, LineStroke

        field = InkField(grayscale, width=12, height=18)
        seed = LineStroke.at_pixel_center(*field.coords_of(40))
        print(seed.normalized(field.width, field.height))
"""

from .cover import REJECTED, Cover, CoverResult, Rejected
from .geometry import LineStroke, Point
from .ink import InkField

__all__ = [
    'Point', 'LineStroke',
    'Cover', 'Rejected', 'REJECTED', 'CoverResult',
    'InkField',
]
