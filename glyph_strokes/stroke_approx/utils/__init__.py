"""Utility functions for stroke approximation.

This module provides utility functions for geometric operations and glyph
rendering. These utilities are used throughout the package and are also
exported for use by external code.

The module exports the following functions:

Geometry utilities:
    point_to_segment_distance: Distance from a point to a line segment.
    denormalize_point: Map centred output coordinates back to pixels.
    is_finite_point: Check that both coordinates are finite.

Rendering utilities:
    render_glyph_ink: Render a character as an ink grid.
    render_strokes: Draw normalized strokes into an ink grid.
    ink_to_image: Grayscale preview of an ink grid.
    make_preview_sheet: Tile ink grids into one preview image.

Example usage:
    Rendering glyphs::

        from stroke_approx.utils import render_glyph_ink, ink_to_image

        ink = render_glyph_ink('A', width=12, height=18)
        if ink is not None:
            ink_to_image(ink).save('A.png')
"""

from .geometry import denormalize_point, is_finite_point, point_to_segment_distance
from .rendering import ink_to_image, make_preview_sheet, render_glyph_ink, render_strokes

__all__ = [
    'point_to_segment_distance', 'denormalize_point', 'is_finite_point',
    'render_glyph_ink', 'render_strokes', 'ink_to_image', 'make_preview_sheet',
]
