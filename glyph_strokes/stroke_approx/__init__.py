"""Glyph Stroke Approximation Package.

Approximates a rasterized glyph, a grid of per-pixel ink intensities, with a
small ordered set of straight strokes that reconstruct the glyph when drawn
back.

Architecture Overview:
    The engine grows and commits one stroke at a time:

    - An ink field tracks how much of each pixel's ink is still uncovered.
    - A seed queue picks the unused pixel with the most remaining ink.
    - A hill climb grows a zero-length stroke at that pixel one unit move at
      a time while its coverage score improves.
    - The final stroke is committed: its ink is subtracted from the field.

The package is organized into the following modules:
    domain: Value objects (Point, LineStroke, Cover) and the InkField.
    analysis: Stroke rasterization and coverage evaluation.
    optimization: Seed queue, hill-climb strategy and approximation session.
    utils: Geometry helpers and Pillow-based glyph/stroke rendering.
    api: GlyphApproximator service for characters and whole alphabets.
    config: Shared constants and logging setup.
    errors: Exception hierarchy.

Example usage:
    Approximating an ink grid::

        from stroke_approx import ApproximationSession

        session = ApproximationSession(grayscale, width=12, height=18)
        session.create_strokes(32)
        print(f"Loss: {session.loss():.3f}")

    Approximating characters::

        from stroke_approx import GlyphApproximator

        approximator = GlyphApproximator(font_path='/fonts/serif.ttf')
        result = approximator.approximate('A')
        for x0, y0, x1, y1 in result.strokes:
            print(x0, y0, x1, y1)

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .analysis import CoverEvaluator, StrokeRasterizer
from .api import GlyphApproximator
from .domain import REJECTED, Cover, InkField, LineStroke, Point, Rejected
from .errors import (
    EmptyQueueError,
    GeometryError,
    GlyphRenderError,
    InkValueError,
    StrokeApproxError,
)
from .optimization import (
    ApproximationResult,
    ApproximationSession,
    HillClimbStrategy,
    Neighborhood,
    PixelQueue,
    StopReason,
    StrokeRecord,
)

__all__ = [
    # Domain objects
    'Point', 'LineStroke', 'Cover', 'Rejected', 'REJECTED', 'InkField',
    # Analysis
    'StrokeRasterizer', 'CoverEvaluator',
    # Optimization
    'PixelQueue', 'Neighborhood', 'HillClimbStrategy',
    'ApproximationSession', 'ApproximationResult', 'StrokeRecord', 'StopReason',
    # Services
    'GlyphApproximator',
    # Errors
    'StrokeApproxError', 'GeometryError', 'EmptyQueueError', 'InkValueError',
    'GlyphRenderError',
]

__version__ = '1.0.0'
