"""API layer for glyph approximation.

This module provides the service classes external code uses to approximate
characters without wiring sessions by hand.

The module exports the following classes:
    GlyphApproximator: Renders characters and approximates them with strokes.

Example usage:
    Approximating a character::

        from stroke_approx.api import GlyphApproximator

        approximator = GlyphApproximator(num_strokes=16)
        result = approximator.approximate('A')
        print(f"{len(result.strokes)} strokes, loss={result.loss:.3f}")
"""

from .services import GlyphApproximator

__all__ = ['GlyphApproximator']
