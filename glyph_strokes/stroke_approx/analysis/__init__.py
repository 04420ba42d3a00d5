"""Stroke footprint analysis.

This module provides the pieces that relate a candidate stroke to the
glyph's pixels: which pixels it may touch and how much ink it deposits on
each of them.

The module exports the following classes:
    StrokeRasterizer: Enumerates candidate pixels under a thick line.
    CoverEvaluator: Scores a stroke against an ink field.

Example usage:
    Scoring a candidate stroke::

        from stroke_approx.analysis import CoverEvaluator, StrokeRasterizer

        rasterizer = StrokeRasterizer(field.width, field.height)
        evaluator = CoverEvaluator(field, rasterizer)
        cover = evaluator.evaluate(stroke)
        if cover.is_legal:
            print(cover.new_cover, cover.total_cover)
"""

from .coverage import CoverEvaluator
from .rasterizer import StrokeRasterizer

__all__ = ['StrokeRasterizer', 'CoverEvaluator']
