"""Coverage scoring of candidate strokes against an ink field.

The CoverEvaluator weighs every pixel the rasterizer reports by its distance
to the stroke and compares the result with the glyph's remaining and
original ink. Overdrawing candidates come back as ``REJECTED``; the
evaluator never mutates the ink field.

Per-pixel weight:
    ``w(p) = max(stroke_width - dist(p_center, segment) / COVER_FALLOFF, 0)``

Scores:
    ``new_cover   += min(remaining[p], w(p))``
    ``total_cover += min(total[p], w(p))``

Legality:
    A stroke is rejected as soon as one pixel has
    ``w(p) - total[p] > OVERDRAW_THRESHOLD``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..config import COVER_FALLOFF, MAX_DISTANCE_FACTOR, OVERDRAW_THRESHOLD
from ..domain.cover import REJECTED, Cover, CoverResult
from ..domain.geometry import LineStroke, Point
from ..domain.ink import InkField
from ..errors import GeometryError
from ..utils.geometry import point_to_segment_distance
from .rasterizer import StrokeRasterizer


@dataclass
class CoverEvaluator:
    """Scores strokes by how much glyph ink they would cover.

    Attributes:
        ink: Ink field the strokes are measured against (read only here).
        rasterizer: Rasterizer for the same grid.
        overdraw_threshold: Excess ink tolerated on a single pixel.
    """
    ink: InkField
    rasterizer: StrokeRasterizer
    overdraw_threshold: float = OVERDRAW_THRESHOLD

    @property
    def stroke_width(self) -> float:
        return self.rasterizer.stroke_width

    def weight(self, x: int, y: int, stroke: LineStroke) -> float:
        """Ink a stroke deposits on pixel ``(x, y)``.

        Raises:
            GeometryError: If the distance is NaN, or the pixel is farther
                than ``MAX_DISTANCE_FACTOR`` stroke widths from the stroke.
        """
        # Pixels have integer coordinates; measure from the centre
        center = Point(x + .5, y + .5)
        dist = point_to_segment_distance(center, stroke.start, stroke.end)
        if math.isnan(dist):
            raise GeometryError(f"Computed NaN distance from pixel ({x}, {y}) to {stroke}")
        if dist > MAX_DISTANCE_FACTOR * self.stroke_width:
            raise GeometryError(
                f"Pixel ({x}, {y}) is {dist:.3f} units away from {stroke}"
            )
        return max(self.stroke_width - dist / COVER_FALLOFF, 0.0)

    def footprint(self, stroke: LineStroke) -> list[tuple[int, float]]:
        """All ``(index, weight)`` pairs of the stroke's candidate pixels."""
        return [
            (idx, self.weight(x, y, stroke))
            for x, y, idx in self.rasterizer.pixels(stroke)
        ]

    def evaluate(self, stroke: LineStroke) -> CoverResult:
        """Compute the Cover of ``stroke`` or ``REJECTED`` if it overdraws.

        Args:
            stroke: Candidate stroke in pixel coordinates.

        Returns:
            ``Cover(new_cover, total_cover)`` for a legal stroke, otherwise
            ``REJECTED``.
        """
        remaining = self.ink.remaining
        total = self.ink.total
        new_cover = 0.0
        total_cover = 0.0

        for x, y, idx in self.rasterizer.pixels(stroke):
            w = self.weight(x, y, stroke)
            if w - total[idx] > self.overdraw_threshold:
                return REJECTED
            new_cover += min(remaining[idx], w)
            total_cover += min(total[idx], w)

        return Cover(float(new_cover), float(total_cover))
