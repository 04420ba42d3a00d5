"""Service layer for glyph approximation.

This module provides the high-level entry point that glues the Pillow glyph
renderer to an approximation session. It is the Python counterpart of a
"character approximator": given a character and a font it returns the
ordered strokes and the residual loss.

Each glyph gets its own session; sessions share nothing, so an alphabet is
approximated in parallel with one task per glyph and no coordination.

Example usage:
    Single glyph::

        from stroke_approx.api.services import GlyphApproximator

        approximator = GlyphApproximator(width=12, height=18, num_strokes=32)
        result = approximator.approximate('A')
        for line in result.strokes:
            print(line)

    Whole alphabet::

        results = approximator.approximate_alphabet('ABC', max_workers=3)
        for char, result in results.items():
            print(f"{char}: {len(result.strokes)} strokes, loss={result.loss:.3f}")
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from ..config import (
    ASCII_PRINTABLE,
    DEFAULT_HEIGHT,
    DEFAULT_NUM_STROKES,
    DEFAULT_STROKE_WIDTH,
    DEFAULT_WIDTH,
    LOSS_EPSILON,
)
from ..errors import GlyphRenderError, StrokeApproxError
from ..optimization.optimizer import ApproximationResult, ApproximationSession
from ..optimization.strategies import Neighborhood
from ..utils.rendering import render_glyph_ink

# Logger for service errors
_logger = logging.getLogger(__name__)


@dataclass
class GlyphApproximator:
    """Approximates characters of one font with straight strokes.

    All glyphs are rendered into the same ``width x height`` grid, so their
    normalized strokes share a frame and can be drawn at any size.

    Attributes:
        width: Glyph grid width in pixels (also the font size).
        height: Glyph grid height in pixels.
        num_strokes: Stroke budget per glyph.
        stroke_width: Stroke thickness in pixels.
        font_path: TTF/OTF font file, None for Pillow's bundled font.
        loss_threshold: Residual ink at which a glyph counts as covered.
        neighborhood: Move set of the hill climb.
        skip_empty: Drop strokes that remove no ink.

    Example:
        >>> approximator = GlyphApproximator(font_path='/fonts/DejaVuSerif.ttf')
        >>> result = approximator.approximate('x')
        >>> result.stop_reason
        <StopReason.LOSS_THRESHOLD: 'loss_threshold'>
    """
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    num_strokes: int = DEFAULT_NUM_STROKES
    stroke_width: float = DEFAULT_STROKE_WIDTH
    font_path: Optional[str] = None
    loss_threshold: float = LOSS_EPSILON
    neighborhood: Neighborhood = Neighborhood.FULL
    skip_empty: bool = True

    def __post_init__(self):
        # Fail before a batch starts rather than once per glyph
        if not self.stroke_width >= 1:
            raise ValueError(f"stroke_width must be at least 1, got {self.stroke_width}")

    def render(self, char: str) -> np.ndarray:
        """Render ``char`` into a ``(height, width)`` ink grid.

        Raises:
            GlyphRenderError: If the font cannot be loaded.
        """
        ink = render_glyph_ink(char, self.width, self.height, self.font_path)
        if ink is None:
            raise GlyphRenderError(f"Could not render {char!r} with font {self.font_path}")
        return ink

    def new_session(self, ink: np.ndarray) -> ApproximationSession:
        """Session for an ink grid using this approximator's settings."""
        return ApproximationSession(
            ink,
            self.width,
            self.height,
            stroke_width=self.stroke_width,
            neighborhood=self.neighborhood,
        )

    def approximate_ink(self, ink: np.ndarray) -> ApproximationResult:
        """Approximate an already rendered ink grid."""
        session = self.new_session(ink)
        return session.approximate(
            self.num_strokes,
            loss_threshold=self.loss_threshold,
            skip_empty=self.skip_empty,
        )

    def approximate(self, char: str) -> ApproximationResult:
        """Render and approximate a single character."""
        result = self.approximate_ink(self.render(char))
        _logger.debug("approximate: char=%r -> %d strokes, loss=%.3f (%s)",
                      char, len(result.strokes), result.loss, result.stop_reason.value)
        return result

    def approximate_alphabet(
        self,
        chars: str = ASCII_PRINTABLE,
        max_workers: Optional[int] = None,
        parallel: bool = True,
    ) -> Dict[str, ApproximationResult]:
        """Approximate every character of ``chars``.

        Glyphs that fail are logged and left out of the result; one bad
        glyph never aborts the batch.

        Args:
            chars: Characters to approximate. Duplicates are processed once.
            max_workers: Worker processes, None for the executor default.
            parallel: Run in worker processes; False runs in this process.

        Returns:
            Mapping from character to its result, in ``chars`` order.
        """
        unique = list(dict.fromkeys(chars))
        results: Dict[str, ApproximationResult] = {}

        if not parallel:
            for char in unique:
                try:
                    results[char] = self.approximate(char)
                except StrokeApproxError as e:
                    _logger.warning("Failed to approximate %r: %s", char, e)
            return results

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            futures = {executor.submit(self.approximate, char): char for char in unique}
            for future in as_completed(futures):
                char = futures[future]
                try:
                    results[char] = future.result()
                except StrokeApproxError as e:
                    _logger.warning("Failed to approximate %r: %s", char, e)

        return {char: results[char] for char in unique if char in results}
