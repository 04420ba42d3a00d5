"""Local search strategies for growing a single stroke.

This module provides the hill-climbing optimizer that turns a zero-length
seed stroke into a locally optimal line. The climb is steepest ascent with a
fixed unit step: every iteration evaluates all single-endpoint moves of one
pixel and keeps the best strictly improving candidate.

The module provides the following classes:
    Neighborhood: Which endpoint moves a climb considers.
    OptimizationResult: Data class for the outcome of a climb.
    OptimizationStrategy: Protocol defining the strategy interface.
    HillClimbStrategy: Steepest-ascent climb over endpoint moves.

Example usage:
    Growing a stroke from a seed pixel::

        from stroke_approx.optimization.strategies import HillClimbStrategy

        strategy = HillClimbStrategy(evaluator)
        result = strategy.optimize(LineStroke.at_pixel_center(x, y))

        print(f"Cover: {result.cover}")
        print(f"Converged after {result.iterations} iterations")
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Protocol

from ..analysis.coverage import CoverEvaluator
from ..domain.cover import CoverResult
from ..domain.geometry import LineStroke

logger = logging.getLogger(__name__)


class Neighborhood(enum.Enum):
    """Set of unit moves tried for each endpoint.

    FULL:
        All eight compass directions, giving 16 candidates per iteration.
    DOWNWARD:
        Only the three moves with ``dy = +1``, giving 6 candidates. This
        reproduces the narrower search of earlier releases, which grows
        strokes in one vertical direction only.
    """
    FULL = 'full'
    DOWNWARD = 'downward'

    @property
    def directions(self) -> tuple[tuple[int, int], ...]:
        if self is Neighborhood.DOWNWARD:
            dys = (1,)
        else:
            dys = (-1, 0, 1)
        return tuple(
            (dx, dy)
            for dx in (-1, 0, 1)
            for dy in dys
            if (dx, dy) != (0, 0)
        )

    def candidates(self, stroke: LineStroke) -> list[LineStroke]:
        """Candidate strokes in evaluation order.

        For each direction the start point is moved first, then the end
        point; the other endpoint stays fixed.
        """
        moves = []
        for dx, dy in self.directions:
            moves.append(stroke.moved(0, dx, dy))
            moves.append(stroke.moved(1, dx, dy))
        return moves


@dataclass
class OptimizationResult:
    """Result of growing one stroke.

    Attributes:
        stroke: Final stroke in pixel coordinates.
        cover: Cover of the final stroke (may be ``REJECTED`` when even the
            seed overdraws and no legal move exists).
        iterations: Number of accepted moves.
        converged: False if the climb was cut off by ``max_iterations``.
    """
    stroke: LineStroke
    cover: CoverResult
    iterations: int = 0
    converged: bool = True


class OptimizationStrategy(Protocol):
    """Protocol for stroke growing strategies.

    Strategies take a seed stroke and return the stroke they converged to
    together with its cover. They must not mutate the ink field.
    """

    def optimize(self, seed: LineStroke) -> OptimizationResult:
        ...


@dataclass
class HillClimbStrategy:
    """Steepest-ascent hill climb over single-endpoint unit moves.

    Each iteration evaluates the current stroke, then every candidate of
    the neighborhood. The best candidate that strictly beats the current
    cover replaces the stroke; ties go to the candidate evaluated first.
    The climb stops at a local optimum, or after ``max_iterations``
    accepted moves.

    Attributes:
        evaluator: Cover evaluator bound to the session's ink field.
        neighborhood: Move set, FULL by default.
        max_iterations: Cap on accepted moves. None derives
            ``2 * (width + height)`` from the grid, enough for a stroke to
            cross the whole glyph from either end.

    Example:
        >>> strategy = HillClimbStrategy(evaluator, max_iterations=50)
        >>> result = strategy.optimize(seed)
    """
    evaluator: CoverEvaluator
    neighborhood: Neighborhood = Neighborhood.FULL
    max_iterations: int | None = None

    def _iteration_cap(self) -> int:
        if self.max_iterations is not None:
            return self.max_iterations
        ink = self.evaluator.ink
        return 2 * (ink.width + ink.height)

    def step(self, stroke: LineStroke, current: CoverResult) -> tuple[LineStroke, CoverResult] | None:
        """Best strictly improving move from ``stroke``, or None."""
        best_stroke = stroke
        best_cover = current
        for candidate in self.neighborhood.candidates(stroke):
            cover = self.evaluator.evaluate(candidate)
            if cover > best_cover:
                best_cover = cover
                best_stroke = candidate

        if best_cover > current:
            return best_stroke, best_cover
        return None

    def optimize(self, seed: LineStroke) -> OptimizationResult:
        """Grow ``seed`` until no move improves its cover.

        Args:
            seed: Starting stroke, usually zero length at a pixel centre.

        Returns:
            OptimizationResult with the locally optimal stroke.
        """
        cap = self._iteration_cap()
        stroke = seed
        current = self.evaluator.evaluate(stroke)
        iterations = 0

        while iterations < cap:
            move = self.step(stroke, current)
            if move is None:
                return OptimizationResult(stroke, current, iterations, converged=True)
            stroke, current = move
            iterations += 1

        logger.warning("Hill climb stopped after %d iterations at %s (cover=%s)",
                       iterations, stroke, current)
        return OptimizationResult(stroke, current, iterations, converged=False)
