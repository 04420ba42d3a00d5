"""Approximation session orchestrating seed selection, climbing and commit.

This module provides the ApproximationSession class which owns one glyph's
ink field and seed queue and turns them into an ordered list of strokes.
Each stroke is produced by:

    1. Resynchronizing the seed queue with the current remaining ink.
    2. Selecting the unused pixel with the most remaining ink.
    3. Growing a zero-length stroke at that pixel's centre with the
       hill-climb strategy.
    4. Committing it: the stroke's per-pixel weights are subtracted from the
       remaining ink and the normalized stroke is appended to the output.

The session never decides by itself when to stop; ``approximate`` is the
driver that applies a stroke budget, a loss threshold and a time budget.

Example usage:
    Fixed number of strokes::

        from stroke_approx.optimization.optimizer import ApproximationSession

        session = ApproximationSession.from_array(ink)
        session.create_strokes(32)
        print(session.strokes, session.loss())

    Driven until the glyph is covered::

        result = session.approximate(max_strokes=32)
        print(f"{len(result.strokes)} strokes, stop={result.stop_reason.value}")
"""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from ..analysis.coverage import CoverEvaluator
from ..analysis.rasterizer import StrokeRasterizer
from ..config import DEFAULT_STROKE_WIDTH, LOSS_EPSILON
from ..domain.cover import CoverResult
from ..domain.geometry import LineStroke
from ..domain.ink import InkField, InkLike
from ..errors import EmptyQueueError
from .queue import PixelQueue
from .strategies import HillClimbStrategy, Neighborhood

logger = logging.getLogger(__name__)

NormalizedLine = tuple[float, float, float, float]


class StopReason(enum.Enum):
    """Why :meth:`ApproximationSession.approximate` returned."""
    MAX_STROKES = 'max_strokes'
    LOSS_THRESHOLD = 'loss_threshold'
    EXHAUSTED = 'exhausted'
    TIME_BUDGET = 'time_budget'


@dataclass(frozen=True)
class StrokeRecord:
    """One committed stroke and its bookkeeping.

    Attributes:
        stroke: Final stroke in pixel coordinates.
        normalized: The same stroke in ``[-0.5, 0.5)`` centred coordinates.
        seed_index: Pixel index that seeded the stroke.
        gain: Ink actually removed from the field at commit. Equals
            ``cover.new_cover`` for legal strokes; for a ``REJECTED`` seed
            (e.g. on a blank glyph) it is the new cover the commit achieved,
            0.0 when the seed pixel had no ink left.
        cover: Cover of the stroke before commit (may be ``REJECTED``).
        iterations: Accepted hill-climb moves.
    """
    stroke: LineStroke
    normalized: NormalizedLine
    seed_index: int
    gain: float
    cover: CoverResult
    iterations: int

    @property
    def is_empty(self) -> bool:
        """True when committing the stroke removed no ink."""
        return self.gain <= 0.0


@dataclass
class ApproximationResult:
    """Outcome of driving a session to a stop.

    Attributes:
        strokes: Normalized strokes in commit order.
        loss: Residual ink when the driver stopped.
        initial_loss: Ink of the glyph before any stroke.
        stop_reason: Which stopping rule fired.
        seeds_used: Seed pixels consumed, including skipped empty strokes.
        remaining: Remaining ink shaped ``(height, width)`` at the stop.
    """
    strokes: list[NormalizedLine]
    loss: float
    initial_loss: float
    stop_reason: StopReason
    seeds_used: int = 0
    remaining: np.ndarray | None = None

    @property
    def coverage(self) -> float:
        """Fraction of the glyph's ink covered, 1.0 for a blank glyph."""
        if self.initial_loss <= 0.0:
            return 1.0
        return 1.0 - self.loss / self.initial_loss


class ApproximationSession:
    """Approximates one glyph with straight strokes, one stroke at a time.

    Args:
        ink: Glyph ink in [0, 1], flat ``width * height`` or ``(height, width)``.
        width: Grid width in pixels.
        height: Grid height in pixels.
        stroke_width: Stroke thickness shared by all strokes of the session.
        neighborhood: Move set of the hill climb.
        max_iterations: Cap on accepted climb moves per stroke, None for the
            grid-derived default.

    Attributes:
        strokes: Committed strokes in normalized coordinates, append-only.
        records: StrokeRecord for each entry of ``strokes``.
    """

    def __init__(
        self,
        ink: InkLike,
        width: int,
        height: int,
        stroke_width: float = DEFAULT_STROKE_WIDTH,
        neighborhood: Neighborhood = Neighborhood.FULL,
        max_iterations: int | None = None,
    ):
        self.width = width
        self.height = height
        self.stroke_width = stroke_width
        self.ink = InkField(ink, width, height)
        self.queue = PixelQueue(self.ink)
        self.rasterizer = StrokeRasterizer(width, height, stroke_width)
        self.evaluator = CoverEvaluator(self.ink, self.rasterizer)
        self.strategy = HillClimbStrategy(
            self.evaluator,
            neighborhood=neighborhood,
            max_iterations=max_iterations,
        )
        self.strokes: list[NormalizedLine] = []
        self.records: list[StrokeRecord] = []
        self.seeds_used = 0

    @classmethod
    def from_array(cls, ink: np.ndarray, **kwargs) -> ApproximationSession:
        """Create a session from a ``(height, width)`` ink array."""
        ink = np.asarray(ink)
        height, width = ink.shape
        return cls(ink, width, height, **kwargs)

    def loss(self) -> float:
        """Residual ink; the external convergence signal."""
        return self.ink.loss()

    def select_seed(self) -> int:
        """Pick and consume the unused pixel with the most remaining ink.

        Raises:
            EmptyQueueError: If every pixel has already seeded a stroke.
        """
        self.queue.resynchronize()
        idx = self.queue.select_and_remove()
        self.seeds_used += 1
        return idx

    def commit(self, stroke: LineStroke) -> float:
        """Subtract the stroke's ink from the field.

        Returns:
            Total ink removed.
        """
        removed = 0.0
        for idx, weight in self.evaluator.footprint(stroke):
            removed += self.ink.subtract(idx, weight)
        return removed

    def _grow_and_commit(self) -> StrokeRecord:
        seed_index = self.select_seed()
        seed = LineStroke.at_pixel_center(*self.ink.coords_of(seed_index))
        result = self.strategy.optimize(seed)
        gain = self.commit(result.stroke)
        return StrokeRecord(
            stroke=result.stroke,
            normalized=result.stroke.normalized(self.width, self.height),
            seed_index=seed_index,
            gain=gain,
            cover=result.cover,
            iterations=result.iterations,
        )

    def _append(self, record: StrokeRecord) -> None:
        self.strokes.append(record.normalized)
        self.records.append(record)
        logger.debug("stroke %d: seed=%d %s gain=%.3f iterations=%d loss=%.3f",
                     len(self.strokes), record.seed_index, record.stroke.to_tuple(),
                     record.gain, record.iterations, self.loss())

    def add_stroke(self) -> StrokeRecord:
        """Select a seed, grow it, commit it and append it to ``strokes``.

        Strokes that remove no ink are still appended; see
        :meth:`approximate` for a driver that skips them.

        Raises:
            EmptyQueueError: If every pixel has already seeded a stroke.
        """
        record = self._grow_and_commit()
        self._append(record)
        return record

    def create_strokes(self, n: int) -> list[StrokeRecord]:
        """Call :meth:`add_stroke` ``n`` times."""
        return [self.add_stroke() for _ in range(n)]

    def approximate(
        self,
        max_strokes: int,
        loss_threshold: float = LOSS_EPSILON,
        time_budget: float | None = None,
        skip_empty: bool = True,
        progress_callback: Callable[[StrokeRecord, float], None] | None = None,
    ) -> ApproximationResult:
        """Add strokes until a stopping rule fires.

        Stops when ``max_strokes`` strokes have been appended by this call,
        when the loss drops below ``loss_threshold``, when no seed pixels
        are left, or when ``time_budget`` seconds have elapsed.

        Args:
            max_strokes: Stroke budget for this call.
            loss_threshold: Residual ink regarded as fully covered.
            time_budget: Optional wall-clock limit in seconds.
            skip_empty: Drop strokes that remove no ink instead of appending
                them. Their seed pixel is still consumed and they do not
                count against ``max_strokes``.
            progress_callback: Called with ``(record, loss)`` after every
                appended stroke.

        Returns:
            ApproximationResult describing the stop.
        """
        start_time = time.time()
        initial_loss = float(self.ink.total.sum())
        appended = 0
        reason = StopReason.MAX_STROKES

        while appended < max_strokes:
            if self.loss() < loss_threshold:
                reason = StopReason.LOSS_THRESHOLD
                break
            if time_budget is not None and time.time() - start_time > time_budget:
                reason = StopReason.TIME_BUDGET
                break
            try:
                record = self._grow_and_commit()
            except EmptyQueueError:
                reason = StopReason.EXHAUSTED
                break

            if skip_empty and record.is_empty:
                logger.debug("Skipping empty stroke seeded at %d", record.seed_index)
                continue

            self._append(record)
            appended += 1
            if progress_callback:
                progress_callback(record, self.loss())
        else:
            if self.loss() < loss_threshold:
                reason = StopReason.LOSS_THRESHOLD

        logger.debug("Approximation stopped (%s): %d strokes, loss %.3f of %.3f",
                     reason.value, len(self.strokes), self.loss(), initial_loss)
        return ApproximationResult(
            strokes=list(self.strokes),
            loss=self.loss(),
            initial_loss=initial_loss,
            stop_reason=reason,
            seeds_used=self.seeds_used,
            remaining=self.ink.remaining_grid(),
        )
