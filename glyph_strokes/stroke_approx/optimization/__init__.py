"""Stroke optimization.

This module provides the seed queue, the local search that grows a single
stroke, and the session that commits strokes one after another.

The module exports the following classes:

Seed selection:
    PixelQueue: Max-priority queue of unused pixels keyed by remaining ink.

Strategy classes:
    Neighborhood: Endpoint move sets for the hill climb.
    OptimizationStrategy: Protocol defining the interface for strategies.
    OptimizationResult: Data class containing one climb's result.
    HillClimbStrategy: Steepest-ascent climb over unit endpoint moves.

Orchestrator:
    ApproximationSession: Seeds, grows and commits strokes for one glyph.
    ApproximationResult: Outcome of a driven session.
    StrokeRecord: Bookkeeping for one committed stroke.
    StopReason: Why a driven session stopped.

Example usage:
    Approximating an ink array::

        from stroke_approx.optimization import ApproximationSession

        session = ApproximationSession.from_array(ink, stroke_width=1)
        result = session.approximate(max_strokes=32)

        print(f"Loss: {result.loss:.3f}")
        for line in result.strokes:
            print(line)
"""

from .optimizer import (
    ApproximationResult,
    ApproximationSession,
    StopReason,
    StrokeRecord,
)
from .queue import PixelQueue
from .strategies import (
    HillClimbStrategy,
    Neighborhood,
    OptimizationResult,
    OptimizationStrategy,
)

__all__ = [
    'PixelQueue',
    'Neighborhood',
    'OptimizationStrategy',
    'OptimizationResult',
    'HillClimbStrategy',
    'ApproximationSession',
    'ApproximationResult',
    'StrokeRecord',
    'StopReason',
]
