"""Exception hierarchy for the stroke approximation engine.

Overdrawing candidates are not errors; the cover evaluator reports them as
``REJECTED`` values. The exceptions here cover the fatal and the
resource-exhaustion cases only.
"""


class StrokeApproxError(Exception):
    """Base class for all stroke approximation errors."""


class GeometryError(StrokeApproxError):
    """Malformed stroke geometry.

    Raised when a coordinate or distance is NaN, or when a visited pixel lies
    implausibly far from the stroke being evaluated. The current evaluation
    is aborted and the error propagates to the caller.
    """


class EmptyQueueError(StrokeApproxError):
    """No seed pixels are left in the selection queue.

    Every pixel seeds at most one stroke, so a session can produce at most
    ``width * height`` strokes. Drivers treat this as a normal stop.
    """


class InkValueError(StrokeApproxError, ValueError):
    """Ink grid has the wrong size or values outside [0, 1]."""


class GlyphRenderError(StrokeApproxError):
    """A character could not be rendered into an ink grid."""
