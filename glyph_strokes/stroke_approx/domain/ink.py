"""Ink accounting for a glyph being approximated.

The field keeps two parallel flat grids indexed by ``x + width * y``:

    total: the glyph's grayscale ink, fixed at construction.
    remaining: ink not yet covered by committed strokes. Starts equal to
        ``total`` and only ever decreases.

For every index ``i`` and at all times ``0 <= remaining[i] <= total[i] <= 1``.
"""

from __future__ import annotations

from typing import Sequence, Tuple, Union

import numpy as np

from ..errors import InkValueError

InkLike = Union[np.ndarray, Sequence[float]]


class InkField:
    """Mutable remaining ink over an immutable original ink grid.

    Args:
        total: Glyph ink in [0, 1], either flat with ``width * height``
            entries or shaped ``(height, width)``.
        width: Grid width in pixels.
        height: Grid height in pixels.

    Raises:
        InkValueError: If the grid has the wrong size or holds values
            outside [0, 1] (NaN included).

    Example:
        >>> field = InkField([0, 1, 0, 0], width=2, height=2)
        >>> field.subtract(1, 0.25)
        0.25
        >>> field.loss()
        0.75
    """

    def __init__(self, total: InkLike, width: int, height: int):
        if width <= 0 or height <= 0:
            raise InkValueError(f"Grid must be non-empty, got {width}x{height}")

        grid = np.array(total, dtype=np.float64).reshape(-1)
        if grid.size != width * height:
            raise InkValueError(
                f"Expected {width * height} ink values for a {width}x{height} grid, "
                f"got {grid.size}"
            )
        if np.isnan(grid).any():
            raise InkValueError("Ink grid contains NaN")
        if grid.min() < 0.0 or grid.max() > 1.0:
            raise InkValueError(
                f"Ink values must lie in [0, 1], got range [{grid.min()}, {grid.max()}]"
            )

        self.width = width
        self.height = height
        self._total = grid
        self._total.setflags(write=False)
        self._remaining = grid.copy()

    @classmethod
    def from_array(cls, ink: np.ndarray) -> InkField:
        """Build a field from a ``(height, width)`` array."""
        ink = np.asarray(ink)
        if ink.ndim != 2:
            raise InkValueError(f"Expected a 2-D ink array, got {ink.ndim} dimensions")
        height, width = ink.shape
        return cls(ink, width, height)

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def total(self) -> np.ndarray:
        """Original ink (read-only view)."""
        return self._total

    @property
    def remaining(self) -> np.ndarray:
        """Remaining ink (read-only view; mutate through :meth:`subtract`)."""
        view = self._remaining.view()
        view.setflags(write=False)
        return view

    def coords_of(self, index: int) -> Tuple[int, int]:
        return index % self.width, index // self.width

    def subtract(self, index: int, amount: float) -> float:
        """Remove up to ``amount`` ink from pixel ``index``.

        The amount is clamped to the pixel's remaining ink so the field
        never goes negative.

        Returns:
            The ink actually removed.
        """
        removed = min(self._remaining[index], max(amount, 0.0))
        self._remaining[index] -= removed
        return float(removed)

    def loss(self) -> float:
        """Total residual ink; non-increasing as strokes are committed."""
        return float(self._remaining.sum())

    def remaining_grid(self) -> np.ndarray:
        """Copy of the remaining ink shaped ``(height, width)``."""
        return self._remaining.reshape(self.height, self.width).copy()

    def __repr__(self) -> str:
        return f"InkField({self.width}x{self.height}, loss={self.loss():.3f})"
