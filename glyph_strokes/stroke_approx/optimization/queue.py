"""Seed pixel selection ordered by remaining ink.

The queue's ordering key is the ink field's ``remaining`` grid, which
changes every time a stroke is committed. Instead of a comparator that
silently reads mutable state, the owner calls :meth:`PixelQueue.resynchronize`
before each :meth:`PixelQueue.select_and_remove` to restore the ordering
from the current key values.

Ordering:
    Highest remaining ink first; equal ink is broken by the lowest pixel
    index so runs are reproducible.

Resynchronizing is a full re-sort, O(n log n) per stroke. Glyph grids are
small; callers at larger scales would want a heap with mutable keys.
"""

from __future__ import annotations

import numpy as np

from ..domain.ink import InkField
from ..errors import EmptyQueueError


class PixelQueue:
    """Max-priority queue of not-yet-selected pixel indices.

    Each index can be selected once; the queue therefore bounds a session
    to ``width * height`` strokes.

    Args:
        ink: Ink field whose ``remaining`` values order the queue.

    Example:
        >>> queue = PixelQueue(InkField([0.2, 0.9, 0.9, 0.0], 2, 2))
        >>> queue.select_and_remove()
        1
        >>> queue.select_and_remove()
        2
    """

    def __init__(self, ink: InkField):
        self._ink = ink
        self._pending = np.arange(ink.size, dtype=np.int64)
        self.resynchronize()

    def resynchronize(self) -> None:
        """Restore the ordering invariant from the current remaining ink."""
        keys = self._ink.remaining[self._pending]
        # lexsort sorts by the last key first: descending ink, then index
        order = np.lexsort((self._pending, -keys))
        self._pending = self._pending[order]

    def select_and_remove(self) -> int:
        """Pop the pixel with the most remaining ink.

        Raises:
            EmptyQueueError: If every pixel has already been selected.
        """
        if len(self._pending) == 0:
            raise EmptyQueueError("All pixels have already seeded a stroke")
        idx = int(self._pending[0])
        self._pending = self._pending[1:]
        return idx

    def __len__(self) -> int:
        return len(self._pending)
