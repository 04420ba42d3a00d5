"""Coverage score of a candidate stroke.

A candidate either gets a legal :class:`Cover` or the :data:`REJECTED`
marker when it would overdraw the glyph. Both variants support the same
comparison so the optimizer never has to look at magic numbers.

Ordering:
    ``a > b`` iff ``a.new_cover > b.new_cover``, or the new covers are equal
    and ``a.total_cover > b.total_cover``. ``REJECTED`` sorts below every
    legal cover and is never greater than anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Cover:
    """Legal coverage of a stroke.

    Attributes:
        new_cover: Ink the stroke would remove from the remaining field.
        total_cover: Ink the stroke overlaps in the original glyph.
    """
    new_cover: float = 0.0
    total_cover: float = 0.0

    is_legal = True

    def __gt__(self, other: CoverResult) -> bool:
        if not other.is_legal:
            return True
        return (self.new_cover > other.new_cover or
                (self.new_cover == other.new_cover and
                 self.total_cover > other.total_cover))

    def __lt__(self, other: CoverResult) -> bool:
        return other > self


class Rejected:
    """Marker for a stroke that overdraws the glyph."""

    __slots__ = ()
    _instance = None

    is_legal = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __gt__(self, other: CoverResult) -> bool:
        return False

    def __lt__(self, other: CoverResult) -> bool:
        return other.is_legal

    def __repr__(self) -> str:
        return 'REJECTED'

    def __reduce__(self):
        return (Rejected, ())


REJECTED = Rejected()

CoverResult = Union[Cover, Rejected]
