"""Geometric value objects for stroke approximation."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import math


@dataclass(frozen=True)
class Point:
    """Immutable 2D point in pixel-grid coordinates."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def dot(self, other: Point) -> float:
        """Dot product treating points as vectors."""
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Length when treated as a vector from origin."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple for compatibility."""
        return (self.x, self.y)


@dataclass(frozen=True)
class LineStroke:
    """A straight stroke between two endpoints.

    Coordinates are in pixel-grid units, not normalized: pixel ``(x, y)``
    spans ``[x, x+1) x [y, y+1)`` and its centre is ``(x + .5, y + .5)``.
    The stroke width is a property of the session, not of the stroke.
    A stroke may be degenerate (both endpoints equal).
    """
    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def start(self) -> Point:
        return Point(self.x0, self.y0)

    @property
    def end(self) -> Point:
        return Point(self.x1, self.y1)

    @property
    def is_degenerate(self) -> bool:
        return self.x0 == self.x1 and self.y0 == self.y1

    def length(self) -> float:
        return self.start.distance_to(self.end)

    def moved(self, endpoint: int, dx: float, dy: float) -> LineStroke:
        """Return a copy with one endpoint shifted by ``(dx, dy)``.

        Args:
            endpoint: 0 moves the start point, 1 moves the end point.
            dx: Horizontal displacement in pixels.
            dy: Vertical displacement in pixels.
        """
        if endpoint == 0:
            return LineStroke(self.x0 + dx, self.y0 + dy, self.x1, self.y1)
        return LineStroke(self.x0, self.y0, self.x1 + dx, self.y1 + dy)

    def normalized(self, width: int, height: int) -> Tuple[float, float, float, float]:
        """Endpoints mapped to the ``[-0.5, 0.5)`` centred output space."""
        return (self.x0 / width - .5, self.y0 / height - .5,
                self.x1 / width - .5, self.y1 / height - .5)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x0, self.y0, self.x1, self.y1)

    @classmethod
    def from_normalized(cls, line: Tuple[float, float, float, float],
                        width: int, height: int) -> LineStroke:
        """Inverse of :meth:`normalized`."""
        x0, y0, x1, y1 = line
        return cls((x0 + .5) * width, (y0 + .5) * height,
                   (x1 + .5) * width, (y1 + .5) * height)

    @classmethod
    def at_pixel_center(cls, x: int, y: int) -> LineStroke:
        """Zero-length stroke at the centre of pixel ``(x, y)``."""
        return cls(x + .5, y + .5, x + .5, y + .5)
