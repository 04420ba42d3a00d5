"""Unit tests for StrokeRasterizer.

Tests cover:
    - Degenerate strokes map to the pixel under their start point
    - Horizontal and vertical strokes terminate and cover a two-pixel band
    - Every pixel index is produced once and lies inside the grid
    - Non-finite coordinates raise GeometryError
    - Visitor early termination
"""

import math
import unittest

from stroke_approx.analysis.rasterizer import StrokeRasterizer
from stroke_approx.domain.geometry import LineStroke
from stroke_approx.errors import GeometryError


def _coords(pixels):
    return {(x, y) for x, y, _ in pixels}


class TestDegenerateStrokes(unittest.TestCase):
    """Zero-length strokes."""

    def test_single_pixel(self):
        rasterizer = StrokeRasterizer(3, 3)
        self.assertEqual(rasterizer.pixels(LineStroke(1.5, 1.5, 1.5, 1.5)), [(1, 1, 4)])

    def test_floor_not_round(self):
        rasterizer = StrokeRasterizer(3, 3)
        self.assertEqual(rasterizer.pixels(LineStroke(1.9, 0.1, 1.9, 0.1)), [(1, 0, 1)])

    def test_outside_grid_is_empty(self):
        rasterizer = StrokeRasterizer(3, 3)
        self.assertEqual(rasterizer.pixels(LineStroke(-0.5, 1.5, -0.5, 1.5)), [])


class TestAxisAlignedStrokes(unittest.TestCase):
    """Horizontal and vertical strokes must terminate at their end point."""

    def test_horizontal(self):
        rasterizer = StrokeRasterizer(5, 3)
        pixels = rasterizer.pixels(LineStroke(0.5, 0.5, 3.5, 0.5))
        expected = {(x, y) for x in range(4) for y in range(2)}
        self.assertEqual(_coords(pixels), expected)

    def test_vertical(self):
        rasterizer = StrokeRasterizer(3, 3)
        pixels = rasterizer.pixels(LineStroke(1.5, 0.5, 1.5, 2.5))
        expected = {(x, y) for x in (1, 2) for y in range(3)}
        self.assertEqual(_coords(pixels), expected)

    def test_reversed_horizontal_same_pixels_on_the_line(self):
        rasterizer = StrokeRasterizer(5, 3)
        forward = _coords(rasterizer.pixels(LineStroke(0.5, 1.5, 3.5, 1.5)))
        backward = _coords(rasterizer.pixels(LineStroke(3.5, 1.5, 0.5, 1.5)))
        on_line = {(x, 1) for x in range(4)}
        self.assertTrue(on_line <= forward)
        self.assertTrue(on_line <= backward)

    def test_end_pixel_included(self):
        """Both endpoint pixels are part of the footprint."""
        rasterizer = StrokeRasterizer(6, 6)
        coords = _coords(rasterizer.pixels(LineStroke(0.5, 0.5, 4.5, 3.5)))
        self.assertIn((0, 0), coords)
        self.assertIn((4, 3), coords)


class TestRasterizerContract(unittest.TestCase):
    """Uniqueness, bounds and ordering."""

    def setUp(self):
        self.rasterizer = StrokeRasterizer(6, 5, stroke_width=2)

    def test_indices_unique(self):
        for stroke in (LineStroke(0.5, 0.5, 5.5, 4.5), LineStroke(2.5, 4.5, 2.5, 0.5),
                       LineStroke(-3.0, 2.0, 9.0, 2.5)):
            indices = [idx for _, _, idx in self.rasterizer.pixels(stroke)]
            self.assertEqual(len(indices), len(set(indices)))

    def test_inside_bounds(self):
        pixels = self.rasterizer.pixels(LineStroke(-3.0, -1.0, 9.0, 7.0))
        self.assertTrue(pixels)
        for x, y, idx in pixels:
            self.assertTrue(0 <= x < 6 and 0 <= y < 5)
            self.assertEqual(idx, x + 6 * y)

    def test_wider_stroke_covers_more(self):
        stroke = LineStroke(0.5, 2.5, 5.5, 2.5)
        thin = StrokeRasterizer(6, 5, stroke_width=1).pixels(stroke)
        wide = self.rasterizer.pixels(stroke)
        self.assertGreater(len(wide), len(thin))
        self.assertTrue(_coords(thin) <= _coords(wide))

    def test_deterministic(self):
        stroke = LineStroke(0.5, 0.5, 5.5, 3.5)
        self.assertEqual(self.rasterizer.pixels(stroke), self.rasterizer.pixels(stroke))

    def test_non_finite_raises(self):
        with self.assertRaises(GeometryError):
            self.rasterizer.pixels(LineStroke(float('nan'), 0.5, 1.5, 1.5))
        with self.assertRaises(GeometryError):
            self.rasterizer.pixels(LineStroke(0.5, 0.5, math.inf, 1.5))

    def test_non_positive_width_rejected(self):
        with self.assertRaises(ValueError):
            StrokeRasterizer(3, 3, stroke_width=0)

    def test_sub_pixel_width_rejected(self):
        """The half-pixel cross-section would land outside the distance guard."""
        with self.assertRaises(ValueError):
            StrokeRasterizer(3, 3, stroke_width=0.3)
        with self.assertRaises(ValueError):
            StrokeRasterizer(3, 3, stroke_width=float('nan'))

    def test_fractional_width_above_one(self):
        rasterizer = StrokeRasterizer(6, 5, stroke_width=1.5)
        pixels = rasterizer.pixels(LineStroke(0.5, 2.5, 5.5, 2.5))
        self.assertEqual({y for _, y, _ in pixels}, {1, 2, 3, 4})


class TestVisit(unittest.TestCase):
    """Tests for the visitor form."""

    def setUp(self):
        self.rasterizer = StrokeRasterizer(5, 3)
        self.stroke = LineStroke(0.5, 0.5, 3.5, 0.5)

    def test_visits_every_pixel(self):
        seen = []
        self.rasterizer.visit(self.stroke, lambda x, y, idx: seen.append(idx))
        self.assertEqual(seen, [idx for _, _, idx in self.rasterizer.pixels(self.stroke)])

    def test_false_stops_iteration(self):
        seen = []

        def visitor(x, y, idx):
            seen.append(idx)
            return False

        self.rasterizer.visit(self.stroke, visitor)
        self.assertEqual(len(seen), 1)


if __name__ == '__main__':
    unittest.main()
