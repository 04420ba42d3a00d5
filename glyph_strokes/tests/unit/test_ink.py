"""Unit tests for the InkField.

Tests cover:
    - Construction from flat and 2-D grids, and input validation
    - Read-only views of the original and remaining ink
    - Clamped subtraction and the 0 <= remaining <= total invariant
    - Loss as a pure read
"""

import unittest

import numpy as np

from stroke_approx.domain.ink import InkField
from stroke_approx.errors import InkValueError, StrokeApproxError


class TestInkFieldConstruction(unittest.TestCase):
    """Tests for building and validating ink fields."""

    def test_flat_grid(self):
        field = InkField([0.0, 0.5, 1.0, 0.25], width=2, height=2)
        self.assertEqual(field.size, 4)
        np.testing.assert_allclose(field.total, [0.0, 0.5, 1.0, 0.25])

    def test_2d_grid_is_row_major(self):
        """Index x + width * y matches row-major flattening."""
        grid = np.arange(6, dtype=float).reshape(2, 3) / 10
        field = InkField.from_array(grid)
        self.assertEqual((field.width, field.height), (3, 2))
        self.assertEqual(field.coords_of(5), (2, 1))
        self.assertAlmostEqual(field.total[5], grid[1, 2])

    def test_remaining_starts_equal_to_total(self):
        field = InkField([0.3, 0.7], width=2, height=1)
        np.testing.assert_array_equal(field.remaining, field.total)

    def test_wrong_size_rejected(self):
        with self.assertRaises(InkValueError):
            InkField([0.0, 1.0, 0.0], width=2, height=2)

    def test_out_of_range_rejected(self):
        with self.assertRaises(InkValueError):
            InkField([0.0, 1.5], width=2, height=1)
        with self.assertRaises(InkValueError):
            InkField([-0.1, 0.5], width=2, height=1)

    def test_nan_rejected(self):
        with self.assertRaises(InkValueError):
            InkField([0.0, float('nan')], width=2, height=1)

    def test_empty_grid_rejected(self):
        with self.assertRaises(InkValueError):
            InkField([], width=0, height=0)

    def test_error_is_value_error(self):
        """Callers may catch either the package base class or ValueError."""
        self.assertTrue(issubclass(InkValueError, ValueError))
        self.assertTrue(issubclass(InkValueError, StrokeApproxError))

    def test_input_not_aliased(self):
        """Mutating the caller's array does not touch the field."""
        grid = np.array([0.5, 0.5])
        field = InkField(grid, width=2, height=1)
        grid[0] = 0.0
        self.assertEqual(field.total[0], 0.5)


class TestInkFieldViews(unittest.TestCase):
    """The field's arrays cannot be written from outside."""

    def setUp(self):
        self.field = InkField([0.2, 0.8, 0.0, 1.0], width=2, height=2)

    def test_total_read_only(self):
        with self.assertRaises(ValueError):
            self.field.total[0] = 0.0

    def test_remaining_read_only(self):
        with self.assertRaises(ValueError):
            self.field.remaining[0] = 0.0

    def test_coords_round_trip(self):
        for idx in range(self.field.size):
            x, y = self.field.coords_of(idx)
            self.assertEqual(x + self.field.width * y, idx)

    def test_remaining_grid_shape(self):
        grid = self.field.remaining_grid()
        self.assertEqual(grid.shape, (2, 2))
        self.assertEqual(grid[1, 1], 1.0)


class TestInkFieldSubtract(unittest.TestCase):
    """Tests for subtract and loss."""

    def setUp(self):
        self.field = InkField([0.2, 0.8, 0.0, 1.0], width=2, height=2)

    def test_partial_subtract(self):
        removed = self.field.subtract(1, 0.3)
        self.assertAlmostEqual(removed, 0.3)
        self.assertAlmostEqual(self.field.remaining[1], 0.5)

    def test_subtract_clamps_at_zero(self):
        """Removing more than is left removes only what is left."""
        removed = self.field.subtract(0, 1.0)
        self.assertAlmostEqual(removed, 0.2)
        self.assertEqual(self.field.remaining[0], 0.0)

    def test_subtract_from_blank_pixel(self):
        self.assertEqual(self.field.subtract(2, 1.0), 0.0)

    def test_negative_amount_removes_nothing(self):
        self.assertEqual(self.field.subtract(3, -0.5), 0.0)
        self.assertEqual(self.field.remaining[3], 1.0)

    def test_total_never_changes(self):
        self.field.subtract(3, 1.0)
        self.assertEqual(self.field.total[3], 1.0)

    def test_invariant_holds_after_many_subtractions(self):
        rng = np.random.default_rng(0)
        for _ in range(50):
            self.field.subtract(int(rng.integers(4)), float(rng.random()))
        self.assertTrue(np.all(self.field.remaining >= 0.0))
        self.assertTrue(np.all(self.field.remaining <= self.field.total))

    def test_loss_is_sum_of_remaining(self):
        self.assertAlmostEqual(self.field.loss(), 2.0)
        self.field.subtract(3, 0.5)
        self.assertAlmostEqual(self.field.loss(), 1.5)

    def test_loss_is_pure(self):
        before = self.field.remaining.copy()
        self.assertEqual(self.field.loss(), self.field.loss())
        np.testing.assert_array_equal(self.field.remaining, before)


if __name__ == '__main__':
    unittest.main()
