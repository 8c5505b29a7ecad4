"""
Tests for fixed-precision number formatting.
"""

import unittest
from math import copysign, inf, nan

from airgeo.numfmt import fm_nz, fm_precision


class TestFmPrecision(unittest.TestCase):
    """Test fm_precision."""

    def test_fixed_decimals(self):
        """Values are rendered with exactly the requested decimals."""
        self.assertEqual(fm_precision(1.23456, 2), "1.23")
        self.assertEqual(fm_precision(-73.0, 3), "-73.000")
        self.assertEqual(fm_precision(2.7, 0), "3")

    def test_special_values(self):
        """NaN and infinities use names float() can read back."""
        self.assertEqual(fm_precision(nan, 3), "NaN")
        self.assertEqual(fm_precision(inf, 3), "Infinity")
        self.assertEqual(fm_precision(-inf, 3), "-Infinity")
        self.assertEqual(float(fm_precision(-inf, 3)), -inf)

    def test_negative_precision(self):
        """Negative precision is rejected."""
        with self.assertRaises(ValueError):
            fm_precision(1.0, -1)


class TestFmNz(unittest.TestCase):
    """Test fm_nz."""

    def test_small_negative_becomes_zero(self):
        """A negative value rounding to zero prints without a sign."""
        v = fm_nz(-0.0001, 3)
        self.assertEqual(v, 0.0)
        self.assertEqual(fm_precision(v, 3), "0.000")

    def test_negative_zero_cleared(self):
        """-0.0 comes back as +0.0."""
        self.assertEqual(copysign(1.0, fm_nz(-0.0, 2)), 1.0)

    def test_other_values_unchanged(self):
        """Values that do not round to zero are kept."""
        self.assertEqual(fm_nz(-1.5, 2), -1.5)
        self.assertEqual(fm_nz(0.0001, 3), 0.0001)
        self.assertEqual(fm_nz(-0.01, 3), -0.01)


if __name__ == "__main__":
    unittest.main()
