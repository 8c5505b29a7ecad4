"""
Tests for great-circle distance, course and almost-equal.
"""

import unittest
from math import isnan, pi

from airgeo.geo import LatLonAlt, great_circle

ARC_DEGREE_M = 60 * 1852.0


class TestDistance(unittest.TestCase):
    """Test great_circle.distance."""

    def test_same_point(self):
        """Distance from a point to itself is zero."""
        self.assertEqual(great_circle.distance(LatLonAlt.ZERO, LatLonAlt.ZERO), 0.0)
        p = LatLonAlt.make(47.45, -122.31, 400)
        self.assertEqual(great_circle.distance(p, p), 0.0)

    def test_one_degree_is_sixty_nautical_miles(self):
        """One degree of arc on the sphere is 60 NM."""
        north = LatLonAlt.make(1.0, 0.0, 0.0)
        east = LatLonAlt.make(0.0, 1.0, 0.0)
        self.assertAlmostEqual(great_circle.distance(LatLonAlt.ZERO, north), ARC_DEGREE_M, delta=1e-3)
        self.assertAlmostEqual(great_circle.distance(LatLonAlt.ZERO, east), ARC_DEGREE_M, delta=1e-3)

    def test_symmetry(self):
        """Distance does not depend on the order of the points."""
        a = LatLonAlt.make(40.64, -73.78, 13)
        b = LatLonAlt.make(51.47, -0.45, 83)
        self.assertAlmostEqual(great_circle.distance(a, b), great_circle.distance(b, a), delta=1e-6)

    def test_altitude_ignored(self):
        """Only the horizontal components count."""
        a = LatLonAlt.make(10.0, 20.0, 0.0)
        self.assertEqual(great_circle.distance(a, a.make_alt(35000)), 0.0)

    def test_invalid_is_nan(self):
        """A NaN coordinate gives a NaN distance."""
        self.assertTrue(isnan(great_circle.distance(LatLonAlt.INVALID, LatLonAlt.ZERO)))


class TestAlmostEquals(unittest.TestCase):
    """Test great_circle.almost_equals."""

    def setUp(self):
        self.a = LatLonAlt.make(45.0, 7.0, 0.0)
        self.b = self.a.linear_est(1.0, 0.0)  # one meter north

    def test_default_tolerance(self):
        """Identical points are almost equal, a meter apart is not."""
        self.assertTrue(great_circle.almost_equals(self.a, self.a))
        self.assertFalse(great_circle.almost_equals(self.a, self.b))

    def test_explicit_tolerance(self):
        """The tolerance is a strict distance bound in meters."""
        self.assertTrue(great_circle.almost_equals(self.a, self.b, 2.0))
        self.assertFalse(great_circle.almost_equals(self.a, self.b, 0.5))

    def test_nan_never_almost_equal(self):
        """Invalid positions are never almost equal."""
        self.assertFalse(great_circle.almost_equals(LatLonAlt.INVALID, LatLonAlt.INVALID, 1e9))


class TestInitialCourse(unittest.TestCase):
    """Test great_circle.initial_course."""

    def test_east_and_south(self):
        """Course is measured clockwise from true north."""
        east = LatLonAlt.make(0.0, 1.0, 0.0)
        north = LatLonAlt.make(1.0, 0.0, 0.0)
        self.assertAlmostEqual(great_circle.initial_course(LatLonAlt.ZERO, east), pi / 2, places=9)
        self.assertAlmostEqual(great_circle.initial_course(north, LatLonAlt.ZERO), pi, places=9)

    def test_range(self):
        """Westerly courses are reported in [π, 2π)."""
        west = LatLonAlt.make(0.0, -1.0, 0.0)
        self.assertAlmostEqual(great_circle.initial_course(LatLonAlt.ZERO, west), 1.5 * pi, places=9)


if __name__ == "__main__":
    unittest.main()
