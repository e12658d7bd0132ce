"""
Unit tests for degree normalisation and the distance calculators.
"""

import math
import unittest

from spatialrel.mathutils.distance_utils import (
    DEG_TO_KM,
    KM_TO_DEG,
    normalize_lon_deg,
    normalize_lat_deg,
    distance_haversine_rad,
    dist_to_degrees,
    degrees_to_dist,
)
from spatialrel.mathutils.distance_calculator import (
    CartesianDistanceCalculator,
    SphericalDistanceCalculator,
)
from spatialrel.shapes import Point, Rectangle
from spatialrel.spatial_context import GEO, CARTESIAN


class NormalizeTests(unittest.TestCase):
    """Tests for longitude/latitude normalisation"""

    def testLongitudeInRangeUntouched(self):
        for lon in (0.0, 179.5, -179.5, 180.0):
            self.assertEqual(normalize_lon_deg(lon), lon)

    def testLongitudeCanonicalRange(self):
        """-180 and its equivalents map onto 180"""
        self.assertEqual(normalize_lon_deg(-180.0), 180.0)
        self.assertEqual(normalize_lon_deg(540.0), 180.0)
        self.assertEqual(normalize_lon_deg(-540.0), 180.0)

    def testLongitudeWraps(self):
        self.assertAlmostEqual(normalize_lon_deg(190.0), -170.0)
        self.assertAlmostEqual(normalize_lon_deg(-190.0), 170.0)
        self.assertAlmostEqual(normalize_lon_deg(370.0), 10.0)
        self.assertAlmostEqual(normalize_lon_deg(-725.0), -5.0)

    def testLatitudeReflects(self):
        self.assertEqual(normalize_lat_deg(45.0), 45.0)
        self.assertAlmostEqual(normalize_lat_deg(100.0), 80.0)
        self.assertAlmostEqual(normalize_lat_deg(-100.0), -80.0)
        self.assertAlmostEqual(normalize_lat_deg(180.0), 0.0)
        self.assertAlmostEqual(normalize_lat_deg(270.0), -90.0)


class HaversineTests(unittest.TestCase):
    """Tests for the great-circle helpers"""

    def testSamePoint(self):
        self.assertEqual(distance_haversine_rad(0.5, 0.5, 0.5, 0.5), 0.0)

    def testQuarterOfEquator(self):
        self.assertAlmostEqual(distance_haversine_rad(0, 0, 0, math.pi / 2), math.pi / 2)

    def testAntipodes(self):
        self.assertAlmostEqual(distance_haversine_rad(0, 0, 0, math.pi), math.pi)

    def testDegreeKmConversions(self):
        self.assertAlmostEqual(DEG_TO_KM * KM_TO_DEG, 1.0)
        self.assertAlmostEqual(dist_to_degrees(degrees_to_dist(12.5)), 12.5)
        self.assertAlmostEqual(degrees_to_dist(1.0), DEG_TO_KM)


class CalculatorTests(unittest.TestCase):
    """Tests for Cartesian and spherical calculators"""

    def testCartesianDistance(self):
        calc = CartesianDistanceCalculator()
        self.assertAlmostEqual(calc.distance(Point(0, 0), Point(3, 4)), 5.0)

    def testCartesianArea(self):
        rect = Rectangle(-10, 10, -5, 5, CARTESIAN)
        self.assertEqual(rect.area(CARTESIAN), 200)

    def testSphericalDistanceDegrees(self):
        calc = SphericalDistanceCalculator()
        self.assertAlmostEqual(calc.distance(Point(0, 0), Point(90, 0)), 90.0)
        self.assertAlmostEqual(calc.distance(Point(179, 0), Point(-179, 0)), 2.0)
        self.assertAlmostEqual(calc.distance(Point(0, -90), Point(0, 90)), 180.0)

    def testSphericalAreaFullGlobe(self):
        world = Rectangle(-180, 180, -90, 90, GEO)
        expected = 4 * math.pi * math.degrees(1.0) ** 2
        self.assertAlmostEqual(world.area(GEO), expected)

    def testSphericalAreaHemisphereAndDateline(self):
        north = Rectangle(-180, 180, 0, 90, GEO)
        self.assertAlmostEqual(north.area(GEO), 2 * math.pi * math.degrees(1.0) ** 2)
        # a dateline crossing band has the same area as an unwrapped one of equal width
        crossing = Rectangle(170, -170, -10, 10, GEO)
        regular = Rectangle(-10, 10, -10, 10, GEO)
        self.assertAlmostEqual(crossing.area(GEO), regular.area(GEO))

    def testSphericalAreaSmallerThanPlanarAwayFromEquator(self):
        rect = Rectangle(0, 10, 60, 70, GEO)
        self.assertLess(rect.area(GEO), rect.area())

    def testCustomRadius(self):
        calc = SphericalDistanceCalculator(radius=1.0)
        self.assertAlmostEqual(calc.distance(Point(0, 0), Point(180, 0)), math.pi)


if __name__ == '__main__':
    unittest.main()
