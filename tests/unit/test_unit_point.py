"""
Unit tests for Point
"""

import unittest

from spatialrel.exceptions import InvalidShapeError
from spatialrel.shapes import Point, Rectangle
from spatialrel.spatial_context import GEO, CARTESIAN
from spatialrel.spatial_types import SpatialRelation


class PointUnitTests(unittest.TestCase):
    """Unit tests for the Point value type."""

    def test_equal_points_intersect(self):
        self.assertEqual(Point(1, 2).relate(Point(1, 2)), SpatialRelation.INTERSECTS)

    def test_different_points_disjoint(self):
        self.assertEqual(Point(1, 2).relate(Point(2, 1)), SpatialRelation.DISJOINT)

    def test_point_within_rectangle(self):
        rect = Rectangle(0, 10, 0, 10, CARTESIAN)
        self.assertEqual(Point(5, 5).relate(rect), SpatialRelation.WITHIN)
        self.assertEqual(Point(10, 10).relate(rect), SpatialRelation.WITHIN)
        self.assertEqual(Point(11, 5).relate(rect), SpatialRelation.DISJOINT)

    def test_point_within_dateline_rectangle(self):
        rect = Rectangle(170, -170, -10, 10, GEO)
        self.assertEqual(Point(-180, 0).relate(rect), SpatialRelation.WITHIN)

    def test_immutable(self):
        point = Point(1, 2)
        with self.assertRaises(AttributeError):
            point.x = 5

    def test_hashable_value(self):
        self.assertEqual(len({Point(1, 2), Point(1.0, 2.0), Point(2, 1)}), 2)

    def test_nan_rejected(self):
        with self.assertRaises(InvalidShapeError):
            Point(float('nan'), 0)
        with self.assertRaises(InvalidShapeError):
            Point(0, float('nan'))

    def test_degenerate_geometry(self):
        point = Point(3, 4)
        self.assertFalse(point.has_area)
        self.assertEqual(point.area(), 0.0)
        self.assertIs(point.center, point)

    def test_bounding_box(self):
        box = Point(3, 4).bounding_box(GEO)
        self.assertEqual(box, Rectangle(3, 3, 4, 4, GEO))
        self.assertIs(box.ctx, GEO)
        self.assertIs(Point(3, 4).bounding_box().ctx, CARTESIAN)

    def test_str(self):
        self.assertEqual(str(Point(1.5, -2.0)), "Pt(x=1.5,y=-2.0)")


if __name__ == '__main__':
    unittest.main()
