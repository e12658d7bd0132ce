"""
Point - an immutable x/y coordinate pair.
"""

import math
from dataclasses import dataclass

from spatialrel.exceptions import InvalidShapeError
from spatialrel.spatial_types import SpatialRelation, ShapeKind
from .shape import Shape


@dataclass(frozen=True)
class Point(Shape):
    """
    A single location. In geodetic contexts x is the longitude and y the
    latitude, both in degrees.
    """
    x: float
    y: float

    kind = ShapeKind.POINT

    def __post_init__(self):
        if math.isnan(self.x) or math.isnan(self.y):
            raise InvalidShapeError(f"Point coordinates must not be NaN, got ({self.x}, {self.y})")

    def relate(self, other: Shape) -> SpatialRelation:
        if other.kind == ShapeKind.POINT:
            return SpatialRelation.INTERSECTS if self == other else SpatialRelation.DISJOINT
        return other.relate(self).transpose()

    def bounding_box(self, ctx=None):
        """Zero-size rectangle at this point, in ctx (planar when omitted)."""
        from spatialrel.shapes.rectangle import Rectangle
        from spatialrel.spatial_context import CARTESIAN
        return Rectangle(self.x, self.x, self.y, self.y, ctx or CARTESIAN)

    @property
    def has_area(self) -> bool:
        return False

    def area(self, ctx=None) -> float:
        return 0.0

    @property
    def center(self) -> 'Point':
        return self

    def __str__(self):
        return f"Pt(x={self.x},y={self.y})"
