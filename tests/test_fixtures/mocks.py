"""Mock classes for spatialrel testing."""

from spatialrel.shapes.shape import Shape
from spatialrel.spatial_types import SpatialRelation


class MockShape(Shape):
    """Shape of a kind no built-in shape specialises.

    Answers every relate() with a fixed relation and records who asked, so
    tests can check that other shapes fall back to asking it and transpose
    its answer.

    Attributes:
        answer: The relation returned from relate()
        asked_by: Shapes that called relate() on this mock, in order

    Examples:
        >>> mock = MockShape(SpatialRelation.WITHIN)
        >>> rect.relate(mock)
        <SpatialRelation.CONTAINS: 3>
    """

    kind = "mock"

    def __init__(self, answer: SpatialRelation):
        self.answer = answer
        self.asked_by = []

    def relate(self, other):
        self.asked_by.append(other)
        return self.answer

    def bounding_box(self, ctx=None):
        raise NotImplementedError

    @property
    def has_area(self):
        return True

    def area(self, ctx=None):
        return 0.0

    @property
    def center(self):
        raise NotImplementedError
