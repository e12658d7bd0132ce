"""
    Provides the relation and shape-kind enumerations shared by all shapes.
"""

from enum import Enum, IntEnum, auto


class SpatialRelation(Enum):
    """
    Outcome of relating a subject shape to another shape.

    CONTAINS means the subject contains the other shape, WITHIN means the
    subject is contained by it. Relations obey
    ``a.relate(b) == b.relate(a).transpose()``.
    """
    DISJOINT = auto()
    INTERSECTS = auto()
    CONTAINS = auto()
    WITHIN = auto()

    def transpose(self) -> 'SpatialRelation':
        """Relation seen from the other shape's side (CONTAINS <-> WITHIN)."""
        if self is SpatialRelation.CONTAINS:
            return SpatialRelation.WITHIN
        if self is SpatialRelation.WITHIN:
            return SpatialRelation.CONTAINS
        return self

    def intersects(self) -> bool:
        """True for every relation where the shapes share at least one point."""
        return self is not SpatialRelation.DISJOINT

    def combine(self, other: 'SpatialRelation') -> 'SpatialRelation':
        """
        Merge the relations of two shapes toward the same target shape.

        The result is the relation of the union of both shapes toward the
        target. The merge is order independent: equal relations are kept,
        CONTAINS next to DISJOINT stays CONTAINS, anything else collapses
        to INTERSECTS.
        """
        if self is other:
            return self
        if {self, other} == {SpatialRelation.CONTAINS, SpatialRelation.DISJOINT}:
            return SpatialRelation.CONTAINS
        return SpatialRelation.INTERSECTS


class ShapeKind(IntEnum):
    """Closed set of shape kinds the relation dispatch knows about."""
    POINT = 0
    RECTANGLE = 1
