"""
Base class for all shapes.

Every shape declares a ShapeKind. Relation dispatch looks the kind up in a
table of specialised handlers and otherwise asks the other shape for its
view and transposes it, so ``a.relate(b) == b.relate(a).transpose()`` holds
for every pair as long as each kind can relate itself to the others.
"""

from abc import ABC, abstractmethod

from spatialrel.spatial_types import SpatialRelation, ShapeKind


class Shape(ABC):
    kind: ShapeKind

    @abstractmethod
    def relate(self, other: 'Shape') -> SpatialRelation:
        """Relation of this shape (the subject) to other."""
        pass

    @abstractmethod
    def bounding_box(self, ctx=None) -> 'Shape':
        pass

    @property
    @abstractmethod
    def has_area(self) -> bool:
        pass

    @abstractmethod
    def area(self, ctx=None) -> float:
        pass

    @property
    @abstractmethod
    def center(self) -> 'Shape':
        pass
