"""spatialrel - rectangle/point spatial relations on planar and geodetic surfaces."""

__version__ = "0.1.0"

from .spatial_types import SpatialRelation, ShapeKind
from .exceptions import InvalidShapeError
from .shapes import Shape, Point, Rectangle
from .spatial_context import SpatialContext, GEO, CARTESIAN


__all__ = [
    'SpatialRelation',
    'ShapeKind',
    'InvalidShapeError',
    'Shape',
    'Point',
    'Rectangle',
    'SpatialContext',
    'GEO',
    'CARTESIAN',
]
