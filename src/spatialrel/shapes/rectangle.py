"""
    An axis-aligned rectangle that supports longitudinal wrap-around.

    When the context is geodetic, X values are longitudes in degrees and
    min_x > max_x means the rectangle crosses the dateline; its true width is
    then (max_x - min_x) + 360. In a planar context min_x > max_x is not a
    meaningful rectangle.

    Relations:
    - Y is always a plain interval relation.
    - X is a plain interval relation in planar contexts, and a longitude
      relation (unwrap, then shift into a common window) in geodetic ones.
    - The two axis relations are combined with tie-break rules for shared
      extents, see relate_rectangle.

    A rectangle is safe to share between readers. reset() is the only
    mutator and must not run concurrently with reads of the same instance.
"""

import math
import warnings

import numpy as np

from spatialrel.exceptions import InvalidShapeError
from spatialrel.mathutils.distance_utils import normalize_lon_deg
from spatialrel.mathutils.range_relation import (
    WORLD_WIDTH,
    relate_lon_range,
    relate_range,
    unwrap_lon_range,
)
from spatialrel.profiling import profile
from spatialrel.spatial_types import SpatialRelation, ShapeKind
from .point import Point
from .shape import Shape


class Rectangle(Shape):
    """
    Rectangle bounded by [min_x, max_x] x [min_y, max_y].

    Attributes:
        min_x, max_x: X bounds (longitudes in geodetic contexts)
        min_y, max_y: Y bounds, always min_y <= max_y
        ctx: The SpatialContext the rectangle lives in (borrowed, only
            is_geo() and the distance calculator are consulted)
    """

    kind = ShapeKind.RECTANGLE

    def __init__(self, min_x: float, max_x: float, min_y: float, max_y: float, ctx):
        self._ctx = ctx
        self.reset(min_x, max_x, min_y, max_y)

    @classmethod
    def from_corners(cls, lower_left: Point, upper_right: Point, ctx) -> 'Rectangle':
        """Build from the lower-left and upper-right corner points."""
        return cls(lower_left.x, upper_right.x, lower_left.y, upper_right.y, ctx)

    @classmethod
    def copy_of(cls, rect: 'Rectangle', ctx=None) -> 'Rectangle':
        """Copy rect, optionally into another context."""
        return cls(rect.min_x, rect.max_x, rect.min_y, rect.max_y, ctx or rect.ctx)

    def reset(self, min_x: float, max_x: float, min_y: float, max_y: float) -> None:
        """
        Replace all four bounds.

        The new bounds are validated before anything is assigned, so a
        rejected reset leaves the rectangle unchanged.

        Raises:
            InvalidShapeError: if any bound is NaN or min_y > max_y
        """
        min_x, max_x, min_y, max_y = float(min_x), float(max_x), float(min_y), float(max_y)
        if any(math.isnan(v) for v in (min_x, max_x, min_y, max_y)):
            raise InvalidShapeError(
                f"Rectangle bounds must not be NaN, got minX={min_x},maxX={max_x},minY={min_y},maxY={max_y}")
        if min_y > max_y:
            raise InvalidShapeError(f"invalid Y-range: minY={min_y} > maxY={max_y}")
        if min_x > max_x and not self._ctx.is_geo():
            warnings.warn(
                f"minX={min_x} > maxX={max_x} in a non-geodetic context; relations will be meaningless",
                RuntimeWarning, stacklevel=2)

        self._min_x = min_x
        self._max_x = max_x
        self._min_y = min_y
        self._max_y = max_y

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def ctx(self):
        return self._ctx

    @property
    def min_x(self) -> float:
        return self._min_x

    @property
    def max_x(self) -> float:
        return self._max_x

    @property
    def min_y(self) -> float:
        return self._min_y

    @property
    def max_y(self) -> float:
        return self._max_y

    @property
    def width(self) -> float:
        """X extent, never negative (dateline crossing adds 360)."""
        w = self._max_x - self._min_x
        if w < 0:
            w += WORLD_WIDTH
        return w

    @property
    def height(self) -> float:
        return self._max_y - self._min_y

    @property
    def has_area(self) -> bool:
        """False for degenerate rectangles (lines and points)."""
        return self.width != 0 and self.height != 0

    def area(self, ctx=None) -> float:
        """
        Planar width * height when ctx is None, otherwise whatever the
        context's distance calculator reports for this rectangle.
        """
        if ctx is None:
            return self.width * self.height
        return ctx.distance_calculator.area(self)

    @property
    def crosses_dateline(self) -> bool:
        return self._min_x > self._max_x

    @property
    def center(self) -> Point:
        """
        Center point; X is renormalized to (-180, 180] when crossing the dateline.

        Unbounded axes keep a finite center: 0 when the axis spans
        (-inf, inf), the finite bound when only one side is infinite.
        """
        if math.isinf(self._min_x) or math.isinf(self._max_x):
            x = _unbounded_center(self._min_x, self._max_x)
        else:
            x = self.width / 2 + self._min_x
            if self._min_x > self._max_x:
                x = normalize_lon_deg(x)
        if math.isinf(self._min_y) or math.isinf(self._max_y):
            y = _unbounded_center(self._min_y, self._max_y)
        else:
            y = self.height / 2 + self._min_y
        return Point(x, y)

    def bounding_box(self, ctx=None) -> 'Rectangle':
        return self

    # -------------------------------------------------------------------------
    # Relations
    # -------------------------------------------------------------------------

    def relate_y_range(self, ext_min_y: float, ext_max_y: float) -> SpatialRelation:
        return relate_range(self._min_y, self._max_y, ext_min_y, ext_max_y)

    def relate_x_range(self, ext_min_x: float, ext_max_x: float) -> SpatialRelation:
        """Relate [ext_min_x, ext_max_x] to this rectangle's X range, honouring the dateline in geodetic contexts."""
        if self._ctx.is_geo():
            return relate_lon_range(self._min_x, self._max_x, ext_min_x, ext_max_x)
        return relate_range(self._min_x, self._max_x, ext_min_x, ext_max_x)

    def relate_point(self, point: Point) -> SpatialRelation:
        """CONTAINS when point lies inside or on the boundary, else DISJOINT."""
        if point.y > self._max_y or point.y < self._min_y:
            return SpatialRelation.DISJOINT

        min_x = self._min_x
        max_x = self._max_x
        p_x = point.x
        if self._ctx.is_geo():
            max_x = unwrap_lon_range(min_x, max_x)
            # shift to potentially overlap
            if p_x < min_x:
                p_x += WORLD_WIDTH
            elif p_x > max_x:
                p_x -= WORLD_WIDTH
            else:
                return SpatialRelation.CONTAINS

        if p_x < min_x or p_x > max_x:
            return SpatialRelation.DISJOINT
        return SpatialRelation.CONTAINS

    def relate_rectangle(self, rect: 'Rectangle') -> SpatialRelation:
        """
        Combine the independent Y and X relations.

        Either axis DISJOINT makes the whole DISJOINT. When the axes agree
        that value is returned. When they disagree, an axis whose extents
        are exactly equal carries no information and the other axis
        decides. Otherwise the rectangles merely INTERSECT.
        """
        y_rel = self.relate_y_range(rect.min_y, rect.max_y)
        if y_rel is SpatialRelation.DISJOINT:
            return SpatialRelation.DISJOINT

        x_rel = self.relate_x_range(rect.min_x, rect.max_x)
        if x_rel is SpatialRelation.DISJOINT:
            return SpatialRelation.DISJOINT

        if x_rel is y_rel:
            return x_rel

        if self._min_x == rect.min_x and self._max_x == rect.max_x:
            return y_rel
        if self._min_y == rect.min_y and self._max_y == rect.max_y:
            return x_rel

        return SpatialRelation.INTERSECTS

    _RELATE_BY_KIND = {
        ShapeKind.POINT: relate_point,
        ShapeKind.RECTANGLE: relate_rectangle,
    }

    @profile("Rectangle.relate")
    def relate(self, other: Shape) -> SpatialRelation:
        handler = self._RELATE_BY_KIND.get(other.kind)
        if handler is None:
            return other.relate(self).transpose()
        return handler(self, other)

    def contains_points(self, xs, ys) -> np.ndarray:
        """
        Vectorised point test.

        Args:
            xs: Array-like of X coordinates
            ys: Array-like of Y coordinates, same shape as xs

        Returns:
            Boolean array, True where relate_point would return CONTAINS.
            NaN entries are never contained.
        """
        xs = np.asarray(xs, dtype=float)
        ys = np.asarray(ys, dtype=float)
        if xs.shape != ys.shape:
            raise ValueError(f"xs and ys must have the same shape, got {xs.shape} and {ys.shape}")

        min_x = self._min_x
        max_x = self._max_x
        in_y = (ys >= self._min_y) & (ys <= self._max_y)
        if self._ctx.is_geo():
            max_x = unwrap_lon_range(min_x, max_x)
            xs = np.where(xs < min_x, xs + WORLD_WIDTH, np.where(xs > max_x, xs - WORLD_WIDTH, xs))
        return in_y & (xs >= min_x) & (xs <= max_x)

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Rectangle):
            return NotImplemented
        return (self._min_x == other.min_x and self._max_x == other.max_x
                and self._min_y == other.min_y and self._max_y == other.max_y)

    __hash__ = None

    def __str__(self):
        return f"Rect(minX={self._min_x},maxX={self._max_x},minY={self._min_y},maxY={self._max_y})"

    __repr__ = __str__


def _unbounded_center(lo: float, hi: float) -> float:
    """Center of an axis with at least one infinite bound."""
    if math.isinf(lo) and math.isinf(hi):
        return 0.0 if lo != hi else lo
    return hi if math.isinf(lo) else lo
