"""
SpatialContext - configuration shared by all shapes of one coordinate space.

Usage:
    from spatialrel.spatial_context import SpatialContext, GEO, CARTESIAN

    # Geodetic degrees with dateline wrap (default)
    rect = GEO.make_rectangle(170, -170, -10, 10)

    # Flat plane without world bounds
    rect = CARTESIAN.make_rectangle(-10, 10, -5, 5)

    # Custom configuration
    ctx = SpatialContext(geo=False, world_bounds=(0, 1000, 0, 1000))

    # From environment (SPATIALREL_GEO, SPATIALREL_NORM_WRAP_LONGITUDE)
    ctx = SpatialContext.from_env()
"""

import math
import os
from dataclasses import dataclass
from typing import Optional, Tuple, Mapping

from spatialrel.exceptions import InvalidShapeError
from spatialrel.mathutils.distance_calculator import (
    DistanceCalculator,
    CartesianDistanceCalculator,
    SphericalDistanceCalculator,
)
from spatialrel.mathutils.distance_utils import normalize_lon_deg
from spatialrel.mathutils.range_relation import WORLD_WIDTH
from spatialrel.shapes.point import Point
from spatialrel.shapes.rectangle import Rectangle


WorldBounds = Tuple[float, float, float, float]

GEO_WORLD_BOUNDS: WorldBounds = (-180.0, 180.0, -90.0, 90.0)
CARTESIAN_WORLD_BOUNDS: WorldBounds = (-math.inf, math.inf, -math.inf, math.inf)

_TRUE_VALUES = ('1', 'true', 'yes')
_FALSE_VALUES = ('0', 'false', 'no')


@dataclass(frozen=True)
class SpatialContext:
    """
    Configuration for a coordinate space.

    Attributes:
        geo: X/Y are longitude/latitude degrees and X wraps at the dateline.
            When False, X/Y are unbounded Cartesian coordinates.

        distance_calculator: Used by Rectangle.area(ctx) and for distances.
            Defaults to SphericalDistanceCalculator when geo, else
            CartesianDistanceCalculator.

        world_bounds: (min_x, max_x, min_y, max_y) accepted by the factory
            methods. Defaults to the globe when geo, else unbounded.

        normalize_wrap_longitude: When True the factory methods wrap
            longitudes outside (-180, 180] back into range instead of
            rejecting them. Only meaningful when geo.
    """
    geo: bool = True
    distance_calculator: Optional[DistanceCalculator] = None
    world_bounds: Optional[WorldBounds] = None
    normalize_wrap_longitude: bool = False

    def __post_init__(self):
        if self.distance_calculator is None:
            calc = SphericalDistanceCalculator() if self.geo else CartesianDistanceCalculator()
            object.__setattr__(self, 'distance_calculator', calc)

        if self.world_bounds is None:
            bounds = GEO_WORLD_BOUNDS if self.geo else CARTESIAN_WORLD_BOUNDS
        else:
            bounds = tuple(float(v) for v in self.world_bounds)
            if len(bounds) != 4:
                raise ValueError(f"world_bounds must be (min_x, max_x, min_y, max_y), got {self.world_bounds}")
            if bounds[0] > bounds[1] or bounds[2] > bounds[3]:
                raise ValueError(f"world_bounds are inverted: {bounds}")
        object.__setattr__(self, 'world_bounds', bounds)

    @classmethod
    def from_env(cls, prefix: str = 'SPATIALREL_', environ: Optional[Mapping[str, str]] = None) -> 'SpatialContext':
        """
        Build a context from environment variables.

        Reads <prefix>GEO (default true) and <prefix>NORM_WRAP_LONGITUDE
        (default false). Accepted values are 1/true/yes and 0/false/no.
        """
        environ = os.environ if environ is None else environ
        return cls(
            geo=_parse_flag(environ, prefix + 'GEO', True),
            normalize_wrap_longitude=_parse_flag(environ, prefix + 'NORM_WRAP_LONGITUDE', False),
        )

    def is_geo(self) -> bool:
        return self.geo

    # -------------------------------------------------------------------------
    # Verification
    # -------------------------------------------------------------------------

    def verify_x(self, x: float) -> None:
        min_x, max_x = self.world_bounds[0], self.world_bounds[1]
        if not (min_x <= x <= max_x):
            raise InvalidShapeError(f"Bad X value {x} is not in boundary [{min_x}, {max_x}]")

    def verify_y(self, y: float) -> None:
        min_y, max_y = self.world_bounds[2], self.world_bounds[3]
        if not (min_y <= y <= max_y):
            raise InvalidShapeError(f"Bad Y value {y} is not in boundary [{min_y}, {max_y}]")

    def normalize_x(self, x: float) -> float:
        if self.geo and self.normalize_wrap_longitude:
            return normalize_lon_deg(x)
        return x

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    def make_point(self, x: float, y: float) -> Point:
        x = self.normalize_x(x)
        self.verify_x(x)
        self.verify_y(y)
        return Point(x, y)

    def make_rectangle(self, min_x: float, max_x: float, min_y: float, max_y: float) -> Rectangle:
        """
        Build a verified rectangle in this context.

        In geodetic contexts a rectangle spanning 360 degrees or more becomes
        [-180, 180], and a dateline-crossing rectangle that starts at 180 or
        ends at -180 is rewritten without the crossing.

        Raises:
            InvalidShapeError: for coordinates outside world_bounds or an
                inverted Y range
        """
        if self.geo:
            if max_x - min_x >= WORLD_WIDTH:
                min_x, max_x = -180.0, 180.0
            else:
                min_x = self.normalize_x(min_x)
                max_x = self.normalize_x(max_x)
                if min_x == 180.0 and max_x != 180.0:
                    min_x = -180.0
                if max_x == -180.0 and min_x != -180.0:
                    max_x = 180.0
        self.verify_x(min_x)
        self.verify_x(max_x)
        self.verify_y(min_y)
        self.verify_y(max_y)
        return Rectangle(min_x, max_x, min_y, max_y, self)

    def __str__(self):
        return (f"SpatialContext(geo={self.geo}, calculator={self.distance_calculator!r}, "
                f"worldBounds={self.world_bounds})")


def _parse_flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    value = environ.get(name)
    if value is None or value == '':
        return default
    value = value.lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Unknown value for {name}: {value!r}. Use one of {_TRUE_VALUES + _FALSE_VALUES}.")


GEO = SpatialContext(geo=True)
CARTESIAN = SpatialContext(geo=False)
