"""
Distance and area calculators used by SpatialContext.

The relation code never measures anything itself; it only asks the context's
calculator for the area of a rectangle. Calculators work on any object
exposing the Point (x, y) or Rectangle (width, min_y, max_y, height)
attributes.
"""

import math
from abc import ABC, abstractmethod

from .distance_utils import RADIANS_TO_DEGREES, distance_haversine_rad


class DistanceCalculator(ABC):
    """Measures distances between points and areas of rectangles."""

    @abstractmethod
    def distance(self, from_point, to_point) -> float:
        pass

    @abstractmethod
    def area(self, rect) -> float:
        pass


class CartesianDistanceCalculator(DistanceCalculator):
    """Euclidean plane; area is simply width * height."""

    def distance(self, from_point, to_point) -> float:
        return math.hypot(to_point.x - from_point.x, to_point.y - from_point.y)

    def area(self, rect) -> float:
        return rect.width * rect.height

    def __repr__(self):
        return "CartesianDistanceCalculator()"


class SphericalDistanceCalculator(DistanceCalculator):
    """
    Great-circle distances and areas on a sphere, in degree units.

    The default radius is one radian expressed in degrees, so distances come
    back as central angles in degrees and the whole globe has an area of
    4 * pi * radius**2 square degrees.
    """

    def __init__(self, radius: float = RADIANS_TO_DEGREES):
        self.radius = radius

    def distance(self, from_point, to_point) -> float:
        angle = distance_haversine_rad(
            math.radians(from_point.y), math.radians(from_point.x),
            math.radians(to_point.y), math.radians(to_point.x),
        )
        return angle * self.radius

    def area(self, rect) -> float:
        lat1 = math.radians(rect.min_y)
        lat2 = math.radians(rect.max_y)
        return self.radius * self.radius * math.radians(rect.width) * abs(math.sin(lat2) - math.sin(lat1))

    def __repr__(self):
        return f"SphericalDistanceCalculator(radius={self.radius})"
