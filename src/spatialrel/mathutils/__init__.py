"""Numeric helpers: range relations, degree normalisation, area/distance calculators."""

from .range_relation import relate_range, relate_lon_range, unwrap_lon_range, WORLD_WIDTH
from .distance_utils import normalize_lon_deg, normalize_lat_deg
from .distance_calculator import (
    DistanceCalculator,
    CartesianDistanceCalculator,
    SphericalDistanceCalculator,
)

__all__ = [
    'relate_range',
    'relate_lon_range',
    'unwrap_lon_range',
    'WORLD_WIDTH',
    'normalize_lon_deg',
    'normalize_lat_deg',
    'DistanceCalculator',
    'CartesianDistanceCalculator',
    'SphericalDistanceCalculator',
]
