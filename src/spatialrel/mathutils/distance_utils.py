"""
Degree normalisation and great-circle helpers.

All angles are in degrees unless a function name ends with ``_rad``.
"""
import math

EARTH_MEAN_RADIUS_KM = 6371.0087714

DEGREES_TO_RADIANS = math.pi / 180.0
RADIANS_TO_DEGREES = 1.0 / DEGREES_TO_RADIANS

# Length of one degree of arc on the mean earth sphere
DEG_TO_KM = DEGREES_TO_RADIANS * EARTH_MEAN_RADIUS_KM
KM_TO_DEG = 1.0 / DEG_TO_KM


def normalize_lon_deg(lon_deg: float) -> float:
    """Map any longitude onto the canonical (-180, 180] range."""
    if -180.0 < lon_deg <= 180.0:
        return lon_deg
    off = (lon_deg + 180.0) % 360.0
    if off == 0:
        return 180.0
    return off - 180.0


def normalize_lat_deg(lat_deg: float) -> float:
    """Reflect any latitude back into [-90, 90] (crossing a pole flips direction)."""
    if -90.0 <= lat_deg <= 90.0:
        return lat_deg
    off = (lat_deg + 90.0) % 360.0
    if off > 180.0:
        off = 360.0 - off
    return off - 90.0


def distance_haversine_rad(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Central angle between two points, all values in radians."""
    if lat1 == lat2 and lon1 == lon2:
        return 0.0
    hsin_x = math.sin((lon1 - lon2) * 0.5)
    hsin_y = math.sin((lat1 - lat2) * 0.5)
    h = hsin_y * hsin_y + math.cos(lat1) * math.cos(lat2) * hsin_x * hsin_x
    # rounding can push h a hair above 1 for antipodal points
    if h > 1.0:
        h = 1.0
    return 2.0 * math.atan2(math.sqrt(h), math.sqrt(1.0 - h))


def dist_to_degrees(dist: float, radius: float = EARTH_MEAN_RADIUS_KM) -> float:
    return math.degrees(dist / radius)


def degrees_to_dist(degrees: float, radius: float = EARTH_MEAN_RADIUS_KM) -> float:
    return math.radians(degrees) * radius
