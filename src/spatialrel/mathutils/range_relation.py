"""
1D range relations, including longitude ranges that wrap at the dateline.

Both functions answer from the point of view of the internal range: CONTAINS
means the internal range holds the external one.
"""

from spatialrel.spatial_types import SpatialRelation

# Full sweep of longitude in degrees
WORLD_WIDTH = 360.0


def relate_range(int_min: float, int_max: float, ext_min: float, ext_max: float) -> SpatialRelation:
    """
    Relate an internal range [int_min, int_max] to an external one.

    Both ranges must already satisfy min <= max. Equal ranges yield
    CONTAINS, since containment is tested before WITHIN.
    """
    if ext_min > int_max or ext_max < int_min:
        return SpatialRelation.DISJOINT

    if ext_min >= int_min and ext_max <= int_max:
        return SpatialRelation.CONTAINS

    if ext_min <= int_min and ext_max >= int_max:
        return SpatialRelation.WITHIN

    return SpatialRelation.INTERSECTS


def unwrap_lon_range(min_x: float, max_x: float) -> float:
    """Return max_x moved past min_x when the range crosses the dateline."""
    raw_width = max_x - min_x
    if raw_width < 0:
        return min_x + (raw_width + WORLD_WIDTH)
    return max_x


def relate_lon_range(min_x: float, max_x: float, ext_min_x: float, ext_max_x: float) -> SpatialRelation:
    """
    Relate two longitude ranges in degrees, either of which may cross the dateline.

    A range with min_x > max_x crosses the dateline. Both ranges are
    unwrapped so that min <= max, then one of them is shifted by 360 so they
    sit in a common window before handing off to relate_range. A range that
    spans exactly 360 degrees short-circuits.
    """
    if max_x - min_x == WORLD_WIDTH:
        return SpatialRelation.CONTAINS
    max_x = unwrap_lon_range(min_x, max_x)

    if ext_max_x - ext_min_x == WORLD_WIDTH:
        return SpatialRelation.WITHIN
    ext_max_x = unwrap_lon_range(ext_min_x, ext_max_x)

    # shift to potentially overlap
    if max_x < ext_min_x:
        min_x += WORLD_WIDTH
        max_x += WORLD_WIDTH
    elif ext_max_x < min_x:
        ext_min_x += WORLD_WIDTH
        ext_max_x += WORLD_WIDTH

    return relate_range(min_x, max_x, ext_min_x, ext_max_x)
