"""Errors raised by spatialrel."""


class InvalidShapeError(ValueError):
    """
    A shape was built from coordinates that violate its invariants.

    Raised for an inverted Y range, NaN coordinates, and coordinates
    outside the world bounds of a SpatialContext.
    """
    pass
