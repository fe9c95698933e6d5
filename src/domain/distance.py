"""
Distance calculation using the Haversine formula.

Assumption
----------
The Earth is treated as a sphere with a mean radius of 6371 km.  This
keeps the calculation to a handful of trig calls; the error against an
ellipsoidal model stays below ~0.5 %.

Complexity: O(1) per call.
"""

import math

from .entities import Coordinate

EARTH_RADIUS_KM = 6_371.0
METERS_PER_KM = 1_000.0


def _deg_to_rad(deg: float) -> float:
    return deg * (math.pi / 180.0)


def haversine_meters(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """Return the great-circle distance in **meters** between two points.

    Any non-finite input (nan, +/-inf) yields ``nan``.
    """
    if not all(map(math.isfinite, (lat1, lon1, lat2, lon2))):
        return math.nan

    lat1_r, lon1_r = _deg_to_rad(lat1), _deg_to_rad(lon1)
    lat2_r, lon2_r = _deg_to_rad(lat2), _deg_to_rad(lon2)
    dlat = lat2_r - lat1_r
    dlon = lon2_r - lon1_r

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlon / 2) ** 2
    )
    # rounding can push a just past 1.0 near the antipode
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c * METERS_PER_KM


def distance_between(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in meters between two coordinates."""
    return haversine_meters(a.latitude, a.longitude, b.latitude, b.longitude)
