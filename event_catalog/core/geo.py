"""Geographic helpers: disc sampling, longitude wraparound, distances.

Disc sampling uses inverse-transform sampling.  For a point uniform over
the area of a disc of radius R, the distance from the centre has CDF
F(r) = r² / R², so r = R · sqrt(u) with u ~ U(0, 1).  Using r = R · u
instead would crowd samples around the centre.

Offsets are converted to degrees with a flat-earth approximation that is
accurate for the few-kilometre radii this service works with.
"""

from __future__ import annotations

import math
from random import Random

METERS_PER_DEGREE_LATITUDE = 111_320.0
EARTH_RADIUS_METERS = 6_371_000.0


def normalize_longitude(lon: float) -> float:
    """Wrap *lon* into [-180, 180)."""
    lon = (lon + 180.0) % 360.0
    # tiny negative inputs round up to exactly 360.0
    if lon >= 360.0:
        lon -= 360.0
    return lon - 180.0


def random_offset(
    lat0: float,
    lon0: float,
    radius_meters: float,
    rng: Random,
) -> tuple[float, float]:
    """Return a (lat, lon) uniformly distributed inside a disc around (lat0, lon0).

    Draws exactly two values from *rng*: the radial ``u`` then the angle.
    """
    u = rng.random()
    r = radius_meters * math.sqrt(u)
    theta = rng.random() * 2.0 * math.pi

    meters_per_degree_lon = math.cos(math.radians(lat0)) * METERS_PER_DEGREE_LATITUDE

    d_lat = (r * math.sin(theta)) / METERS_PER_DEGREE_LATITUDE
    d_lon = (r * math.cos(theta)) / meters_per_degree_lon

    return lat0 + d_lat, normalize_longitude(lon0 + d_lon)


def haversine_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points, in metres."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_METERS * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
