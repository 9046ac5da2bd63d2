"""Great-circle geometry helpers."""

import math

EARTH_RADIUS_KM = 6371.0


def to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180


def to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * 180 / math.pi


def normalize_longitude_delta(delta: float) -> float:
    """Wrap a longitude difference onto the shortest path, within [-180, 180)."""
    return (delta + 180) % 360 - 180


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the great-circle distance in kilometers between two points.

    The longitude difference is wrapped first, so points on either side of the
    antimeridian come out close together.
    """
    d_lat = to_radians(lat2 - lat1)
    d_lon = to_radians(normalize_longitude_delta(lon2 - lon1))
    a = math.sin(d_lat / 2) ** 2 + (
        math.cos(to_radians(lat1))
        * math.cos(to_radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c
