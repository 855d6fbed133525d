"""Geospatial helpers."""

from __future__ import annotations

import math
from math import atan2, cos, degrees, radians, sin, sqrt


EARTH_RADIUS_METERS = 6_371_000


def is_valid_coordinate(value: object) -> bool:
    """Return ``True`` for a real, finite number."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_valid_point(latitude: object, longitude: object) -> bool:
    """Both coordinates must be present and finite for any geo operation."""

    return is_valid_coordinate(latitude) and is_valid_coordinate(longitude)


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the distance between two coordinates in meters."""

    phi1 = radians(lat1)
    phi2 = radians(lat2)
    delta_phi = radians(lat2 - lat1)
    delta_lambda = radians(lon2 - lon1)

    a = sin(delta_phi / 2) ** 2 + cos(phi1) * cos(phi2) * sin(delta_lambda / 2) ** 2
    c = 2 * atan2(sqrt(a), sqrt(1 - a))

    return EARTH_RADIUS_METERS * c


def initial_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the compass bearing from the first to the second point, in [0, 360)."""

    phi1 = radians(lat1)
    phi2 = radians(lat2)
    delta_lambda = radians(lon2 - lon1)

    y = sin(delta_lambda) * cos(phi2)
    x = cos(phi1) * sin(phi2) - sin(phi1) * cos(phi2) * cos(delta_lambda)

    return (degrees(atan2(y, x)) + 360) % 360
