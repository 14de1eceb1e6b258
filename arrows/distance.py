"""
Purpose: Great-circle distance between two Coordinates (haversine).
Spherical earth of radius 6371 km, so expect ~0.3% error from flattening.
"""

import math

from .models import Coordinate, Route

EARTH_RADIUS_KM = 6371.0


def distance_meters(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance from a to b, in meters."""
    phi1 = math.radians(a.latitude)
    phi2 = math.radians(b.latitude)
    delta_phi = math.radians(b.latitude - a.latitude)
    delta_lambda = math.radians(b.longitude - a.longitude)

    x = math.sin(delta_phi / 2) ** 2 + \
        math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(x), math.sqrt(1 - x))

    return EARTH_RADIUS_KM * c * 1000.0


def route_length_meters(route: Route) -> float:
    """Sum of segment distances along the route. 0 for fewer than 2 points."""
    return sum(
        distance_meters(route[i], route[i + 1])
        for i in range(len(route) - 1)
    )
