"""
Purpose: Heading (glyph rotation) for an arrow along a route.

The angle is planar: latitude/longitude degrees are treated as a flat x/y
grid, which is only good enough for short segments. It is meant for rotating
a marker on screen, not for navigation.
"""

import math
from typing import Optional

from .models import Coordinate, Route

STANDARD_DEGREES_PER_RADIAN = 180.0 / math.pi

# Scale used by the first mobile client. Doubles every angle.
LEGACY_DEGREES_PER_RADIAN = 360.0 / math.pi


def segment_angle(
    start: Coordinate,
    end: Coordinate,
    degrees_per_radian: float = STANDARD_DEGREES_PER_RADIAN,
) -> float:
    """atan2(dlat, dlon) scaled to degrees. East is 0, north is +90."""
    delta_latitude = end.latitude - start.latitude
    delta_longitude = end.longitude - start.longitude
    return math.atan2(delta_latitude, delta_longitude) * degrees_per_radian


def heading(
    route: Route,
    index: int,
    *,
    degrees_per_radian: float = STANDARD_DEGREES_PER_RADIAN,
) -> Optional[float]:
    """
    Heading for the arrow at `index` (0-based, emission order).

    - index 0: first segment (route[0] -> route[1])
    - index len(route) - 1: last segment (route[-2] -> route[-1])
    - anything else: route[index - 1] -> route[index]

    Returns None when the route has no segment or index is out of bounds.
    """
    last_index = len(route) - 1
    if last_index < 1:
        return None
    if index < 0 or index > last_index:
        return None

    if index == 0:
        start, end = route[0], route[1]
    elif index == last_index:
        start, end = route[-2], route[-1]
    else:
        start, end = route[index - 1], route[index]

    return segment_angle(start, end, degrees_per_radian)
