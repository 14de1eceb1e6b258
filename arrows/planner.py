"""
Purpose: Turn a route polyline into direction arrows.
What it does:
Walks the route segment by segment, accumulating haversine distance.
Every time the running total reaches the spacing, an arrow is dropped at the
midpoint of the current segment and the total starts again from zero.
The last point of the route always gets an arrow.

Midpoints are plain coordinate averages, not interpolated along the geodesic.
"""

import logging
from typing import List, Optional

from .bearing import heading
from .distance import distance_meters
from .models import ArrowMarker, Coordinate, Route
from .policy import ArrowPolicy, default_arrow_policy

logger = logging.getLogger(__name__)


def _midpoint(a: Coordinate, b: Coordinate) -> Coordinate:
    return Coordinate(
        latitude=(a.latitude + b.latitude) / 2,
        longitude=(a.longitude + b.longitude) / 2,
    )


def _marker(point: Coordinate, heading_degrees: float, policy: ArrowPolicy) -> ArrowMarker:
    return ArrowMarker(
        position=Coordinate(
            latitude=point.latitude + policy.latitude_offset,
            longitude=point.longitude,
        ),
        heading_degrees=heading_degrees,
    )


def plan_arrows(
    route: Route,
    spacing_meters: Optional[float] = None,
    *,
    policy: Optional[ArrowPolicy] = None,
) -> List[ArrowMarker]:
    """
    Place arrow markers along a route.

    Args:
        route: ordered coordinates, travel order
        spacing_meters: distance between arrows, overrides policy.spacing_meters
        policy: ArrowPolicy (offset, heading scale, default spacing)

    Returns:
        List[ArrowMarker] in travel order. Empty if the route has fewer than
        2 points, otherwise at least one (the arrow on the last point).
        A spacing <= 0 puts an arrow on every segment.
    """
    if policy is None:
        policy = default_arrow_policy()
    else:
        policy.validate()

    if spacing_meters is None:
        spacing_meters = policy.spacing_meters

    #no segment, nothing to point along
    if len(route) < 2:
        return []

    arrows: List[ArrowMarker] = []
    accumulated = 0.0

    for index in range(len(route) - 1):
        start, end = route[index], route[index + 1]
        accumulated += distance_meters(start, end)

        if accumulated >= spacing_meters:
            # k-th arrow takes heading(route, k)
            angle = heading(route, len(arrows), degrees_per_radian=policy.degrees_per_radian)
            arrows.append(_marker(_midpoint(start, end), angle, policy))
            accumulated = 0.0

    # final arrow, whatever distance is left over
    final_angle = heading(route, len(route) - 1, degrees_per_radian=policy.degrees_per_radian)
    arrows.append(_marker(route[-1], final_angle, policy))

    logger.debug(
        "Planned %d arrows over %d route points (spacing %.0f m)",
        len(arrows), len(route), spacing_meters,
    )
    return arrows
