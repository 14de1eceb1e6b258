#Purpose: Route fetching for the map display.
#Returns the route polyline between two endpoints, or None when there is no route.
#Uses OSRM /route with full geometry.
#Never raises for service failures: the caller keeps whatever it displayed before.

import logging
from typing import Optional

from arrows.models import Coordinate, Route
from routing.osrm_client import OSRMClient, OSRMError

logger = logging.getLogger(__name__)


class RouteService:
    """
    Route Fetcher.
    Wraps an OSRMClient (or anything with compute_route_geometry) and
    turns transport/service errors into a "no route" outcome.
    """
    def __init__(self, client: OSRMClient):
        self.client = client

    def fetch_route(self, start: Coordinate, end: Coordinate) -> Optional[Route]:
        """
        Fetch the driving route from start to end.

        Returns:
            Route (at least one point) or None if OSRM failed or returned
            an empty geometry.
        """
        try:
            route = self.client.compute_route_geometry(start, end)
        except OSRMError as e:
            logger.error(f"Error fetching route: {e}")
            return None

        if not route:
            logger.warning(
                "OSRM returned an empty route for %s -> %s",
                start.as_tuple(), end.as_tuple(),
            )
            return None

        logger.info(f"Fetched route with {len(route)} points")
        return route
