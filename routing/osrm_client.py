#Purpose: The OSRM “adapter/client”.
#Sole responsibility: talk to OSRM via HTTP and return normalized outputs.
#Encapsulates OSRM-specific details:
#coordinate formatting (lon,lat)
#URL construction (/route)
#timeouts and error handling
#parsing GeoJSON geometry into our Coordinate/Route types
#It should not contain arrow planning or scheduling.


from dotenv import load_dotenv
import os
from typing import List, Dict, Any, Optional
import requests

from arrows.models import Coordinate, Route

# Read OSRM base URL from environment
# Example in .env:
# BASE_URL=https://router.project-osrm.org
load_dotenv()
BASE_URL = os.getenv("BASE_URL")


class OSRMError(Exception):
    """Custom exception for OSRM client errors."""
    pass


class OSRMClient:
    """
    OSRM Adapter / Client

    Sole responsibility:
    - Talk to OSRM via HTTP
    - Convert internal Coordinate → OSRM (lon,lat)
    - Return normalized outputs

    """
    def __init__(self, profile: str = "driving", timeout: int = 5, base_url: Optional[str] = None):
        self.base_url = (base_url or BASE_URL or "").rstrip("/")
        self.timeout = timeout #the time to wait for a response from OSRM before giving up
        self.profile = profile #the mode of transportation (driving, walking, cycling)

        if not self.base_url:
            raise ValueError("OSRM base URL not set. Please set BASE_URL in the .env file.")

    #----------------
    # Internal helpers
    #----------------
    def format_coordinates(self, coords: List[Coordinate]) -> str:
        """Convert list of Coordinates to OSRM format 'lon,lat;lon,lat;...'"""
        return ';'.join([f"{c.longitude},{c.latitude}" for c in coords])

    def _get(self, coordinates: List[Coordinate], params: Dict[str, str]) -> Dict[str, Any]:
        if len(coordinates) < 2:
            raise ValueError("At least two coordinates are required to compute a route.")

        url = f"{self.base_url}/route/v1/{self.profile}/{self.format_coordinates(coordinates)}"

        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            data = response.json()
        except requests.RequestException as e:
            raise OSRMError(f"OSRM request failed: {e}") from e
        except ValueError as e:
            #body was not JSON (proxy error page, truncated response...)
            raise OSRMError(f"OSRM returned an invalid response: {e}") from e

        #JSON but not an object (list, string, null...)
        if not isinstance(data, dict):
            raise OSRMError(f"OSRM returned an invalid response: {type(data).__name__} body")

        #validating OSRM response
        if data.get("code") != "Ok":
            raise OSRMError(f"OSRM error: {data.get('message', 'Unknown error')}")

        if not data.get("routes"):
            raise OSRMError("OSRM returned no routes")

        return data

    #----------------
    # Public methods
    #----------------
    def compute_route_geometry(self, start: Coordinate, end: Coordinate) -> Route:
        """
        calls the OSRM /route endpoint with full GeoJSON overview and
        returns the route polyline as a list of Coordinates (travel order).
        """
        data = self._get(
            [start, end],
            params={
                "overview": "full", # full polyline, not simplified
                "geometries": "geojson",
            },
        )

        try:
            route = data["routes"][0] #take the first route (OSRM may return alternatives)
            points = (route.get("geometry") or {}).get("coordinates") or []

            #GeoJSON positions are [lon, lat]
            return [Coordinate.from_lon_lat(point) for point in points]
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            raise OSRMError(f"OSRM returned a malformed route: {e!r}") from e

    def compute_route(self, coordinates: List[Coordinate]) -> Dict[str, float]:
        """
        calls the OSRM /route endpoint without geometry and
        returns a dict with distance and duration

        Returns:
            {
                "distance": float, # in meters
                "duration": float, # in seconds
            }
        """
        data = self._get(
            coordinates,
            params={
                "overview": "false", # we don't need the geometry of the route
            },
        )

        try:
            route = data["routes"][0]

            #Normalize output to internal format
            return {
                "distance": float(route["distance"]),
                "duration": float(route["duration"]),
            }
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            raise OSRMError(f"OSRM returned a malformed route: {e!r}") from e
