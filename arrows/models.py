"""
Purpose: Domain models for the Arrows capability.
What it does:
- Defines core data structures:
- Coordinate (latitude, longitude in decimal degrees)
- Route (ordered list of Coordinates, travel order)
- ArrowMarker (position, heading_degrees)

Rule: No HTTP calls, no distance math. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

LatLon = Tuple[float, float]


@dataclass(frozen=True)
class Coordinate:
    """
    A point on the map in decimal degrees.
    Range is not validated here: latitude should be in [-90, 90] and
    longitude in [-180, 180], callers are responsible for that.
    """
    latitude: float
    longitude: float

    @classmethod
    def from_lon_lat(cls, pair: Sequence[float]) -> Coordinate:
        # GeoJSON / OSRM order is [lon, lat]
        return cls(latitude=float(pair[1]), longitude=float(pair[0]))

    def as_tuple(self) -> LatLon:
        return (self.latitude, self.longitude)


# Ordered travel path, first element is the start of the route.
Route = List[Coordinate]


@dataclass(frozen=True)
class ArrowMarker:
    """
    A direction glyph to draw on top of a route.

    position already carries the latitude nudge that lifts the glyph off the
    route line. heading_degrees is the on-screen rotation for the glyph.
    """
    position: Coordinate
    heading_degrees: float
