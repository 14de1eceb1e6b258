from dataclasses import dataclass

from arrows.models import Coordinate


@dataclass(frozen=True)
class MapRegion:
    center: Coordinate
    latitude_delta: float
    longitude_delta: float


def region_for(start: Coordinate, end: Coordinate, padding: float = 0.1) -> MapRegion:
    """Initial viewport framing both endpoints, padded by `padding` degrees."""
    return MapRegion(
        center=Coordinate(
            latitude=(start.latitude + end.latitude) / 2,
            longitude=(start.longitude + end.longitude) / 2,
        ),
        latitude_delta=abs(start.latitude - end.latitude) + padding,
        longitude_delta=abs(start.longitude - end.longitude) + padding,
    )
