import math

from arrows.models import Coordinate


def straight_route_east(num_points, spacing_m, latitude=0.0, start_longitude=0.0):
    """
    Points due east along a parallel, spacing_m apart.
    On the equator the haversine distance between them is exactly spacing_m.
    """
    step_degrees = math.degrees(spacing_m / (6371.0 * 1000.0))
    return [
        Coordinate(latitude, start_longitude + i * step_degrees)
        for i in range(num_points)
    ]
