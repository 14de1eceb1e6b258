import pytest

from arrows.models import Coordinate


@pytest.fixture
def delhi_route():
    # short diagonal route, every segment heads north-east
    return [
        Coordinate(28.60, 77.20),
        Coordinate(28.61, 77.21),
        Coordinate(28.62, 77.22),
    ]


@pytest.fixture
def turning_route():
    # east, then north
    return [
        Coordinate(0.0, 0.0),
        Coordinate(0.0, 0.01),
        Coordinate(0.01, 0.01),
    ]
