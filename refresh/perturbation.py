"""
Purpose: Random drift of the route endpoints around their home position.
"""

import random
from typing import Optional

from arrows.models import Coordinate


def perturb(home: Coordinate, jitter_degrees: float, rng: Optional[random.Random] = None) -> Coordinate:
    """
    New coordinate within +/- jitter_degrees / 2 of home on both axes.
    """
    rng = rng or random.Random()
    return Coordinate(
        latitude=home.latitude + (rng.random() - 0.5) * jitter_degrees,
        longitude=home.longitude + (rng.random() - 0.5) * jitter_degrees,
    )
