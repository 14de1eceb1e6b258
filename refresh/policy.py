"""
Purpose: Central configuration for the route refresh cycle.
What it does:

Stores the timers and the two "home" endpoints:

REFRESH_INTERVAL = 600 s (10 minutes)
PERTURB_INTERVAL = 600 s
JITTER = 0.01 degrees (endpoints move within +/- 0.005)
HOME_START = New Delhi, HOME_END = Gurugram

Rule: No logic here—just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

from dataclasses import dataclass

from arrows.models import Coordinate


@dataclass(frozen=True)
class RefreshPolicy:
    """
    Central configuration for periodic route refresh.
    """

    # --- Timers ---
    # Re-fetch the route for the current endpoints this often.
    interval_seconds: float = 600.0

    # Move both endpoints around their home position this often.
    perturb_interval_seconds: float = 600.0

    # --- Endpoint jitter ---
    # Full width of the uniform jitter box, in degrees.
    jitter_degrees: float = 0.01

    # --- Home endpoints ---
    home_start: Coordinate = Coordinate(28.6139, 77.2090)  # New Delhi
    home_end: Coordinate = Coordinate(28.4595, 77.0266)    # Gurugram

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.interval_seconds <= 0:
            raise ValueError("interval_seconds must be > 0")

        if self.perturb_interval_seconds <= 0:
            raise ValueError("perturb_interval_seconds must be > 0")

        if self.jitter_degrees < 0:
            raise ValueError("jitter_degrees must be >= 0")


def default_refresh_policy() -> RefreshPolicy:
    """
    Convenience factory for the default policy.
    """
    p = RefreshPolicy()
    p.validate()
    return p
