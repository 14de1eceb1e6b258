"""
Purpose: Central configuration for arrow placement.
What it does:

Stores all tunable values for the arrow planner:

SPACING_METERS = 2500
LATITUDE_OFFSET = 0.0001 degrees
DEGREES_PER_RADIAN = 180 / pi (or 360 / pi for the legacy scale)

Rule: No logic here—just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

from dataclasses import dataclass

from .bearing import LEGACY_DEGREES_PER_RADIAN, STANDARD_DEGREES_PER_RADIAN


@dataclass(frozen=True)
class ArrowPolicy:
    """
    Central configuration for arrow planning.
    """

    # --- Spacing ---
    # Real-world distance accumulated along the route before an arrow is dropped.
    spacing_meters: float = 2500.0

    # --- Visual offset ---
    # Added to every arrow latitude so the glyph does not sit on the line.
    # Fixed in degrees, not scaled by zoom or latitude.
    latitude_offset: float = 0.0001

    # --- Heading scale ---
    # Multiplier applied to the atan2 result (radians).
    degrees_per_radian: float = STANDARD_DEGREES_PER_RADIAN

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.spacing_meters <= 0:
            raise ValueError("spacing_meters must be > 0")

        if self.degrees_per_radian <= 0:
            raise ValueError("degrees_per_radian must be > 0")


def default_arrow_policy() -> ArrowPolicy:
    """
    Convenience factory for the default policy.
    """
    p = ArrowPolicy()
    p.validate()
    return p


def legacy_arrow_policy() -> ArrowPolicy:
    """
    Same placement, but headings use the 360/pi scale of the first client
    so existing glyph assets keep rotating the way they used to.
    """
    p = ArrowPolicy(degrees_per_radian=LEGACY_DEGREES_PER_RADIAN)
    p.validate()
    return p
