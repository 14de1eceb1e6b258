"""
Arrows domain package.

Public API:
- Domain models: Coordinate, Route, ArrowMarker
- Distance: distance_meters, route_length_meters
- Heading: heading, segment_angle
- Planning: plan_arrows, ArrowPolicy
"""
from .models import ArrowMarker, Coordinate, Route
from .distance import distance_meters, route_length_meters
from .bearing import heading, segment_angle
from .policy import ArrowPolicy, default_arrow_policy, legacy_arrow_policy
from .planner import plan_arrows

__all__ = ["ArrowMarker",
           "Coordinate",
             "Route",
             "distance_meters",
             "route_length_meters",
             "heading",
             "segment_angle",
             "ArrowPolicy",
             "default_arrow_policy",
             "legacy_arrow_policy",
             "plan_arrows",
               ]
