"""
Purpose: In-memory state of what the map is showing.
What it does:
- Holds the current start/end endpoints
- Holds the last good route and its arrows
- Swaps route + arrows together so readers never see a mix of two refreshes

Rule: State owns storage, controller owns when it changes.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

from arrows.models import ArrowMarker, Coordinate, Route


@dataclass(frozen=True)
class RouteSnapshot:
    start: Coordinate
    end: Coordinate
    route: Route
    arrows: List[ArrowMarker]
    updated_at: Optional[datetime] = None


@dataclass
class RouteState:
    """
    Thread-safe holder. Both scheduled tasks and the caller touch it.
    """
    start: Coordinate
    end: Coordinate
    route: Route = field(default_factory=list)
    arrows: List[ArrowMarker] = field(default_factory=list)
    updated_at: Optional[datetime] = None

    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def endpoints(self) -> Tuple[Coordinate, Coordinate]:
        with self._lock:
            return self.start, self.end

    def set_endpoints(self, start: Coordinate, end: Coordinate) -> bool:
        """
        Returns True if either endpoint actually changed.
        """
        with self._lock:
            changed = (start != self.start) or (end != self.end)
            self.start = start
            self.end = end
            return changed

    def replace(
        self,
        route: Route,
        arrows: List[ArrowMarker],
        start: Optional[Coordinate] = None,
        end: Optional[Coordinate] = None,
    ) -> bool:
        """
        Discard the previous route and arrows wholesale.

        If start/end are given they are the endpoints the route was fetched
        for; a route for endpoints that have since moved is dropped and
        False is returned.
        """
        with self._lock:
            if start is not None and start != self.start:
                return False
            if end is not None and end != self.end:
                return False

            self.route = list(route)
            self.arrows = list(arrows)
            self.updated_at = datetime.now()
            return True

    def snapshot(self) -> RouteSnapshot:
        with self._lock:
            return RouteSnapshot(
                start=self.start,
                end=self.end,
                route=list(self.route),
                arrows=list(self.arrows),
                updated_at=self.updated_at,
            )
