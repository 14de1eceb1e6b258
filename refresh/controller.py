"""
Purpose: Orchestrator / refresh pipeline (the "glue").
What it does:
Fetches the route for the current endpoints, plans the arrows, stores both
and hands them to the renderer. Owns the two scheduled tasks:
- route refresh (fixed interval)
- endpoint perturbation (fixed interval, triggers a refresh on change)
"""

import logging
import random
import threading
from typing import Optional

from arrows.planner import plan_arrows
from arrows.policy import ArrowPolicy, default_arrow_policy
from routing.route_service import RouteService
from .perturbation import perturb
from .policy import RefreshPolicy, default_refresh_policy
from .scheduler import PeriodicTask
from .state import RouteState

logger = logging.getLogger(__name__)


class RouteRefresher:
    """
    Coordinates Route Fetcher -> arrow planner -> renderer.

    The renderer is anything with render(start, end, route, arrows).
    """
    def __init__(
        self,
        route_service: RouteService,
        state: Optional[RouteState] = None,
        *,
        arrow_policy: Optional[ArrowPolicy] = None,
        refresh_policy: Optional[RefreshPolicy] = None,
        renderer=None,
        rng: Optional[random.Random] = None,
    ):
        self.route_service = route_service
        self.arrow_policy = arrow_policy or default_arrow_policy()
        self.refresh_policy = refresh_policy or default_refresh_policy()
        self.state = state or RouteState(
            start=self.refresh_policy.home_start,
            end=self.refresh_policy.home_end,
        )
        self.renderer = renderer
        self.rng = rng or random.Random()
        self._publish_lock = threading.Lock()

        self._refresh_task = PeriodicTask(
            "route-refresh", self.refresh_policy.interval_seconds, self.refresh
        )
        self._perturb_task = PeriodicTask(
            "endpoint-perturb", self.refresh_policy.perturb_interval_seconds, self.perturb_endpoints
        )

    def refresh(self) -> bool:
        """
        One full cycle. Returns True if the displayed route was replaced.
        On "no route" the previous route and arrows stay as they are.
        """
        start, end = self.state.endpoints()
        route = self.route_service.fetch_route(start, end)
        if route is None:
            logger.warning("No route available, keeping previous route and arrows")
            return False

        arrows = plan_arrows(route, policy=self.arrow_policy)

        # fetch runs unlocked, store + render are serialized across both timers
        with self._publish_lock:
            if not self.state.replace(route, arrows, start, end):
                logger.info("Endpoints moved during fetch, dropping stale route")
                return False
            logger.info(f"Route refreshed: {len(route)} points, {len(arrows)} arrows")

            if self.renderer is not None:
                self.renderer.render(start, end, route, arrows)
        return True

    def perturb_endpoints(self) -> bool:
        """
        Move both endpoints around their home. Refreshes right away if they changed.
        """
        policy = self.refresh_policy
        start = perturb(policy.home_start, policy.jitter_degrees, self.rng)
        end = perturb(policy.home_end, policy.jitter_degrees, self.rng)

        if not self.state.set_endpoints(start, end):
            return False

        logger.info(f"Endpoints moved to {start.as_tuple()} -> {end.as_tuple()}")
        return self.refresh()

    # --- Lifecycle ---

    def start(self) -> None:
        """Mount: refresh once now, then keep both timers running."""
        self.refresh()
        self._refresh_task.start()
        self._perturb_task.start()

    def stop(self) -> None:
        """Teardown: cancel both timers."""
        self._refresh_task.cancel()
        self._perturb_task.cancel()

    @property
    def is_running(self) -> bool:
        return self._refresh_task.is_running or self._perturb_task.is_running

    def __enter__(self) -> "RouteRefresher":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
