#Expose the refresh pipeline pieces:
#Policy (timers, home endpoints)
#State (what is on screen)
#Scheduler (cancellable periodic tasks)
#RouteRefresher (the “one call” entry point)

from .policy import RefreshPolicy, default_refresh_policy
from .perturbation import perturb
from .state import RouteState, RouteSnapshot
from .scheduler import PeriodicTask
from .controller import RouteRefresher

__all__ = [
    "RefreshPolicy",
    "default_refresh_policy",
    "perturb",
    "RouteState",
    "RouteSnapshot",
    "PeriodicTask",
    "RouteRefresher",
]
