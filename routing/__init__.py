#Marks routing as a package.
#Re-exports clean public APIs (OSRMClient, RouteService) so other modules
#import from routing without knowing internal file names.
#No business logic.

from .osrm_client import OSRMClient, OSRMError
from .route_service import RouteService

__all__ = [
           "OSRMClient",
             "OSRMError",
             "RouteService",
             ]
