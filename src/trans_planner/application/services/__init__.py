"""Application services (use cases) for trip planning."""

from trans_planner.application.services.debouncer import Debouncer
from trans_planner.application.services.journey_presenter import JourneyPresenter
from trans_planner.application.services.location_service import LocationService
from trans_planner.application.services.route_tab_manager import RouteTabManager
from trans_planner.application.services.search_orchestrator import SearchOrchestrator
from trans_planner.application.services.trip_planner import NO_ROUTES_NOTICE, TripPlanner

__all__ = [
    "NO_ROUTES_NOTICE",
    "Debouncer",
    "JourneyPresenter",
    "LocationService",
    "RouteTabManager",
    "SearchOrchestrator",
    "TripPlanner",
]
