"""Domain models for trip planning."""

from trans_planner.domain.models.error_details import ErrorDetails
from trans_planner.domain.models.journey import WALKING_MODE, Journey, Leg
from trans_planner.domain.models.journey_step import JourneyStep, LegAnnotations, StepKind
from trans_planner.domain.models.location import LocationPermission, LocationStatus
from trans_planner.domain.models.lookup_result import LookupResult
from trans_planner.domain.models.position import Position
from trans_planner.domain.models.route_tab import RouteTab
from trans_planner.domain.models.search_state import SearchField, SearchState
from trans_planner.domain.models.station import UNKNOWN_STATION_NAME, Station

__all__ = [
    "UNKNOWN_STATION_NAME",
    "WALKING_MODE",
    "ErrorDetails",
    "Journey",
    "JourneyStep",
    "Leg",
    "LegAnnotations",
    "LocationPermission",
    "LocationStatus",
    "LookupResult",
    "Position",
    "RouteTab",
    "SearchField",
    "SearchState",
    "Station",
    "StepKind",
]
