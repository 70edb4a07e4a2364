"""Domain layer - core models and interfaces."""

from trans_planner.domain.models import (
    Journey,
    JourneyStep,
    Leg,
    Position,
    RouteTab,
    SearchField,
    SearchState,
    Station,
)
from trans_planner.domain.ports import (
    LocationPlatform,
    TransitGateway,
)

__all__ = [
    "Journey",
    "JourneyStep",
    "Leg",
    "LocationPlatform",
    "Position",
    "RouteTab",
    "SearchField",
    "SearchState",
    "Station",
    "TransitGateway",
]
