"""Transit gateway port."""

from typing import Protocol

from trans_planner.domain.models.journey import Journey
from trans_planner.domain.models.lookup_result import LookupResult
from trans_planner.domain.models.position import Position
from trans_planner.domain.models.station import Station


class TransitGateway(Protocol):
    """Port for the remote station search and journey routing service.

    Implementations never raise: every failure is reported as a failed
    ``LookupResult``.
    """

    async def search_stations(
        self, query: str, bias: Position | None = None
    ) -> LookupResult[list[Station]]:
        """Search stations and stops by free text, optionally biased by position."""
        ...

    async def get_nearby_stops(
        self, latitude: float, longitude: float
    ) -> LookupResult[list[Station]]:
        """Find the stops closest to the given coordinates."""
        ...

    async def search_journey(self, from_id: str, to_id: str) -> LookupResult[Journey]:
        """Find the single best itinerary between two stations."""
        ...
