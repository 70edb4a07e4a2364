"""transport.rest gateway adapter for station search and journey routing."""

import logging
from typing import TYPE_CHECKING

from trans_planner.adapters.transport_rest.constants import DEFAULT_BASE_URL
from trans_planner.adapters.transport_rest.http_client import TransportRestHttpClient
from trans_planner.adapters.transport_rest.parsers import JourneyParser, StationParser
from trans_planner.domain.models.journey import Journey
from trans_planner.domain.models.lookup_result import LookupResult
from trans_planner.domain.models.position import Position
from trans_planner.domain.models.station import Station
from trans_planner.domain.ports.transit_gateway import TransitGateway

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from trans_planner.adapters.config.app_config import AppConfig

_DECODE_ERRORS = (ValueError, TypeError, AttributeError, KeyError)


class TransportRestGateway(TransitGateway):
    """Adapter for the transport.rest locations, nearby stops and journeys endpoints."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 10.0,
        search_results: int = 5,
        nearby_results: int = 3,
        min_query_length: int = 2,
    ) -> None:
        """Initialize with optional aiohttp session.

        Args:
            session: Optional aiohttp ClientSession for HTTP requests.
            base_url: Base URL of the transport.rest instance.
            timeout_seconds: Total timeout per request.
            search_results: Maximum suggestions requested per search.
            nearby_results: Maximum nearby stops returned.
            min_query_length: Queries shorter than this are answered locally.
        """
        self._http_client = TransportRestHttpClient(
            session=session, base_url=base_url, timeout_seconds=timeout_seconds
        )
        self._search_results = search_results
        self._nearby_results = nearby_results
        self._min_query_length = min_query_length

    @classmethod
    def from_config(
        cls, config: "AppConfig", session: "ClientSession | None" = None
    ) -> "TransportRestGateway":
        """Build a gateway from application configuration."""
        return cls(
            session=session,
            base_url=config.api_base_url,
            timeout_seconds=config.request_timeout_seconds,
            search_results=config.search_results,
            nearby_results=config.nearby_results,
            min_query_length=config.min_query_length,
        )

    async def search_stations(
        self, query: str, bias: Position | None = None
    ) -> LookupResult[list[Station]]:
        """Search for stations and stops by name.

        Args:
            query: Search text.
            bias: Optional device position used to localize results.

        Returns:
            Stations and stops only; addresses and POIs are dropped. Short queries
            yield an empty success without a request.
        """
        if len(query) < self._min_query_length:
            return LookupResult.success([])

        response = await self._http_client.fetch_locations(query, self._search_results, bias)
        if response.error is not None:
            return LookupResult(error=response.error)

        try:
            stations = StationParser.parse_stations(response.value, stations_only=True)
        except _DECODE_ERRORS as e:
            logger.warning(f"Could not parse station search results for '{query}': {e}")
            return LookupResult.failure(f"Decode error: {e}")

        logger.debug(f"Station search '{query}' returned {len(stations)} station(s)")
        return LookupResult.success(stations)

    async def get_nearby_stops(
        self, latitude: float, longitude: float
    ) -> LookupResult[list[Station]]:
        """Find the stops closest to a coordinate.

        Returns:
            At most ``nearby_results`` stops, closest first as reported by the API.
        """
        response = await self._http_client.fetch_nearby_stops(
            latitude, longitude, self._nearby_results
        )
        if response.error is not None:
            return LookupResult(error=response.error)

        try:
            stations = StationParser.parse_stations(response.value)
        except _DECODE_ERRORS as e:
            logger.warning(f"Could not parse nearby stops for {latitude},{longitude}: {e}")
            return LookupResult.failure(f"Decode error: {e}")

        return LookupResult.success(stations[: self._nearby_results])

    async def search_journey(self, from_id: str, to_id: str) -> LookupResult[Journey]:
        """Find the single best itinerary between two station ids.

        Returns:
            The itinerary, an empty result if the service found none, or a failure.
            Callers treat the last two the same way.
        """
        response = await self._http_client.fetch_journeys(from_id, to_id)
        if response.error is not None:
            return LookupResult(error=response.error)

        try:
            journey = JourneyParser.first_journey(response.value)
        except _DECODE_ERRORS as e:
            logger.warning(f"Could not parse journey {from_id} -> {to_id}: {e}")
            return LookupResult.failure(f"Decode error: {e}")

        if journey is None:
            logger.info(f"No journeys found from {from_id} to {to_id}")
            return LookupResult.empty()
        return LookupResult.success(journey)
