"""Parsers for transport.rest location and journey responses."""

import logging
from datetime import datetime
from typing import Any

from trans_planner.adapters.transport_rest.constants import STATION_TYPES
from trans_planner.domain.models.journey import WALKING_MODE, Journey, Leg
from trans_planner.domain.models.station import UNKNOWN_STATION_NAME, Station

logger = logging.getLogger(__name__)


class StationParser:
    """Parses transport.rest location records into Station objects."""

    @staticmethod
    def parse_station(record: dict[str, Any]) -> Station:
        """Parse one location record.

        The name comes from the record itself, or from the nested ``location``
        object that /stops/nearby returns.
        """
        name = record.get("name") or UNKNOWN_STATION_NAME
        location = record.get("location")
        if isinstance(location, dict) and location.get("name"):
            name = location["name"]

        distance = record.get("distance")
        return Station(
            id=str(record.get("id") or ""),
            name=str(name),
            distance=float(distance) if isinstance(distance, int | float) else None,
        )

    @staticmethod
    def parse_stations(data: Any, stations_only: bool = False) -> list[Station]:
        """Parse a list of location records.

        Args:
            data: Decoded JSON response body.
            stations_only: Drop records whose type is not station or stop.

        Returns:
            Parsed stations in response order.

        Raises:
            ValueError: If the response is not a list.
        """
        if not isinstance(data, list):
            raise ValueError(f"expected a list of locations, got {type(data).__name__}")

        stations = []
        for record in data:
            if not isinstance(record, dict):
                continue
            if stations_only and record.get("type") not in STATION_TYPES:
                continue
            stations.append(StationParser.parse_station(record))
        return stations


class JourneyParser:
    """Parses transport.rest journey responses into Journey objects."""

    @staticmethod
    def _parse_time(value: Any) -> datetime:
        """Parse an ISO-8601 timestamp that carries a UTC offset."""
        if not isinstance(value, str) or not value:
            raise ValueError(f"missing timestamp: {value!r}")
        moment = datetime.fromisoformat(value.replace("Z", "+00:00"))
        if moment.tzinfo is None:
            raise ValueError(f"timestamp without UTC offset: {value!r}")
        return moment

    @staticmethod
    def _extract_mode(leg: dict[str, Any]) -> str:
        """Extract the leg mode, normalizing walking legs."""
        if leg.get("walking"):
            return WALKING_MODE
        mode = leg.get("mode")
        if mode:
            return str(mode)
        line = leg.get("line") or {}
        return str(line.get("mode") or line.get("product") or "")

    @staticmethod
    def _extract_destination(leg: dict[str, Any]) -> str:
        """Extract the destination name (stations carry a name, addresses an address)."""
        destination = leg.get("destination") or {}
        return str(destination.get("name") or destination.get("address") or UNKNOWN_STATION_NAME)

    @staticmethod
    def parse_leg(leg: dict[str, Any]) -> Leg:
        """Parse a single leg.

        Raises:
            ValueError: If the leg has no usable departure or arrival time.
        """
        line = leg.get("line") or {}
        line_name = line.get("name") if isinstance(line, dict) else None
        return Leg(
            mode=JourneyParser._extract_mode(leg),
            line_name=str(line_name) if line_name else None,
            destination_name=JourneyParser._extract_destination(leg),
            departure=JourneyParser._parse_time(
                leg.get("departure") or leg.get("plannedDeparture")
            ),
            arrival=JourneyParser._parse_time(leg.get("arrival") or leg.get("plannedArrival")),
        )

    @staticmethod
    def parse_journey(record: dict[str, Any]) -> Journey:
        """Parse one itinerary record.

        The overall arrival falls back to the last leg's arrival when the record
        does not carry one.

        Raises:
            ValueError: If the record or any of its legs is malformed.
        """
        raw_legs = record.get("legs")
        if not isinstance(raw_legs, list) or not raw_legs:
            raise ValueError("journey has no legs")

        legs = tuple(JourneyParser.parse_leg(leg) for leg in raw_legs)
        arrival_str = record.get("arrival")
        arrival = JourneyParser._parse_time(arrival_str) if arrival_str else legs[-1].arrival
        return Journey(legs=legs, arrival=arrival)

    @staticmethod
    def first_journey(data: Any) -> Journey | None:
        """Parse the first itinerary of a /journeys response, or None if there is none.

        Raises:
            ValueError: If the response shape or the itinerary is malformed.
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected a journeys object, got {type(data).__name__}")
        journeys = data.get("journeys")
        if not journeys:
            return None
        if not isinstance(journeys, list) or not isinstance(journeys[0], dict):
            raise ValueError("malformed journeys list")
        return JourneyParser.parse_journey(journeys[0])
