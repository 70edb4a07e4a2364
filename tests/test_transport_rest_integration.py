"""End-to-end integration tests against the public transport.rest API."""

import pytest

from trans_planner.adapters.transport_rest import TransportRestGateway
from trans_planner.domain.models import Position


@pytest.mark.integration
@pytest.mark.asyncio
async def test_search_and_route_berlin_hbf_to_potsdam_hbf() -> None:
    """Test that stations can be found and routed between on the live API."""
    import aiohttp

    async with aiohttp.ClientSession() as session:
        gateway = TransportRestGateway(session=session, timeout_seconds=30)

        origins = (await gateway.search_stations("Berlin Hbf")).unwrap_or([])
        destinations = (await gateway.search_stations("Potsdam Hbf")).unwrap_or([])
        assert origins, "Should find Berlin Hbf"
        assert destinations, "Should find Potsdam Hbf"

        result = await gateway.search_journey(origins[0].id, destinations[0].id)

        assert result.value is not None, f"Should find a journey, got {result.error}"
        assert result.value.legs


@pytest.mark.integration
@pytest.mark.asyncio
async def test_nearby_stops_around_alexanderplatz() -> None:
    """Test that nearby stops carry distances and respect the result cap."""
    import aiohttp

    async with aiohttp.ClientSession() as session:
        gateway = TransportRestGateway(session=session, timeout_seconds=30)
        here = Position(latitude=52.5219, longitude=13.4132)

        stops = (await gateway.get_nearby_stops(here.latitude, here.longitude)).unwrap_or([])

        assert 0 < len(stops) <= 3
        assert all(stop.distance is not None for stop in stops)
