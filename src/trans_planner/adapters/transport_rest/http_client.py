"""HTTP client for transport.rest requests.

API Documentation: https://v6.db.transport.rest/api.html
"""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from trans_planner.adapters.api_request_logger import log_api_request
from trans_planner.adapters.transport_rest.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_HEADERS,
    JOURNEY_RESULTS,
    JOURNEYS_PATH,
    LOCATIONS_PATH,
    NEARBY_STOPS_PATH,
)
from trans_planner.domain.models.lookup_result import LookupResult
from trans_planner.domain.models.position import Position

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class TransportRestHttpClient:
    """HTTP client for the transport.rest locations, nearby and journeys endpoints.

    Every method returns the decoded JSON body wrapped in a LookupResult. Non-200
    responses, transport errors, timeouts and undecodable bodies become failed
    results; nothing is raised to the caller.
    """

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize with optional aiohttp session.

        Args:
            session: aiohttp ClientSession shared by all requests.
            base_url: Base URL of the transport.rest instance.
            timeout_seconds: Total timeout per request.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def _log_error_response(self, response: "ClientResponse", url: str) -> None:
        """Log error response details."""
        error_text = await response.text()
        error_body = error_text[:200] if error_text else "(empty response body)"
        logger.warning(f"transport.rest returned status {response.status} for {url}: {error_body}")

    async def _get_json(self, path: str, params: dict[str, str]) -> LookupResult[Any]:
        """Issue a GET request and decode its JSON body."""
        if not self._session:
            return LookupResult.failure("No HTTP session available")

        url = f"{self._base_url}{path}"
        log_api_request("GET", url, params=params, headers=DEFAULT_HEADERS)

        try:
            async with self._session.get(
                url, params=params, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                if response.status != 200:
                    await self._log_error_response(response, url)
                    return LookupResult.failure(
                        f"HTTP {response.status}", status_code=response.status
                    )
                return LookupResult.success(await response.json(content_type=None))
        except TimeoutError:
            logger.warning(f"Timed out requesting {url}")
            return LookupResult.failure("Timeout")
        except aiohttp.ClientError as e:
            logger.warning(f"Error requesting {url}: {e}")
            return LookupResult.failure(f"Transport error: {e}")
        except ValueError as e:
            logger.warning(f"Could not decode response from {url}: {e}")
            return LookupResult.failure(f"Decode error: {e}")

    async def fetch_locations(
        self, query: str, results: int, bias: Position | None = None
    ) -> LookupResult[Any]:
        """Fetch /locations for a free-text query.

        Args:
            query: Search text.
            results: Maximum number of records.
            bias: Optional position passed as latitude/longitude.
        """
        params = {"query": query, "results": str(results)}
        if bias is not None:
            params["latitude"] = str(bias.latitude)
            params["longitude"] = str(bias.longitude)
        return await self._get_json(LOCATIONS_PATH, params)

    async def fetch_nearby_stops(
        self, latitude: float, longitude: float, results: int
    ) -> LookupResult[Any]:
        """Fetch /stops/nearby for a coordinate."""
        params = {
            "latitude": str(latitude),
            "longitude": str(longitude),
            "results": str(results),
        }
        return await self._get_json(NEARBY_STOPS_PATH, params)

    async def fetch_journeys(self, from_id: str, to_id: str) -> LookupResult[Any]:
        """Fetch /journeys between two station ids, asking for a single itinerary."""
        params = {"from": from_id, "to": to_id, "results": str(JOURNEY_RESULTS)}
        return await self._get_json(JOURNEYS_PATH, params)
