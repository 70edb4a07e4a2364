"""Incremental station search with debouncing and nearby suggestions."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from trans_planner.application.services.debouncer import Debouncer
from trans_planner.domain.contracts.search_resetter import SearchResetterProtocol
from trans_planner.domain.models.search_state import SearchField, SearchState

if TYPE_CHECKING:
    from collections.abc import Coroutine
    from typing import Any

    from trans_planner.application.services.location_service import LocationService
    from trans_planner.domain.models.location import LocationStatus
    from trans_planner.domain.models.station import Station
    from trans_planner.domain.ports import TransitGateway

logger = logging.getLogger(__name__)

# Default for queries one longer than the two-character network cut-off
MIN_SEARCH_LENGTH = 3
DEFAULT_DEBOUNCE_SECONDS = 0.3


class SearchOrchestrator(SearchResetterProtocol):
    """Owns the from/to search state and the single suggestion list.

    Input events (focus, text change, selection) mutate state synchronously and
    may start lookups in the background. Every lookup is tagged with a request
    number; its result is applied only if it is still the latest request, the
    orchestrator is open, and the target field is still active with the text the
    lookup was issued for. Anything else is dropped.
    """

    def __init__(
        self,
        gateway: TransitGateway,
        location_service: LocationService,
        state: SearchState | None = None,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        min_search_length: int = MIN_SEARCH_LENGTH,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            gateway: Remote station search service.
            location_service: Source of the device position.
            state: State object shared with the presentation layer.
            debounce_seconds: Quiet period after the last keystroke before searching.
            min_search_length: Shortest text that schedules a search; shorter text
                clears the suggestions.
        """
        self._gateway = gateway
        self._location_service = location_service
        self.state = state or SearchState()
        self._debounce_seconds = debounce_seconds
        self.min_search_length = min_search_length
        self._debouncer = Debouncer()
        self._tasks: set[asyncio.Task[None]] = set()
        self._latest_request = 0
        self._started = False
        self._closed = False

    @property
    def can_find_routes(self) -> bool:
        """Whether both stations are selected and distinct."""
        from_station = self.state.from_station
        to_station = self.state.to_station
        if from_station is None or to_station is None:
            return False
        return from_station.id != to_station.id

    @property
    def search_pending(self) -> bool:
        """Whether a debounced search is waiting for its quiet period to end."""
        return self._debouncer.is_pending

    async def start(self) -> LocationStatus:
        """Determine the device position and prefill nearby suggestions for "from".

        Runs once per session; later calls return the first outcome.
        """
        if self._started and self._location_service.status is not None:
            logger.warning("Search orchestrator already started")
            return self._location_service.status
        self._started = True

        status = await self._location_service.determine_position()
        self.state.position = self._location_service.position
        if self.state.position is not None and not self.state.from_text:
            await self._fetch_nearby(SearchField.FROM, self._next_request(), claim_idle=True)
        return status

    def on_field_focused(self, field: SearchField) -> None:
        """Handle a tap on a search field.

        Switching fields discards the other field's suggestions. An empty field
        gets nearby suggestions right away when the position is known.
        """
        self._require_field(field)
        if self.state.active_field is not field:
            self._debouncer.cancel()
            self._next_request()
            self.state.suggestions = ()
        self.state.active_field = field

        if not self.state.text_for(field) and self.state.position is not None:
            self._spawn(self._fetch_nearby(field, self._next_request()))

    def on_text_changed(self, field: SearchField, text: str) -> None:
        """Handle an edit of a search field.

        Clearing "from" with a known position shows nearby stops immediately.
        Short queries clear the suggestions. Longer ones arm the debounce timer,
        replacing any pending search.
        """
        self._require_field(field)
        self.state.active_field = field
        self.state.set_text(field, text)
        self._debouncer.cancel()
        request = self._next_request()

        if not text and field is SearchField.FROM and self.state.position is not None:
            self._spawn(self._fetch_nearby(field, request))
            return

        if len(text) < self.min_search_length:
            self.state.suggestions = ()
            return

        self._debouncer.arm(
            self._debounce_seconds, lambda: self._search(field, text, request)
        )

    def select_station(self, station: Station) -> bool:
        """Confirm a suggestion for the active field.

        Returns:
            False if no field was active, True otherwise.
        """
        field = self.state.active_field
        if field is SearchField.NONE:
            logger.warning(f"Ignoring selection of {station.name}: no active search field")
            return False

        self._debouncer.cancel()
        self._next_request()
        if field is SearchField.FROM:
            self.state.from_station = station
        else:
            self.state.to_station = station
        self.state.set_text(field, station.name)
        self.state.suggestions = ()
        self.state.active_field = SearchField.NONE
        self.state.notice = None
        logger.debug(f"Selected {station.name} ({station.id}) for {field}")
        return True

    def reset_selections(self) -> None:
        """Clear both selections, both texts and the suggestion list."""
        self._debouncer.cancel()
        self._next_request()
        self.state.from_station = None
        self.state.to_station = None
        self.state.from_text = ""
        self.state.to_text = ""
        self.state.suggestions = ()
        self.state.active_field = SearchField.NONE

    async def wait_idle(self) -> None:
        """Wait for lookups that are already running to complete."""
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        await self._debouncer.drain()

    async def close(self) -> None:
        """Tear down: cancel the timer and drop every later completion."""
        self._closed = True
        await self._debouncer.close()
        for task in self._tasks:
            task.cancel()
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    @staticmethod
    def _require_field(field: SearchField) -> None:
        if field is SearchField.NONE:
            raise ValueError("A concrete search field is required")

    def _next_request(self) -> int:
        self._latest_request += 1
        return self._latest_request

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> None:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _is_relevant(
        self, request: int, field: SearchField, text: str, claim_idle: bool = False
    ) -> bool:
        if self._closed or request != self._latest_request:
            return False
        active = self.state.active_field
        if active is not field and not (claim_idle and active is SearchField.NONE):
            return False
        return self.state.text_for(field) == text

    async def _fetch_nearby(
        self, field: SearchField, request: int, claim_idle: bool = False
    ) -> None:
        position = self.state.position
        if position is None:
            return

        result = await self._gateway.get_nearby_stops(position.latitude, position.longitude)
        if not result.ok:
            logger.debug(f"Nearby lookup failed: {result.error}")

        if not self._is_relevant(request, field, "", claim_idle=claim_idle):
            logger.debug(f"Dropping stale nearby suggestions for {field}")
            return
        self.state.active_field = field
        self.state.suggestions = tuple(result.unwrap_or([]))

    async def _search(self, field: SearchField, text: str, request: int) -> None:
        result = await self._gateway.search_stations(text, bias=self.state.position)
        if not result.ok:
            logger.debug(f"Station search for '{text}' failed: {result.error}")

        if not self._is_relevant(request, field, text):
            logger.debug(f"Dropping stale suggestions for '{text}'")
            return
        self.state.suggestions = tuple(result.unwrap_or([]))
