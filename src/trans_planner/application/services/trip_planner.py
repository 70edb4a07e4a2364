"""Find-routes use case."""

import logging
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from trans_planner.application.services.journey_presenter import JourneyPresenter
    from trans_planner.application.services.route_tab_manager import RouteTabManager
    from trans_planner.application.services.search_orchestrator import SearchOrchestrator
    from trans_planner.domain.models.route_tab import RouteTab
    from trans_planner.domain.models.search_state import SearchState
    from trans_planner.domain.ports import TransitGateway

NO_ROUTES_NOTICE = "No routes found."


class TripPlanner:
    """Requests a journey for the selected stations and opens it as a tab."""

    def __init__(
        self,
        orchestrator: "SearchOrchestrator",
        gateway: "TransitGateway",
        presenter: "JourneyPresenter",
        tab_manager: "RouteTabManager",
    ) -> None:
        """Initialize the use case with its collaborators."""
        self.orchestrator = orchestrator
        self._gateway = gateway
        self._presenter = presenter
        self.tab_manager = tab_manager

    @property
    def state(self) -> "SearchState":
        """Search state shared with the presentation layer."""
        return self.orchestrator.state

    async def find_routes(self) -> "RouteTab | None":
        """Look up a journey between the selected stations.

        Requires two distinct selections and no lookup in progress. Any failure
        or empty answer sets the "No routes found." notice.

        Returns:
            The new active tab, or None.
        """
        state = self.state
        from_station = state.from_station
        to_station = state.to_station
        if from_station is None or to_station is None or not self.orchestrator.can_find_routes:
            logger.warning("Cannot find routes: select two different stations first")
            return None
        if state.is_loading:
            logger.warning("Route lookup already in progress")
            return None

        state.is_loading = True
        state.notice = None
        try:
            result = await self._gateway.search_journey(from_station.id, to_station.id)
        finally:
            state.is_loading = False

        journey = result.value
        if journey is None:
            reason = result.error.reason if result.error else "no itineraries"
            logger.info(f"No routes from {from_station.name} to {to_station.name} ({reason})")
            state.notice = NO_ROUTES_NOTICE
            return None

        tab = self._presenter.present(journey, from_station, to_station)
        self.tab_manager.add_tab(tab)
        return tab
