"""Route tab lifecycle and selection."""

import logging
from typing import TYPE_CHECKING

from trans_planner.domain.models.route_tab import RouteTab

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from trans_planner.domain.contracts import SearchResetterProtocol


class RouteTabManager:
    """Owns the open route tabs and which one is active.

    No active tab means the search view is shown.
    """

    def __init__(self, search_resetter: "SearchResetterProtocol | None" = None) -> None:
        """Initialize with an optional hook that clears the search on add_tab."""
        self._search_resetter = search_resetter
        self._tabs: list[RouteTab] = []
        self._active_tab_id: str | None = None

    @property
    def tabs(self) -> tuple[RouteTab, ...]:
        """Open tabs in creation order."""
        return tuple(self._tabs)

    @property
    def active_tab_id(self) -> str | None:
        """Identifier of the active tab, or None for the search view."""
        return self._active_tab_id

    @property
    def active_tab(self) -> RouteTab | None:
        """The active tab, or None for the search view."""
        return next((t for t in self._tabs if t.id == self._active_tab_id), None)

    def add_tab(self, tab: RouteTab) -> None:
        """Append a tab, make it active and reset the search."""
        self._tabs.append(tab)
        self._active_tab_id = tab.id
        if self._search_resetter is not None:
            self._search_resetter.reset_selections()
        logger.info(f"Opened route tab '{tab.title}' ({len(self._tabs)} open)")

    def close_tab(self, tab_id: str) -> bool:
        """Remove a tab.

        Closing the active tab activates the last remaining one, or the search
        view if none remain. Closing any other tab keeps the active tab.

        Returns:
            False if no tab has that id.
        """
        remaining = [t for t in self._tabs if t.id != tab_id]
        if len(remaining) == len(self._tabs):
            logger.debug(f"No route tab {tab_id} to close")
            return False

        self._tabs = remaining
        if self._active_tab_id == tab_id:
            self._active_tab_id = self._tabs[-1].id if self._tabs else None
        return True

    def select_tab(self, tab_id: str) -> None:
        """Make an open tab active.

        Raises:
            KeyError: If no tab has that id.
        """
        if not any(t.id == tab_id for t in self._tabs):
            raise KeyError(tab_id)
        self._active_tab_id = tab_id

    def deselect_all(self) -> None:
        """Show the search view without closing any tab."""
        self._active_tab_id = None
