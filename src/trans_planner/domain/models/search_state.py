"""Search session state."""

from dataclasses import dataclass
from enum import StrEnum

from trans_planner.domain.models.position import Position
from trans_planner.domain.models.station import Station


class SearchField(StrEnum):
    """Which input field currently owns the suggestion list."""

    NONE = "none"
    FROM = "from"
    TO = "to"


@dataclass
class SearchState:
    """Transient search state read by the presentation layer.

    Only the search orchestrator and trip planner mutate it.
    """

    from_text: str = ""
    to_text: str = ""
    from_station: Station | None = None
    to_station: Station | None = None
    suggestions: tuple[Station, ...] = ()
    active_field: SearchField = SearchField.NONE
    position: Position | None = None
    is_loading: bool = False
    notice: str | None = None

    def text_for(self, field: SearchField) -> str:
        """Return the current text of the given field."""
        if field is SearchField.FROM:
            return self.from_text
        if field is SearchField.TO:
            return self.to_text
        return ""

    def set_text(self, field: SearchField, text: str) -> None:
        """Set the text of the given field."""
        if field is SearchField.FROM:
            self.from_text = text
        elif field is SearchField.TO:
            self.to_text = text
