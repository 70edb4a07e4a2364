"""Protocol for resetting the from/to search."""

from typing import Protocol


class SearchResetterProtocol(Protocol):
    """Protocol for clearing both station selections and both text fields."""

    def reset_selections(self) -> None:
        """Clear from/to selections and texts so a new search can begin."""
        ...
