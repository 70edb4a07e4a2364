"""Location platform port."""

from typing import Protocol

from trans_planner.domain.models.location import LocationPermission
from trans_planner.domain.models.position import Position


class LocationPlatform(Protocol):
    """Port for the device geolocation service and its permission model."""

    async def is_location_service_enabled(self) -> bool:
        """Whether the device location service is switched on."""
        ...

    async def check_permission(self) -> LocationPermission:
        """Return the current permission state without prompting."""
        ...

    async def request_permission(self) -> LocationPermission:
        """Prompt for permission once and return the resulting state."""
        ...

    async def get_current_position(self) -> Position:
        """Fetch the current device position."""
        ...
