"""Location platform backed by configured coordinates."""

import logging
from typing import TYPE_CHECKING

from trans_planner.domain.models.location import LocationPermission
from trans_planner.domain.models.position import Position
from trans_planner.domain.ports.location_platform import LocationPlatform

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from trans_planner.adapters.config.app_config import AppConfig


class FixedLocationPlatform(LocationPlatform):
    """Reports a fixed position, for hosts without a geolocation service.

    Without a position the location service reports itself disabled. The
    permission answers are fixed too: a denied permission stays denied when
    requested, mirroring a user who declines the prompt.
    """

    def __init__(
        self,
        position: Position | None = None,
        permission: LocationPermission = LocationPermission.GRANTED,
    ) -> None:
        """Initialize the platform.

        Args:
            position: Position to report, or None if location is unavailable.
            permission: Permission state to report.
        """
        self._position = position
        self._permission = permission
        self.permission_requests = 0

    @classmethod
    def from_config(cls, config: "AppConfig") -> "FixedLocationPlatform":
        """Build a platform from the configured home coordinates."""
        return cls(position=config.home_position, permission=config.location_permission)

    async def is_location_service_enabled(self) -> bool:
        """Whether a position is configured."""
        return self._position is not None

    async def check_permission(self) -> LocationPermission:
        """Return the configured permission state."""
        return self._permission

    async def request_permission(self) -> LocationPermission:
        """Record the request and return the configured permission state."""
        self.permission_requests += 1
        logger.debug(f"Location permission requested, answering {self._permission}")
        return self._permission

    async def get_current_position(self) -> Position:
        """Return the configured position.

        Raises:
            RuntimeError: If no position is configured.
        """
        if self._position is None:
            raise RuntimeError("No position configured")
        return self._position
