"""Location permission and position flow."""

import logging
from typing import TYPE_CHECKING

from trans_planner.domain.models.location import LocationPermission, LocationStatus
from trans_planner.domain.models.position import Position

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from trans_planner.domain.ports import LocationPlatform


class LocationService:
    """Negotiates location access and fetches the device position once.

    Each step short-circuits to a terminal status. A permission that is denied
    forever is never requested again.
    """

    def __init__(self, platform: "LocationPlatform") -> None:
        """Initialize with a location platform."""
        self._platform = platform
        self.position: Position | None = None
        self.status: LocationStatus | None = None

    def _finish(self, status: LocationStatus) -> LocationStatus:
        self.status = status
        if status.is_available:
            logger.info(f"Location available at {self.position}")
        else:
            logger.info(f"Location unavailable: {status}")
        return status

    async def determine_position(self) -> LocationStatus:
        """Run the service/permission checks and fetch the current position.

        Returns:
            AVAILABLE with ``position`` set, or the reason location is unavailable.
        """
        if not await self._platform.is_location_service_enabled():
            return self._finish(LocationStatus.SERVICE_DISABLED)

        permission = await self._platform.check_permission()
        if permission is LocationPermission.DENIED:
            permission = await self._platform.request_permission()
            if permission is LocationPermission.DENIED:
                return self._finish(LocationStatus.PERMISSION_DENIED)

        if permission is LocationPermission.DENIED_FOREVER:
            return self._finish(LocationStatus.PERMISSION_DENIED_FOREVER)

        try:
            self.position = await self._platform.get_current_position()
        except Exception as e:
            logger.warning(f"Could not get current position: {e}")
            return self._finish(LocationStatus.POSITION_UNAVAILABLE)

        return self._finish(LocationStatus.AVAILABLE)
