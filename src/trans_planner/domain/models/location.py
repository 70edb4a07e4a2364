"""Location permission and availability models."""

from enum import StrEnum


class LocationPermission(StrEnum):
    """Platform location permission states."""

    GRANTED = "granted"
    DENIED = "denied"
    DENIED_FOREVER = "denied_forever"


class LocationStatus(StrEnum):
    """Terminal outcome of the location permission/availability flow."""

    AVAILABLE = "available"
    SERVICE_DISABLED = "service_disabled"
    PERMISSION_DENIED = "permission_denied"
    PERMISSION_DENIED_FOREVER = "permission_denied_forever"
    POSITION_UNAVAILABLE = "position_unavailable"

    @property
    def is_available(self) -> bool:
        """Whether a position could be obtained."""
        return self is LocationStatus.AVAILABLE
