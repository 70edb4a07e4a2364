"""Position domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A device position in WGS84 coordinates."""

    latitude: float
    longitude: float
