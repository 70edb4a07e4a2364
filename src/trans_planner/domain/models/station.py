"""Station domain model."""

from dataclasses import dataclass

UNKNOWN_STATION_NAME = "Unknown Station"


@dataclass(frozen=True)
class Station:
    """Represents a public transport station or stop."""

    id: str  # Remote identifier; empty string for malformed records
    name: str
    distance: float | None = None  # Meters, only set for location-biased results
