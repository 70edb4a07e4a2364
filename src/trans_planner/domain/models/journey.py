"""Journey domain models."""

from dataclasses import dataclass
from datetime import datetime

WALKING_MODE = "walking"


@dataclass(frozen=True)
class Leg:
    """One segment of a journey, either a walk or a ride on a transit line."""

    mode: str
    line_name: str | None
    destination_name: str
    departure: datetime
    arrival: datetime

    @property
    def is_walking(self) -> bool:
        """Whether this leg is a walk."""
        return self.mode == WALKING_MODE


@dataclass(frozen=True)
class Journey:
    """A single itinerary between two stations."""

    legs: tuple[Leg, ...]
    arrival: datetime
