"""Route tab domain model."""

from dataclasses import dataclass

from trans_planner.domain.models.journey_step import JourneyStep


@dataclass(frozen=True)
class RouteTab:
    """One completed journey result, shown as a closable tab."""

    id: str
    title: str  # Destination station name
    subtitle: str  # "<from> → <to>"
    eta: str  # HH:MM
    steps: tuple[JourneyStep, ...]
