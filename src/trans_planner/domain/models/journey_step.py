"""Journey step domain models."""

from dataclasses import dataclass
from enum import StrEnum


class StepKind(StrEnum):
    """Kind of a displayed journey step."""

    WALK = "walk"
    TRANSPORT = "transport"


@dataclass(frozen=True)
class LegAnnotations:
    """Locally synthesized, non-authoritative hints attached to a transit leg."""

    alert: str | None = None
    seating: str | None = None
    chat_count: int | None = None


@dataclass(frozen=True)
class JourneyStep:
    """One displayable step of a planned trip."""

    kind: StepKind
    line: str  # Line name, or the upper-cased mode for legs without a line
    instruction: str  # e.g. "Walk to Central" or "U1 to Central"
    duration: str  # e.g. "12 min"
    departure_time: str  # HH:MM
    alert: str | None = None
    seating: str | None = None
    chat_count: int | None = None
