"""Protocol for synthesizing per-leg display annotations."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from trans_planner.domain.models.journey import Leg
    from trans_planner.domain.models.journey_step import LegAnnotations


class AnnotationProviderProtocol(Protocol):
    """Protocol for attaching alert, seating and chat hints to a leg."""

    def annotate(self, leg: "Leg") -> "LegAnnotations":
        """Return the annotations for a leg.

        Args:
            leg: The journey leg being presented.

        Returns:
            Annotations; all fields are None for walking legs.
        """
        ...
