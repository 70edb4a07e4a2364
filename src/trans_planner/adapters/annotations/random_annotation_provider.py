"""Simulated per-leg annotations.

None of these hints come from the transit API. They stand in for crowd-sourced
alerts, seating advice and chat activity until a real source exists.
"""

import random

from trans_planner.domain.contracts.annotation_provider import AnnotationProviderProtocol
from trans_planner.domain.models.journey import Leg
from trans_planner.domain.models.journey_step import LegAnnotations

DELAY_ALERT = "Smart Alt: Delay ahead."
SEATING_HINTS = ("Front", "Back")


class RandomAnnotationProvider(AnnotationProviderProtocol):
    """Draws alert, seating and chat hints independently for each transit leg."""

    def __init__(
        self,
        alert_probability: float = 0.3,
        seating_probability: float = 0.4,
        max_chat_count: int = 15,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            alert_probability: Chance of an alert hint.
            seating_probability: Chance of a seating hint.
            max_chat_count: Chat counts are drawn uniformly from [1, max_chat_count].
            rng: Random source; a fresh unseeded one by default.
        """
        self._alert_probability = alert_probability
        self._seating_probability = seating_probability
        self._max_chat_count = max_chat_count
        self._rng = rng or random.Random()

    def annotate(self, leg: Leg) -> LegAnnotations:
        """Return simulated annotations; walking legs get none."""
        if leg.is_walking:
            return LegAnnotations()

        alert = DELAY_ALERT if self._rng.random() < self._alert_probability else None
        seating = (
            self._rng.choice(SEATING_HINTS)
            if self._rng.random() < self._seating_probability
            else None
        )
        chat_count = self._rng.randint(1, self._max_chat_count)
        return LegAnnotations(alert=alert, seating=seating, chat_count=chat_count)


class NoAnnotationProvider(AnnotationProviderProtocol):
    """Never annotates a leg."""

    def annotate(self, leg: Leg) -> LegAnnotations:  # noqa: ARG002
        """Return empty annotations."""
        return LegAnnotations()
