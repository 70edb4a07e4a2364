"""Transforms journeys into displayable route tabs."""

import logging
import uuid
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from trans_planner.domain.models.journey_step import JourneyStep, LegAnnotations, StepKind
from trans_planner.domain.models.route_tab import RouteTab

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from trans_planner.domain.contracts import AnnotationProviderProtocol
    from trans_planner.domain.models.journey import Journey, Leg
    from trans_planner.domain.models.station import Station


def _new_tab_id() -> str:
    return uuid.uuid4().hex


class JourneyPresenter:
    """Builds journey steps and route tabs from parsed journeys."""

    def __init__(
        self,
        annotation_provider: "AnnotationProviderProtocol | None" = None,
        display_timezone: str | None = None,
        id_factory: Callable[[], str] = _new_tab_id,
    ) -> None:
        """Initialize the presenter.

        Args:
            annotation_provider: Source of per-leg hints; none are added if omitted.
            display_timezone: IANA timezone for times; each timestamp's own offset
                is used if omitted.
            id_factory: Generates unique tab identifiers.
        """
        self._annotation_provider = annotation_provider
        self._timezone = ZoneInfo(display_timezone) if display_timezone else None
        self._id_factory = id_factory

    def format_time(self, moment: datetime) -> str:
        """Format a timestamp as zero-padded HH:MM."""
        if self._timezone is not None and moment.tzinfo is not None:
            moment = moment.astimezone(self._timezone)
        return f"{moment.hour:02d}:{moment.minute:02d}"

    @staticmethod
    def format_duration(departure: datetime, arrival: datetime) -> str:
        """Format the time between two timestamps in whole minutes, truncated."""
        minutes = int((arrival - departure).total_seconds() / 60)
        return f"{minutes} min"

    def _annotate(self, leg: "Leg") -> LegAnnotations:
        if leg.is_walking or self._annotation_provider is None:
            return LegAnnotations()
        return self._annotation_provider.annotate(leg)

    def build_step(self, leg: "Leg") -> JourneyStep:
        """Build the display step for one leg."""
        line = leg.line_name or leg.mode.upper()
        if leg.is_walking:
            instruction = f"Walk to {leg.destination_name}"
        else:
            instruction = f"{line} to {leg.destination_name}"

        annotations = self._annotate(leg)
        return JourneyStep(
            kind=StepKind.WALK if leg.is_walking else StepKind.TRANSPORT,
            line=line,
            instruction=instruction,
            duration=self.format_duration(leg.departure, leg.arrival),
            departure_time=self.format_time(leg.departure),
            alert=annotations.alert,
            seating=annotations.seating,
            chat_count=annotations.chat_count,
        )

    def build_steps(self, journey: "Journey") -> tuple[JourneyStep, ...]:
        """Build display steps for every leg, in order."""
        return tuple(self.build_step(leg) for leg in journey.legs)

    def present(
        self, journey: "Journey", from_station: "Station", to_station: "Station"
    ) -> RouteTab:
        """Build a route tab for a journey between two selected stations."""
        tab = RouteTab(
            id=self._id_factory(),
            title=to_station.name,
            subtitle=f"{from_station.name} → {to_station.name}",
            eta=self.format_time(journey.arrival),
            steps=self.build_steps(journey),
        )
        logger.debug(f"Presented journey {tab.subtitle} with {len(tab.steps)} step(s)")
        return tab
