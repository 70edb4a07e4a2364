"""Tests for leg annotation providers."""

import random
from datetime import UTC, datetime

from trans_planner.adapters.annotations import NoAnnotationProvider, RandomAnnotationProvider
from trans_planner.adapters.annotations.random_annotation_provider import DELAY_ALERT
from trans_planner.domain.models import Leg, LegAnnotations

NOW = datetime(2024, 5, 1, 8, 0, tzinfo=UTC)


def make_leg(mode: str) -> Leg:
    """Create a leg with the given mode."""
    return Leg(mode=mode, line_name="S1", destination_name="Ost", departure=NOW, arrival=NOW)


def test_walking_legs_get_no_annotations() -> None:
    """Given certain hints, when annotating a walk, then nothing is attached."""
    provider = RandomAnnotationProvider(alert_probability=1.0, seating_probability=1.0)

    assert provider.annotate(make_leg("walking")) == LegAnnotations()


def test_certain_probabilities_always_annotate() -> None:
    """Given probabilities of 1, when annotating transit legs, then every hint is present."""
    provider = RandomAnnotationProvider(
        alert_probability=1.0, seating_probability=1.0, rng=random.Random(1)
    )

    for _ in range(20):
        annotations = provider.annotate(make_leg("train"))
        assert annotations.alert == DELAY_ALERT
        assert annotations.seating in ("Front", "Back")
        assert annotations.chat_count is not None


def test_zero_probabilities_never_alert_or_seat() -> None:
    """Given probabilities of 0, then only the chat count is drawn."""
    provider = RandomAnnotationProvider(
        alert_probability=0.0, seating_probability=0.0, rng=random.Random(2)
    )

    for _ in range(20):
        annotations = provider.annotate(make_leg("bus"))
        assert annotations.alert is None
        assert annotations.seating is None
        assert annotations.chat_count is not None


def test_chat_count_stays_within_bounds() -> None:
    """Given many draws, then chat counts stay within [1, max_chat_count] and vary."""
    provider = RandomAnnotationProvider(max_chat_count=15, rng=random.Random(3))

    counts = {provider.annotate(make_leg("tram")).chat_count for _ in range(300)}

    assert counts <= set(range(1, 16))
    assert len(counts) > 1


def test_seating_hints_cover_front_and_back() -> None:
    """Given many draws, then both seating hints appear."""
    provider = RandomAnnotationProvider(seating_probability=1.0, rng=random.Random(4))

    hints = {provider.annotate(make_leg("subway")).seating for _ in range(100)}

    assert hints == {"Front", "Back"}


def test_no_annotation_provider_returns_empty_annotations() -> None:
    """Given the no-op provider, then transit legs get no hints."""
    assert NoAnnotationProvider().annotate(make_leg("train")) == LegAnnotations()
