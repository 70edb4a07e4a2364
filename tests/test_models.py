"""Tests for domain models."""

from dataclasses import FrozenInstanceError
from datetime import UTC, datetime

import pytest

from trans_planner.domain.models import (
    Leg,
    LookupResult,
    SearchField,
    SearchState,
    Station,
)


def test_station_creation() -> None:
    """Given station data, when creating a Station, then all fields are set correctly."""
    station = Station(id="8011160", name="Berlin Hbf", distance=42.0)

    assert station.id == "8011160"
    assert station.name == "Berlin Hbf"
    assert station.distance == 42.0


def test_station_is_immutable() -> None:
    """Given a station, when assigning a field, then it fails."""
    station = Station(id="1", name="A")

    with pytest.raises(FrozenInstanceError):
        station.name = "B"  # type: ignore[misc]


def test_leg_walking_detection() -> None:
    """Given walking and transit legs, then only the walk reports walking."""
    now = datetime.now(UTC)

    walk = Leg(mode="walking", line_name=None, destination_name="X", departure=now, arrival=now)
    ride = Leg(mode="bus", line_name="100", destination_name="X", departure=now, arrival=now)

    assert walk.is_walking
    assert not ride.is_walking


def test_lookup_result_success() -> None:
    """Given a successful lookup, then its value is returned."""
    result = LookupResult.success([Station(id="1", name="A")])

    assert result.ok
    assert result.unwrap_or([]) == [Station(id="1", name="A")]


def test_lookup_result_failure_collapses_to_default() -> None:
    """Given a failed lookup, then the default is returned and the error is kept."""
    result: LookupResult[list[Station]] = LookupResult.failure("HTTP 502", status_code=502)

    assert not result.ok
    assert result.error is not None
    assert result.error.status_code == 502
    assert result.error.reason == "HTTP 502"
    assert result.unwrap_or([]) == []


def test_lookup_result_empty_is_ok_without_value() -> None:
    """Given an empty lookup, then it is ok but carries no value."""
    result: LookupResult[list[Station]] = LookupResult.empty()

    assert result.ok
    assert result.value is None
    assert result.unwrap_or([]) == []


def test_search_state_defaults() -> None:
    """Given a new search state, then nothing is selected or active."""
    state = SearchState()

    assert state.active_field is SearchField.NONE
    assert state.suggestions == ()
    assert state.from_station is None
    assert state.to_station is None
    assert state.position is None


def test_search_state_field_text_accessors() -> None:
    """Given field texts, then they are read and written per field."""
    state = SearchState()

    state.set_text(SearchField.FROM, "Alex")
    state.set_text(SearchField.TO, "Hbf")
    state.set_text(SearchField.NONE, "ignored")

    assert state.text_for(SearchField.FROM) == "Alex"
    assert state.text_for(SearchField.TO) == "Hbf"
    assert state.text_for(SearchField.NONE) == ""
