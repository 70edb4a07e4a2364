"""Tests for CLI helper functions."""

import pytest

from tests.test_search_orchestrator import (
    ALEX,
    BERLIN_HBF,
    FakeTransitGateway,
    make_orchestrator,
)
from trans_planner.adapters.annotations import NoAnnotationProvider, RandomAnnotationProvider
from trans_planner.adapters.config import AppConfig
from trans_planner.adapters.transport_rest import TransportRestGateway
from trans_planner.application.services import JourneyPresenter, RouteTabManager, TripPlanner
from trans_planner.cli import (
    _choose_station,
    _setup_argparse,
    build_trip_planner,
    format_route_tab,
    format_station,
    parse_position,
)
from trans_planner.domain.models import (
    JourneyStep,
    Position,
    RouteTab,
    SearchField,
    Station,
    StepKind,
)


def make_planner(gateway: FakeTransitGateway) -> TripPlanner:
    """Create a trip planner around the fake gateway."""
    orchestrator = make_orchestrator(gateway)
    return TripPlanner(
        orchestrator,
        gateway,
        JourneyPresenter(NoAnnotationProvider()),
        RouteTabManager(search_resetter=orchestrator),
    )


def test_parse_position_accepts_lat_lng() -> None:
    """Given "LAT,LNG", when parsing, then a position is returned."""
    assert parse_position("52.52,13.41") == Position(latitude=52.52, longitude=13.41)


@pytest.mark.parametrize("value", ["52.52", "52.52,13.41,1", "north,east", ""])
def test_parse_position_rejects_malformed_values(value: str) -> None:
    """Given a malformed position, when parsing, then ValueError names the expected format."""
    with pytest.raises(ValueError, match="expected LAT,LNG"):
        parse_position(value)


def test_format_station_includes_id_and_rounded_distance() -> None:
    """Given a nearby stop, when formatting, then name, id and whole meters are shown."""
    station = Station(id="900100003", name="S+U Alexanderplatz", distance=120.7)

    assert format_station(station) == "S+U Alexanderplatz  [900100003]  120m"


def test_format_station_without_distance() -> None:
    """Given a search result without distance, when formatting, then no distance is shown."""
    assert format_station(BERLIN_HBF) == "Berlin Hbf  [8011160]"


def test_format_route_tab_lists_steps_and_hints() -> None:
    """Given a tab with annotated steps, when formatting, then hints follow their step."""
    tab = RouteTab(
        id="abc",
        title="Potsdam Hbf",
        subtitle="Berlin Hbf → Potsdam Hbf",
        eta="10:42",
        steps=(
            JourneyStep(
                kind=StepKind.WALK,
                line="WALKING",
                instruction="Walk to Berlin Hbf (S-Bahn)",
                duration="4 min",
                departure_time="10:05",
            ),
            JourneyStep(
                kind=StepKind.TRANSPORT,
                line="S7",
                instruction="S7 to Potsdam Hbf",
                duration="33 min",
                departure_time="10:09",
                alert="Smart Alt: Delay ahead.",
                seating="Front",
                chat_count=7,
            ),
        ),
    )

    lines = format_route_tab(tab).splitlines()

    assert lines[:3] == ["Potsdam Hbf", "Berlin Hbf → Potsdam Hbf", "Arrival 10:42"]
    assert lines[4] == "10:05  Walk to Berlin Hbf (S-Bahn)  (4 min)"
    assert lines[5] == "10:09  S7 to Potsdam Hbf  (33 min)"
    assert lines[6].strip() == "Smart Alt: Delay ahead. | Board at the front | 7 chatting"


def test_argparse_route_command() -> None:
    """Given route arguments, when parsing, then origin, destination and flags are set."""
    args = _setup_argparse().parse_args(
        ["route", "Berlin Hbf", "Potsdam Hbf", "--json", "--no-annotations"]
    )

    assert args.command == "route"
    assert args.origin == "Berlin Hbf"
    assert args.destination == "Potsdam Hbf"
    assert args.json is True
    assert args.no_annotations is True


def test_argparse_nearby_command_parses_floats() -> None:
    """Given nearby arguments, when parsing, then coordinates are floats."""
    args = _setup_argparse().parse_args(["nearby", "52.5219", "13.4132"])

    assert args.command == "nearby"
    assert args.latitude == pytest.approx(52.5219)
    assert args.longitude == pytest.approx(13.4132)
    assert args.json is False


def test_argparse_search_command_with_bias() -> None:
    """Given a search with --near, when parsing, then the bias string is kept."""
    args = _setup_argparse().parse_args(["search", "Alexanderplatz", "--near", "52.52,13.41"])

    assert args.query == "Alexanderplatz"
    assert args.near == "52.52,13.41"


def test_build_trip_planner_wires_config() -> None:
    """Given a config, when building the planner, then its collaborators follow the config."""
    config = AppConfig.for_testing(debounce_ms=150, annotations_enabled=True)

    planner = build_trip_planner(config, session=None)

    assert isinstance(planner._gateway, TransportRestGateway)
    assert isinstance(planner._presenter._annotation_provider, RandomAnnotationProvider)
    assert planner.orchestrator._debounce_seconds == pytest.approx(0.15)
    assert planner.orchestrator.min_search_length == 3
    assert planner.tab_manager.tabs == ()


def test_build_trip_planner_derives_search_length_from_cut_off() -> None:
    """Given a configured network cut-off, then the orchestrator searches one character above it."""
    config = AppConfig.for_testing(min_query_length=3)

    planner = build_trip_planner(config, session=None)

    assert planner.orchestrator.min_search_length == 4

def test_build_trip_planner_annotation_override() -> None:
    """Given annotations disabled explicitly, when building, then no hints are generated."""
    config = AppConfig.for_testing(annotations_enabled=True)

    planner = build_trip_planner(config, session=None, annotations=False)

    assert isinstance(planner._presenter._annotation_provider, NoAnnotationProvider)


@pytest.mark.asyncio
async def test_choose_station_selects_first_suggestion() -> None:
    """Given a query with matches, when choosing, then the first suggestion is selected."""
    gateway = FakeTransitGateway(search_results={"Berlin": [BERLIN_HBF, ALEX]})
    planner = make_planner(gateway)

    station = await _choose_station(planner, SearchField.TO, "Berlin")

    assert station == BERLIN_HBF
    assert planner.state.to_station == BERLIN_HBF
    assert planner.state.to_text == "Berlin Hbf"
    assert [query for query, _ in gateway.search_calls] == ["Berlin"]
    await planner.orchestrator.close()


@pytest.mark.asyncio
async def test_choose_station_without_matches_raises() -> None:
    """Given a query with no matches, when choosing, then LookupError is raised."""
    gateway = FakeTransitGateway()
    planner = make_planner(gateway)

    with pytest.raises(LookupError, match="Nowhere"):
        await _choose_station(planner, SearchField.FROM, "Nowhere")

    assert planner.state.from_station is None
    await planner.orchestrator.close()


@pytest.mark.asyncio
async def test_choose_station_with_short_query_names_minimum_length() -> None:
    """Given a query below the search length, when choosing, then the error names the minimum."""
    gateway = FakeTransitGateway(search_results={"U2": [ALEX]})
    planner = make_planner(gateway)

    with pytest.raises(LookupError, match="queries need at least 3 characters"):
        await _choose_station(planner, SearchField.FROM, "U2")

    assert gateway.search_calls == []
    await planner.orchestrator.close()
