"""Command line trip planner for transport.rest."""

import asyncio
import json
import logging
import sys
from dataclasses import asdict
from typing import Any

import aiohttp

from trans_planner.adapters.annotations import NoAnnotationProvider, RandomAnnotationProvider
from trans_planner.adapters.config import AppConfig
from trans_planner.adapters.location import FixedLocationPlatform
from trans_planner.adapters.transport_rest import TransportRestGateway
from trans_planner.application.services import (
    JourneyPresenter,
    LocationService,
    RouteTabManager,
    SearchOrchestrator,
    TripPlanner,
)
from trans_planner.domain.models import Position, RouteTab, SearchField, Station

logger = logging.getLogger(__name__)

# Poll interval while waiting for the debounce timer to fire
_DEBOUNCE_POLL_SECONDS = 0.05


def configure_logging(level: str) -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_trip_planner(
    config: AppConfig,
    session: aiohttp.ClientSession | None,
    annotations: bool | None = None,
) -> TripPlanner:
    """Wire the gateway, location flow, search, presenter and tabs together.

    Args:
        config: Application configuration.
        session: Shared aiohttp session.
        annotations: Overrides ``config.annotations_enabled`` when not None.
    """
    gateway = TransportRestGateway.from_config(config, session=session)
    location_service = LocationService(FixedLocationPlatform.from_config(config))
    orchestrator = SearchOrchestrator(
        gateway,
        location_service,
        debounce_seconds=config.debounce_seconds,
        min_search_length=config.search_trigger_length,
    )

    enabled = config.annotations_enabled if annotations is None else annotations
    annotation_provider = (
        RandomAnnotationProvider(
            alert_probability=config.alert_probability,
            seating_probability=config.seating_probability,
            max_chat_count=config.max_chat_count,
        )
        if enabled
        else NoAnnotationProvider()
    )
    presenter = JourneyPresenter(annotation_provider, display_timezone=config.display_timezone)
    tab_manager = RouteTabManager(search_resetter=orchestrator)
    return TripPlanner(orchestrator, gateway, presenter, tab_manager)


def parse_position(value: str) -> Position:
    """Parse a "LAT,LNG" string."""
    try:
        lat_str, lng_str = value.split(",")
        return Position(latitude=float(lat_str), longitude=float(lng_str))
    except ValueError as e:
        raise ValueError(f"Invalid position '{value}', expected LAT,LNG") from e


def format_station(station: Station) -> str:
    """Format a station suggestion line."""
    line = f"{station.name}  [{station.id}]"
    if station.distance is not None:
        line += f"  {int(station.distance)}m"
    return line


def format_route_tab(tab: RouteTab) -> str:
    """Format a route tab as plain text."""
    lines = [tab.title, tab.subtitle, f"Arrival {tab.eta}", ""]
    for step in tab.steps:
        lines.append(f"{step.departure_time}  {step.instruction}  ({step.duration})")
        hints = []
        if step.alert:
            hints.append(step.alert)
        if step.seating:
            hints.append(f"Board at the {step.seating.lower()}")
        if step.chat_count is not None:
            hints.append(f"{step.chat_count} chatting")
        if hints:
            lines.append(f"       {' | '.join(hints)}")
    return "\n".join(lines)


def _print_stations(stations: list[Station], as_json: bool) -> None:
    if as_json:
        print(json.dumps([asdict(s) for s in stations], indent=2, ensure_ascii=False))
        return
    if not stations:
        print("No stations found.")
        return
    for station in stations:
        print(format_station(station))


async def _handle_search_command(
    config: AppConfig, query: str, near: str | None, as_json: bool
) -> None:
    """Handle the search command."""
    bias = parse_position(near) if near else config.home_position
    async with aiohttp.ClientSession() as session:
        gateway = TransportRestGateway.from_config(config, session=session)
        result = await gateway.search_stations(query, bias=bias)
    _print_stations(result.unwrap_or([]), as_json)


async def _handle_nearby_command(
    config: AppConfig, latitude: float, longitude: float, as_json: bool
) -> None:
    """Handle the nearby command."""
    async with aiohttp.ClientSession() as session:
        gateway = TransportRestGateway.from_config(config, session=session)
        result = await gateway.get_nearby_stops(latitude, longitude)
    _print_stations(result.unwrap_or([]), as_json)


async def _choose_station(planner: TripPlanner, field: SearchField, query: str) -> Station:
    """Type a query into a field and confirm its first suggestion."""
    orchestrator = planner.orchestrator
    orchestrator.on_field_focused(field)
    orchestrator.on_text_changed(field, query)
    while orchestrator.search_pending:
        await asyncio.sleep(_DEBOUNCE_POLL_SECONDS)
    await orchestrator.wait_idle()

    suggestions = planner.state.suggestions
    if not suggestions:
        if len(query) < orchestrator.min_search_length:
            raise LookupError(
                f"No station found for '{query}': queries need at least "
                f"{orchestrator.min_search_length} characters"
            )
        raise LookupError(f"No station found for '{query}'")
    station = suggestions[0]
    orchestrator.select_station(station)
    return station


async def _handle_route_command(
    config: AppConfig, origin: str, destination: str, as_json: bool, annotations: bool
) -> None:
    """Handle the route command."""
    async with aiohttp.ClientSession() as session:
        planner = build_trip_planner(config, session, annotations=annotations)
        try:
            await planner.orchestrator.start()
            await _choose_station(planner, SearchField.FROM, origin)
            await _choose_station(planner, SearchField.TO, destination)
            tab = await planner.find_routes()
        finally:
            await planner.orchestrator.close()

    if tab is None:
        raise LookupError(planner.state.notice or "No routes found.")

    if as_json:
        print(json.dumps(asdict(tab), indent=2, ensure_ascii=False))
    else:
        print(format_route_tab(tab))


def _setup_argparse() -> Any:
    """Set up and configure argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Trans - station search and journey planning",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search for stations, biased towards a position
  trans-planner search "Alexanderplatz" --near 52.52,13.41

  # List the stops closest to a position
  trans-planner nearby 52.5219 13.4132

  # Plan a journey between the first matches of two queries
  trans-planner route "Berlin Hbf" "Potsdam Hbf"

Configuration is read from TRANS_* environment variables or a .env file.
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Search for stations")
    search_parser.add_argument("query", help="Station name to search for")
    search_parser.add_argument("--near", help="Bias results towards LAT,LNG")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    nearby_parser = subparsers.add_parser("nearby", help="List stops near a position")
    nearby_parser.add_argument("latitude", type=float, help="Latitude")
    nearby_parser.add_argument("longitude", type=float, help="Longitude")
    nearby_parser.add_argument("--json", action="store_true", help="Output as JSON")

    route_parser = subparsers.add_parser("route", help="Plan a journey between two stations")
    route_parser.add_argument("origin", help="Origin station query")
    route_parser.add_argument("destination", help="Destination station query")
    route_parser.add_argument("--json", action="store_true", help="Output as JSON")
    route_parser.add_argument(
        "--no-annotations",
        action="store_true",
        help="Don't add simulated alert/seating/chat hints",
    )

    return parser


async def _execute_command(args: Any, config: AppConfig) -> None:
    """Execute the appropriate command based on args."""
    if args.command == "search":
        await _handle_search_command(config, args.query, args.near, args.json)
    elif args.command == "nearby":
        await _handle_nearby_command(config, args.latitude, args.longitude, args.json)
    elif args.command == "route":
        annotations = False if args.no_annotations else config.annotations_enabled
        await _handle_route_command(
            config, args.origin, args.destination, args.json, annotations
        )
    else:
        raise ValueError(f"Unknown command: {args.command}")


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig()
    configure_logging(config.log_level)

    try:
        await _execute_command(args, config)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
