#!/usr/bin/env python3
"""CLI tool for browsing the station catalogue and drawing random stations.

Usage:
    # List all lines in display order
    python -m station_basket.cli lines

    # Show a single station
    python -m station_basket.cli lookup "Euston (Underground)"

    # List stations in zone 1 on the Victoria line
    python -m station_basket.cli basket --zone 1 --line Victoria

    # Draw 5 random Underground stations, starting at Bank
    python -m station_basket.cli draw --count 5 --mode Underground --start Bank
"""

import argparse
import json
import sys

import structlog

from station_basket.core.config import settings
from station_basket.core.logging import configure_logging
from station_basket.helpers.station_draw import StationDrawError, generate, make_shuffle
from station_basket.helpers.station_selection import exclude
from station_basket.models.station import Mode, RiverBank, Station
from station_basket.schemas.station import StationResponse
from station_basket.services.catalogue_service import CatalogueError, StationCatalogue, get_catalogue

logger = structlog.get_logger(__name__)


def _resolve(catalogue: StationCatalogue, identities: list[str] | None) -> list[Station]:
    """Resolve identity strings to catalogue stations, failing on unknown ones."""
    stations = []
    for identity in identities or []:
        station = catalogue.from_string(identity)
        if station is None:
            msg = f"Station '{identity}' not found"
            raise ValueError(msg)
        stations.append(station)
    return stations


def _select_basket(args: argparse.Namespace, catalogue: StationCatalogue) -> list[Station]:
    basket = catalogue.get_basket(zones=args.zone, modes=args.mode, river_banks=args.river_bank, lines=args.line)
    return exclude(basket, _resolve(catalogue, args.exclude))


def _print_stations(stations: list[Station], *, as_json: bool) -> None:
    if as_json:
        payload = [StationResponse.from_station(s).model_dump(mode="json", by_alias=True) for s in stations]
        print(json.dumps(payload, indent=2))
        return

    print(f"{'Station':<42} {'Zones':<8} {'Banks':<13} Lines")
    print("-" * 110)
    for station in stations:
        zones = ",".join(str(zone) for zone in station.zones)
        banks = ",".join(bank.value for bank in station.river_banks)
        print(f"{station!s:<42} {zones:<8} {banks:<13} {', '.join(station.lines)}")


def cmd_lines(args: argparse.Namespace, catalogue: StationCatalogue) -> int:
    """
    List all lines in display order.

    Args:
        args: Parsed command-line arguments
        catalogue: Station catalogue

    Returns:
        Exit code (0 for success)
    """
    for line in catalogue.lines:
        print(line)
    return 0


def cmd_lookup(args: argparse.Namespace, catalogue: StationCatalogue) -> int:
    """
    Show a single station by its identity string.

    Args:
        args: Parsed command-line arguments
        catalogue: Station catalogue

    Returns:
        Exit code (0 for success, 1 if the station is not found)
    """
    station = catalogue.from_string(args.identity)
    if station is None:
        print(f"❌ Error: Station '{args.identity}' not found", file=sys.stderr)
        return 1

    if args.json:
        print(StationResponse.from_station(station).model_dump_json(by_alias=True, indent=2))
        return 0

    print(f"{station}")
    print(f"   Local authority: {station.local_authority}")
    print(f"   Lines:           {', '.join(station.lines)}")
    print(f"   Zones:           {', '.join(str(zone) for zone in station.zones)}")
    print(f"   Modes:           {', '.join(mode.value for mode in station.modes)}")
    print(f"   River banks:     {', '.join(bank.value for bank in station.river_banks)}")
    return 0


def cmd_basket(args: argparse.Namespace, catalogue: StationCatalogue) -> int:
    """
    List all stations matching the given filters.

    Args:
        args: Parsed command-line arguments
        catalogue: Station catalogue

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        basket = _select_basket(args, catalogue)
    except ValueError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    _print_stations(basket, as_json=args.json)
    return 0


def cmd_draw(args: argparse.Namespace, catalogue: StationCatalogue) -> int:
    """
    Draw a random ordered set of stations matching the given filters.

    Args:
        args: Parsed command-line arguments
        catalogue: Station catalogue

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        basket = _select_basket(args, catalogue)
        starting_station = _resolve(catalogue, [args.start])[0] if args.start else None
        seed = args.seed if args.seed is not None else settings.RANDOM_SEED
        drawn = generate(args.count, basket, starting_station, shuffle=make_shuffle(seed))
    except StationDrawError as e:
        logger.warning("draw_failed", error=str(e), count=args.count)
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    _print_stations(drawn, as_json=args.json)
    return 0


def _add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--zone", type=int, action="append", help="Fare zone (repeatable; 16 = CPAY, 0 = SFA)")
    parser.add_argument(
        "--mode",
        action="append",
        choices=[mode.value for mode in Mode],
        help="Transport mode (repeatable)",
    )
    parser.add_argument(
        "--river-bank",
        action="append",
        choices=[bank.value for bank in RiverBank],
        help="Side of the Thames (repeatable)",
    )
    parser.add_argument("--line", action="append", help="Line name, e.g. 'Victoria' (repeatable)")
    parser.add_argument("--exclude", action="append", metavar="ID", help="Station identity to leave out (repeatable)")
    parser.add_argument("--json", action="store_true", help="Print stations as JSON")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all commands."""
    parser = argparse.ArgumentParser(
        description="Station catalogue CLI tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List all lines
  python -m station_basket.cli lines

  # Stations south of the river in zones 1 and 2
  python -m station_basket.cli basket --river-bank South --zone 1 --zone 2

  # Reproducible draw of 3 DLR stations
  python -m station_basket.cli draw --count 3 --mode DLR --seed 42
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser(
        "lines",
        help="List all lines in display order",
        description="Display every line served by the catalogue, TfL lines first.",
    )

    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Show a station by its identity",
        description="Show a station by its identity, e.g. 'Euston' or 'Euston (Underground)'.",
    )
    lookup_parser.add_argument("identity", type=str, help="Station identity string")
    lookup_parser.add_argument("--json", action="store_true", help="Print the station as JSON")

    basket_parser = subparsers.add_parser(
        "basket",
        help="List stations matching filters",
        description="List stations matching every filter given. Repeat a filter to accept several values.",
    )
    _add_filter_arguments(basket_parser)

    draw_parser = subparsers.add_parser(
        "draw",
        help="Draw random stations matching filters",
        description="Draw a random ordered set of stations, optionally starting at a given station.",
    )
    _add_filter_arguments(draw_parser)
    draw_parser.add_argument(
        "--count",
        type=int,
        default=settings.DEFAULT_DRAW_COUNT,
        help=f"Number of stations to draw (default: {settings.DEFAULT_DRAW_COUNT})",
    )
    draw_parser.add_argument("--start", metavar="ID", help="Station identity to place first")
    draw_parser.add_argument("--seed", type=int, help="Random seed for a reproducible draw")

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the CLI tool.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(log_level=settings.LOG_LEVEL, package_log_level=settings.PACKAGE_LOG_LEVEL)

    try:
        catalogue = get_catalogue()
    except CatalogueError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    # Dispatch to command handler
    command_handlers = {
        "lines": cmd_lines,
        "lookup": cmd_lookup,
        "basket": cmd_basket,
        "draw": cmd_draw,
    }

    if handler := command_handlers.get(args.command):
        return handler(args, catalogue)

    print(f"❌ Unknown command: {args.command}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
