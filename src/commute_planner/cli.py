"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from commute_planner import __version__
from commute_planner.config import get_settings
from commute_planner.datasources import create_backend
from commute_planner.destinations import parse_destination
from commute_planner.exceptions import CommutePlannerError
from commute_planner.flows.travel import (
    compute_travel_times,
    load_destinations,
    load_properties,
)
from commute_planner.schemas import Property


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="commute-planner",
        description="Travel times from rental listings to the places you go",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    geocode_parser = subparsers.add_parser("geocode", help="Resolve an address to coordinates")
    geocode_parser.add_argument("address", help="Free-text address")
    geocode_parser.add_argument(
        "--country",
        default=None,
        help="ISO country code to search in (default: country_scope from settings)",
    )

    travel_parser = subparsers.add_parser("travel", help="Compute travel times for listings")
    travel_parser.add_argument(
        "-d",
        "--destination",
        action="append",
        default=[],
        metavar="NAME|ADDRESS[|MODE]",
        help="Destination, repeatable (modes: driving, walking, cycling, transit)",
    )
    travel_parser.add_argument(
        "--destinations",
        type=Path,
        default=None,
        help="JSON file with destination records",
    )
    travel_parser.add_argument(
        "--properties",
        type=Path,
        default=None,
        help="JSON file with listing records (default: sample London listings)",
    )
    travel_parser.add_argument(
        "--backend",
        choices=["osrm", "mapbox"],
        default=None,
        help="Routing backend (default: backend from settings)",
    )
    travel_parser.add_argument(
        "--json",
        action="store_true",
        help="Print listings as JSON instead of a summary",
    )

    return parser


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Backend: {settings.backend}")
    print(f"Country scope: {settings.country_scope}")
    print(f"Debug: {settings.debug}")
    return 0


def cmd_geocode(args: argparse.Namespace) -> int:
    """Handle the 'geocode' command."""
    settings = get_settings()
    try:
        backend = create_backend(settings)
    except CommutePlannerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    coordinate = backend.resolve(args.address, args.country or settings.country_scope)
    if coordinate is None:
        print(f"No match found for {args.address!r}", file=sys.stderr)
        return 1
    print(coordinate.as_lonlat())
    return 0


def cmd_travel(args: argparse.Namespace) -> int:
    """Handle the 'travel' command: compute and print travel times."""
    try:
        destinations = [parse_destination(text) for text in args.destination]
        if args.destinations is not None:
            destinations.extend(load_destinations(args.destinations))
        properties = load_properties(args.properties) if args.properties else None
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not destinations:
        print("No destinations given. Use -d 'NAME|ADDRESS[|MODE]'.", file=sys.stderr)
        return 1

    try:
        outcome = asyncio.run(
            compute_travel_times(
                destinations=[d.model_dump(mode="json") for d in destinations],
                properties=(
                    [p.model_dump(mode="json") for p in properties]
                    if properties is not None
                    else None
                ),
                backend=args.backend,
            )
        )
    except CommutePlannerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(outcome["properties"], indent=2))
    else:
        for raw in outcome["properties"]:
            print(format_property(Property.model_validate(raw)))

    notification = outcome["notification"]
    return 1 if notification and notification["is_error"] else 0


def format_property(prop: Property) -> str:
    """Multi-line plain-text summary of a listing and its travel times."""
    header = prop.title if not prop.location else f"{prop.title} ({prop.location})"
    lines = [header]
    for entry in prop.travel_times:
        mode_label = entry.mode.label
        if entry.routed_mode is not None and entry.routed_mode != entry.mode:
            mode_label += f", routed as {entry.routed_mode.label}"
        summary = f"{entry.duration}, {entry.distance}" if entry.is_available else entry.duration
        lines.append(f"  {entry.destination_name}: {summary} [{mode_label}]")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "geocode": cmd_geocode,
        "travel": cmd_travel,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
