"""
Command-line interface for the distance matrix client.

This module provides the main entry point for the CLI::

    distance-matrix lookup --from Vancouver+BC --from Seattle --to Victoria+BC
    distance-matrix lookup --from-latlng 49.28,-123.12 --to San+Francisco --units imperial
"""

from __future__ import annotations

import argparse
import logging
import sys

from distance_matrix import __version__
from distance_matrix.client import DistanceMatrix
from distance_matrix.config import get_settings
from distance_matrix.errors import DistanceMatrixError
from distance_matrix.options import Language

OPTION_FIELDS = ("mode", "units", "avoid", "language", "output", "sensor")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="distance-matrix",
        description="Travel distance and time between sets of origins and destinations",
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

    lookup_parser = subparsers.add_parser("lookup", help="Look up distances and durations")
    lookup_parser.add_argument(
        "--from", dest="o_addr", action="append", metavar="ADDRESS", help="Origin address"
    )
    lookup_parser.add_argument(
        "--from-latlng",
        dest="o_latlng",
        action="append",
        metavar="LAT,LNG",
        help="Origin coordinate",
    )
    lookup_parser.add_argument(
        "--to", dest="d_addr", action="append", metavar="ADDRESS", help="Destination address"
    )
    lookup_parser.add_argument(
        "--to-latlng",
        dest="d_latlng",
        action="append",
        metavar="LAT,LNG",
        help="Destination coordinate",
    )
    lookup_parser.add_argument("--mode", help="driving, walking or bicycling")
    lookup_parser.add_argument("--units", help="metric or imperial")
    lookup_parser.add_argument("--avoid", help="tolls or highways")
    lookup_parser.add_argument("--language", help="Result language code (see 'languages')")
    lookup_parser.add_argument("--output", help="json or xml")
    lookup_parser.add_argument(
        "--sensor", action="store_true", default=None, help="Locations come from a GPS sensor"
    )

    subparsers.add_parser("info", help="Show configuration")
    subparsers.add_parser("languages", help="List supported result languages")

    return parser


def cmd_lookup(args: argparse.Namespace) -> int:
    """Handle the 'lookup' command."""
    overrides = {
        name: getattr(args, name) for name in OPTION_FIELDS if getattr(args, name) is not None
    }
    try:
        client = DistanceMatrix.from_settings(**overrides)
        results = client.get_distance(
            o_addr=args.o_addr,
            o_latlng=args.o_latlng,
            d_addr=args.d_addr,
            d_latlng=args.d_latlng,
        )
    except DistanceMatrixError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for result in results:
        print(result.as_string())
        print()
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Endpoint: {settings.base_url}")
    print(f"API key: {settings.masked_api_key}")
    for name, value in settings.option_values().items():
        print(f"{name.capitalize()}: {value}")
    return 0


def cmd_languages(_args: argparse.Namespace) -> int:
    """Handle the 'languages' command."""
    for language in Language:
        print(language.value)
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "lookup": cmd_lookup,
        "info": cmd_info,
        "languages": cmd_languages,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
