# src/cli/find_path.py

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from app.logging_config import configure_logging
from env.loader import load_map_profile
from monitoring.bus import EventBus
from monitoring.logger import JsonFileLogger
from nav.pathfinder import search
from nav.render import print_path

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_NO_PATH = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the shortest 4-connected path on a grid map with A*."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Map config YAML (default: the bundled maps.yaml)",
    )
    parser.add_argument(
        "--profile",
        default=None,
        help="Map profile name (default: the file's 'profile' key)",
    )
    parser.add_argument(
        "--max-expansions",
        type=int,
        default=None,
        help="Give up after this many expansions",
    )
    parser.add_argument("--log-level", default="WARNING", help="Python logging level")
    parser.add_argument(
        "--events",
        type=Path,
        default=None,
        help="Append search events as JSON lines to this file",
    )
    return parser


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()

    try:
        configure_logging(args.log_level)
        profile = load_map_profile(name=args.profile, path=args.config)
        config = profile.to_search_config(max_expansions=args.max_expansions)
    except (FileNotFoundError, KeyError, ValueError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    bus = EventBus()
    events = JsonFileLogger(args.events, bus) if args.events else None
    try:
        result = search(config, bus=bus)
    finally:
        if events is not None:
            events.close()

    if not result.success:
        logger.info("Profile %s: %s", profile.name, result.reason)
        console.print(f"no path found ({result.reason})")
        return EXIT_NO_PATH

    print_path(profile.grid, result.path, console=console)
    console.print(
        f"cost={result.cost} steps, expansions={result.expansions}, "
        f"visited={result.visited_count}"
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
