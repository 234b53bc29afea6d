"""wet CLI: resolve a location, fetch its weather and print the selected fields."""

from __future__ import annotations

import argparse
import logging
import sys
from enum import IntEnum

from rich.console import Console

from . import PROGRAM_NAME
from .config import load_settings
from .exceptions import (
    ConfigError,
    LocationNotFoundError,
    MissingLocationError,
    OptionError,
    TransportError,
    WeatherServiceError,
)
from .log_setup import setup_logger
from .options import parse_options
from .ui.display import display
from .ui.help import render_help, render_version
from .weather.base import WeatherProvider
from .weather.client import WeatherClient
from .weather.extract import extract_location_id, extract_weather
from .weather.models import WeatherRecord

USAGE = "%(prog)s [LOCATION] [imperial|metric] [COMMAND [OPTION...]]"


class ExitCode(IntEnum):
    SUCCESS = 0
    OPTION = 2
    LOCATION = 3
    NETWORK = 4
    WEATHER = 5
    SYSTEM = 6


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the process arguments; the command grammar is handled by parse_options."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        usage=USAGE,
        description="Show current conditions and forecasts from weather.com.",
        epilog=f"Run `{PROGRAM_NAME} help' for the list of commands.",
        add_help=False,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log HTTP requests and other debug output to stderr.",
    )
    parser.add_argument(
        "words",
        nargs="*",
        help="Location, units and command words.",
    )
    args, extras = parser.parse_known_intermixed_args(argv)
    unknown = [word for word in extras if word.startswith("--")]
    if unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")
    # Single-dash words such as negative coordinates are locations.
    args.words.extend(extras)
    return args


def fetch_record(provider: WeatherProvider, location: str, *, metric: bool) -> WeatherRecord:
    """Resolve ``location`` to a provider id, then fetch and extract its weather."""
    location_id = extract_location_id(provider.search_location(location))
    if not location_id:
        raise LocationNotFoundError(f"failed to find location '{location}'")

    record = extract_weather(provider.fetch_weather(location_id, metric=metric), location_id)
    if record.error is not None:
        if record.error.message:
            raise WeatherServiceError(f"weather: {record.error.message}")
        raise TransportError("failed to retrieve weather data")
    return record


def _print_usage(console: Console) -> None:
    console.print(f"Usage: {USAGE % {'prog': PROGRAM_NAME}}", markup=False, highlight=False)


def main(argv: list[str] | None = None) -> int:
    """Run one weather lookup and return the process exit code."""
    args = parse_args(argv)
    logger = setup_logger()
    console = Console(highlight=False)
    err_console = Console(stderr=True, highlight=False)

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.error("Configuration failure: %s", exc)
        return ExitCode.SYSTEM
    logger.setLevel(logging.DEBUG if args.verbose else settings.wet_log_level)

    try:
        invocation = parse_options(
            args.words,
            env_location=settings.wet_location,
            env_units=settings.wet_units,
            logger=logger,
        )
        if invocation.action == "help":
            render_help(console, invocation.help_topic, invocation.help_option)
            return ExitCode.SUCCESS
    except OptionError as exc:
        logger.error("%s", exc)
        _print_usage(err_console)
        return ExitCode.OPTION
    except MissingLocationError as exc:
        logger.error("%s", exc)
        _print_usage(err_console)
        return ExitCode.LOCATION

    if invocation.action == "version":
        render_version(console)
        return ExitCode.SUCCESS

    location = invocation.location or ""
    logger.debug(
        "Looking up weather for %r (%s units)",
        location,
        "metric" if invocation.metric else "imperial",
    )
    try:
        with WeatherClient(settings=settings, logger=logger) as provider:
            record = fetch_record(provider, location, metric=invocation.metric)
    except TransportError as exc:
        logger.error("Network failure: %s", exc)
        return ExitCode.NETWORK
    except WeatherServiceError as exc:
        logger.error("%s", exc)
        return ExitCode.WEATHER
    except Exception as exc:  # pragma: no cover
        logger.exception("Unexpected failure: %s", exc)
        return ExitCode.SYSTEM

    display(console, record, invocation.selection.resolve_weekdays(record))
    return ExitCode.SUCCESS


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    sys.exit(main())
