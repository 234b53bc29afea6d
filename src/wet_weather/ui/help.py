"""Help pages for the wet command line."""

from __future__ import annotations

from rich.console import Console
from rich.padding import Padding
from rich.table import Table
from rich.text import Text

from .. import PROGRAM_NAME, __version__
from ..exceptions import OptionError
from ..selection import WEEKDAYS

COMMAND_INDENT = 1
TEXT_INDENT = 4

DAY_HELP = (
    "Shows forecast data for a specific day out of a 5 day forecast "
    "(1=today, 2=tomorrow, etc.) or for a named weekday. If this option is not "
    "given, only the forecast data for today will be used."
)

MAIN_HELP: list[tuple[str, str]] = [
    ("cc", "Shows current conditions."),
    ("loc", "Shows information about LOCATION."),
    ("fc", "Shows forecast predictions."),
    ("imperial", "Causes all measurements to use imperial units (fahrenheit, miles, etc.)"),
    (
        "metric",
        "Causes all measurements to use metric units (celsius, kilometers, etc.). "
        "This is the default if no unit command is given.",
    ),
    (
        "help",
        f"Shows help information and exits. Use `{PROGRAM_NAME} help COMMAND' for help "
        "with the specific COMMAND.",
    ),
    ("version", "Shows the version information of this program."),
]

MAIN_NOTES = [
    (
        "",
        "If no option commands are given, a default set of basic weather data will "
        "be displayed.",
    ),
    (
        "NOTE: ",
        "Instead of providing a LOCATION argument every time, you can set the "
        'WET_LOCATION environment variable to your desired location (e.g. '
        'WET_LOCATION="New York City").',
    ),
    (
        "NOTE: ",
        "You can also set the WET_UNITS environment variable to your preferred set "
        "of units (e.g. WET_UNITS=imperial or WET_UNITS=metric).",
    ),
    ("", "All weather data is obtained from www.weather.com."),
]

CC_HELP: dict[str, tuple[str, str]] = {
    "last-updated": (
        "cc last-updated",
        "Shows when the current conditions data was last updated.",
    ),
    "temp": ("cc temp", "Shows the current temperature."),
    "dewpoint": ("cc dewpoint", "Shows the current dewpoint temperature."),
    "text": (
        "cc text",
        'Shows a short, general description of the current conditions (e.g. "Partly Cloudy").',
    ),
    "visibility": ("cc visibility", "Shows the current visibility."),
    "humidity": ("cc humidity", "Shows the current humidity."),
    "station": ("cc station", "Shows the station name from which local weather is obtained."),
    "feels-like": ("cc feels-like", 'Shows the temperature that it currently "feels like".'),
    "moon": ("cc moon", "Shows the current phase of the Moon."),
    "uv": ("cc uv", "Shows current ultra-violet data from the sun."),
    "barometer": ("cc barometer", "Shows current atmospheric pressure data."),
    "wind": ("cc wind", "Shows current wind conditions."),
}
CC_ALIASES = {"temperature": "temp"}

LOC_HELP: dict[str, tuple[str, str]] = {
    "latitude": ("loc latitude", "Shows the latitude of LOCATION."),
    "longitude": ("loc longitude", "Shows the longitude of LOCATION."),
    "name": ("loc name", "Shows the proper name of LOCATION."),
}

FC_NIGHT_HELP: list[tuple[str, str]] = [
    ("fc night text", "Shows a brief description of the night forecast."),
    ("fc night cop", "Shows the chance of precipitation for the night."),
    ("fc night humidity", "Shows the humidity for the night."),
    ("fc night wind", "Shows wind conditions for the night."),
]

FC_HELP: dict[str, tuple[str, str]] = {
    "day": ("fc [1-5|today|tomorrow|WEEKDAY]", DAY_HELP),
    "all": ("fc all", "Shows forecast data for all days in the 5 day forecast."),
    "dow": ("fc dow", "Shows the name for the day of the week of the forecast day."),
    "high": ("fc high", "Shows the highest forecasted temperature."),
    "low": ("fc low", "Shows the lowest forecasted temperature."),
    "sunrise": ("fc sunrise", "Shows the time of sunrise."),
    "sunset": ("fc sunset", "Shows the time of sunset."),
    "text": ("fc text", "Shows a brief description of the forecast."),
    "cop": ("fc cop", "Shows the chance of precipitation."),
    "humidity": ("fc humidity", "Shows the humidity."),
    "night": (
        "fc night",
        "Shows forecast information for the night of the forecast day. This command "
        f"has 4 options of its own (use `{PROGRAM_NAME} help fc night' to see them).",
    ),
    "wind": ("fc wind", "Shows the wind forecasts for the forecast day."),
}
FC_ALIASES = {
    "hi": "high",
    "lo": "low",
    **dict.fromkeys(("1", "2", "3", "4", "5", "today", "tomorrow", *WEEKDAYS), "day"),
}


def _print_entry(console: Console, command: str, text: str) -> None:
    console.print(Padding(Text(f"{PROGRAM_NAME} {command}"), (0, 0, 0, COMMAND_INDENT)))
    console.print(Padding(Text(text), (0, 0, 0, TEXT_INDENT)))


def _print_note(console: Console, lead: str, note: str) -> None:
    if not lead:
        console.print(Text(note))
        return
    # Continuation lines line up under the text following the lead.
    grid = Table.grid()
    grid.add_column(no_wrap=True)
    grid.add_column()
    grid.add_row(Text(lead), Text(note))
    console.print(grid)


def _print_title(console: Console, title: str) -> None:
    console.print(Text(f"Weather Tool ({__version__}) {title}"))
    _print_separator(console)


def _print_separator(console: Console) -> None:
    console.print(Text("-" * max(console.width // 4, 1)))


def _lookup(
    table: dict[str, tuple[str, str]],
    aliases: dict[str, str],
    command: str,
    option: str,
) -> tuple[str, str]:
    key = option.lower()
    entry = table.get(aliases.get(key, key))
    if entry is None:
        raise OptionError(f"unknown option for `{command}' -- `{option}'")
    return entry


def render_help(console: Console, command: str | None = None, option: str | None = None) -> None:
    """Print the overview, a command page or a single option entry."""
    if command is None:
        _print_title(console, "Main Options")
        for name, text in MAIN_HELP:
            _print_entry(console, name, text)
        _print_separator(console)
        for lead, note in MAIN_NOTES:
            _print_note(console, lead, note)
            console.print()
        return

    lowered = command.lower()
    if lowered == "cc":
        if option is not None:
            _print_entry(console, *_lookup(CC_HELP, CC_ALIASES, "cc", option))
            return
        _print_title(console, "Current Conditions Options")
        for name, text in CC_HELP.values():
            _print_entry(console, name, text)
        _print_separator(console)
        console.print(
            Text(
                "If none of the `cc' options are provided, then ALL current "
                "conditions data will be displayed."
            )
        )
        return

    if lowered == "loc":
        if option is not None:
            _print_entry(console, *_lookup(LOC_HELP, {}, "loc", option))
            return
        _print_title(console, "Location Options")
        for name, text in LOC_HELP.values():
            _print_entry(console, name, text)
        _print_separator(console)
        return

    if lowered == "fc":
        if option is not None:
            if option.lower() == "night":
                for name, text in FC_NIGHT_HELP:
                    _print_entry(console, name, text)
                return
            _print_entry(console, *_lookup(FC_HELP, FC_ALIASES, "fc", option))
            return
        _print_title(console, "Forecast Options")
        for name, text in FC_HELP.values():
            _print_entry(console, name, text)
        _print_separator(console)
        return

    if option is None and lowered in {"imperial", "metric", "help", "version"}:
        for name, text in MAIN_HELP:
            if name == lowered:
                _print_entry(console, name, text)
        return

    raise OptionError(f"unknown command -- `{command}'")


def render_version(console: Console) -> None:
    console.print(Text(f"{PROGRAM_NAME} (WEather Tool) {__version__}"))
