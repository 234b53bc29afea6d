"""Command-line grammar: location, units, command and field selection.

Words are matched case-insensitively and may appear in any order. A word
outside every vocabulary below is taken as the location, so multi-word
locations must be quoted on the shell command line.
"""

from __future__ import annotations

import logging

from .exceptions import MissingLocationError, OptionError
from .selection import (
    WEEKDAYS,
    CurrentConditionsSelection,
    ForecastDaySelection,
    Invocation,
    LocationSelection,
    NightSelection,
    Selection,
)
from .weather.models import FORECAST_DAYS

UNIT_WORDS = ("imperial", "metric")
SHOW_COMMANDS = ("cc", "loc", "fc")
MAIN_COMMANDS = (*SHOW_COMMANDS, *UNIT_WORDS, "help", "version")

CC_OPTIONS = {
    "last-updated": "last_updated",
    "temp": "temperature",
    "temperature": "temperature",
    "dewpoint": "dewpoint",
    "text": "text",
    "visibility": "visibility",
    "humidity": "humidity",
    "station": "station",
    "feels-like": "feels_like",
    "wind": "wind",
    "moon": "moon_phase",
    "uv": "uv",
    "barometer": "barometer",
}

LOC_OPTIONS = {
    "latitude": "latitude",
    "longitude": "longitude",
    "name": "name",
}

FC_DAY_OPTIONS = {
    "1": 0,
    "today": 0,
    "2": 1,
    "tomorrow": 1,
    "3": 2,
    "4": 3,
    "5": 4,
}

FC_OPTIONS = {
    "dow": "day_of_week",
    "high": "high",
    "hi": "high",
    "low": "low",
    "lo": "low",
    "sunset": "sunset",
    "sunrise": "sunrise",
    "text": "text",
    "cop": "chance_of_precip",
    "humidity": "humidity",
    "wind": "wind",
}

FC_NIGHT_OPTIONS = {
    "text": "text",
    "cop": "chance_of_precip",
    "humidity": "humidity",
    "wind": "wind",
}

VOCABULARY = frozenset(
    {
        *MAIN_COMMANDS,
        *CC_OPTIONS,
        *LOC_OPTIONS,
        *FC_DAY_OPTIONS,
        *WEEKDAYS,
        "all",
        *FC_OPTIONS,
        "night",
        *FC_NIGHT_OPTIONS,
    }
)


def parse_options(
    words: list[str],
    *,
    env_location: str | None = None,
    env_units: str | None = None,
    logger: logging.Logger | None = None,
) -> Invocation:
    """Turn command-line words into an :class:`Invocation`."""
    logger = logger or logging.getLogger(__name__)

    for index, word in enumerate(words):
        lowered = word.lower()
        if lowered == "help":
            return _parse_help(words[index + 1 :])
        if lowered == "version":
            if words[index + 1 :]:
                raise OptionError("too many arguments for `version'")
            return Invocation(action="version")
        if lowered in SHOW_COMMANDS:
            break

    location_words = [word for word in words if word.lower() not in VOCABULARY]
    if len(location_words) > 1:
        raise OptionError("too many location arguments given")
    remaining = [word for word in words if word.lower() in VOCABULARY]

    location = location_words[0] if location_words else env_location
    if location is not None and not location.strip():
        location = None
    metric = _resolve_units(remaining, env_units, logger)

    if location is None:
        raise MissingLocationError("no location given and WET_LOCATION not set")

    if not remaining:
        return Invocation(
            location=location,
            metric=metric,
            selection=Selection(default_display=True),
        )

    command = remaining[0].lower()
    options = remaining[1:]
    if command == "cc":
        selection = Selection(current_conditions=_parse_cc(options))
    elif command == "loc":
        selection = Selection(location=_parse_loc(options))
    elif command == "fc":
        selection = _parse_fc(options)
    else:
        raise OptionError(f"unknown command -- `{remaining[0]}'")

    return Invocation(location=location, metric=metric, selection=selection)


def _parse_help(words: list[str]) -> Invocation:
    if len(words) > 2:
        raise OptionError("too many arguments for `help'")
    topic = words[0] if words else None
    option = words[1] if len(words) > 1 else None
    return Invocation(action="help", help_topic=topic, help_option=option)


def _resolve_units(
    remaining: list[str], env_units: str | None, logger: logging.Logger
) -> bool:
    """Pop the first unit word from ``remaining`` and return whether metric."""
    for index, word in enumerate(remaining):
        lowered = word.lower()
        if lowered in UNIT_WORDS:
            del remaining[index]
            return lowered == "metric"

    if env_units:
        lowered = env_units.strip().lower()
        if lowered == "imperial":
            return False
        if lowered == "metric":
            return True
        logger.warning("ignoring invalid value for environment variable WET_UNITS: %r", env_units)
    return True


def _parse_cc(options: list[str]) -> CurrentConditionsSelection:
    if not options:
        return CurrentConditionsSelection(all=True)
    flags: dict[str, bool] = {}
    for word in options:
        field = CC_OPTIONS.get(word.lower())
        if field is None:
            raise OptionError(f"unknown `cc' option -- `{word}'")
        flags[field] = True
    return CurrentConditionsSelection(**flags)


def _parse_loc(options: list[str]) -> LocationSelection:
    if not options:
        return LocationSelection(all=True)
    flags: dict[str, bool] = {}
    for word in options:
        field = LOC_OPTIONS.get(word.lower())
        if field is None:
            raise OptionError(f"unknown `loc' option -- `{word}'")
        flags[field] = True
    return LocationSelection(**flags)


def _parse_fc(options: list[str]) -> Selection:
    days: set[int] = set()
    weekdays: list[str] = []
    fields: list[str] = []
    for word in options:
        lowered = word.lower()
        if lowered == "all":
            days.update(range(FORECAST_DAYS))
        elif lowered in FC_DAY_OPTIONS:
            days.add(FC_DAY_OPTIONS[lowered])
        elif lowered in WEEKDAYS:
            weekdays.append(lowered)
        else:
            fields.append(word)
    if not days and not weekdays:
        days.add(0)

    template = _parse_fc_fields(fields)
    forecasts = [
        template.model_copy(deep=True) if index in days else ForecastDaySelection()
        for index in range(FORECAST_DAYS)
    ]
    return Selection(
        forecasts=forecasts,
        weekdays=weekdays,
        weekday_fields=template if weekdays else None,
    )


def _parse_fc_fields(fields: list[str]) -> ForecastDaySelection:
    if not fields:
        return ForecastDaySelection(all=True)

    flags: dict[str, bool] = {}
    night: NightSelection | None = None
    words = iter(fields)
    for word in words:
        lowered = word.lower()
        if lowered == "night":
            night = _parse_night(list(words))
            break
        field = FC_OPTIONS.get(lowered)
        if field is None:
            raise OptionError(f"unknown `fc' option -- `{word}'")
        flags[field] = True
    return ForecastDaySelection(**flags, night=night or NightSelection())


def _parse_night(options: list[str]) -> NightSelection:
    if not options:
        return NightSelection(all=True)
    flags: dict[str, bool] = {}
    for word in options:
        field = FC_NIGHT_OPTIONS.get(word.lower())
        if field is None:
            raise OptionError(f"unknown `fc night' option -- `{word}'")
        flags[field] = True
    return NightSelection(**flags)
