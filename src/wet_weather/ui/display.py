"""Render extracted weather records for the terminal."""

from __future__ import annotations

import re

from rich.console import Console, RenderableType
from rich.table import Table
from rich.text import Text

from ..selection import ForecastDaySelection, Selection
from ..weather.models import (
    CurrentConditions,
    DayPart,
    FieldValue,
    ForecastDay,
    Found,
    Location,
    Units,
    WeatherRecord,
    Wind,
    display_text,
)

DEGREE = "\N{DEGREE SIGN}"

_LEADING_NUMBER_RE = re.compile(r"\d+")


def _temp(value: FieldValue, units: Units) -> str:
    return f"{display_text(value)}{DEGREE}{units.temperature}"


def _percent(value: FieldValue) -> str:
    return f"{display_text(value)}%"


def _with_unit(value: FieldValue, unit: str) -> str:
    return f"{display_text(value)}{unit}"


def format_wind(wind: Wind, units: Units) -> str:
    """One-line wind summary: direction, description, speed and gusts."""
    line = f"{display_text(wind.direction)}{DEGREE} {display_text(wind.text)}"
    unit = f" {units.speed}" if units.speed else ""
    speed = wind.speed
    if isinstance(speed, Found):
        match = _LEADING_NUMBER_RE.match(speed.value)
        if match and int(match.group()) != 0:
            line += f" at {speed.value}{unit}"
    gust = wind.gust
    if isinstance(gust, Found) and gust.value.strip().lower() != "n/a":
        line += f" ({gust.value}{unit} gusts)"
    return line


def _block() -> Table:
    table = Table(show_header=False, box=None)
    table.add_column("Field", no_wrap=True)
    table.add_column("Value", overflow="fold")
    return table


def _row(table: Table, label: str, value: str) -> None:
    table.add_row(Text(label), Text(value))


def _day_label(index: int, forecast: ForecastDay, *, night: bool) -> str:
    if index == 0:
        return "tonight" if night else "today"
    name = display_text(forecast.day_of_week)
    return f"{name} night" if night else name


def _part(part: DayPart | None) -> DayPart:
    # Parts are unset when the day entry was missing; render them as not found.
    return part if part is not None else DayPart()


def _default_view(record: WeatherRecord) -> list[RenderableType]:
    units = record.units
    location = record.location or Location()
    cc = record.current_conditions or CurrentConditions()
    today = record.forecasts[0] if record.forecasts else ForecastDay()
    lines = [
        f"{display_text(location.name)} "
        f"({display_text(location.latitude)}, {display_text(location.longitude)})",
        f"{_temp(cc.temperature, units)} and {display_text(cc.text)} "
        f"(feels like {_temp(cc.feels_like, units)})",
        f"Today's high:    {_temp(today.high, units)}",
        f"Today's low:     {_temp(today.low, units)}",
        f"Visibility:      {_with_unit(cc.visibility, units.distance)}",
        f"Humidity:        {_percent(cc.humidity)}",
        f"Dew Point:       {_temp(cc.dewpoint, units)}",
        f"Sunrise:         {display_text(today.sunrise)}",
        f"Sunset:          {display_text(today.sunset)}",
        f"Wind Conditions: {format_wind(cc.wind, units)}",
    ]
    return [Text(line) for line in lines]


def _current_conditions_view(
    cc: CurrentConditions, units: Units, selection: Selection
) -> list[RenderableType]:
    wanted = selection.current_conditions
    if wanted.all:
        table = _block()
        _row(table, "Last Updated", display_text(cc.last_updated))
        _row(table, "Temperature", _temp(cc.temperature, units))
        _row(table, "Dew Point", _temp(cc.dewpoint, units))
        _row(table, "Visibility", _with_unit(cc.visibility, units.distance))
        _row(table, "Humidity", _percent(cc.humidity))
        _row(table, "Local Station", display_text(cc.station))
        _row(table, "Feels Like", _temp(cc.feels_like, units))
        _row(table, "Moon", display_text(cc.moon_phase))
        _row(table, "UV Index", f"{display_text(cc.uv.index)} ({display_text(cc.uv.text)})")
        _row(
            table,
            "Barometric Pressure",
            f"{_with_unit(cc.barometer.reading, units.pressure)} "
            f"({display_text(cc.barometer.direction)})",
        )
        _row(table, "Wind", format_wind(cc.wind, units))
        return [Text(f"Current Conditions - {display_text(cc.text)}"), table]

    lines: list[str] = []
    if wanted.last_updated:
        lines.append(f"last updated - {display_text(cc.last_updated)}")
    if wanted.temperature:
        lines.append(f"current temperature - {_temp(cc.temperature, units)}")
    if wanted.dewpoint:
        lines.append(f"current dew point - {_temp(cc.dewpoint, units)}")
    if wanted.text:
        lines.append(display_text(cc.text))
    if wanted.visibility:
        lines.append(f"current visibility - {_with_unit(cc.visibility, units.distance)}")
    if wanted.humidity:
        lines.append(f"current humidity - {_percent(cc.humidity)}")
    if wanted.station:
        lines.append(f"current local station - {display_text(cc.station)}")
    if wanted.feels_like:
        lines.append(f"currently feels like - {_temp(cc.feels_like, units)}")
    if wanted.wind:
        lines.append(f"current wind conditions - {format_wind(cc.wind, units)}")
    if wanted.moon_phase:
        lines.append(f"current moon phase - {display_text(cc.moon_phase)}")
    if wanted.uv:
        lines.append(
            f"current uv index - {display_text(cc.uv.index)} ({display_text(cc.uv.text)})"
        )
    if wanted.barometer:
        lines.append(
            "current barometric pressure - "
            f"{_with_unit(cc.barometer.reading, units.pressure)} "
            f"({display_text(cc.barometer.direction)})"
        )
    return [Text(line) for line in lines]


def _location_view(location: Location, selection: Selection) -> list[RenderableType]:
    wanted = selection.location
    if wanted.all:
        table = _block()
        _row(table, "Latitude", display_text(location.latitude))
        _row(table, "Longitude", display_text(location.longitude))
        return [Text(display_text(location.name)), table]

    lines: list[str] = []
    if wanted.latitude:
        lines.append(f"latitude - {display_text(location.latitude)}")
    if wanted.longitude:
        lines.append(f"longitude - {display_text(location.longitude)}")
    if wanted.name:
        lines.append(f"location name - {display_text(location.name)}")
    return [Text(line) for line in lines]


def _part_title(prefix: str, part: DayPart) -> str:
    if isinstance(part.text, Found) and part.text.value:
        return f"{prefix} - {part.text.value}"
    return prefix


def _forecast_view(
    index: int, forecast: ForecastDay, units: Units, wanted: ForecastDaySelection
) -> list[RenderableType]:
    daytime = _part(forecast.daytime)
    night = _part(forecast.night)
    out: list[RenderableType] = []

    if wanted.all:
        name = display_text(forecast.day_of_week)
        if index == 0:
            heading = f"Forecast for today ({name})"
            night_heading = "Tonight"
        elif index == 1:
            heading = f"Forecast for tomorrow ({name})"
            night_heading = "Tomorrow night"
        else:
            heading = f"Forecast for {name}"
            night_heading = f"{name} night"

        table = _block()
        _row(table, "high", _temp(forecast.high, units))
        _row(table, "low", _temp(forecast.low, units))
        _row(table, "sunset", display_text(forecast.sunset))
        _row(table, "sunrise", display_text(forecast.sunrise))
        _row(table, "chance of precipitation", _percent(daytime.chance_of_precip))
        _row(table, "humidity", _percent(daytime.humidity))
        _row(table, "wind", format_wind(daytime.wind, units))
        out.extend([Text(_part_title(heading, daytime)), table])
        out.extend(_night_table(_part_title(night_heading, night), night, units))
        return out

    label = _day_label(index, forecast, night=False)
    lines: list[str] = []
    if wanted.day_of_week:
        lines.append(display_text(forecast.day_of_week))
    if wanted.high:
        lines.append(f"{label}'s high - {_temp(forecast.high, units)}")
    if wanted.low:
        lines.append(f"{label}'s low - {_temp(forecast.low, units)}")
    if wanted.sunset:
        lines.append(f"{label}'s sunset - {display_text(forecast.sunset)}")
    if wanted.sunrise:
        lines.append(f"{label}'s sunrise - {display_text(forecast.sunrise)}")
    if wanted.text:
        lines.append(f"{label}'s {display_text(daytime.text)}")
    if wanted.chance_of_precip:
        lines.append(f"{label}'s chance of precipitation - {_percent(daytime.chance_of_precip)}")
    if wanted.humidity:
        lines.append(f"{label}'s humidity - {_percent(daytime.humidity)}")
    if wanted.wind:
        lines.append(f"{label}'s wind - {format_wind(daytime.wind, units)}")
    out.extend(Text(line) for line in lines)

    night_wanted = wanted.night
    if night_wanted.all:
        if index == 0:
            heading = "Forecast for tonight"
        elif index == 1:
            heading = "Forecast for tomorrow night"
        else:
            heading = f"Forecast for {display_text(forecast.day_of_week)} night"
        out.extend(_night_table(_part_title(heading, night), night, units))
        return out

    night_label = _day_label(index, forecast, night=True)
    night_lines: list[str] = []
    if night_wanted.text:
        night_lines.append(f"{night_label}'s {display_text(night.text)}")
    if night_wanted.chance_of_precip:
        night_lines.append(
            f"{night_label}'s chance of precipitation - {_percent(night.chance_of_precip)}"
        )
    if night_wanted.humidity:
        night_lines.append(f"{night_label}'s humidity - {_percent(night.humidity)}")
    if night_wanted.wind:
        night_lines.append(f"{night_label}'s wind - {format_wind(night.wind, units)}")
    out.extend(Text(line) for line in night_lines)
    return out


def _night_table(title: str, night: DayPart, units: Units) -> list[RenderableType]:
    table = _block()
    _row(table, "chance of precipitation", _percent(night.chance_of_precip))
    _row(table, "humidity", _percent(night.humidity))
    _row(table, "wind", format_wind(night.wind, units))
    return [Text(title), table]


def build_renderables(record: WeatherRecord, selection: Selection) -> list[RenderableType]:
    """Build the renderables for the selected fields of ``record``."""
    if selection.default_display:
        return _default_view(record)

    out: list[RenderableType] = []
    out.extend(
        _current_conditions_view(
            record.current_conditions or CurrentConditions(), record.units, selection
        )
    )
    out.extend(_location_view(record.location or Location(), selection))
    for index, wanted in enumerate(selection.forecasts):
        forecast = record.forecasts[index] if index < len(record.forecasts) else ForecastDay()
        out.extend(_forecast_view(index, forecast, record.units, wanted))
    return out


def display(console: Console, record: WeatherRecord, selection: Selection) -> None:
    """Print the selected fields of ``record``, wrapped to the console width."""
    for renderable in build_renderables(record, selection):
        console.print(renderable)

