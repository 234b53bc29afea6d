"""Selection tree describing which record fields to display."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .weather.models import FORECAST_DAYS, Found, WeatherRecord

WEEKDAYS = ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")


class CurrentConditionsSelection(BaseModel):
    all: bool = False
    last_updated: bool = False
    temperature: bool = False
    dewpoint: bool = False
    text: bool = False
    visibility: bool = False
    humidity: bool = False
    station: bool = False
    feels_like: bool = False
    wind: bool = False
    moon_phase: bool = False
    uv: bool = False
    barometer: bool = False


class LocationSelection(BaseModel):
    all: bool = False
    latitude: bool = False
    longitude: bool = False
    name: bool = False


class NightSelection(BaseModel):
    all: bool = False
    text: bool = False
    chance_of_precip: bool = False
    humidity: bool = False
    wind: bool = False


class ForecastDaySelection(BaseModel):
    all: bool = False
    day_of_week: bool = False
    high: bool = False
    low: bool = False
    sunset: bool = False
    sunrise: bool = False
    text: bool = False
    chance_of_precip: bool = False
    humidity: bool = False
    wind: bool = False
    night: NightSelection = Field(default_factory=NightSelection)

    def is_empty(self) -> bool:
        return self == ForecastDaySelection()


def _empty_days() -> list[ForecastDaySelection]:
    return [ForecastDaySelection() for _ in range(FORECAST_DAYS)]


class Selection(BaseModel):
    """Mirror of :class:`WeatherRecord` with a flag per displayable field."""

    default_display: bool = False
    current_conditions: CurrentConditionsSelection = Field(
        default_factory=CurrentConditionsSelection
    )
    location: LocationSelection = Field(default_factory=LocationSelection)
    forecasts: list[ForecastDaySelection] = Field(default_factory=_empty_days)
    # Weekday selectors can only be matched once the forecast is known.
    weekdays: list[str] = Field(default_factory=list)
    weekday_fields: ForecastDaySelection | None = None

    def resolve_weekdays(self, record: WeatherRecord) -> Selection:
        """Apply weekday selectors to the forecast days whose name matches."""
        if not self.weekdays or self.weekday_fields is None:
            return self
        wanted = {day.lower() for day in self.weekdays}
        forecasts = list(self.forecasts)
        for index, forecast in enumerate(record.forecasts[:FORECAST_DAYS]):
            name = forecast.day_of_week
            if isinstance(name, Found) and name.value.strip().lower() in wanted:
                forecasts[index] = _merge(forecasts[index], self.weekday_fields)
        return self.model_copy(
            update={"forecasts": forecasts, "weekdays": [], "weekday_fields": None}
        )


def _merge(
    base: ForecastDaySelection, extra: ForecastDaySelection
) -> ForecastDaySelection:
    merged = {
        key: value or getattr(extra, key)
        for key, value in base.model_dump(exclude={"night"}).items()
    }
    night = {
        key: value or getattr(extra.night, key)
        for key, value in base.night.model_dump().items()
    }
    return ForecastDaySelection(**merged, night=NightSelection(**night))


class Invocation(BaseModel):
    """Parsed command line: what to do, for which location and units."""

    action: Literal["show", "help", "version"] = "show"
    location: str | None = None
    metric: bool = True
    selection: Selection = Field(default_factory=Selection)
    help_topic: str | None = None
    help_option: str | None = None
