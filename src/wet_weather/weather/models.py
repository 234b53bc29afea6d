"""Typed models for extracted weather records."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

FORECAST_DAYS = 5
NOT_FOUND_TEXT = "(not found)"


class Found(BaseModel):
    """A value copied verbatim from the provider document."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["found"] = "found"
    value: str


class NotFound(BaseModel):
    """Marker for a value the provider document did not supply."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["not_found"] = "not_found"


FieldValue = Annotated[Found | NotFound, Field(discriminator="kind")]

NOT_FOUND = NotFound()


def display_text(value: FieldValue) -> str:
    """Return the printable text for a field, substituting the sentinel."""
    if isinstance(value, Found):
        return value.value
    return NOT_FOUND_TEXT


class _Section(BaseModel):
    model_config = ConfigDict(frozen=True)


class ProviderError(_Section):
    """Error block returned by the weather service instead of data."""

    kind: str = ""
    message: str = ""


class Units(_Section):
    """Unit labels; empty when the document leaves them out."""

    temperature: str = ""
    distance: str = ""
    speed: str = ""
    pressure: str = ""
    rainfall: str = ""


class Location(_Section):
    name: FieldValue = NOT_FOUND
    latitude: FieldValue = NOT_FOUND
    longitude: FieldValue = NOT_FOUND


class Wind(_Section):
    gust: FieldValue = NOT_FOUND
    direction: FieldValue = NOT_FOUND
    speed: FieldValue = NOT_FOUND
    text: FieldValue = NOT_FOUND


class UV(_Section):
    index: FieldValue = NOT_FOUND
    text: FieldValue = NOT_FOUND


class Barometer(_Section):
    direction: FieldValue = NOT_FOUND
    reading: FieldValue = NOT_FOUND


class CurrentConditions(_Section):
    """Observed conditions at the reporting station."""

    last_updated: FieldValue = NOT_FOUND
    temperature: FieldValue = NOT_FOUND
    dewpoint: FieldValue = NOT_FOUND
    text: FieldValue = NOT_FOUND
    visibility: FieldValue = NOT_FOUND
    humidity: FieldValue = NOT_FOUND
    station: FieldValue = NOT_FOUND
    feels_like: FieldValue = NOT_FOUND
    moon_phase: FieldValue = NOT_FOUND
    uv: UV = Field(default_factory=UV)
    barometer: Barometer = Field(default_factory=Barometer)
    wind: Wind = Field(default_factory=Wind)


class DayPart(_Section):
    """Daytime or nighttime half of a forecast day."""

    text: FieldValue = NOT_FOUND
    chance_of_precip: FieldValue = NOT_FOUND
    humidity: FieldValue = NOT_FOUND
    wind: Wind = Field(default_factory=Wind)


class ForecastDay(_Section):
    """One forecast day.

    ``daytime`` and ``night`` are ``None`` when the day entry itself was
    missing from the document: only the direct scalars are marked not found
    in that case.
    """

    day_of_week: FieldValue = NOT_FOUND
    high: FieldValue = NOT_FOUND
    low: FieldValue = NOT_FOUND
    sunset: FieldValue = NOT_FOUND
    sunrise: FieldValue = NOT_FOUND
    daytime: DayPart | None = None
    night: DayPart | None = None


class WeatherRecord(_Section):
    """Everything extracted from one provider document."""

    location_id: str = ""
    error: ProviderError | None = None
    units: Units = Field(default_factory=Units)
    location: Location | None = None
    current_conditions: CurrentConditions | None = None
    forecasts: list[ForecastDay] = Field(default_factory=list)

    @property
    def failed(self) -> bool:
        return self.error is not None
