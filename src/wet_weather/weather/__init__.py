"""Weather provider integration and document extraction."""

from .base import WeatherProvider
from .client import WeatherClient, encode_query
from .extract import TextView, extract_location_id, extract_weather
from .models import (
    NOT_FOUND,
    NOT_FOUND_TEXT,
    Found,
    NotFound,
    WeatherRecord,
    display_text,
)

__all__ = [
    "NOT_FOUND",
    "NOT_FOUND_TEXT",
    "Found",
    "NotFound",
    "TextView",
    "WeatherClient",
    "WeatherProvider",
    "WeatherRecord",
    "display_text",
    "encode_query",
    "extract_location_id",
    "extract_weather",
]
