"""Provider-agnostic weather interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class WeatherProvider(ABC):
    """Base contract for services answering location and weather lookups."""

    @abstractmethod
    def search_location(self, query: str) -> str:
        """Return the raw location-search document for a free-text query."""

    @abstractmethod
    def fetch_weather(self, location_id: str, *, metric: bool = True) -> str:
        """Return the raw weather document for a provider location id."""

    @abstractmethod
    def close(self) -> None:
        """Release provider resources."""
