"""weather.com XML data feed client."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..config import Settings
from ..exceptions import TransportError
from .base import WeatherProvider

SEARCH_PATH = "/wxdata/search/search?where={query}"
WEATHER_PATH = "/wxdata/weather/local/{location_id}?unit={unit}&dayf=5&cc=*"

# Characters the search endpoint rejects unescaped.
ENCODE_CHARS = frozenset("!@#$%^&*()=+{}[]|\\;':\",<>/? ")


def encode_query(query: str) -> str:
    """Percent-encode the characters in ``ENCODE_CHARS``; pass the rest through."""
    return "".join(f"%{ord(ch):02X}" if ch in ENCODE_CHARS else ch for ch in query)


class WeatherClient(WeatherProvider):
    """Fetches raw location-search and weather documents over HTTP."""

    provider_name = "weather.com"

    def __init__(
        self,
        settings: Settings,
        logger: logging.Logger,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.logger = logger
        self._base_url = settings.wet_base_url.rstrip("/")
        self._client = httpx.Client(
            timeout=settings.wet_timeout_seconds,
            follow_redirects=True,
            headers={"User-Agent": settings.wet_user_agent},
            transport=transport,
        )

    def __enter__(self) -> WeatherClient:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def search_location(self, query: str) -> str:
        path = SEARCH_PATH.format(query=encode_query(query))
        return self.get(self._base_url + path, context="location search")

    def fetch_weather(self, location_id: str, *, metric: bool = True) -> str:
        path = WEATHER_PATH.format(
            location_id=encode_query(location_id),
            unit="m" if metric else "",
        )
        return self.get(self._base_url + path, context="weather fetch")

    def get(self, url: str, context: str = "request") -> str:
        """Issue one GET and return the body text."""
        self.logger.debug("GET %s (%s)", url, context)
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise TransportError(
                f"{context} failed with status {status} "
                f"({exc.response.reason_phrase}) at {url}",
                status_code=status,
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"{context} request failed at {url}: {exc}") from exc

        self.logger.debug(
            "http status: %d (%s)", response.status_code, response.reason_phrase
        )
        return response.text
