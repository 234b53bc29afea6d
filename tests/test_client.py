"""HTTP client tests against an in-process mock transport."""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import httpx
import pytest

from wet_weather.exceptions import TransportError
from wet_weather.weather.client import ENCODE_CHARS, WeatherClient, encode_query

Handler = Callable[[httpx.Request], httpx.Response]


def _make_settings(**overrides: Any) -> Any:
    defaults = {
        "wet_base_url": "http://wxdata.example.test",
        "wet_timeout_seconds": 5.0,
        "wet_user_agent": "wet-tests/1.0",
    }
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


def _make_client(handler: Handler, **settings_overrides: Any) -> WeatherClient:
    return WeatherClient(
        settings=_make_settings(**settings_overrides),
        logger=logging.getLogger("test_client"),
        transport=httpx.MockTransport(handler),
    )


def test_encode_query_escapes_only_reserved_characters() -> None:
    assert encode_query("New York, NY") == "New%20York%2C%20NY"
    assert encode_query("Zürich-Nord_2.0~") == "Zürich-Nord_2.0~"


def test_encode_query_covers_every_reserved_character() -> None:
    query = "".join(sorted(ENCODE_CHARS))

    encoded = encode_query(query)

    assert encoded == "".join(f"%{ord(ch):02X}" for ch in sorted(ENCODE_CHARS))
    assert len(encoded) == 3 * len(ENCODE_CHARS)
    assert encode_query("a b") == "a%20b"
    assert encode_query("50%") == "50%25"


def test_search_location_requests_encoded_query(search_document: str) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text=search_document)

    with _make_client(handler) as client:
        body = client.search_location("New York, NY")

    assert body == search_document
    (request,) = seen
    assert request.method == "GET"
    assert request.url.host == "wxdata.example.test"
    assert request.url.path == "/wxdata/search/search"
    assert request.url.params["where"] == "New York, NY"
    assert b"%2C" in request.url.raw_path
    assert request.headers["User-Agent"] == "wet-tests/1.0"


@pytest.mark.parametrize(("metric", "unit"), [(True, "m"), (False, "")])
def test_fetch_weather_selects_unit_suffix(metric: bool, unit: str) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="<weather></weather>")

    with _make_client(handler) as client:
        client.fetch_weather("USNY0996", metric=metric)

    (request,) = seen
    assert request.url.path == "/wxdata/weather/local/USNY0996"
    assert request.url.params["unit"] == unit
    assert request.url.params["dayf"] == "5"
    assert request.url.params["cc"] == "*"


def test_trailing_slash_in_base_url_is_ignored() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="")

    with _make_client(handler, wet_base_url="http://wxdata.example.test/") as client:
        client.search_location("Paris")

    assert seen[0].url.path == "/wxdata/search/search"


def test_redirects_are_followed() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/wxdata/search/search":
            return httpx.Response(
                301, headers={"Location": "http://wxdata.example.test/moved/search"}
            )
        return httpx.Response(200, text='<loc id="FRXX0076">Paris</loc>')

    with _make_client(handler) as client:
        body = client.search_location("Paris")

    assert "FRXX0076" in body


def test_non_2xx_status_raises_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="unavailable")

    with _make_client(handler) as client:
        with pytest.raises(TransportError) as exc_info:
            client.fetch_weather("USNY0996")

    assert exc_info.value.status_code == 503
    assert "503" in str(exc_info.value)
    assert "weather fetch" in str(exc_info.value)


def test_connection_failure_raises_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with _make_client(handler) as client:
        with pytest.raises(TransportError) as exc_info:
            client.search_location("Paris")

    assert exc_info.value.status_code is None
    assert "connection refused" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
