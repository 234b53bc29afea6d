"""End-to-end CLI tests with an offline HTTP transport."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from wet_weather import cli
from wet_weather.cli import ExitCode, main
from wet_weather.weather.client import WeatherClient

Handler = Callable[[httpx.Request], httpx.Response]


def _install_transport(monkeypatch: pytest.MonkeyPatch, handler: Handler) -> list[httpx.Request]:
    seen: list[httpx.Request] = []

    def recording(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    def factory(**kwargs: Any) -> WeatherClient:
        return WeatherClient(transport=httpx.MockTransport(recording), **kwargs)

    monkeypatch.setattr(cli, "WeatherClient", factory)
    return seen


def _provider(search: str, weather: str, status: int = 200) -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.startswith("/wxdata/search/"):
            return httpx.Response(200, text=search)
        return httpx.Response(status, text=weather)

    return handler


def test_missing_location_exits_before_any_request(
    monkeypatch: pytest.MonkeyPatch, capsys: Any
) -> None:
    seen = _install_transport(monkeypatch, _provider("", ""))

    exit_code = main([])

    assert exit_code == ExitCode.LOCATION
    assert seen == []
    captured = capsys.readouterr()
    assert "no location given and WET_LOCATION not set" in captured.err
    assert "Usage: wet" in captured.err
    assert captured.out == ""


def test_default_display_for_location(
    monkeypatch: pytest.MonkeyPatch,
    capsys: Any,
    search_document: str,
    weather_document: str,
) -> None:
    seen = _install_transport(monkeypatch, _provider(search_document, weather_document))

    exit_code = main(["New York, NY"])

    assert exit_code == ExitCode.SUCCESS
    search, weather = seen
    assert search.url.params["where"] == "New York, NY"
    assert weather.url.path == "/wxdata/weather/local/USNY0996"
    assert weather.url.params["unit"] == "m"
    output = capsys.readouterr().out
    assert "New York, NY (10001) (40.71, -74.01)" in output
    assert "Wind Conditions: 300° WNW at 14 km/h (32 km/h gusts)" in output


def test_selected_fields_with_environment_location(
    monkeypatch: pytest.MonkeyPatch,
    capsys: Any,
    search_document: str,
    weather_document: str,
) -> None:
    monkeypatch.setenv("WET_LOCATION", "New York")
    monkeypatch.setenv("WET_UNITS", "imperial")
    seen = _install_transport(monkeypatch, _provider(search_document, weather_document))
    monkeypatch.setattr(sys, "argv", ["wet", "cc", "wind", "humidity"])

    exit_code = main()

    assert exit_code == ExitCode.SUCCESS
    assert seen[0].url.params["where"] == "New York"
    assert seen[1].url.params["unit"] == ""
    output = capsys.readouterr().out
    assert "current humidity - 48%" in output
    assert "current wind conditions - 300° WNW" in output
    assert "Today's high" not in output


def test_location_not_found_is_a_weather_error(
    monkeypatch: pytest.MonkeyPatch, capsys: Any, empty_search_document: str
) -> None:
    seen = _install_transport(monkeypatch, _provider(empty_search_document, ""))

    exit_code = main(["Atlantis"])

    assert exit_code == ExitCode.WEATHER
    assert len(seen) == 1
    assert "failed to find location 'Atlantis'" in capsys.readouterr().err


def test_provider_error_block_is_reported(
    monkeypatch: pytest.MonkeyPatch,
    capsys: Any,
    search_document: str,
    error_document: str,
) -> None:
    _install_transport(monkeypatch, _provider(search_document, error_document))

    exit_code = main(["New York"])

    assert exit_code == ExitCode.WEATHER
    captured = capsys.readouterr()
    assert "Invalid location provided. (USXX9999)" in captured.err
    assert captured.out == ""


def test_error_block_without_message_is_a_retrieval_failure(
    monkeypatch: pytest.MonkeyPatch, capsys: Any, search_document: str
) -> None:
    document = '<error><err type="2"></err></error>'
    _install_transport(monkeypatch, _provider(search_document, document))

    exit_code = main(["New York"])

    assert exit_code == ExitCode.NETWORK
    assert "failed to retrieve weather data" in capsys.readouterr().err


def test_http_failure_is_a_network_error(
    monkeypatch: pytest.MonkeyPatch, capsys: Any, search_document: str
) -> None:
    _install_transport(monkeypatch, _provider(search_document, "oops", status=500))

    exit_code = main(["New York"])

    assert exit_code == ExitCode.NETWORK
    assert "status 500" in capsys.readouterr().err


def test_connection_failure_is_a_network_error(
    monkeypatch: pytest.MonkeyPatch, capsys: Any
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("name resolution failed", request=request)

    _install_transport(monkeypatch, handler)

    exit_code = main(["New York"])

    assert exit_code == ExitCode.NETWORK
    assert "name resolution failed" in capsys.readouterr().err


def test_unknown_option_exits_with_usage(monkeypatch: pytest.MonkeyPatch, capsys: Any) -> None:
    seen = _install_transport(monkeypatch, _provider("", ""))

    exit_code = main(["Paris", "cc", "latitude"])

    assert exit_code == ExitCode.OPTION
    assert seen == []
    captured = capsys.readouterr()
    assert "unknown `cc' option -- `latitude'" in captured.err
    assert "Usage: wet" in captured.err


def test_help_and_version_need_no_location(
    monkeypatch: pytest.MonkeyPatch, capsys: Any
) -> None:
    seen = _install_transport(monkeypatch, _provider("", ""))

    assert main(["help", "loc"]) == ExitCode.SUCCESS
    assert "Location Options" in capsys.readouterr().out

    assert main(["version"]) == ExitCode.SUCCESS
    assert "wet (WEather Tool) 1.0" in capsys.readouterr().out
    assert seen == []


def test_unknown_help_topic_is_an_option_error(capsys: Any) -> None:
    assert main(["help", "radar"]) == ExitCode.OPTION
    assert "unknown command -- `radar'" in capsys.readouterr().err


def test_invalid_configuration_is_a_system_error(
    monkeypatch: pytest.MonkeyPatch, capsys: Any
) -> None:
    monkeypatch.setenv("WET_TIMEOUT_SECONDS", "0")

    assert main(["Paris"]) == ExitCode.SYSTEM
    assert "Configuration failure" in capsys.readouterr().err


def test_verbose_flag_logs_requests(
    monkeypatch: pytest.MonkeyPatch,
    capsys: Any,
    search_document: str,
    weather_document: str,
) -> None:
    _install_transport(monkeypatch, _provider(search_document, weather_document))

    exit_code = main(["-v", "New York", "loc"])

    assert exit_code == ExitCode.SUCCESS
    captured = capsys.readouterr()
    assert '"level": "DEBUG"' in captured.err
    assert "/wxdata/weather/local/USNY0996" in captured.err
    assert "Latitude" in captured.out


def test_provider_error_message_reaches_stderr_verbatim(
    monkeypatch: pytest.MonkeyPatch, capsys: Any, search_document: str
) -> None:
    document = '<error><err type="0">Ubicación "X" inválida</err></error>'
    _install_transport(monkeypatch, _provider(search_document, document))

    exit_code = main(["Zürich"])

    assert exit_code == ExitCode.WEATHER
    err = capsys.readouterr().err
    assert "Ubicación" in err
    assert "inválida" in err
    messages = [json.loads(line)["message"] for line in err.splitlines() if line.startswith("{")]
    assert 'weather: Ubicación "X" inválida' in messages


def test_location_not_found_keeps_non_ascii_name(
    monkeypatch: pytest.MonkeyPatch, capsys: Any, empty_search_document: str
) -> None:
    _install_transport(monkeypatch, _provider(empty_search_document, ""))

    assert main(["Zürich"]) == ExitCode.WEATHER
    assert "failed to find location 'Zürich'" in capsys.readouterr().err


def test_location_may_start_with_a_dash(
    monkeypatch: pytest.MonkeyPatch,
    capsys: Any,
    search_document: str,
    weather_document: str,
) -> None:
    seen = _install_transport(monkeypatch, _provider(search_document, weather_document))

    exit_code = main(["-33.87,151.21", "loc"])

    assert exit_code == ExitCode.SUCCESS
    assert seen[0].url.params["where"] == "-33.87,151.21"
    assert "Latitude" in capsys.readouterr().out


def test_unknown_long_flag_is_a_usage_error(capsys: Any) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--bogus", "Paris"])

    assert exc_info.value.code == ExitCode.OPTION
    assert "unrecognized arguments: --bogus" in capsys.readouterr().err
