"""Shared pytest fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from wet_weather.log_setup import JsonConsoleFormatter

FIXTURES = Path(__file__).parent / "fixtures"

WET_ENV_VARS = (
    "WET_LOCATION",
    "WET_UNITS",
    "WET_BASE_URL",
    "WET_TIMEOUT_SECONDS",
    "WET_USER_AGENT",
    "WET_LOG_LEVEL",
)


def read_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    # Settings read `.env` from the working directory and the process env.
    monkeypatch.chdir(tmp_path)
    for name in WET_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    yield
    logger = logging.getLogger("wet_weather")
    for handler in list(logger.handlers):
        if isinstance(handler.formatter, JsonConsoleFormatter):
            logger.removeHandler(handler)


@pytest.fixture
def weather_document() -> str:
    return read_fixture("weather_full.xml")


@pytest.fixture
def search_document() -> str:
    return read_fixture("search_new_york.xml")


@pytest.fixture
def empty_search_document() -> str:
    return read_fixture("search_empty.xml")


@pytest.fixture
def error_document() -> str:
    return read_fixture("weather_error.xml")
