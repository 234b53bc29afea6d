"""Logging setup for command-line execution."""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO


class JsonConsoleFormatter(logging.Formatter):
    """One JSON object per record, kept off stdout so weather output stays clean."""

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            event["exception"] = self.formatException(record.exc_info)
        return json.dumps(event, ensure_ascii=False, default=str)


def setup_logger(
    name: str = "wet_weather",
    level: int | str = logging.WARNING,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the process logger to write JSON lines to ``stream`` (stderr).

    Calling it again reuses the handler installed here and points it at the
    current stream. Handlers attached by anything else are left alone.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    target = stream if stream is not None else sys.stderr

    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and isinstance(
            handler.formatter, JsonConsoleFormatter
        ):
            handler.setStream(target)
            return logger

    handler = logging.StreamHandler(target)
    handler.setFormatter(JsonConsoleFormatter())
    logger.addHandler(handler)
    return logger
