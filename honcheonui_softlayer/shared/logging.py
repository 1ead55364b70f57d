"""Logging configuration for the adapter.

Records are written to stdout as one json object per line, tagged with the
facility and program fields the honcheonui host collects plugin logs by.

Environment Variables:
    HONCHEONUI_LOG_LEVEL: Level name for the package logger (default: "INFO")
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone

LOGGER_NAME = "honcheonui_softlayer"
FACILITY = "plugin"
PROGRAM = "softlayer"


class JsonLineFormatter(logging.Formatter):
    """Format records as single-line json with fixed plugin fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "msg": record.getMessage(),
            "logger": record.name,
            "facility": FACILITY,
            "program": PROGRAM,
        }
        if record.exc_info:
            payload["error"] = self.formatException(record.exc_info)
        return json.dumps(payload, sort_keys=True)


def setup_logging(level: str | None = None, stream=None) -> logging.Logger:
    """Configure the package logger once and return it.

    Calling again replaces the handler, so tests may redirect the stream.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JsonLineFormatter())
    logger.addHandler(handler)

    level_name = (level or os.environ.get("HONCHEONUI_LOG_LEVEL") or "INFO").strip().upper()
    resolved = logging.getLevelName(level_name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level_name}")
    logger.setLevel(resolved)
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a child of the package logger."""

    if not name:
        return logging.getLogger(LOGGER_NAME)
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


__all__ = ["JsonLineFormatter", "get_logger", "setup_logging"]
