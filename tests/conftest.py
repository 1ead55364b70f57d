from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


def _load_json(name: str) -> Any:
    return json.loads((FIXTURES / name).read_text())


@pytest.fixture
def tickets_payload() -> list[dict[str, Any]]:
    return _load_json("tickets.json")


@pytest.fixture
def guests_payload() -> list[dict[str, Any]]:
    return _load_json("virtual_guests.json")


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "SL_API_ENDPOINT",
        "SL_TIMEZONE",
        "SL_TICKET_LIMIT",
        "SL_REQUEST_TIMEOUT",
        "HONCHEONUI_PROVIDER",
        "HONCHEONUI_LOG_LEVEL",
        "SL_USERNAME",
        "SL_API_KEY",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("honcheonui_softlayer")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
