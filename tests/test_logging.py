from __future__ import annotations

import io
import json
import logging

import pytest

from fakes import FakeResponse, FakeSessionFactory
from honcheonui_softlayer.shared.logging import get_logger, setup_logging
from honcheonui_softlayer.softlayer.errors import RemoteQueryFailure
from honcheonui_softlayer.softlayer.provider import SoftLayerProvider


def test_setup_logging_writes_json_lines_with_plugin_fields() -> None:
    stream = io.StringIO()
    logger = setup_logging(level="debug", stream=stream)

    get_logger("softlayer.provider").debug("got %d tickets", 3)

    line = json.loads(stream.getvalue().strip())
    assert line["msg"] == "got 3 tickets"
    assert line["level"] == "debug"
    assert line["facility"] == "plugin"
    assert line["program"] == "softlayer"
    assert line["logger"] == "honcheonui_softlayer.softlayer.provider"
    assert logger.propagate is False


def test_setup_logging_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HONCHEONUI_LOG_LEVEL", "warning")
    stream = io.StringIO()

    logger = setup_logging(stream=stream)
    logger.info("hidden")
    logger.warning("shown")

    lines = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert [line["msg"] for line in lines] == ["shown"]


def test_setup_logging_replaces_previous_handler() -> None:
    first, second = io.StringIO(), io.StringIO()
    setup_logging(level="INFO", stream=first)
    logger = setup_logging(level="INFO", stream=second)

    logger.info("once")

    assert first.getvalue() == ""
    assert len(logger.handlers) == 1
    assert json.loads(second.getvalue())["msg"] == "once"


def test_setup_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging(level="chatty", stream=io.StringIO())


def test_exception_info_is_included() -> None:
    stream = io.StringIO()
    logger = setup_logging(level="ERROR", stream=stream)

    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logger.exception("query failed")

    line = json.loads(stream.getvalue())
    assert "RuntimeError: boom" in line["error"]


def test_get_logger_names() -> None:
    assert get_logger().name == "honcheonui_softlayer"
    assert get_logger("honcheonui_softlayer.cli").name == "honcheonui_softlayer.cli"
    assert get_logger("cli").name == "honcheonui_softlayer.cli"
    assert isinstance(get_logger("cli"), logging.Logger)


def test_default_provider_logger_writes_through_package_handler() -> None:
    stream = io.StringIO()
    setup_logging(level="error", stream=stream)
    factory = FakeSessionFactory([FakeResponse(401, {"error": "Access Denied."})])
    provider = SoftLayerProvider(session_factory=factory)

    with pytest.raises(RemoteQueryFailure):
        provider.check_account("sl-user", "bad-key")

    line = json.loads(stream.getvalue())
    assert line["level"] == "error"
    assert line["logger"] == "honcheonui_softlayer.softlayer.provider"
    assert line["msg"].startswith("softlayer api exception")
