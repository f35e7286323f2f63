"""
cpe-wfn — unit tests for observability logging

File: tests/unit/observability/test_logging.py

Purpose
- Validate JSON-lines and text output of the package log handler and its teardown.

What this test file should cover
- JSON line validity with extra fields from the domain layer.
- Handler replacement on repeated setup.
- Level parsing and rejection of bad settings.
"""

from __future__ import annotations

import io
import json
import logging
from typing import TYPE_CHECKING
from uuid import uuid4

import pytest

from cpe_wfn.domain.errors import WfnValidationError
from cpe_wfn.domain.wfn import Wfn
from cpe_wfn.observability.logging import (
    LoggingConfig,
    get_active_logger,
    setup_logging,
    shutdown_logging,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _cleanup_logging() -> Iterator[None]:
    yield
    shutdown_logging()


def _logger_name() -> str:
    return f"cpe_wfn.tests.logging.{uuid4().hex}"


def _json_lines(stream: io.StringIO) -> list[dict[str, object]]:
    return [json.loads(line) for line in stream.getvalue().splitlines()]


def test_json_lines_carry_message_level_and_fields() -> None:
    stream = io.StringIO()
    logger_name = _logger_name()
    logger = setup_logging(
        LoggingConfig(level="INFO", json_lines=True, logger_name=logger_name, stream=stream)
    )

    logger.debug("hidden")
    logger.info("parsed %s", "vendor", extra={"attribute": "vendor", "count": 2})

    events = _json_lines(stream)
    assert len(events) == 1
    event = events[0]
    assert event["level"] == "INFO"
    assert event["logger"] == logger_name
    assert event["message"] == "parsed vendor"
    assert event["fields"] == {"attribute": "vendor", "count": 2}
    assert str(event["timestamp"]).endswith("Z")


def test_exceptions_are_serialized() -> None:
    stream = io.StringIO()
    logger = setup_logging(
        LoggingConfig(level="ERROR", json_lines=True, logger_name=_logger_name(), stream=stream)
    )
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logger.exception("failed")

    (event,) = _json_lines(stream)
    assert "RuntimeError: boom" in str(event["exception"])


def test_domain_rejections_reach_package_logger_as_json() -> None:
    stream = io.StringIO()
    setup_logging(LoggingConfig(level="DEBUG", json_lines=True, stream=stream))

    wfn = Wfn()
    wfn.set_part("a")
    with pytest.raises(WfnValidationError):
        wfn.set_vendor("two words")

    events = _json_lines(stream)
    assert [event["message"] for event in events] == [
        "assigned part",
        "rejected value for vendor",
    ]
    assert events[1]["fields"] == {"attribute": "vendor", "error_kind": "contains_whitespace"}
    assert events[1]["logger"] == "cpe_wfn.domain.wfn"


def test_text_format_and_handler_replacement() -> None:
    first = io.StringIO()
    second = io.StringIO()
    logger_name = _logger_name()

    setup_logging(LoggingConfig(level="INFO", logger_name=logger_name, stream=first))
    logger = setup_logging(LoggingConfig(level="INFO", logger_name=logger_name, stream=second))
    logger.info("hello")

    assert first.getvalue() == ""
    assert f"INFO {logger_name}: hello" in second.getvalue()
    assert len(logger.handlers) == 1
    assert get_active_logger(logger_name) is logger


def test_shutdown_detaches_handler() -> None:
    stream = io.StringIO()
    logger_name = _logger_name()
    logger = setup_logging(LoggingConfig(level="INFO", logger_name=logger_name, stream=stream))

    shutdown_logging(logger_name)
    logger.info("after shutdown")

    assert stream.getvalue() == ""
    assert logger.handlers == []
    assert logger.propagate is True
    assert get_active_logger(logger_name) is None


@pytest.mark.parametrize(
    ("config", "message"),
    [
        (LoggingConfig(level="chatty"), "unsupported logging level"),
        (LoggingConfig(level=True), "got bool"),
        (LoggingConfig(logger_name="  "), "must not be empty"),
    ],
)
def test_invalid_settings_are_rejected(config: LoggingConfig, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        setup_logging(config)


def test_numeric_level_is_accepted() -> None:
    logger = setup_logging(LoggingConfig(level=logging.ERROR, logger_name=_logger_name()))
    assert logger.level == logging.ERROR


def test_shutdown_leaves_unmanaged_loggers_alone() -> None:
    foreign = logging.getLogger(_logger_name())
    foreign.setLevel(logging.INFO)
    foreign.propagate = False
    try:
        shutdown_logging(foreign.name)
        shutdown_logging()

        assert foreign.level == logging.INFO
        assert foreign.propagate is False
    finally:
        foreign.setLevel(logging.NOTSET)
        foreign.propagate = True
