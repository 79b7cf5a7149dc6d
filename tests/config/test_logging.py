# topmark:header:start
#
#   project      : Polisher
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the logging helpers (TRACE level, env resolution)."""

from __future__ import annotations

import logging as std_logging

import pytest

from polisher.config.logging import (
    LOG_LEVEL_ENV_VAR,
    PACKAGE_LOGGER_NAME,
    TRACE_LEVEL,
    PolisherLogger,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
)
from tests.conftest import parametrize


@parametrize(
    "value, expected",
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", std_logging.DEBUG),
        (" warn ", std_logging.WARNING),
        ("10", 10),
        ("", None),
        (None, None),
        ("loud", None),
    ],
)
def test_parse_log_level(value: str | None, expected: int | None) -> None:
    """Level names are case-insensitive; numbers pass through."""
    assert parse_log_level(value) == expected


def test_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """``POLISHER_LOG_LEVEL`` is read on demand."""
    assert resolve_env_log_level() is None
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "info")
    assert resolve_env_log_level() == std_logging.INFO


def test_trace_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """`PolisherLogger.trace` emits records at TRACE level."""
    logger: PolisherLogger = get_logger("polisher.tests.trace")
    assert isinstance(logger, PolisherLogger)
    with caplog.at_level(TRACE_LEVEL, logger="polisher.tests.trace"):
        logger.trace("resolving %s", "options")
    assert any(
        r.levelno == TRACE_LEVEL and r.getMessage() == "resolving options" for r in caplog.records
    )


def test_package_logger_has_null_handler() -> None:
    """Library use without `setup_logging` prints nothing via the last-resort handler."""
    handlers: list[std_logging.Handler] = std_logging.getLogger(PACKAGE_LOGGER_NAME).handlers
    assert any(isinstance(h, std_logging.NullHandler) for h in handlers)
