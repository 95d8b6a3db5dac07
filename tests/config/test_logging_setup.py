# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""Tests for the TRACE-aware logging setup."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator

import pytest

from boundsquare.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    BoundsquareLogger,
    ChalkFormatter,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Put the suite-wide TRACE logging back after a test reconfigures it."""
    yield
    setup_logging(level=TRACE_LEVEL)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("30", 30),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    assert resolve_env_log_level() is None


@pytest.mark.usefixtures("restore_root_logging")
def test_setup_logging_defaults_to_critical_on_stderr() -> None:
    setup_logging()
    root = logging.getLogger()

    assert root.level == logging.CRITICAL
    assert len(root.handlers) == 1
    handler = root.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr
    assert isinstance(handler.formatter, ChalkFormatter)


@pytest.mark.usefixtures("restore_root_logging")
def test_setup_logging_honors_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "INFO")
    setup_logging()
    assert logging.getLogger().level == logging.INFO


def test_get_logger_has_trace() -> None:
    logger = get_logger("boundsquare.tests.trace")
    assert isinstance(logger, BoundsquareLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_trace_records_are_emitted(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("boundsquare.tests.emit")
    with caplog.at_level(TRACE_LEVEL):
        logger.trace("scanned %d tokens", 3)
    assert [r.getMessage() for r in caplog.records] == ["scanned 3 tokens"]
    assert caplog.records[0].levelno == TRACE_LEVEL


def test_chalk_formatter_keeps_message() -> None:
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful %s", ("now",), None)
    assert "careful now" in ChalkFormatter("%(message)s").format(record)
