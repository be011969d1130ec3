# topmark:header:start
#
#   project      : YamlScribe
#   file         : test_logging.py
#   file_relpath : tests/core/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TRACE-aware logging setup."""

from __future__ import annotations

import logging as std_logging

import pytest

from tests.conftest import parametrize
from yamlscribe.config import logging
from yamlscribe.constants import LOG_LEVEL_ENV_VAR


@parametrize(
    "raw, expected",
    [
        ("TRACE", logging.TRACE_LEVEL),
        ("debug", std_logging.DEBUG),
        (" warn ", std_logging.WARNING),
        ("15", 15),
        ("verbose", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert logging.resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    assert logging.resolve_env_log_level() is None


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.get_logger("yamlscribe.tests")
    assert isinstance(logger, logging.YamlScribeLogger)
    caplog.set_level(logging.TRACE_LEVEL, logger="yamlscribe.tests")
    logger.trace("fallback for %s", "node")
    assert [r.levelname for r in caplog.records] == ["TRACE"]
    assert caplog.records[0].getMessage() == "fallback for node"


def test_chalk_formatter_keeps_message() -> None:
    formatter = logging.ChalkFormatter(logging.LOG_FORMAT)
    record = std_logging.LogRecord("x", std_logging.ERROR, __file__, 1, "boom", None, None)
    assert "[ERROR] boom" in formatter.format(record)
