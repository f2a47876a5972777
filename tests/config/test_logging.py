# topmark:header:start
#
#   project      : PaddedCell
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging setup: TRACE level, environment override and stderr routing."""

from __future__ import annotations

import io
import logging

import pytest

from paddedcell.config.logging import (
    TRACE_LEVEL,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)
from paddedcell.constants import LOG_LEVEL_ENV_VAR


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("40", 40),
        ("loud", None),
    ],
)
def test_parse_log_level(raw: str, expected: int | None) -> None:
    assert parse_log_level(raw) == expected


def test_env_level_unset() -> None:
    assert resolve_env_log_level() is None


def test_env_level_set(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "info")

    assert resolve_env_log_level() == logging.INFO


def test_trace_records_reach_the_stream() -> None:
    stream = io.StringIO()
    try:
        setup_logging(TRACE_LEVEL, stream=stream)
        get_logger("paddedcell.diagnosis.engine").trace("iteration %d", 3)
    finally:
        setup_logging(TRACE_LEVEL)

    output: str = stream.getvalue()
    assert "[TRACE]" in output
    assert "diagnosis.engine" in output
    assert "iteration 3" in output


def test_level_filters_records() -> None:
    stream = io.StringIO()
    try:
        setup_logging(logging.WARNING, stream=stream)
        log = get_logger("paddedcell.test")
        log.info("hidden")
        log.warning("shown")
    finally:
        setup_logging(TRACE_LEVEL)

    assert "hidden" not in stream.getvalue()
    assert "shown" in stream.getvalue()
