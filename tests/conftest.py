# topmark:header:start
#
#   project      : PaddedCell
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the PaddedCell test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs using `paddedcell.config.MutableConfig`, then `freeze()` into a
    `paddedcell.config.Config`. Do **not** mutate a frozen `Config`; call
    `Config.thaw()`, edit the returned builder, then `freeze()` again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import pytest

from paddedcell.config import logging
from paddedcell.constants import LOG_LEVEL_ENV_VAR
from paddedcell.formatter.chain import Chain
from paddedcell.steps.base import FunctionStep

if TYPE_CHECKING:
    from pathlib import Path


# Step functions from the reference scenarios. Each ignores formatting and only
# exercises one padded-cell outcome.


def cycle_ab(text: str) -> str:
    """Alternate forever between "A" and "B"."""
    return "B" if text == "A" else "A"


def drop_first_char(text: str) -> str:
    """Remove one character per pass; converges to ""."""
    return text[1:] if text else text


def append_space(text: str) -> str:
    """Grow by one space per pass; never settles."""
    return text + " "


def constant_42(_text: str) -> str:
    """Settle on "42" in a single pass."""
    return "42"


def single_step_chain(name: str, func: Callable[[str], str]) -> Chain:
    """Return a chain running one `FunctionStep` named ``name``."""
    return Chain(name=name, steps=(FunctionStep(name, func),))


@pytest.fixture
def cycle_chain() -> Chain:
    """Chain that cycles between "A" and "B"."""
    return single_step_chain("cycle", cycle_ab)


@pytest.fixture
def converge_chain() -> Chain:
    """Chain that needs several passes to converge to ""."""
    return single_step_chain("converge", drop_first_char)


@pytest.fixture
def diverge_chain() -> Chain:
    """Chain that never settles."""
    return single_step_chain("diverge", append_space)


@pytest.fixture
def wellbehaved_chain() -> Chain:
    """Chain that settles on "42" after one pass."""
    return single_step_chain("wellbehaved", constant_42)


@pytest.fixture
def write_text() -> Callable[[Path, str], Path]:
    """Return a helper writing text without newline translation."""

    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)
        return path

    return _write


@pytest.fixture
def read_text() -> Callable[[Path], str]:
    """Return a helper reading text without newline translation."""

    def _read(path: Path) -> str:
        with path.open(encoding="utf-8", newline="") as fh:
            return fh.read()

    return _read


@pytest.fixture(autouse=True)
def silence_paddedcell_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure PaddedCell's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
