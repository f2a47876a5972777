# topmark:header:start
#
#   project      : PaddedCell
#   file         : test_cli_options.py
#   file_relpath : tests/cli/test_cli_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option resolution helpers shared by the CLI commands."""

from __future__ import annotations

import logging

import pytest

from paddedcell.cli.cmd_common import combine_exit_codes
from paddedcell.cli.errors import PaddedCellUsageError
from paddedcell.cli.options import ColorMode, resolve_color_mode, resolve_verbosity
from paddedcell.config.logging import TRACE_LEVEL
from paddedcell.core.exit_codes import ExitCode


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    assert resolve_verbosity(verbose, quiet) == expected


def test_verbose_and_quiet_conflict() -> None:
    with pytest.raises(PaddedCellUsageError):
        resolve_verbosity(1, 1)


def test_explicit_color_mode_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")

    assert resolve_color_mode(cli_mode=ColorMode.NEVER, stdout_isatty=True) is False
    assert resolve_color_mode(cli_mode=ColorMode.ALWAYS, stdout_isatty=False) is True


def test_auto_color_follows_environment_then_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is True
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=False) is False

    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is False


@pytest.mark.parametrize(
    ("codes", "expected"),
    [
        ([], ExitCode.SUCCESS),
        ([ExitCode.SUCCESS, ExitCode.SUCCESS], ExitCode.SUCCESS),
        ([ExitCode.SUCCESS, ExitCode.WOULD_CHANGE], ExitCode.WOULD_CHANGE),
        ([ExitCode.WOULD_CHANGE, ExitCode.PIPELINE_ERROR], ExitCode.PIPELINE_ERROR),
        ([ExitCode.IO_ERROR, ExitCode.PIPELINE_ERROR], ExitCode.IO_ERROR),
    ],
)
def test_combine_exit_codes(codes: list[ExitCode], expected: ExitCode) -> None:
    assert combine_exit_codes(codes) == expected
