# topmark:header:start
#
#   project      : PaddedCell
#   file         : test_misc_commands.py
#   file_relpath : tests/cli/test_misc_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `steps`, `version`, and error exit codes shared by all commands."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

import pytest
from click.testing import Result

from paddedcell.constants import PADDEDCELL_VERSION
from paddedcell.core.exit_codes import ExitCode

RunCli = Callable[[Sequence[str]], Result]


def test_version(run_cli: RunCli) -> None:
    result: Result = run_cli(["version"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output.strip() == PADDEDCELL_VERSION


def test_steps_lists_builtin_types(run_cli: RunCli) -> None:
    result: Result = run_cli(["steps"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    names: list[str] = result.output.split()
    for expected in ("command", "json", "replace", "replace_regex", "trim_trailing_whitespace"):
        assert expected in names
    assert names == sorted(names)


def test_steps_long_shows_options(run_cli: RunCli) -> None:
    result: Result = run_cli(["steps", "--long"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "options: search, replacement" in result.output


def test_group_without_command_prints_help(run_cli: RunCli) -> None:
    result: Result = run_cli([])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "check" in result.output
    assert "diagnose" in result.output


@pytest.mark.parametrize("command", ["check", "apply", "diagnose"])
def test_unknown_format_is_a_usage_error(project: Path, run_cli: RunCli, command: str) -> None:
    result: Result = run_cli([command, "-f", "nope"])

    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


@pytest.mark.parametrize("command", ["check", "apply", "diagnose"])
def test_missing_path_is_reported(project: Path, run_cli: RunCli, command: str) -> None:
    result: Result = run_cli([command, "does-not-exist.txt"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


def test_no_config_means_no_formats(
    project: Path, run_cli: RunCli, write_text: Callable[[Path, str], Path]
) -> None:
    write_text(project / "a.txt", "a  \n")

    result: Result = run_cli(["check", "--no-config"])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def test_extra_config_file(
    project: Path, run_cli: RunCli, write_text: Callable[[Path, str], Path]
) -> None:
    write_text(project / "a.md", "a  \n")
    extra: Path = write_text(
        project / "extra.toml",
        '[format.md]\ninclude = ["*.md"]\nsteps = [{ type = "trim_trailing_whitespace" }]\n',
    )

    result: Result = run_cli(["check", "--no-config", "--config", str(extra)])

    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output
    assert "would reformat: a.md" in result.output


def test_invalid_config_is_a_config_error(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    run_cli: RunCli,
    write_text: Callable[[Path, str], Path],
) -> None:
    write_text(tmp_path / "paddedcell.toml", "max_iterations = 0\n")
    monkeypatch.chdir(tmp_path)

    result: Result = run_cli(["check"])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def test_unknown_step_type_is_a_config_error(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    run_cli: RunCli,
    write_text: Callable[[Path, str], Path],
) -> None:
    write_text(tmp_path / "paddedcell.toml", '[format.x]\nsteps = [{ type = "nope" }]\n')
    write_text(tmp_path / "a.txt", "a\n")
    monkeypatch.chdir(tmp_path)

    result: Result = run_cli(["check"])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def test_pyproject_table_is_discovered(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    run_cli: RunCli,
    write_text: Callable[[Path, str], Path],
) -> None:
    write_text(
        tmp_path / "pyproject.toml",
        '[project]\nname = "demo"\n\n'
        '[tool.paddedcell.format.trim]\ninclude = ["*.txt"]\n'
        'steps = [{ type = "trim_trailing_whitespace" }]\n',
    )
    write_text(tmp_path / "a.txt", "a \n")
    monkeypatch.chdir(tmp_path)

    result: Result = run_cli(["check"])

    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output
