# topmark:header:start
#
#   project      : PaddedCell
#   file         : cmd_common.py
#   file_relpath : src/paddedcell/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by the file-processing
commands (``check``, ``apply``, ``diagnose``). They encapsulate plumbing
(loading config, selecting formats, building chains, resolving files and
running the diagnosis) and translate domain errors into CLI errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from paddedcell.cli.errors import (
    PaddedCellConfigError,
    PaddedCellFileNotFoundError,
    PaddedCellUsageError,
)
from paddedcell.config.io import load_merged_config
from paddedcell.config.logging import get_logger
from paddedcell.core.errors import ConfigError
from paddedcell.core.exit_codes import ExitCode
from paddedcell.file_resolver import resolve_file_list
from paddedcell.formatter.factory import build_chain
from paddedcell.operations.runner import diagnose_files

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from paddedcell.config.model import Config, FormatConfig
    from paddedcell.formatter.chain import Chain
    from paddedcell.operations.runner import FileDiagnosis

logger = get_logger(__name__)


@dataclass(frozen=True)
class FormatRun:
    """Files diagnosed for one format.

    Attributes:
        fmt (FormatConfig): The format configuration.
        chain (Chain): The chain built from it.
        diagnoses (list[FileDiagnosis]): One record per resolved file.
    """

    fmt: FormatConfig
    chain: Chain
    diagnoses: list[FileDiagnosis]


def resolve_config_from_click(
    *,
    config_files: Iterable[Path],
    no_config: bool,
    max_iterations: int | None,
    jobs: int | None,
    encoding: str | None,
) -> Config:
    """Load the merged configuration for a command invocation.

    Raises:
        PaddedCellConfigError: If any configuration layer is invalid.
    """
    try:
        return load_merged_config(
            no_config=no_config,
            extra_files=tuple(config_files),
            max_iterations=max_iterations,
            encoding=encoding,
            jobs=jobs,
        )
    except ConfigError as e:
        raise PaddedCellConfigError(str(e)) from e


def select_formats(config: Config, names: Sequence[str]) -> list[FormatConfig]:
    """Return the formats to run, in configuration order.

    Args:
        config (Config): The runtime configuration.
        names (Sequence[str]): Requested format names (all formats when empty).

    Returns:
        list[FormatConfig]: The selected formats.

    Raises:
        PaddedCellConfigError: If no format is configured.
        PaddedCellUsageError: If a requested format is unknown.
    """
    if not config.formats:
        raise PaddedCellConfigError(
            "No formats configured. Add a [format.<name>] table to paddedcell.toml "
            "or [tool.paddedcell.format.<name>] to pyproject.toml."
        )
    if not names:
        return list(config.formats)
    unknown: list[str] = [n for n in names if config.get_format(n) is None]
    if unknown:
        known: str = ", ".join(config.format_names())
        raise PaddedCellUsageError(f"Unknown format(s): {', '.join(unknown)} (known: {known})")
    return [f for f in config.formats if f.name in names]


def build_chain_for_cli(fmt: FormatConfig) -> Chain:
    """Build the chain of ``fmt``, mapping configuration problems to CLI errors."""
    try:
        return build_chain(fmt)
    except ConfigError as e:
        raise PaddedCellConfigError(str(e)) from e


def check_paths_exist(paths: Sequence[Path]) -> None:
    """Raise a CLI error for the first positional path that does not exist."""
    for p in paths:
        if not p.exists():
            raise PaddedCellFileNotFoundError(f"No such file or directory: {p}")


def run_format(config: Config, fmt: FormatConfig, paths: Sequence[Path]) -> FormatRun:
    """Resolve and diagnose the files of one format.

    Args:
        config (Config): The runtime configuration.
        fmt (FormatConfig): The format to run.
        paths (Sequence[Path]): Positional paths (the current directory when empty).

    Returns:
        FormatRun: The chain and per-file diagnoses.
    """
    chain: Chain = build_chain_for_cli(fmt)
    files: list[Path] = resolve_file_list(paths or [Path(".")], fmt, root=config.root)
    logger.info("format '%s': %d file(s)", fmt.name, len(files))
    diagnoses: list[FileDiagnosis] = diagnose_files(
        files,
        chain,
        max_iterations=config.max_iterations,
        encoding=config.encoding,
        jobs=config.jobs,
    )
    return FormatRun(fmt=fmt, chain=chain, diagnoses=diagnoses)


def combine_exit_codes(codes: Iterable[ExitCode]) -> ExitCode:
    """Combine per-format exit codes into one.

    The first error code wins; `WOULD_CHANGE` is only reported when no format
    produced an error.

    Args:
        codes (Iterable[ExitCode]): Exit codes in run order.

    Returns:
        ExitCode: The combined exit code.
    """
    would_change: bool = False
    for code in codes:
        if code == ExitCode.WOULD_CHANGE:
            would_change = True
        elif code != ExitCode.SUCCESS:
            return code
    return ExitCode.WOULD_CHANGE if would_change else ExitCode.SUCCESS
