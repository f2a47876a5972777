# topmark:header:start
#
#   project      : PaddedCell
#   file         : check.py
#   file_relpath : src/paddedcell/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PaddedCell `check` command.

Diagnoses every file each configured format applies to and reports, without
writing anything:

- files the chain would reformat (it converges to different content),
- files on which the chain is unresolved (it cycles or diverges),
- files that could not be diagnosed.

Exit status: ``0`` when every file is clean, ``2`` when files would be
reformatted, ``70`` when a chain misbehaves, or the file error's code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from paddedcell.cli.cmd_common import (
    check_paths_exist,
    combine_exit_codes,
    resolve_config_from_click,
    run_format,
    select_formats,
)
from paddedcell.cli.console import get_console
from paddedcell.cli.options import common_config_options, common_run_options
from paddedcell.cli.utils import emit_verify_report
from paddedcell.config.logging import get_logger
from paddedcell.core.exit_codes import ExitCode
from paddedcell.operations.verify import verify

if TYPE_CHECKING:
    from pathlib import Path

    from paddedcell.cli.cmd_common import FormatRun
    from paddedcell.cli.console import ConsoleLike
    from paddedcell.config.model import Config
    from paddedcell.operations.verify import VerifyReport

logger = get_logger(__name__)


@click.command(
    name="check",
    help="Report files that are not formatted, without modifying them.",
)
@common_config_options
@common_run_options
@click.option("--diff", is_flag=True, help="Show a unified diff for files that would change.")
def check_command(
    *,
    paths: tuple[Path, ...],
    format_names: tuple[str, ...],
    max_iterations: int | None,
    jobs: int | None,
    encoding: str | None,
    config_files: tuple[Path, ...],
    no_config: bool,
    diff: bool,
) -> None:
    """Report unformatted and unresolved files.

    Args:
        paths (tuple[Path, ...]): Files and directories to check.
        format_names (tuple[str, ...]): Formats to run (all when empty).
        max_iterations (int | None): Override for the padded-cell bound.
        jobs (int | None): Override for the worker count.
        encoding (str | None): Override for the file encoding.
        config_files (tuple[Path, ...]): Extra config files.
        no_config (bool): Skip project config discovery.
        diff (bool): Print unified diffs for files that would change.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    check_paths_exist(paths)
    config: Config = resolve_config_from_click(
        config_files=config_files,
        no_config=no_config,
        max_iterations=max_iterations,
        jobs=jobs,
        encoding=encoding,
    )

    codes: list[ExitCode] = []
    for fmt in select_formats(config, format_names):
        run: FormatRun = run_format(config, fmt, paths)
        report: VerifyReport = verify(run.diagnoses)
        emit_verify_report(console, fmt.name, report, diff=diff)
        codes.append(report.exit_code())

    code: ExitCode = combine_exit_codes(codes)
    if code != ExitCode.SUCCESS:
        ctx.exit(code)
