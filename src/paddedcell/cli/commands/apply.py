# topmark:header:start
#
#   project      : PaddedCell
#   file         : apply.py
#   file_relpath : src/paddedcell/cli/commands/apply.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PaddedCell `apply` command.

Rewrites every file each configured format applies to with its resolved
content: the fixed point for converging files, and the first state of the
cycle for cycling files. Diverging files are never written and make the
command fail.

Formats run one after another; a format sees the files as left by the
previous one.
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
from paddedcell.cli.utils import emit_fix_report
from paddedcell.config.logging import get_logger
from paddedcell.core.exit_codes import ExitCode
from paddedcell.operations.fix import auto_fix

if TYPE_CHECKING:
    from pathlib import Path

    from paddedcell.cli.cmd_common import FormatRun
    from paddedcell.cli.console import ConsoleLike
    from paddedcell.config.model import Config
    from paddedcell.operations.fix import FixReport

logger = get_logger(__name__)


@click.command(
    name="apply",
    help="Format files in place.",
)
@common_config_options
@common_run_options
def apply_command(
    *,
    paths: tuple[Path, ...],
    format_names: tuple[str, ...],
    max_iterations: int | None,
    jobs: int | None,
    encoding: str | None,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Format files in place.

    Args:
        paths (tuple[Path, ...]): Files and directories to format.
        format_names (tuple[str, ...]): Formats to run (all when empty).
        max_iterations (int | None): Override for the padded-cell bound.
        jobs (int | None): Override for the worker count.
        encoding (str | None): Override for the file encoding.
        config_files (tuple[Path, ...]): Extra config files.
        no_config (bool): Skip project config discovery.
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
        report: FixReport = auto_fix(run.diagnoses, encoding=config.encoding)
        emit_fix_report(console, fmt.name, report)
        codes.append(report.exit_code())

    code: ExitCode = combine_exit_codes(codes)
    if code != ExitCode.SUCCESS:
        ctx.exit(code)
