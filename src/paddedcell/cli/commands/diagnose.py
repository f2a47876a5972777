# topmark:header:start
#
#   project      : PaddedCell
#   file         : diagnose.py
#   file_relpath : src/paddedcell/cli/commands/diagnose.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PaddedCell `diagnose` command.

Runs the padded cell on every file of a format and dumps the states of each
misbehaving file (multi-pass convergence, cycle or divergence) as separate
artifacts, so the misbehaviour can be inspected with ordinary tools::

    build/paddedcell-diagnose-<format>/<relpath>/<name>.<kind><index>

Nothing in the formatted tree is modified.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from paddedcell.cli.cmd_common import (
    check_paths_exist,
    resolve_config_from_click,
    run_format,
    select_formats,
)
from paddedcell.cli.console import get_console
from paddedcell.cli.errors import PaddedCellIOError, PaddedCellUsageError
from paddedcell.cli.options import common_config_options, common_run_options
from paddedcell.cli.utils import display_path, emit_errors
from paddedcell.config.logging import get_logger
from paddedcell.constants import DIAGNOSE_DIR_NAME, DIAGNOSE_DIR_PREFIX
from paddedcell.core.exit_codes import ExitCode
from paddedcell.diagnosis.result import describe
from paddedcell.operations.dump import DumpDirError, dump_all

if TYPE_CHECKING:
    from paddedcell.cli.cmd_common import FormatRun
    from paddedcell.cli.console import ConsoleLike
    from paddedcell.config.model import Config


logger = get_logger(__name__)


def default_output_dir(root: Path, format_name: str) -> Path:
    """Return the default dump directory of a format under ``root``."""
    return root / DIAGNOSE_DIR_NAME / f"{DIAGNOSE_DIR_PREFIX}{format_name}"


@click.command(
    name="diagnose",
    help="Dump the intermediate states of files on which a formatter misbehaves.",
)
@common_config_options
@common_run_options
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Dump directory (default: build/paddedcell-diagnose-<format>). "
    "A subdirectory per format is used when several formats run. "
    "An existing directory must be empty or a previous dump.",
)
def diagnose_command(
    *,
    paths: tuple[Path, ...],
    format_names: tuple[str, ...],
    max_iterations: int | None,
    jobs: int | None,
    encoding: str | None,
    config_files: tuple[Path, ...],
    no_config: bool,
    output_dir: Path | None,
) -> None:
    """Dump the states of misbehaving files.

    Args:
        paths (tuple[Path, ...]): Files and directories to diagnose.
        format_names (tuple[str, ...]): Formats to run (all when empty).
        max_iterations (int | None): Override for the padded-cell bound.
        jobs (int | None): Override for the worker count.
        encoding (str | None): Override for the file encoding.
        config_files (tuple[Path, ...]): Extra config files.
        no_config (bool): Skip project config discovery.
        output_dir (Path | None): Dump directory override.
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
    root: Path = config.root or Path.cwd()
    formats = select_formats(config, format_names)
    error_code: ExitCode | None = None

    for fmt in formats:
        run: FormatRun = run_format(config, fmt, paths)
        if output_dir is None:
            target: Path = default_output_dir(root, fmt.name)
        elif len(formats) > 1:
            target = output_dir / fmt.name
        else:
            target = output_dir

        try:
            dumped: dict[Path, list[Path]] = dump_all(
                run.diagnoses, target, root=root, encoding=config.encoding
            )
        except DumpDirError as e:
            raise PaddedCellUsageError(str(e)) from e
        except OSError as e:
            raise PaddedCellIOError(f"Cannot write diagnose output to {target}: {e}") from e

        failed = [d for d in run.diagnoses if d.failed]
        emit_errors(console, failed)
        if failed and error_code is None:
            error_code = failed[0].error_code()

        if not dumped:
            console.print(
                console.styled(
                    f"[{fmt.name}] {len(run.diagnoses)} file(s): no misbehaving files",
                    fg="green",
                    bold=True,
                )
            )
            continue

        console.print(console.styled(f"[{fmt.name}] dumped to {display_path(target)}", bold=True))
        for d in run.diagnoses:
            artifacts: list[Path] | None = dumped.get(d.path)
            if artifacts and d.result is not None:
                console.print(
                    f"  {display_path(d.path)}: {describe(d.result)} "
                    f"({len(artifacts)} state(s))"
                )

    if error_code is not None:
        ctx.exit(error_code)
