# topmark:header:start
#
#   project      : PaddedCell
#   file         : main.py
#   file_relpath : src/paddedcell/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PaddedCell command-line entry point.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into
  ``ctx.obj``.
- Subcommands fetch the shared console from ``ctx.obj`` for program output;
  diagnostics go through `logging`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from paddedcell.cli.commands.apply import apply_command
from paddedcell.cli.commands.check import check_command
from paddedcell.cli.commands.diagnose import diagnose_command
from paddedcell.cli.commands.steps import steps_command
from paddedcell.cli.commands.version import version_command
from paddedcell.cli.console import ClickConsole
from paddedcell.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from paddedcell.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from paddedcell.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity and internal log level; the environment wins for logging.
    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity"] = verbose - quiet
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env if level_env is not None else level_cli
    setup_logging(level=ctx.obj["log_level"])

    effective_color_mode: ColorMode = (
        ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="PaddedCell: run formatter chains safely, even when they are not idempotent.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the PaddedCell CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'paddedcell check [PATHS...]' to verify formatting.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(check_command)

cli.add_command(apply_command)

cli.add_command(diagnose_command)

cli.add_command(steps_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
