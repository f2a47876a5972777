# topmark:header:start
#
#   project      : PaddedCell
#   file         : version.py
#   file_relpath : src/paddedcell/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PaddedCell `version` command.

Prints the current PaddedCell version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from paddedcell.cli.console import get_console
from paddedcell.constants import PADDEDCELL_VERSION

if TYPE_CHECKING:
    from paddedcell.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of PaddedCell.",
)
def version_command() -> None:
    """Show the current version of PaddedCell."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if ctx.obj.get("verbosity", 0) > 0:
        console.print(console.styled("PaddedCell version:", bold=True, underline=True))
        console.print(f"    {console.styled(PADDEDCELL_VERSION, bold=True)}")
    else:
        console.print(console.styled(PADDEDCELL_VERSION, bold=True))
