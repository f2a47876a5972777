# topmark:header:start
#
#   project      : PaddedCell
#   file         : steps.py
#   file_relpath : src/paddedcell/cli/commands/steps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PaddedCell `steps` command.

Lists the step types available in ``[[format.<name>.steps]]`` tables.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from paddedcell.cli.console import get_console
from paddedcell.steps.registry import StepRegistry

if TYPE_CHECKING:
    from paddedcell.cli.console import ConsoleLike


@click.command(
    name="steps",
    help="List the available step types.",
)
@click.option(
    "--long",
    "-l",
    "show_details",
    is_flag=True,
    help="Show descriptions and accepted options.",
)
def steps_command(*, show_details: bool = False) -> None:
    """List the available step types.

    Args:
        show_details (bool): Show descriptions and accepted options.
    """
    console: ConsoleLike = get_console()
    for meta in StepRegistry.iter_meta():
        if not show_details:
            console.print(meta.type_name)
            continue
        console.print(console.styled(meta.type_name, bold=True))
        if meta.description:
            console.print(f"    {meta.description}")
        if meta.options:
            console.print(f"    options: {', '.join(meta.options)}")
