# topmark:header:start
#
#   project      : PaddedCell
#   file         : console.py
#   file_relpath : src/paddedcell/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Program output for the CLI.

Command reports are program output and go through a console; diagnostics go
through `logging`. Warnings and errors about individual files are written to
stderr so stdout stays a clean list of results.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """What commands need from a console."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to the output stream."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning to the error stream."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to the error stream."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled, or unchanged when colors are off."""
        ...


class ClickConsole:
    """`ConsoleLike` implementation on top of `click.echo`.

    Args:
        enable_color (bool): Emit ANSI styles; plain text otherwise.
        out (TextIO | None): Output stream (``sys.stdout`` by default).
        err (TextIO | None): Error stream (``sys.stderr`` by default).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        self._to_err(text, nl=nl, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        self._to_err(text, nl=nl, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        return click.style(text, **style_kwargs) if self.enable_color else text

    def _to_err(self, text: str, *, nl: bool, fg: str) -> None:
        click.echo(self.styled(text, fg=fg), nl=nl, file=self.err, color=self.enable_color)


def get_console(ctx: click.Context | None = None) -> ConsoleLike:
    """Return the console stored on the Click context, or a fresh plain one.

    Args:
        ctx (click.Context | None): Context to look in (the current one when None).

    Returns:
        ConsoleLike: The console for program output.
    """
    ctx = ctx or click.get_current_context(silent=True)
    if ctx is not None and isinstance(ctx.obj, dict) and "console" in ctx.obj:
        console: ConsoleLike = ctx.obj["console"]
        return console
    return ClickConsole(enable_color=False)
