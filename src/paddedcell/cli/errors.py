# topmark:header:start
#
#   project      : PaddedCell
#   file         : errors.py
#   file_relpath : src/paddedcell/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the PaddedCell CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from paddedcell.core.exit_codes import ExitCode


class PaddedCellCliError(click.ClickException):
    """Base class for all PaddedCell CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized in `show()`)."""
        return str(self.message)

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        obj: Any = ctx.obj if ctx is not None else None
        console: Any = obj.get("console") if isinstance(obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class PaddedCellUsageError(PaddedCellCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class PaddedCellConfigError(PaddedCellCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class PaddedCellFileNotFoundError(PaddedCellCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class PaddedCellIOError(PaddedCellCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR
