# topmark:header:start
#
#   project      : PaddedCell
#   file         : __init__.py
#   file_relpath : src/paddedcell/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PaddedCell CLI package.

This package groups all Click command definitions and supporting utilities
for the PaddedCell command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        paddedcell = "paddedcell.cli.main:cli"

All subcommands live in [`paddedcell.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
