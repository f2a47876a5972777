# topmark:header:start
#
#   project      : PaddedCell
#   file         : keys.py
#   file_relpath : src/paddedcell/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for PaddedCell configuration.

This module defines the authoritative string constants used when reading and
validating PaddedCell configuration from TOML sources (``paddedcell.toml`` and
``[tool.paddedcell]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by PaddedCell configuration.

    Example document:

        max_iterations = 10
        encoding = "utf-8"
        jobs = 4

        [format.python]
        include = ["**/*.py"]
        exclude = ["build/**"]
        line_ending = "unix"
        ensure_trailing_newline = true
        steps = [
            { type = "trim_trailing_whitespace" },
            { type = "command", args = ["black", "-q", "-"] },
        ]
    """

    # Top level
    KEY_MAX_ITERATIONS: Final[str] = "max_iterations"
    KEY_ENCODING: Final[str] = "encoding"
    KEY_JOBS: Final[str] = "jobs"

    # [format.<name>]
    SECTION_FORMAT: Final[str] = "format"

    KEY_INCLUDE: Final[str] = "include"
    KEY_EXCLUDE: Final[str] = "exclude"
    KEY_LINE_ENDING: Final[str] = "line_ending"
    KEY_ENSURE_TRAILING_NEWLINE: Final[str] = "ensure_trailing_newline"
    KEY_STEPS: Final[str] = "steps"

    # Step tables
    KEY_STEP_TYPE: Final[str] = "type"

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"

    TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_MAX_ITERATIONS, KEY_ENCODING, KEY_JOBS, SECTION_FORMAT}
    )
    FORMAT_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_INCLUDE, KEY_EXCLUDE, KEY_LINE_ENDING, KEY_ENSURE_TRAILING_NEWLINE, KEY_STEPS}
    )
