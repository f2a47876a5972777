# topmark:header:start
#
#   project      : PaddedCell
#   file         : constants.py
#   file_relpath : src/paddedcell/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PaddedCell Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PADDEDCELL_VERSION: str = get_version("paddedcell")

# Default bound on padded-cell iterations per file.
DEFAULT_MAX_ITERATIONS: int = 10

DEFAULT_ENCODING: str = "utf-8"
DEFAULT_JOBS: int = 1

# Project configuration file names, in lookup order.
PADDEDCELL_TOML_NAME: str = "paddedcell.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "paddedcell"

# Root of the default debug dump location, relative to the project root.
DIAGNOSE_DIR_NAME: str = "build"
DIAGNOSE_DIR_PREFIX: str = "paddedcell-diagnose-"
# Written into every dump directory; only such directories are ever cleaned.
DIAGNOSE_MARKER_NAME: str = ".paddedcell-diagnose"

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: str = "PADDEDCELL_LOG_LEVEL"

VALUE_NOT_SET: str = "<not set>"
