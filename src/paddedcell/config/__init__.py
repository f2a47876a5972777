# topmark:header:start
#
#   project      : PaddedCell
#   file         : __init__.py
#   file_relpath : src/paddedcell/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PaddedCell configuration: TOML loading, merging, and the runtime snapshot."""

from __future__ import annotations

from paddedcell.config.model import Config, FormatConfig, MutableConfig, StepSpec

__all__ = [
    "Config",
    "FormatConfig",
    "MutableConfig",
    "StepSpec",
]
