# topmark:header:start
#
#   project      : PaddedCell
#   file         : __init__.py
#   file_relpath : src/paddedcell/formatter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chains: ordered steps plus the terminal line-ending and trailing-newline pass."""

from __future__ import annotations

from paddedcell.formatter.chain import Chain
from paddedcell.formatter.line_endings import LineEnding

__all__ = [
    "Chain",
    "LineEnding",
]
