# topmark:header:start
#
#   project      : PaddedCell
#   file         : __init__.py
#   file_relpath : src/paddedcell/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PaddedCell package.

PaddedCell applies ordered chains of text formatters ("steps") to source files
and stays correct when a step is not idempotent. Every file is diagnosed with
the padded-cell protocol, which classifies it as clean, converged, cycling, or
diverging before anything is written back.
"""

from __future__ import annotations

from paddedcell.core.errors import ConfigError, PaddedCellError, StepFailure
from paddedcell.diagnosis.engine import diagnose
from paddedcell.diagnosis.result import (
    Clean,
    Converged,
    Cycle,
    DiagnosisResult,
    Diverged,
    DivergeReason,
    ResultKind,
)
from paddedcell.formatter.chain import Chain
from paddedcell.formatter.line_endings import LineEnding
from paddedcell.steps.base import FunctionStep

__all__ = [
    "Chain",
    "Clean",
    "ConfigError",
    "Converged",
    "Cycle",
    "DiagnosisResult",
    "DivergeReason",
    "Diverged",
    "FunctionStep",
    "LineEnding",
    "PaddedCellError",
    "ResultKind",
    "StepFailure",
    "diagnose",
]
