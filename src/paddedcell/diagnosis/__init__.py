# topmark:header:start
#
#   project      : PaddedCell
#   file         : __init__.py
#   file_relpath : src/paddedcell/diagnosis/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Padded-cell diagnosis: iterate a chain and classify how it behaves on a text."""

from __future__ import annotations

from paddedcell.diagnosis.engine import diagnose
from paddedcell.diagnosis.result import (
    Clean,
    Converged,
    Cycle,
    DiagnosisResult,
    Diverged,
    DivergeReason,
    ResultKind,
    describe,
    is_misbehaved,
)
from paddedcell.diagnosis.trace import Trace, TraceFullError

__all__ = [
    "Clean",
    "Converged",
    "Cycle",
    "DiagnosisResult",
    "DivergeReason",
    "Diverged",
    "ResultKind",
    "Trace",
    "TraceFullError",
    "describe",
    "diagnose",
    "is_misbehaved",
]
