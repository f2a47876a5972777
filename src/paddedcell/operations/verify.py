# topmark:header:start
#
#   project      : PaddedCell
#   file         : verify.py
#   file_relpath : src/paddedcell/operations/verify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Verify: classify diagnosed files without touching them.

Bucketing (per file):
    - `Clean` → no violation.
    - `Converged` → violation that `apply` fixes automatically ("unformatted").
    - `Cycle` / `Diverged` → violation that cannot be fixed automatically
      ("unresolved"): the chain itself misbehaves on this input.
    - No result (unreadable file, chain failed on the original) → error.

Unresolved files and errors are always reported separately from plain
unformatted files, so users can tell "your code isn't formatted" from "the
formatter is unstable on this input".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from paddedcell.config.logging import get_logger
from paddedcell.core.exit_codes import ExitCode
from paddedcell.diagnosis.result import Clean, Converged, Cycle, Diverged

if TYPE_CHECKING:
    from collections.abc import Iterable

    from paddedcell.config.logging import PaddedCellLogger
    from paddedcell.operations.runner import FileDiagnosis

logger: PaddedCellLogger = get_logger(__name__)


class Verdict(Enum):
    """Verification verdict for one file."""

    CLEAN = "clean"
    UNFORMATTED = "unformatted"
    UNRESOLVED = "unresolved"
    ERROR = "error"


def classify(diag: FileDiagnosis) -> Verdict:
    """Return the verdict for one diagnosed file.

    Args:
        diag (FileDiagnosis): The per-file diagnosis.

    Returns:
        Verdict: The verification verdict.
    """
    match diag.result:
        case Clean():
            return Verdict.CLEAN
        case Converged():
            return Verdict.UNFORMATTED
        case Cycle() | Diverged():
            return Verdict.UNRESOLVED
    return Verdict.ERROR


@dataclass
class VerifyReport:
    """Outcome of verifying a set of files.

    Attributes:
        clean (list[FileDiagnosis]): Files the chain leaves unchanged.
        unformatted (list[FileDiagnosis]): Files that converge to other content.
        unresolved (list[FileDiagnosis]): Files on which the chain cycles or diverges.
        errors (list[FileDiagnosis]): Files that could not be diagnosed.
    """

    clean: list[FileDiagnosis] = field(default_factory=lambda: [])
    unformatted: list[FileDiagnosis] = field(default_factory=lambda: [])
    unresolved: list[FileDiagnosis] = field(default_factory=lambda: [])
    errors: list[FileDiagnosis] = field(default_factory=lambda: [])

    @property
    def total(self) -> int:
        """Return the number of verified files."""
        return len(self.clean) + len(self.unformatted) + len(self.unresolved) + len(self.errors)

    @property
    def ok(self) -> bool:
        """Return True when every file is clean."""
        return not (self.unformatted or self.unresolved or self.errors)

    def add(self, diag: FileDiagnosis) -> Verdict:
        """File ``diag`` into its bucket and return its verdict."""
        verdict: Verdict = classify(diag)
        {
            Verdict.CLEAN: self.clean,
            Verdict.UNFORMATTED: self.unformatted,
            Verdict.UNRESOLVED: self.unresolved,
            Verdict.ERROR: self.errors,
        }[verdict].append(diag)
        return verdict

    def exit_code(self) -> ExitCode:
        """Summarize the run as an exit code.

        Precedence: the first file error's code, then `PIPELINE_ERROR` for
        unresolved files, then `WOULD_CHANGE` for unformatted files, else `SUCCESS`.

        Returns:
            ExitCode: The exit code for the run.
        """
        for diag in self.errors:
            code: ExitCode | None = diag.error_code()
            if code is not None:
                return code
        if self.unresolved:
            return ExitCode.PIPELINE_ERROR
        if self.unformatted:
            return ExitCode.WOULD_CHANGE
        return ExitCode.SUCCESS


def verify(diagnoses: Iterable[FileDiagnosis]) -> VerifyReport:
    """Bucket diagnosed files into a `VerifyReport`. Never writes anything.

    Args:
        diagnoses (Iterable[FileDiagnosis]): Per-file diagnoses.

    Returns:
        VerifyReport: The bucketed report.
    """
    report = VerifyReport()
    for diag in diagnoses:
        verdict: Verdict = report.add(diag)
        logger.debug("verify: %s -> %s", diag.path, verdict.value)
    logger.info(
        "verify: %d file(s): %d clean, %d unformatted, %d unresolved, %d error(s)",
        report.total,
        len(report.clean),
        len(report.unformatted),
        len(report.unresolved),
        len(report.errors),
    )
    return report
