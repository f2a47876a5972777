# topmark:header:start
#
#   project      : PaddedCell
#   file         : fix.py
#   file_relpath : src/paddedcell/operations/fix.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Auto-fix: write the resolved content of diagnosed files back to disk.

Write policy (per file):
    - `Clean` → no write.
    - `Converged(v)` → overwrite with the fixed point ``v``.
    - `Cycle(members)` → overwrite with ``members[0]``, the first state that was
      seen again. This is a deterministic canonical choice, not a claim that
      this state is more correct than the other members.
    - `Diverged` → no write; reported as an error.
    - Files that could not be diagnosed are never written.

Writes go through the existing directory entry (see
[`write_text_in_place`][paddedcell.utils.file.write_text_in_place]), so file
attributes are preserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from paddedcell.config.logging import get_logger
from paddedcell.constants import DEFAULT_ENCODING
from paddedcell.core.exit_codes import ExitCode
from paddedcell.diagnosis.result import Clean, Converged, Cycle, Diverged
from paddedcell.utils.file import write_text_in_place

if TYPE_CHECKING:
    from collections.abc import Iterable

    from paddedcell.config.logging import PaddedCellLogger
    from paddedcell.diagnosis.result import DiagnosisResult
    from paddedcell.operations.runner import FileDiagnosis

logger: PaddedCellLogger = get_logger(__name__)


class FixAction(Enum):
    """What auto-fix did with one file."""

    UNCHANGED = "unchanged"
    WRITTEN = "written"
    CYCLE_RESOLVED = "cycle resolved"
    DIVERGED = "diverged"
    FAILED = "failed"


def resolve_content(result: DiagnosisResult) -> str | None:
    """Return the content auto-fix would write for ``result``, or None.

    Args:
        result (DiagnosisResult): The diagnosis result.

    Returns:
        str | None: The fixed point for `Converged`, ``members[0]`` for `Cycle`,
            None for `Clean` and `Diverged`.
    """
    match result:
        case Converged(value=value):
            return value
        case Cycle(members=members):
            return members[0]
        case Clean() | Diverged():
            return None
    raise TypeError(f"not a diagnosis result: {result!r}")


@dataclass
class FixReport:
    """Outcome of auto-fixing a set of files.

    Attributes:
        unchanged (list[FileDiagnosis]): Clean files (not written).
        written (list[FileDiagnosis]): Converged files rewritten to their fixed point.
        cycle_resolved (list[FileDiagnosis]): Cycling files rewritten to their
            canonical cycle member.
        diverged (list[FileDiagnosis]): Diverging files (not written).
        failed (list[FileDiagnosis]): Files that could not be diagnosed or written.
        write_errors (dict[str, OSError]): Write failures by path.
    """

    unchanged: list[FileDiagnosis] = field(default_factory=lambda: [])
    written: list[FileDiagnosis] = field(default_factory=lambda: [])
    cycle_resolved: list[FileDiagnosis] = field(default_factory=lambda: [])
    diverged: list[FileDiagnosis] = field(default_factory=lambda: [])
    failed: list[FileDiagnosis] = field(default_factory=lambda: [])
    write_errors: dict[str, OSError] = field(default_factory=lambda: {})

    @property
    def ok(self) -> bool:
        """Return True when every file ended up clean on disk."""
        return not (self.diverged or self.failed)

    def exit_code(self) -> ExitCode:
        """Summarize the run as an exit code.

        Returns:
            ExitCode: The first failure's code, `IO_ERROR` for write failures,
                `PIPELINE_ERROR` for diverging files, else `SUCCESS`.
        """
        for diag in self.failed:
            code: ExitCode | None = diag.error_code()
            if code is not None:
                return code
        if self.write_errors:
            return ExitCode.IO_ERROR
        if self.diverged:
            return ExitCode.PIPELINE_ERROR
        return ExitCode.SUCCESS


def fix_file(diag: FileDiagnosis, *, encoding: str = DEFAULT_ENCODING) -> FixAction:
    """Apply the write policy to one diagnosed file.

    Args:
        diag (FileDiagnosis): The per-file diagnosis.
        encoding (str): Encoding used for writing.

    Returns:
        FixAction: What was done.

    Raises:
        OSError: If writing the file fails.
    """
    result: DiagnosisResult | None = diag.result
    if result is None:
        return FixAction.FAILED
    if isinstance(result, Diverged):
        logger.warning("Not writing %s: %s", diag.path, result.reason.value)
        return FixAction.DIVERGED

    content: str | None = resolve_content(result)
    if content is None or content == diag.original:
        return FixAction.UNCHANGED

    write_text_in_place(diag.path, content, encoding)
    if isinstance(result, Cycle):
        logger.warning(
            "%s: chain '%s' cycles between %d states; wrote the first one",
            diag.path,
            diag.chain_name,
            len(result.members),
        )
        return FixAction.CYCLE_RESOLVED
    return FixAction.WRITTEN


def auto_fix(
    diagnoses: Iterable[FileDiagnosis],
    *,
    encoding: str = DEFAULT_ENCODING,
) -> FixReport:
    """Write resolved content for every diagnosed file, per the write policy.

    A write failure is recorded on the report and does not stop other files.

    Args:
        diagnoses (Iterable[FileDiagnosis]): Per-file diagnoses.
        encoding (str): Encoding used for writing.

    Returns:
        FixReport: The bucketed report.
    """
    report = FixReport()
    for diag in diagnoses:
        try:
            action: FixAction = fix_file(diag, encoding=encoding)
        except OSError as e:
            logger.error("Failed to write %s: %s", diag.path, e)
            report.write_errors[str(diag.path)] = e
            report.failed.append(diag)
            continue
        {
            FixAction.UNCHANGED: report.unchanged,
            FixAction.WRITTEN: report.written,
            FixAction.CYCLE_RESOLVED: report.cycle_resolved,
            FixAction.DIVERGED: report.diverged,
            FixAction.FAILED: report.failed,
        }[action].append(diag)
    logger.info(
        "apply: %d written, %d cycle(s) resolved, %d unchanged, %d diverged, %d failed",
        len(report.written),
        len(report.cycle_resolved),
        len(report.unchanged),
        len(report.diverged),
        len(report.failed),
    )
    return report
