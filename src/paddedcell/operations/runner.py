# topmark:header:start
#
#   project      : PaddedCell
#   file         : runner.py
#   file_relpath : src/paddedcell/operations/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Execution helpers for diagnosing a list of files (engine layer).

This module runs the padded cell for one or more files and returns structured
per-file records. It exists so both the CLI and API callers share the same
execution logic.

Design goals:
  - No CLI dependencies: presentation (printing, colors, exit) is the CLI's job.
  - Contained failures: a step failing on a file's original content, or the
    file being unreadable, is recorded on that file's `FileDiagnosis` and never
    aborts the other files.
  - Embarrassingly parallel: each file only touches its own text and the
    read-only chain, so files may be diagnosed on a thread pool. Output order
    always equals input order.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING

from paddedcell.config.logging import get_logger
from paddedcell.constants import DEFAULT_ENCODING, DEFAULT_MAX_ITERATIONS
from paddedcell.core.errors import StepFailure
from paddedcell.core.exit_codes import ExitCode
from paddedcell.diagnosis.engine import diagnose
from paddedcell.diagnosis.result import describe
from paddedcell.utils.file import read_text_exact

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from paddedcell.config.logging import PaddedCellLogger
    from paddedcell.diagnosis.result import DiagnosisResult
    from paddedcell.steps.contracts import TextTransform

logger: PaddedCellLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FileDiagnosis:
    """Diagnosis of one file against one chain.

    Exactly one of ``result`` and ``error`` is set.

    Attributes:
        path (Path): The diagnosed file.
        chain_name (str): Name of the chain that was applied.
        original (str | None): The content as read (None when unreadable).
        result (DiagnosisResult | None): The padded-cell outcome.
        error (Exception | None): Why the file could not be diagnosed: a
            `StepFailure` on the original content, an `OSError`, or a
            `UnicodeDecodeError`.
    """

    path: Path
    chain_name: str
    original: str | None = None
    result: DiagnosisResult | None = None
    error: Exception | None = None

    @property
    def failed(self) -> bool:
        """Return True when the file could not be diagnosed."""
        return self.error is not None

    def error_code(self) -> ExitCode | None:
        """Map the contained error onto an exit code (None without error).

        Returns:
            ExitCode | None: The exit code matching the error category.
        """
        err: Exception | None = self.error
        if err is None:
            return None
        if isinstance(err, (FileNotFoundError, IsADirectoryError)):
            return ExitCode.FILE_NOT_FOUND
        if isinstance(err, PermissionError):
            return ExitCode.PERMISSION_DENIED
        if isinstance(err, UnicodeError):
            return ExitCode.ENCODING_ERROR
        if isinstance(err, StepFailure):
            return ExitCode.PIPELINE_ERROR
        if isinstance(err, OSError):
            return ExitCode.IO_ERROR
        return ExitCode.FAILURE


def diagnose_file(
    path: Path,
    chain: TextTransform,
    *,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    encoding: str = DEFAULT_ENCODING,
) -> FileDiagnosis:
    """Read ``path`` and run the padded cell on its content.

    Args:
        path (Path): File to diagnose.
        chain (TextTransform): Chain (or single step) to apply.
        max_iterations (int): The padded-cell bound.
        encoding (str): Text encoding of the file.

    Returns:
        FileDiagnosis: The per-file record (never raises for file-level problems).
    """
    try:
        original: str = read_text_exact(path, encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", path, e)
        return FileDiagnosis(path=path, chain_name=chain.name, error=e)

    try:
        result: DiagnosisResult = diagnose(original, chain, max_iterations=max_iterations)
    except StepFailure as e:
        logger.error("Chain '%s' failed on %s: %s", chain.name, path, e)
        return FileDiagnosis(path=path, chain_name=chain.name, original=original, error=e)

    logger.info("%s [%s]: %s", path, chain.name, describe(result))
    return FileDiagnosis(path=path, chain_name=chain.name, original=original, result=result)


def diagnose_files(
    paths: Sequence[Path],
    chain: TextTransform,
    *,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    encoding: str = DEFAULT_ENCODING,
    jobs: int = 1,
) -> list[FileDiagnosis]:
    """Diagnose every file in ``paths`` independently.

    Args:
        paths (Sequence[Path]): Files to diagnose.
        chain (TextTransform): Chain shared (read-only) by all files.
        max_iterations (int): The padded-cell bound.
        encoding (str): Text encoding of the files.
        jobs (int): Worker threads; 1 runs sequentially in the calling thread.

    Returns:
        list[FileDiagnosis]: One record per path, in input order.
    """

    def _one(path: Path) -> FileDiagnosis:
        return diagnose_file(path, chain, max_iterations=max_iterations, encoding=encoding)

    if jobs <= 1 or len(paths) <= 1:
        return [_one(p) for p in paths]

    logger.debug("Diagnosing %d files on %d workers", len(paths), jobs)
    with ThreadPoolExecutor(max_workers=jobs, thread_name_prefix="paddedcell") as pool:
        return list(pool.map(_one, paths))
