# topmark:header:start
#
#   project      : PaddedCell
#   file         : test_verify.py
#   file_relpath : tests/operations/test_verify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Verify: bucketing outcomes and exit codes."""

from __future__ import annotations

from pathlib import Path

import pytest

from paddedcell.core.errors import StepFailure
from paddedcell.core.exit_codes import ExitCode
from paddedcell.diagnosis import Clean, Converged, Cycle, Diverged, DivergeReason
from paddedcell.operations import FileDiagnosis, Verdict, VerifyReport, classify, verify


def _diag(name: str, **kwargs: object) -> FileDiagnosis:
    return FileDiagnosis(path=Path(name), chain_name="c", **kwargs)  # type: ignore[arg-type]


CLEAN = _diag("clean.txt", original="x", result=Clean())
UNFORMATTED = _diag("conv.txt", original="x", result=Converged(value="y", trace=("y",)))
CYCLING = _diag("cycle.txt", original="x", result=Cycle(members=("A", "B"), trace=("A", "B")))
DIVERGING = _diag(
    "div.txt",
    original="x",
    result=Diverged(reason=DivergeReason.EXCEEDED_MAX_ITERATIONS, trace=("x ",)),
)
MISSING = _diag("missing.txt", error=FileNotFoundError("missing.txt"))
BROKEN = _diag("broken.txt", original="x", error=StepFailure("s", ValueError("bad")))


@pytest.mark.parametrize(
    ("diag", "verdict"),
    [
        (CLEAN, Verdict.CLEAN),
        (UNFORMATTED, Verdict.UNFORMATTED),
        (CYCLING, Verdict.UNRESOLVED),
        (DIVERGING, Verdict.UNRESOLVED),
        (MISSING, Verdict.ERROR),
    ],
)
def test_classify(diag: FileDiagnosis, verdict: Verdict) -> None:
    assert classify(diag) is verdict


def test_buckets_are_separate() -> None:
    report: VerifyReport = verify([CLEAN, UNFORMATTED, CYCLING, DIVERGING, MISSING])

    assert report.clean == [CLEAN]
    assert report.unformatted == [UNFORMATTED]
    assert report.unresolved == [CYCLING, DIVERGING]
    assert report.errors == [MISSING]
    assert report.total == 5
    assert not report.ok


@pytest.mark.parametrize(
    ("diagnoses", "code"),
    [
        ([], ExitCode.SUCCESS),
        ([CLEAN], ExitCode.SUCCESS),
        ([CLEAN, UNFORMATTED], ExitCode.WOULD_CHANGE),
        ([UNFORMATTED, CYCLING], ExitCode.PIPELINE_ERROR),
        ([DIVERGING], ExitCode.PIPELINE_ERROR),
        ([UNFORMATTED, CYCLING, MISSING], ExitCode.FILE_NOT_FOUND),
        ([BROKEN, MISSING], ExitCode.PIPELINE_ERROR),
    ],
)
def test_exit_code_precedence(diagnoses: list[FileDiagnosis], code: ExitCode) -> None:
    assert verify(diagnoses).exit_code() is code
