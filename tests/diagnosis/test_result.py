# topmark:header:start
#
#   project      : PaddedCell
#   file         : test_result.py
#   file_relpath : tests/diagnosis/test_result.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnosis result variants: classification helpers and descriptions."""

from __future__ import annotations

import pytest

from paddedcell.core.errors import StepFailure
from paddedcell.diagnosis import (
    Clean,
    Converged,
    Cycle,
    Diverged,
    DivergeReason,
    ResultKind,
    describe,
    is_misbehaved,
)


@pytest.mark.parametrize(
    ("result", "expected"),
    [
        (Clean(), False),
        (Converged(value="42", trace=("42",)), False),
        (Converged(value="", trace=("CC", "C", "")), True),
        (Cycle(members=("A", "B"), trace=("A", "B")), True),
        (Diverged(reason=DivergeReason.EXCEEDED_MAX_ITERATIONS, trace=("x",)), True),
    ],
)
def test_is_misbehaved(result: Clean | Converged | Cycle | Diverged, expected: bool) -> None:
    assert is_misbehaved(result) is expected


def test_kinds_are_dump_suffixes() -> None:
    assert [k.value for k in ResultKind] == ["clean", "converge", "cycle", "diverge"]
    assert Converged(value="").kind is ResultKind.CONVERGE
    assert Diverged(reason=DivergeReason.STEP_FAILED).kind is ResultKind.DIVERGE


def test_results_are_immutable() -> None:
    result = Converged(value="x", trace=("x",))
    with pytest.raises(AttributeError):
        result.value = "y"  # type: ignore[misc]


def test_failure_is_not_part_of_equality() -> None:
    a = Diverged(
        reason=DivergeReason.STEP_FAILED,
        step_name="s",
        iteration=1,
        failure=StepFailure("s", ValueError("one")),
    )
    b = Diverged(
        reason=DivergeReason.STEP_FAILED,
        step_name="s",
        iteration=1,
        failure=StepFailure("s", ValueError("two")),
    )
    assert a == b


def test_describe() -> None:
    assert describe(Clean()) == "clean"
    assert describe(Converged(value="", trace=("C", ""))) == "converges after 2 passes"
    assert describe(Converged(value="", trace=("",))) == "converges after 1 pass"
    assert describe(Cycle(members=("A", "B"))) == "cycles between 2 states"
    assert (
        describe(Diverged(reason=DivergeReason.EXCEEDED_MAX_ITERATIONS, trace=("a",) * 10))
        == "diverges: no fixed point after 10 iterations"
    )
    assert (
        describe(Diverged(reason=DivergeReason.STEP_FAILED, step_name="json", iteration=3))
        == "diverges: step 'json' failed on iteration 3"
    )
