# topmark:header:start
#
#   project      : PaddedCell
#   file         : test_engine.py
#   file_relpath : tests/diagnosis/test_engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Padded-cell engine: the four outcomes and their edge cases.

The scenarios mirror the reference chains: a chain cycling between "A" and
"B", a chain that removes one character per pass, a chain that appends a
space forever, and a chain that settles on "42" in a single pass.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import pytest

from paddedcell.core.errors import StepFailure
from paddedcell.diagnosis import (
    Clean,
    Converged,
    Cycle,
    Diverged,
    DivergeReason,
    ResultKind,
    diagnose,
)
from paddedcell.formatter.chain import Chain
from paddedcell.steps.base import FunctionStep

if TYPE_CHECKING:
    from paddedcell.diagnosis import DiagnosisResult

pytestmark = pytest.mark.diagnosis


class CountingStep:
    """Step wrapper counting how often it is applied."""

    def __init__(self, name: str, func: Callable[[str], str]) -> None:
        self.name = name
        self.func = func
        self.calls = 0

    @property
    def identity(self) -> tuple[str, int]:
        return (self.name, id(self))

    def apply(self, text: str) -> str:
        self.calls += 1
        return self.func(text)


def test_clean_when_chain_is_identity() -> None:
    chain = Chain(name="noop")
    result: DiagnosisResult = diagnose("hello\n", chain)

    assert result == Clean()
    assert result.kind is ResultKind.CLEAN
    assert result.trace == ()


def test_clean_calls_chain_once() -> None:
    step = CountingStep("identity", lambda t: t)
    diagnose("x", Chain(name="c", steps=(step,)))

    assert step.calls == 1


def test_cycle_between_a_and_b(cycle_chain: Chain) -> None:
    result: DiagnosisResult = diagnose("CCC", cycle_chain)

    assert isinstance(result, Cycle)
    assert result.members == ("A", "B")
    assert result.trace == ("A", "B")
    assert result.kind is ResultKind.CYCLE


def test_cycle_starting_inside_the_cycle(cycle_chain: Chain) -> None:
    # "A" -> "B" -> "A": the original is not part of the trace, so the cycle
    # is only detected once "B" comes back.
    result: DiagnosisResult = diagnose("A", cycle_chain)

    assert isinstance(result, Cycle)
    assert result.members == ("B", "A")


def test_converge_to_empty(converge_chain: Chain) -> None:
    result: DiagnosisResult = diagnose("CCC", converge_chain)

    assert isinstance(result, Converged)
    assert result.value == ""
    assert result.trace == ("CC", "C", "")


def test_converge_in_one_pass(wellbehaved_chain: Chain) -> None:
    result: DiagnosisResult = diagnose("CCC", wellbehaved_chain)

    assert result == Converged(value="42", trace=("42",))


def test_constant_chain_on_its_own_output_is_clean(wellbehaved_chain: Chain) -> None:
    assert diagnose("42", wellbehaved_chain) == Clean()


def test_diverge_after_max_iterations(diverge_chain: Chain) -> None:
    result: DiagnosisResult = diagnose("CCC", diverge_chain)

    assert isinstance(result, Diverged)
    assert result.reason is DivergeReason.EXCEEDED_MAX_ITERATIONS
    assert len(result.trace) == 10
    assert result.trace[0] == "CCC "
    assert result.trace[-1] == "CCC" + " " * 10


def test_diverge_invokes_chain_exactly_n_times() -> None:
    step = CountingStep("grow", lambda t: t + "x")
    result: DiagnosisResult = diagnose("", Chain(name="c", steps=(step,)), max_iterations=5)

    assert isinstance(result, Diverged)
    assert step.calls == 5
    assert len(result.trace) == 5


@pytest.mark.parametrize("n", [1, 2, 3, 7])
def test_trace_never_exceeds_bound(n: int, diverge_chain: Chain) -> None:
    result: DiagnosisResult = diagnose("", diverge_chain, max_iterations=n)

    assert isinstance(result, Diverged)
    assert len(result.trace) == n


def test_bound_of_one_still_detects_single_pass_convergence() -> None:
    # With N=1 the only iteration reuses F(O); convergence needs a second application.
    chain = Chain(name="c", steps=(FunctionStep("const", lambda _t: "42"),))
    result: DiagnosisResult = diagnose("x", chain, max_iterations=1)

    assert isinstance(result, Diverged)
    assert result.trace == ("42",)


def test_invalid_bound_is_rejected(cycle_chain: Chain) -> None:
    with pytest.raises(ValueError):
        diagnose("x", cycle_chain, max_iterations=0)


def test_failure_on_original_propagates() -> None:
    def boom(_text: str) -> str:
        raise RuntimeError("boom")

    chain = Chain(name="c", steps=(FunctionStep("boom", boom),))
    with pytest.raises(StepFailure) as exc_info:
        diagnose("x", chain)

    assert exc_info.value.step_name == "boom"
    assert isinstance(exc_info.value.cause, RuntimeError)


def test_failure_on_derived_state_diverges() -> None:
    def fragile(text: str) -> str:
        if text == "x":
            return "y"
        raise ValueError(f"cannot format {text!r}")

    chain = Chain(name="c", steps=(FunctionStep("fragile", fragile),))
    result: DiagnosisResult = diagnose("x", chain)

    assert isinstance(result, Diverged)
    assert result.reason is DivergeReason.STEP_FAILED
    assert result.step_name == "fragile"
    assert result.iteration == 1
    assert result.trace == ("y",)
    assert isinstance(result.failure, StepFailure)


def test_bare_step_failure_on_derived_state_diverges() -> None:
    def fragile(text: str) -> str:
        if text == "x":
            return "y"
        raise ValueError("boom")

    result: DiagnosisResult = diagnose("x", FunctionStep("fragile", fragile))

    assert isinstance(result, Diverged)
    assert result.reason is DivergeReason.STEP_FAILED
    assert result.step_name == "fragile"
    assert result.iteration == 1
    assert isinstance(result.failure, StepFailure)
    assert isinstance(result.failure.cause, ValueError)


def test_bare_step_failure_on_original_is_a_step_failure() -> None:
    def boom(_text: str) -> str:
        raise KeyError("boom")

    with pytest.raises(StepFailure) as exc_info:
        diagnose("x", FunctionStep("boom", boom))

    assert exc_info.value.step_name == "boom"
    assert isinstance(exc_info.value.cause, KeyError)


def test_diagnosis_is_deterministic(cycle_chain: Chain, converge_chain: Chain) -> None:
    for chain in (cycle_chain, converge_chain):
        assert diagnose("CCC", chain) == diagnose("CCC", chain)


def test_converged_value_is_fixed_point(converge_chain: Chain) -> None:
    result: DiagnosisResult = diagnose("abcdef", converge_chain)

    assert isinstance(result, Converged)
    assert converge_chain.apply(result.value) == result.value


def test_cycle_members_map_onto_each_other(cycle_chain: Chain) -> None:
    result: DiagnosisResult = diagnose("CCC", cycle_chain)

    assert isinstance(result, Cycle)
    members = result.members
    for i, member in enumerate(members):
        assert cycle_chain.apply(member) == members[(i + 1) % len(members)]
