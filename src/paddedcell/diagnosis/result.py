# topmark:header:start
#
#   project      : PaddedCell
#   file         : result.py
#   file_relpath : src/paddedcell/diagnosis/result.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnosis results: the outcome of running the padded cell on one file.

A result is exactly one of four immutable variants:

- `Clean`: the chain leaves the original unchanged.
- `Converged`: repeated application reaches a fixed point that differs from
  the original.
- `Cycle`: repeated application enters a repeating subsequence of states.
- `Diverged`: neither happened within the iteration bound, or a step failed
  while re-applying the chain to a derived state.

These are outcomes, not errors. Consumers dispatch on them with ``match``:

    match result:
        case Clean():
            ...
        case Converged(value=value):
            ...
        case Cycle(members=members):
            ...
        case Diverged(reason=reason):
            ...

Every variant also carries the ``trace`` it was derived from (the states after
the original, in order, at most ``N`` of them) for the debug dump.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from paddedcell.core.errors import StepFailure


class ResultKind(str, Enum):
    """Discriminator of a diagnosis result.

    The values double as the suffix of debug dump artifacts
    (``test.cycle.cycle0``).
    """

    CLEAN = "clean"
    CONVERGE = "converge"
    CYCLE = "cycle"
    DIVERGE = "diverge"


class DivergeReason(str, Enum):
    """Why a diagnosis did not settle."""

    EXCEEDED_MAX_ITERATIONS = "exceeded max iterations"
    STEP_FAILED = "step failed"


@dataclass(frozen=True, slots=True)
class Clean:
    """The chain leaves the original text unchanged."""

    kind: ClassVar[ResultKind] = ResultKind.CLEAN

    trace: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Converged:
    """Repeated application reached the fixed point ``value`` (``value != original``).

    Attributes:
        value (str): The fixed point; writing it back makes the file clean.
        trace (tuple[str, ...]): States after the original, ending with ``value``.
    """

    kind: ClassVar[ResultKind] = ResultKind.CONVERGE

    value: str
    trace: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Cycle:
    """Repeated application oscillates among ``members``.

    Attributes:
        members (tuple[str, ...]): The repeating states in order; ``members[0]`` is
            the state that was seen again first.
        trace (tuple[str, ...]): States after the original.
    """

    kind: ClassVar[ResultKind] = ResultKind.CYCLE

    members: tuple[str, ...]
    trace: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Diverged:
    """No fixed point or cycle was found, or a step failed during re-application.

    Attributes:
        reason (DivergeReason): Exhausted iterations or step failure.
        trace (tuple[str, ...]): States recorded before giving up.
        step_name (str | None): Failing step, for `DivergeReason.STEP_FAILED`.
        iteration (int | None): Zero-based iteration at which the step failed.
        failure (StepFailure | None): The failure itself (not part of equality).
    """

    kind: ClassVar[ResultKind] = ResultKind.DIVERGE

    reason: DivergeReason
    trace: tuple[str, ...] = ()
    step_name: str | None = None
    iteration: int | None = None
    failure: StepFailure | None = field(default=None, compare=False, repr=False)


DiagnosisResult = Clean | Converged | Cycle | Diverged


def is_misbehaved(result: DiagnosisResult) -> bool:
    """Return True unless the chain behaved like an idempotent formatter.

    A chain is well behaved on a file when the file is `Clean`, or when it
    `Converged` in a single pass (one application reached the fixed point).

    Args:
        result (DiagnosisResult): The diagnosis result.

    Returns:
        bool: True for multi-pass convergence, cycles and divergence.
    """
    if isinstance(result, Clean):
        return False
    if isinstance(result, Converged):
        return len(result.trace) > 1
    return True


def describe(result: DiagnosisResult) -> str:
    """Return a one-line, human-readable description of ``result``."""
    match result:
        case Clean():
            return "clean"
        case Converged(trace=trace):
            passes: int = len(trace)
            return f"converges after {passes} pass{'es' if passes != 1 else ''}"
        case Cycle(members=members):
            return f"cycles between {len(members)} state{'s' if len(members) != 1 else ''}"
        case Diverged(reason=DivergeReason.STEP_FAILED, step_name=step, iteration=iteration):
            return f"diverges: step '{step}' failed on iteration {iteration}"
        case Diverged(trace=trace):
            return f"diverges: no fixed point after {len(trace)} iterations"
    raise TypeError(f"not a diagnosis result: {result!r}")
