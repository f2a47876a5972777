# topmark:header:start
#
#   project      : PaddedCell
#   file         : engine.py
#   file_relpath : src/paddedcell/diagnosis/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Padded-cell diagnosis engine.

Some chains are not idempotent: ``F(F(x))`` may differ from ``F(x)``, or the
chain may oscillate between several states forever. Comparing ``F(original)``
with the original alone would flag formatters that settle in two passes as
broken, and writing ``F(original)`` blindly could leave a file that is still
"dirty" on the next run.

The engine therefore applies the chain repeatedly, in a padded cell, and
classifies what happens:

1. ``first = F(O)``. If ``first == O`` the file is `Clean` and nothing else runs.
2. Otherwise start from ``current = O`` with an empty trace.
3. Up to ``N`` times: ``next = F(current)``.
   - a failing step → `Diverged` (step failed);
   - ``next == current`` → `Converged(next)`;
   - ``next`` equals ``trace[j]`` → `Cycle(trace[j:])`;
   - else append ``next`` to the trace and continue from it.
4. Bound exhausted → `Diverged` (exceeded max iterations).

The first iteration reuses ``first`` instead of calling ``F(O)`` again: the
chain is a pure function, so the outcome is identical and the common path
costs one application less. The bound counts iterations, not wall-clock time,
so diagnosis is reproducible on any host.

The engine never resolves a cycle or divergence to a value; that policy
belongs to the consuming operation (see `paddedcell.operations.fix`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from paddedcell.config.logging import get_logger
from paddedcell.constants import DEFAULT_MAX_ITERATIONS
from paddedcell.core.errors import StepFailure
from paddedcell.diagnosis.result import (
    Clean,
    Converged,
    Cycle,
    DiagnosisResult,
    Diverged,
    DivergeReason,
)
from paddedcell.diagnosis.trace import Trace

if TYPE_CHECKING:
    from paddedcell.config.logging import PaddedCellLogger
    from paddedcell.steps.contracts import TextTransform

logger: PaddedCellLogger = get_logger(__name__)


def _apply(transform: TextTransform, text: str) -> str:
    """Apply ``transform``, reporting any failure as a `StepFailure`.

    A `Chain` already names the failing step; a bare step is named after itself.
    """
    try:
        return transform.apply(text)
    except StepFailure:
        raise
    except Exception as exc:
        raise StepFailure(transform.name, exc) from exc


def diagnose(
    original: str,
    chain: TextTransform,
    *,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> DiagnosisResult:
    """Run the padded cell on ``original`` and classify the outcome.

    Args:
        original (str): The file content as read from disk.
        chain (TextTransform): The chain (or any single transform) to iterate.
        max_iterations (int): The bound ``N``; the trace never holds more states.

    Returns:
        DiagnosisResult: `Clean`, `Converged`, `Cycle` or `Diverged`.

    Raises:
        StepFailure: If the chain fails on ``original`` itself. Failures on
            derived states are reported as `Diverged` instead.
        ValueError: If ``max_iterations`` is smaller than 1.
    """
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be >= 1 (got {max_iterations})")

    first: str = _apply(chain, original)
    if first == original:
        logger.trace("diagnose[%s]: clean", chain.name)
        return Clean()

    trace = Trace(max_iterations)
    current: str = original
    for iteration in range(max_iterations):
        if iteration == 0:
            nxt: str = first
        else:
            try:
                nxt = _apply(chain, current)
            except StepFailure as exc:
                logger.debug(
                    "diagnose[%s]: step '%s' failed on iteration %d: %s",
                    chain.name,
                    exc.step_name,
                    iteration,
                    exc.cause,
                )
                return Diverged(
                    reason=DivergeReason.STEP_FAILED,
                    trace=trace.freeze(),
                    step_name=exc.step_name,
                    iteration=iteration,
                    failure=exc,
                )

        if nxt == current:
            logger.debug("diagnose[%s]: converged after %d pass(es)", chain.name, len(trace))
            return Converged(value=nxt, trace=trace.freeze())

        seen_at: int | None = trace.index_of(nxt)
        if seen_at is not None:
            members: tuple[str, ...] = trace.since(seen_at)
            logger.debug(
                "diagnose[%s]: cycle of %d state(s) entered at trace index %d",
                chain.name,
                len(members),
                seen_at,
            )
            return Cycle(members=members, trace=trace.freeze())

        trace.append(nxt)
        current = nxt

    logger.debug("diagnose[%s]: no fixed point after %d iterations", chain.name, max_iterations)
    return Diverged(reason=DivergeReason.EXCEEDED_MAX_ITERATIONS, trace=trace.freeze())
