# topmark:header:start
#
#   project      : PaddedCell
#   file         : chain.py
#   file_relpath : src/paddedcell/formatter/chain.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chain execution: run an ordered sequence of steps plus a normalization pass.

A `Chain` is the unit the padded-cell engine iterates. Applying it is a pure
function of the input text and the chain's configuration:

    text -> to "\\n" endings -> step 1 -> ... -> step n -> trailing newline -> line endings

Failure contract:
    If any step fails, the whole application fails. Nothing is partially
    applied and no earlier step output is returned. The caller receives a
    [`StepFailure`][paddedcell.core.errors.StepFailure] naming the failing step
    with the original exception attached as its cause.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from paddedcell.config.logging import get_logger
from paddedcell.core.errors import StepFailure
from paddedcell.formatter.line_endings import LineEnding, from_unix, to_unix

if TYPE_CHECKING:
    from collections.abc import Hashable

    from paddedcell.config.logging import PaddedCellLogger
    from paddedcell.steps.contracts import Step

logger: PaddedCellLogger = get_logger(__name__)


def end_with_newline(text: str) -> str:
    """Collapse trailing whitespace into exactly one ``\\n``.

    Whitespace-only text (including the empty string) becomes ``""``.

    Args:
        text (str): Text with ``\\n`` line endings.

    Returns:
        str: The text ending in a single newline, or ``""``.
    """
    stripped: str = text.rstrip()
    if not stripped:
        return ""
    return stripped + "\n"


@dataclass(frozen=True)
class Chain:
    """Ordered steps plus the terminal normalization policy.

    Chains are immutable and compare by value (name, step identities and
    policies), so collaborators may cache or deduplicate them. A chain holds no
    mutable state and may be applied concurrently from several threads as long
    as its steps are safe to call concurrently.

    Attributes:
        name (str): Chain (format) name, used in logs and dump artifact paths.
        steps (tuple[Step, ...]): Steps in user-controlled order.
        line_ending (LineEnding): Line-ending policy for the output.
        ensure_trailing_newline (bool): Whether non-empty output must end with
            exactly one newline.
    """

    name: str
    steps: tuple[Step, ...] = ()
    line_ending: LineEnding = LineEnding.PRESERVE
    ensure_trailing_newline: bool = False

    @property
    def identity(self) -> Hashable:
        """Return a hashable identity of the chain's configuration."""
        return (
            self.name,
            tuple(step.identity for step in self.steps),
            self.line_ending.value,
            self.ensure_trailing_newline,
        )

    def apply(self, text: str) -> str:
        """Apply every step in order, then the normalization pass.

        Args:
            text (str): Input text, with any line endings.

        Returns:
            str: The formatted text.

        Raises:
            StepFailure: If any step fails.
        """
        ending: str = self.line_ending.ending_for(text)
        current: str = to_unix(text)
        for step in self.steps:
            current = self._apply_step(step, current)

        if self.ensure_trailing_newline:
            current = end_with_newline(current)

        return from_unix(current, ending)

    def _apply_step(self, step: Step, text: str) -> str:
        """Run one step, wrapping any failure into `StepFailure`."""
        try:
            result: object = step.apply(text)
        except StepFailure:
            raise
        except Exception as exc:
            logger.debug("Chain %s: step '%s' failed: %s", self.name, step.name, exc)
            raise StepFailure(step.name, exc) from exc

        if not isinstance(result, str):
            raise StepFailure(
                step.name,
                TypeError(f"step returned {type(result).__name__}, expected str"),
            )
        logger.trace("Chain %s: step '%s' -> %d chars", self.name, step.name, len(result))
        return result
