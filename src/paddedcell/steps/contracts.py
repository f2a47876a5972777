# topmark:header:start
#
#   project      : PaddedCell
#   file         : contracts.py
#   file_relpath : src/paddedcell/steps/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contracts for formatter steps (engine-facing).

This module defines the minimal capability every formatter step must offer.
Steps are injected, not inherited from: a language formatter, a subprocess
wrapper or a test double all qualify as long as they expose the members below.

Attributes:
----------
name : str
    Stable, human-facing name used in logs and in `StepFailure` reports.
identity : Hashable
    Value used for equality and caching; two steps with identical
    configuration must report equal identities.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Hashable


@runtime_checkable
class Step(Protocol):
    """Protocol for a single text-transformation step.

    A step is a pure function from text to text. It may raise any exception to
    signal that it cannot transform the input; the chain wraps such exceptions
    into [`StepFailure`][paddedcell.core.errors.StepFailure].
    """

    name: str

    @property
    def identity(self) -> Hashable:
        """Return the configuration identity of this step."""
        ...

    def apply(self, text: str) -> str:
        """Transform ``text`` and return the result.

        Implementations must not keep state that can change the output for a
        given input across calls.

        Args:
            text (str): Input text with ``\\n`` line endings.

        Returns:
            str: The transformed text.
        """
        ...


@runtime_checkable
class TextTransform(Protocol):
    """Anything that can be iterated by the padded-cell engine.

    Both [`Chain`][paddedcell.formatter.chain.Chain] and individual steps satisfy
    this protocol.
    """

    name: str

    def apply(self, text: str) -> str:
        """Transform ``text`` and return the result."""
        ...
