# topmark:header:start
#
#   project      : PaddedCell
#   file         : base.py
#   file_relpath : src/paddedcell/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base classes for class-based formatter steps.

Concrete steps are small frozen dataclasses: their fields *are* their
configuration, so dataclass equality and hashing give value semantics for free.

Design goals
------------
- Value semantics: two steps with the same configuration are interchangeable.
- No lifecycle beyond ``apply()``: chain execution owns ordering and failure
  wrapping.
- Callables can be adapted without subclassing via `FunctionStep`.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass, field, fields
from typing import TYPE_CHECKING

from paddedcell.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable

    from paddedcell.config.logging import PaddedCellLogger

logger: PaddedCellLogger = get_logger(__name__)


@dataclass(frozen=True)
class BaseStep:
    """Reusable foundation for configured steps.

    Subclass this as a frozen dataclass and override ``apply()``. Every
    dataclass field takes part in the step's identity.

    Attributes:
        name (str): Stable step identifier for logs and failure reports.
    """

    name: str

    @property
    def identity(self) -> Hashable:
        """Return ``(class name, *field values)`` as the step identity.

        Returns:
            Hashable: The identity tuple.
        """
        return (type(self).__name__, *astuple(self))

    def apply(self, text: str) -> str:
        """Transform ``text``; subclasses must override.

        Args:
            text (str): Input text.

        Returns:
            str: The transformed text.
        """
        raise NotImplementedError(f"{type(self).__name__}.apply() is not implemented")

    def describe(self) -> str:
        """Return a compact ``name(key=value, ...)`` description for listings."""
        opts: str = ", ".join(
            f"{f.name}={getattr(self, f.name)!r}" for f in fields(self) if f.name != "name"
        )
        return f"{self.name}({opts})"


@dataclass(frozen=True)
class FunctionStep:
    """Adapt a plain ``str -> str`` callable into a step.

    The callable does not take part in equality: the step's identity is its
    ``name`` plus the explicit ``state`` describing its configuration, so
    equivalent steps built from different function objects still compare equal.

    Attributes:
        name (str): Step name.
        func (Callable[[str], str]): The transform.
        state (tuple[Hashable, ...]): Configuration values identifying the transform.

    Example:
        ```python
        upper = FunctionStep("upper", str.upper)
        assert upper.apply("abc") == "ABC"
        ```
    """

    name: str
    func: Callable[[str], str] = field(compare=False, repr=False)
    state: tuple[Hashable, ...] = ()

    @property
    def identity(self) -> Hashable:
        """Return ``(name, state)``."""
        return (self.name, self.state)

    def apply(self, text: str) -> str:
        """Run the wrapped callable.

        Args:
            text (str): Input text.

        Returns:
            str: The callable's result.
        """
        logger.trace("FunctionStep %s: applying to %d chars", self.name, len(text))
        return self.func(text)
