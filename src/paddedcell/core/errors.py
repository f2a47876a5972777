# topmark:header:start
#
#   project      : PaddedCell
#   file         : errors.py
#   file_relpath : src/paddedcell/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Domain exceptions for PaddedCell.

These exceptions are raised by the engine layers (steps, chains, configuration)
and are free of any CLI dependency. The CLI maps them onto its own
`click.ClickException` subclasses and exit codes.
"""

from __future__ import annotations


class PaddedCellError(Exception):
    """Base class for all PaddedCell domain errors."""


class StepFailure(PaddedCellError):
    """A single step could not transform the given text.

    Raised by chain execution with the failing step's name and the underlying
    cause attached. It is propagated unchanged and never retried.

    Attributes:
        step_name (str): Name of the step that failed.
        cause (BaseException | None): The exception raised by the step, if any.
    """

    def __init__(self, step_name: str, cause: BaseException | None = None) -> None:
        self.step_name: str = step_name
        self.cause: BaseException | None = cause
        detail: str = f": {cause}" if cause is not None else ""
        super().__init__(f"Step '{step_name}' failed{detail}")

    def __reduce__(self) -> tuple[type[StepFailure], tuple[str, BaseException | None]]:
        # Keep pickling (process pools) working with the custom signature.
        return (self.__class__, (self.step_name, self.cause))


class ConfigError(PaddedCellError):
    """Configuration is missing, malformed, or names something unknown.

    Attributes:
        source (str | None): Config file or identifier the error originates from.
    """

    def __init__(self, message: str, *, source: str | None = None) -> None:
        self.source: str | None = source
        prefix: str = f"{source}: " if source else ""
        super().__init__(f"{prefix}{message}")
