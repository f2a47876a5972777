# topmark:header:start
#
#   project      : PaddedCell
#   file         : registry.py
#   file_relpath : src/paddedcell/steps/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Step type registry.

Maps the ``type`` key of a configured step (``{ type = "replace", ... }``) to a
factory that builds the step from the remaining options.

Notes:
    * Built-in step types are registered at import time.
    * `register()` / `unregister()` are intended for plugins and tests; they
      are guarded by a lock so concurrent lookups stay consistent.
    * Unknown types and invalid options raise
      [`ConfigError`][paddedcell.core.errors.ConfigError].
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Iterator, Mapping

from paddedcell.config.logging import get_logger
from paddedcell.core.errors import ConfigError
from paddedcell.steps.command import CommandStep
from paddedcell.steps.generic import (
    IndentStep,
    IndentStyle,
    JsonStep,
    ReplaceRegexStep,
    ReplaceStep,
    TrimTrailingWhitespaceStep,
)

if TYPE_CHECKING:
    from paddedcell.config.logging import PaddedCellLogger
    from paddedcell.config.model import StepSpec
    from paddedcell.steps.contracts import Step

logger: PaddedCellLogger = get_logger(__name__)

StepFactory = Callable[[Mapping[str, Any]], "Step"]


@dataclass(frozen=True)
class StepTypeMeta:
    """Stable metadata about a registered step type."""

    type_name: str
    description: str = ""
    options: tuple[str, ...] = ()


def _freeze_value(value: Any) -> Any:
    """Turn TOML arrays into tuples so steps stay hashable."""
    if isinstance(value, list):
        return tuple(_freeze_value(v) for v in value)
    return value


def dataclass_factory(
    step_cls: type[Any],
    *,
    coerce: Mapping[str, Callable[[Any], Any]] | None = None,
) -> StepFactory:
    """Build a factory for a frozen-dataclass step class.

    Options are matched against the dataclass fields; unknown options are rejected.

    Args:
        step_cls (type[Any]): The step dataclass.
        coerce (Mapping[str, Callable[[Any], Any]] | None): Optional per-option converters
            (e.g. string to enum).

    Returns:
        StepFactory: Factory building ``step_cls`` from an options mapping.
    """
    allowed: frozenset[str] = frozenset(f.name for f in fields(step_cls))
    converters: Mapping[str, Callable[[Any], Any]] = coerce or {}

    def factory(options: Mapping[str, Any]) -> Step:
        unknown: set[str] = set(options) - allowed
        if unknown:
            raise ConfigError(
                f"unknown option(s) for step '{step_cls.__name__}': {', '.join(sorted(unknown))}"
            )
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            frozen: Any = _freeze_value(value)
            kwargs[key] = converters[key](frozen) if key in converters else frozen
        return step_cls(**kwargs)

    return factory


class StepRegistry:
    """Registry of step types, keyed by their configuration ``type`` name."""

    _lock = RLock()
    _factories: dict[str, StepFactory] = {}
    _meta: dict[str, StepTypeMeta] = {}

    @classmethod
    def register(
        cls,
        type_name: str,
        factory: StepFactory,
        *,
        description: str = "",
        options: tuple[str, ...] = (),
    ) -> None:
        """Register (or replace) a step type.

        Args:
            type_name (str): Value of the ``type`` key in configuration.
            factory (StepFactory): Callable building the step from its options.
            description (str): One-line description for listings.
            options (tuple[str, ...]): Names of accepted options, for listings.
        """
        with cls._lock:
            if type_name in cls._factories:
                logger.debug("StepRegistry: replacing step type '%s'", type_name)
            cls._factories[type_name] = factory
            cls._meta[type_name] = StepTypeMeta(
                type_name=type_name, description=description, options=options
            )

    @classmethod
    def unregister(cls, type_name: str) -> bool:
        """Remove a step type; return True if it was registered."""
        with cls._lock:
            cls._meta.pop(type_name, None)
            return cls._factories.pop(type_name, None) is not None

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return all registered step type names (sorted)."""
        with cls._lock:
            return tuple(sorted(cls._factories))

    @classmethod
    def as_mapping(cls) -> Mapping[str, StepFactory]:
        """Return a read-only snapshot of the registered factories."""
        with cls._lock:
            return MappingProxyType(dict(cls._factories))

    @classmethod
    def iter_meta(cls) -> Iterator[StepTypeMeta]:
        """Iterate over metadata for registered step types, sorted by name.

        Yields:
            StepTypeMeta: Metadata about each step type.
        """
        with cls._lock:
            snapshot: list[StepTypeMeta] = [cls._meta[n] for n in sorted(cls._meta)]
        yield from snapshot

    @classmethod
    def build(cls, spec: StepSpec) -> Step:
        """Build a step from its configuration.

        Args:
            spec (StepSpec): The configured step (type name plus options).

        Returns:
            Step: The constructed step.

        Raises:
            ConfigError: If the type is unknown or the options are invalid.
        """
        with cls._lock:
            factory: StepFactory | None = cls._factories.get(spec.type_name)
        if factory is None:
            known: str = ", ".join(cls.names()) or "(none)"
            raise ConfigError(f"unknown step type '{spec.type_name}' (known: {known})")
        try:
            step: Step = factory(spec.options)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"invalid options for step type '{spec.type_name}': {exc}") from exc
        logger.debug("StepRegistry: built step %r", step)
        return step


def register_builtin_steps() -> None:
    """Register the built-in generic step types."""
    StepRegistry.register(
        "trim_trailing_whitespace",
        dataclass_factory(TrimTrailingWhitespaceStep),
        description="Remove trailing spaces and tabs on every line.",
    )
    StepRegistry.register(
        "indent",
        dataclass_factory(IndentStep, coerce={"style": IndentStyle}),
        description="Normalize leading indentation to spaces or tabs.",
        options=("style", "width"),
    )
    StepRegistry.register(
        "replace",
        dataclass_factory(ReplaceStep),
        description="Replace a literal string.",
        options=("search", "replacement"),
    )
    StepRegistry.register(
        "replace_regex",
        dataclass_factory(ReplaceRegexStep),
        description="Replace regular expression matches.",
        options=("pattern", "replacement"),
    )
    StepRegistry.register(
        "json",
        dataclass_factory(JsonStep),
        description="Pretty-print JSON documents.",
        options=("indent", "sort_keys"),
    )
    StepRegistry.register(
        "command",
        dataclass_factory(CommandStep),
        description="Pipe text through an external program (stdin to stdout).",
        options=("args", "timeout", "encoding"),
    )


register_builtin_steps()
