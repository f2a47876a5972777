# topmark:header:start
#
#   project      : PaddedCell
#   file         : model.py
#   file_relpath : src/paddedcell/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for PaddedCell.

The configuration is split into a mutable builder (`MutableConfig`) used while
loading and merging sources, and an immutable runtime snapshot (`Config`) that
is shared, read-only, by every worker diagnosing files.

Precedence (low → high): built-in defaults, discovered project config,
``--config`` files in the given order, CLI overrides.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

from paddedcell.config.keys import Toml
from paddedcell.config.logging import get_logger
from paddedcell.constants import DEFAULT_ENCODING, DEFAULT_JOBS, DEFAULT_MAX_ITERATIONS
from paddedcell.core.errors import ConfigError
from paddedcell.formatter.line_endings import LineEnding

if TYPE_CHECKING:
    from paddedcell.config.logging import PaddedCellLogger

logger: PaddedCellLogger = get_logger(__name__)


# ------------------ Value checks ------------------


def _expect_int(value: Any, key: str, *, source: str | None, minimum: int = 1) -> int:
    # bool is a subclass of int; reject it.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{key}' must be an integer (got {value!r})", source=source)
    if value < minimum:
        raise ConfigError(f"'{key}' must be >= {minimum} (got {value})", source=source)
    return value


def _expect_str(value: Any, key: str, *, source: str | None) -> str:
    if not isinstance(value, str) or not value:
        raise ConfigError(f"'{key}' must be a non-empty string (got {value!r})", source=source)
    return value


def _expect_bool(value: Any, key: str, *, source: str | None) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be a boolean (got {value!r})", source=source)
    return value


def _expect_str_list(value: Any, key: str, *, source: str | None) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings (got {value!r})", source=source)
    return tuple(value)


def _expect_table(value: Any, key: str, *, source: str | None) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigError(f"'{key}' must be a table (got {value!r})", source=source)
    return value


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class StepSpec:
    """A configured step: its registry type name and its options.

    Attributes:
        type_name (str): Registry key (the ``type`` entry of the step table).
        options (Mapping[str, Any]): Remaining entries of the step table (read-only).
    """

    type_name: str
    options: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_table(cls, table: Mapping[str, Any], *, source: str | None = None) -> StepSpec:
        """Build a spec from a TOML step table.

        Args:
            table (Mapping[str, Any]): The step table; must contain ``type``.
            source (str | None): Config source for error messages.

        Returns:
            StepSpec: The parsed step spec.

        Raises:
            ConfigError: If ``type`` is missing or not a string.
        """
        type_name: str = _expect_str(
            table.get(Toml.KEY_STEP_TYPE), Toml.KEY_STEP_TYPE, source=source
        )
        options: dict[str, Any] = {k: v for k, v in table.items() if k != Toml.KEY_STEP_TYPE}
        return cls(type_name=type_name, options=MappingProxyType(options))


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Configuration of one named chain ("format").

    Attributes:
        name (str): Format name (``[format.<name>]``).
        steps (tuple[StepSpec, ...]): Steps in order.
        include (tuple[str, ...]): Gitwildmatch patterns selecting files; empty selects all.
        exclude (tuple[str, ...]): Gitwildmatch patterns removing files.
        line_ending (LineEnding): Line-ending policy.
        ensure_trailing_newline (bool): Trailing-newline policy.
    """

    name: str
    steps: tuple[StepSpec, ...] = ()
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    line_ending: LineEnding = LineEnding.PRESERVE
    ensure_trailing_newline: bool = False

    @classmethod
    def from_table(
        cls, name: str, table: Mapping[str, Any], *, source: str | None = None
    ) -> FormatConfig:
        """Parse a ``[format.<name>]`` table.

        Args:
            name (str): The format name.
            table (Mapping[str, Any]): The format table.
            source (str | None): Config source for error messages.

        Returns:
            FormatConfig: The parsed format configuration.

        Raises:
            ConfigError: On invalid values.
        """
        for key in table:
            if key not in Toml.FORMAT_KEYS:
                logger.warning("%s: ignoring unknown key 'format.%s.%s'", source, name, key)

        raw_steps: Any = table.get(Toml.KEY_STEPS, [])
        if not isinstance(raw_steps, list):
            raise ConfigError(f"'format.{name}.steps' must be an array of tables", source=source)
        steps: tuple[StepSpec, ...] = tuple(
            StepSpec.from_table(
                _expect_table(s, f"format.{name}.steps[{i}]", source=source), source=source
            )
            for i, s in enumerate(raw_steps)
        )

        raw_ending: Any = table.get(Toml.KEY_LINE_ENDING, LineEnding.PRESERVE.value)
        try:
            line_ending = LineEnding(raw_ending)
        except ValueError as exc:
            allowed: str = ", ".join(e.value for e in LineEnding)
            raise ConfigError(
                f"'format.{name}.line_ending' must be one of {allowed} (got {raw_ending!r})",
                source=source,
            ) from exc

        return cls(
            name=name,
            steps=steps,
            include=_expect_str_list(
                table.get(Toml.KEY_INCLUDE, []), f"format.{name}.include", source=source
            ),
            exclude=_expect_str_list(
                table.get(Toml.KEY_EXCLUDE, []), f"format.{name}.exclude", source=source
            ),
            line_ending=line_ending,
            ensure_trailing_newline=_expect_bool(
                table.get(Toml.KEY_ENSURE_TRAILING_NEWLINE, False),
                f"format.{name}.ensure_trailing_newline",
                source=source,
            ),
        )


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for PaddedCell.

    Produced by `MutableConfig.freeze`. Use `Config.thaw` to obtain a mutable
    builder for edits.

    Attributes:
        max_iterations (int): Padded-cell iteration bound ``N`` per file.
        encoding (str): Text encoding used to read and write files.
        jobs (int): Number of worker threads diagnosing files concurrently.
        formats (tuple[FormatConfig, ...]): Configured chains, in declaration order.
        config_files (tuple[Path | str, ...]): Config sources that were merged.
        root (Path | None): Project root (directory of the discovered config);
            patterns and dump paths are relative to it.
    """

    max_iterations: int = DEFAULT_MAX_ITERATIONS
    encoding: str = DEFAULT_ENCODING
    jobs: int = DEFAULT_JOBS
    formats: tuple[FormatConfig, ...] = ()
    config_files: tuple[Path | str, ...] = ()
    root: Path | None = None

    def get_format(self, name: str) -> FormatConfig | None:
        """Return the format named ``name``, or None."""
        for fmt in self.formats:
            if fmt.name == name:
                return fmt
        return None

    def format_names(self) -> tuple[str, ...]:
        """Return the configured format names in declaration order."""
        return tuple(fmt.name for fmt in self.formats)

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            max_iterations=self.max_iterations,
            encoding=self.encoding,
            jobs=self.jobs,
            formats={fmt.name: fmt for fmt in self.formats},
            config_files=list(self.config_files),
            root=self.root,
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    ``None`` scalars mean "inherit": they do not override lower layers when
    merging and fall back to built-in defaults when freezing.

    Attributes:
        max_iterations (int | None): Iteration bound override.
        encoding (str | None): Encoding override.
        jobs (int | None): Worker count override.
        formats (dict[str, FormatConfig]): Formats by name; a later layer replaces
            a format with the same name as a whole.
        config_files (list[Path | str]): Config sources merged so far.
        root (Path | None): Project root.
    """

    max_iterations: int | None = None
    encoding: str | None = None
    jobs: int | None = None
    formats: dict[str, FormatConfig] = field(default_factory=lambda: {})
    config_files: list[Path | str] = field(default_factory=lambda: [])
    root: Path | None = None

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`.

        Returns:
            Config: The runtime snapshot.

        Raises:
            ConfigError: If a numeric setting is out of range.
        """
        max_iterations: int = _expect_int(
            self.max_iterations if self.max_iterations is not None else DEFAULT_MAX_ITERATIONS,
            Toml.KEY_MAX_ITERATIONS,
            source=None,
        )
        jobs: int = _expect_int(
            self.jobs if self.jobs is not None else DEFAULT_JOBS, Toml.KEY_JOBS, source=None
        )
        return Config(
            max_iterations=max_iterations,
            encoding=self.encoding or DEFAULT_ENCODING,
            jobs=jobs,
            formats=tuple(self.formats.values()),
            config_files=tuple(self.config_files),
            root=self.root,
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return the built-in defaults (no formats configured).

        Returns:
            MutableConfig: Builder populated with default values.
        """
        return cls(
            max_iterations=DEFAULT_MAX_ITERATIONS,
            encoding=DEFAULT_ENCODING,
            jobs=DEFAULT_JOBS,
            config_files=["<defaults>"],
        )

    @classmethod
    def from_toml_dict(
        cls,
        data: Mapping[str, Any],
        *,
        source: Path | str | None = None,
    ) -> MutableConfig:
        """Parse a plain TOML table (already unwrapped from tomlkit).

        Args:
            data (Mapping[str, Any]): The PaddedCell table (top level of
                ``paddedcell.toml`` or ``[tool.paddedcell]``).
            source (Path | str | None): Where the table came from; the parent of a
                file path becomes the project root.

        Returns:
            MutableConfig: The parsed layer.

        Raises:
            ConfigError: On invalid values.
        """
        src: str | None = str(source) if source is not None else None
        for key in data:
            if key not in Toml.TOP_LEVEL_KEYS:
                logger.warning("%s: ignoring unknown key '%s'", src, key)

        layer = cls()
        if Toml.KEY_MAX_ITERATIONS in data:
            layer.max_iterations = _expect_int(
                data[Toml.KEY_MAX_ITERATIONS], Toml.KEY_MAX_ITERATIONS, source=src
            )
        if Toml.KEY_ENCODING in data:
            layer.encoding = _expect_str(data[Toml.KEY_ENCODING], Toml.KEY_ENCODING, source=src)
        if Toml.KEY_JOBS in data:
            layer.jobs = _expect_int(data[Toml.KEY_JOBS], Toml.KEY_JOBS, source=src)

        formats: Mapping[str, Any] = _expect_table(
            data.get(Toml.SECTION_FORMAT, {}), Toml.SECTION_FORMAT, source=src
        )
        for name, table in formats.items():
            layer.formats[name] = FormatConfig.from_table(
                name, _expect_table(table, f"format.{name}", source=src), source=src
            )

        if source is not None:
            layer.config_files.append(source)
            if isinstance(source, Path):
                layer.root = source.resolve().parent
        logger.debug(
            "Parsed config layer from %s: formats=%s", src, ", ".join(layer.formats) or "-"
        )
        return layer

    # ------------------------------ Merging ------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Merge ``other`` on top of this builder (in place) and return self.

        Args:
            other (MutableConfig): The higher-precedence layer.

        Returns:
            MutableConfig: This builder, for chaining.
        """
        if other.max_iterations is not None:
            self.max_iterations = other.max_iterations
        if other.encoding is not None:
            self.encoding = other.encoding
        if other.jobs is not None:
            self.jobs = other.jobs
        self.formats.update(other.formats)
        self.config_files.extend(other.config_files)
        if other.root is not None:
            self.root = other.root
        return self

    def apply_overrides(
        self,
        *,
        max_iterations: int | None = None,
        encoding: str | None = None,
        jobs: int | None = None,
    ) -> MutableConfig:
        """Apply CLI/API overrides; ``None`` leaves a value untouched.

        Returns:
            MutableConfig: This builder, for chaining.
        """
        return self.merge_with(
            MutableConfig(max_iterations=max_iterations, encoding=encoding, jobs=jobs)
        )
