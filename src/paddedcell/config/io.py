# topmark:header:start
#
#   project      : PaddedCell
#   file         : io.py
#   file_relpath : src/paddedcell/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading PaddedCell configuration from
on-disk TOML files (``paddedcell.toml`` / ``[tool.paddedcell]`` in
``pyproject.toml``), discovering the project config, and layering everything
into a single `Config`.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from paddedcell.config.keys import Toml
from paddedcell.config.logging import get_logger
from paddedcell.config.model import MutableConfig
from paddedcell.constants import (
    PADDEDCELL_TOML_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)
from paddedcell.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from paddedcell.config.logging import PaddedCellLogger
    from paddedcell.config.model import Config

logger: PaddedCellLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"cannot read config: {e}", source=str(path)) from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"invalid TOML: {e}", source=str(path)) from e

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_paddedcell_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the PaddedCell table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.paddedcell]`` (None when absent);
    for any other file it is the whole document.

    Args:
        path (Path): The file the data came from.
        data (TomlTable): Parsed document.

    Returns:
        TomlTable | None: The PaddedCell table, or None.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    if not isinstance(tool, dict):
        return None
    section: Any = cast("dict[str, Any]", tool).get(PYPROJECT_TOOL_SECTION)
    return cast("TomlTable", section) if isinstance(section, dict) else None


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest project config, walking up from ``start``.

    In each directory ``paddedcell.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.paddedcell]`` table.

    Args:
        start (Path): Directory to start from.

    Returns:
        Path | None: The config file, or None when nothing was found.
    """
    current: Path = start.resolve()
    for directory in (current, *current.parents):
        candidate: Path = directory / PADDEDCELL_TOML_NAME
        if candidate.is_file():
            logger.debug("Discovered config %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_TOML_NAME
        if pyproject.is_file():
            try:
                table: TomlTable | None = extract_paddedcell_table(
                    pyproject, load_toml_dict(pyproject)
                )
            except ConfigError as exc:
                logger.warning("Skipping unreadable %s: %s", pyproject, exc)
                continue
            if table is not None:
                logger.debug("Discovered config %s", pyproject)
                return pyproject
    return None


def load_config_layer(path: Path) -> MutableConfig:
    """Load one config file as a `MutableConfig` layer.

    Args:
        path (Path): ``paddedcell.toml``, ``pyproject.toml`` or any TOML file
            using the ``paddedcell.toml`` schema.

    Returns:
        MutableConfig: The parsed layer (empty when a pyproject has no table).
    """
    table: TomlTable | None = extract_paddedcell_table(path, load_toml_dict(path))
    if table is None:
        logger.info("No [tool.%s] table in %s", PYPROJECT_TOOL_SECTION, path)
        return MutableConfig(config_files=[path], root=path.resolve().parent)
    return MutableConfig.from_toml_dict(table, source=path)


def load_merged_config(
    *,
    cwd: Path | None = None,
    no_config: bool = False,
    extra_files: Iterable[Path] = (),
    max_iterations: int | None = None,
    encoding: str | None = None,
    jobs: int | None = None,
) -> Config:
    """Build the runtime `Config` from all layers.

    Precedence (low → high): defaults, discovered project config (unless
    ``no_config``), ``extra_files`` in order, explicit overrides.

    Args:
        cwd (Path | None): Directory to discover from (defaults to the current directory).
        no_config (bool): Skip project config discovery.
        extra_files (Iterable[Path]): Additional config files.
        max_iterations (int | None): Override for the iteration bound.
        encoding (str | None): Override for the file encoding.
        jobs (int | None): Override for the worker count.

    Returns:
        Config: The frozen runtime configuration.

    Raises:
        ConfigError: If any layer is invalid.
    """
    base_dir: Path = (cwd or Path.cwd()).resolve()
    draft: MutableConfig = MutableConfig.from_defaults()
    draft.root = base_dir

    if not no_config:
        found: Path | None = discover_config_file(base_dir)
        if found is not None:
            draft.merge_with(load_config_layer(found))

    for extra in extra_files:
        layer: MutableConfig = load_config_layer(Path(extra))
        # Extra files add settings; the project root stays where discovery put it.
        layer.root = None
        draft.merge_with(layer)

    draft.apply_overrides(max_iterations=max_iterations, encoding=encoding, jobs=jobs)
    config: Config = draft.freeze()
    logger.info(
        "Config: sources=%s max_iterations=%d jobs=%d formats=%s",
        [str(s) for s in config.config_files],
        config.max_iterations,
        config.jobs,
        ", ".join(config.format_names()) or "-",
    )
    return config
