# topmark:header:start
#
#   project      : PaddedCell
#   file         : file_resolver.py
#   file_relpath : src/paddedcell/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve input files for a format based on paths and include/exclude patterns.

Positional paths are expanded (directories recursively), then filtered with
the format's ``include`` and ``exclude`` patterns. Patterns follow
``.gitignore`` semantics (via ``pathspec``) and are evaluated relative to the
project root. The result is a deterministic, sorted list of files.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from paddedcell.config.logging import get_logger
from paddedcell.operations.dump import is_dump_dir

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from paddedcell.config.logging import PaddedCellLogger
    from paddedcell.config.model import FormatConfig


logger: PaddedCellLogger = get_logger(__name__)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        rel: Path = path.resolve().relative_to(base.resolve())
        return rel.as_posix()
    except ValueError:
        return path.as_posix()


def _in_dump_dir(path: Path, top: Path, seen: dict[Path, bool]) -> bool:
    """Return True for artifacts written by a previous `diagnose` run.

    Every directory from ``top`` down to the file's parent is checked with
    `is_dump_dir`, so custom ``--output-dir`` targets are skipped as well as
    the default ones. ``seen`` caches the answer per directory.
    """
    for rel in path.relative_to(top).parents:
        directory: Path = top / rel
        if directory not in seen:
            seen[directory] = is_dump_dir(directory)
        if seen[directory]:
            return True
    return False


def expand_paths(paths: Iterable[Path | str]) -> set[Path]:
    """Expand files and directories (recursively) into a set of files.

    Args:
        paths (Iterable[Path | str]): Files and directories to expand.

    Returns:
        set[Path]: The files found. Missing paths are reported and skipped.
    """
    found: set[Path] = set()
    for raw in paths:
        p = Path(raw)
        if p.is_dir():
            seen: dict[Path, bool] = {}
            found.update(
                c for c in p.rglob("*") if c.is_file() and not _in_dump_dir(c, p, seen)
            )
        elif p.is_file():
            found.add(p)
        else:
            logger.warning("No such file or directory: %s", p)
    return found


def resolve_file_list(
    paths: Sequence[Path | str],
    fmt: FormatConfig,
    *,
    root: Path | None = None,
) -> list[Path]:
    """Return the files ``fmt`` applies to among ``paths``.

    Semantics:
      1. **Candidate set**: expand ``paths`` (files, and directories
         recursively); without paths, the project root is used.
      2. **Include intersection**: with include patterns, keep only files
         matching *any* of them.
      3. **Exclude subtraction**: remove files matching any exclude pattern.
      4. Return a **sorted** list for deterministic output.

    Args:
        paths (Sequence[Path | str]): Positional paths.
        fmt (FormatConfig): The format whose patterns filter the candidates.
        root (Path | None): Base for pattern matching (the current directory
            when None).

    Returns:
        list[Path]: Sorted list of files selected for ``fmt``.
    """
    base: Path = root if root is not None else Path.cwd()
    input_paths: Sequence[Path | str] = paths or [base]
    candidates: set[Path] = expand_paths(input_paths)
    logger.trace("format '%s': %d candidate file(s) under %s", fmt.name, len(candidates), base)

    if fmt.include:
        spec_inc: PathSpec = PathSpec.from_lines(GitWildMatchPattern, list(fmt.include))
        candidates = {p for p in candidates if spec_inc.match_file(_rel_for_match(p, base))}

    if fmt.exclude:
        spec_exc: PathSpec = PathSpec.from_lines(GitWildMatchPattern, list(fmt.exclude))
        candidates = {p for p in candidates if not spec_exc.match_file(_rel_for_match(p, base))}

    logger.debug("format '%s': %d file(s) to process", fmt.name, len(candidates))
    return sorted(candidates)
