# topmark:header:start
#
#   project      : PaddedCell
#   file         : file.py
#   file_relpath : src/paddedcell/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File helpers for PaddedCell.

Reads and writes never translate line endings: the chain's line-ending policy
is the only thing allowed to change them.
"""

from __future__ import annotations

import os
from pathlib import Path

from paddedcell.config.logging import get_logger

logger = get_logger(__name__)


def read_text_exact(path: Path, encoding: str) -> str:
    """Read a text file without newline translation.

    Args:
        path (Path): File to read.
        encoding (str): Text encoding.

    Returns:
        str: The file content, line endings untouched.
    """
    with open(path, encoding=encoding, newline="") as fh:
        return fh.read()


def write_text_in_place(path: Path, content: str, encoding: str) -> None:
    """Overwrite an existing file's content without newline translation.

    The file is truncated and rewritten through the same directory entry, so
    its mode, ownership and other attributes are preserved.

    Args:
        path (Path): File to overwrite.
        content (str): New content.
        encoding (str): Text encoding.
    """
    with open(path, "w", encoding=encoding, newline="") as fh:
        fh.write(content)
    logger.debug("Wrote %d chars to %s", len(content), path)


def compute_relpath(file_path: Path, root_path: Path | None) -> Path:
    """Compute the relative path from root_path to file_path.

    Args:
        file_path (Path): The file path to compute the relative path for.
        root_path (Path | None): The root path to compute the relative path from
            (the current directory when None).

    Returns:
        Path: The relative path from root_path to file_path.
    """
    # Ensure the file_path is resolved to its absolute path
    resolved_path = file_path.resolve()

    # Determine root directory for relative path computation
    resolved_root = (root_path or Path.cwd()).resolve()

    try:
        # Direct subpath case
        return resolved_path.relative_to(resolved_root)
    except ValueError:
        # Not a direct subpath: fall back to os.path.relpath
        return Path(os.path.relpath(resolved_path, start=resolved_root))
