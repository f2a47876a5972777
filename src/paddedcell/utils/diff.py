# topmark:header:start
#
#   project      : PaddedCell
#   file         : diff.py
#   file_relpath : src/paddedcell/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized rendering.

Diffs compare a file's original content with the content `apply` would write.
Line endings are kept in the diffed lines, so a pure line-ending change still
shows up (rendered as visible ``\\r``/``\\n`` markers).
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from paddedcell.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

logger = get_logger(__name__)


def unified_diff(original: str, updated: str, path: Path | str) -> str | None:
    """Return a unified diff between two texts, or None when they are equal.

    Args:
        original (str): Content as read from disk.
        updated (str): Content that would be written.
        path (Path | str): File path used in the diff headers.

    Returns:
        str | None: The diff, joined exactly as produced by difflib.
    """
    patch_lines: list[str] = list(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{path} (current)",
            tofile=f"{path} (formatted)",
            n=3,
            lineterm="\n",
        )
    )
    if not patch_lines:
        return None
    logger.trace("Diff for %s: %d line(s)", path, len(patch_lines))
    return "".join(patch_lines)


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch (Sequence[str] | str): A unified diff as **either** a list/sequence
            of lines **or** a single multiline string.
        show_line_numbers (bool): Whether to prefix output with line numbers.

    Returns:
        str: The formatted, colorized diff preview.
    """
    # Keep line terminators so they can be shown explicitly
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=True)
    else:
        lines = list(patch)

    def process_line(line: str) -> str:
        content: str = line.replace("\r", "\\r").replace("\n", "\\n")
        if not line:
            return content
        match line[0]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return chalk.gray(
            "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
        )
    return chalk.gray("".join(f"{process_line(line)}\n" for line in lines))
