# topmark:header:start
#
#   project      : PaddedCell
#   file         : generic.py
#   file_relpath : src/paddedcell/steps/generic.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic, language-agnostic formatter steps.

These steps cover the common whitespace and search/replace chores that do not
need a language-specific formatter. All of them operate on text with ``\\n``
line endings; the chain takes care of converting from and to the file's line
endings.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from paddedcell.config.logging import get_logger
from paddedcell.steps.base import BaseStep

if TYPE_CHECKING:
    from paddedcell.config.logging import PaddedCellLogger

logger: PaddedCellLogger = get_logger(__name__)

_TRAILING_WS_RE: re.Pattern[str] = re.compile(r"[ \t]+$", re.MULTILINE)
_LEADING_WS_RE: re.Pattern[str] = re.compile(r"^[ \t]+", re.MULTILINE)


@dataclass(frozen=True)
class TrimTrailingWhitespaceStep(BaseStep):
    """Remove spaces and tabs at the end of every line."""

    name: str = "trim_trailing_whitespace"

    def apply(self, text: str) -> str:
        return _TRAILING_WS_RE.sub("", text)


class IndentStyle(str, Enum):
    """Whitespace used for leading indentation."""

    SPACES = "spaces"
    TABS = "tabs"


@dataclass(frozen=True)
class IndentStep(BaseStep):
    """Normalize leading indentation to spaces or tabs.

    A tab counts as ``width`` columns. When converting to tabs, columns that do
    not fill a whole tab are kept as spaces.

    Attributes:
        style (IndentStyle): Target indentation style.
        width (int): Columns per indentation level (and per tab).
    """

    name: str = "indent"
    style: IndentStyle = IndentStyle.SPACES
    width: int = 4

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError(f"indent width must be >= 1 (got {self.width})")

    def apply(self, text: str) -> str:
        return _LEADING_WS_RE.sub(self._reindent, text)

    def _reindent(self, match: re.Match[str]) -> str:
        columns: int = sum(self.width if ch == "\t" else 1 for ch in match.group(0))
        if self.style is IndentStyle.SPACES:
            return " " * columns
        tabs, spaces = divmod(columns, self.width)
        return "\t" * tabs + " " * spaces


@dataclass(frozen=True)
class ReplaceStep(BaseStep):
    """Replace every literal occurrence of ``search`` with ``replacement``."""

    name: str = "replace"
    search: str = ""
    replacement: str = ""

    def __post_init__(self) -> None:
        if not self.search:
            raise ValueError("replace step requires a non-empty 'search' string")

    def apply(self, text: str) -> str:
        return text.replace(self.search, self.replacement)


@dataclass(frozen=True)
class ReplaceRegexStep(BaseStep):
    """Replace every match of a regular expression.

    Attributes:
        pattern (str): Regular expression, compiled with ``re.MULTILINE``.
        replacement (str): Replacement template (``\\1`` style back references allowed).
    """

    name: str = "replace_regex"
    pattern: str = ""
    replacement: str = ""

    def __post_init__(self) -> None:
        if not self.pattern:
            raise ValueError("replace_regex step requires a non-empty 'pattern'")
        try:
            re.compile(self.pattern, re.MULTILINE)
        except re.error as exc:
            raise ValueError(f"invalid pattern {self.pattern!r}: {exc}") from exc

    def apply(self, text: str) -> str:
        return re.sub(self.pattern, self.replacement, text, flags=re.MULTILINE)


@dataclass(frozen=True)
class JsonStep(BaseStep):
    """Pretty-print a JSON document.

    Invalid JSON raises `json.JSONDecodeError`, which surfaces as a step failure.

    Attributes:
        indent (int): Indentation width.
        sort_keys (bool): Whether to sort object keys.
    """

    name: str = "json"
    indent: int = 2
    sort_keys: bool = False

    def apply(self, text: str) -> str:
        data: object = json.loads(text)
        return json.dumps(data, indent=self.indent, sort_keys=self.sort_keys, ensure_ascii=False)
