# topmark:header:start
#
#   project      : PaddedCell
#   file         : line_endings.py
#   file_relpath : src/paddedcell/formatter/line_endings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-ending policies for the terminal normalization pass of a chain.

Steps always see text with ``\\n`` line endings. After the last step, the chain
converts the text to the line ending selected by its `LineEnding` policy.
"""

from __future__ import annotations

import os
import re
from enum import Enum

UNIX: str = "\n"
WINDOWS: str = "\r\n"

_LINE_ENDING_RE: re.Pattern[str] = re.compile(r"\r\n|\r|\n")


class LineEnding(str, Enum):
    """Line-ending policy of a chain.

    Attributes:
        PLATFORM: The host's native line ending (``os.linesep``).
        UNIX: Always ``\\n``.
        WINDOWS: Always ``\\r\\n``.
        PRESERVE: The first line ending found in the input text; ``\\n`` when the
            input contains none, so the result never depends on the host.
    """

    PLATFORM = "platform"
    UNIX = "unix"
    WINDOWS = "windows"
    PRESERVE = "preserve"

    def ending_for(self, text: str) -> str:
        """Return the concrete line ending this policy selects for ``text``.

        Args:
            text (str): The chain's input text (before normalization to ``\\n``).

        Returns:
            str: ``"\\n"`` or ``"\\r\\n"`` (or ``os.linesep`` for `PLATFORM`).
        """
        if self is LineEnding.UNIX:
            return UNIX
        if self is LineEnding.WINDOWS:
            return WINDOWS
        if self is LineEnding.PLATFORM:
            return os.linesep
        return detect_line_ending(text) or UNIX


def detect_line_ending(text: str) -> str | None:
    """Return the first line ending found in ``text``, or None.

    A lone ``\\r`` (classic Mac) is reported as ``\\n``: it is normalized on input
    and never written back.
    """
    match: re.Match[str] | None = _LINE_ENDING_RE.search(text)
    if match is None:
        return None
    return WINDOWS if match.group(0) == WINDOWS else UNIX


def to_unix(text: str) -> str:
    """Convert ``\\r\\n`` and lone ``\\r`` line endings to ``\\n``."""
    return _LINE_ENDING_RE.sub(UNIX, text)


def from_unix(text: str, ending: str) -> str:
    """Convert ``\\n`` line endings to ``ending``."""
    if ending == UNIX:
        return text
    return text.replace(UNIX, ending)
