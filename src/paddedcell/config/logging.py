# topmark:header:start
#
#   project      : PaddedCell
#   file         : logging.py
#   file_relpath : src/paddedcell/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for PaddedCell: a TRACE level below DEBUG and chalk-colored records.

Every module obtains its logger through `get_logger(__name__)` and only logs;
printing program output is the CLI's job. Log records always go to stderr so
they never mix with `check`/`apply` reports on stdout.

The level is chosen by the CLI (``-v``/``-q``) unless ``PADDEDCELL_LOG_LEVEL``
is set, in which case the environment wins.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, TYPE_CHECKING, Any, Callable, Final, cast

from yachalk import chalk

from paddedcell.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

# Level names accepted in PADDEDCELL_LOG_LEVEL (besides plain numbers).
_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
}

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(module_tag)s:%(lineno)d] %(message)s"


class PaddedCellLogger(logging.Logger):
    """Logger with a `trace()` method for per-iteration engine detail."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(PaddedCellLogger)


# Highest threshold first; the first one not above the record level applies.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity.

    Records also get a ``module_tag`` attribute: the logger name without the
    leading ``paddedcell.`` package, e.g. ``diagnosis.engine``.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it by level.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colorized message.
        """
        record.module_tag = record.name.removeprefix("paddedcell.")
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim.red(message)


def parse_log_level(value: str) -> int | None:
    """Parse a level name (``"trace"``, ``"DEBUG"``...) or number; None if unknown."""
    v: str = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return the level set through ``PADDEDCELL_LOG_LEVEL``, or None if unset or invalid."""
    raw: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return None
    level: int | None = parse_log_level(raw)
    if level is None:
        logging.getLogger(__name__).warning(
            "Ignoring %s=%r: not a log level", LOG_LEVEL_ENV_VAR, raw
        )
    return level


def setup_logging(level: int | None = None, *, stream: IO[Any] | None = None) -> None:
    """Configure the root logger.

    Existing root handlers are replaced, so calling this again (once per CLI
    invocation) never duplicates records.

    Args:
        level (int | None): Log level; when None, ``PADDEDCELL_LOG_LEVEL`` is
            consulted and CRITICAL is used if it is unset.
        stream (IO[Any] | None): Destination (``sys.stderr`` by default).
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> PaddedCellLogger:
    """Return the `PaddedCellLogger` named ``name``."""
    return cast("PaddedCellLogger", logging.getLogger(name))
