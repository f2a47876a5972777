# topmark:header:start
#
#   project      : PaddedCell
#   file         : command.py
#   file_relpath : src/paddedcell/steps/command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subprocess-backed formatter step.

Pipes the text through an external program on stdin and reads the formatted
text back from stdout. This is how script formatters and tools without a
Python API are wired into a chain. Provisioning the tool itself (installing
it, pinning its version) is the user's responsibility.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING

from paddedcell.config.logging import get_logger
from paddedcell.steps.base import BaseStep

if TYPE_CHECKING:
    from paddedcell.config.logging import PaddedCellLogger

logger: PaddedCellLogger = get_logger(__name__)


class CommandError(RuntimeError):
    """The external formatter exited with a non-zero status.

    Attributes:
        returncode (int): Process exit status.
        stderr (str): Captured standard error output.
    """

    def __init__(self, args: tuple[str, ...], returncode: int, stderr: str) -> None:
        self.returncode: int = returncode
        self.stderr: str = stderr
        detail: str = stderr.strip().splitlines()[-1] if stderr.strip() else "no output"
        super().__init__(f"'{' '.join(args)}' exited with status {returncode}: {detail}")


@dataclass(frozen=True)
class CommandStep(BaseStep):
    """Run ``args`` with the text on stdin and return its stdout.

    Attributes:
        args (tuple[str, ...]): Program and arguments (no shell involved).
        timeout (float | None): Seconds before the process is killed; a timeout
            is reported as a step failure.
        encoding (str): Encoding used for the process pipes.
    """

    name: str = "command"
    args: tuple[str, ...] = ()
    timeout: float | None = 60.0
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if not self.args:
            raise ValueError("command step requires a non-empty 'args' list")

    def apply(self, text: str) -> str:
        logger.debug("CommandStep %s: running %s", self.name, self.args)
        proc: subprocess.CompletedProcess[str] = subprocess.run(
            list(self.args),
            input=text,
            capture_output=True,
            text=True,
            encoding=self.encoding,
            timeout=self.timeout,
            check=False,
        )
        if proc.returncode != 0:
            raise CommandError(self.args, proc.returncode, proc.stderr)
        return proc.stdout
