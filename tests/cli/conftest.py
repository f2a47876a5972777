# topmark:header:start
#
#   project      : PaddedCell
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers: a throw-away project with a few formats, and a CLI runner.

Commands are invoked with the project directory as the working directory, so
config discovery, relative paths and the default dump location resolve
against ``tmp_path`` exactly as they would from a real project root.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterator, Sequence

import pytest
from click.testing import CliRunner, Result

from paddedcell.cli.main import cli
from paddedcell.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from pathlib import Path

PROJECT_TOML: str = """\
max_iterations = 10

[format.trim]
include = ["*.txt"]
steps = [{ type = "trim_trailing_whitespace" }]

[format.cycle]
include = ["*.cycle"]
steps = [
    { type = "replace", search = "A", replacement = "C" },
    { type = "replace", search = "B", replacement = "A" },
    { type = "replace", search = "C", replacement = "B" },
]

[format.diverge]
include = ["*.diverge"]
steps = [{ type = "replace", search = "x", replacement = "xx" }]

[format.json]
include = ["*.json"]
steps = [{ type = "json" }]
"""


@pytest.fixture
def project(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    write_text: Callable[[Path, str], Path],
) -> Path:
    """Create ``paddedcell.toml`` in ``tmp_path`` and make it the working directory."""
    write_text(tmp_path / "paddedcell.toml", PROJECT_TOML)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Point logging back at the real stderr after each invocation."""
    yield
    setup_logging(TRACE_LEVEL)


@pytest.fixture
def run_cli() -> Callable[[Sequence[str]], Result]:
    """Return a helper invoking the CLI with colors disabled."""

    def _run(argv: Sequence[str]) -> Result:
        runner = CliRunner()
        return runner.invoke(cli, ["--no-color", *argv])

    return _run
