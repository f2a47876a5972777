# topmark:header:start
#
#   project      : PaddedCell
#   file         : utils.py
#   file_relpath : src/paddedcell/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable rendering of operation reports for the CLI.

These helpers only print; computing outcomes and exit codes is done by
[`paddedcell.operations`][].
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from paddedcell.diagnosis.result import describe
from paddedcell.operations.fix import resolve_content
from paddedcell.utils.diff import render_patch, unified_diff
from paddedcell.utils.file import compute_relpath

if TYPE_CHECKING:
    from pathlib import Path

    from paddedcell.cli.console import ConsoleLike
    from paddedcell.operations.fix import FixReport
    from paddedcell.operations.runner import FileDiagnosis
    from paddedcell.operations.verify import VerifyReport


def display_path(path: Path) -> str:
    """Return ``path`` relative to the current directory, POSIX style."""
    return compute_relpath(path, None).as_posix()


def emit_errors(console: ConsoleLike, diagnoses: list[FileDiagnosis]) -> None:
    """Print one error line per file that could not be diagnosed."""
    for d in diagnoses:
        console.error(f"  error: {display_path(d.path)}: {d.error}")


def emit_unresolved(console: ConsoleLike, diagnoses: list[FileDiagnosis], chain_name: str) -> None:
    """Print files on which the chain cycles or diverges, with a diagnose hint."""
    for d in diagnoses:
        if d.result is None:
            continue
        console.warn(f"  unresolved: {display_path(d.path)} ({describe(d.result)})")
    if diagnoses:
        console.warn(
            f"  Run 'paddedcell diagnose --format {chain_name}' to dump the states "
            "of misbehaving files."
        )


def emit_diff(console: ConsoleLike, diag: FileDiagnosis) -> None:
    """Print the colorized diff between a file and the content `apply` would write."""
    if diag.result is None or diag.original is None:
        return
    updated: str | None = resolve_content(diag.result)
    if updated is None:
        return
    diff_text: str | None = unified_diff(diag.original, updated, display_path(diag.path))
    if diff_text:
        console.print(render_patch(diff_text))


def emit_verify_report(
    console: ConsoleLike,
    chain_name: str,
    report: VerifyReport,
    *,
    diff: bool = False,
) -> None:
    """Print the outcome of ``check`` for one format.

    Unformatted files, unresolved files and errors are printed in separate
    sections.

    Args:
        console (ConsoleLike): Program-output console.
        chain_name (str): Name of the format.
        report (VerifyReport): The verify report.
        diff (bool): Also print a unified diff for every unformatted file.
    """
    header: str = f"[{chain_name}] {report.total} file(s) checked"
    if report.ok:
        console.print(console.styled(f"{header}: all clean", fg="green", bold=True))
        return

    console.print(console.styled(header, bold=True))
    for d in report.unformatted:
        console.print(f"  would reformat: {display_path(d.path)}")
        if diff:
            emit_diff(console, d)
    emit_unresolved(console, report.unresolved, chain_name)
    emit_errors(console, report.errors)
    console.print(
        f"  {len(report.unformatted)} would be reformatted, "
        f"{len(report.unresolved)} unresolved, {len(report.errors)} error(s)"
    )


def emit_fix_report(console: ConsoleLike, chain_name: str, report: FixReport) -> None:
    """Print the outcome of ``apply`` for one format.

    Args:
        console (ConsoleLike): Program-output console.
        chain_name (str): Name of the format.
        report (FixReport): The fix report.
    """
    for d in report.written:
        console.print(f"  reformatted: {display_path(d.path)}")
    for d in report.cycle_resolved:
        console.warn(
            f"  reformatted (cycle, wrote first state): {display_path(d.path)}"
            f" ({describe(d.result) if d.result is not None else ''})"
        )
    emit_unresolved(console, report.diverged, chain_name)
    emit_errors(console, [d for d in report.failed if d.error is not None])
    for path, err in report.write_errors.items():
        console.error(f"  error: cannot write {path}: {err}")

    changed: int = len(report.written) + len(report.cycle_resolved)
    summary: str = (
        f"[{chain_name}] {changed} file(s) reformatted, {len(report.unchanged)} unchanged"
    )
    if report.diverged or report.failed:
        summary += f", {len(report.diverged)} diverged, {len(report.failed)} failed"
    console.print(console.styled(summary, fg="green" if report.ok else None, bold=True))
