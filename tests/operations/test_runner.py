# topmark:header:start
#
#   project      : PaddedCell
#   file         : test_runner.py
#   file_relpath : tests/operations/test_runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-file diagnosis: reading files and containing failures."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from paddedcell.core.errors import StepFailure
from paddedcell.core.exit_codes import ExitCode
from paddedcell.diagnosis import Clean, Converged, Cycle
from paddedcell.formatter import Chain, LineEnding
from paddedcell.operations import FileDiagnosis, diagnose_file, diagnose_files
from paddedcell.steps import FunctionStep


def test_diagnose_file_reads_without_newline_translation(
    tmp_path: Path, write_text: Callable[[Path, str], Path]
) -> None:
    path: Path = write_text(tmp_path / "crlf.txt", "a\r\nb\r\n")

    diag: FileDiagnosis = diagnose_file(path, Chain(name="keep"))

    assert diag.original == "a\r\nb\r\n"
    assert diag.result == Clean()
    assert not diag.failed
    assert diag.error_code() is None


def test_diagnose_file_line_ending_change_is_a_violation(
    tmp_path: Path, write_text: Callable[[Path, str], Path]
) -> None:
    path: Path = write_text(tmp_path / "crlf.txt", "a\r\nb\r\n")

    diag: FileDiagnosis = diagnose_file(path, Chain(name="unix", line_ending=LineEnding.UNIX))

    assert diag.result == Converged(value="a\nb\n", trace=("a\nb\n",))


def test_missing_file_is_contained(tmp_path: Path, cycle_chain: Chain) -> None:
    diag: FileDiagnosis = diagnose_file(tmp_path / "missing.txt", cycle_chain)

    assert diag.failed
    assert diag.result is None
    assert isinstance(diag.error, FileNotFoundError)
    assert diag.error_code() is ExitCode.FILE_NOT_FOUND


def test_undecodable_file_is_contained(tmp_path: Path, cycle_chain: Chain) -> None:
    path: Path = tmp_path / "latin1.txt"
    path.write_bytes("café".encode("latin-1"))

    diag: FileDiagnosis = diagnose_file(path, cycle_chain, encoding="utf-8")

    assert isinstance(diag.error, UnicodeDecodeError)
    assert diag.error_code() is ExitCode.ENCODING_ERROR


def test_step_failure_on_original_is_contained(
    tmp_path: Path, write_text: Callable[[Path, str], Path]
) -> None:
    def boom(_text: str) -> str:
        raise RuntimeError("boom")

    path: Path = write_text(tmp_path / "a.txt", "x")
    diag: FileDiagnosis = diagnose_file(path, Chain(name="c", steps=(FunctionStep("boom", boom),)))

    assert isinstance(diag.error, StepFailure)
    assert diag.original == "x"
    assert diag.error_code() is ExitCode.PIPELINE_ERROR


def test_diagnose_files_preserves_order_in_parallel(
    tmp_path: Path, write_text: Callable[[Path, str], Path], cycle_chain: Chain
) -> None:
    paths: list[Path] = [write_text(tmp_path / f"f{i:02d}.txt", f"content {i}") for i in range(12)]
    paths.insert(5, tmp_path / "missing.txt")

    sequential: list[FileDiagnosis] = diagnose_files(paths, cycle_chain, jobs=1)
    parallel: list[FileDiagnosis] = diagnose_files(paths, cycle_chain, jobs=4)

    assert [d.path for d in parallel] == paths
    assert [d.result for d in parallel] == [d.result for d in sequential]
    assert parallel[5].failed
    assert isinstance(parallel[0].result, Cycle)


def test_bare_step_failure_does_not_abort_other_files(
    tmp_path: Path, write_text: Callable[[Path, str], Path]
) -> None:
    def strict(text: str) -> str:
        if text == "bad":
            raise ValueError("cannot format")
        return text.upper()

    bad: Path = write_text(tmp_path / "bad.txt", "bad")
    good: Path = write_text(tmp_path / "good.txt", "ok")

    diags: list[FileDiagnosis] = diagnose_files([bad, good], FunctionStep("strict", strict))

    assert isinstance(diags[0].error, StepFailure)
    assert diags[0].error_code() is ExitCode.PIPELINE_ERROR
    assert diags[1].result == Converged(value="OK", trace=("OK",))
