# topmark:header:start
#
#   project      : PaddedCell
#   file         : dump.py
#   file_relpath : src/paddedcell/operations/dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Debug dump: write the states of misbehaving files to an output directory.

For a file at ``<root>/<relpath>`` whose chain misbehaves, every recorded state
``trace[i]`` is written to ``<outdir>/<relpath-dir>/<filename>.<kind><i>``,
where ``kind`` is the result discriminator (``converge``, ``cycle`` or
``diverge``). For example, a file ``test.cycle`` on which the chain cycles
between two states yields ``test.cycle.cycle0`` and ``test.cycle.cycle1``.

Only misbehaving files are dumped (see
[`is_misbehaved`][paddedcell.diagnosis.result.is_misbehaved]): clean files and
files that converge in a single pass produce no artifacts.

A dump directory is marked with a ``.paddedcell-diagnose`` file. Only marked
directories, or directories named ``paddedcell-diagnose-*``, are cleaned before
a new dump; any other non-empty directory is refused with `DumpDirError`.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import TYPE_CHECKING

from paddedcell.config.logging import get_logger
from paddedcell.constants import DEFAULT_ENCODING, DIAGNOSE_DIR_PREFIX, DIAGNOSE_MARKER_NAME
from paddedcell.core.errors import PaddedCellError
from paddedcell.diagnosis.result import is_misbehaved
from paddedcell.utils.file import compute_relpath

if TYPE_CHECKING:
    from collections.abc import Iterable

    from paddedcell.config.logging import PaddedCellLogger
    from paddedcell.diagnosis.result import DiagnosisResult, ResultKind
    from paddedcell.operations.runner import FileDiagnosis

logger: PaddedCellLogger = get_logger(__name__)


class DumpDirError(PaddedCellError):
    """The output directory holds files that were not written by a dump."""


def is_dump_dir(directory: Path) -> bool:
    """Return True if ``directory`` is a dump directory PaddedCell owns."""
    return (
        directory.name.startswith(DIAGNOSE_DIR_PREFIX)
        or (directory / DIAGNOSE_MARKER_NAME).is_file()
    )


def prepare_output_dir(output_dir: Path, *, clean: bool = True) -> None:
    """Create ``output_dir`` and mark it as a dump directory.

    Args:
        output_dir (Path): Directory receiving the artifacts.
        clean (bool): Remove the artifacts of a previous dump first.

    Raises:
        DumpDirError: If ``output_dir`` is not empty and was not created by a
            previous dump. Nothing is removed in that case.
    """
    if output_dir.exists():
        if not output_dir.is_dir():
            raise DumpDirError(f"{output_dir} exists and is not a directory")
        if is_dump_dir(output_dir):
            if clean:
                logger.debug("Removing previous dump directory %s", output_dir)
                shutil.rmtree(output_dir)
        elif any(output_dir.iterdir()):
            raise DumpDirError(
                f"{output_dir} is not empty and was not created by paddedcell diagnose; "
                "choose an empty or new directory"
            )
    output_dir.mkdir(parents=True, exist_ok=True)
    (output_dir / DIAGNOSE_MARKER_NAME).touch()


def artifact_name(filename: str, kind: ResultKind, index: int) -> str:
    """Return the artifact file name for state ``index`` of a result of ``kind``.

    Args:
        filename (str): Base name of the diagnosed file.
        kind (ResultKind): The result discriminator.
        index (int): Zero-based trace index.

    Returns:
        str: ``<filename>.<kind><index>``.
    """
    return f"{filename}.{kind.value}{index}"


def dump_trace(
    diag: FileDiagnosis,
    output_dir: Path,
    *,
    root: Path | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> list[Path]:
    """Write the trace of one misbehaving file under ``output_dir``.

    Args:
        diag (FileDiagnosis): The per-file diagnosis.
        output_dir (Path): Directory receiving the artifacts.
        root (Path | None): Root used to mirror the file's relative location
            (the current directory when None).
        encoding (str): Encoding used for writing artifacts.

    Returns:
        list[Path]: The written artifacts, in trace order (empty when nothing
            was dumped).
    """
    result: DiagnosisResult | None = diag.result
    if result is None or not is_misbehaved(result):
        return []

    relpath: Path = compute_relpath(diag.path, root)
    if relpath.is_absolute() or ".." in relpath.parts:
        # Outside the root: keep only the file name
        relpath = Path(relpath.name)
    target_dir: Path = output_dir / relpath.parent
    target_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for index, state in enumerate(result.trace):
        artifact: Path = target_dir / artifact_name(relpath.name, result.kind, index)
        with open(artifact, "w", encoding=encoding, newline="") as fh:
            fh.write(state)
        written.append(artifact)
    logger.debug("Dumped %d state(s) of %s to %s", len(written), diag.path, target_dir)
    return written


def dump_all(
    diagnoses: Iterable[FileDiagnosis],
    output_dir: Path,
    *,
    root: Path | None = None,
    encoding: str = DEFAULT_ENCODING,
    clean: bool = True,
) -> dict[Path, list[Path]]:
    """Dump every misbehaving file in ``diagnoses``.

    Args:
        diagnoses (Iterable[FileDiagnosis]): Per-file diagnoses.
        output_dir (Path): Directory receiving the artifacts.
        root (Path | None): Root used to mirror relative locations.
        encoding (str): Encoding used for writing artifacts.
        clean (bool): Remove the artifacts of a previous dump first.

    Returns:
        dict[Path, list[Path]]: Written artifacts per dumped file.

    Raises:
        DumpDirError: If ``output_dir`` holds files that are not from a previous dump.
    """
    prepare_output_dir(output_dir, clean=clean)

    dumped: dict[Path, list[Path]] = {}
    for diag in diagnoses:
        artifacts: list[Path] = dump_trace(diag, output_dir, root=root, encoding=encoding)
        if artifacts:
            dumped[diag.path] = artifacts
    logger.info("Dumped %d misbehaving file(s) to %s", len(dumped), output_dir)
    return dumped
