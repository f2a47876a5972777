# topmark:header:start
#
#   project      : PaddedCell
#   file         : __init__.py
#   file_relpath : src/paddedcell/operations/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File-level operations built on the padded-cell engine: run, verify, fix and dump."""

from __future__ import annotations

from paddedcell.operations.dump import (
    DumpDirError,
    artifact_name,
    dump_all,
    dump_trace,
    is_dump_dir,
    prepare_output_dir,
)
from paddedcell.operations.fix import FixAction, FixReport, auto_fix, fix_file, resolve_content
from paddedcell.operations.runner import FileDiagnosis, diagnose_file, diagnose_files
from paddedcell.operations.verify import Verdict, VerifyReport, classify, verify

__all__ = [
    "DumpDirError",
    "FileDiagnosis",
    "FixAction",
    "FixReport",
    "Verdict",
    "VerifyReport",
    "artifact_name",
    "auto_fix",
    "classify",
    "diagnose_file",
    "diagnose_files",
    "dump_all",
    "dump_trace",
    "fix_file",
    "is_dump_dir",
    "prepare_output_dir",
    "resolve_content",
    "verify",
]
