# topmark:header:start
#
#   project      : PaddedCell
#   file         : exit_codes.py
#   file_relpath : src/paddedcell/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for PaddedCell.

PaddedCell aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. The one exception is `WOULD_CHANGE=2`,
which signals that `check` found files that `apply` would rewrite; tests must assert
`result.exception is None` to disambiguate from Click's own usage errors (also 2).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for PaddedCell.

    Attributes:
        SUCCESS: Successful execution; every file is clean (or was fixed).
        FAILURE: Generic failure (non-specific error).
        WOULD_CHANGE: `check` found files that converge to a different content.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Text decoding/encoding error. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        PIPELINE_ERROR: The formatter chain misbehaved (cycle, divergence, step
            failure). Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Missing/invalid/malformed config. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # not a sysexits code

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PIPELINE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG
