# topmark:header:start
#
#   project      : PaddedCell
#   file         : __main__.py
#   file_relpath : src/paddedcell/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running PaddedCell via ``python -m paddedcell``.

It delegates directly to :func:`paddedcell.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how PaddedCell is launched.

Examples:
    Run PaddedCell using the module interface::

        python -m paddedcell check .
"""

from __future__ import annotations

from paddedcell.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
