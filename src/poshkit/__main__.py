# topmark:header:start
#
#   project      : PoshKit
#   file         : __main__.py
#   file_relpath : src/poshkit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running PoshKit via ``python -m poshkit``.

Delegates directly to :func:`poshkit.cli.main.cli`, so the module interface and
the ``poshkit`` console script share a single entry point.

Examples:
    Preview an installation into the current user's profile::

        python -m poshkit install
"""

from __future__ import annotations

from poshkit.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
