# topmark:header:start
#
#   project      : PoshKit
#   file         : __init__.py
#   file_relpath : src/poshkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PoshKit package.

PoshKit manages the shell-side glue of a PowerShell prompt module: it installs
and removes the module's import statement in PowerShell profile scripts, reports
which profile scripts already load it, and renders the abbreviated prompt path.
"""

from __future__ import annotations
