# topmark:header:start
#
#   project      : PoshKit
#   file         : __init__.py
#   file_relpath : src/poshkit/prompt/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Prompt fragments: abbreviated working directory and connection prefix."""

from __future__ import annotations

from poshkit.prompt.path import connection_info, find_repo_root, prompt_path

__all__ = [
    "connection_info",
    "find_repo_root",
    "prompt_path",
]
