# topmark:header:start
#
#   project      : PoshKit
#   file         : __init__.py
#   file_relpath : src/poshkit/session/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Prompt session state: the session context and its error buffer."""

from __future__ import annotations

from poshkit.session.context import PromptSession
from poshkit.session.error_buffer import ErrorBuffer, ErrorRecord

__all__ = [
    "ErrorBuffer",
    "ErrorRecord",
    "PromptSession",
]
