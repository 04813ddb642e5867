# topmark:header:start
#
#   project      : PoshKit
#   file         : context.py
#   file_relpath : src/poshkit/session/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-invocation prompt session.

A `PromptSession` bundles the runtime settings, the platform capability
provider and the session's `ErrorBuffer`. Components that render prompt
fragments receive the session and report recoverable failures through
`PromptSession.capture` instead of writing to shared state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from poshkit.config.logging import get_logger
from poshkit.session.error_buffer import ErrorBuffer, ErrorRecord

if TYPE_CHECKING:
    from pathlib import Path

    from poshkit.config.logging import PoshkitLogger
    from poshkit.config.model import Settings
    from poshkit.platform.base import PlatformCapabilities
    from poshkit.prompt.path import RepoRootFinder

logger: PoshkitLogger = get_logger(__name__)


class PromptSession:
    """Settings, capabilities and error buffer for one prompt session.

    Args:
        settings (Settings): Runtime settings; ``error_buffer_capacity`` sizes
            the buffer.
        caps (PlatformCapabilities): Capability provider for the host OS.

    Attributes:
        settings (Settings): Runtime settings.
        caps (PlatformCapabilities): Capability provider.
        errors (ErrorBuffer): Errors captured during this session.
    """

    def __init__(self, settings: Settings, caps: PlatformCapabilities) -> None:
        self.settings = settings
        self.caps = caps
        self.errors = ErrorBuffer(settings.error_buffer_capacity)

    def capture(self, exc: BaseException, context: str = "") -> ErrorRecord:
        """Record ``exc`` in the session's error buffer.

        Args:
            exc (BaseException): The exception to record.
            context (str): Short description of what was being done.

        Returns:
            ErrorRecord: The stored record.
        """
        record: ErrorRecord = ErrorRecord.from_exception(exc, context)
        self.errors.add(record)
        logger.debug("Captured %s: %s", record.exception_type, record.message)
        return record

    def prompt_path(
        self,
        cwd: Path,
        *,
        home: Path,
        repo_root_finder: RepoRootFinder | None = None,
    ) -> str:
        """Render ``cwd`` for the prompt using this session's settings.

        See `poshkit.prompt.path.prompt_path`.
        """
        from poshkit.prompt.path import find_repo_root, prompt_path

        return prompt_path(
            cwd,
            home=home,
            caps=self.caps,
            settings=self.settings,
            repo_root_finder=repo_root_finder or find_repo_root,
            session=self,
        )
