# topmark:header:start
#
#   project      : PoshKit
#   file         : __init__.py
#   file_relpath : src/poshkit/platform/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OS capability providers.

Use `detect_capabilities` once at startup and pass the returned provider to
the code that needs privilege checks or path comparison.
"""

from __future__ import annotations

import platform

from poshkit.config.logging import get_logger
from poshkit.platform.base import BaseCapabilities, PlatformCapabilities
from poshkit.platform.posix import MacCapabilities, PosixCapabilities
from poshkit.platform.windows import WindowsCapabilities

__all__ = [
    "BaseCapabilities",
    "MacCapabilities",
    "PlatformCapabilities",
    "PosixCapabilities",
    "WindowsCapabilities",
    "detect_capabilities",
]

logger = get_logger(__name__)

_PROVIDERS: dict[str, type[BaseCapabilities]] = {
    "windows": WindowsCapabilities,
    "darwin": MacCapabilities,
    "linux": PosixCapabilities,
}


def detect_capabilities(system: str | None = None) -> BaseCapabilities:
    """Return the capability provider for ``system``.

    Args:
        system (str | None): A ``platform.system()`` value (case-insensitive);
            ``None`` detects the running platform.

    Returns:
        BaseCapabilities: The provider. Unknown systems fall back to POSIX.
    """
    name: str = (system or platform.system()).lower()
    provider_cls: type[BaseCapabilities] = _PROVIDERS.get(name, PosixCapabilities)
    logger.debug("Selected capability provider %s for system %r", provider_cls.__name__, name)
    return provider_cls()
