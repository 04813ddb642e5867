# topmark:header:start
#
#   project      : PoshKit
#   file         : model.py
#   file_relpath : src/poshkit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Settings model: a mutable builder and its immutable runtime snapshot.

`MutableSettings` collects values from the built-in defaults, TOML sources and
CLI overrides (later layers win), then `MutableSettings.freeze` produces the
immutable `Settings` used at runtime. Use `Settings.thaw` to derive an
edited copy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final

from poshkit.config.logging import get_logger
from poshkit.constants import (
    DEFAULT_ERROR_BUFFER_CAPACITY,
    DEFAULT_IMPORT_MARKER,
    DEFAULT_MODULE_NAME,
)
from poshkit.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from poshkit.config.logging import PoshkitLogger

logger: PoshkitLogger = get_logger(__name__)

# TOML key -> expected Python type
SETTING_TYPES: Final[dict[str, type]] = {
    "module_name": str,
    "import_marker": str,
    "abbreviate_home_directory": bool,
    "abbreviate_git_directory": bool,
    "error_buffer_capacity": int,
}


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable runtime settings.

    Attributes:
        module_name (str): Module name used for the bare ``Import-Module`` form.
        import_marker (str): Literal substring that identifies an existing import.
        abbreviate_home_directory (bool): Replace the home directory with ``~`` in
            the prompt path.
        abbreviate_git_directory (bool): Render the prompt path relative to the
            repository root (``<repo>:<rest>``).
        error_buffer_capacity (int): Capacity of the session error buffer.
        config_files (tuple[Path, ...]): Sources that contributed to these settings.
    """

    module_name: str = DEFAULT_MODULE_NAME
    import_marker: str = DEFAULT_IMPORT_MARKER
    abbreviate_home_directory: bool = True
    abbreviate_git_directory: bool = False
    error_buffer_capacity: int = DEFAULT_ERROR_BUFFER_CAPACITY
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableSettings:
        """Return a mutable copy of these settings."""
        return MutableSettings(
            module_name=self.module_name,
            import_marker=self.import_marker,
            abbreviate_home_directory=self.abbreviate_home_directory,
            abbreviate_git_directory=self.abbreviate_git_directory,
            error_buffer_capacity=self.error_buffer_capacity,
            config_files=list(self.config_files),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the settings as a TOML-compatible mapping (without provenance)."""
        return {key: getattr(self, key) for key in SETTING_TYPES}


@dataclass
class MutableSettings:
    """Mutable settings builder used while layering configuration sources.

    Attributes mirror `Settings`; ``config_files`` records provenance.
    """

    module_name: str = DEFAULT_MODULE_NAME
    import_marker: str = DEFAULT_IMPORT_MARKER
    abbreviate_home_directory: bool = True
    abbreviate_git_directory: bool = False
    error_buffer_capacity: int = DEFAULT_ERROR_BUFFER_CAPACITY
    config_files: list[Path] = field(default_factory=lambda: [])

    def merge_mapping(self, data: Mapping[str, Any], *, source: Path | str) -> None:
        """Overlay the recognized keys of ``data`` onto this builder.

        Args:
            data (Mapping[str, Any]): A parsed TOML table.
            source (Path | str): Where ``data`` came from (used in messages).

        Raises:
            ConfigError: If a recognized key holds a value of the wrong type.
        """
        for key, value in data.items():
            expected: type | None = SETTING_TYPES.get(key)
            if expected is None:
                logger.warning("%s: ignoring unknown setting %r", source, key)
                continue
            # bool is a subclass of int; reject it where an int is expected.
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise ConfigError(
                    f"{source}: setting '{key}' must be of type {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
            setattr(self, key, value)
            logger.debug("%s: %s = %r", source, key, value)

    def freeze(self) -> Settings:
        """Validate and freeze this builder into an immutable `Settings`.

        Raises:
            ConfigError: If a value is out of range.
        """
        if self.error_buffer_capacity < 1:
            raise ConfigError(
                f"error_buffer_capacity must be at least 1, got {self.error_buffer_capacity}"
            )
        if not self.module_name.strip():
            raise ConfigError("module_name must not be empty")
        if not self.import_marker:
            raise ConfigError("import_marker must not be empty")
        return Settings(
            module_name=self.module_name.strip(),
            import_marker=self.import_marker,
            abbreviate_home_directory=self.abbreviate_home_directory,
            abbreviate_git_directory=self.abbreviate_git_directory,
            error_buffer_capacity=self.error_buffer_capacity,
            config_files=tuple(self.config_files),
        )
