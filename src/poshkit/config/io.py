# topmark:header:start
#
#   project      : PoshKit
#   file         : io.py
#   file_relpath : src/poshkit/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Discover and load PoshKit configuration sources.

Sources are layered in this order (later wins):

1. built-in defaults (`poshkit.config.model.Settings`),
2. the user config ``$XDG_CONFIG_HOME/poshkit/poshkit.toml``
   (default ``~/.config/poshkit/poshkit.toml``),
3. ``[tool.poshkit]`` in ``./pyproject.toml``,
4. ``./poshkit.toml``,
5. files passed explicitly (``--config``).

Parsing is done with `tomlkit`; documents are unwrapped to plain dicts.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from poshkit.config.logging import get_logger
from poshkit.config.model import MutableSettings
from poshkit.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_SECTION
from poshkit.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from poshkit.config.logging import PoshkitLogger
    from poshkit.config.model import Settings

logger: PoshkitLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content as plain Python containers.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def get_table(data: Mapping[str, Any], dotted: str) -> TomlTable | None:
    """Return the nested table at ``dotted`` (e.g. ``"tool.poshkit"``), or None."""
    node: Any = data
    for part in dotted.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return cast("TomlTable", node) if isinstance(node, dict) else None


def user_config_path(home: Path, env: Mapping[str, str]) -> Path:
    """Return the per-user config file path (it may not exist)."""
    xdg: str | None = env.get("XDG_CONFIG_HOME")
    base: Path = Path(xdg) if xdg else home / ".config"
    return base / "poshkit" / CONFIG_FILE_NAME


def discover_config_files(
    *,
    cwd: Path,
    home: Path,
    env: Mapping[str, str],
) -> list[Path]:
    """Return the existing implicit config sources in precedence order (lowest first).

    Args:
        cwd (Path): Directory holding project-level sources.
        home (Path): The user's home directory.
        env (Mapping[str, str]): Environment (``XDG_CONFIG_HOME``).

    Returns:
        list[Path]: Existing files among the user config, ``pyproject.toml`` and
        ``poshkit.toml``.
    """
    candidates: list[Path] = [
        user_config_path(home, env),
        cwd / PYPROJECT_FILE_NAME,
        cwd / CONFIG_FILE_NAME,
    ]
    return [p for p in candidates if p.is_file()]


def _table_for(path: Path, data: TomlTable) -> TomlTable | None:
    if path.name == PYPROJECT_FILE_NAME:
        return get_table(data, PYPROJECT_SECTION)
    return data


def load_settings(
    *,
    cwd: Path | None = None,
    home: Path | None = None,
    env: Mapping[str, str] | None = None,
    extra_files: Iterable[Path] = (),
    no_config: bool = False,
) -> Settings:
    """Build the runtime settings from all configuration layers.

    Args:
        cwd (Path | None): Project directory; defaults to the current directory.
        home (Path | None): Home directory; defaults to ``Path.home()``.
        env (Mapping[str, str] | None): Environment; defaults to ``os.environ``.
        extra_files (Iterable[Path]): Explicit config files, applied last.
        no_config (bool): Skip the implicit sources (explicit files still apply).

    Returns:
        Settings: The frozen settings.

    Raises:
        ConfigError: If a source is unreadable, malformed, or holds invalid values.
    """
    draft = MutableSettings()
    sources: list[Path] = []
    if not no_config:
        sources.extend(
            discover_config_files(
                cwd=cwd or Path.cwd(),
                home=home or Path.home(),
                env=os.environ if env is None else env,
            )
        )
    sources.extend(extra_files)

    for path in sources:
        table: TomlTable | None = _table_for(path, load_toml_dict(path))
        if table is None:
            logger.debug("No [%s] table in %s", PYPROJECT_SECTION, path)
            continue
        draft.merge_mapping(table, source=path)
        draft.config_files.append(path)
        logger.info("Loaded config from %s", path)

    return draft.freeze()


def render_settings_toml(settings: Settings) -> str:
    """Render ``settings`` as a TOML document."""
    doc: tomlkit.TOMLDocument = tomlkit.document()
    for key, value in settings.to_dict().items():
        doc.add(key, value)
    return tomlkit.dumps(doc)
