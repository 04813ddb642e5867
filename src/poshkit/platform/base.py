# topmark:header:start
#
#   project      : PoshKit
#   file         : base.py
#   file_relpath : src/poshkit/platform/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Capability provider contract and shared path-comparison logic.

A capability provider answers the host-OS questions the rest of PoshKit needs:
whether the caller is elevated, how paths compare (case sensitivity, component
boundaries), how the module search path is separated, and where PowerShell keeps
its profile scripts. One provider is selected at startup
(`poshkit.platform.detect_capabilities`) and passed explicitly to the code
that needs it.

Path comparison never touches the filesystem: it operates on the pure path
flavor of the provider, so Windows semantics can be exercised on POSIX hosts
and vice versa.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePath, PurePosixPath
from typing import TYPE_CHECKING, ClassVar, Protocol

from poshkit.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from poshkit.config.logging import PoshkitLogger

logger: PoshkitLogger = get_logger(__name__)

PathLike = str | os.PathLike[str]


class PlatformCapabilities(Protocol):
    """Minimal interface of an OS capability provider."""

    name: str
    case_sensitive: bool
    module_path_separator: str
    path_separator: str

    def is_admin(self) -> bool:
        """Return True when the current process has administrative rights."""
        ...

    def paths_equal(self, a: PathLike, b: PathLike) -> bool:
        """Return True when ``a`` and ``b`` name the same path on this platform."""
        ...

    def is_within(self, path: PathLike, base: PathLike) -> bool:
        """Return True when ``path`` equals ``base`` or lies below it."""
        ...

    def relative_parts(self, path: PathLike, base: PathLike) -> tuple[str, ...] | None:
        """Return the components of ``path`` below ``base``, or None if outside."""
        ...

    def default_pshome(self, env: Mapping[str, str]) -> Path | None:
        """Return the PowerShell installation directory, if one is known."""
        ...

    def user_profile_dir(self, home: Path, env: Mapping[str, str]) -> Path:
        """Return the directory holding the current user's profile scripts."""
        ...


class BaseCapabilities:
    """Shared implementation for the concrete capability providers.

    Subclasses set the class attributes and implement `is_admin`,
    `default_pshome` and `user_profile_dir`.

    Args:
        admin (bool | None): Forces the result of `is_admin`; ``None`` queries the OS.
    """

    name: ClassVar[str] = "base"
    case_sensitive: ClassVar[bool] = True
    module_path_separator: ClassVar[str] = os.pathsep
    path_separator: ClassVar[str] = "/"
    pure_path: ClassVar[type[PurePath]] = PurePosixPath

    def __init__(self, *, admin: bool | None = None) -> None:
        self._admin_override = admin

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"

    def is_admin(self) -> bool:
        """Return True when the current process has administrative rights.

        Returns:
            bool: The forced value when one was given, otherwise the OS answer.
        """
        if self._admin_override is not None:
            return self._admin_override
        return self._query_admin()

    def _query_admin(self) -> bool:
        raise NotImplementedError

    def _parts(self, path: PathLike) -> tuple[str, ...]:
        parts: tuple[str, ...] = self.pure_path(os.fspath(path)).parts
        if self.case_sensitive:
            return parts
        return tuple(p.casefold() for p in parts)

    def paths_equal(self, a: PathLike, b: PathLike) -> bool:
        """Return True when ``a`` and ``b`` name the same path on this platform.

        Args:
            a (PathLike): First path.
            b (PathLike): Second path.

        Returns:
            bool: True if the paths are equal component by component.
        """
        return self._parts(a) == self._parts(b)

    def relative_parts(self, path: PathLike, base: PathLike) -> tuple[str, ...] | None:
        """Return the components of ``path`` below ``base``.

        The returned components keep their original spelling, only the
        comparison honors the platform's case sensitivity.

        Args:
            path (PathLike): Candidate path.
            base (PathLike): Prefix directory.

        Returns:
            tuple[str, ...] | None: The trailing components (empty when the paths
            are equal), or None when ``path`` is not inside ``base``.
        """
        base_parts: tuple[str, ...] = self._parts(base)
        path_parts: tuple[str, ...] = self._parts(path)
        if len(path_parts) < len(base_parts):
            return None
        if path_parts[: len(base_parts)] != base_parts:
            return None
        original: tuple[str, ...] = self.pure_path(os.fspath(path)).parts
        return original[len(base_parts) :]

    def is_within(self, path: PathLike, base: PathLike) -> bool:
        """Return True when ``path`` equals ``base`` or lies below it.

        Matching is component-wise: ``/home/al`` does not contain ``/home/alice``.

        Args:
            path (PathLike): Candidate path.
            base (PathLike): Prefix directory.

        Returns:
            bool: True if ``path`` is ``base`` or one of its descendants.
        """
        return self.relative_parts(path, base) is not None

    def default_pshome(self, env: Mapping[str, str]) -> Path | None:
        """Return the PowerShell installation directory, if one is known.

        Args:
            env (Mapping[str, str]): Environment used to locate the installation.

        Returns:
            Path | None: The directory, or None when PowerShell is not installed
            in the platform's default location.
        """
        raise NotImplementedError

    def user_profile_dir(self, home: Path, env: Mapping[str, str]) -> Path:
        """Return the directory holding the current user's profile scripts.

        Args:
            home (Path): The user's home directory.
            env (Mapping[str, str]): Environment consulted for overrides.

        Returns:
            Path: The profile directory (it may not exist yet).
        """
        raise NotImplementedError
