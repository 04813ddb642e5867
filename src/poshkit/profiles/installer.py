# topmark:header:start
#
#   project      : PoshKit
#   file         : installer.py
#   file_relpath : src/poshkit/profiles/installer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Idempotent installation of the module import into a profile script.

`ProfileInstaller.install` ensures the import statement is present in exactly
one target profile script; `ProfileInstaller.uninstall` removes it again.

Flow of `install`:

1. all-users requests require administrative rights
   (`poshkit.errors.ProfilePermissionError`, raised before any I/O);
2. the target is selected from ``(all_users, all_hosts)``;
3. unless forced, the target and the four standard locations are scanned for
   the import marker, stopping at the first match (`ALREADY_IMPORTED`);
4. a target without a path is skipped (`NO_PROFILE_FOUND`);
5. a signed target is never modified (`PROFILE_SIGNED`);
6. the import statement is built (bare name or manifest path);
7. the parent directory is created if needed;
8. the statement is appended, prefixed with a newline, in UTF-8.

Steps 7 and 8 are `PlannedAction` objects. Without ``apply`` they are only
reported (`WOULD_INSTALL`); with ``apply`` each one is offered to the optional
``confirm`` callback before it runs. Filesystem errors propagate unchanged; the
operation is not transactional.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable

from yachalk import chalk

from poshkit.config.logging import get_logger
from poshkit.errors import ProfilePermissionError
from poshkit.profiles.encoding import encode, read_text
from poshkit.profiles.locations import ProfileTarget
from poshkit.profiles.scanner import find_existing_import, is_signed
from poshkit.profiles.statement import build_import_statement
from poshkit.rendering.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from poshkit.config.logging import PoshkitLogger
    from poshkit.config.model import Settings
    from poshkit.platform.base import PlatformCapabilities
    from poshkit.profiles.locations import ProfileLocations

logger: PoshkitLogger = get_logger(__name__)

_IMPORT_MODULE_RE: re.Pattern[str] = re.compile(r"^\s*Import-Module\b", re.IGNORECASE)


class InstallOutcome(ColoredStrEnum):
    """Outcome of an install or uninstall request."""

    INSTALLED = ("import statement added", chalk.green)
    WOULD_INSTALL = ("import statement would be added", chalk.blue)
    REMOVED = ("import statement removed", chalk.green)
    WOULD_REMOVE = ("import statement would be removed", chalk.blue)
    DECLINED = ("change declined", chalk.yellow)
    ALREADY_IMPORTED = ("module already imported", chalk.yellow)
    NOT_IMPORTED = ("module not imported", chalk.yellow)
    NO_PROFILE_FOUND = ("no profile found", chalk.yellow)
    PROFILE_SIGNED = ("profile is signed", chalk.yellow)

    @property
    def is_skip(self) -> bool:
        """Return True for outcomes that leave the profile untouched for a reason."""
        return self in _SKIPS

    @property
    def would_change(self) -> bool:
        """Return True for dry-run outcomes that found work to do."""
        return self in (InstallOutcome.WOULD_INSTALL, InstallOutcome.WOULD_REMOVE)


_SKIPS: frozenset[InstallOutcome] = frozenset(
    {
        InstallOutcome.ALREADY_IMPORTED,
        InstallOutcome.NOT_IMPORTED,
        InstallOutcome.NO_PROFILE_FOUND,
        InstallOutcome.PROFILE_SIGNED,
    }
)


class ActionKind(str, Enum):
    """Kind of filesystem mutation planned by the installer."""

    CREATE_DIRECTORY = "create directory"
    APPEND = "append to"
    REWRITE = "rewrite"


@dataclass(frozen=True)
class PlannedAction:
    """One confirmable filesystem mutation.

    Attributes:
        kind (ActionKind): What will be done.
        path (Path): The directory or file affected.
        detail (str): Text appended or a short description of the change.
    """

    kind: ActionKind
    path: Path
    detail: str = ""

    def describe(self) -> str:
        """Return a one-line human description of the action."""
        text = f"{self.kind.value} {self.path}"
        return f"{text}: {self.detail}" if self.detail else text


Confirm = Callable[[PlannedAction], bool]


@dataclass(frozen=True)
class InstallRequest:
    """Parameters of one install or uninstall invocation.

    Attributes:
        module_base (Path): The module's base directory.
        all_hosts (bool): Target the all-hosts profile.
        all_users (bool): Target the all-users profile (requires elevation).
        force (bool): Skip the existing-import scan.
        apply (bool): Perform the mutations; otherwise only plan them.
        profile_override (Path | None): Replaces the selected target path
            (used by test harnesses).
    """

    module_base: Path
    all_hosts: bool = False
    all_users: bool = False
    force: bool = False
    apply: bool = False
    profile_override: Path | None = None


@dataclass(frozen=True)
class InstallResult:
    """Result of an install or uninstall invocation.

    Attributes:
        outcome (InstallOutcome): What happened.
        target (ProfileTarget): The selected profile location.
        statement (str | None): The import statement involved, if computed.
        actions (tuple[PlannedAction, ...]): Planned actions (dry run) or the
            actions that were performed.
        found_in (Path | None): Script where an existing import was detected.
    """

    outcome: InstallOutcome
    target: ProfileTarget
    statement: str | None = None
    actions: tuple[PlannedAction, ...] = field(default_factory=tuple)
    found_in: Path | None = None

    @property
    def message(self) -> str:
        """Return a human-readable explanation of the outcome."""
        path = self.target.path
        o = self.outcome
        if o is InstallOutcome.ALREADY_IMPORTED:
            return f"Skipping: the module is already imported in '{self.found_in}'."
        if o is InstallOutcome.NO_PROFILE_FOUND:
            return f"Skipping: no {self.target.label} profile script could be found."
        if o is InstallOutcome.PROFILE_SIGNED:
            return f"Skipping: '{path}' is signed; signed profiles are never modified."
        if o is InstallOutcome.NOT_IMPORTED:
            return f"Skipping: '{path}' does not import the module."
        if o is InstallOutcome.DECLINED:
            return f"Stopped: a change to '{path}' was declined."
        if o is InstallOutcome.INSTALLED:
            return f"Added '{self.statement}' to '{path}'."
        if o is InstallOutcome.WOULD_INSTALL:
            return f"Would add '{self.statement}' to '{path}'."
        if o is InstallOutcome.REMOVED:
            return f"Removed the module import from '{path}'."
        return f"Would remove the module import from '{path}'."


def is_import_line(line: str, marker: str) -> bool:
    """Return True when ``line`` is an ``Import-Module`` statement mentioning ``marker``."""
    return bool(_IMPORT_MODULE_RE.match(line)) and marker in line


def remove_import_lines(text: str, marker: str) -> tuple[str, int]:
    """Remove the import statements for ``marker`` from ``text``.

    Line terminators of the kept lines are preserved. When the removed line was
    the unterminated last line, the terminator that preceded it is dropped too,
    which undoes the newline-prefixed append done by `ProfileInstaller.install`.

    Args:
        text (str): Profile script content.
        marker (str): Literal substring identifying the module.

    Returns:
        tuple[str, int]: The new content and the number of removed lines.
    """
    lines: list[str] = text.splitlines(keepends=True)
    kept: list[str] = []
    removed: int = 0
    for line in lines:
        if is_import_line(line, marker):
            removed += 1
            continue
        kept.append(line)
    if removed and lines and is_import_line(lines[-1], marker):
        last: str = lines[-1]
        if last == last.rstrip("\r\n") and kept:
            kept[-1] = kept[-1].rstrip("\r\n")
    return "".join(kept), removed


class ProfileInstaller:
    """Adds or removes the module import in one profile script per invocation.

    Args:
        caps (PlatformCapabilities): Capability provider (privilege, path comparison).
        locations (ProfileLocations): The four standard profile locations.
        settings (Settings): Runtime settings (module name, import marker).
        env (Mapping[str, str] | None): Environment holding ``PSModulePath``;
            defaults to ``os.environ``.
        confirm (Confirm | None): Called before each mutation when applying;
            returning False stops the operation.
    """

    def __init__(
        self,
        caps: PlatformCapabilities,
        locations: ProfileLocations,
        settings: Settings,
        *,
        env: Mapping[str, str] | None = None,
        confirm: Confirm | None = None,
    ) -> None:
        self.caps = caps
        self.locations = locations
        self.settings = settings
        self.env = env
        self.confirm = confirm

    def select_target(
        self, request: InstallRequest, *, operation: str = "install"
    ) -> ProfileTarget:
        """Check privileges and return the single target of ``request``.

        Args:
            request (InstallRequest): The request.
            operation (str): Verb used in the permission error message.

        Returns:
            ProfileTarget: The selected target, with the override applied.

        Raises:
            ProfilePermissionError: If an all-users target is requested without
                administrative rights.
        """
        target: ProfileTarget = self.locations.select(
            all_users=request.all_users, all_hosts=request.all_hosts
        )
        if request.all_users and not self.caps.is_admin():
            raise ProfilePermissionError(
                f"Administrative rights are required to {operation} the module "
                f"for all users ({target.label}).",
                path=target.path,
            )
        if request.profile_override is not None:
            target = ProfileTarget(
                scope=target.scope, breadth=target.breadth, path=request.profile_override
            )
        logger.debug("Selected %s profile: %s", target.label, target.path)
        return target

    def install(self, request: InstallRequest) -> InstallResult:
        """Ensure the import statement is present in the selected profile.

        Args:
            request (InstallRequest): What to install and where.

        Returns:
            InstallResult: The outcome with the planned or performed actions.

        Raises:
            ProfilePermissionError: If an all-users install lacks elevation.
            OSError: If creating the directory or appending to the file fails.
        """
        target: ProfileTarget = self.select_target(request, operation="install")

        if not request.force:
            candidates: list[Path | None] = [target.path, *(t.path for t in self.locations)]
            found: Path | None = find_existing_import(
                candidates, self.settings.import_marker, self.caps
            )
            if found is not None:
                return self._skip(InstallOutcome.ALREADY_IMPORTED, target, found_in=found)

        if target.path is None:
            return self._skip(InstallOutcome.NO_PROFILE_FOUND, target)
        path: Path = target.path

        if is_signed(path):
            return self._skip(InstallOutcome.PROFILE_SIGNED, target)

        statement: str = build_import_statement(
            request.module_base.resolve(),
            module_name=self.settings.module_name,
            caps=self.caps,
            env=self.env,
        )

        actions: list[PlannedAction] = []
        if not path.parent.is_dir():
            actions.append(PlannedAction(ActionKind.CREATE_DIRECTORY, path.parent))
        actions.append(PlannedAction(ActionKind.APPEND, path, statement))

        if not request.apply:
            logger.info("Dry run: would add %r to %s", statement, path)
            return InstallResult(
                outcome=InstallOutcome.WOULD_INSTALL,
                target=target,
                statement=statement,
                actions=tuple(actions),
            )

        performed: list[PlannedAction] = []
        for action in actions:
            if self.confirm is not None and not self.confirm(action):
                logger.info("Declined: %s", action.describe())
                return InstallResult(
                    outcome=InstallOutcome.DECLINED,
                    target=target,
                    statement=statement,
                    actions=tuple(performed),
                )
            self._perform(action)
            performed.append(action)

        logger.info("Added %r to %s", statement, path)
        return InstallResult(
            outcome=InstallOutcome.INSTALLED,
            target=target,
            statement=statement,
            actions=tuple(performed),
        )

    def uninstall(self, request: InstallRequest) -> InstallResult:
        """Remove the module's import statements from the selected profile.

        The script is rewritten in its original encoding (BOM preserved) and
        with its original line terminators.

        Args:
            request (InstallRequest): Which profile to clean (``force`` is ignored).

        Returns:
            InstallResult: The outcome with the planned or performed action.

        Raises:
            ProfilePermissionError: If an all-users uninstall lacks elevation.
            OSError: If the profile cannot be read or rewritten.
        """
        target: ProfileTarget = self.select_target(request, operation="uninstall")
        path: Path | None = target.path
        if path is None or not path.is_file():
            return self._skip(InstallOutcome.NO_PROFILE_FOUND, target)

        if is_signed(path):
            return self._skip(InstallOutcome.PROFILE_SIGNED, target)

        text, encoding = read_text(path)
        new_text, removed = remove_import_lines(text, self.settings.import_marker)
        if not removed:
            return self._skip(InstallOutcome.NOT_IMPORTED, target)

        action = PlannedAction(
            ActionKind.REWRITE,
            path,
            f"remove {removed} import line(s), keep {encoding} encoding",
        )
        if not request.apply:
            return InstallResult(
                outcome=InstallOutcome.WOULD_REMOVE, target=target, actions=(action,)
            )
        if self.confirm is not None and not self.confirm(action):
            return InstallResult(outcome=InstallOutcome.DECLINED, target=target)

        path.write_bytes(encode(new_text, encoding))
        logger.info("Removed %d import line(s) from %s", removed, path)
        return InstallResult(outcome=InstallOutcome.REMOVED, target=target, actions=(action,))

    def _perform(self, action: PlannedAction) -> None:
        if action.kind is ActionKind.CREATE_DIRECTORY:
            action.path.mkdir(parents=True, exist_ok=True)
        elif action.kind is ActionKind.APPEND:
            with action.path.open("a", encoding="utf-8", newline="") as fh:
                fh.write("\n" + action.detail)
        else:
            raise ValueError(f"Unsupported action for install: {action.kind}")

    def _skip(
        self,
        outcome: InstallOutcome,
        target: ProfileTarget,
        *,
        found_in: Path | None = None,
    ) -> InstallResult:
        result = InstallResult(outcome=outcome, target=target, found_in=found_in)
        logger.warning("%s", result.message)
        return result
