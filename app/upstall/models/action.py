"""Action models for install decisions.

This module defines the decision produced for an installed crate
(reinstall or do nothing) and the result of carrying it out.
"""

from dataclasses import dataclass
from enum import Enum

from semver import Version


class ActionType(Enum):
    """Type of decision.

    Attributes:
        INSTALL: Run cargo install, optionally forced and/or pinned.
        NOTHING: No action required.
    """

    INSTALL = "install"
    NOTHING = "nothing"


@dataclass(frozen=True, slots=True)
class Action:
    """A decision about one crate.

    Attributes:
        action_type: Install or nothing.
        force: Overwrite an existing install of the same crate.
        version: Exact version to pin the install to. If None, cargo
            resolves the version itself.
    """

    action_type: ActionType
    force: bool = False
    version: Version | None = None

    def __post_init__(self) -> None:
        """Validate action data after initialization."""
        if self.action_type == ActionType.NOTHING and (self.force or self.version is not None):
            msg = "A 'nothing' action cannot carry install options"
            raise ValueError(msg)

    @property
    def is_install(self) -> bool:
        """Check if this is an install action."""
        return self.action_type == ActionType.INSTALL

    @property
    def is_nothing(self) -> bool:
        """Check if no action is required."""
        return self.action_type == ActionType.NOTHING

    def install_flags(self) -> list[str]:
        """Return the cargo install flags for this action.

        Returns:
            '--force' when forced and '--version=<semver>' when pinned,
            in that order. Empty for a 'nothing' action.
        """
        flags: list[str] = []
        if self.force:
            flags.append("--force")
        if self.version is not None:
            flags.append(f"--version={self.version}")
        return flags

    def describe(self) -> str:
        """Return a short human-readable description."""
        if self.is_nothing:
            return "nothing to do"
        target = f"version {self.version}" if self.version is not None else "default version"
        mode = "forced reinstall" if self.force else "install"
        return f"{mode} at {target}"


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Result of carrying out an action for a crate.

    Attributes:
        crate: Crate the action was applied to.
        action: The action that was carried out.
        success: Whether cargo completed successfully (or was not needed).
        returncode: Exit code of cargo, if it was run.
        message: Optional success message or additional information.
        error: Optional error message if the action failed.
    """

    crate: str
    action: Action
    success: bool
    returncode: int | None = None
    message: str | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the action failed."""
        return not self.success


def create_install_action(force: bool = False, version: Version | None = None) -> Action:
    """Create an install action.

    Args:
        force: Overwrite an existing install.
        version: Optional version to pin the install to.

    Returns:
        Action configured for installation.
    """
    return Action(action_type=ActionType.INSTALL, force=force, version=version)


def create_nothing_action() -> Action:
    """Create an action that does nothing."""
    return Action(action_type=ActionType.NOTHING)
