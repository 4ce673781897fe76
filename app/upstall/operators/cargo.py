"""Cargo install operator.

Turns an install decision into a `cargo install` invocation.
"""

import logging
import shlex
from collections.abc import Sequence

from upstall.models.action import Action, ActionResult
from upstall.utils.shell import command_exists, run_interactive

logger = logging.getLogger(__name__)


class CargoOperator:
    """Operator running `cargo install` for a single crate.

    Attributes:
        dry_run: If True, only report the command without executing it.

    Example:
        >>> operator = CargoOperator(dry_run=True)
        >>> result = operator.execute("ripgrep", create_install_action(force=True))
        >>> print(result.message)
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the operator.

        Args:
            dry_run: If True, only simulate actions without executing them.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Check if operator is in dry-run mode."""
        return self._dry_run

    def is_available(self) -> bool:
        """Check if cargo is available."""
        return command_exists("cargo")

    def build_install_args(
        self,
        crate: str,
        action: Action,
        features: Sequence[str] = (),
        git: str | None = None,
    ) -> list[str]:
        """Build the cargo install command line for an action.

        Args:
            crate: Crate to install.
            action: An install action.
            features: Crate features to enable.
            git: Repository URL to install from instead of the registry.

        Returns:
            Command and arguments.

        Raises:
            ValueError: If the action is not an install.
        """
        if not action.is_install:
            msg = f"Cannot build install arguments for a '{action.action_type.value}' action"
            raise ValueError(msg)

        args = ["cargo", "install", crate]
        args.extend(action.install_flags())

        if features:
            args.append(f"--features={' '.join(features)}")

        if git is not None:
            args.append(f"--git={git}")

        return args

    def execute(
        self,
        crate: str,
        action: Action,
        features: Sequence[str] = (),
        git: str | None = None,
    ) -> ActionResult:
        """Carry out an action for a crate.

        Args:
            crate: Crate to install.
            action: The decided action.
            features: Crate features to enable.
            git: Repository URL to install from instead of the registry.

        Returns:
            ActionResult relaying cargo's exit status.

        Raises:
            RuntimeError: If cargo is not available.
        """
        if action.is_nothing:
            return ActionResult(crate=crate, action=action, success=True, message="Nothing to do")

        args = self.build_install_args(crate, action, features=features, git=git)
        command = shlex.join(args)

        if self.dry_run:
            logger.info("Dry run, not executing: %s", command)
            return ActionResult(
                crate=crate,
                action=action,
                success=True,
                message=f"Dry run: {command}",
            )

        if not self.is_available():
            msg = "cargo is not available on this system"
            raise RuntimeError(msg)

        logger.info("Executing: %s", command)

        try:
            returncode = run_interactive(args)
        except OSError as e:
            return ActionResult(
                crate=crate,
                action=action,
                success=False,
                error=f"Error spawning cargo: {e}",
            )

        if returncode != 0:
            return ActionResult(
                crate=crate,
                action=action,
                success=False,
                returncode=returncode,
                error=f"cargo install exited with status {returncode}",
            )

        return ActionResult(
            crate=crate,
            action=action,
            success=True,
            returncode=returncode,
            message="Operation completed",
        )
