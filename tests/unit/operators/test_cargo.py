"""Unit tests for CargoOperator.

Tests for turning install decisions into cargo install invocations.
"""

from unittest.mock import patch

import pytest
from semver import Version
from upstall.models.action import create_install_action, create_nothing_action
from upstall.operators.cargo import CargoOperator


class TestBuildInstallArgs:
    """Tests for CargoOperator.build_install_args."""

    @pytest.fixture
    def operator(self) -> CargoOperator:
        """Create CargoOperator instance."""
        return CargoOperator()

    def test_forced_and_pinned(self, operator: CargoOperator) -> None:
        """Forced, pinned installs pass --force and --version."""
        action = create_install_action(force=True, version=Version.parse("1.2.0"))

        args = operator.build_install_args("ripgrep", action)

        assert args == ["cargo", "install", "ripgrep", "--force", "--version=1.2.0"]

    def test_plain_install(self, operator: CargoOperator) -> None:
        """A plain install has no extra flags."""
        args = operator.build_install_args("ripgrep", create_install_action())

        assert args == ["cargo", "install", "ripgrep"]

    def test_features_and_git(self, operator: CargoOperator) -> None:
        """Features are space-joined and the git URL is passed through."""
        action = create_install_action(force=True)

        args = operator.build_install_args(
            "mytool",
            action,
            features=["tls", "cli"],
            git="https://github.com/me/mytool.git",
        )

        assert args == [
            "cargo",
            "install",
            "mytool",
            "--force",
            "--features=tls cli",
            "--git=https://github.com/me/mytool.git",
        ]

    def test_nothing_raises(self, operator: CargoOperator) -> None:
        """A 'nothing' action has no command line."""
        with pytest.raises(ValueError, match="nothing"):
            operator.build_install_args("ripgrep", create_nothing_action())


class TestExecute:
    """Tests for CargoOperator.execute."""

    def test_nothing_runs_nothing(self) -> None:
        """A 'nothing' action never invokes cargo."""
        with patch("upstall.operators.cargo.run_interactive") as mock_run:
            result = CargoOperator().execute("ripgrep", create_nothing_action())

        assert result.success is True
        assert result.returncode is None
        mock_run.assert_not_called()

    def test_dry_run_does_not_execute(self) -> None:
        """Dry run reports the command without running it."""
        action = create_install_action(force=True, version=Version.parse("1.2.0"))

        with patch("upstall.operators.cargo.run_interactive") as mock_run:
            result = CargoOperator(dry_run=True).execute("ripgrep", action)

        assert result.success is True
        assert result.message == "Dry run: cargo install ripgrep --force --version=1.2.0"
        mock_run.assert_not_called()

    def test_raises_when_cargo_missing(self) -> None:
        """execute raises RuntimeError when cargo is not on PATH."""
        with (
            patch("upstall.operators.cargo.command_exists", return_value=False),
            pytest.raises(RuntimeError, match="not available"),
        ):
            CargoOperator().execute("ripgrep", create_install_action())

    def test_success(self) -> None:
        """A zero exit status is a success."""
        with (
            patch("upstall.operators.cargo.command_exists", return_value=True),
            patch("upstall.operators.cargo.run_interactive", return_value=0) as mock_run,
        ):
            result = CargoOperator().execute(
                "ripgrep", create_install_action(force=True), features=["pcre2"]
            )

        assert result.success is True
        assert result.returncode == 0
        assert result.crate == "ripgrep"
        mock_run.assert_called_once_with(
            ["cargo", "install", "ripgrep", "--force", "--features=pcre2"]
        )

    def test_failure_relays_exit_status(self) -> None:
        """A non-zero exit status is relayed in the result."""
        with (
            patch("upstall.operators.cargo.command_exists", return_value=True),
            patch("upstall.operators.cargo.run_interactive", return_value=101),
        ):
            result = CargoOperator().execute("ripgrep", create_install_action())

        assert result.failed is True
        assert result.returncode == 101
        assert result.error is not None
        assert "101" in result.error

    def test_spawn_error(self) -> None:
        """Failing to spawn cargo yields a failed result."""
        with (
            patch("upstall.operators.cargo.command_exists", return_value=True),
            patch(
                "upstall.operators.cargo.run_interactive",
                side_effect=OSError("exec format error"),
            ),
        ):
            result = CargoOperator().execute("ripgrep", create_install_action())

        assert result.failed is True
        assert result.returncode is None
        assert "exec format error" in (result.error or "")
