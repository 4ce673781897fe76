"""Main CLI application entry point.

Defines the Typer application: `upstall <crate>` installs a crate, or
upgrades it if a newer version is available.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from semver import Version

from upstall import __version__
from upstall.core.manifest import ManifestError, get_installed_packages
from upstall.core.paths import get_cargo_home
from upstall.core.resolver import DecisionError, plan_action
from upstall.models.package import InstalledPackage
from upstall.operators.cargo import CargoOperator
from upstall.registry.client import CRATES_IO_API_URL, RegistryClient
from upstall.utils.formatting import (
    console,
    create_package_table,
    format_package_row,
    print_error,
    print_info,
    print_success,
)
from upstall.utils.logging import setup_logging

app = typer.Typer(
    name="upstall",
    help="Safely attempts to upgrade or install a cargo binary crate.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"cargo-upstall {__version__}")
        raise typer.Exit()


def parse_version(value: str) -> Version:
    """Parse a --max value as a semantic version."""
    try:
        return Version.parse(value)
    except ValueError as e:
        raise typer.BadParameter(f"'{value}' is not a valid semantic version") from e


def _load_packages() -> list[InstalledPackage]:
    """Read installed crates from the local and global manifests.

    Raises:
        typer.Exit: If a manifest exists but cannot be decoded.
    """
    try:
        return get_installed_packages(get_cargo_home(), Path.cwd())
    except ManifestError as e:
        print_error(escape(str(e)))
        print_error("Unable to find currently installed commands")
        raise typer.Exit(code=1) from e


def _show_installed(packages: list[InstalledPackage]) -> None:
    """Print a table of installed crates."""
    if not packages:
        print_info("No crates installed.")
        return

    table = create_package_table()
    for pkg in sorted(packages, key=lambda p: p.name):
        table.add_row(*format_package_row(pkg))
    console.print(table)


@app.command()
def upstall(
    crate: Annotated[
        str | None,
        typer.Argument(help="Crate to install or upgrade.", show_default=False),
    ] = None,
    max_version: Annotated[
        Version | None,
        typer.Option(
            "--max",
            parser=parse_version,
            metavar="VERSION",
            help="A maximum target version.",
        ),
    ] = None,
    git: Annotated[
        str | None,
        typer.Option(
            "--git",
            metavar="URL",
            help="The git repo url if not registered on crates.io.",
        ),
    ] = None,
    features: Annotated[
        list[str] | None,
        typer.Option(
            "--features",
            metavar="FEATURES",
            help="Features to pass to cargo install (repeatable).",
        ),
    ] = None,
    registry_url: Annotated[
        str,
        typer.Option(
            "--registry-url",
            envvar="UPSTALL_REGISTRY_URL",
            help="Registry API root used to look up published versions.",
        ),
    ] = CRATES_IO_API_URL,
    list_installed: Annotated[
        bool,
        typer.Option(
            "--list",
            "-l",
            help="List installed crates and exit.",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Show the cargo command without running it.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Install a crate, or reinstall it if a newer version is available.

    Crates installed from a git repository are always reinstalled.

    Examples:
        upstall ripgrep                 # Upgrade to the latest release
        upstall ripgrep --max 13.0.0    # Install 13.0.0 unless already at or above it
        upstall tool --git URL          # Reinstall from a repository
        upstall --list                  # Show installed crates
    """
    setup_logging(verbose=verbose, quiet=quiet)

    packages = _load_packages()

    if list_installed:
        _show_installed(packages)
        return

    if crate is None:
        print_error("Missing crate name.")
        raise typer.Exit(code=2)

    client = RegistryClient(registry_url)
    try:
        action = plan_action(packages, crate, max_version, client.fetch_versions)
    except DecisionError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if action.is_nothing:
        print_success(f"{crate} is up to date.")
        return

    if not quiet:
        print_info(f"{crate}: {action.describe()}")

    operator = CargoOperator(dry_run=dry_run)
    try:
        result = operator.execute(crate, action, features=features or (), git=git)
    except RuntimeError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    if result.failed:
        print_error(escape(result.error or "cargo install failed"))
        raise typer.Exit(code=result.returncode or 1)

    if dry_run:
        console.print(escape(result.message or ""))
    else:
        print_success(f"{crate} installed.")


if __name__ == "__main__":
    app()
