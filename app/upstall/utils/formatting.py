"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from upstall.models.package import InstalledPackage

THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "header": "#69B9A1",
        "bold_header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "bold #f53263",
        "info": "#0ec1c8",
        "dim": "#b2bec3",
        "source_registry": "bold #69B9A1",
        "source_vcs": "#c1ff62",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def create_package_table(title: str = "Installed Crates") -> Table:
    """Create a pre-configured table for displaying installed crates.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for crate display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],  # Zebra striping for readability
    )
    table.add_column("Crate", no_wrap=True)
    table.add_column("Version", style="muted")
    table.add_column("Source", overflow="fold")
    table.add_column("Binaries", style="text")
    return table


def format_package_row(pkg: InstalledPackage) -> tuple[str, str, str, str]:
    """Format an installed crate as a table row.

    Args:
        pkg: The installed crate to format.

    Returns:
        Tuple of (name, version, source, binaries) with Rich markup.
    """
    style = "source_vcs" if pkg.is_vcs else "source_registry"
    name = f"[{style}]{pkg.name}[/]"
    version = f"[muted]{pkg.version}[/]"
    source = f"[{style}]{pkg.source}[/]"
    binaries = ", ".join(pkg.provided_binaries) or "-"
    return (name, version, source, binaries)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
