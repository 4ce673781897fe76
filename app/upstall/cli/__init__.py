"""CLI package for upstall.

This package contains the Typer application.
"""

from upstall.cli.main import app

__all__ = ["app"]
