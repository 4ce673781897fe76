"""Cargo path management for upstall.

Resolves where cargo keeps its installed-package manifest:
- Global: $CARGO_HOME/.crates.toml (default ~/.cargo/.crates.toml)
- Local: ./.crates.toml (installs made with `cargo install --root .`)
"""

import os
from pathlib import Path

# Manifest file written by cargo install
MANIFEST_FILENAME = ".crates.toml"

# Environment variable overriding the cargo home directory
CARGO_HOME_ENV = "CARGO_HOME"


def get_cargo_home() -> Path:
    """Get the cargo home directory.

    Returns:
        Path from CARGO_HOME if set, otherwise ~/.cargo.
    """
    base = os.environ.get(CARGO_HOME_ENV)
    if base:
        return Path(base)
    return Path.home() / ".cargo"


def get_global_manifest_path(cargo_home: Path) -> Path:
    """Get the global installed-package manifest path.

    Args:
        cargo_home: Resolved cargo home directory.

    Returns:
        Path to <cargo_home>/.crates.toml.
    """
    return cargo_home / MANIFEST_FILENAME


def get_local_manifest_path(cwd: Path) -> Path:
    """Get the local installed-package manifest path.

    Args:
        cwd: Directory to look in, usually the current working directory.

    Returns:
        Path to <cwd>/.crates.toml.
    """
    return cwd / MANIFEST_FILENAME
