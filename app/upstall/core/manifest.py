"""Installed-package manifest I/O.

This module decodes cargo's .crates.toml files into installed packages,
with TOML parsing via tomllib and schema validation via Pydantic.
"""

import logging
import tomllib
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from upstall.core.parser import parse_entry
from upstall.core.paths import get_global_manifest_path, get_local_manifest_path
from upstall.models.manifest import InstalledManifest
from upstall.models.package import InstalledPackage

logger = logging.getLogger(__name__)


class ManifestError(Exception):
    """Base exception for manifest-related errors."""


class ManifestParseError(ManifestError):
    """Raised when manifest file is not valid TOML."""


class ManifestValidationError(ManifestError):
    """Raised when manifest content does not match the v1 schema."""


def decode_manifest(raw: bytes | str) -> InstalledManifest:
    """Decode the contents of a .crates.toml file.

    Malformed individual entries are kept here and dropped later by
    installed_commands().

    Args:
        raw: File contents as bytes (UTF-8) or text.

    Returns:
        Validated InstalledManifest.

    Raises:
        ManifestParseError: If the content is not valid TOML.
        ManifestValidationError: If the v1 table is missing or malformed.
    """
    try:
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        data = tomllib.loads(text)
    except UnicodeDecodeError as e:
        raise ManifestParseError(f"Manifest is not valid UTF-8: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ManifestParseError(f"Invalid TOML syntax: {e}") from e

    try:
        return InstalledManifest.model_validate(data)
    except ValidationError as e:
        raise ManifestValidationError(f"Invalid manifest content: {e}") from e


def installed_commands(manifest: InstalledManifest) -> list[InstalledPackage]:
    """Parse every manifest entry, dropping those that are malformed.

    Returns:
        Installed packages in manifest order.
    """
    packages: list[InstalledPackage] = []
    for key, binaries in manifest.v1.items():
        package = parse_entry(key, binaries)
        if package is not None:
            packages.append(package)
    return packages


def load_installed(path: Path) -> InstalledManifest:
    """Load an installed-package manifest from disk.

    Args:
        path: Path to a .crates.toml file.

    Returns:
        The decoded manifest, or an empty one if the file doesn't exist.

    Raises:
        ManifestError: If the file exists but cannot be read or decoded.
    """
    if not path.exists():
        logger.debug("No manifest at %s", path)
        return InstalledManifest.empty()

    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ManifestError(f"Failed to read manifest {path}: {e}") from e

    try:
        manifest = decode_manifest(raw)
    except ManifestError as e:
        raise type(e)(f"{path}: {e}") from e

    logger.debug("Loaded %d manifest entries from %s", len(manifest.v1), path)
    return manifest


def get_installed_packages(cargo_home: Path, cwd: Path) -> list[InstalledPackage]:
    """Collect installed packages from the local and global manifests.

    Duplicate crate names across the two manifests are preserved.

    Args:
        cargo_home: Resolved cargo home directory.
        cwd: Directory holding the local manifest.

    Returns:
        Local packages followed by global packages.

    Raises:
        ManifestError: If either manifest exists but cannot be decoded.
    """
    local = load_installed(get_local_manifest_path(cwd))
    global_ = load_installed(get_global_manifest_path(cargo_home))
    return installed_commands(local) + installed_commands(global_)


def find_installed(packages: Iterable[InstalledPackage], name: str) -> InstalledPackage | None:
    """Find the first installed package with exactly the given name.

    Args:
        packages: Installed packages to search.
        name: Crate name to match.

    Returns:
        The matching package, or None if the crate is not installed.
    """
    for package in packages:
        if package.name == name:
            return package
    return None
