"""Installed package models.

This module defines the data structures describing a binary crate
recorded in cargo's installed-package manifest (.crates.toml).
"""

from dataclasses import dataclass, field
from enum import Enum

from semver import Version

# Windows installs record binaries with this suffix
EXE_SUFFIX = ".exe"


class SourceKind(Enum):
    """Provenance of an installed package.

    Attributes:
        REGISTRY: Resolved against a package registry. Covers registry,
            sparse and local path installs.
        VCS: Installed from a version-controlled repository.
    """

    REGISTRY = "registry"
    VCS = "vcs"


@dataclass(frozen=True, slots=True)
class SourceDescriptor:
    """Where an installed package came from.

    Attributes:
        kind: Registry or version-controlled repository.
        origin: Source URL or location identifier.
        revision: Pinned revision (commit hash), only for VCS sources.
        scheme: Literal provenance tag as written in the manifest
            (e.g. 'registry', 'sparse', 'path', 'git').
    """

    kind: SourceKind
    origin: str
    revision: str | None = field(default=None)
    scheme: str = field(default="registry")

    def __post_init__(self) -> None:
        """Validate source data after initialization."""
        if self.kind == SourceKind.REGISTRY and self.revision is not None:
            msg = "Registry sources cannot carry a revision"
            raise ValueError(msg)

    @property
    def is_vcs(self) -> bool:
        """Check if the package was installed from a repository."""
        return self.kind == SourceKind.VCS

    def __str__(self) -> str:
        if self.revision is None:
            return f"{self.scheme}+{self.origin}"
        return f"{self.scheme}+{self.origin}#{self.revision}"


def strip_exe_suffix(binary: str) -> str:
    """Remove a trailing '.exe' so binary names compare across platforms.

    Args:
        binary: Binary name as recorded in the manifest.

    Returns:
        The name without a trailing '.exe'. Idempotent.
    """
    if binary.endswith(EXE_SUFFIX):
        return binary[: -len(EXE_SUFFIX)]
    return binary


@dataclass(frozen=True, slots=True)
class InstalledPackage:
    """A binary-producing crate currently installed by cargo.

    Attributes:
        name: Crate name (e.g., 'ripgrep').
        version: Installed semantic version.
        source: Provenance of the installed crate.
        provided_binaries: Executables installed by this crate, without '.exe'.
    """

    name: str
    version: Version
    source: SourceDescriptor
    provided_binaries: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)

    @property
    def is_vcs(self) -> bool:
        """Check if the package was installed from a repository."""
        return self.source.is_vcs
