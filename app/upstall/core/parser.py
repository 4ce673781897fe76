"""Parsing of .crates.toml entries.

Each entry of the manifest's v1 table maps an encoded key to the list of
binaries the crate installed:

    "ripgrep 14.1.0 (registry+https://github.com/rust-lang/crates.io-index)" = ["rg"]
    "tool 0.3.0 (git+https://github.com/me/tool.git#a1b2c3d)" = ["tool.exe"]

The key is split on single spaces into name, version and source fragment.
The source fragment is split on its first '+' and, for git sources, the
remainder on its first '#'. Delimiters inside the origin URL are not
escaped by cargo, so the first occurrence always wins.
"""

import logging
from collections.abc import Sequence
from enum import Enum

from semver import Version

from upstall.models.package import (
    InstalledPackage,
    SourceDescriptor,
    SourceKind,
    strip_exe_suffix,
)

logger = logging.getLogger(__name__)

# Only git sources carry a revision; every other tag resolves against the registry
VCS_TAG = "git"


class ParseStep(Enum):
    """Step of entry parsing at which a key was rejected."""

    NAME = "name"
    VERSION = "version"
    SOURCE = "source"


class EntryParseError(Exception):
    """Raised internally when a manifest key cannot be parsed."""

    def __init__(self, step: ParseStep, key: str, reason: str) -> None:
        self.step = step
        self.key = key
        self.reason = reason
        super().__init__(f"{step.value}: {reason} in {key!r}")


def parse_source(text: str) -> SourceDescriptor | None:
    """Parse the parenthesized source fragment of a manifest key.

    Args:
        text: Fragment such as '(registry+https://...)' or
            '(git+https://host/repo.git#rev)'. The parentheses are optional.

    Returns:
        SourceDescriptor, or None if the fragment has no '+'. Tags other
        than 'git' (registry, sparse, path, ...) are registry sources
        with the origin kept verbatim.
    """
    if text.startswith("("):
        text = text[1:]
    if text.endswith(")"):
        text = text[:-1]

    tag, sep, rest = text.partition("+")
    if not sep:
        return None

    if tag == VCS_TAG:
        origin, hash_sep, revision = rest.partition("#")
        return SourceDescriptor(
            kind=SourceKind.VCS,
            origin=origin,
            revision=revision if hash_sep else None,
            scheme=tag,
        )

    return SourceDescriptor(kind=SourceKind.REGISTRY, origin=rest, scheme=tag)


def _parse_key(key: str, binaries: Sequence[str]) -> InstalledPackage:
    """Parse a manifest entry step by step.

    Raises:
        EntryParseError: Naming the step at which parsing failed.
    """
    tokens = key.split(" ")

    name = tokens[0]
    if not name:
        raise EntryParseError(ParseStep.NAME, key, "empty crate name")

    if len(tokens) < 2:
        raise EntryParseError(ParseStep.VERSION, key, "missing version")
    try:
        version = Version.parse(tokens[1])
    except ValueError as e:
        raise EntryParseError(ParseStep.VERSION, key, str(e)) from e

    if len(tokens) < 3:
        raise EntryParseError(ParseStep.SOURCE, key, "missing source")
    source = parse_source(tokens[2])
    if source is None:
        raise EntryParseError(ParseStep.SOURCE, key, f"unparsable source {tokens[2]!r}")

    return InstalledPackage(
        name=name,
        version=version,
        source=source,
        provided_binaries=tuple(strip_exe_suffix(b) for b in binaries),
    )


def parse_entry(key: str, binaries: Sequence[str]) -> InstalledPackage | None:
    """Parse a single .crates.toml entry.

    Args:
        key: Encoded key '<name> <semver> (<kind>+<url>[#<rev>])'.
        binaries: Binary names the crate installed.

    Returns:
        InstalledPackage, or None if the key is malformed.
    """
    try:
        return _parse_key(key, binaries)
    except EntryParseError as e:
        logger.debug("Skipping malformed manifest entry (%s): %s", e.step.value, e.reason)
        return None
