"""Version resolution for installed crates.

Decides whether an installed crate should be reinstalled and at which
version. The decision is a pure function of the installed package, an
optional version ceiling and a version-fetching callable, so it can be
exercised with a stub in place of the registry.
"""

import logging
from collections.abc import Callable, Iterable, Sequence

from semver import Version

from upstall.core.manifest import find_installed
from upstall.models.action import Action, create_install_action, create_nothing_action
from upstall.models.package import InstalledPackage

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised by a version fetcher when the registry cannot be queried."""


class DecisionError(Exception):
    """Base exception for version resolution errors."""


class VersionFetchError(DecisionError):
    """Raised when published versions could not be fetched."""


class NoPublishedVersionsError(DecisionError):
    """Raised when the registry reports no published versions."""


VersionFetcher = Callable[[str], Sequence[Version]]


def decide(
    installed: InstalledPackage,
    max_version: Version | None,
    fetch_versions: VersionFetcher,
) -> Action:
    """Decide what to do with an installed crate.

    Repository installs are always reinstalled with --force since their
    revision cannot be compared. With a ceiling the registry is never
    queried: the ceiling itself becomes the install target. Without one,
    the newest published version is the target.

    Args:
        installed: The installed crate.
        max_version: Optional upper bound for the target version.
        fetch_versions: Returns every published version for a crate name.

    Returns:
        The action to take.

    Raises:
        VersionFetchError: If fetch_versions fails.
        NoPublishedVersionsError: If the registry has no versions.
    """
    if installed.is_vcs:
        logger.info("Git repos are always re-installed with --force")
        return create_install_action(force=True)

    if max_version is not None:
        if installed.version >= max_version:
            logger.info(
                "%s %s is already at or above the maximum version %s",
                installed.name,
                installed.version,
                max_version,
            )
            return create_nothing_action()
        return create_install_action(force=True, version=max_version)

    try:
        versions = fetch_versions(installed.name)
    except FetchError as e:
        msg = f"Failed to fetch versions for {installed.name}: {e}"
        raise VersionFetchError(msg) from e

    latest = max_version_of(versions)
    if latest is None:
        msg = f"No published versions found for {installed.name}"
        raise NoPublishedVersionsError(msg)

    if latest > installed.version:
        logger.info(
            "%s %s is installed, upgrading to %s", installed.name, installed.version, latest
        )
        return create_install_action(force=True, version=latest)

    logger.info("%s %s is the most recent version", installed.name, installed.version)
    return create_nothing_action()


def max_version_of(versions: Iterable[Version]) -> Version | None:
    """Return the highest version by semantic-version precedence.

    Args:
        versions: Candidate versions.

    Returns:
        The highest version, or None if there are none.
    """
    return max(versions, default=None)


def plan_action(
    packages: Iterable[InstalledPackage],
    name: str,
    max_version: Version | None,
    fetch_versions: VersionFetcher,
) -> Action:
    """Plan the action for a crate that may or may not be installed.

    A crate that isn't installed gets a plain install, pinned to the
    ceiling when one is given.

    Args:
        packages: Every installed package.
        name: Crate to install or upgrade.
        max_version: Optional upper bound for the target version.
        fetch_versions: Returns every published version for a crate name.

    Returns:
        The action to take.

    Raises:
        DecisionError: If the installed crate's versions cannot be resolved.
    """
    installed = find_installed(packages, name)
    if installed is None:
        logger.info("%s is not installed", name)
        return create_install_action(force=False, version=max_version)
    return decide(installed, max_version, fetch_versions)
