"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable, Sequence

import pytest
from semver import Version
from upstall.core.resolver import FetchError
from upstall.models.package import InstalledPackage, SourceDescriptor, SourceKind

CRATES_IO_INDEX = "https://github.com/rust-lang/crates.io-index"


@pytest.fixture
def crates_toml() -> str:
    """Sample .crates.toml content for testing."""
    return """[v1]
"ripgrep 14.1.0 (registry+https://github.com/rust-lang/crates.io-index)" = ["rg"]
"cargo-edit 0.12.2 (sparse+https://index.crates.io/)" = ["cargo-add", "cargo-rm.exe"]
"mytool 0.3.0 (git+https://github.com/me/mytool.git#a1b2c3d4)" = ["mytool.exe"]
"""


@pytest.fixture
def crates_toml_with_malformed() -> str:
    """.crates.toml content mixing valid and malformed entries."""
    return """[v1]
"ripgrep 14.1.0 (registry+https://github.com/rust-lang/crates.io-index)" = ["rg"]
"broken" = ["broken"]
"badversion 1.x (registry+https://github.com/rust-lang/crates.io-index)" = ["bv"]
"localcrate 0.1.0 (path+file:///home/me/localcrate)" = ["localcrate"]
"""


@pytest.fixture
def crate_payload() -> dict[str, object]:
    """Sample crates.io API response for testing."""
    return {
        "crate": {"id": "ripgrep", "name": "ripgrep", "max_version": "14.1.1"},
        "versions": [
            {"id": 3, "num": "14.1.1", "yanked": False},
            {"id": 2, "num": "14.1.0", "yanked": False},
            {"id": 1, "num": "15.0.0-beta.1", "yanked": True},
            {"id": 0, "num": "13.0.0"},
        ],
    }


@pytest.fixture
def make_package() -> Callable[..., InstalledPackage]:
    """Factory for installed packages."""

    def _make(
        name: str = "ripgrep",
        version: str = "1.0.0",
        kind: SourceKind = SourceKind.REGISTRY,
    ) -> InstalledPackage:
        if kind == SourceKind.VCS:
            source = SourceDescriptor(
                kind=kind,
                origin=f"https://github.com/me/{name}.git",
                revision="a1b2c3d4",
                scheme="git",
            )
        else:
            source = SourceDescriptor(kind=kind, origin=CRATES_IO_INDEX)
        return InstalledPackage(
            name=name,
            version=Version.parse(version),
            source=source,
            provided_binaries=(name,),
        )

    return _make


class StubFetcher:
    """Version fetcher returning canned versions and recording calls."""

    def __init__(
        self,
        versions: Sequence[str] = (),
        error: Exception | None = None,
    ) -> None:
        self.versions = [Version.parse(v) for v in versions]
        self.error = error
        self.calls: list[str] = []

    def __call__(self, name: str) -> list[Version]:
        self.calls.append(name)
        if self.error is not None:
            raise self.error
        return list(self.versions)


def failing_fetcher(name: str) -> list[Version]:
    """Version fetcher that must never be called."""
    msg = f"registry must not be queried for {name}"
    raise AssertionError(msg)


@pytest.fixture
def stub_fetcher() -> type[StubFetcher]:
    """Return the StubFetcher class."""
    return StubFetcher


@pytest.fixture
def no_fetch() -> Callable[[str], list[Version]]:
    """Version fetcher that fails the test if called."""
    return failing_fetcher


@pytest.fixture
def fetch_error() -> FetchError:
    """A fetch failure raised by a stub fetcher."""
    return FetchError("connection refused")
