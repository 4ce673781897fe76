"""Installed-package manifest model.

This module defines the Pydantic model for cargo's .crates.toml file,
which records every crate installed with `cargo install`.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class InstalledManifest(BaseModel):
    """The .crates.toml schema.

    The file lives in $CARGO_HOME/.crates.toml or, for installs made with
    `--root .`, in $PWD/.crates.toml.

    Attributes:
        v1: Map of encoded keys to the binary names each crate installed.
            Keys have the form ``<name> <semver> (<kind>+<url>[#<rev>])``::

                ripgrep 14.1.0 (registry+https://github.com/rust-lang/crates.io-index)
    """

    model_config = ConfigDict(extra="ignore")

    v1: Annotated[
        dict[str, list[str]],
        Field(description="Encoded crate keys mapped to installed binaries"),
    ]

    @classmethod
    def empty(cls) -> "InstalledManifest":
        """Create a manifest with no installed crates."""
        return cls(v1={})
