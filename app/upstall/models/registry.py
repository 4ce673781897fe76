"""Registry response models.

This module defines the Pydantic models for the subset of the crates.io
API response (GET /api/v1/crates/<name>) that upstall consumes.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from semver import Version


class CrateInfo(BaseModel):
    """The 'crate' sub-object of a registry response.

    Attributes:
        name: The crate name as it appears on the registry.
    """

    model_config = ConfigDict(extra="ignore")

    name: Annotated[str, Field(min_length=1, description="Crate name on the registry")]


class CrateVersion(BaseModel):
    """One entry of the 'versions' list of a registry response.

    Attributes:
        num: The published semantic version.
        yanked: Whether the version was yanked from the registry.
    """

    model_config = ConfigDict(extra="ignore", arbitrary_types_allowed=True)

    num: Annotated[Version, Field(description="Published semantic version")]
    yanked: Annotated[bool, Field(description="Version was yanked")] = False

    @field_validator("num", mode="before")
    @classmethod
    def parse_num(cls, v: Any) -> Version:
        """Parse the version number as a semantic version."""
        if isinstance(v, Version):
            return v
        if not isinstance(v, str):
            msg = "version number must be a string"
            raise ValueError(msg)
        return Version.parse(v)


class CrateResponse(BaseModel):
    """Partial registry response for a single crate.

    Attributes:
        crate: Crate metadata.
        versions: Every version published for the crate.
    """

    model_config = ConfigDict(extra="ignore")

    crate: Annotated[CrateInfo, Field(description="Crate metadata")]
    versions: Annotated[
        list[CrateVersion],
        Field(default_factory=list, description="Published versions"),
    ]

    def version_numbers(self, include_yanked: bool = False) -> list[Version]:
        """Return the published version numbers.

        Args:
            include_yanked: Also return versions yanked from the registry.

        Returns:
            Version numbers in response order.
        """
        return [v.num for v in self.versions if include_yanked or not v.yanked]
