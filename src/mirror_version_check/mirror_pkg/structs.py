from typing import Optional

from pydantic import BaseModel, Field


class VersionListing(BaseModel):
    """All versions published on a mirror, in document order."""

    mirror_url: str = Field(description="The mirror index that was read")
    include_prerelease: bool = Field(description="Whether pre-release versions were listed")
    versions: list[str] = Field(default_factory=list)


class ResolvedVersion(BaseModel):
    """The concrete version a request resolved to."""

    mirror_url: str
    requested: str = Field(description="'latest', a minor version such as '0.12' or a full version")
    version: Optional[str] = Field(default=None, description="None when nothing matched")
