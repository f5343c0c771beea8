"""Package-related Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from license_compliance.constants import UNKNOWN_LICENSE


class PackageRecord(BaseModel):
    """License information for a single installed dependency.

    Created by discovery and never modified afterwards.
    """

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(min_length=1, description="Package name")
    version: str = Field(description="Installed package version")
    license: str = Field(
        description="Raw license expression, or the UNKNOWN sentinel",
    )
    install_path: str = Field(
        default="", description="Directory the package is installed in"
    )

    @property
    def has_known_license(self) -> bool:
        """Check if the package declared any license.

        Returns:
            False if the license is the UNKNOWN sentinel, True otherwise.
        """
        return self.license != UNKNOWN_LICENSE
