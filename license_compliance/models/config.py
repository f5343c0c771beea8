"""Configuration Pydantic models for license-compliance."""
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from license_compliance.constants import DEPENDENCY_GROUPS
from license_compliance.models.policy import Policy

DependencyGroup = Literal[
    "dependencies",
    "devDependencies",
    "optionalDependencies",
    "peerDependencies",
]


class ComplianceOptions(BaseModel):
    """User-facing configuration for the compliance check.

    All fields are optional. Missing lists behave as empty lists, and a
    missing ``dependencies`` list scans every dependency group.
    """

    model_config = {"extra": "forbid"}

    allowed: Optional[List[str]] = Field(
        default=None,
        description="List of allowed SPDX license identifiers. "
        "If set, packages must match at least one of them.",
    )
    disallowed: Optional[List[str]] = Field(
        default=None,
        description="List of disallowed SPDX license identifiers. "
        "Matching packages are always flagged.",
    )
    ignores: Optional[List[str]] = Field(
        default=None,
        description="Glob patterns for package names to skip, e.g. 'eslint-*'.",
    )
    dependencies: Optional[List[DependencyGroup]] = Field(
        default=None,
        description="Dependency groups of the project manifest to scan.",
    )

    @property
    def dependency_groups(self) -> list[str]:
        """Dependency groups to scan, in manifest merge order.

        Returns:
            The configured groups ordered like DEPENDENCY_GROUPS, or all
            groups when none are configured.
        """
        if self.dependencies is None:
            return list(DEPENDENCY_GROUPS)
        selected = set(self.dependencies)
        return [group for group in DEPENDENCY_GROUPS if group in selected]

    def to_policy(self) -> Policy:
        """Build the engine policy from these options.

        Raises:
            pydantic.ValidationError: If an identifier or pattern is malformed.
        """
        return Policy(
            allowed=self.allowed or [],
            disallowed=self.disallowed or [],
            ignore_patterns=self.ignores or [],
        )
