"""Report and build-result Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional

from pydantic import BaseModel, Field

from license_compliance.exceptions import LicenseComplianceError
from license_compliance.models.package import PackageRecord
from license_compliance.models.policy import Diagnostic, Violation


class ComplianceReport(BaseModel):
    """Result of checking a package list against a policy."""

    model_config = {"extra": "forbid"}

    violations: list[Violation] = Field(
        default_factory=list,
        description="Violations in package input order",
    )
    diagnostics: list[Diagnostic] = Field(
        default_factory=list,
        description="Non-fatal notices from scanning and checking",
    )
    checked_packages: int = Field(
        default=0, description="Number of packages evaluated against the policy"
    )
    ignored_packages: list[str] = Field(
        default_factory=list,
        description="Names of packages skipped by ignore patterns",
    )

    @property
    def has_violations(self) -> bool:
        """Check if any package failed the policy."""
        return len(self.violations) > 0


class ScanOutcome(NamedTuple):
    """Result of dependency discovery.

    Attributes:
        packages: Records for every dependency that could be resolved.
        diagnostics: Notices for dependencies that were skipped.
        error: Cause of a failed scan, None on success.
    """

    packages: list[PackageRecord]
    diagnostics: list[Diagnostic]
    error: Optional[LicenseComplianceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CheckOutcome(NamedTuple):
    """Result of a full compliance check.

    Exactly one of ``report`` and ``error`` is set.
    """

    report: Optional[ComplianceReport] = None
    error: Optional[LicenseComplianceError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BuildMessage(BaseModel):
    """A single message handed back to the build host."""

    model_config = {"extra": "forbid"}

    text: str = Field(description="Message shown by the build host")
    location: None = Field(default=None, description="Always None")


class BuildResult(BaseModel):
    """Failure payload returned from the pre-build hook."""

    model_config = {"extra": "forbid"}

    errors: list[BuildMessage] = Field(default_factory=list)


class Verbosity(Enum):
    """Output verbosity levels."""

    QUIET = "quiet"
    NORMAL = "normal"
