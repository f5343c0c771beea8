"""Policy-related Pydantic models for license-compliance."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from license_compliance.exceptions import ConfigurationError


class Policy(BaseModel):
    """License policy applied to every scanned package.

    An empty ``allowed`` list means anything that is not disallowed passes.
    """

    model_config = {"extra": "forbid", "frozen": True}

    allowed: list[str] = Field(
        default_factory=list,
        description="SPDX identifiers that are accepted",
    )
    disallowed: list[str] = Field(
        default_factory=list,
        description="SPDX identifiers that always fail the check",
    )
    ignore_patterns: list[str] = Field(
        default_factory=list,
        description="Glob patterns for package names exempt from all checks",
    )

    @field_validator("allowed", "disallowed")
    @classmethod
    def _reject_blank_identifiers(cls, value: list[str]) -> list[str]:
        # A blank identifier would be contained in every license string
        for identifier in value:
            if not identifier.strip():
                raise ValueError("license identifiers must not be blank")
        return value

    @field_validator("ignore_patterns")
    @classmethod
    def _compile_patterns(cls, value: list[str]) -> list[str]:
        from license_compliance.analysis.ignores import compile_ignore_pattern

        for pattern in value:
            try:
                compile_ignore_pattern(pattern)
            except ConfigurationError as e:
                raise ValueError(str(e)) from e
        return value


class Violation(BaseModel):
    """A package whose license fails the policy."""

    model_config = {"extra": "forbid"}

    package: str = Field(description="Name of the package with violation")
    license: str = Field(description="License expression as recorded")
    reason: str = Field(description="Why this is a violation")

    def __str__(self) -> str:
        return f"{self.package} ({self.license})"


class Diagnostic(BaseModel):
    """A non-fatal notice produced while scanning or checking.

    The host decides how diagnostics are rendered.
    """

    model_config = {"extra": "forbid"}

    package: Optional[str] = Field(
        default=None,
        description="Package the notice is about (None for project-level notices)",
    )
    message: str = Field(description="Human-readable notice")
