"""Pydantic data models for license-compliance."""

from license_compliance.models.config import ComplianceOptions, DependencyGroup
from license_compliance.models.package import PackageRecord
from license_compliance.models.policy import Diagnostic, Policy, Violation
from license_compliance.models.report import (
    BuildMessage,
    BuildResult,
    CheckOutcome,
    ComplianceReport,
    ScanOutcome,
    Verbosity,
)

__all__ = [
    "BuildMessage",
    "BuildResult",
    "CheckOutcome",
    "ComplianceOptions",
    "ComplianceReport",
    "DependencyGroup",
    "Diagnostic",
    "PackageRecord",
    "Policy",
    "ScanOutcome",
    "Verbosity",
    "Violation",
]
