"""License analysis logic for license-compliance."""
from license_compliance.analysis.compliance import check_compliance, format_violations
from license_compliance.analysis.expression import parse_expression
from license_compliance.analysis.ignores import compile_ignore_pattern, is_ignored
from license_compliance.analysis.policy import LicenseDecision, evaluate_license

__all__ = [
    "LicenseDecision",
    "check_compliance",
    "compile_ignore_pattern",
    "evaluate_license",
    "format_violations",
    "is_ignored",
    "parse_expression",
]
