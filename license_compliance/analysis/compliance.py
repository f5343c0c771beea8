"""Compliance checking of a package list against a license policy."""
from __future__ import annotations

from typing import Any, Mapping, Sequence, Union

from pydantic import ValidationError

from license_compliance.analysis.ignores import is_ignored
from license_compliance.analysis.policy import evaluate_license
from license_compliance.config.loader import format_validation_errors
from license_compliance.exceptions import ConfigurationError
from license_compliance.models.package import PackageRecord
from license_compliance.models.policy import Diagnostic, Policy, Violation
from license_compliance.models.report import ComplianceReport

PolicyLike = Union[Policy, Mapping[str, Any]]


def _coerce_policy(policy: PolicyLike) -> Policy:
    """Validate the policy before any package is examined.

    Raises:
        ConfigurationError: If the policy is not a Policy or a valid mapping.
    """
    if isinstance(policy, Policy):
        return policy
    if not isinstance(policy, Mapping):
        raise ConfigurationError(
            f"Invalid policy: expected a mapping, got {type(policy).__name__}"
        )
    try:
        return Policy.model_validate(dict(policy))
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid policy: {format_validation_errors(e)}"
        ) from e


def check_compliance(
    packages: Sequence[PackageRecord],
    policy: PolicyLike,
) -> ComplianceReport:
    """Check every package against the policy.

    Packages matching an ignore pattern are skipped entirely. Packages with
    an unknown license produce a diagnostic instead of a violation.

    Args:
        packages: Packages in the order they should be reported.
        policy: Policy instance, or a mapping with ``allowed``,
            ``disallowed`` and ``ignore_patterns`` keys.

    Returns:
        ComplianceReport with violations in package input order.

    Raises:
        ConfigurationError: If the policy is malformed.
    """
    policy = _coerce_policy(policy)

    violations: list[Violation] = []
    diagnostics: list[Diagnostic] = []
    ignored: list[str] = []
    checked = 0

    for pkg in packages:
        if is_ignored(pkg.name, policy.ignore_patterns):
            ignored.append(pkg.name)
            continue

        checked += 1
        if not pkg.has_known_license:
            diagnostics.append(
                Diagnostic(
                    package=pkg.name,
                    message=f"{pkg.name}: No license information found",
                )
            )
            continue

        decision = evaluate_license(pkg.license, policy)
        if not decision.compliant and decision.reason:
            violations.append(
                Violation(
                    package=pkg.name,
                    license=pkg.license,
                    reason=decision.reason,
                )
            )

    return ComplianceReport(
        violations=violations,
        diagnostics=diagnostics,
        checked_packages=checked,
        ignored_packages=ignored,
    )


def format_violations(violations: Sequence[Violation]) -> str:
    """Join violations into a ``name (license)`` list.

    Args:
        violations: Violations to list.

    Returns:
        Comma-separated summary, e.g. ``"b (GPL-3.0-only), d (AGPL-3.0-only)"``.
    """
    return ", ".join(str(violation) for violation in violations)
