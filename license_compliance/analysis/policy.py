"""License policy evaluation for a single license expression."""
from __future__ import annotations

from typing import NamedTuple, Optional, Sequence

from license_compliance.analysis.expression import parse_expression
from license_compliance.models.policy import Policy


class LicenseDecision(NamedTuple):
    """Outcome of evaluating one license expression.

    Attributes:
        compliant: Whether the license passes the policy.
        reason: Why it does not pass, None when compliant.
    """

    compliant: bool
    reason: Optional[str] = None


def _contains_any(candidate: str, identifiers: Sequence[str]) -> bool:
    # Substring containment, not equality: "GPL-2.0-only" also matches
    # "LGPL-2.0-only". Known looseness, kept on purpose.
    lowered = candidate.lower()
    return any(identifier.lower() in lowered for identifier in identifiers)


def evaluate_license(license: str, policy: Policy) -> LicenseDecision:
    """Evaluate a license expression against allow and deny lists.

    The deny list is checked first and always wins. The allow list is only
    consulted when it is non-empty, in which case at least one candidate
    must match it.

    Args:
        license: Raw license expression of the package.
        policy: Policy with allowed and disallowed identifiers.

    Returns:
        LicenseDecision describing whether the license is compliant.
    """
    candidates = parse_expression(license) or [license]

    for candidate in candidates:
        if _contains_any(candidate, policy.disallowed):
            return LicenseDecision(
                compliant=False,
                reason=f"License '{candidate}' is not allowed",
            )

    if policy.allowed and not any(
        _contains_any(candidate, policy.allowed) for candidate in candidates
    ):
        return LicenseDecision(
            compliant=False,
            reason=(
                f"None of the licenses '{', '.join(candidates)}' "
                "are in the allowed list"
            ),
        )

    return LicenseDecision(compliant=True)
