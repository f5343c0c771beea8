"""JSON output formatter for compliance check results."""
import json
from datetime import datetime, timezone
from typing import Any

from license_compliance import __version__
from license_compliance.models.report import CheckOutcome, ComplianceReport
from license_compliance.plugin import to_build_result


class ReportJsonFormatter:
    """Format check outcomes as JSON output for CI/CD integration."""

    def format_outcome(self, outcome: CheckOutcome) -> str:
        """Format a check outcome as JSON string.

        Args:
            outcome: The outcome to format.

        Returns:
            JSON string representation of the outcome.
        """
        output = self._build_output(outcome)
        return json.dumps(output, indent=2)

    def _build_output(self, outcome: CheckOutcome) -> dict[str, Any]:
        report = outcome.report or ComplianceReport()
        build_result = to_build_result(outcome)
        return {
            "check_metadata": self._build_check_metadata(),
            "summary": self._build_summary(outcome, report),
            "violations": [v.model_dump() for v in report.violations],
            "diagnostics": [d.model_dump() for d in report.diagnostics],
            "errors": build_result.model_dump()["errors"] if build_result else [],
        }

    def _build_check_metadata(self) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return {
            "generated_at": timestamp,
            "tool_version": __version__,
        }

    def _build_summary(
        self, outcome: CheckOutcome, report: ComplianceReport
    ) -> dict[str, Any]:
        """Build summary section.

        Args:
            outcome: The check outcome.
            report: The report, empty when the check failed.

        Returns:
            Dictionary with summary statistics.
        """
        if outcome.error is not None:
            status = "error"
        elif report.has_violations:
            status = "violations_found"
        else:
            status = "pass"

        return {
            "status": status,
            "checked_packages": report.checked_packages,
            "violations_count": len(report.violations),
            "warnings_count": len(report.diagnostics),
            "ignored_packages": report.ignored_packages,
        }
