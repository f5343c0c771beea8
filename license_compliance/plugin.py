"""Pre-build hook that fails the build on license violations."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Awaitable, Callable, Mapping, Optional, Protocol, Union

from rich.console import Console

from license_compliance.analysis.compliance import check_compliance, format_violations
from license_compliance.config.loader import build_policy, parse_options
from license_compliance.constants import PLUGIN_NAME
from license_compliance.exceptions import LicenseComplianceError, ScanError
from license_compliance.models.config import ComplianceOptions
from license_compliance.models.policy import Policy
from license_compliance.models.report import (
    BuildMessage,
    BuildResult,
    CheckOutcome,
    ComplianceReport,
)
from license_compliance.scanner import scan_packages

OnStartCallback = Callable[[], Awaitable[Optional[BuildResult]]]
OptionsLike = Union[ComplianceOptions, Mapping[str, Any], None]


class BuildHost(Protocol):
    """Build tool that accepts "before build starts" callbacks."""

    def on_start(self, callback: OnStartCallback) -> None: ...


async def run_check(
    options: ComplianceOptions,
    cwd: Optional[Path] = None,
    policy: Optional[Policy] = None,
    console: Optional[Console] = None,
    show_progress: bool = False,
) -> CheckOutcome:
    """Scan dependencies and check them against the configured policy.

    Args:
        options: Validated compliance options.
        cwd: Directory to start the manifest search from.
        policy: Prebuilt policy. Built from the options when omitted.
        console: Optional Rich Console for progress display.
        show_progress: Whether to show progress indicator.

    Returns:
        CheckOutcome holding the report, or the error that stopped the check.
        Errors other than LicenseComplianceError are wrapped in a ScanError.
        Scan diagnostics are merged ahead of the engine's diagnostics.
    """
    try:
        if policy is None:
            policy = build_policy(options)
        scan = await scan_packages(
            options.dependency_groups,
            cwd=cwd,
            console=console,
            show_progress=show_progress,
        )
        if scan.error is not None:
            return CheckOutcome(error=scan.error)
        report = check_compliance(scan.packages, policy)
    except LicenseComplianceError as e:
        return CheckOutcome(error=e)
    except Exception as e:
        wrapped = ScanError(str(e) or type(e).__name__)
        wrapped.__cause__ = e
        return CheckOutcome(error=wrapped)

    return CheckOutcome(
        report=report.model_copy(
            update={"diagnostics": scan.diagnostics + report.diagnostics}
        )
    )


def to_build_result(outcome: CheckOutcome) -> Optional[BuildResult]:
    """Map a check outcome onto the build host's failure payload.

    Returns:
        None when the check passed, otherwise a BuildResult with exactly
        one error message.
    """
    if outcome.error is not None:
        text = f"License check failed: {outcome.error}"
    elif outcome.report is not None and outcome.report.has_violations:
        text = f"License violations found: {format_violations(outcome.report.violations)}"
    else:
        return None
    return BuildResult(errors=[BuildMessage(text=text)])


class LicenseCompliancePlugin:
    """License compliance plugin for build hosts.

    Register it with ``setup(build)`` on a host exposing ``on_start``, or
    await ``on_start()`` directly from a build script.
    """

    name = PLUGIN_NAME

    def __init__(
        self,
        options: OptionsLike = None,
        cwd: Optional[Path] = None,
    ) -> None:
        """Initialize the plugin.

        Args:
            options: Compliance options, as a model or a plain mapping.
            cwd: Directory to start the manifest search from. Defaults to
                the working directory at the time the hook runs.

        Raises:
            ConfigurationError: If the options are malformed.
        """
        self.options = parse_options(options)
        self.policy = build_policy(self.options)
        self.cwd = cwd
        self.last_report: Optional[ComplianceReport] = None

    def setup(self, build: BuildHost) -> None:
        """Register the pre-build hook with a build host."""
        build.on_start(self.on_start)

    async def on_start(self) -> Optional[BuildResult]:
        """Run the compliance check before the build starts.

        Returns:
            None on success, or a BuildResult describing the failure.
        """
        outcome = await run_check(self.options, cwd=self.cwd, policy=self.policy)
        self.last_report = outcome.report
        return to_build_result(outcome)


def license_compliance_plugin(
    options: OptionsLike = None,
) -> LicenseCompliancePlugin:
    """Create the license compliance plugin.

    Args:
        options: Compliance options, as a model or a plain mapping.

    Returns:
        Configured LicenseCompliancePlugin.
    """
    return LicenseCompliancePlugin(options)
