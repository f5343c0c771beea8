"""CLI entry point for license-compliance."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from license_compliance import __version__
from license_compliance.config import ComplianceOptions, load_config, parse_options
from license_compliance.constants import (
    DEPENDENCY_GROUPS,
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_VIOLATIONS,
)
from license_compliance.exceptions import LicenseComplianceError
from license_compliance.models.report import CheckOutcome, Verbosity
from license_compliance.output.report_json import ReportJsonFormatter
from license_compliance.output.terminal import TerminalFormatter
from license_compliance.plugin import run_check, to_build_result

# Module-level console for consistent output
_console = Console()
# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """License Compliance - Fail builds on dependency license violations.

    Reads the direct dependencies of the nearest package.json, collects
    their declared licenses and checks them against an allow-list,
    a deny-list and ignore patterns.

    \b
    Examples:
        license-compliance check
        license-compliance check --disallowed GPL-3.0-only
        license-compliance check --allowed MIT --allowed Apache-2.0
        license-compliance check --format json
    """
    pass


@main.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.option(
    "--allowed",
    "-a",
    multiple=True,
    help="Allowed SPDX license identifier (repeatable).",
)
@click.option(
    "--disallowed",
    "-d",
    multiple=True,
    help="Disallowed SPDX license identifier (repeatable).",
)
@click.option(
    "--ignore",
    "-i",
    "ignores",
    multiple=True,
    help="Glob pattern of package names to skip (repeatable).",
)
@click.option(
    "--dependencies",
    "dependency_groups",
    type=click.Choice(DEPENDENCY_GROUPS),
    multiple=True,
    help="Dependency group to scan (repeatable, default: all).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "json"], case_sensitive=False),
    default="terminal",
    help="Output format for check results (default: terminal).",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Show only the status line and violations.",
)
@click.option(
    "--cwd",
    "cwd",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory to start the package.json search from.",
)
def check(
    config_path: str | None,
    allowed: tuple[str, ...],
    disallowed: tuple[str, ...],
    ignores: tuple[str, ...],
    dependency_groups: tuple[str, ...],
    output_format: str,
    quiet_flag: bool,
    cwd: str | None,
) -> None:
    """Check dependency licenses against the configured policy.

    Command line values extend the values of the configuration file.

    \b
    Examples:
        license-compliance check
        license-compliance check --ignore 'eslint-*' --disallowed GPL-3.0-only
        license-compliance check --dependencies dependencies
        license-compliance check --config custom-config.yaml
        license-compliance check --quiet
    """
    format_value = output_format.lower()
    verbosity = Verbosity.QUIET if quiet_flag else Verbosity.NORMAL
    start_dir = Path(cwd) if cwd else None

    try:
        options = _merge_options(
            load_config(config_path, start_dir=start_dir),
            allowed=allowed,
            disallowed=disallowed,
            ignores=ignores,
            dependency_groups=dependency_groups,
        )
    except LicenseComplianceError as e:
        _display_error(f"{type(e).__name__}: {e}", format_value)
        sys.exit(EXIT_ERROR)

    show_progress = format_value == "terminal" and verbosity != Verbosity.QUIET
    outcome = asyncio.run(
        run_check(
            options,
            cwd=start_dir,
            console=_console if show_progress else None,
            show_progress=show_progress,
        )
    )

    _display_outcome(outcome, format_value, verbosity)

    if outcome.error is not None:
        sys.exit(EXIT_ERROR)
    if outcome.report is not None and outcome.report.has_violations:
        sys.exit(EXIT_VIOLATIONS)
    sys.exit(EXIT_SUCCESS)


def _merge_options(
    options: ComplianceOptions,
    allowed: tuple[str, ...],
    disallowed: tuple[str, ...],
    ignores: tuple[str, ...],
    dependency_groups: tuple[str, ...],
) -> ComplianceOptions:
    """Extend file options with command line values.

    Raises:
        ConfigurationError: If the merged options are invalid.
    """
    data = options.model_dump()

    def extend(key: str, values: tuple[str, ...]) -> None:
        if values:
            data[key] = (data[key] or []) + list(values)

    extend("allowed", allowed)
    extend("disallowed", disallowed)
    extend("ignores", ignores)
    if dependency_groups:
        data["dependencies"] = list(dependency_groups)

    return parse_options(data, source="command line")


def _display_outcome(
    outcome: CheckOutcome, format_type: str, verbosity: Verbosity
) -> None:
    """Display a check outcome in the specified format.

    Args:
        outcome: The outcome to display.
        format_type: Output format (terminal, json).
        verbosity: Output verbosity level.
    """
    if format_type == "json":
        click.echo(ReportJsonFormatter().format_outcome(outcome))
        return

    if outcome.report is not None:
        TerminalFormatter(
            console=_console, verbosity=verbosity, error_console=_error_console
        ).format_report(outcome.report)

    build_result = to_build_result(outcome)
    if build_result is not None:
        for message in build_result.errors:
            _display_error(message.text, format_type)


def _display_error(message: str, format_type: str) -> None:
    """Display error message to user.

    All errors are written to stderr for consistent CI/CD behavior.

    Args:
        message: The message to display.
        format_type: Output format type for styling.
    """
    if format_type == "terminal":
        _error_console.print(f"[red bold]Error: {escape(message)}[/red bold]")
    else:
        click.echo(f"Error: {message}", err=True)


if __name__ == "__main__":
    main()
