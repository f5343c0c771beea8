"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from license_compliance.models.report import ComplianceReport, Verbosity


class TerminalFormatter:
    """Format compliance reports for terminal display using Rich.

    Violations are shown as a table, diagnostics as yellow notices.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        verbosity: Verbosity = Verbosity.NORMAL,
        error_console: Optional[Console] = None,
    ) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
            verbosity: Output verbosity level.
            error_console: Console for diagnostics. Defaults to a stderr
                Console when no console is given, else to ``console``.
        """
        self._console = console if console is not None else Console()
        if error_console is None:
            error_console = Console(stderr=True) if console is None else self._console
        self._error_console = error_console
        self._verbosity = verbosity

    def format_report(self, report: ComplianceReport) -> None:
        """Format and display a compliance report.

        Args:
            report: The report to display.
        """
        if self._verbosity == Verbosity.QUIET:
            self._print_quiet_output(report)
            return

        self._print_diagnostics(report)
        self._print_summary(report)

        if report.has_violations:
            table = Table(title="License Violations")
            table.add_column("Package", style="cyan", no_wrap=True)
            table.add_column("License", style="yellow")
            table.add_column("Reason", style="red")

            # Keep the order packages were checked in
            for violation in report.violations:
                table.add_row(
                    escape(violation.package),
                    escape(violation.license),
                    escape(violation.reason),
                )

            self._console.print(table)

    def _print_quiet_output(self, report: ComplianceReport) -> None:
        """Print minimal output for quiet mode.

        Args:
            report: The report to display.
        """
        if not report.has_violations:
            self._console.print(
                f"[green]PASS[/green] - {report.checked_packages} packages checked"
            )
            return

        self._console.print(
            f"[red]VIOLATIONS FOUND[/red] - "
            f"{len(report.violations)} package(s) violate the license policy"
        )
        for violation in report.violations:
            self._console.print(
                f"  - {escape(violation.package)}: [red]{escape(violation.reason)}[/red]"
            )

    def _print_diagnostics(self, report: ComplianceReport) -> None:
        for diagnostic in report.diagnostics:
            self._error_console.print(
                f"[yellow]Warning: {escape(diagnostic.message)}[/yellow]"
            )
        if report.diagnostics:
            self._error_console.print("")

    def _print_summary(self, report: ComplianceReport) -> None:
        """Print summary panel.

        Args:
            report: The report to summarize.
        """
        if report.has_violations:
            status = "VIOLATIONS FOUND"
            status_color = "red"
        else:
            status = "PASS"
            status_color = "green"

        summary_lines = [
            f"Packages Checked: {report.checked_packages}",
            f"Violations: {len(report.violations)}",
            f"Warnings: {len(report.diagnostics)}",
        ]

        if report.ignored_packages:
            names_str = escape(", ".join(report.ignored_packages[:3]))
            if len(report.ignored_packages) > 3:
                names_str += f", ... (+{len(report.ignored_packages) - 3} more)"
            summary_lines.append(
                f"Packages Ignored: {len(report.ignored_packages)} ({names_str})"
            )

        summary_lines.extend([
            "",
            f"Status: [{status_color}]{status}[/{status_color}]",
        ])

        panel = Panel(
            "\n".join(summary_lines),
            title="[bold]LICENSE COMPLIANCE[/bold]",
            border_style=status_color,
        )
        self._console.print(panel)
