"""Output formatters for license-compliance."""
from license_compliance.output.report_json import ReportJsonFormatter
from license_compliance.output.terminal import TerminalFormatter

__all__ = [
    "ReportJsonFormatter",
    "TerminalFormatter",
]
