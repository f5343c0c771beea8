"""Custom exceptions for license-compliance."""


class LicenseComplianceError(Exception):
    """Base exception for all license-compliance errors."""

    pass


class ConfigurationError(LicenseComplianceError):
    """Exception raised when the policy or configuration is invalid."""

    pass


class ScanError(LicenseComplianceError):
    """Exception raised when dependency discovery fails."""

    pass


class ManifestError(ScanError):
    """Exception raised when the project manifest cannot be read."""

    pass


class ManifestNotFoundError(ManifestError):
    """Exception raised when no project manifest exists above the working directory."""

    pass


class PackageResolutionError(ScanError):
    """Exception raised when a single dependency cannot be resolved."""

    pass


class PackageNotInstalledError(PackageResolutionError):
    """Exception raised when a dependency has no install directory."""

    pass
