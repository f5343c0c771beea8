"""Default configuration values for license-compliance."""

from __future__ import annotations

from license_compliance.models.config import ComplianceOptions

# Default configuration file names to search for
DEFAULT_CONFIG_NAMES = [".license-compliance.yaml", ".license-compliance.yml"]


def get_default_options() -> ComplianceOptions:
    """Get the default options.

    Returns:
        ComplianceOptions with all fields unset, which allows every license
        and scans every dependency group.
    """
    return ComplianceOptions()
