"""Constants for license-compliance."""

# Exit codes
EXIT_SUCCESS = 0  # No violations found
EXIT_VIOLATIONS = 1  # License violations found
EXIT_ERROR = 2  # Check failed due to error

# Sentinel recorded when a package declares no license
UNKNOWN_LICENSE = "UNKNOWN"

# Recorded when a package manifest has no version
UNKNOWN_VERSION = "unknown"

MANIFEST_NAME = "package.json"
MODULES_DIR = "node_modules"

# Merge order matters: the first group a name appears in fixes its position
DEPENDENCY_GROUPS = (
    "dependencies",
    "devDependencies",
    "optionalDependencies",
    "peerDependencies",
)

# Upper bound on concurrent package manifest lookups
MAX_CONCURRENT_LOOKUPS = 16

PLUGIN_NAME = "license-compliance"
