"""Configuration handling for license-compliance."""
from __future__ import annotations

from license_compliance.config.defaults import DEFAULT_CONFIG_NAMES, get_default_options
from license_compliance.config.loader import (
    build_policy,
    find_config_file,
    load_config,
    load_config_file,
    parse_options,
)
from license_compliance.models.config import ComplianceOptions

__all__ = [
    "ComplianceOptions",
    "DEFAULT_CONFIG_NAMES",
    "build_policy",
    "find_config_file",
    "get_default_options",
    "load_config",
    "load_config_file",
    "parse_options",
]
