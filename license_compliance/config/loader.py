"""Configuration file discovery and loading for license-compliance."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from license_compliance.config.defaults import DEFAULT_CONFIG_NAMES, get_default_options
from license_compliance.exceptions import ConfigurationError
from license_compliance.models.config import ComplianceOptions
from license_compliance.models.policy import Policy


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find configuration file in the specified directory.

    Searches for `.license-compliance.yaml` first, then `.license-compliance.yml`.

    Args:
        start_dir: Directory to search. Defaults to current working directory.

    Returns:
        Path to the configuration file if found, None otherwise.
    """
    search_dir = start_dir or Path.cwd()
    for name in DEFAULT_CONFIG_NAMES:
        config_path = search_dir / name
        if config_path.exists():
            return config_path
    return None


def parse_options(
    data: Union[ComplianceOptions, Mapping[str, Any], None],
    source: str = "options",
) -> ComplianceOptions:
    """Validate user-supplied options.

    Args:
        data: Options instance, raw mapping, or None for defaults.
        source: Where the options came from, used in error messages.

    Returns:
        Validated ComplianceOptions instance.

    Raises:
        ConfigurationError: If the options are malformed, including unknown
            dependency group names.
    """
    if data is None:
        return get_default_options()
    if isinstance(data, ComplianceOptions):
        return data
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"Invalid configuration in '{source}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )

    try:
        return ComplianceOptions.model_validate(dict(data))
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in '{source}': {format_validation_errors(e)}"
        ) from e


def build_policy(options: ComplianceOptions) -> Policy:
    """Build the engine policy from validated options.

    Raises:
        ConfigurationError: If an identifier is blank or an ignore pattern
            cannot be compiled.
    """
    try:
        return options.to_policy()
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid policy: {format_validation_errors(e)}"
        ) from e


def load_config_file(path: Path) -> ComplianceOptions:
    """Load and validate configuration from a YAML file.

    Args:
        path: Path to the configuration file.

    Returns:
        Validated ComplianceOptions instance.

    Raises:
        ConfigurationError: If file cannot be read, has invalid YAML,
            or fails Pydantic validation.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{path}': {e}"
        ) from e

    # Handle empty files - return default options
    if not content.strip():
        return get_default_options()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML syntax in '{path}': {e}"
        ) from e

    # Handle YAML that parses to None (empty or just comments)
    if data is None:
        return get_default_options()

    return parse_options(data, source=str(path))


def format_validation_errors(error: ValidationError) -> str:
    """Format Pydantic validation errors into a readable string.

    Args:
        error: The Pydantic ValidationError.

    Returns:
        Formatted error message string.
    """
    messages: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        msg = err["msg"]
        messages.append(f"{loc}: {msg}")
    return "; ".join(messages)


def load_config(
    config_path: Optional[str] = None,
    start_dir: Path | None = None,
) -> ComplianceOptions:
    """Load configuration from file or use defaults.

    If a config_path is provided, loads from that file.
    Otherwise, searches for a configuration file in ``start_dir``.
    If no file is found, returns default options.

    Args:
        config_path: Optional path to configuration file.
            If provided, must exist and be valid.
        start_dir: Directory to search when no path is given.
            Defaults to current working directory.

    Returns:
        ComplianceOptions with loaded or default values.

    Raises:
        ConfigurationError: If the specified config file is invalid,
            or if auto-discovered config file is invalid.
    """
    if config_path is not None:
        # User specified a path - load it (Click validates existence)
        return load_config_file(Path(config_path))

    discovered = find_config_file(start_dir)
    if discovered is not None:
        return load_config_file(discovered)

    return get_default_options()
