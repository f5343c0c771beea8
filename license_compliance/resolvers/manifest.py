"""Project and package manifest reading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from license_compliance.constants import MANIFEST_NAME, UNKNOWN_LICENSE
from license_compliance.exceptions import ManifestError
from license_compliance.models.policy import Diagnostic


def find_manifest(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest package.json at or above a directory.

    Args:
        start_dir: Directory to start from. Defaults to the current working
            directory.

    Returns:
        Path to the manifest, or None if no ancestor has one.
    """
    current = (start_dir or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / MANIFEST_NAME
        if candidate.is_file():
            return candidate
    return None


def read_manifest(path: Path) -> dict[str, Any]:
    """Read a JSON manifest.

    Args:
        path: Path to a package.json file.

    Returns:
        The manifest's top-level object.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not valid JSON or not a JSON object.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(
            f"expected a JSON object at root level, got {type(data).__name__}"
        )
    return data


def load_project_manifest(path: Path) -> dict[str, Any]:
    """Read the project manifest.

    Raises:
        ManifestError: If the manifest is unreadable or malformed.
    """
    try:
        return read_manifest(path)
    except (OSError, ValueError) as e:
        raise ManifestError(f"Cannot read project manifest '{path}': {e}") from e


def collect_dependencies(
    manifest: Mapping[str, Any],
    groups: Sequence[str],
) -> tuple[list[str], list[Diagnostic]]:
    """Collect direct dependency names from the selected groups.

    A name listed in several groups is returned once, at the position of
    the first group it appears in.

    Args:
        manifest: Project manifest.
        groups: Dependency group keys to read, in merge order.

    Returns:
        Tuple of dependency names and diagnostics for malformed groups.
    """
    names: dict[str, None] = {}
    diagnostics: list[Diagnostic] = []

    for group in groups:
        section = manifest.get(group)
        if section is None:
            continue
        if not isinstance(section, Mapping):
            diagnostics.append(
                Diagnostic(
                    message=f"Ignoring '{group}' in project manifest: "
                    f"expected a mapping, got {type(section).__name__}",
                )
            )
            continue
        for name in section:
            names.setdefault(name, None)

    return list(names), diagnostics


def extract_license(manifest: Mapping[str, Any]) -> str:
    """Extract the declared license from a package manifest.

    Supports the ``license`` string, the legacy ``license`` object with a
    ``type`` key, and the legacy ``licenses`` array whose types are joined
    with ``" OR "``.

    Args:
        manifest: Package manifest.

    Returns:
        License expression, or UNKNOWN_LICENSE when none is declared.
    """
    declared = manifest.get("license")
    if isinstance(declared, str) and declared:
        return declared
    if isinstance(declared, Mapping) and declared.get("type"):
        return str(declared["type"])

    legacy = manifest.get("licenses")
    if isinstance(legacy, list) and legacy:
        types = [
            str(entry["type"]) if isinstance(entry, Mapping) else str(entry)
            for entry in legacy
            if (isinstance(entry, Mapping) and entry.get("type"))
            or (isinstance(entry, str) and entry)
        ]
        if types:
            return " OR ".join(types)

    return UNKNOWN_LICENSE
