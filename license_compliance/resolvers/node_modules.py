"""Resolver for dependencies installed under node_modules."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

from license_compliance.constants import MANIFEST_NAME, MODULES_DIR, UNKNOWN_VERSION
from license_compliance.exceptions import (
    PackageNotInstalledError,
    PackageResolutionError,
)
from license_compliance.models.package import PackageRecord
from license_compliance.resolvers.base import BaseResolver
from license_compliance.resolvers.manifest import extract_license, read_manifest


def resolve_package_path(
    package_name: str, base_path: Path, cwd: Optional[Path] = None
) -> Path:
    """Locate the install directory of a dependency.

    Looks in the project's node_modules first, then in the node_modules
    of the working directory.

    Raises:
        PackageNotInstalledError: If neither location exists.
        OSError: If a location cannot be checked, e.g. the name is too long.
    """
    candidates = [base_path / MODULES_DIR / package_name]
    if cwd is not None:
        candidates.append(cwd / MODULES_DIR / package_name)

    for candidate in candidates:
        if candidate.exists():
            return candidate

    raise PackageNotInstalledError(f"Package {package_name} not found")


class NodeModulesResolver(BaseResolver):
    """Read license information from installed package manifests."""

    def __init__(self, base_path: Path, cwd: Optional[Path] = None) -> None:
        """Initialize the resolver.

        Args:
            base_path: Directory containing the project manifest.
            cwd: Working directory used as a fallback install root.
        """
        self._base_path = base_path
        self._cwd = cwd

    async def resolve(self, package_name: str) -> PackageRecord:
        """Resolve a dependency without blocking the event loop."""
        return await asyncio.to_thread(self.read_record, package_name)

    def read_record(self, package_name: str) -> PackageRecord:
        """Read a package record synchronously.

        Raises:
            PackageNotInstalledError: If the package is not installed.
            PackageResolutionError: If its install path cannot be checked, or
                its manifest is missing or unreadable.
        """
        try:
            package_path = resolve_package_path(
                package_name, self._base_path, self._cwd
            )
            manifest_path = package_path / MANIFEST_NAME
            has_manifest = manifest_path.is_file()
        except OSError as e:
            raise PackageResolutionError(
                f"Cannot access install path of {package_name}: {e}"
            ) from e

        if not has_manifest:
            raise PackageResolutionError(f"No {MANIFEST_NAME} found for {package_name}")

        try:
            manifest = read_manifest(manifest_path)
        except (OSError, ValueError) as e:
            raise PackageResolutionError(
                f"Cannot read '{manifest_path}': {e}"
            ) from e

        version = manifest.get("version") or UNKNOWN_VERSION
        return PackageRecord(
            name=package_name,
            version=str(version),
            license=extract_license(manifest),
            install_path=str(package_path),
        )
