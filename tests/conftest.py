"""Shared fixtures for license-compliance tests."""

import json
from pathlib import Path
from typing import Any, Callable, Optional

import pytest
from click.testing import CliRunner

ProjectFactory = Callable[..., Path]
PackageInstaller = Callable[[Path, str, Optional[dict[str, Any]]], Path]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


def write_package(
    root: Path, name: str, manifest: Optional[dict[str, Any]]
) -> Path:
    """Install a fake package under root/node_modules.

    A manifest of None creates the package directory without a package.json.
    """
    package_dir = root / "node_modules" / name
    package_dir.mkdir(parents=True, exist_ok=True)
    if manifest is not None:
        (package_dir / "package.json").write_text(json.dumps(manifest))
    return package_dir


@pytest.fixture
def install_package() -> PackageInstaller:
    """Provide the fake package installer."""
    return write_package


@pytest.fixture
def make_project(tmp_path: Path) -> ProjectFactory:
    """Create a project with a package.json and installed dependencies.

    Usage: make_project(manifest={...}, packages={"name": {...manifest...}})
    """

    def factory(
        manifest: dict[str, Any],
        packages: Optional[dict[str, Optional[dict[str, Any]]]] = None,
    ) -> Path:
        (tmp_path / "package.json").write_text(json.dumps(manifest))
        for name, package_manifest in (packages or {}).items():
            write_package(tmp_path, name, package_manifest)
        return tmp_path

    return factory
