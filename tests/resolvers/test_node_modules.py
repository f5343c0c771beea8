"""Tests for the node_modules resolver."""
from pathlib import Path
from typing import Callable
from unittest.mock import patch

import pytest

from license_compliance.exceptions import (
    PackageNotInstalledError,
    PackageResolutionError,
)
from license_compliance.resolvers.node_modules import (
    NodeModulesResolver,
    resolve_package_path,
)


class TestResolvePackagePath:
    """Tests for resolve_package_path function."""

    def test_finds_package_in_base_path(
        self, tmp_path: Path, install_package: Callable[..., Path]
    ) -> None:
        """Test lookup in the project's node_modules."""
        package_dir = install_package(tmp_path, "lodash", {"license": "MIT"})

        assert resolve_package_path("lodash", tmp_path) == package_dir

    def test_falls_back_to_cwd(
        self, tmp_path: Path, install_package: Callable[..., Path]
    ) -> None:
        """Test lookup in the working directory's node_modules."""
        project = tmp_path / "project"
        project.mkdir()
        other = tmp_path / "other"
        package_dir = install_package(other, "lodash", {"license": "MIT"})

        assert resolve_package_path("lodash", project, cwd=other) == package_dir

    def test_scoped_package(
        self, tmp_path: Path, install_package: Callable[..., Path]
    ) -> None:
        """Test that scoped names resolve to nested directories."""
        package_dir = install_package(tmp_path, "@types/node", {"license": "MIT"})

        assert resolve_package_path("@types/node", tmp_path) == package_dir

    def test_missing_package_raises(
        self, tmp_path: Path, install_package: Callable[..., Path]
    ) -> None:
        """Test that a missing package raises PackageNotInstalledError."""
        with pytest.raises(PackageNotInstalledError) as exc_info:
            resolve_package_path("missing", tmp_path, cwd=tmp_path)

        assert str(exc_info.value) == "Package missing not found"


class TestNodeModulesResolver:
    """Tests for NodeModulesResolver class."""

    def test_reads_record(
        self, tmp_path: Path, install_package: Callable[..., Path]
    ) -> None:
        """Test that a record is built from the package manifest."""
        package_dir = install_package(
            tmp_path, "react", {"version": "18.2.0", "license": "MIT"}
        )

        record = NodeModulesResolver(tmp_path).read_record("react")

        assert record.name == "react"
        assert record.version == "18.2.0"
        assert record.license == "MIT"
        assert record.install_path == str(package_dir)

    def test_missing_version(
        self, tmp_path: Path, install_package: Callable[..., Path]
    ) -> None:
        """Test that a missing version is recorded as unknown."""
        install_package(tmp_path, "noversion", {"license": "MIT"})

        record = NodeModulesResolver(tmp_path).read_record("noversion")

        assert record.version == "unknown"

    def test_missing_license(
        self, tmp_path: Path, install_package: Callable[..., Path]
    ) -> None:
        """Test that a missing license is recorded as UNKNOWN."""
        install_package(tmp_path, "nolicense", {"version": "1.0.0"})

        record = NodeModulesResolver(tmp_path).read_record("nolicense")

        assert record.license == "UNKNOWN"

    def test_missing_manifest_raises(
        self, tmp_path: Path, install_package: Callable[..., Path]
    ) -> None:
        """Test that a package directory without package.json is an error."""
        install_package(tmp_path, "bare", None)

        with pytest.raises(PackageResolutionError) as exc_info:
            NodeModulesResolver(tmp_path).read_record("bare")

        assert "No package.json found for bare" in str(exc_info.value)

    def test_unparseable_manifest_raises(
        self, tmp_path: Path, install_package: Callable[..., Path]
    ) -> None:
        """Test that invalid JSON is a resolution error."""
        package_dir = install_package(tmp_path, "broken", None)
        (package_dir / "package.json").write_text("{oops")

        with pytest.raises(PackageResolutionError) as exc_info:
            NodeModulesResolver(tmp_path).read_record("broken")

        assert "Cannot read" in str(exc_info.value)

    def test_inaccessible_install_path_raises(self, tmp_path: Path) -> None:
        """Test that an OS error while locating a package is a resolution error."""
        with patch(
            "license_compliance.resolvers.node_modules.resolve_package_path",
            side_effect=OSError(36, "File name too long"),
        ):
            with pytest.raises(PackageResolutionError) as exc_info:
                NodeModulesResolver(tmp_path).read_record("x" * 300)

        assert "Cannot access install path" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, OSError)

    @pytest.mark.asyncio
    async def test_resolve_is_async(
        self, tmp_path: Path, install_package: Callable[..., Path]
    ) -> None:
        """Test that resolve returns the same record as read_record."""
        install_package(tmp_path, "react", {"version": "18.2.0", "license": "MIT"})
        resolver = NodeModulesResolver(tmp_path)

        record = await resolver.resolve("react")

        assert record == resolver.read_record("react")
