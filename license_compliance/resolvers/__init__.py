"""Dependency resolvers package."""

from license_compliance.resolvers.base import BaseResolver
from license_compliance.resolvers.manifest import (
    collect_dependencies,
    extract_license,
    find_manifest,
    load_project_manifest,
    read_manifest,
)
from license_compliance.resolvers.node_modules import (
    NodeModulesResolver,
    resolve_package_path,
)

__all__ = [
    "BaseResolver",
    "NodeModulesResolver",
    "collect_dependencies",
    "extract_license",
    "find_manifest",
    "load_project_manifest",
    "read_manifest",
    "resolve_package_path",
]
