"""Scanner module for direct dependency discovery."""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Awaitable, Optional, Sequence

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from license_compliance.constants import DEPENDENCY_GROUPS, MAX_CONCURRENT_LOOKUPS
from license_compliance.exceptions import (
    ManifestError,
    ManifestNotFoundError,
    PackageNotInstalledError,
    PackageResolutionError,
)
from license_compliance.models.package import PackageRecord
from license_compliance.models.policy import Diagnostic
from license_compliance.models.report import ScanOutcome
from license_compliance.resolvers.base import BaseResolver
from license_compliance.resolvers.manifest import (
    collect_dependencies,
    find_manifest,
    load_project_manifest,
)
from license_compliance.resolvers.node_modules import NodeModulesResolver

LookupResult = tuple[Optional[PackageRecord], Optional[Diagnostic]]


async def _scan_one(
    package_name: str,
    resolver: BaseResolver,
    semaphore: asyncio.Semaphore,
) -> LookupResult:
    """Resolve a single dependency, turning failures into a diagnostic."""
    async with semaphore:
        try:
            return await resolver.resolve(package_name), None
        except PackageNotInstalledError:
            message = f"Skipping {package_name}: not found (possibly a peer dependency)"
        except (PackageResolutionError, OSError) as e:
            message = f"Failed to scan {package_name}: {e}"
    return None, Diagnostic(package=package_name, message=message)


async def resolve_packages(
    package_names: Sequence[str],
    resolver: BaseResolver,
    console: Optional[Console] = None,
    show_progress: bool = True,
) -> tuple[list[PackageRecord], list[Diagnostic]]:
    """Resolve dependencies concurrently.

    A dependency that cannot be resolved is left out of the result and
    reported as a diagnostic; it never aborts the other lookups.

    Args:
        package_names: Dependency names to resolve.
        resolver: Resolver used for every lookup.
        console: Optional Rich Console for progress display.
        show_progress: Whether to show progress indicator (default: True).

    Returns:
        Tuple of resolved records and diagnostics, both in input order.
    """
    semaphore = asyncio.Semaphore(MAX_CONCURRENT_LOOKUPS)
    tasks = [_scan_one(name, resolver, semaphore) for name in package_names]

    if console is not None and show_progress and len(tasks) > 0:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            task_id = progress.add_task(
                f"Reading licenses for {len(tasks)} packages...",
                total=len(tasks),
            )

            async def tracked(coro: Awaitable[LookupResult]) -> LookupResult:
                result = await coro
                progress.advance(task_id)
                return result

            results = list(await asyncio.gather(*(tracked(task) for task in tasks)))
    else:
        results = list(await asyncio.gather(*tasks))

    packages = [record for record, _ in results if record is not None]
    diagnostics = [diag for _, diag in results if diag is not None]
    return packages, diagnostics


async def scan_packages(
    dependency_groups: Optional[Sequence[str]] = None,
    cwd: Optional[Path] = None,
    console: Optional[Console] = None,
    show_progress: bool = True,
) -> ScanOutcome:
    """Discover direct dependencies and read their declared licenses.

    Args:
        dependency_groups: Manifest groups to scan. Defaults to all groups.
        cwd: Directory to start the manifest search from. Defaults to the
            current working directory.
        console: Optional Rich Console for progress display.
        show_progress: Whether to show progress indicator (default: True).

    Returns:
        ScanOutcome with the resolved packages, or with the error when no
        readable project manifest exists.
    """
    cwd = cwd or Path.cwd()
    groups = list(
        DEPENDENCY_GROUPS if dependency_groups is None else dependency_groups
    )

    manifest_path = find_manifest(cwd)
    if manifest_path is None:
        return ScanOutcome(
            packages=[],
            diagnostics=[],
            error=ManifestNotFoundError("package.json not found"),
        )

    try:
        manifest = load_project_manifest(manifest_path)
    except ManifestError as e:
        return ScanOutcome(packages=[], diagnostics=[], error=e)

    names, diagnostics = collect_dependencies(manifest, groups)
    resolver = NodeModulesResolver(base_path=manifest_path.parent, cwd=cwd)
    packages, lookup_diagnostics = await resolve_packages(
        names, resolver, console=console, show_progress=show_progress
    )

    return ScanOutcome(packages=packages, diagnostics=diagnostics + lookup_diagnostics)
