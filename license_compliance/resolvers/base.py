"""Base resolver interface."""

from abc import ABC, abstractmethod

from license_compliance.models.package import PackageRecord


class BaseResolver(ABC):
    """Abstract base class for package resolvers.

    All package resolvers must inherit from this class and implement
    the async resolve() method.
    """

    @abstractmethod
    async def resolve(self, package_name: str) -> PackageRecord:
        """Resolve an installed dependency into a package record.

        Args:
            package_name: The dependency name from the project manifest.

        Returns:
            PackageRecord with version, license and install path.

        Raises:
            PackageResolutionError: If the package cannot be resolved.
        """
