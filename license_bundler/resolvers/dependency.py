"""Transitive dependency resolution for installed packages.

Provides DependencyResolver, which lists a root distribution and every
runtime dependency reachable from it.
"""
from importlib.metadata import Distribution, distributions
from typing import Optional

from packaging.requirements import InvalidRequirement, Requirement

from license_bundler.exceptions import ScanError
from license_bundler.models.package import Package
from license_bundler.resolvers.metadata import package_from_distribution


class DependencyResolver:
    """Resolves the transitive dependency closure of an installed package."""

    def __init__(self, dists: Optional[list[Distribution]] = None) -> None:
        """Initialize resolver with an index of installed distributions.

        Args:
            dists: Distributions to index. Defaults to everything installed
                in the current environment.
        """
        self._installed: dict[str, Distribution] = {}
        for dist in dists if dists is not None else distributions():
            name = dist.metadata.get("Name")
            if name:
                self._installed.setdefault(self._normalize(name), dist)

    @staticmethod
    def _normalize(name: str) -> str:
        """Normalize package name per PEP 503 (lowercase, underscores)."""
        return name.lower().replace("-", "_").replace(".", "_")

    def resolve_packages(self, root: str) -> tuple[Package, list[Package]]:
        """Collect the root package and all of its runtime dependencies.

        Requirements whose environment markers do not hold, and requirements
        that only apply to extras, are skipped. Requirements on packages
        that are not installed are ignored. Cycles are visited once.

        Args:
            root: Name of the root distribution.

        Returns:
            Tuple of (root package, all packages including the root) in
            discovery order.

        Raises:
            ScanError: If the root distribution is not installed.
        """
        root_dist = self._installed.get(self._normalize(root))
        if root_dist is None:
            raise ScanError(f"Package '{root}' is not installed")

        visited: set[str] = set()
        packages: list[Package] = []
        pending: list[Distribution] = [root_dist]

        while pending:
            dist = pending.pop(0)
            key = self._normalize(dist.metadata.get("Name", ""))
            if key in visited:
                continue
            visited.add(key)

            package = package_from_distribution(dist)
            if package is not None:
                packages.append(package)

            for req_str in dist.requires or []:
                child = self._resolve_requirement(req_str)
                if child is not None:
                    pending.append(child)

        return packages[0], packages

    def _resolve_requirement(self, req_str: str) -> Optional[Distribution]:
        """Parse a requirement string and look up the installed distribution.

        Args:
            req_str: Requirement string (e.g. "requests>=2.0.0").

        Returns:
            Installed Distribution, or None if the requirement is malformed,
            does not apply, or is not installed.
        """
        try:
            req = Requirement(req_str)
        except InvalidRequirement:
            return None

        if req.marker is not None:
            if "extra" in str(req.marker):
                return None
            if not req.marker.evaluate():
                return None

        return self._installed.get(self._normalize(req.name))

