"""Package filtering for ignored packages configuration."""

from __future__ import annotations

from typing import NamedTuple

from license_bundler.models.config import BundlerConfig
from license_bundler.models.package import Package


class FilterResult(NamedTuple):
    """Result of filtering packages.

    Attributes:
        packages: Packages that stay in the bundle.
        ignored_names: Names of packages that were left out.
    """

    packages: list[Package]
    ignored_names: list[str]

    @property
    def ignored_count(self) -> int:
        return len(self.ignored_names)


def filter_ignored_packages(
    packages: list[Package],
    config: BundlerConfig,
) -> FilterResult:
    """Leave out packages listed in `ignored_packages`.

    Matching is case-sensitive on the package name as installed.

    Args:
        packages: Packages to filter.
        config: Configuration with the ignored_packages list.

    Returns:
        FilterResult with kept packages and the names that were ignored.
    """
    ignored = set(config.ignored_packages or ())
    kept = [pkg for pkg in packages if pkg.name not in ignored]
    ignored_names = [pkg.name for pkg in packages if pkg.name in ignored]
    return FilterResult(packages=kept, ignored_names=ignored_names)
