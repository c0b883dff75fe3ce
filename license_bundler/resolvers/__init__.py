"""Package and license metadata resolvers."""

from license_bundler.resolvers.dependency import DependencyResolver
from license_bundler.resolvers.metadata import (
    extract_declared_license,
    license_root,
    package_from_distribution,
)

__all__ = [
    "DependencyResolver",
    "extract_declared_license",
    "license_root",
    "package_from_distribution",
]
