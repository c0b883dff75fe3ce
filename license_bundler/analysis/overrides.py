"""License override functionality for manual license corrections."""
from __future__ import annotations

from license_bundler.analysis.expression import parse_license
from license_bundler.models.config import BundlerConfig
from license_bundler.models.package import Package


def apply_license_overrides(
    packages: list[Package],
    config: BundlerConfig,
) -> list[Package]:
    """Replace declared licenses with configured overrides.

    Overrides are applied before bundling, so the overridden license decides
    which files are looked up. Package name matching is case-sensitive. An
    override is parsed like a declared license, so "MIT/Apache-2.0" yields
    a conjunction.

    Args:
        packages: Packages with their declared licenses.
        config: Configuration with overrides dict.

    Returns:
        List of Package with overrides applied.
        If overrides is None or empty, returns packages unchanged.
    """
    if not config.overrides:
        return packages

    result: list[Package] = []
    for pkg in packages:
        if pkg.name in config.overrides:
            override = config.overrides[pkg.name]
            result.append(
                pkg.model_copy(update={"license": parse_license(override.license)})
            )
        else:
            result.append(pkg)

    return result
