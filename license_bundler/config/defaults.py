"""Default configuration values for license-bundler."""

from __future__ import annotations

from license_bundler.models.config import BundlerConfig

# Default configuration file names to search for
DEFAULT_CONFIG_NAMES = [".license-bundler.yaml", ".license-bundler.yml"]


def get_default_config() -> BundlerConfig:
    """Get the default configuration.

    Returns:
        BundlerConfig with the default match threshold and no filters.
    """
    return BundlerConfig()
