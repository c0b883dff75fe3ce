"""Configuration handling for license-bundler."""
from __future__ import annotations

from license_bundler.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_bundler.config.loader import (
    find_config_file,
    load_config,
    load_config_file,
)
from license_bundler.models.config import BundlerConfig, LicenseOverride

__all__ = [
    "BundlerConfig",
    "DEFAULT_CONFIG_NAMES",
    "LicenseOverride",
    "find_config_file",
    "get_default_config",
    "load_config",
    "load_config_file",
]
