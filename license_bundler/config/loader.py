"""Configuration file discovery and loading for license-bundler."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from license_bundler.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_bundler.exceptions import ConfigurationError
from license_bundler.models.config import BundlerConfig


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find a configuration file in the given directory.

    `.license-bundler.yaml` is preferred over `.license-bundler.yml`.

    Args:
        start_dir: Directory to search. Defaults to current working directory.

    Returns:
        Path to the configuration file if found, None otherwise.
    """
    search_dir = start_dir or Path.cwd()
    candidates = (search_dir / name for name in DEFAULT_CONFIG_NAMES)
    return next((path for path in candidates if path.is_file()), None)


def _read_yaml(path: Path) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{path}': {e}"
        ) from e

    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e


def load_config_file(path: Path) -> BundlerConfig:
    """Load and validate configuration from a YAML file.

    Empty files and files holding only comments yield the defaults.

    Args:
        path: Path to the configuration file.

    Returns:
        Validated BundlerConfig instance.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid YAML,
            or does not describe a valid configuration.
    """
    data = _read_yaml(path)
    if data is None:
        return get_default_config()

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )

    try:
        return BundlerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in '{path}': {_format_validation_errors(e)}"
        ) from e


def _format_validation_errors(error: ValidationError) -> str:
    """Join Pydantic errors as `location: message` pairs."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'root'}: {err['msg']}"
        for err in error.errors()
    )


def load_config(
    config_path: str | None = None, start_dir: Path | None = None
) -> BundlerConfig:
    """Load configuration from an explicit file, a discovered file or defaults.

    Args:
        config_path: Optional path to a configuration file that must exist.
        start_dir: Directory searched when no path is given (default: cwd).

    Returns:
        BundlerConfig with loaded or default values.

    Raises:
        ConfigurationError: If the selected configuration file is invalid.
    """
    if config_path is not None:
        return load_config_file(Path(config_path))

    discovered = find_config_file(start_dir)
    if discovered is None:
        return get_default_config()
    return load_config_file(discovered)
