"""Configuration Pydantic models for license-bundler."""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from license_bundler.constants import DEFAULT_MAX_DISTANCE_RATIO


class LicenseOverride(BaseModel):
    """Manual license override for a package.

    Used when the declared license is missing or wrong.
    """

    model_config = {"extra": "forbid"}

    license: str = Field(description="License expression to use instead")
    reason: str = Field(description="Reason for the override")


class BundlerConfig(BaseModel):
    """Configuration for license-bundler."""

    model_config = {"extra": "forbid"}

    max_distance_ratio: float = Field(
        default=DEFAULT_MAX_DISTANCE_RATIO,
        gt=0.0,
        le=1.0,
        description="Edit distance / template length ratio below which a "
        "license text matches its template.",
    )
    ignored_packages: Optional[List[str]] = Field(
        default=None,
        description="List of package names left out of the bundle.",
    )
    overrides: Optional[Dict[str, LicenseOverride]] = Field(
        default=None,
        description="Manual license overrides by package name.",
    )
