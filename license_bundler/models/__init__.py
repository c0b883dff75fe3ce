"""Pydantic data models for license-bundler."""

from license_bundler.models.bundle import (
    BundleOutcome,
    Confidence,
    LicenseText,
    Verbosity,
)
from license_bundler.models.config import BundlerConfig, LicenseOverride
from license_bundler.models.license import (
    CustomLicense,
    KnownLicense,
    LicenseObligation,
    MultipleLicenses,
    UnspecifiedLicense,
)
from license_bundler.models.package import Package

__all__ = [
    "BundleOutcome",
    "BundlerConfig",
    "Confidence",
    "CustomLicense",
    "KnownLicense",
    "LicenseObligation",
    "LicenseOverride",
    "LicenseText",
    "MultipleLicenses",
    "Package",
    "UnspecifiedLicense",
    "Verbosity",
]
