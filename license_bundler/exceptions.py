"""Custom exceptions for license-bundler."""


class LicenseBundlerError(Exception):
    """Base exception for all license-bundler errors."""

    pass


class ConfigurationError(LicenseBundlerError):
    """Exception raised when configuration is invalid."""

    pass


class ScanError(LicenseBundlerError):
    """Exception raised when a package or its directory cannot be scanned."""

    pass


class OutputError(LicenseBundlerError):
    """Exception raised when the bundle cannot be written."""

    pass
