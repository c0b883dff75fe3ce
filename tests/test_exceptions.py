"""Tests for custom exceptions."""

import pytest

from license_bundler.exceptions import (
    ConfigurationError,
    LicenseBundlerError,
    OutputError,
    ScanError,
)


class TestExceptionHierarchy:
    """Tests for exception hierarchy."""

    def test_license_bundler_error_is_exception(self) -> None:
        """Test that LicenseBundlerError inherits from Exception."""
        assert issubclass(LicenseBundlerError, Exception)

    @pytest.mark.parametrize("error_cls", [ConfigurationError, ScanError, OutputError])
    def test_errors_inherit_from_base(self, error_cls: type) -> None:
        """Test that every error inherits from LicenseBundlerError."""
        assert issubclass(error_cls, LicenseBundlerError)

    def test_configuration_error_can_be_raised(self) -> None:
        """Test that ConfigurationError can be raised with a message."""
        with pytest.raises(LicenseBundlerError, match="Invalid config file"):
            raise ConfigurationError("Invalid config file")

    def test_scan_error_can_be_raised(self) -> None:
        """Test that ScanError can be raised with a message."""
        try:
            raise ScanError("Cannot read package directory")
        except LicenseBundlerError as e:
            assert str(e) == "Cannot read package directory"
        else:
            raise AssertionError("ScanError was not raised")

    def test_output_error_can_be_raised(self) -> None:
        """Test that OutputError can be raised with a message."""
        try:
            raise OutputError("Cannot write bundle")
        except LicenseBundlerError as e:
            assert str(e) == "Cannot write bundle"
        else:
            raise AssertionError("OutputError was not raised")
