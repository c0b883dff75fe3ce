"""Tests for the bundle run context."""
from license_bundler.context import BundleContext
from license_bundler.output.diagnostics import Shell


class TestBundleContext:
    """Tests for BundleContext flags."""

    def test_starts_clean(self, shell: Shell) -> None:
        """Test that a new context has no failures."""
        context = BundleContext(shell)

        assert context.missing_license is False
        assert context.low_quality_license is False
        assert context.shell is shell

    def test_mark_missing_license(self, shell: Shell) -> None:
        """Test that marking a missing license sets only that flag."""
        context = BundleContext(shell)
        context.mark_missing_license()
        context.mark_missing_license()

        assert context.missing_license is True
        assert context.low_quality_license is False

    def test_mark_low_quality_license(self, shell: Shell) -> None:
        """Test that marking a low quality license sets only that flag."""
        context = BundleContext(shell)
        context.mark_low_quality_license()

        assert context.low_quality_license is True
        assert context.missing_license is False
