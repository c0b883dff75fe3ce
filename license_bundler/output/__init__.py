"""Output helpers for license-bundler."""

from license_bundler.output.diagnostics import Shell

__all__ = ["Shell"]
