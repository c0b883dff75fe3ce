"""Per-run bundle context."""
from __future__ import annotations

from license_bundler.output.diagnostics import Shell


class BundleContext:
    """State shared by every step of one bundle run.

    Holds the diagnostics shell and the two run-wide failure flags. The
    flags only ever go from False to True.
    """

    def __init__(self, shell: Shell) -> None:
        self.shell = shell
        self._missing_license = False
        self._low_quality_license = False

    @property
    def missing_license(self) -> bool:
        """True once any package ended up without a license text."""
        return self._missing_license

    @property
    def low_quality_license(self) -> bool:
        """True once any bundled text was only a low-confidence match."""
        return self._low_quality_license

    def mark_missing_license(self) -> None:
        self._missing_license = True

    def mark_low_quality_license(self) -> None:
        self._low_quality_license = True
