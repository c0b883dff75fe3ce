"""License text candidate discovery.

Only the package's own directory is scanned; subdirectories are ignored.
Entries are visited in sorted name order so results are reproducible
across filesystems.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Optional

from license_bundler.analysis.similarity import TemplateMatcher
from license_bundler.constants import GENERIC_LICENSE_NAMES
from license_bundler.exceptions import ScanError
from license_bundler.models.bundle import Confidence, LicenseText
from license_bundler.models.license import (
    CustomLicense,
    KnownLicense,
    LicenseObligation,
)
from license_bundler.models.package import Package
from license_bundler.output.diagnostics import Shell

# File names that carry the text of one specific well-known license
SPECIFIC_LICENSE_NAMES: dict[str, str] = {
    "MIT": "LICENSE-MIT",
    "Apache-2.0": "LICENSE-APACHE",
}


def is_generic_license_name(name: str) -> bool:
    """Check if a file name is a bare LICENSE-style name (case-insensitive)."""
    return name.upper() in GENERIC_LICENSE_NAMES


def is_specific_license_name(name: str, license: LicenseObligation) -> bool:
    """Check if a file name is conventionally tied to the given license.

    Args:
        name: File name without directory.
        license: A single license obligation.

    Returns:
        True for `LICENSE-MIT` / `LICENSE-APACHE` with MIT / Apache-2.0,
        and for the custom identifier itself or `LICENSE-<custom>`
        (case-insensitive) with a custom license. Other well-known licenses
        never match and rely on generic discovery.
    """
    if isinstance(license, KnownLicense):
        expected = SPECIFIC_LICENSE_NAMES.get(license.id)
        return expected is not None and name == expected
    if isinstance(license, CustomLicense):
        upper = name.upper()
        custom = license.text.upper()
        return upper == custom or upper == f"LICENSE-{custom}"
    return False


def _iter_files(root: Path) -> Iterator[Path]:
    """Yield regular files directly inside root, sorted by name.

    Raises:
        ScanError: If the directory cannot be listed.
    """
    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise ScanError(f"Cannot read package directory '{root}': {e}") from e

    for entry in entries:
        try:
            if entry.is_file():
                yield Path(entry.path)
        except OSError:
            continue


def read_text(path: Path) -> Optional[str]:
    """Read a candidate file as UTF-8 text.

    Returns:
        File content, or None if the file cannot be read or decoded.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


class CandidateLocator:
    """Finds license text candidates in package directories."""

    def __init__(
        self, matcher: TemplateMatcher, shell: Optional[Shell] = None
    ) -> None:
        """Initialize the locator.

        Args:
            matcher: Template matcher used to score each candidate.
            shell: Optional diagnostics sink for progress messages.
        """
        self._matcher = matcher
        self._shell = shell

    def _check(self, path: Path, text: str, license: LicenseObligation) -> bool:
        if self._shell is not None:
            self._shell.info(f"checking {path} against {license}")
        return self._matcher.matches(text, license)

    def find_generic_license_text(self, package: Package) -> Optional[LicenseText]:
        """Find a generically named license file for the whole obligation.

        Only the first readable `LICENSE`, `LICENSE.md` or `LICENSE.txt`
        (any case) is considered.

        Args:
            package: Package to inspect.

        Returns:
            LicenseText that is CONFIDENT if it matches the package's
            license template(s) and UNSURE otherwise, or None if no
            such file exists.

        Raises:
            ScanError: If the package directory cannot be listed.
        """
        if package.root is None:
            return None

        for path in _iter_files(package.root):
            if not is_generic_license_name(path.name):
                continue
            text = read_text(path)
            if text is None:
                continue
            matches = self._check(path, text, package.license)
            return LicenseText(
                path=path,
                text=text,
                confidence=Confidence.CONFIDENT if matches else Confidence.UNSURE,
            )
        return None

    def find_license_text(
        self, package: Package, license: LicenseObligation
    ) -> list[LicenseText]:
        """Find every specifically named license file for one license.

        Args:
            package: Package to inspect.
            license: A single license of the package's obligation.

        Returns:
            LicenseText per readable matching file, CONFIDENT if it matches
            the license template and SEMI_CONFIDENT otherwise.

        Raises:
            ScanError: If the package directory cannot be listed.
        """
        if package.root is None:
            return []

        texts: list[LicenseText] = []
        for path in _iter_files(package.root):
            if not is_specific_license_name(path.name, license):
                continue
            text = read_text(path)
            if text is None:
                continue
            matches = self._check(path, text, license)
            texts.append(
                LicenseText(
                    path=path,
                    text=text,
                    confidence=(
                        Confidence.CONFIDENT if matches else Confidence.SEMI_CONFIDENT
                    ),
                )
            )
        return texts
