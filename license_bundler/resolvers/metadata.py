"""Installed distribution metadata: declared licenses and license directories."""

from __future__ import annotations

from importlib.metadata import Distribution
from pathlib import Path
from typing import Any, Optional

from license_bundler.analysis.expression import parse_license
from license_bundler.models.package import Package

# Mapping of Trove classifiers to SPDX identifiers
CLASSIFIER_TO_SPDX: dict[str, str] = {
    "License :: OSI Approved :: MIT License": "MIT",
    "License :: OSI Approved :: Apache Software License": "Apache-2.0",
    "License :: OSI Approved :: BSD License": "BSD-3-Clause",
    "License :: OSI Approved :: GNU General Public License v3 (GPLv3)": "GPL-3.0",
    "License :: OSI Approved :: GNU General Public License v2 (GPLv2)": "GPL-2.0",
    "License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)": (
        "LGPL-3.0"
    ),
    "License :: OSI Approved :: ISC License (ISCL)": "ISC",
    "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)": "MPL-2.0",
    "License :: OSI Approved :: The Unlicense (Unlicense)": "Unlicense",
    "License :: OSI Approved :: zlib/libpng License": "Zlib",
    "License :: CC0 1.0 Universal (CC0 1.0) Public Domain Dedication": "CC0-1.0",
}

_NO_LICENSE_VALUES = ("UNKNOWN", "NONE", "")

_METADATA_FILES = ("METADATA", "PKG-INFO")
_METADATA_DIR_SUFFIXES = (".dist-info", ".egg-info")


def _get_all(metadata: Any, key: str) -> list[str]:
    values = metadata.get_all(key) if hasattr(metadata, "get_all") else None
    return list(values or [])


def extract_declared_license(metadata: Any) -> Optional[str]:
    """Extract the declared license from core metadata.

    Resolution order:
    1. `License-Expression` (PEP 639)
    2. `License`, unless it is a placeholder or a full license text
    3. License classifiers, joined with " AND " when there are several

    Args:
        metadata: Distribution metadata (email.message.Message-like).

    Returns:
        License string, or None if nothing is declared.
    """
    if not metadata:
        return None

    expression: Optional[str] = metadata.get("License-Expression")
    if expression and expression.strip():
        return expression.strip()

    license_str: Optional[str] = metadata.get("License")
    if license_str and "\n" not in license_str.strip():
        cleaned = license_str.strip()
        if cleaned.upper() not in _NO_LICENSE_VALUES:
            return cleaned

    found: list[str] = []
    for classifier in _get_all(metadata, "Classifier"):
        spdx = CLASSIFIER_TO_SPDX.get(classifier)
        if spdx is not None and spdx not in found:
            found.append(spdx)
    return " AND ".join(found) if found else None


def _metadata_dir(dist: Distribution) -> Optional[Path]:
    for file in dist.files or []:
        if file.name not in _METADATA_FILES:
            continue
        if not file.parent.name.endswith(_METADATA_DIR_SUFFIXES):
            continue
        return Path(str(dist.locate_file(file))).parent

    # No RECORD file: use the metadata directory itself
    path = getattr(dist, "_path", None)
    if path is not None and Path(str(path)).is_dir():
        return Path(str(path))
    return None


def license_root(dist: Distribution) -> Optional[Path]:
    """Find the directory holding a distribution's license files.

    Args:
        dist: Installed distribution.

    Returns:
        The `licenses/` directory inside the `.dist-info` directory when it
        exists, otherwise the `.dist-info` (or `.egg-info`) directory
        itself, or None if the metadata directory cannot be located.
    """
    metadata_dir = _metadata_dir(dist)
    if metadata_dir is None:
        return None
    licenses_dir = metadata_dir / "licenses"
    return licenses_dir if licenses_dir.is_dir() else metadata_dir


def package_from_distribution(dist: Distribution) -> Optional[Package]:
    """Build a Package from an installed distribution.

    Returns:
        Package, or None if the distribution has no name.
    """
    name = dist.metadata.get("Name")
    if not name:
        return None
    return Package(
        name=name,
        version=dist.metadata.get("Version") or "unknown",
        license=parse_license(extract_declared_license(dist.metadata)),
        root=license_root(dist),
    )
