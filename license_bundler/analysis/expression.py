"""Declared license parsing.

Turns a declared license string into a LicenseObligation. Uses the
license-expression library to recognise SPDX identifiers and their
`-only` / `-or-later` variants.
"""
from __future__ import annotations

import re
from typing import Optional, Union

from license_expression import ExpressionError, get_spdx_licensing

from license_bundler.analysis.templates import get_template
from license_bundler.models.license import (
    CustomLicense,
    KnownLicense,
    LicenseObligation,
    MultipleLicenses,
    UnspecifiedLicense,
)

_licensing = get_spdx_licensing()

# Closed set of well-known licenses; only some of them have a template
KNOWN_LICENSES: tuple[str, ...] = (
    "MIT",
    "Apache-2.0",
    "BSD-2-Clause",
    "BSD-3-Clause",
    "ISC",
    "Zlib",
    "Unlicense",
    "MPL-2.0",
    "GPL-2.0",
    "GPL-3.0",
    "LGPL-2.1",
    "LGPL-3.0",
    "AGPL-3.0",
    "CC0-1.0",
)

_KNOWN_BY_UPPER: dict[str, str] = {lic.upper(): lic for lic in KNOWN_LICENSES}

# Common non-SPDX spellings found in package metadata
LICENSE_ALIASES: dict[str, str] = {
    "MIT LICENSE": "MIT",
    "THE MIT LICENSE": "MIT",
    "EXPAT": "MIT",
    "APACHE 2.0": "Apache-2.0",
    "APACHE-2": "Apache-2.0",
    "APACHE 2": "Apache-2.0",
    "APACHE LICENSE 2.0": "Apache-2.0",
    "APACHE LICENSE, VERSION 2.0": "Apache-2.0",
    "APACHE SOFTWARE LICENSE": "Apache-2.0",
    "ASL 2.0": "Apache-2.0",
    "BSD 2-CLAUSE": "BSD-2-Clause",
    "SIMPLIFIED BSD": "BSD-2-Clause",
    "BSD 3-CLAUSE": "BSD-3-Clause",
    "NEW BSD": "BSD-3-Clause",
    "ISC LICENSE": "ISC",
    "ZLIB/LIBPNG": "Zlib",
    "THE UNLICENSE": "Unlicense",
    "MPL 2.0": "MPL-2.0",
    "GPLV2": "GPL-2.0",
    "GPLV3": "GPL-3.0",
    "LGPLV3": "LGPL-3.0",
    "CC0": "CC0-1.0",
}

_NO_LICENSE_VALUES = ("", "UNKNOWN", "NONE")

# "A/B", "A AND B" and "A OR B" all oblige the bundle to carry every text
_SPLIT_PATTERN = re.compile(r"\s*/\s*|\s+(?:AND|OR)\s+", re.IGNORECASE)

_SPDX_SUFFIXES = ("-only", "-or-later", "+")


def canonical_license_id(value: str) -> Optional[str]:
    """Map a single license identifier to its well-known canonical form.

    Args:
        value: A single license identifier (e.g. "mit", "GPL-3.0-only").

    Returns:
        Canonical identifier from KNOWN_LICENSES, or None if not well known.
    """
    cleaned = value.strip()
    upper = cleaned.upper()
    if upper in _KNOWN_BY_UPPER:
        return _KNOWN_BY_UPPER[upper]
    if upper in LICENSE_ALIASES:
        return LICENSE_ALIASES[upper]

    try:
        parsed = _licensing.parse(cleaned, validate=True)
    except ExpressionError:
        return None
    key = getattr(parsed, "key", None)
    if key is None:
        return None

    key = str(key)
    for suffix in _SPDX_SUFFIXES:
        if key.endswith(suffix):
            key = key[: -len(suffix)]
            break
    return _KNOWN_BY_UPPER.get(key.upper())


def _parse_single(value: str) -> Union[KnownLicense, CustomLicense]:
    license_id = canonical_license_id(value)
    if license_id is not None:
        return KnownLicense(id=license_id)
    return CustomLicense(text=value)


def parse_license(declared: Optional[str]) -> LicenseObligation:
    """Parse a declared license string.

    Args:
        declared: License string from package metadata, or None.

    Returns:
        UnspecifiedLicense when nothing usable is declared, a single
        KnownLicense or CustomLicense, or MultipleLicenses when several
        licenses are declared together.
    """
    if declared is None or declared.strip().upper() in _NO_LICENSE_VALUES:
        return UnspecifiedLicense()

    parts = [
        part.strip().strip("()").strip()
        for part in _SPLIT_PATTERN.split(declared.strip())
    ]
    licenses = [_parse_single(part) for part in parts if part]

    if not licenses:
        return UnspecifiedLicense()
    if len(licenses) == 1:
        return licenses[0]
    return MultipleLicenses(licenses=licenses)


def template_for(license: LicenseObligation) -> Optional[str]:
    """Get the canonical template text of a single well-known license.

    Args:
        license: License obligation.

    Returns:
        Template text, or None for custom, unspecified, multiple or
        template-less licenses.
    """
    if isinstance(license, KnownLicense):
        return get_template(license.id)
    return None
