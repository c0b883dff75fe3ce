"""Package model consumed by the bundler."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from license_bundler.models.license import LicenseObligation, UnspecifiedLicense


class Package(BaseModel):
    """An installed package whose license text should be bundled."""

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(description="Package name")
    version: str = Field(default="unknown", description="Package version")
    license: LicenseObligation = Field(
        default_factory=UnspecifiedLicense,
        description="License obligation(s) declared by the package",
    )
    root: Optional[Path] = Field(
        default=None,
        description="Directory scanned for license files (None if not on disk)",
    )

    @property
    def root_display(self) -> str:
        """Return the package root for messages."""
        return str(self.root) if self.root is not None else "<unknown location>"
