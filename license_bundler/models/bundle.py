"""Bundle-related Pydantic models."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class Verbosity(Enum):
    """Diagnostic verbosity levels."""

    QUIET = "quiet"
    NORMAL = "normal"
    VERBOSE = "verbose"


class Confidence(str, Enum):
    """How trustworthy a discovered license text is."""

    CONFIDENT = "CONFIDENT"
    SEMI_CONFIDENT = "SEMI_CONFIDENT"
    UNSURE = "UNSURE"


class LicenseText(BaseModel):
    """A license text read from a package directory."""

    model_config = {"extra": "forbid", "frozen": True}

    path: Path = Field(description="File the text was read from")
    text: str = Field(description="Full file content")
    confidence: Confidence = Field(description="Confidence assigned when scored")


class BundleOutcome(BaseModel):
    """Summary of a finished bundle run."""

    model_config = {"extra": "forbid", "frozen": True}

    root: str = Field(description="Name of the root package")
    packages: list[str] = Field(
        default_factory=list, description="Package names in output order"
    )
    missing_license: bool = Field(
        default=False, description="A package had no usable license text"
    )
    low_quality_license: bool = Field(
        default=False, description="A bundled text was only a low-confidence match"
    )

    @property
    def success(self) -> bool:
        """Check if the bundle was generated without issues.

        Returns:
            True if no license was missing or low quality, False otherwise.
        """
        return not self.missing_license and not self.low_quality_license
