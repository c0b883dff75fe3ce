"""License obligation models.

A package's declared license is represented as one of four closed kinds:
a well-known identifier, a custom free-text identifier, a conjunction of
several licenses, or no license at all.
"""
from __future__ import annotations

from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field


class KnownLicense(BaseModel):
    """A well-known license identifier (e.g. MIT, Apache-2.0)."""

    model_config = {"extra": "forbid", "frozen": True}

    kind: Literal["known"] = "known"
    id: str = Field(description="Canonical SPDX-style identifier")

    def __str__(self) -> str:
        return self.id


class CustomLicense(BaseModel):
    """A license identifier outside the well-known set."""

    model_config = {"extra": "forbid", "frozen": True}

    kind: Literal["custom"] = "custom"
    text: str = Field(description="Identifier exactly as declared")

    def __str__(self) -> str:
        return self.text


SingleLicense = Annotated[
    Union[KnownLicense, CustomLicense], Field(discriminator="kind")
]


class MultipleLicenses(BaseModel):
    """A conjunction of licenses, all of which must be satisfied."""

    model_config = {"extra": "forbid", "frozen": True}

    kind: Literal["multiple"] = "multiple"
    licenses: List[SingleLicense] = Field(
        min_length=2, description="Component licenses in declaration order"
    )

    def __str__(self) -> str:
        return " AND ".join(str(license) for license in self.licenses)


class UnspecifiedLicense(BaseModel):
    """No license declared."""

    model_config = {"extra": "forbid", "frozen": True}

    kind: Literal["unspecified"] = "unspecified"

    def __str__(self) -> str:
        return "Unspecified"


LicenseObligation = Annotated[
    Union[KnownLicense, CustomLicense, MultipleLicenses, UnspecifiedLicense],
    Field(discriminator="kind"),
]
