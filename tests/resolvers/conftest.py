"""Fixtures for resolver tests."""
from __future__ import annotations

from email.message import Message
from importlib.metadata import PackagePath
from pathlib import Path
from typing import Callable, Optional

import pytest


class FakeDistribution:
    """Stand-in for importlib.metadata.Distribution."""

    def __init__(
        self,
        name: str,
        version: str = "1.0.0",
        requires: Optional[list[str]] = None,
        license: Optional[str] = None,
        classifiers: tuple[str, ...] = (),
        site_packages: Optional[Path] = None,
        metadata_path: Optional[Path] = None,
    ) -> None:
        self.metadata = Message()
        self.metadata["Name"] = name
        self.metadata["Version"] = version
        if license is not None:
            self.metadata["License"] = license
        for classifier in classifiers:
            self.metadata["Classifier"] = classifier
        self.requires = requires
        self._site_packages = site_packages
        self._dist_info = f"{name}-{version}.dist-info"
        if metadata_path is not None:
            self._path = metadata_path

    @property
    def files(self) -> Optional[list[PackagePath]]:
        if self._site_packages is None:
            return None
        return [
            PackagePath(f"{self.metadata['Name']}/__init__.py"),
            PackagePath(f"{self._dist_info}/METADATA"),
        ]

    def locate_file(self, path: PackagePath) -> Path:
        assert self._site_packages is not None
        return self._site_packages / path


@pytest.fixture
def make_distribution() -> Callable[..., FakeDistribution]:
    """Provide a factory for fake installed distributions."""
    return FakeDistribution
