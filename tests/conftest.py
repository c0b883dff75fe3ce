"""Shared fixtures for license-bundler tests."""

from io import StringIO

import pytest
from click.testing import CliRunner
from rich.console import Console

from license_bundler.analysis.templates import MIT_TEMPLATE
from license_bundler.models.bundle import Verbosity
from license_bundler.output.diagnostics import Shell


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def diagnostics() -> StringIO:
    """Buffer receiving everything the test shell prints."""
    return StringIO()


@pytest.fixture
def shell(diagnostics: StringIO) -> Shell:
    """Provide a verbose shell writing plain text into `diagnostics`."""
    console = Console(file=diagnostics, force_terminal=False, width=200)
    return Shell(console=console, verbosity=Verbosity.VERBOSE)


@pytest.fixture
def mit_text() -> str:
    """An MIT license file as typically shipped, with a copyright header."""
    return "MIT License\n\nCopyright (c) 2021 Jane Doe\n\n" + MIT_TEMPLATE
