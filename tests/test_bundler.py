"""Tests for bundle generation."""
from __future__ import annotations

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from license_bundler.analysis.templates import MIT_TEMPLATE
from license_bundler.bundler import Bundler
from license_bundler.constants import LICENSE_SEPARATOR
from license_bundler.exceptions import OutputError, ScanError
from license_bundler.models.bundle import Verbosity
from license_bundler.models.license import (
    CustomLicense,
    KnownLicense,
    LicenseObligation,
    MultipleLicenses,
    UnspecifiedLicense,
)
from license_bundler.models.package import Package
from license_bundler.output.diagnostics import Shell

MIT = KnownLicense(id="MIT")
APACHE = KnownLicense(id="Apache-2.0")


def indented(text: str) -> str:
    return "".join(f"    {line}\n" for line in text.splitlines())


def make_package(
    root: Path, name: str, license: LicenseObligation, files: dict[str, str]
) -> Package:
    """Create a package directory holding the given files."""
    directory = root / name
    directory.mkdir()
    for file_name, content in files.items():
        (directory / file_name).write_text(content)
    return Package(name=name, license=license, root=directory)


@pytest.fixture
def normal_shell(diagnostics: StringIO) -> Shell:
    """Provide a shell showing warnings and errors only."""
    console = Console(file=diagnostics, force_terminal=False, width=200)
    return Shell(console=console, verbosity=Verbosity.NORMAL)


class BrokenStream(StringIO):
    """Output stream that fails on every write."""

    def write(self, s: str) -> int:
        raise OSError("disk full")


class TestBundler:
    """Tests for Bundler.run."""

    def test_demo_bundle(
        self, tmp_path: Path, normal_shell: Shell, diagnostics: StringIO
    ) -> None:
        """Test a bundle with one recognised and one undeclared license."""
        foo = make_package(tmp_path, "foo", MIT, {"LICENSE-MIT": MIT_TEMPLATE})
        bar = make_package(tmp_path, "bar", UnspecifiedLicense(), {})
        out = StringIO()

        outcome = Bundler(normal_shell).run("demo", [foo, bar], out)

        assert out.getvalue() == (
            "The demo package uses some third party libraries under their "
            "own license terms:\n"
            "\n"
            " * bar under Unspecified:\n"
            "\n"
            "\n"
            "\n"
            " * foo under MIT:\n"
            "\n" + indented(MIT_TEMPLATE) + "\n"
            "\n"
        )
        messages = diagnostics.getvalue()
        assert "error: bar does not specify a license" in messages
        assert "We failed to recognise a license" in messages
        assert "foo" not in messages
        assert outcome.missing_license is True
        assert outcome.low_quality_license is False
        assert outcome.success is False
        assert outcome.packages == ["bar", "foo"]

    def test_clean_bundle_succeeds(
        self, tmp_path: Path, normal_shell: Shell, diagnostics: StringIO, mit_text: str
    ) -> None:
        """Test that recognised licenses produce no diagnostics."""
        foo = make_package(tmp_path, "foo", MIT, {"LICENSE": mit_text})

        outcome = Bundler(normal_shell).run("demo", [foo], StringIO())

        assert outcome.success is True
        assert diagnostics.getvalue() == ""

    def test_packages_in_name_order(self, tmp_path: Path, mit_text: str) -> None:
        """Test that packages are written sorted by name."""
        packages = [
            make_package(tmp_path, name, MIT, {"LICENSE": mit_text})
            for name in ("zeta", "alpha", "mid")
        ]
        out = StringIO()

        outcome = Bundler(Shell(verbosity=Verbosity.QUIET)).run("demo", packages, out)

        headers = [line for line in out.getvalue().splitlines() if line.startswith(" * ")]
        assert headers == [
            " * alpha under MIT:",
            " * mid under MIT:",
            " * zeta under MIT:",
        ]
        assert outcome.packages == ["alpha", "mid", "zeta"]

    def test_output_is_deterministic(
        self, tmp_path: Path, normal_shell: Shell, mit_text: str
    ) -> None:
        """Test that identical runs produce identical bundles."""
        packages = [
            make_package(tmp_path, "foo", MIT, {"LICENSE": mit_text}),
            make_package(tmp_path, "bar", CustomLicense(text="Foo"), {"FOO": "x"}),
        ]
        first, second = StringIO(), StringIO()

        Bundler(normal_shell).run("demo", packages, first)
        Bundler(normal_shell).run("demo", list(reversed(packages)), second)

        assert first.getvalue() == second.getvalue()

    def test_conjunction_texts_are_separated(
        self, tmp_path: Path, normal_shell: Shell, diagnostics: StringIO, mit_text: str
    ) -> None:
        """Test that each license of a conjunction is written in turn."""
        package = make_package(
            tmp_path,
            "foo",
            MultipleLicenses(licenses=[MIT, APACHE]),
            {"LICENSE-MIT": mit_text, "LICENSE-APACHE": "Apache terms\n"},
        )
        out = StringIO()

        outcome = Bundler(normal_shell).run("demo", [package], out)

        expected_body = (
            indented(mit_text)
            + "\n"
            + LICENSE_SEPARATOR
            + "\n\n"
            + "    Apache terms\n"
        )
        assert expected_body in out.getvalue()
        assert " * foo under MIT AND Apache-2.0:" in out.getvalue()
        assert (
            "warning: foo has only a low-confidence candidate "
            "for license Apache-2.0:" in diagnostics.getvalue()
        )
        assert outcome.success is True

    def test_generic_file_covers_conjunction(
        self, tmp_path: Path, normal_shell: Shell, diagnostics: StringIO, mit_text: str
    ) -> None:
        """Test that one generic file is used for every license of a package."""
        package = make_package(
            tmp_path,
            "foo",
            MultipleLicenses(licenses=[MIT, APACHE]),
            {"LICENSE": mit_text, "LICENSE-APACHE": "Apache terms\n"},
        )
        out = StringIO()

        outcome = Bundler(normal_shell).run("demo", [package], out)

        assert "Apache terms" not in out.getvalue()
        assert LICENSE_SEPARATOR not in out.getvalue()
        assert (
            "error: foo has only a very low-confidence candidate "
            "for license MIT AND Apache-2.0:" in diagnostics.getvalue()
        )
        assert outcome.success is True

    def test_missing_text_is_flagged(
        self, tmp_path: Path, normal_shell: Shell, diagnostics: StringIO
    ) -> None:
        """Test that a declared license without any file is missing."""
        package = make_package(tmp_path, "foo", MIT, {"README": "hello"})

        outcome = Bundler(normal_shell).run("demo", [package], StringIO())

        assert f"foo has no candidate texts for license MIT in {tmp_path / 'foo'}" in (
            diagnostics.getvalue()
        )
        assert outcome.missing_license is True

    def test_multiple_low_confidence_texts_are_flagged(
        self, tmp_path: Path, normal_shell: Shell, diagnostics: StringIO
    ) -> None:
        """Test that ambiguous custom license files fail the run."""
        package = make_package(
            tmp_path,
            "foo",
            CustomLicense(text="Foo"),
            {"FOO": "first terms\n", "LICENSE-FOO": "second terms\n"},
        )
        out = StringIO()

        outcome = Bundler(normal_shell).run("demo", [package], out)

        assert "    first terms\n" in out.getvalue()
        assert "second terms" not in out.getvalue()
        assert "We are very unsure about one or more licenses" in diagnostics.getvalue()
        assert outcome.low_quality_license is True
        assert outcome.missing_license is False

    def test_crlf_text_is_written_with_lf(self, tmp_path: Path) -> None:
        """Test that carriage returns do not reach the bundle."""
        directory = tmp_path / "foo"
        directory.mkdir()
        (directory / "FOO").write_bytes(b"line one\r\nline two\r\n")
        package = Package(name="foo", license=CustomLicense(text="Foo"), root=directory)
        out = StringIO()

        Bundler(Shell(verbosity=Verbosity.QUIET)).run("demo", [package], out)

        assert "    line one\n    line two\n" in out.getvalue()
        assert "\r" not in out.getvalue()

    def test_threshold_is_configurable(
        self, tmp_path: Path, normal_shell: Shell, diagnostics: StringIO, mit_text: str
    ) -> None:
        """Test that a strict ratio rejects a lightly modified text."""
        modified = mit_text.replace("free of charge", "for a small fee")
        package = make_package(tmp_path, "foo", MIT, {"LICENSE-MIT": modified})

        Bundler(normal_shell).run("demo", [package], StringIO())
        assert diagnostics.getvalue() == ""

        Bundler(normal_shell, max_distance_ratio=0.001).run(
            "demo", [package], StringIO()
        )
        assert "low-confidence candidate for license MIT" in diagnostics.getvalue()

    def test_verbose_reports_checks(
        self, tmp_path: Path, shell: Shell, diagnostics: StringIO, mit_text: str
    ) -> None:
        """Test that verbose runs report checked files and scores."""
        package = make_package(tmp_path, "foo", MIT, {"LICENSE-MIT": mit_text})

        Bundler(shell).run("demo", [package], StringIO())

        messages = diagnostics.getvalue()
        assert "checking " in messages
        assert "score 0 / " in messages

    def test_empty_package_list(self, normal_shell: Shell) -> None:
        """Test that a bundle without packages only has the header."""
        out = StringIO()

        outcome = Bundler(normal_shell).run("demo", [], out)

        assert out.getvalue() == (
            "The demo package uses some third party libraries under their "
            "own license terms:\n\n"
        )
        assert outcome.success is True

    def test_write_failure_raises_output_error(
        self, normal_shell: Shell
    ) -> None:
        """Test that a failing stream aborts with OutputError."""
        with pytest.raises(OutputError, match="disk full"):
            Bundler(normal_shell).run("demo", [], BrokenStream())

    def test_unreadable_directory_raises_scan_error(
        self, tmp_path: Path, normal_shell: Shell
    ) -> None:
        """Test that a missing package directory aborts with ScanError."""
        package = Package(name="foo", license=MIT, root=tmp_path / "missing")

        with pytest.raises(ScanError):
            Bundler(normal_shell).run("demo", [package], StringIO())
