"""Bundle generation: one document with the license texts of all packages.

Document layout::

    The <root> package uses some third party libraries under their own license terms:

     * <name> under <license>:

        <license text, indented by four spaces>

Texts of a package with several licenses are separated by a blank line,
an indented `===============` line and another blank line.
"""
from __future__ import annotations

from typing import Optional, TextIO

from license_bundler.analysis.candidates import CandidateLocator
from license_bundler.analysis.confidence import ConfidenceResolver
from license_bundler.analysis.similarity import TemplateMatcher
from license_bundler.constants import (
    DEFAULT_MAX_DISTANCE_RATIO,
    LICENSE_SEPARATOR,
    LOW_QUALITY_LICENSE_MESSAGE,
    MISSING_LICENSE_MESSAGE,
    TEXT_INDENT,
)
from license_bundler.context import BundleContext
from license_bundler.exceptions import OutputError
from license_bundler.models.bundle import BundleOutcome, Confidence
from license_bundler.models.license import (
    LicenseObligation,
    MultipleLicenses,
    UnspecifiedLicense,
)
from license_bundler.models.package import Package
from license_bundler.output.diagnostics import Shell


class Bundler:
    """Renders the license bundle for a set of packages.

    Packages are written in name order. Problems never stop the run;
    they are reported through the shell and recorded in the run context,
    whose flags decide the outcome. Only failures to read a package
    directory (ScanError) or to write the bundle (OutputError) abort.
    """

    def __init__(
        self,
        shell: Optional[Shell] = None,
        max_distance_ratio: float = DEFAULT_MAX_DISTANCE_RATIO,
    ) -> None:
        """Initialize the bundler.

        Args:
            shell: Diagnostics sink. Defaults to a stderr shell.
            max_distance_ratio: Template match threshold.
        """
        self._shell = shell if shell is not None else Shell()
        self._locator = CandidateLocator(
            TemplateMatcher(self._shell, max_distance_ratio), self._shell
        )
        self._resolver = ConfidenceResolver()

    def run(self, root: str, packages: list[Package], out: TextIO) -> BundleOutcome:
        """Write the bundle and summarize the run.

        Args:
            root: Name of the root package for the document header.
            packages: All packages to include, in any order.
            out: Text stream receiving the bundle.

        Returns:
            BundleOutcome with the run's failure flags.

        Raises:
            ScanError: If a package directory cannot be listed.
            OutputError: If writing to `out` fails.
        """
        context = BundleContext(self._shell)
        ordered = sorted(packages, key=lambda p: p.name)

        self._write(
            out,
            f"The {root} package uses some third party libraries "
            "under their own license terms:",
        )
        self._write(out, "")
        for package in ordered:
            self._bundle_package(context, package, out)
            self._write(out, "")

        if context.missing_license:
            self._shell.error(MISSING_LICENSE_MESSAGE)
        if context.low_quality_license:
            self._shell.error(LOW_QUALITY_LICENSE_MESSAGE)

        return BundleOutcome(
            root=root,
            packages=[p.name for p in ordered],
            missing_license=context.missing_license,
            low_quality_license=context.low_quality_license,
        )

    def _bundle_package(
        self, context: BundleContext, package: Package, out: TextIO
    ) -> None:
        license = package.license
        self._write(out, f" * {package.name} under {license}:")
        self._write(out, "")

        if isinstance(license, UnspecifiedLicense):
            context.mark_missing_license()
            self._shell.error(f"{package.name} does not specify a license")
        else:
            text = self._locator.find_generic_license_text(package)
            if text is not None:
                if text.confidence == Confidence.SEMI_CONFIDENT:
                    self._shell.warn(
                        f"{package.name} has only a low-confidence candidate "
                        f"for license {license}:"
                    )
                    self._shell.warn(f"    {text.path}")
                elif text.confidence == Confidence.UNSURE:
                    self._shell.error(
                        f"{package.name} has only a very low-confidence candidate "
                        f"for license {license}:"
                    )
                    self._shell.error(f"    {text.path}")
                self._write_text(out, text.text)
            elif isinstance(license, MultipleLicenses):
                for index, component in enumerate(license.licenses):
                    if index > 0:
                        self._write(out, "")
                        self._write(out, LICENSE_SEPARATOR)
                        self._write(out, "")
                    self._bundle_license(context, package, component, out)
            else:
                self._bundle_license(context, package, license, out)

        self._write(out, "")

    def _bundle_license(
        self,
        context: BundleContext,
        package: Package,
        license: LicenseObligation,
        out: TextIO,
    ) -> None:
        texts = self._locator.find_license_text(package, license)
        text = self._resolver.choose(context, package, license, texts)
        if text is not None:
            self._write_text(out, text.text)

    def _write_text(self, out: TextIO, text: str) -> None:
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        for line in lines:
            line = line.rstrip("\r")
            self._write(out, f"{TEXT_INDENT}{line}")

    @staticmethod
    def _write(out: TextIO, line: str) -> None:
        try:
            out.write(line + "\n")
        except (OSError, ValueError) as e:
            raise OutputError(f"Cannot write bundle: {e}") from e
