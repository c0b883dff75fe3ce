"""Choosing one license text among discovered candidates.

Candidates are split into CONFIDENT, SEMI_CONFIDENT and UNSURE groups.
The highest non-empty group wins and its first candidate is used; how
many candidates that group holds decides which diagnostics are reported
and whether the run is flagged:

- CONFIDENT: one is silent; several report an error but flag nothing.
- SEMI_CONFIDENT: one warns; several report an error and flag low quality.
- UNSURE: one warns and flags low quality; several report an error and
  flag low quality.
- No candidates at all reports an error and flags a missing license.
"""
from __future__ import annotations

from typing import Optional

from license_bundler.context import BundleContext
from license_bundler.models.bundle import Confidence, LicenseText
from license_bundler.models.license import LicenseObligation
from license_bundler.models.package import Package


def partition_by_confidence(
    texts: list[LicenseText],
) -> tuple[list[LicenseText], list[LicenseText], list[LicenseText]]:
    """Split candidates into (confident, semi_confident, unsure), keeping order."""
    confident: list[LicenseText] = []
    semi_confident: list[LicenseText] = []
    unsure: list[LicenseText] = []
    buckets = {
        Confidence.CONFIDENT: confident,
        Confidence.SEMI_CONFIDENT: semi_confident,
        Confidence.UNSURE: unsure,
    }
    for text in texts:
        buckets[text.confidence].append(text)
    return confident, semi_confident, unsure


class ConfidenceResolver:
    """Picks the best license text for one license of a package."""

    def choose(
        self,
        context: BundleContext,
        package: Package,
        license: LicenseObligation,
        texts: list[LicenseText],
    ) -> Optional[LicenseText]:
        """Choose a license text and report any doubts about it.

        Args:
            context: Run context receiving diagnostics and failure flags.
            package: Package the candidates belong to.
            license: The license the candidates were found for.
            texts: Candidates in discovery order.

        Returns:
            The chosen LicenseText, or None if there were no candidates.
        """
        shell = context.shell
        confident, semi_confident, unsure = partition_by_confidence(texts)

        if len(confident) == 1:
            return confident[0]
        if len(confident) > 1:
            self._report_all(
                context,
                f"{package.name} has multiple candidates for license {license}:",
                confident,
            )
            return confident[0]

        if len(semi_confident) == 1:
            shell.warn(
                f"{package.name} has only a low-confidence candidate "
                f"for license {license}:"
            )
            shell.warn(f"    {semi_confident[0].path}")
            return semi_confident[0]
        if len(semi_confident) > 1:
            context.mark_low_quality_license()
            self._report_all(
                context,
                f"{package.name} has multiple low-confidence candidates "
                f"for license {license}:",
                semi_confident,
            )
            return semi_confident[0]

        if len(unsure) == 1:
            context.mark_low_quality_license()
            shell.warn(
                f"{package.name} has only a very low-confidence candidate "
                f"for license {license}:"
            )
            shell.warn(f"    {unsure[0].path}")
            return unsure[0]
        if len(unsure) > 1:
            context.mark_low_quality_license()
            self._report_all(
                context,
                f"{package.name} has multiple very low-confidence candidates "
                f"for license {license}:",
                unsure,
            )
            return unsure[0]

        context.mark_missing_license()
        shell.error(
            f"{package.name} has no candidate texts for license {license} "
            f"in {package.root_display}"
        )
        return None

    @staticmethod
    def _report_all(
        context: BundleContext, message: str, texts: list[LicenseText]
    ) -> None:
        context.shell.error(message)
        for text in texts:
            context.shell.error(f"    {text.path}")
