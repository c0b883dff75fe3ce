"""Template similarity scoring.

A candidate text matches a license template when, after normalization,
the region of the candidate aligned with the template is within a small
edit distance of it:

1. The optimal string alignment (restricted Damerau-Levenshtein) distance
   between the whole candidate and the template gives the offset where
   the template-like region begins.
2. A window of template length is cut from the candidate at that offset.
3. The window matches when `levenshtein(window, template) / len(template)`
   is strictly below the maximum ratio.
"""
from __future__ import annotations

from typing import NamedTuple, Optional

from rapidfuzz.distance import Levenshtein, OSA

from license_bundler.analysis.expression import template_for
from license_bundler.analysis.normalize import normalize
from license_bundler.constants import DEFAULT_MAX_DISTANCE_RATIO
from license_bundler.models.license import (
    KnownLicense,
    LicenseObligation,
    MultipleLicenses,
)
from license_bundler.output.diagnostics import Shell


class MatchScore(NamedTuple):
    """Edit distance of a candidate window against a template.

    Attributes:
        distance: Levenshtein distance of the aligned window.
        template_length: Length of the normalized template.
    """

    distance: int
    template_length: int

    @property
    def ratio(self) -> float:
        return self.distance / self.template_length


def alignment_offset(text: str, template: str) -> int:
    """Offset in normalized `text` where the template-like region begins."""
    return OSA.distance(text, template)


def score(text: str, template: str) -> MatchScore:
    """Score normalized text against a normalized template.

    If the candidate ends before `offset + len(template)` the window is
    cut short at the end of the text; the missing characters then count
    towards the distance.

    Args:
        text: Normalized candidate text.
        template: Normalized, non-empty template.

    Returns:
        MatchScore for the aligned window.
    """
    offset = alignment_offset(text, template)
    window = text[offset : offset + len(template)]
    return MatchScore(
        distance=Levenshtein.distance(window, template),
        template_length=len(template),
    )


def passes_threshold(
    distance: int,
    template_length: int,
    max_ratio: float = DEFAULT_MAX_DISTANCE_RATIO,
) -> bool:
    """Check a distance against the ratio threshold (strictly below)."""
    if template_length <= 0:
        return False
    return distance / template_length < max_ratio


def matches_template(
    text: str,
    template: str,
    max_ratio: float = DEFAULT_MAX_DISTANCE_RATIO,
) -> bool:
    """Check raw candidate text against a raw template."""
    normalized_template = normalize(template)
    if not normalized_template:
        return False
    result = score(normalize(text), normalized_template)
    return passes_threshold(result.distance, result.template_length, max_ratio)


class TemplateMatcher:
    """Matches candidate texts against license obligations.

    Every scored template is reported to the shell as an info diagnostic;
    the diagnostics never influence the result.
    """

    def __init__(
        self,
        shell: Optional[Shell] = None,
        max_ratio: float = DEFAULT_MAX_DISTANCE_RATIO,
    ) -> None:
        """Initialize the matcher.

        Args:
            shell: Optional diagnostics sink for score reports.
            max_ratio: Distance ratio a match must stay strictly below.
        """
        self._shell = shell
        self._max_ratio = max_ratio

    def matches(self, text: str, license: LicenseObligation) -> bool:
        """Check whether text matches the obligation's template(s).

        Args:
            text: Raw candidate text.
            license: Obligation to check against.

        Returns:
            True if a single known license's template matches, or every
            component of a conjunction has a matching template. Licenses
            without a template never match.
        """
        normalized = normalize(text)
        if isinstance(license, MultipleLicenses):
            return all(
                self._matches_single(normalized, component)
                for component in license.licenses
            )
        return self._matches_single(normalized, license)

    def _matches_single(self, normalized: str, license: LicenseObligation) -> bool:
        if not isinstance(license, KnownLicense):
            return False
        template = template_for(license)
        if template is None:
            return False
        normalized_template = normalize(template)
        if not normalized_template:
            return False

        result = score(normalized, normalized_template)
        if self._shell is not None:
            self._shell.info(f"score {result.distance} / {result.template_length}")
        return passes_threshold(
            result.distance, result.template_length, self._max_ratio
        )
