"""License text discovery and matching for license-bundler."""
from license_bundler.analysis.candidates import (
    CandidateLocator,
    is_generic_license_name,
    is_specific_license_name,
)
from license_bundler.analysis.confidence import (
    ConfidenceResolver,
    partition_by_confidence,
)
from license_bundler.analysis.expression import (
    KNOWN_LICENSES,
    canonical_license_id,
    parse_license,
    template_for,
)
from license_bundler.analysis.filtering import FilterResult, filter_ignored_packages
from license_bundler.analysis.normalize import normalize
from license_bundler.analysis.overrides import apply_license_overrides
from license_bundler.analysis.similarity import (
    MatchScore,
    TemplateMatcher,
    matches_template,
    passes_threshold,
    score,
)
from license_bundler.analysis.templates import LICENSE_TEMPLATES, get_template

__all__ = [
    "CandidateLocator",
    "ConfidenceResolver",
    "FilterResult",
    "KNOWN_LICENSES",
    "LICENSE_TEMPLATES",
    "MatchScore",
    "TemplateMatcher",
    "apply_license_overrides",
    "canonical_license_id",
    "filter_ignored_packages",
    "get_template",
    "is_generic_license_name",
    "is_specific_license_name",
    "matches_template",
    "normalize",
    "parse_license",
    "partition_by_confidence",
    "passes_threshold",
    "score",
    "template_for",
]
