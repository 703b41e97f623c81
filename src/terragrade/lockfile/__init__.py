"""
Lock file provider extraction.

Heuristic scan of ``.terraform.lock.hcl`` text for provider identities.
"""

from terragrade.lockfile.extractor import IdentityExtractor, extract_identities, split_candidate
from terragrade.lockfile.matchers import (
    DEFAULT_MATCHERS,
    DEFAULT_REGISTRY_HOSTS,
    collect_urls,
    match_bare_registry_paths,
    match_provider_declarations,
    match_quoted_pairs,
    match_quoted_registry_paths,
)
from terragrade.lockfile.models import (
    AssessmentError,
    ExtractionResult,
    ProviderIdentity,
    ScorecardCheck,
    SecurityAssessment,
)

__all__ = [
    "IdentityExtractor",
    "extract_identities",
    "split_candidate",
    "DEFAULT_MATCHERS",
    "DEFAULT_REGISTRY_HOSTS",
    "collect_urls",
    "match_provider_declarations",
    "match_quoted_registry_paths",
    "match_bare_registry_paths",
    "match_quoted_pairs",
    "AssessmentError",
    "ExtractionResult",
    "ProviderIdentity",
    "ScorecardCheck",
    "SecurityAssessment",
]
