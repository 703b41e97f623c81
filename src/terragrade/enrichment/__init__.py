"""Repository, scorecard and AI enrichment for extracted providers."""

from terragrade.enrichment.analysis import KEY_CHECKS, build_analysis_payload
from terragrade.enrichment.pipeline import (
    AnalysisOutcome,
    EnrichmentPipeline,
    RepositorySummary,
    ScoringSummary,
)

__all__ = [
    "KEY_CHECKS",
    "build_analysis_payload",
    "AnalysisOutcome",
    "EnrichmentPipeline",
    "RepositorySummary",
    "ScoringSummary",
]
