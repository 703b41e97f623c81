"""
Enrichment pipeline.

Strictly sequential: every identity is probed on GitHub before any score is
fetched, and the single AI request runs last. Each client waits its own
fixed delay after every request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import structlog

from terragrade.clients.github import GitHubClient
from terragrade.clients.openai import OpenAIClient
from terragrade.clients.scorecard import ScorecardClient
from terragrade.core.errors import ProviderError, format_error_message
from terragrade.enrichment.analysis import (
    LOW_SCORE_THRESHOLD,
    SYSTEM_PROMPT,
    build_analysis_payload,
    build_user_prompt,
)
from terragrade.lockfile.models import ProviderIdentity, SecurityAssessment
from terragrade.logging import bind_context

logger = structlog.get_logger()


@dataclass
class RepositorySummary:
    existing: int
    total: int


@dataclass
class ScoringSummary:
    scored: int
    total: int
    average_score: float

    @classmethod
    def from_scores(cls, scores: list[float], total: int) -> ScoringSummary:
        average = round(sum(scores) / len(scores), 2) if scores else 0.0
        return cls(scored=len(scores), total=total, average_score=average)


@dataclass
class AnalysisOutcome:
    """Result of the batch AI request; ``text`` is None when skipped or failed."""

    text: str | None = None
    skipped: bool = False
    error: str | None = None


class EnrichmentPipeline:
    """Runs the repository, scorecard and AI passes over extracted identities."""

    def __init__(
        self,
        github: GitHubClient,
        scorecard: ScorecardClient,
        analyst: OpenAIClient | None = None,
        *,
        low_score_threshold: float = LOW_SCORE_THRESHOLD,
    ) -> None:
        self._github = github
        self._scorecard = scorecard
        self._analyst = analyst
        self._low_score_threshold = low_score_threshold

    def check_repositories(self, identities: Sequence[ProviderIdentity]) -> RepositorySummary:
        existing = 0
        for identity in identities:
            log = bind_context(provider=identity.full_name)
            exists = self._github.repository_exists(identity.repository_path)
            identity.record_repository(exists)
            if exists:
                existing += 1
            log.debug("repository_checked", exists=exists)
        return RepositorySummary(existing=existing, total=len(identities))

    def fetch_assessments(self, identities: Sequence[ProviderIdentity]) -> ScoringSummary:
        scores: list[float] = []
        for identity in identities:
            if identity.repository_exists is not True:
                continue
            log = bind_context(provider=identity.full_name)
            assessment = self._scorecard.fetch_assessment(identity.repository_path)
            identity.record_assessment(assessment)
            if isinstance(assessment, SecurityAssessment):
                scores.append(assessment.overall_score)
                log.debug("scorecard_recorded", score=assessment.overall_score)
            else:
                log.debug("scorecard_unavailable", reason=assessment.value)
        return ScoringSummary.from_scores(scores, total=len(identities))

    def summarize(self, identities: Sequence[ProviderIdentity]) -> AnalysisOutcome:
        if self._analyst is None:
            return AnalysisOutcome(skipped=True)

        payload = build_analysis_payload(identities, self._low_score_threshold)
        try:
            text = self._analyst.chat(SYSTEM_PROMPT, build_user_prompt(payload))
        except ProviderError as exc:
            logger.warning("ai_analysis_failed", message=exc.message, **exc.details)
            return AnalysisOutcome(error=format_error_message(exc))
        return AnalysisOutcome(text=text)
