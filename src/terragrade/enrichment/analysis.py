"""
Batch AI analysis payload.

Builds the compact JSON document sent to the text-generation service: the
provider count plus, for each scored provider, its overall score and the
low-scoring checks that matter most for supply-chain risk.
"""

from __future__ import annotations

import json
from typing import Any, Sequence

from terragrade.lockfile.models import ProviderIdentity

LOW_SCORE_THRESHOLD = 5

KEY_CHECKS: frozenset[str] = frozenset(
    {
        "Code-Review",
        "Vulnerabilities",
        "Binary-Artifacts",
        "Token-Permissions",
        "Dangerous-Workflow",
        "Dependency-Update-Tool",
        "SAST",
        "Security-Policy",
    }
)

SYSTEM_PROMPT = (
    "You are a cybersecurity expert reviewing the output of various configurations "
    "for github repos for risks using OSSF scorecard. Summarize the ratings for the "
    "various providers that the scorecard gives us. Focus on critical security issues, "
    "overall risk assessment, and actionable recommendations. Keep it concise."
)

USER_PROMPT_PREFIX = (
    "Please analyze this OSSF Scorecard data for Terraform providers and provide "
    "a brief security risk assessment:\n\n"
)


def key_issues(
    identity: ProviderIdentity,
    threshold: float = LOW_SCORE_THRESHOLD,
) -> list[dict[str, Any]]:
    assessment = identity.scored
    if assessment is None:
        return []
    return [
        {"name": check.name, "score": check.score}
        for check in assessment.checks
        if check.score is not None and check.score < threshold and check.name in KEY_CHECKS
    ]


def build_analysis_payload(
    identities: Sequence[ProviderIdentity],
    threshold: float = LOW_SCORE_THRESHOLD,
) -> dict[str, Any]:
    """Summarize scored providers for the AI request."""
    providers = []
    for identity in identities:
        assessment = identity.scored
        if assessment is None:
            continue
        providers.append(
            {
                "name": identity.full_name,
                "overall_score": assessment.overall_score,
                "github_exists": identity.repository_exists,
                "key_issues": key_issues(identity, threshold),
            }
        )
    return {"total_providers": len(identities), "providers": providers}


def build_user_prompt(payload: dict[str, Any]) -> str:
    return USER_PROMPT_PREFIX + json.dumps(payload, indent=2)
