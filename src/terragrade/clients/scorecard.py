from __future__ import annotations

import time
from typing import Callable

import structlog

from terragrade.clients.base import RateLimitedClient, TransportFailure
from terragrade.lockfile.models import AssessmentError, SecurityAssessment

logger = structlog.get_logger()


class ScorecardClient(RateLimitedClient):
    """OpenSSF Scorecard API client."""

    def __init__(
        self,
        *,
        base_url: str = "https://api.securityscorecards.dev",
        timeout: float = 15.0,
        delay: float = 1.0,
        user_agent: str | None = "terragrade/2.0.0",
        max_attempts: int = 1,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__(
            timeout=timeout,
            delay=delay,
            user_agent=user_agent,
            max_attempts=max_attempts,
            sleep=sleep,
        )
        self._base_url = base_url.rstrip("/")

    def _headers(self) -> dict[str, str]:
        headers = super()._headers()
        headers["Accept"] = "application/json"
        return headers

    def project_url(self, repository_path: str) -> str:
        return f"{self._base_url}/projects/github.com/{repository_path}"

    def fetch_assessment(self, repository_path: str) -> SecurityAssessment | AssessmentError:
        """Fetch the scorecard for ``github.com/<repository_path>``."""
        url = self.project_url(repository_path)
        try:
            response = self.get(url)
        except TransportFailure as exc:
            logger.debug("scorecard_fetch", repository=repository_path, error=str(exc))
            return AssessmentError.NETWORK_ERROR

        logger.debug("scorecard_fetch", repository=repository_path, status=response.status_code)
        if response.status_code == 404:
            return AssessmentError.NOT_FOUND
        if response.status_code != 200:
            return AssessmentError.UNKNOWN

        try:
            return SecurityAssessment.from_document(response.json())
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.warning("scorecard_malformed", repository=repository_path, error=str(exc))
            return AssessmentError.NETWORK_ERROR
