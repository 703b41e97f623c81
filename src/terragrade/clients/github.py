from __future__ import annotations

import time
from typing import Callable

import structlog

from terragrade.clients.base import RateLimitedClient, TransportFailure

logger = structlog.get_logger()


class GitHubClient(RateLimitedClient):
    """Checks whether provider source repositories exist on GitHub."""

    def __init__(
        self,
        *,
        base_url: str = "https://github.com",
        timeout: float = 10.0,
        delay: float = 0.5,
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

    def repository_url(self, repository_path: str) -> str:
        return f"{self._base_url}/{repository_path}"

    def repository_exists(self, repository_path: str) -> bool | None:
        """HEAD the repository page: True on 2xx, False on 404, None otherwise."""
        url = self.repository_url(repository_path)
        try:
            response = self.head(url)
        except TransportFailure as exc:
            logger.debug("repository_probe", repository=repository_path, error=str(exc))
            return None

        logger.debug("repository_probe", repository=repository_path, status=response.status_code)
        if response.is_success:
            return True
        if response.status_code == 404:
            return False
        return None
