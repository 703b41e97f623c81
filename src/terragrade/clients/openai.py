from __future__ import annotations

import time
from typing import Any, Callable

import httpx
import structlog

from terragrade.clients.base import RateLimitedClient, TransportFailure
from terragrade.core.errors import ProviderError

logger = structlog.get_logger()


class OpenAIClient(RateLimitedClient):
    """Minimal chat-completion client for OpenAI-compatible endpoints."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://api.openai.com/v1",
        model: str = "gpt-4o-mini",
        max_tokens: int = 1000,
        temperature: float = 0.3,
        timeout: float = 60.0,
        connect_timeout: float = 30.0,
        user_agent: str | None = "terragrade/2.0.0",
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__(
            timeout=httpx.Timeout(timeout, connect=connect_timeout),
            user_agent=user_agent,
            sleep=sleep,
        )
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature

    def _headers(self) -> dict[str, str]:
        headers = super()._headers()
        headers["Authorization"] = f"Bearer {self._api_key}"
        headers["Content-Type"] = "application/json"
        return headers

    def chat(self, system: str, user: str) -> str:
        """Send one system+user exchange and return the generated text."""
        payload: dict[str, Any] = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "max_tokens": self._max_tokens,
            "temperature": self._temperature,
        }
        url = f"{self._base_url}/chat/completions"
        try:
            response = self.post(url, json=payload)
        except TransportFailure as exc:
            raise ProviderError("AI analysis failed", details={"error": str(exc)}) from exc

        if response.status_code != 200:
            raise ProviderError(f"OpenAI API error: {response.status_code}")

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise ProviderError("AI analysis failed: unexpected response body") from exc
        logger.debug("openai_completion", model=self._model, chars=len(content or ""))
        return content or ""
