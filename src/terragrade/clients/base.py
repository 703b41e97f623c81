from __future__ import annotations

import time
from typing import Any, Callable

import httpx
import structlog
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

logger = structlog.get_logger()


class TransportFailure(Exception):
    """Request never produced an HTTP response (timeout, DNS, refused, reset)."""


class RateLimitedClient:
    """Blocking HTTP client that waits a fixed delay after every request.

    ``fetch`` sends one request, sleeps ``delay`` seconds whatever the
    outcome, and returns the response. Attempts default to one; raising
    ``max_attempts`` retries transport failures with exponential backoff.
    """

    def __init__(
        self,
        *,
        timeout: float | httpx.Timeout = 30.0,
        delay: float = 0.0,
        user_agent: str | None = None,
        max_attempts: int = 1,
        sleep: Callable[[float], None] = time.sleep,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._delay = delay
        self._user_agent = user_agent
        self._max_attempts = max(1, max_attempts)
        self._sleep = sleep
        self._transport = transport

    @property
    def delay(self) -> float:
        return self._delay

    def _headers(self) -> dict[str, str]:
        """Override to provide custom headers."""
        headers = {}
        if self._user_agent:
            headers["User-Agent"] = self._user_agent
        return headers

    def _send(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        json: dict[str, Any] | None,
    ) -> httpx.Response:
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                return client.request(method, url, headers=headers, json=json)
        except httpx.TransportError as exc:
            logger.debug("http_network_error", method=method, url=url, error=str(exc))
            raise TransportFailure(str(exc)) from exc

    def fetch(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Execute one request, then wait the configured delay before returning."""
        req_headers = self._headers()
        if headers:
            req_headers.update(headers)

        try:
            for attempt in Retrying(
                retry=retry_if_exception_type(TransportFailure),
                stop=stop_after_attempt(self._max_attempts),
                wait=wait_exponential(multiplier=2, min=1, max=30),
                sleep=self._sleep,
                reraise=True,
            ):
                with attempt:
                    response = self._send(method, url, headers=req_headers, json=json)
            logger.debug("http_response", method=method, url=url, status=response.status_code)
            return response
        finally:
            if self._delay > 0:
                self._sleep(self._delay)

    def head(self, url: str, *, headers: dict[str, str] | None = None) -> httpx.Response:
        """Execute HEAD request."""
        return self.fetch("HEAD", url, headers=headers)

    def get(self, url: str, *, headers: dict[str, str] | None = None) -> httpx.Response:
        """Execute GET request."""
        return self.fetch("GET", url, headers=headers)

    def post(
        self,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Execute POST request."""
        return self.fetch("POST", url, json=json, headers=headers)
