"""
Provider identity extraction.

Runs the ordered matchers over lock file text and feeds every candidate
through a single decomposition-and-dedup stage. The first candidate to
produce a given ``organization/name`` wins, so earlier matchers take
priority over later ones.
"""

from __future__ import annotations

import re
from typing import Iterator, Sequence

import structlog

from terragrade.lockfile.matchers import (
    DEFAULT_MATCHERS,
    DEFAULT_REGISTRY_HOSTS,
    HOST_PATTERN,
    Matcher,
    collect_urls,
)
from terragrade.lockfile.models import ExtractionResult, ProviderIdentity, is_token

logger = structlog.get_logger()

PROTOCOL_RE = re.compile(r"^https?://", re.IGNORECASE)
LEADING_HOST_RE = re.compile(rf"^(?:https?://)?({HOST_PATTERN})/", re.IGNORECASE)
REGISTRY_PREFIX_RE = re.compile(rf"^(?:https?://)?{HOST_PATTERN}/providers?/", re.IGNORECASE)


def split_candidate(candidate: str) -> tuple[str, str] | None:
    """Return (organization, name) for a raw candidate, or None if it does not decompose.

    A leading ``<host>/providers/`` prefix is removed, then the last two
    ``/``-separated segments are taken. Both must be plain tokens.
    """
    path = REGISTRY_PREFIX_RE.sub("", candidate.strip())
    segments = [segment for segment in path.split("/") if segment]
    if len(segments) < 2:
        return None
    organization, name = segments[-2], segments[-1]
    if not (is_token(organization) and is_token(name)):
        return None
    return organization, name


class IdentityExtractor:
    """Extract de-duplicated provider identities from lock file text."""

    def __init__(
        self,
        registry_hosts: Sequence[str] = DEFAULT_REGISTRY_HOSTS,
        matchers: Sequence[Matcher] = DEFAULT_MATCHERS,
    ) -> None:
        self._hosts = tuple(registry_hosts)
        self._matchers = tuple(matchers)

    @property
    def default_host(self) -> str:
        return self._hosts[0] if self._hosts else DEFAULT_REGISTRY_HOSTS[0]

    def candidates(self, text: str) -> Iterator[str]:
        """Yield raw candidates from every matcher, in priority order."""
        for matcher in self._matchers:
            yield from matcher(text, self._hosts)

    def registry_reference(self, candidate: str, organization: str, name: str) -> str:
        """Registry locator for a candidate: kept as-is when it already has a protocol."""
        if PROTOCOL_RE.match(candidate):
            return candidate
        host_match = LEADING_HOST_RE.match(candidate)
        host = host_match.group(1) if host_match else self.default_host
        return f"https://{host}/providers/{organization}/{name}"

    def decompose(self, candidate: str) -> ProviderIdentity | None:
        parts = split_candidate(candidate)
        if parts is None:
            logger.debug("provider_candidate_rejected", candidate=candidate)
            return None
        organization, name = parts
        return ProviderIdentity(
            organization=organization,
            name=name,
            registry_reference=self.registry_reference(candidate, organization, name),
        )

    def extract(self, text: str) -> ExtractionResult:
        identities: dict[str, ProviderIdentity] = {}
        for candidate in self.candidates(text):
            identity = self.decompose(candidate)
            if identity is None or identity.full_name in identities:
                continue
            identities[identity.full_name] = identity
            logger.debug(
                "provider_extracted",
                provider=identity.full_name,
                candidate=candidate,
            )
        return ExtractionResult(identities=list(identities.values()), urls=collect_urls(text))


def extract_identities(
    text: str,
    registry_hosts: Sequence[str] = DEFAULT_REGISTRY_HOSTS,
) -> list[ProviderIdentity]:
    """Convenience wrapper returning only the identities."""
    return IdentityExtractor(registry_hosts).extract(text).identities
