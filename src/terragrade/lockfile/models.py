"""
Provider identity data models.

A ProviderIdentity is created once during extraction and then filled in by
two enrichment passes: the repository existence check and the scorecard
fetch. Each of those results may be recorded only once.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

TOKEN_PATTERN = r"[A-Za-z0-9_-]+"
TOKEN_RE = re.compile(TOKEN_PATTERN)

_UNSET: Any = object()


def _score(value: Any, *, optional: bool = False) -> float | None:
    """Coerce a scorecard score to float; anything non-numeric raises TypeError."""
    if value is None and optional:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Invalid scorecard score: {value!r}")
    return float(value)


def is_token(value: str) -> bool:
    """Return True if value is a non-empty organization/name token."""
    return TOKEN_RE.fullmatch(value) is not None


class AssessmentError(StrEnum):
    """Reasons a security assessment could not be recorded."""

    NOT_FOUND = "not_found"
    UNKNOWN = "unknown"
    NETWORK_ERROR = "network_error"


@dataclass(frozen=True)
class ScorecardCheck:
    """A single named OpenSSF Scorecard check."""

    name: str
    score: float | None
    reason: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "score": self.score, "reason": self.reason}


@dataclass(frozen=True)
class SecurityAssessment:
    """Scorecard result for one repository, stored as returned."""

    overall_score: float
    checks: tuple[ScorecardCheck, ...] = ()
    date: str | None = None
    commit: str | None = None

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> SecurityAssessment:
        """Build an assessment from a scorecard API response body."""
        checks = tuple(
            ScorecardCheck(
                name=check.get("name", ""),
                score=_score(check.get("score"), optional=True),
                reason=check.get("reason"),
            )
            for check in document.get("checks") or []
        )
        return cls(
            overall_score=_score(document["score"]),
            checks=checks,
            date=document.get("date"),
            commit=document.get("commit"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall_score": self.overall_score,
            "date": self.date,
            "commit": self.commit,
            "checks": [check.to_dict() for check in self.checks],
        }


@dataclass(eq=False)
class ProviderIdentity:
    """A Terraform provider referenced by a lock file."""

    organization: str
    name: str
    registry_reference: str
    _repository_exists: bool | None = field(default=_UNSET, init=False, repr=False)
    _security_assessment: SecurityAssessment | AssessmentError | None = field(
        default=None, init=False, repr=False
    )

    def __post_init__(self) -> None:
        if not is_token(self.organization) or not is_token(self.name):
            raise ValueError(f"Invalid provider identity: {self.organization!r}/{self.name!r}")

    @property
    def full_name(self) -> str:
        return f"{self.organization}/{self.name}"

    @property
    def repository_path(self) -> str:
        """Expected GitHub path of the provider's source repository."""
        return f"{self.organization}/terraform-provider-{self.name}"

    @property
    def repository_checked(self) -> bool:
        return self._repository_exists is not _UNSET

    @property
    def repository_exists(self) -> bool | None:
        """True/False once probed; None while unknown."""
        if self._repository_exists is _UNSET:
            return None
        return self._repository_exists

    def record_repository(self, exists: bool | None) -> None:
        if self.repository_checked:
            raise RuntimeError(f"Repository status already recorded for {self.full_name}")
        self._repository_exists = exists

    @property
    def security_assessment(self) -> SecurityAssessment | AssessmentError | None:
        return self._security_assessment

    def record_assessment(self, assessment: SecurityAssessment | AssessmentError) -> None:
        if self._security_assessment is not None:
            raise RuntimeError(f"Security assessment already recorded for {self.full_name}")
        self._security_assessment = assessment

    @property
    def scored(self) -> SecurityAssessment | None:
        """The assessment when one was fetched successfully."""
        if isinstance(self._security_assessment, SecurityAssessment):
            return self._security_assessment
        return None

    def to_dict(self) -> dict[str, Any]:
        assessment = self._security_assessment
        if isinstance(assessment, SecurityAssessment):
            assessment_data: Any = assessment.to_dict()
        elif assessment is not None:
            assessment_data = {"error": assessment.value}
        else:
            assessment_data = None
        return {
            "organization": self.organization,
            "name": self.name,
            "full_name": self.full_name,
            "registry_reference": self.registry_reference,
            "repository_exists": self.repository_exists,
            "security_assessment": assessment_data,
        }


@dataclass
class ExtractionResult:
    """Output of one extraction pass over lock file text."""

    identities: list[ProviderIdentity] = field(default_factory=list)
    urls: list[str] = field(default_factory=list)

    @property
    def full_names(self) -> list[str]:
        return [identity.full_name for identity in self.identities]
