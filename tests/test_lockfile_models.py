"""Tests for provider identity models."""

import pytest
from terragrade.lockfile.models import (
    AssessmentError,
    ProviderIdentity,
    ScorecardCheck,
    SecurityAssessment,
    is_token,
)


def _identity(org="hashicorp", name="aws"):
    return ProviderIdentity(
        organization=org,
        name=name,
        registry_reference=f"https://registry.terraform.io/providers/{org}/{name}",
    )


class TestProviderIdentity:
    def test_derived_names(self):
        identity = _identity()
        assert identity.full_name == "hashicorp/aws"
        assert identity.repository_path == "hashicorp/terraform-provider-aws"

    def test_rejects_invalid_tokens(self):
        with pytest.raises(ValueError):
            _identity(org="hashi.corp")
        with pytest.raises(ValueError):
            _identity(name="")

    def test_repository_unknown_until_recorded(self):
        identity = _identity()
        assert identity.repository_checked is False
        assert identity.repository_exists is None

        identity.record_repository(True)
        assert identity.repository_checked is True
        assert identity.repository_exists is True

    def test_repository_recorded_once(self):
        identity = _identity()
        identity.record_repository(None)
        assert identity.repository_checked is True

        with pytest.raises(RuntimeError):
            identity.record_repository(True)

    def test_assessment_recorded_once(self):
        identity = _identity()
        identity.record_assessment(AssessmentError.NOT_FOUND)

        with pytest.raises(RuntimeError):
            identity.record_assessment(SecurityAssessment(overall_score=5.0))

    def test_scored_only_for_assessments(self):
        identity = _identity()
        identity.record_assessment(AssessmentError.NETWORK_ERROR)
        assert identity.scored is None

        other = _identity(name="random")
        assessment = SecurityAssessment(overall_score=7.5)
        other.record_assessment(assessment)
        assert other.scored is assessment

    def test_to_dict(self):
        identity = _identity()
        identity.record_repository(True)
        identity.record_assessment(AssessmentError.UNKNOWN)

        data = identity.to_dict()
        assert data["full_name"] == "hashicorp/aws"
        assert data["repository_exists"] is True
        assert data["security_assessment"] == {"error": "unknown"}


class TestSecurityAssessment:
    def test_from_document_keeps_values(self):
        document = {
            "date": "2026-10-01",
            "score": 8.2,
            "commit": "abc123",
            "checks": [
                {"name": "Code-Review", "score": 10, "reason": "all changes reviewed"},
                {"name": "SAST", "score": 0, "reason": "no SAST tool detected"},
            ],
        }
        assessment = SecurityAssessment.from_document(document)

        assert assessment.overall_score == 8.2
        assert assessment.date == "2026-10-01"
        assert assessment.commit == "abc123"
        assert assessment.checks == (
            ScorecardCheck("Code-Review", 10, "all changes reviewed"),
            ScorecardCheck("SAST", 0, "no SAST tool detected"),
        )

    def test_from_document_without_checks(self):
        assessment = SecurityAssessment.from_document({"score": 3.1, "checks": None})
        assert assessment.checks == ()

    def test_from_document_requires_score(self):
        with pytest.raises(KeyError):
            SecurityAssessment.from_document({"checks": []})


@pytest.mark.parametrize(
    "value,expected",
    [("aws", True), ("acme-corp", True), ("internal_tools", True), ("", False), ("a.b", False)],
)
def test_is_token(value, expected):
    assert is_token(value) is expected
