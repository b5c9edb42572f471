"""Tests for schema validation and wire-format serialisation."""

import pytest
from pydantic import ValidationError

from credibility_system.data_management.schemas import (
    AnalysisFailure,
    ClassificationResult,
    ConfidenceTier,
    ContentFactors,
    ContentSubmission,
    ExtractedSource,
    NewsVerificationResult,
    ReportRecord,
    SourceType,
)
from credibility_system.errors import InvalidInput, MissingLabel, UpstreamTimeout


class TestContentSubmission:
    @pytest.mark.parametrize("content", ["", "  ", "\n\t"])
    def test_blank_rejected(self, content):
        with pytest.raises(ValidationError):
            ContentSubmission(content=content)

    def test_text_kept_verbatim(self):
        assert ContentSubmission(content="  padded ").content == "  padded "


class TestClassificationResult:
    def test_misaligned(self):
        with pytest.raises(ValidationError):
            ClassificationResult(labels=["a", "b"], scores=[0.5])

    def test_score_out_of_range(self):
        with pytest.raises(ValidationError):
            ClassificationResult(labels=["a"], scores=[1.5])

    def test_score_for(self):
        result = ClassificationResult(labels=["a", "b"], scores=[0.6, 0.4])
        assert result.score_for("b") == 0.4
        assert result.score_for("c") is None


class TestExtractedSource:
    def test_wire_names(self):
        source = ExtractedSource(
            name="Reuters", source_type=SourceType.MAJOR_NEWS_AGENCY, confidence=ConfidenceTier.HIGH
        )
        assert source.model_dump(mode="json", by_alias=True) == {
            "name": "Reuters",
            "type": "Major News Agency",
            "confidence": "High",
        }

    def test_parse_from_wire(self):
        source = ExtractedSource.model_validate(
            {"name": "X", "type": "Social Media", "confidence": "Low"}
        )
        assert source.source_type is SourceType.SOCIAL_MEDIA

    def test_tier_rank(self):
        ranks = [ConfidenceTier.HIGH.rank, ConfidenceTier.MEDIUM.rank, ConfidenceTier.LOW.rank]
        assert ranks == sorted(ranks, reverse=True)

    def test_immutable(self):
        source = ExtractedSource(
            name="Reuters", source_type=SourceType.MAJOR_NEWS_AGENCY, confidence=ConfidenceTier.HIGH
        )
        with pytest.raises(ValidationError):
            source.name = "AP"


class TestContentFactors:
    def test_complexity_bounds(self):
        with pytest.raises(ValidationError):
            ContentFactors(length=1, complexity=1.2, citation_count=0, has_statistics=False)

    def test_camel_case_dump(self, factors):
        dumped = factors.model_dump(by_alias=True)
        assert dumped["citationCount"] == 1
        assert dumped["hasStatistics"] is True


class TestNewsVerificationResult:
    def test_at_most_three_articles(self):
        with pytest.raises(ValidationError):
            NewsVerificationResult(matched_articles=[{}] * 4)

    def test_unverified(self):
        result = NewsVerificationResult.unverified("timeout")
        assert (result.is_verified, result.confidence, result.matched_articles) == (False, 0, [])
        assert result.degraded


class TestAnalysisFailure:
    def test_from_upstream_timeout(self):
        failure = UpstreamTimeout("too slow", service="classifier").to_failure()

        assert failure.to_json_dict() == {
            "error": "Analysis failed",
            "details": "too slow",
            "kind": "upstream_timeout",
            "service": "classifier",
            "retryAfter": 5,
        }

    def test_invalid_input_omits_service(self):
        payload = InvalidInput("Content is required").to_failure().to_json_dict()
        assert "service" not in payload
        assert payload["retryAfter"] == 0

    def test_missing_label_message(self):
        failure = MissingLabel("false", service="classifier").to_failure()
        assert isinstance(failure, AnalysisFailure)
        assert "'false'" in failure.details


class TestReportRecord:
    def test_from_report(self, report):
        record = ReportRecord.from_report(report)

        assert record.reliability == report.reliability_label
        assert record.news_verification == report.news_verification
        assert record.timestamp == report.timestamp
