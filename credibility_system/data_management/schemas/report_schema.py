"""Credibility report schema - the sole output of the pipeline.

The report is constructed once per successful submission and never mutated
afterwards. Failures produce an AnalysisFailure instead, so callers can tell
"analysis failed" apart from "analysis succeeded without news backing".
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import Field

from credibility_system.data_management.schemas.analysis_schema import (
    GenerativeAssessment,
    MatchedArticle,
)
from credibility_system.data_management.schemas.base import WireModel
from credibility_system.data_management.schemas.content_schema import ContentFactors
from credibility_system.data_management.schemas.source_schema import (
    ExtractedSource,
    SourceType,
)

VERDICT_REAL = "REAL"
VERDICT_POTENTIALLY_FAKE = "POTENTIALLY FAKE"


class ContentAnalysis(WireModel):
    """Content-type classification plus structural factors."""

    is_news: bool
    content_type: str
    confidence: int = Field(..., ge=0, le=100)
    factors: ContentFactors


class FactualityDetails(WireModel):
    """Factuality label scores as percentages."""

    factual_score: int = Field(..., ge=0, le=100)
    misleading_score: int = Field(..., ge=0, le=100)
    false_score: int = Field(..., ge=0, le=100)
    opinion_score: int = Field(..., ge=0, le=100)


class VerificationSummary(WireModel):
    """Factuality classification as returned by the classifier."""

    labels: list[str]
    scores: list[int]
    primary_classification: str
    details: FactualityDetails


class SourceAnalysis(WireModel):
    """Sources attributed in the text, highest confidence first."""

    sources: list[ExtractedSource] = Field(default_factory=list)
    has_identifiable_sources: bool = False
    primary_source: Optional[ExtractedSource] = None
    source_count: int = 0
    source_types: list[SourceType] = Field(default_factory=list)


class ReliabilityRating(WireModel):
    score: int = Field(..., ge=0, le=100)
    label: str
    confidence: int = Field(..., ge=0, le=100)


class ContentQuality(WireModel):
    complexity: float = Field(..., ge=0.0, le=1.0)
    citations: int = Field(..., ge=0)
    has_quotes: bool
    has_dates: bool
    has_statistics: bool


class CredibilityMetrics(WireModel):
    """Scores derived from the classifier alone, shifted into [0, 100]."""

    credibility_score: int = Field(..., ge=0, le=100)
    truth_score: int = Field(..., ge=0, le=100)
    reliability: ReliabilityRating
    content_quality: ContentQuality


class NewsVerificationSummary(WireModel):
    is_verified: bool
    confidence: int = Field(..., ge=0, le=100)
    matched_articles: list[MatchedArticle] = Field(default_factory=list)
    verdict: str


class CombinedMetrics(WireModel):
    """Fused scores; every field is an integer in [0, 100]."""

    credibility_score: int = Field(..., ge=0, le=100)
    truth_score: int = Field(..., ge=0, le=100)
    confidence: int = Field(..., ge=0, le=100)
    news_reliability: int = Field(..., ge=0, le=100)


class CredibilityReport(WireModel):
    """Complete credibility assessment of one submission."""

    content: str
    content_analysis: ContentAnalysis
    verification_result: VerificationSummary
    source_analysis: SourceAnalysis
    credibility_metrics: CredibilityMetrics
    generative_assessment: GenerativeAssessment
    news_verification: NewsVerificationSummary
    combined_metrics: CombinedMetrics
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def reliability_label(self) -> str:
        return self.credibility_metrics.reliability.label

    def to_json_dict(self) -> dict[str, Any]:
        """JSON-serializable dict using the wire (camelCase) names."""
        return self.model_dump(mode="json", by_alias=True)


class AnalysisFailure(WireModel):
    """Structured error returned instead of a report."""

    error: str
    details: str
    kind: str
    service: Optional[str] = None
    retry_after: int = Field(0, ge=0, description="Suggested retry delay in seconds")

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ReportRecord(WireModel):
    """Stored copy of a report.

    Holds the subset of the report kept for history: the text, its
    reliability label, upstream analyses and the fused metrics.
    """

    report_id: str = Field(default_factory=lambda: f"rpt-{uuid.uuid4().hex[:12]}")
    content: str
    reliability: str
    details: Optional[str] = None
    generative_assessment: dict[str, Any] = Field(default_factory=dict)
    news_verification: NewsVerificationSummary
    combined_metrics: CombinedMetrics
    timestamp: datetime
    stored_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_report(cls, report: CredibilityReport) -> "ReportRecord":
        """Build a storage record from a finished report."""
        return cls(
            content=report.content,
            reliability=report.reliability_label,
            details=report.verification_result.primary_classification,
            generative_assessment=report.generative_assessment.model_dump(
                mode="json", by_alias=True
            ),
            news_verification=report.news_verification,
            combined_metrics=report.combined_metrics,
            timestamp=report.timestamp,
        )
