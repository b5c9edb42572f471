"""Schema package for submissions, analyzer results and credibility reports.

All models are Pydantic v2, immutable, and serialise with camelCase aliases
so JSON output matches the report contract.

Usage:
    from credibility_system.data_management.schemas import CredibilityReport
    payload = report.to_json_dict()
"""

from credibility_system.data_management.schemas.source_schema import (
    ConfidenceTier,
    ExtractedSource,
    SourceType,
)
from credibility_system.data_management.schemas.content_schema import (
    ContentFactors,
    ContentSubmission,
)
from credibility_system.data_management.schemas.analysis_schema import (
    ClassificationResult,
    ClassifierOutcome,
    FactualityScores,
    GenerativeAssessment,
    MatchedArticle,
    NewsVerificationResult,
)
from credibility_system.data_management.schemas.report_schema import (
    VERDICT_POTENTIALLY_FAKE,
    VERDICT_REAL,
    AnalysisFailure,
    CombinedMetrics,
    ContentAnalysis,
    ContentQuality,
    CredibilityMetrics,
    CredibilityReport,
    FactualityDetails,
    NewsVerificationSummary,
    ReliabilityRating,
    ReportRecord,
    SourceAnalysis,
    VerificationSummary,
)

__all__ = [
    # Sources
    "ConfidenceTier",
    "ExtractedSource",
    "SourceType",
    # Content
    "ContentFactors",
    "ContentSubmission",
    # Analyzer results
    "ClassificationResult",
    "ClassifierOutcome",
    "FactualityScores",
    "GenerativeAssessment",
    "MatchedArticle",
    "NewsVerificationResult",
    # Report
    "VERDICT_POTENTIALLY_FAKE",
    "VERDICT_REAL",
    "AnalysisFailure",
    "CombinedMetrics",
    "ContentAnalysis",
    "ContentQuality",
    "CredibilityMetrics",
    "CredibilityReport",
    "FactualityDetails",
    "NewsVerificationSummary",
    "ReliabilityRating",
    "ReportRecord",
    "SourceAnalysis",
    "VerificationSummary",
]
