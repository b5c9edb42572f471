"""Normalized results of the external analyzers.

Each adapter translates its service's response into one of these shapes so
the fusion engine never sees raw upstream payloads.
"""

from typing import Optional

from pydantic import Field, model_validator

from credibility_system.data_management.schemas.base import WireModel


class ClassificationResult(WireModel):
    """Zero-shot classification output; index 0 is the top prediction.

    Scores need not sum to 1: content type and factuality come from two
    independent calls.
    """

    labels: list[str] = Field(..., min_length=1)
    scores: list[float] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _aligned(self) -> "ClassificationResult":
        if len(self.labels) != len(self.scores):
            raise ValueError(
                f"labels ({len(self.labels)}) and scores ({len(self.scores)}) are not aligned"
            )
        for score in self.scores:
            if not 0.0 <= score <= 1.0:
                raise ValueError(f"score {score} outside [0, 1]")
        return self

    @property
    def top_label(self) -> str:
        return self.labels[0]

    @property
    def top_score(self) -> float:
        return self.scores[0]

    def score_for(self, label: str) -> Optional[float]:
        """Score for a label by name, or None when the label is absent."""
        try:
            return self.scores[self.labels.index(label)]
        except ValueError:
            return None


class FactualityScores(WireModel):
    """Per-label factuality scores extracted by label name."""

    factual: float = Field(..., ge=0.0, le=1.0)
    misleading: float = Field(..., ge=0.0, le=1.0)
    false: float = Field(..., ge=0.0, le=1.0)
    opinion: float = Field(..., ge=0.0, le=1.0)
    unverified: float = Field(0.0, ge=0.0, le=1.0)


class ClassifierOutcome(WireModel):
    """Both zero-shot calls for one submission."""

    content_type: ClassificationResult
    factuality: ClassificationResult
    factuality_scores: FactualityScores

    @property
    def content_type_label(self) -> str:
        return self.content_type.top_label

    @property
    def content_type_confidence(self) -> float:
        return self.content_type.top_score


class GenerativeAssessment(WireModel):
    """Scores from the generative assessor, in the service's own 0-100 scale.

    Any additional fields the service returns (analysis text, detected
    biases) are preserved for the report.
    """

    credibility_score: float = Field(..., allow_inf_nan=False)
    truth_score: float = Field(..., allow_inf_nan=False)
    confidence: float = Field(..., allow_inf_nan=False)

    model_config = {"extra": "allow"}


class MatchedArticle(WireModel):
    """News article returned by the verification search."""

    title: Optional[str] = None
    source: Optional[str] = None
    url: Optional[str] = None
    published_at: Optional[str] = None


class NewsVerificationResult(WireModel):
    """Outcome of checking the text against a news search index.

    A degraded (failed) verification is represented as unverified with zero
    confidence and no articles; ``error`` records why.
    """

    is_verified: bool = False
    confidence: int = Field(0, ge=0, le=100)
    matched_articles: list[MatchedArticle] = Field(default_factory=list, max_length=3)
    error: Optional[str] = Field(default=None, exclude=True)

    @classmethod
    def unverified(cls, error: Optional[str] = None) -> "NewsVerificationResult":
        return cls(is_verified=False, confidence=0, matched_articles=[], error=error)

    @property
    def degraded(self) -> bool:
        return self.error is not None
