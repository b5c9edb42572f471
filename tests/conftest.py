"""Shared fixtures for credibility system tests.

Dummy credentials are seeded before the settings singleton is imported.
"""

import os

os.environ.setdefault("HUGGINGFACE_API_KEY", "test-hf-key")
os.environ.setdefault("MISTRAL_API_KEY", "test-mistral-key")
os.environ.setdefault("NEWS_API_KEY", "test-news-key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest

from credibility_system.data_management.schemas import (
    ClassificationResult,
    ClassifierOutcome,
    ContentFactors,
    FactualityScores,
    GenerativeAssessment,
    NewsVerificationResult,
)
from credibility_system.llm.resilient_caller import ResilientCaller

SCENARIO_TEXT = (
    "According to Reuters, officials confirmed 50% of votes were counted on "
    "01/05/2024. \"It was fair,\" said the spokesperson."
)

CONTENT_TYPE_RESPONSE = {
    "sequence": "ignored",
    "labels": ["news article", "opinion piece", "social media post", "blog post", "advertisement"],
    "scores": [0.8, 0.1, 0.05, 0.03, 0.02],
}

FACTUALITY_RESPONSE = {
    "sequence": "ignored",
    "labels": ["factual", "misleading", "false", "opinion", "unverified"],
    "scores": [0.7, 0.1, 0.05, 0.1, 0.05],
}


@pytest.fixture
def scenario_text() -> str:
    return SCENARIO_TEXT


@pytest.fixture
def fast_caller() -> ResilientCaller:
    """Three attempts, short deadline, no backoff delay."""
    return ResilientCaller(
        name="test",
        max_attempts=3,
        timeout=1.0,
        backoff_base=0.0,
        backoff_max=0.0,
    )


@pytest.fixture
def make_classifier_outcome():
    """Factory for ClassifierOutcome from factuality scores."""

    def _make(
        factual: float = 0.7,
        misleading: float = 0.1,
        false: float = 0.05,
        opinion: float = 0.1,
        unverified: float = 0.05,
        content_label: str = "news article",
        content_score: float = 0.8,
    ) -> ClassifierOutcome:
        factuality = ClassificationResult(
            labels=["factual", "misleading", "false", "opinion", "unverified"],
            scores=[factual, misleading, false, opinion, unverified],
        )
        return ClassifierOutcome(
            content_type=ClassificationResult(
                labels=[content_label, "blog post"],
                scores=[content_score, round(1 - content_score, 4)],
            ),
            factuality=factuality,
            factuality_scores=FactualityScores(
                factual=factual,
                misleading=misleading,
                false=false,
                opinion=opinion,
                unverified=unverified,
            ),
        )

    return _make


@pytest.fixture
def assessment() -> GenerativeAssessment:
    return GenerativeAssessment(
        credibility_score=80,
        truth_score=70,
        confidence=60,
        analysis="Consistent with wire reports.",
    )


@pytest.fixture
def verified_news() -> NewsVerificationResult:
    return NewsVerificationResult(is_verified=True, confidence=75, matched_articles=[])


@pytest.fixture
def factors() -> ContentFactors:
    return ContentFactors(
        length=120,
        complexity=0.42,
        citation_count=1,
        quotes=["It was fair"],
        dates=["01/05/2024"],
        has_statistics=True,
    )


@pytest.fixture
def report(make_classifier_outcome, assessment, verified_news, factors):
    """Report for the scenario text built by the default fusion engine."""
    from credibility_system.scoring import FusionEngine

    return FusionEngine().fuse(
        SCENARIO_TEXT,
        make_classifier_outcome(),
        assessment,
        verified_news,
        [],
        factors,
    )
