"""Fusion engine: classifier, assessor, text signals and news check -> report.

Local scores come from the classifier's factuality labels:
    credibility_local = factual*100 - misleading*50 - false*100
    truth_local       = factual*100 - false*100
Each is rounded once, then shifted by +50 and clamped to [0, 100]. The
reliability label is read from the unshifted credibility value.

Combined scores weight the shifted local score against the assessor's own
score (0.6 / 0.4 by default). Combined confidence averages the content-type
confidence and the assessor's confidence. News reliability is the news
verifier's confidence, unchanged.

The weights and bands are empirical; they are class attributes so callers
can override them without editing the formulas.
"""

from typing import List, Optional, Sequence, Tuple

from credibility_system.config.logging import get_logger
from credibility_system.config.prompts import NEWS_ARTICLE_LABEL
from credibility_system.data_management.schemas import (
    VERDICT_POTENTIALLY_FAKE,
    VERDICT_REAL,
    ClassifierOutcome,
    CombinedMetrics,
    ContentAnalysis,
    ContentFactors,
    ContentQuality,
    CredibilityMetrics,
    CredibilityReport,
    ExtractedSource,
    FactualityDetails,
    GenerativeAssessment,
    NewsVerificationResult,
    NewsVerificationSummary,
    ReliabilityRating,
    SourceAnalysis,
    VerificationSummary,
)
from credibility_system.utils.numbers import clamp, round_half_up

# (minimum unshifted credibility, label), highest band first
RELIABILITY_BANDS: List[Tuple[int, str]] = [
    (80, "highly reliable"),
    (60, "reliable"),
    (40, "moderately reliable"),
    (20, "somewhat unreliable"),
]
LOWEST_RELIABILITY_LABEL = "unreliable"


def reliability_label(
    unshifted_credibility: float,
    bands: Sequence[Tuple[int, str]] = RELIABILITY_BANDS,
) -> str:
    """Label for an unshifted local credibility value."""
    for minimum, label in bands:
        if unshifted_credibility >= minimum:
            return label
    return LOWEST_RELIABILITY_LABEL


def _percent(score: float) -> int:
    return int(clamp(round_half_up(score * 100)))


class FusionEngine:
    """
    Deterministic fusion of every intermediate result into one report.

    Usage:
        engine = FusionEngine()
        report = engine.fuse(text, classifier_outcome, assessment, news, sources, factors)

    Attributes:
        local_weight: Weight of the locally derived score in combined metrics
        external_weight: Weight of the assessor's score in combined metrics
        score_shift: Offset added to local scores before clamping
        reliability_bands: Thresholds for the reliability label
    """

    LOCAL_WEIGHT = 0.6
    EXTERNAL_WEIGHT = 0.4
    SCORE_SHIFT = 50
    MISLEADING_PENALTY = 50
    FALSE_PENALTY = 100

    def __init__(
        self,
        local_weight: float = LOCAL_WEIGHT,
        external_weight: float = EXTERNAL_WEIGHT,
        score_shift: int = SCORE_SHIFT,
        reliability_bands: Optional[Sequence[Tuple[int, str]]] = None,
    ):
        self.local_weight = local_weight
        self.external_weight = external_weight
        self.score_shift = score_shift
        self.reliability_bands = list(reliability_bands or RELIABILITY_BANDS)
        self.logger = get_logger("scoring.fusion")

    # -- local scores -----------------------------------------------------

    def local_credibility(self, outcome: ClassifierOutcome) -> int:
        """Unshifted local credibility, rounded once."""
        s = outcome.factuality_scores
        return round_half_up(
            s.factual * 100
            - s.misleading * self.MISLEADING_PENALTY
            - s.false * self.FALSE_PENALTY
        )

    def local_truth(self, outcome: ClassifierOutcome) -> int:
        """Unshifted local truth, rounded once."""
        s = outcome.factuality_scores
        return round_half_up(s.factual * 100 - s.false * self.FALSE_PENALTY)

    def shift(self, unshifted: int) -> int:
        """Move an unshifted local score into [0, 100]."""
        return int(clamp(unshifted + self.score_shift))

    def combine(self, local: float, external: float) -> int:
        """Weighted blend of a local and an external score, rounded and bounded."""
        return int(clamp(round_half_up(local * self.local_weight + external * self.external_weight)))

    # -- report -----------------------------------------------------------

    def fuse(
        self,
        content: str,
        classifier: ClassifierOutcome,
        assessment: GenerativeAssessment,
        news: NewsVerificationResult,
        sources: List[ExtractedSource],
        factors: ContentFactors,
    ) -> CredibilityReport:
        """Build the credibility report from all intermediate results."""
        content_confidence = _percent(classifier.content_type_confidence)
        scores = classifier.factuality_scores

        credibility_raw = self.local_credibility(classifier)
        truth_raw = self.local_truth(classifier)
        credibility_local = self.shift(credibility_raw)
        truth_local = self.shift(truth_raw)
        label = reliability_label(credibility_raw, self.reliability_bands)

        combined = CombinedMetrics(
            credibility_score=self.combine(credibility_local, assessment.credibility_score),
            truth_score=self.combine(truth_local, assessment.truth_score),
            confidence=int(
                clamp(round_half_up((content_confidence + assessment.confidence) / 2))
            ),
            news_reliability=news.confidence,
        )

        report = CredibilityReport(
            content=content,
            content_analysis=ContentAnalysis(
                is_news=classifier.content_type_label == NEWS_ARTICLE_LABEL,
                content_type=classifier.content_type_label,
                confidence=content_confidence,
                factors=factors,
            ),
            verification_result=VerificationSummary(
                labels=list(classifier.factuality.labels),
                scores=[_percent(s) for s in classifier.factuality.scores],
                primary_classification=classifier.factuality.top_label,
                details=FactualityDetails(
                    factual_score=_percent(scores.factual),
                    misleading_score=_percent(scores.misleading),
                    false_score=_percent(scores.false),
                    opinion_score=_percent(scores.opinion),
                ),
            ),
            source_analysis=self._source_analysis(sources),
            credibility_metrics=CredibilityMetrics(
                credibility_score=credibility_local,
                truth_score=truth_local,
                reliability=ReliabilityRating(
                    score=_percent(scores.factual),
                    label=label,
                    confidence=content_confidence,
                ),
                content_quality=ContentQuality(
                    complexity=factors.complexity,
                    citations=factors.citation_count,
                    has_quotes=bool(factors.quotes),
                    has_dates=bool(factors.dates),
                    has_statistics=factors.has_statistics,
                ),
            ),
            generative_assessment=assessment,
            news_verification=NewsVerificationSummary(
                is_verified=news.is_verified,
                confidence=news.confidence,
                matched_articles=list(news.matched_articles),
                verdict=VERDICT_REAL if news.is_verified else VERDICT_POTENTIALLY_FAKE,
            ),
            combined_metrics=combined,
        )

        self.logger.debug(
            "Fusion completed",
            credibility_local=credibility_local,
            truth_local=truth_local,
            reliability=label,
            combined_credibility=combined.credibility_score,
            combined_truth=combined.truth_score,
        )
        return report

    @staticmethod
    def _source_analysis(sources: List[ExtractedSource]) -> SourceAnalysis:
        source_types = []
        for source in sources:
            if source.source_type not in source_types:
                source_types.append(source.source_type)
        return SourceAnalysis(
            sources=list(sources),
            has_identifiable_sources=bool(sources),
            primary_source=sources[0] if sources else None,
            source_count=len(sources),
            source_types=source_types,
        )
