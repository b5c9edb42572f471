"""Credibility pipeline orchestrator.

State machine per submission:

    RECEIVED -> DISPATCHED -> MERGING -> COMPLETED
        |                        |
        +------> FAILED <--------+

RECEIVED validates the text (empty -> FAILED with InvalidInput, nothing is
dispatched). DISPATCHED starts the classifier, assessor and news verifier
concurrently and runs the local extractors while they are in flight.
MERGING waits for every adapter to settle; siblings are never cancelled when
one fails. A hard-fail adapter error moves the run to FAILED and no report is
built. A soft-fail adapter error is replaced by an unverified result.
COMPLETED runs the fusion engine once.

Submissions share no mutable state, so one pipeline instance can serve many
concurrent submissions.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Awaitable, Generic, Optional, TypeVar, Union

from pydantic import ValidationError

from credibility_system.agents.analyzers import AssessorAdapter, ClassifierAdapter, NewsVerifier
from credibility_system.agents.extractors import ContentFactorAnalyzer, SourceExtractor
from credibility_system.data_management.schemas import (
    AnalysisFailure,
    ContentSubmission,
    CredibilityReport,
    NewsVerificationResult,
)
from credibility_system.errors import CredibilityError, InvalidInput, UpstreamFailure
from credibility_system.scoring import FusionEngine
from credibility_system.utils.logging import get_correlation_id, get_structured_logger

T = TypeVar("T")


class PipelineState(str, Enum):
    RECEIVED = "received"
    DISPATCHED = "dispatched"
    MERGING = "merging"
    COMPLETED = "completed"
    FAILED = "failed"


class FailurePolicy(str, Enum):
    """How the orchestrator treats an adapter's failure."""

    HARD = "hard"  # reject the submission
    SOFT = "soft"  # substitute a degraded result


@dataclass
class AdapterOutcome(Generic[T]):
    """Settled result of one adapter call: a value or an error, plus its policy."""

    name: str
    policy: FailurePolicy
    value: Optional[T] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class PipelineRun:
    """Progress and result of one submission.

    Attributes:
        correlation_id: Identifier bound to every log line of this run
        state: Current state
        transitions: Every state entered, in order
        report: Set only on COMPLETED
        error: Set only on FAILED
    """

    correlation_id: str = field(default_factory=get_correlation_id)
    state: PipelineState = PipelineState.RECEIVED
    transitions: list[PipelineState] = field(default_factory=lambda: [PipelineState.RECEIVED])
    report: Optional[CredibilityReport] = None
    error: Optional[CredibilityError] = None
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    finished_at: Optional[datetime] = None

    def advance(self, state: PipelineState) -> None:
        self.state = state
        self.transitions.append(state)
        if state in (PipelineState.COMPLETED, PipelineState.FAILED):
            self.finished_at = datetime.now(timezone.utc)

    @property
    def succeeded(self) -> bool:
        return self.state == PipelineState.COMPLETED

    @property
    def failure(self) -> Optional[AnalysisFailure]:
        return self.error.to_failure() if self.error else None

    def result(self) -> Union[CredibilityReport, AnalysisFailure]:
        """The report on success, the structured failure otherwise."""
        if self.report is not None:
            return self.report
        if self.error is not None:
            return self.error.to_failure()
        raise RuntimeError(f"Run {self.correlation_id} has not finished (state={self.state.value})")


class CredibilityPipeline:
    """Drives one submission from raw text to a credibility report.

    Attributes:
        classifier: Hard-fail zero-shot classifier adapter
        assessor: Hard-fail generative assessor adapter
        news_verifier: Soft-fail news verification adapter
        fusion: Fusion engine
    """

    def __init__(
        self,
        classifier: Optional[ClassifierAdapter] = None,
        assessor: Optional[AssessorAdapter] = None,
        news_verifier: Optional[NewsVerifier] = None,
        source_extractor: Optional[SourceExtractor] = None,
        factor_analyzer: Optional[ContentFactorAnalyzer] = None,
        fusion: Optional[FusionEngine] = None,
    ) -> None:
        self.classifier = classifier or ClassifierAdapter()
        self.assessor = assessor or AssessorAdapter()
        self.news_verifier = news_verifier or NewsVerifier()
        self.source_extractor = source_extractor or SourceExtractor()
        self.factor_analyzer = factor_analyzer or ContentFactorAnalyzer()
        self.fusion = fusion or FusionEngine()
        self._logger = get_structured_logger("CredibilityPipeline")

    async def analyze(self, content: Any) -> CredibilityReport:
        """Analyze ``content`` and return the report.

        Raises:
            InvalidInput: Empty or missing text
            UpstreamFailure: Classifier or assessor failed after retries
        """
        run = await self.evaluate(content)
        if run.error is not None:
            raise run.error
        assert run.report is not None
        return run.report

    async def evaluate(self, content: Any) -> PipelineRun:
        """Analyze ``content`` and return the finished run (never raises CredibilityError)."""
        run = PipelineRun()
        logger = self._logger.bind(correlation_id=run.correlation_id)

        try:
            submission = self._validate(content)
        except InvalidInput as e:
            self._fail(run, e, logger)
            return run

        text = submission.content
        logger.info("submission_received", length=len(text))

        run.advance(PipelineState.DISPATCHED)
        tasks = [
            asyncio.create_task(self._settle("classifier", FailurePolicy.HARD, self.classifier.classify(text))),
            asyncio.create_task(self._settle("generative_assessor", FailurePolicy.HARD, self.assessor.assess(text))),
            asyncio.create_task(self._settle("news_verifier", FailurePolicy.SOFT, self.news_verifier.verify(text))),
        ]
        logger.debug("adapters_dispatched", adapters=3)

        # Local extractors run while the adapters are in flight
        sources = self.source_extractor.extract(text)
        factors = self.factor_analyzer.analyze(text)

        run.advance(PipelineState.MERGING)
        classifier_outcome, assessor_outcome, news_outcome = await asyncio.gather(*tasks)

        for outcome in (classifier_outcome, assessor_outcome):
            if not outcome.ok:
                self._fail(run, self._as_upstream(outcome), logger)
                return run

        news = news_outcome.value if news_outcome.ok else None
        if news is None:
            logger.warning("news_verification_replaced", error=str(news_outcome.error))
            news = NewsVerificationResult.unverified(str(news_outcome.error))

        run.report = self.fusion.fuse(
            text,
            classifier_outcome.value,
            assessor_outcome.value,
            news,
            sources,
            factors,
        )
        run.advance(PipelineState.COMPLETED)
        logger.info(
            "submission_completed",
            credibility_score=run.report.combined_metrics.credibility_score,
            truth_score=run.report.combined_metrics.truth_score,
            reliability=run.report.reliability_label,
            news_degraded=news.degraded,
        )
        return run

    @staticmethod
    def _validate(content: Any) -> ContentSubmission:
        if not isinstance(content, str):
            raise InvalidInput("Content must be a non-empty string")
        try:
            return ContentSubmission(content=content)
        except ValidationError as e:
            raise InvalidInput("Content is required") from e

    @staticmethod
    async def _settle(name: str, policy: FailurePolicy, call: Awaitable[T]) -> AdapterOutcome[T]:
        """Await ``call`` and wrap its result or exception; siblings are unaffected."""
        try:
            return AdapterOutcome(name=name, policy=policy, value=await call)
        except Exception as e:
            return AdapterOutcome(name=name, policy=policy, error=e)

    @staticmethod
    def _as_upstream(outcome: AdapterOutcome) -> CredibilityError:
        error = outcome.error
        if isinstance(error, CredibilityError):
            return error
        wrapped = UpstreamFailure(f"{outcome.name} failed: {error}", service=outcome.name)
        wrapped.__cause__ = error
        return wrapped

    @staticmethod
    def _fail(run: PipelineRun, error: CredibilityError, logger) -> None:
        run.error = error
        run.advance(PipelineState.FAILED)
        logger.warning(
            "submission_failed",
            kind=error.kind,
            service=error.service,
            error=error.message,
        )
