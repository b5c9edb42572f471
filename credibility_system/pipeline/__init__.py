"""Pipeline orchestration for credibility assessment.

Usage:
    from credibility_system.pipeline import CredibilityPipeline

    pipeline = CredibilityPipeline()
    report = await pipeline.analyze(text)
"""

from credibility_system.pipeline.credibility_pipeline import (
    AdapterOutcome,
    CredibilityPipeline,
    FailurePolicy,
    PipelineRun,
    PipelineState,
)

__all__ = [
    "AdapterOutcome",
    "CredibilityPipeline",
    "FailurePolicy",
    "PipelineRun",
    "PipelineState",
]
