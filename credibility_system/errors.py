"""Error taxonomy for the credibility pipeline.

InvalidInput rejects a submission before any adapter is dispatched.
UpstreamFailure (and its specialisations) aborts a submission when a
hard-fail adapter gives up. News verification failures are never raised
past the adapter boundary; they degrade into an unverified result.
"""

from typing import Optional

from credibility_system.data_management.schemas.report_schema import AnalysisFailure

UPSTREAM_RETRY_AFTER = 5


class CredibilityError(Exception):
    """Base class for errors surfaced to callers of the pipeline."""

    kind = "credibility_error"
    summary = "Analysis failed"
    retry_after = UPSTREAM_RETRY_AFTER

    def __init__(self, message: str, *, service: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.service = service

    def to_failure(self) -> AnalysisFailure:
        """Convert to the structured error object returned to callers."""
        return AnalysisFailure(
            error=self.summary,
            details=self.message,
            kind=self.kind,
            service=self.service,
            retry_after=self.retry_after,
        )


class ConfigurationError(CredibilityError):
    """A required credential or setting is missing."""

    kind = "configuration_error"
    summary = "Service misconfigured"
    retry_after = 0


class InvalidInput(CredibilityError):
    """Submitted text is missing or empty."""

    kind = "invalid_input"
    summary = "Content is required"
    retry_after = 0


class UpstreamFailure(CredibilityError):
    """An external analyzer failed after all retries."""

    kind = "upstream_failure"


class UpstreamTimeout(UpstreamFailure):
    """An attempt against an external analyzer exceeded its deadline."""

    kind = "upstream_timeout"


class MissingLabel(UpstreamFailure):
    """Classifier response lacks a label the score math depends on."""

    kind = "missing_label"

    def __init__(self, label: str, *, service: Optional[str] = None) -> None:
        super().__init__(f"Classifier response is missing label '{label}'", service=service)
        self.label = label


class MalformedResponse(UpstreamFailure):
    """External response body does not have the expected shape."""

    kind = "malformed_response"
