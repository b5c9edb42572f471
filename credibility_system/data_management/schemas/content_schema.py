"""Schemas for the submitted text and the signals derived from it."""

from pydantic import Field, field_validator

from credibility_system.data_management.schemas.base import WireModel


class ContentSubmission(WireModel):
    """Raw text submitted for assessment. Created per request, never stored."""

    content: str = Field(..., description="Text to assess")

    @field_validator("content")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("content must not be empty")
        return value


class ContentFactors(WireModel):
    """Structural signals extracted once from the submitted text."""

    length: int = Field(..., ge=0, description="Character count of the text")
    complexity: float = Field(..., ge=0.0, le=1.0, description="Weighted complexity score")
    citation_count: int = Field(..., ge=0, description="Citation pattern matches (may double count)")
    quotes: list[str] = Field(default_factory=list, description="Quoted spans in order of appearance")
    dates: list[str] = Field(default_factory=list, description="Date strings, pattern then position order")
    has_statistics: bool = Field(False, description="Any statistical pattern present")
