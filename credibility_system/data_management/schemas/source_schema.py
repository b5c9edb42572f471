"""Schemas for sources attributed inside submitted text."""

from enum import Enum

from pydantic import Field

from credibility_system.data_management.schemas.base import WireModel


class SourceType(str, Enum):
    """Kind of attribution a recognition rule detected."""

    MAJOR_NEWS_AGENCY = "Major News Agency"
    SOCIAL_MEDIA = "Social Media"
    NEWS_WEBSITE = "News Website"
    CITED_SOURCE = "Cited Source"
    OFFICIAL_SOURCE = "Official Source"
    LOCAL_NEWS = "Local News"


class ConfidenceTier(str, Enum):
    """Confidence attached to a source, fixed per source type."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        """Sort rank; higher is more trusted."""
        return _TIER_RANK[self]


_TIER_RANK = {
    ConfidenceTier.HIGH: 3,
    ConfidenceTier.MEDIUM: 2,
    ConfidenceTier.LOW: 1,
}


class ExtractedSource(WireModel):
    """A source named in the submitted text."""

    name: str = Field(..., min_length=1, description="Cleaned source name")
    source_type: SourceType = Field(..., alias="type", description="Rule that matched")
    confidence: ConfidenceTier = Field(..., description="Tier fixed by source type")
