"""Prompt templates and label sets for the external analyzers."""

from credibility_system.config.prompts.assessment_prompts import (
    ASSESSOR_SYSTEM_PROMPT,
    CONTENT_TYPE_LABELS,
    CONTENT_TYPE_SUFFIX,
    FACTUALITY_LABELS,
    FACTUALITY_SUFFIX,
    NEWS_ARTICLE_LABEL,
    REQUIRED_FACTUALITY_LABELS,
)

__all__ = [
    "ASSESSOR_SYSTEM_PROMPT",
    "CONTENT_TYPE_LABELS",
    "CONTENT_TYPE_SUFFIX",
    "FACTUALITY_LABELS",
    "FACTUALITY_SUFFIX",
    "NEWS_ARTICLE_LABEL",
    "REQUIRED_FACTUALITY_LABELS",
]
