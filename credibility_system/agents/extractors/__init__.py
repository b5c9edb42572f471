"""Pure, text-only signal extractors."""

from credibility_system.agents.extractors.content_factors import (
    ContentFactorAnalyzer,
    analyze_content_factors,
    calculate_text_complexity,
    count_citations,
    extract_dates,
    extract_quotes,
    has_statistics,
)
from credibility_system.agents.extractors.source_extractor import (
    SourceExtractor,
    SourceRule,
    extract_sources,
)

__all__ = [
    "ContentFactorAnalyzer",
    "SourceExtractor",
    "SourceRule",
    "analyze_content_factors",
    "calculate_text_complexity",
    "count_citations",
    "extract_dates",
    "extract_quotes",
    "extract_sources",
    "has_statistics",
]
