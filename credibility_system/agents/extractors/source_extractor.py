"""Source attribution extraction from raw text.

Runs an ordered table of recognition rules over the text. Each rule pairs a
compiled pattern with the source type it detects and a function that turns a
match into a raw name. Names are cleaned, deduplicated case-insensitively
(first rule wins) and sorted by confidence tier; ties keep first-seen order.
"""

import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from credibility_system.config.logging import get_logger
from credibility_system.config.source_patterns import (
    BOILERPLATE_PREFIX_PATTERN,
    CITED_SOURCE_PATTERN,
    LOCAL_NEWS_PATTERN,
    MAJOR_NEWS_AGENCIES,
    MAJOR_NEWS_AGENCY_PATTERN,
    NEWS_WEBSITE_PATTERN,
    OFFICIAL_SOURCE_PATTERNS,
    SOCIAL_MEDIA_PATTERN,
    SOURCE_TRIM_CHARS,
)
from credibility_system.data_management.schemas import (
    ConfidenceTier,
    ExtractedSource,
    SourceType,
)

SOURCE_TYPE_CONFIDENCE: Dict[SourceType, ConfidenceTier] = {
    SourceType.MAJOR_NEWS_AGENCY: ConfidenceTier.HIGH,
    SourceType.OFFICIAL_SOURCE: ConfidenceTier.HIGH,
    SourceType.NEWS_WEBSITE: ConfidenceTier.MEDIUM,
    SourceType.SOCIAL_MEDIA: ConfidenceTier.LOW,
    SourceType.CITED_SOURCE: ConfidenceTier.LOW,
    SourceType.LOCAL_NEWS: ConfidenceTier.LOW,
}


def _whole_match(match: re.Match) -> str:
    return match.group(0)


def _first_group(match: re.Match) -> str:
    return match.group(1) or match.group(0)


def _agency_name(match: re.Match) -> str:
    text = match.group(0)
    return MAJOR_NEWS_AGENCIES.get(text.lower(), text)


@dataclass(frozen=True)
class SourceRule:
    """One recognition rule: pattern, detected type and name extraction.

    Attributes:
        pattern: Compiled regex to scan the text with
        source_type: Type assigned to every name this rule yields
        name_of: Turns a match into the raw (uncleaned) source name
    """

    pattern: re.Pattern
    source_type: SourceType
    name_of: Callable[[re.Match], str] = field(default=_first_group)

    @property
    def confidence(self) -> ConfidenceTier:
        return SOURCE_TYPE_CONFIDENCE[self.source_type]

    def raw_names(self, text: str) -> List[str]:
        return [self.name_of(match) for match in self.pattern.finditer(text)]


def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE)


DEFAULT_RULES: List[SourceRule] = [
    SourceRule(_compile(MAJOR_NEWS_AGENCY_PATTERN), SourceType.MAJOR_NEWS_AGENCY, _agency_name),
    SourceRule(_compile(SOCIAL_MEDIA_PATTERN), SourceType.SOCIAL_MEDIA),
    SourceRule(_compile(NEWS_WEBSITE_PATTERN), SourceType.NEWS_WEBSITE, _whole_match),
    SourceRule(_compile(CITED_SOURCE_PATTERN), SourceType.CITED_SOURCE),
    *[SourceRule(_compile(p), SourceType.OFFICIAL_SOURCE) for p in OFFICIAL_SOURCE_PATTERNS],
    SourceRule(_compile(LOCAL_NEWS_PATTERN), SourceType.LOCAL_NEWS),
]


class SourceExtractor:
    """
    Extracts attributed sources from text using an ordered rule table.

    Stateless after construction: the same text always yields the same,
    identically ordered list.

    Usage:
        extractor = SourceExtractor()
        sources = extractor.extract("According to Reuters, ...")

    Attributes:
        rules: Ordered recognition rules
    """

    _boilerplate = re.compile(BOILERPLATE_PREFIX_PATTERN, re.IGNORECASE)
    _whitespace = re.compile(r"\s+")

    def __init__(self, rules: Optional[List[SourceRule]] = None):
        self.rules = list(rules) if rules is not None else list(DEFAULT_RULES)
        self.logger = get_logger("extractors.sources")

    def extract(self, text: str) -> List[ExtractedSource]:
        """
        Extract, clean, deduplicate and rank sources named in ``text``.

        Args:
            text: Raw submitted text

        Returns:
            ExtractedSource list sorted High > Medium > Low, stable within a tier
        """
        sources: List[ExtractedSource] = []
        seen: set[str] = set()

        for rule in self.rules:
            for raw in rule.raw_names(text):
                name = self.clean_name(raw)
                key = name.lower()
                if not name or key in seen:
                    continue
                seen.add(key)
                sources.append(
                    ExtractedSource(
                        name=name,
                        source_type=rule.source_type,
                        confidence=rule.confidence,
                    )
                )

        sources.sort(key=lambda s: s.confidence.rank, reverse=True)
        self.logger.debug(
            "Sources extracted",
            count=len(sources),
            types=sorted({s.source_type.value for s in sources}),
        )
        return sources

    def clean_name(self, raw: str) -> str:
        """Trim punctuation and leading attribution words from a raw name."""
        name = raw.strip(SOURCE_TRIM_CHARS)
        name = self._boilerplate.sub("", name)
        name = self._whitespace.sub(" ", name)
        return name.strip(SOURCE_TRIM_CHARS)


_DEFAULT_EXTRACTOR = SourceExtractor()


def extract_sources(text: str) -> List[ExtractedSource]:
    """Extract sources with the default rule table."""
    return _DEFAULT_EXTRACTOR.extract(text)
