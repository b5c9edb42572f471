"""Structural content factors: complexity, citations, quotes, dates, statistics.

Each factor is a pure function of the text. ContentFactorAnalyzer bundles
them into one immutable ContentFactors record per submission.

Complexity formula (clamped to [0, 1]):
    0.3 * min(avg_word_len / 8, 1)
  + 0.3 * min(avg_sentence_len / 25, 1)
  + 0.4 * min(complex_words / (word_count * 0.1), 1)
"""

import re
from typing import List

from credibility_system.config.logging import get_logger
from credibility_system.config.source_patterns import (
    CITATION_PATTERNS,
    COMPLEX_WORD_DENSITY,
    COMPLEX_WORD_PATTERN,
    COMPLEXITY_WEIGHTS,
    DATE_PATTERNS,
    QUOTE_PATTERNS,
    QUOTE_TRIM_CHARS,
    SENTENCE_LENGTH_NORMALISER,
    STATISTIC_PATTERNS,
    WORD_LENGTH_NORMALISER,
)
from credibility_system.data_management.schemas import ContentFactors

_CITATIONS = [re.compile(p, re.IGNORECASE) for p in CITATION_PATTERNS]
_QUOTES = [re.compile(p) for p in QUOTE_PATTERNS]
_DATES = [re.compile(p) for p in DATE_PATTERNS]
_STATISTICS = [re.compile(p, re.IGNORECASE) for p in STATISTIC_PATTERNS]
_COMPLEX_WORDS = re.compile(COMPLEX_WORD_PATTERN, re.IGNORECASE)
_SENTENCE_BREAK = re.compile(r"[.!?]+")


def calculate_text_complexity(text: str) -> float:
    """
    Score text complexity in [0, 1].

    Combines average word length, average sentence length and the density of
    long or connective words. Text with no words or no sentences scores 0.
    """
    words = text.split()
    sentences = [s for s in _SENTENCE_BREAK.split(text) if s.strip()]
    if not words or not sentences:
        return 0.0

    avg_word_length = sum(len(w) for w in words) / len(words)
    avg_sentence_length = len(words) / len(sentences)
    complex_words = len(_COMPLEX_WORDS.findall(text))

    length_score = min(avg_word_length / WORD_LENGTH_NORMALISER, 1.0)
    sentence_score = min(avg_sentence_length / SENTENCE_LENGTH_NORMALISER, 1.0)
    density_score = min(complex_words / (len(words) * COMPLEX_WORD_DENSITY), 1.0)

    score = (
        COMPLEXITY_WEIGHTS["word_length"] * length_score
        + COMPLEXITY_WEIGHTS["sentence_length"] * sentence_score
        + COMPLEXITY_WEIGHTS["complex_words"] * density_score
    )
    return max(0.0, min(1.0, score))


def count_citations(text: str) -> int:
    """Total matches across all citation patterns (overlaps are counted twice)."""
    return sum(len(pattern.findall(text)) for pattern in _CITATIONS)


def extract_quotes(text: str) -> List[str]:
    """Quoted span contents, in order of appearance, without delimiters."""
    found: list[tuple[int, str]] = []
    for pattern in _QUOTES:
        for match in pattern.finditer(text):
            quote = match.group(1).strip(QUOTE_TRIM_CHARS)
            if quote:
                found.append((match.start(), quote))
    found.sort(key=lambda item: item[0])
    return [quote for _, quote in found]


def extract_dates(text: str) -> List[str]:
    """Date strings, grouped by pattern and ordered by position within each."""
    dates: List[str] = []
    for pattern in _DATES:
        dates.extend(pattern.findall(text))
    return dates


def has_statistics(text: str) -> bool:
    """True if any percentage, currency, magnitude, trend or stats phrase appears."""
    return any(pattern.search(text) for pattern in _STATISTICS)


class ContentFactorAnalyzer:
    """
    Derives ContentFactors for a submission.

    Usage:
        analyzer = ContentFactorAnalyzer()
        factors = analyzer.analyze(text)
    """

    def __init__(self):
        self.logger = get_logger("extractors.factors")

    def analyze(self, text: str) -> ContentFactors:
        factors = ContentFactors(
            length=len(text),
            complexity=calculate_text_complexity(text),
            citation_count=count_citations(text),
            quotes=extract_quotes(text),
            dates=extract_dates(text),
            has_statistics=has_statistics(text),
        )
        self.logger.debug(
            "Content factors computed",
            length=factors.length,
            complexity=round(factors.complexity, 3),
            citations=factors.citation_count,
            quotes=len(factors.quotes),
            dates=len(factors.dates),
        )
        return factors


def analyze_content_factors(text: str) -> ContentFactors:
    """Convenience wrapper around ContentFactorAnalyzer."""
    return ContentFactorAnalyzer().analyze(text)
