"""Tests for structural content factors."""

import pytest

from credibility_system.agents.extractors import (
    ContentFactorAnalyzer,
    analyze_content_factors,
    calculate_text_complexity,
    count_citations,
    extract_dates,
    extract_quotes,
    has_statistics,
)


class TestComplexity:
    def test_short_sentence(self):
        # word length 5.5/8, sentence length 2/25, no complex words
        assert calculate_text_complexity("Hello world.") == pytest.approx(0.23025)

    @pytest.mark.parametrize("text", ["", "   ", "...", "?!"])
    def test_degenerate_text_scores_zero(self, text):
        assert calculate_text_complexity(text) == 0.0

    def test_bounded(self):
        text = "Notwithstanding extraordinarily complicated circumstances, " * 20
        score = calculate_text_complexity(text)
        assert 0.0 <= score <= 1.0

    def test_connectives_count_as_complex(self):
        plain = calculate_text_complexity("It is so. We go now.")
        connective = calculate_text_complexity("It is so. However we go.")
        assert connective > plain


class TestCitations:
    def test_counts_every_pattern(self):
        text = "According to the study [1], as reported by the paper (2021). Source: archive"
        assert count_citations(text) == 5

    def test_case_insensitive(self):
        assert count_citations("ACCORDING TO them, cited by us") == 2

    def test_none(self):
        assert count_citations("plain sentence") == 0


class TestQuotes:
    def test_order_of_appearance_across_quote_styles(self):
        text = "He said \"first\" and then ‘second’ and later 'third'. Don't forget “fourth”."
        assert extract_quotes(text) == ["first", "second", "third", "fourth"]

    def test_apostrophes_are_not_quotes(self):
        assert extract_quotes("It's the people's choice") == []

    def test_trailing_punctuation_trimmed(self, scenario_text):
        assert extract_quotes(scenario_text) == ["It was fair"]

    def test_duplicates_kept(self):
        assert extract_quotes('"again" and "again"') == ["again", "again"]


class TestDates:
    def test_pattern_then_position_order(self):
        text = "Signed 2024-03-01, announced 01/05/2024 and again on March 5, 2024 or 5 March 2024"
        assert extract_dates(text) == [
            "01/05/2024",
            "2024-03-01",
            "March 5, 2024",
            "5 March 2024",
        ]

    def test_no_dates(self):
        assert extract_dates("sometime last week") == []


class TestStatistics:
    @pytest.mark.parametrize(
        "text",
        [
            "turnout hit 50%",
            "a budget of $1,200.50",
            "3 million people",
            "sales grew by a lot",
            "Survey shows support",
        ],
    )
    def test_detected(self, text):
        assert has_statistics(text) is True

    def test_absent(self):
        assert has_statistics("no figures here") is False


class TestContentFactorAnalyzer:
    def test_scenario(self, scenario_text):
        factors = ContentFactorAnalyzer().analyze(scenario_text)

        assert factors.length == len(scenario_text)
        assert factors.citation_count == 1
        assert factors.quotes == ["It was fair"]
        assert factors.dates == ["01/05/2024"]
        assert factors.has_statistics is True
        assert 0.0 < factors.complexity <= 1.0

    def test_wrapper_matches_analyzer(self, scenario_text):
        assert analyze_content_factors(scenario_text) == ContentFactorAnalyzer().analyze(scenario_text)
