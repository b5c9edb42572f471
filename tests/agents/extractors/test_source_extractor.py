"""Tests for SourceExtractor attribution rules.

Tests cover:
- Rule types and confidence tiers (agency, social, website, cited, official, local)
- Case-insensitive deduplication with first rule winning
- Confidence-tier ordering, stable within a tier
- Name cleanup (punctuation, attribution prefixes)
- Idempotence and custom rule tables
"""

import re

import pytest

from credibility_system.agents.extractors import SourceExtractor, SourceRule, extract_sources
from credibility_system.data_management.schemas import ConfidenceTier, SourceType


@pytest.fixture
def extractor() -> SourceExtractor:
    return SourceExtractor()


def _summary(sources):
    return [(s.name, s.source_type, s.confidence) for s in sources]


class TestScenario:
    def test_reuters_and_official_source(self, extractor, scenario_text):
        sources = extractor.extract(scenario_text)

        assert _summary(sources) == [
            ("Reuters", SourceType.MAJOR_NEWS_AGENCY, ConfidenceTier.HIGH),
            ("officials", SourceType.OFFICIAL_SOURCE, ConfidenceTier.HIGH),
        ]

    def test_idempotent(self, extractor, scenario_text):
        assert extractor.extract(scenario_text) == extractor.extract(scenario_text)


class TestRuleTypes:
    def test_social_media(self, extractor):
        sources = extractor.extract("The statement was posted on Twitter by the mayor")

        assert _summary(sources) == [("Twitter", SourceType.SOCIAL_MEDIA, ConfidenceTier.LOW)]

    def test_news_website(self, extractor):
        sources = extractor.extract("Full coverage is at www.example.com today")

        assert _summary(sources) == [
            ("www.example.com", SourceType.NEWS_WEBSITE, ConfidenceTier.MEDIUM)
        ]

    def test_official_from_phrase(self, extractor):
        sources = extractor.extract("A statement from the Ministry of Health, issued late")

        assert _summary(sources) == [
            ("the Ministry of Health", SourceType.OFFICIAL_SOURCE, ConfidenceTier.HIGH)
        ]

    def test_local_news(self, extractor):
        sources = extractor.extract("The flooding was covered by regional press Valley Times, first")

        assert _summary(sources) == [("Valley Times", SourceType.LOCAL_NEWS, ConfidenceTier.LOW)]

    def test_capital_ap_is_agency(self, extractor):
        sources = extractor.extract("The figures were first reported by AP")

        assert _summary(sources) == [("AP", SourceType.MAJOR_NEWS_AGENCY, ConfidenceTier.HIGH)]

    def test_lowercase_ap_is_not_agency(self, extractor):
        assert extractor.extract("follow the ap style guide") == []

    def test_agency_name_canonicalised(self, extractor):
        sources = extractor.extract("a story first carried by reuters")

        assert sources[0].name == "Reuters"

    def test_no_sources(self, extractor):
        assert extractor.extract("Nothing attributed here at all") == []


class TestDeduplicationAndOrdering:
    def test_case_insensitive_dedup_first_rule_wins(self, extractor):
        sources = extractor.extract("Reuters said so. According to REUTERS, it held")

        assert len(sources) == 1
        assert sources[0].source_type == SourceType.MAJOR_NEWS_AGENCY

    def test_sorted_by_confidence_tier(self, extractor):
        text = (
            "According to John Smith, the report at www.example.com was shared. "
            "The BBC later confirmed it."
        )

        assert [s.name for s in extractor.extract(text)] == [
            "BBC",
            "www.example.com",
            "John Smith",
        ]

    def test_ties_keep_first_seen_order(self, extractor):
        sources = extractor.extract("CNN and Bloomberg both ran it, as did NPR")

        assert [s.name for s in sources] == ["CNN", "Bloomberg", "NPR"]


class TestCleanName:
    def test_strips_punctuation_and_prefix(self, extractor):
        assert extractor.clean_name('  "via Reuters". ') == "Reuters"

    def test_collapses_whitespace(self, extractor):
        assert extractor.clean_name("the   city   council") == "the city council"

    def test_empty_after_cleanup(self, extractor):
        assert extractor.clean_name(' ".," ') == ""


class TestCustomRules:
    def test_custom_rule_table(self):
        rule = SourceRule(
            re.compile(r"\bAcme Wire\b", re.IGNORECASE),
            SourceType.MAJOR_NEWS_AGENCY,
            lambda m: m.group(0),
        )
        extractor = SourceExtractor(rules=[rule])

        sources = extractor.extract("acme wire reported it; Reuters too")

        assert _summary(sources) == [
            ("acme wire", SourceType.MAJOR_NEWS_AGENCY, ConfidenceTier.HIGH)
        ]

    def test_module_function_uses_default_rules(self, scenario_text):
        assert [s.name for s in extract_sources(scenario_text)] == ["Reuters", "officials"]
