"""News verification adapter (soft-fail).

Looks for published coverage of the submission: extracts keywords, queries
the news index, and scores each returned article by lexical overlap with the
text (best of title and description). The text counts as verified when the
best article overlaps by more than the similarity threshold.

Any failure (no keywords, network error, no results) degrades to an
unverified result instead of raising, so a news outage never aborts a
submission.

Usage:
    verifier = NewsVerifier()
    result = await verifier.verify(text)
"""

from typing import Any, Optional

import httpx

from credibility_system.agents.analyzers.news_api_client import NewsAPIClient
from credibility_system.agents.analyzers.similarity import similarity
from credibility_system.data_management.schemas import (
    MatchedArticle,
    NewsVerificationResult,
)
from credibility_system.llm.resilient_caller import ResilientCaller
from credibility_system.utils.logging import get_structured_logger
from credibility_system.utils.numbers import round_half_up

SIMILARITY_THRESHOLD = 0.6
MAX_KEYWORDS = 5
MIN_KEYWORD_LENGTH = 5
MAX_SCORED_ARTICLES = 5
MAX_MATCHED_ARTICLES = 3


def extract_keywords(text: str, limit: int = MAX_KEYWORDS) -> list[str]:
    """First ``limit`` whitespace tokens longer than four characters."""
    return [word for word in text.split() if len(word) >= MIN_KEYWORD_LENGTH][:limit]


def build_query(keywords: list[str]) -> str:
    return " OR ".join(keywords)


class NewsVerifier:
    """Soft-fail adapter around the news search index.

    Attributes:
        similarity_threshold: Best-article overlap above which text is verified
        caller: ResilientCaller wrapping each search
    """

    SIMILARITY_THRESHOLD = SIMILARITY_THRESHOLD

    def __init__(
        self,
        client: Optional[NewsAPIClient] = None,
        caller: Optional[ResilientCaller] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        similarity_threshold: float = SIMILARITY_THRESHOLD,
    ) -> None:
        self._client = client
        self._http_client = http_client
        self.caller = caller or ResilientCaller(name="news_verifier")
        self.similarity_threshold = similarity_threshold
        self._logger = get_structured_logger("NewsVerifier")

    async def verify(self, text: str) -> NewsVerificationResult:
        """Verify ``text`` against the news index; never raises on failure."""
        keywords = extract_keywords(text)
        if not keywords:
            self._logger.info("news_verification_skipped", reason="no_keywords")
            return NewsVerificationResult.unverified("no keywords to search for")

        query = build_query(keywords)
        try:
            response = await self._search(query)
        except Exception as e:
            self._logger.warning(
                "news_verification_degraded",
                query=query,
                error=str(e),
                error_type=type(e).__name__,
            )
            return NewsVerificationResult.unverified(str(e) or type(e).__name__)

        articles = response.get("articles") if isinstance(response, dict) else None
        if not articles:
            self._logger.info("news_verification_no_results", query=query)
            return NewsVerificationResult.unverified("no matching articles")

        try:
            result = self.score_articles(text, articles)
        except (AttributeError, TypeError, ValueError) as e:
            # Malformed article payloads degrade like any other search failure
            self._logger.warning(
                "news_verification_degraded",
                query=query,
                error=str(e),
                error_type=type(e).__name__,
            )
            return NewsVerificationResult.unverified(f"malformed article: {e}")

        self._logger.info(
            "news_verification_completed",
            query=query,
            articles=len(articles),
            confidence=result.confidence,
            is_verified=result.is_verified,
        )
        return result

    def score_articles(self, text: str, articles: list[dict[str, Any]]) -> NewsVerificationResult:
        """Score up to five articles and build the verification result."""
        scored = articles[:MAX_SCORED_ARTICLES]
        best = max(
            max(similarity(text, a.get("title")), similarity(text, a.get("description")))
            for a in scored
        )
        return NewsVerificationResult(
            is_verified=best > self.similarity_threshold,
            confidence=round_half_up(best * 100),
            matched_articles=[self._to_match(a) for a in articles[:MAX_MATCHED_ARTICLES]],
        )

    async def _search(self, query: str) -> dict[str, Any]:
        if self._client is not None:
            return await self.caller.call(lambda: self._client.search_articles(query))

        async with NewsAPIClient(http_client=self._http_client) as client:
            return await self.caller.call(lambda: client.search_articles(query))

    @staticmethod
    def _to_match(article: dict[str, Any]) -> MatchedArticle:
        source = article.get("source") or {}
        return MatchedArticle(
            title=article.get("title"),
            source=source.get("name") if isinstance(source, dict) else str(source),
            url=article.get("url"),
            published_at=article.get("publishedAt"),
        )
