"""NewsAPI client for keyword searches against the Everything endpoint.

Used by the news verifier to find published coverage of a submission. The
client raises on any transport or API-level error; degrading to an
unverified result is the verifier's job.
"""

from typing import Any, Dict, Optional

import httpx

from credibility_system.config.logging import get_logger
from credibility_system.config.settings import settings


class NewsAPIError(Exception):
    """NewsAPI answered with a non-ok status."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code


class NewsAPIClient:
    """
    Async client for NewsAPI.org Everything endpoint.

    Typical usage:
        async with NewsAPIClient() as client:
            result = await client.search_articles("election OR counted")

    Attributes:
        api_key: NewsAPI key (sent as a bearer credential)
        url: Everything endpoint URL
        http_client: httpx AsyncClient for HTTP operations
        request_count: Requests made (for monitoring)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize NewsAPI client.

        Args:
            api_key: Optional key override; defaults to NEWS_API_KEY from settings
            url: Optional endpoint override
            http_client: Optional shared client; one is created in ``async with`` otherwise
            timeout: HTTP timeout in seconds for an owned client
        """
        self.api_key = api_key or settings.news_api_key
        self.url = url or settings.news_api_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.http_client = http_client
        self._owns_client = http_client is None
        self.request_count = 0
        self.logger = get_logger("analyzers.news_api")

    async def __aenter__(self) -> "NewsAPIClient":
        if self.http_client is None:
            self.http_client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._owns_client and self.http_client:
            await self.http_client.aclose()
            self.http_client = None

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    async def search_articles(
        self,
        query: str,
        language: Optional[str] = None,
        sort_by: str = "relevancy",
        page_size: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Search articles via NewsAPI everything endpoint.

        Args:
            query: Search query string (required)
            language: Language code (default from settings)
            sort_by: 'relevancy', 'popularity', or 'publishedAt'
            page_size: Maximum articles to return (default from settings)

        Returns:
            Parsed response with 'status', 'totalResults' and 'articles'

        Raises:
            ValueError: If query is empty
            NewsAPIError: If the API reports an error status
            httpx.HTTPError: If the HTTP request fails
        """
        if not query or not query.strip():
            raise ValueError("Query parameter is required and cannot be empty")
        if self.http_client is None:
            raise RuntimeError("HTTP client not initialized. Use 'async with' context manager.")

        params = {
            "q": query,
            "language": language or settings.news_language,
            "sortBy": sort_by,
            "pageSize": page_size or settings.news_page_size,
        }

        self.logger.debug("Searching articles via NewsAPI", query=query)
        response = await self.http_client.get(self.url, params=params, headers=self._headers())
        self.request_count += 1

        if response.status_code == 401:
            raise NewsAPIError("Invalid NewsAPI key", code="apiKeyInvalid")
        if response.status_code == 429:
            raise NewsAPIError("NewsAPI rate limit exceeded", code="rateLimited")
        response.raise_for_status()

        result = response.json()
        if result.get("status") != "ok":
            raise NewsAPIError(
                result.get("message", "Unknown NewsAPI error"),
                code=result.get("code"),
            )

        self.logger.info(
            "NewsAPI search returned articles",
            query=query,
            returned=len(result.get("articles", [])),
            total_results=result.get("totalResults", 0),
        )
        return result
