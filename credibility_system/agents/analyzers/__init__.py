"""External analyzer adapters.

Hard-fail adapters (their failure rejects the submission):
- ClassifierAdapter: zero-shot content type and factuality
- AssessorAdapter: generative credibility assessment

Soft-fail adapter (failure degrades to an unverified result):
- NewsVerifier: published-coverage check via NewsAPI
"""

from credibility_system.agents.analyzers.assessor_adapter import AssessorAdapter
from credibility_system.agents.analyzers.classifier_adapter import ClassifierAdapter
from credibility_system.agents.analyzers.news_api_client import NewsAPIClient, NewsAPIError
from credibility_system.agents.analyzers.news_verifier import (
    NewsVerifier,
    build_query,
    extract_keywords,
)
from credibility_system.agents.analyzers.similarity import similarity, words_of

__all__ = [
    "AssessorAdapter",
    "ClassifierAdapter",
    "NewsAPIClient",
    "NewsAPIError",
    "NewsVerifier",
    "build_query",
    "extract_keywords",
    "similarity",
    "words_of",
]
