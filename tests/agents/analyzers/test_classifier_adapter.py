"""Tests for ClassifierAdapter against a mocked inference endpoint."""

import json

import httpx
import pytest

from credibility_system.agents.analyzers import ClassifierAdapter
from credibility_system.config.prompts import CONTENT_TYPE_SUFFIX
from credibility_system.data_management.schemas import ClassificationResult
from credibility_system.errors import MalformedResponse, MissingLabel, UpstreamFailure

CONTENT_TYPE_BODY = {
    "sequence": "text",
    "labels": ["news article", "opinion piece", "social media post", "blog post", "advertisement"],
    "scores": [0.8, 0.1, 0.05, 0.03, 0.02],
}

FACTUALITY_BODY = {
    "sequence": "text",
    "labels": ["factual", "misleading", "opinion", "false", "unverified"],
    "scores": [0.7, 0.1, 0.1, 0.05, 0.05],
}


def _routed(content_type=CONTENT_TYPE_BODY, factuality=FACTUALITY_BODY, seen=None):
    """Handler answering by which hypothesis cue the input ends with."""

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        if seen is not None:
            seen.append((request, body))
        if body["inputs"].endswith(CONTENT_TYPE_SUFFIX):
            return httpx.Response(200, json=content_type)
        return httpx.Response(200, json=factuality)

    return handler


def _adapter(handler, fast_caller) -> ClassifierAdapter:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ClassifierAdapter(
        api_key="hf-secret",
        model="test/zero-shot",
        base_url="https://inference.test/models/",
        http_client=client,
        caller=fast_caller,
    )


class TestClassify:
    @pytest.mark.asyncio
    async def test_success(self, fast_caller):
        adapter = _adapter(_routed(), fast_caller)

        outcome = await adapter.classify("Votes were counted.")

        assert outcome.content_type_label == "news article"
        assert outcome.content_type_confidence == 0.8
        scores = outcome.factuality_scores
        assert (scores.factual, scores.misleading, scores.false, scores.opinion) == (
            0.7,
            0.1,
            0.05,
            0.1,
        )
        assert scores.unverified == 0.05

    @pytest.mark.asyncio
    async def test_request_shape(self, fast_caller):
        seen = []
        adapter = _adapter(_routed(seen=seen), fast_caller)

        await adapter.classify("Votes were counted.")

        assert len(seen) == 2
        urls = {str(request.url) for request, _ in seen}
        assert urls == {"https://inference.test/models/test/zero-shot"}
        assert all(r.headers["Authorization"] == "Bearer hf-secret" for r, _ in seen)
        labels = sorted(tuple(body["parameters"]["candidate_labels"]) for _, body in seen)
        assert ("factual", "misleading", "false", "opinion", "unverified") in labels
        assert all(body["inputs"].startswith("Votes were counted.") for _, body in seen)

    @pytest.mark.asyncio
    async def test_label_score_list_shape(self, fast_caller):
        factuality = [
            {"label": "misleading", "score": 0.2},
            {"label": "factual", "score": 0.6},
            {"label": "false", "score": 0.1},
            {"label": "opinion", "score": 0.1},
        ]
        adapter = _adapter(_routed(factuality=factuality), fast_caller)

        outcome = await adapter.classify("text")

        assert outcome.factuality.top_label == "factual"
        assert outcome.factuality_scores.unverified == 0.0

    @pytest.mark.asyncio
    async def test_missing_label_is_hard_error(self, fast_caller):
        factuality = {"labels": ["factual", "misleading", "opinion"], "scores": [0.6, 0.3, 0.1]}
        adapter = _adapter(_routed(factuality=factuality), fast_caller)

        with pytest.raises(MissingLabel) as exc_info:
            await adapter.classify("text")

        assert exc_info.value.label == "false"
        assert exc_info.value.service == "classifier"

    @pytest.mark.asyncio
    async def test_persistent_server_error(self, fast_caller):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(500, json={"error": "boom"})

        adapter = _adapter(handler, fast_caller)

        with pytest.raises(UpstreamFailure):
            await adapter.classify("text")

        # three attempts for each of the two requests
        assert len(calls) == 6

    @pytest.mark.asyncio
    async def test_transient_error_recovers(self, fast_caller):
        calls = []
        routed = _routed()

        def handler(request):
            calls.append(request)
            if len(calls) == 1:
                return httpx.Response(503, json={"error": "loading"})
            return routed(request)

        adapter = _adapter(handler, fast_caller)

        outcome = await adapter.classify("text")

        assert outcome.content_type_label == "news article"
        assert len(calls) == 3

    @pytest.mark.asyncio
    async def test_error_body_is_malformed(self, fast_caller):
        adapter = _adapter(_routed(content_type={"error": "Model is loading"}), fast_caller)

        with pytest.raises(MalformedResponse, match="Model is loading"):
            await adapter.classify("text")


class TestParseClassification:
    def test_wrapped_single_result(self):
        result = ClassifierAdapter.parse_classification([CONTENT_TYPE_BODY])
        assert result.top_label == "news article"

    @pytest.mark.parametrize("body", ["text", 42, None, {"labels": ["a"]}, [{"label": "a"}]])
    def test_rejects_unexpected_shapes(self, body):
        with pytest.raises(MalformedResponse):
            ClassifierAdapter.parse_classification(body)

    def test_rejects_misaligned_lists(self):
        with pytest.raises(MalformedResponse):
            ClassifierAdapter.parse_classification({"labels": ["a", "b"], "scores": [0.5]})


class TestFactualityScores:
    def test_lookup_by_name_not_position(self):
        result = ClassificationResult(
            labels=["opinion", "false", "factual", "misleading"],
            scores=[0.4, 0.3, 0.2, 0.1],
        )
        scores = ClassifierAdapter.factuality_scores(result)
        assert scores.factual == 0.2
        assert scores.opinion == 0.4
