"""Zero-shot classifier adapter (hard-fail).

Issues two independent zero-shot classification requests against the same
model, one for content type and one for factuality, each through the
resilient caller. Factuality scores are looked up by label name; a missing
label is a hard error because the fusion math needs every one of them.

Accepted response shapes:
- {"sequence": ..., "labels": [...], "scores": [...]} (index 0 = top)
- [{"label": ..., "score": ...}, ...] (sorted here by score, descending)

Usage:
    adapter = ClassifierAdapter()
    outcome = await adapter.classify(text)
"""

import asyncio
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from credibility_system.config.prompts import (
    CONTENT_TYPE_LABELS,
    CONTENT_TYPE_SUFFIX,
    FACTUALITY_LABELS,
    FACTUALITY_SUFFIX,
    REQUIRED_FACTUALITY_LABELS,
)
from credibility_system.config.settings import settings
from credibility_system.data_management.schemas import (
    ClassificationResult,
    ClassifierOutcome,
    FactualityScores,
)
from credibility_system.errors import (
    CredibilityError,
    MalformedResponse,
    MissingLabel,
    UpstreamFailure,
)
from credibility_system.llm.resilient_caller import ResilientCaller
from credibility_system.utils.logging import get_structured_logger

SERVICE_NAME = "classifier"


class ClassifierAdapter:
    """Adapter for a hosted zero-shot classification model.

    Attributes:
        model: Model identifier appended to the inference base URL
        caller: ResilientCaller applied to each request
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        caller: Optional[ResilientCaller] = None,
    ) -> None:
        self._api_key = api_key or settings.huggingface_api_key
        self.model = model or settings.classifier_model
        self._base_url = (base_url or settings.huggingface_api_url).rstrip("/")
        self._http_client = http_client
        self.caller = caller or ResilientCaller(name=SERVICE_NAME)
        self._logger = get_structured_logger("ClassifierAdapter", model=self.model)

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/{self.model}"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    async def classify(self, text: str) -> ClassifierOutcome:
        """Run both classifications concurrently and extract factuality scores.

        Raises:
            UpstreamFailure: A request failed after all retries
            MissingLabel: A required factuality label is absent
            MalformedResponse: A response is not a classification
        """
        if self._http_client is not None:
            return await self._classify_with(self._http_client, text)
        async with httpx.AsyncClient(timeout=None) as client:
            return await self._classify_with(client, text)

    async def _classify_with(self, client: httpx.AsyncClient, text: str) -> ClassifierOutcome:
        results = await asyncio.gather(
            self._zero_shot(client, text + CONTENT_TYPE_SUFFIX, CONTENT_TYPE_LABELS),
            self._zero_shot(client, text + FACTUALITY_SUFFIX, FACTUALITY_LABELS),
            return_exceptions=True,
        )
        for outcome in results:
            if isinstance(outcome, BaseException):
                raise outcome
        content_type, factuality = results
        scores = self.factuality_scores(factuality)

        self._logger.info(
            "classification_completed",
            content_type=content_type.top_label,
            content_type_score=round(content_type.top_score, 4),
            primary_factuality=factuality.top_label,
        )
        return ClassifierOutcome(
            content_type=content_type,
            factuality=factuality,
            factuality_scores=scores,
        )

    async def _zero_shot(
        self,
        client: httpx.AsyncClient,
        inputs: str,
        candidate_labels: list[str],
    ) -> ClassificationResult:
        payload = {"inputs": inputs, "parameters": {"candidate_labels": candidate_labels}}

        async def request() -> Any:
            response = await client.post(self.endpoint, json=payload, headers=self._headers())
            response.raise_for_status()
            return response.json()

        try:
            body = await self.caller.call(request)
        except CredibilityError:
            raise
        except httpx.HTTPError as e:
            raise UpstreamFailure(
                f"Classifier request failed: {e}", service=SERVICE_NAME
            ) from e
        except ValueError as e:
            raise MalformedResponse(
                f"Classifier returned a non-JSON body: {e}", service=SERVICE_NAME
            ) from e

        return self.parse_classification(body)

    @staticmethod
    def parse_classification(body: Any) -> ClassificationResult:
        """Normalize either supported response shape into a ClassificationResult."""
        try:
            if isinstance(body, list):
                # Some deployments wrap the single result in a list
                if len(body) == 1 and isinstance(body[0], dict) and "labels" in body[0]:
                    body = body[0]
                else:
                    ranked = sorted(body, key=lambda item: item["score"], reverse=True)
                    return ClassificationResult(
                        labels=[item["label"] for item in ranked],
                        scores=[item["score"] for item in ranked],
                    )
            if isinstance(body, dict) and "labels" in body and "scores" in body:
                return ClassificationResult(labels=body["labels"], scores=body["scores"])
        except (KeyError, TypeError, ValidationError) as e:
            raise MalformedResponse(
                f"Unexpected classifier response: {e}", service=SERVICE_NAME
            ) from e

        detail = body.get("error") if isinstance(body, dict) else None
        raise MalformedResponse(
            f"Unexpected classifier response: {detail or type(body).__name__}",
            service=SERVICE_NAME,
        )

    @staticmethod
    def factuality_scores(result: ClassificationResult) -> FactualityScores:
        """Look up factuality scores by label name.

        Raises:
            MissingLabel: If any label in REQUIRED_FACTUALITY_LABELS is absent
        """
        values: dict[str, float] = {}
        for label in REQUIRED_FACTUALITY_LABELS:
            score = result.score_for(label)
            if score is None:
                raise MissingLabel(label, service=SERVICE_NAME)
            values[label] = score

        unverified = result.score_for("unverified")
        return FactualityScores(
            **values,
            unverified=unverified if unverified is not None else 0.0,
        )
