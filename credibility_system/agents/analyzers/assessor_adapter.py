"""Generative credibility assessor adapter (hard-fail).

Sends the text to a chat-completions model with a fact-checking system
instruction and JSON output mode, then parses the reply into a
GenerativeAssessment. A reply that is not JSON or lacks any of
credibilityScore, truthScore or confidence is a MalformedResponse.
"""

import json
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from credibility_system.config.prompts import ASSESSOR_SYSTEM_PROMPT
from credibility_system.config.settings import settings
from credibility_system.data_management.schemas import GenerativeAssessment
from credibility_system.errors import CredibilityError, MalformedResponse, UpstreamFailure
from credibility_system.llm.resilient_caller import ResilientCaller
from credibility_system.utils.logging import get_structured_logger

SERVICE_NAME = "generative_assessor"


class AssessorAdapter:
    """Adapter for the generative credibility assessor.

    Attributes:
        model: Chat model name
        temperature: Sampling temperature (low for repeatable scores)
        caller: ResilientCaller applied to the request
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        url: Optional[str] = None,
        temperature: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        caller: Optional[ResilientCaller] = None,
    ) -> None:
        self._api_key = api_key or settings.mistral_api_key
        self.model = model or settings.mistral_model
        self.url = url or settings.mistral_api_url
        self.temperature = temperature if temperature is not None else settings.mistral_temperature
        self._http_client = http_client
        self.caller = caller or ResilientCaller(name=SERVICE_NAME)
        self._logger = get_structured_logger("AssessorAdapter", model=self.model)

    def build_request(self, text: str) -> dict[str, Any]:
        """Chat-completions body for one assessment."""
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": ASSESSOR_SYSTEM_PROMPT},
                {"role": "user", "content": text},
            ],
            "temperature": self.temperature,
            "response_format": {"type": "json_object"},
        }

    async def assess(self, text: str) -> GenerativeAssessment:
        """Assess ``text``.

        Raises:
            UpstreamFailure: The request failed after all retries
            MalformedResponse: The reply does not parse into an assessment
        """
        if self._http_client is not None:
            return await self._assess_with(self._http_client, text)
        async with httpx.AsyncClient(timeout=None) as client:
            return await self._assess_with(client, text)

    async def _assess_with(self, client: httpx.AsyncClient, text: str) -> GenerativeAssessment:
        payload = self.build_request(text)
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

        async def request() -> Any:
            response = await client.post(self.url, json=payload, headers=headers)
            response.raise_for_status()
            return response.json()

        try:
            body = await self.caller.call(request)
        except CredibilityError:
            raise
        except httpx.HTTPError as e:
            raise UpstreamFailure(
                f"Assessor request failed: {e}", service=SERVICE_NAME
            ) from e
        except ValueError as e:
            raise MalformedResponse(
                f"Assessor returned a non-JSON body: {e}", service=SERVICE_NAME
            ) from e

        assessment = self.parse_assessment(body)
        self._logger.info(
            "assessment_completed",
            credibility_score=assessment.credibility_score,
            truth_score=assessment.truth_score,
            confidence=assessment.confidence,
        )
        return assessment

    @staticmethod
    def parse_assessment(body: Any) -> GenerativeAssessment:
        """Extract and validate the JSON object in the first choice's message."""
        try:
            content = body["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise MalformedResponse(
                f"Assessor response has no message content: {e!r}", service=SERVICE_NAME
            ) from e

        if isinstance(content, str):
            try:
                content = json.loads(content)
            except json.JSONDecodeError as e:
                raise MalformedResponse(
                    f"Assessor message is not JSON: {e}", service=SERVICE_NAME
                ) from e

        if not isinstance(content, dict):
            raise MalformedResponse(
                f"Assessor message is a {type(content).__name__}, expected an object",
                service=SERVICE_NAME,
            )

        try:
            return GenerativeAssessment.model_validate(content)
        except ValidationError as e:
            raise MalformedResponse(
                f"Assessor message is missing required scores: {e.error_count()} error(s)",
                service=SERVICE_NAME,
            ) from e
