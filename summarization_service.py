import logging
from typing import Any, Dict

import httpx
from pydantic import ValidationError as ModelValidationError

from errors import UpstreamError
from Models.GenerationResponse import GenerationResponse, GenerationResult

logger = logging.getLogger("summary-service")

FALLBACK_SUMMARY = "No summary could be generated."


def compose_instruction(transcript: str, prompt: str) -> str:
    return f"{prompt}\n\nTranscript:\n{transcript}"


def build_payload(instruction: str) -> Dict[str, Any]:
    return {
        "contents": [{
            "parts": [{"text": instruction}]
        }],
    }


def extract_summary_text(body: Any) -> str:
    """
    Reads candidates[0].content.parts[0].text from a provider response body.
    Any missing level, an empty text, or a body of the wrong shape yields FALLBACK_SUMMARY.
    """
    try:
        text = GenerationResponse.model_validate(body).first_text()
    except ModelValidationError:
        logger.warning("Provider response did not match the expected shape; using fallback summary.")
        return FALLBACK_SUMMARY
    return text or FALLBACK_SUMMARY


class SummarizationGateway:
    """
    Sends a (transcript, prompt) pair to the Gemini generateContent endpoint.
    The client and API key are shared across requests and never mutated.
    """

    def __init__(self, api_key: str, client: httpx.AsyncClient, endpoint: str):
        self._api_key = api_key
        self._client = client
        self._endpoint = endpoint

    async def generate(self, transcript: str, prompt: str) -> GenerationResult:
        payload = build_payload(compose_instruction(transcript, prompt))
        try:
            # The provider expects the key as a query credential, not a header.
            response = await self._client.post(
                self._endpoint,
                params={"key": self._api_key},
                json=payload,
            )
        except httpx.HTTPError as e:
            raise UpstreamError(f"Provider request failed: {e}") from e

        if not response.is_success:
            raise UpstreamError(
                f"API call failed with status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise UpstreamError("Provider returned a non-JSON body.", status_code=response.status_code) from e

        return GenerationResult(text=extract_summary_text(body))
