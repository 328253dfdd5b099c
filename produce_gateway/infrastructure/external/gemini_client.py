"""Google Gemini: produce inspection over the REST ``generateContent`` endpoint."""
# Standard library imports
import json
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

# External package imports
import httpx

# Local application imports
from ...core.config import Settings
from ...domain.constants import JSON_MEDIA_TYPE
from ...domain.errors import (
    GENERIC_FAILURE_MESSAGE,
    TransportError,
    UpstreamError,
    UpstreamTimeoutError,
)
from ...domain.models import InferenceResult, InlineImage

logger = logging.getLogger(__name__)

MODEL_PREFIX = "models/"

TEMPERATURE = 0.2
MAX_OUTPUT_TOKENS = 1200

PRODUCE_INSPECTION_PROMPT = (
    "You are a grocery produce quality specialist. Inspect the attached produce photo, "
    "identify the produce type, and evaluate it.\n"
    "Return ONLY valid JSON with keys: produceName (string), ripeness (1-5), freshness (1-5), "
    "confidence (0-100),\n"
    "shelfLife (string), defects (string, <=20 words), summary (string), "
    "estimatedPrice (number in USD). Example:\n"
    '{"produceName":"Banana","ripeness":4,"freshness":5,"confidence":92,'
    '"shelfLife":"3-4 days","defects":"No visible blemishes","summary":"Text",'
    '"estimatedPrice":0.79}.'
)


def normalize_model_id(model: Optional[str], default_model: str) -> str:
    """Bare model identifier: default applied, one leading ``models/`` removed."""
    target = model or default_model
    if target.startswith(MODEL_PREFIX):
        target = target[len(MODEL_PREFIX):]
    return target


def build_generate_content_body(image: InlineImage) -> Dict[str, Any]:
    """Single-turn request pairing the inspection prompt with the inline image."""
    return {
        "contents": [
            {
                "role": "user",
                "parts": [
                    {"text": PRODUCE_INSPECTION_PROMPT},
                    image.to_part(),
                ],
            }
        ],
        "generationConfig": {
            "temperature": TEMPERATURE,
            "maxOutputTokens": MAX_OUTPUT_TOKENS,
            "responseMimeType": JSON_MEDIA_TYPE,
        },
    }


def parse_upstream_payload(body: bytes) -> Any:
    """
    Decode the upstream body.

    An empty or non-JSON body becomes ``{}`` so error mapping and text
    extraction always have something to look at.
    """
    if not body:
        return {}
    try:
        return json.loads(body)
    except ValueError:
        return {}


def upstream_error_message(payload: Any) -> str:
    """Best error message available in an upstream failure payload."""
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if payload.get("message"):
            return str(payload["message"])
    return GENERIC_FAILURE_MESSAGE


def extract_candidate_text(payload: Any) -> str:
    """
    Join the text parts of the first candidate.

    Missing candidates, content or parts all yield an empty string.
    """
    if not isinstance(payload, dict):
        return ""
    candidates = payload.get("candidates") or []
    if not isinstance(candidates, list) or not candidates:
        return ""
    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return ""
    fragments = [
        part["text"]
        for part in parts
        if isinstance(part, dict) and isinstance(part.get("text"), str) and part["text"]
    ]
    return "\n".join(fragments).strip()


class GeminiClient:
    """
    Client for Gemini's ``generateContent`` REST API.

    One POST per call, authenticated with the API key as a query parameter.
    No retries: upstream failures are raised to the caller as they come.
    """

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient) -> None:
        self.settings = settings
        self.http_client = http_client

    def endpoint_for(self, model_id: str) -> str:
        return f"{self.settings.gemini_api_base}/models/{quote(model_id, safe='')}:generateContent"

    async def infer(self, image: InlineImage, model: Optional[str] = None) -> InferenceResult:
        """
        Ask Gemini to inspect a produce image.

        Args:
            image: Inline image to analyze
            model: Caller-supplied model id, with or without ``models/`` prefix

        Returns:
            InferenceResult with extracted text and the raw upstream payload

        Raises:
            UpstreamError: If Gemini answers with a non-2xx status
            TransportError: If the request fails at the connection level
        """
        model_id = normalize_model_id(model, self.settings.gemini_model)
        logger.debug(f"Calling Gemini generateContent with model: {model_id}")

        try:
            response = await self.http_client.post(
                self.endpoint_for(model_id),
                params={"key": self.settings.gemini_api_key},
                json=build_generate_content_body(image),
            )
        except httpx.TimeoutException as exception:
            raise UpstreamTimeoutError() from exception
        except httpx.HTTPError as exception:
            raise TransportError() from exception

        payload = parse_upstream_payload(response.content)
        if not response.is_success:
            raise UpstreamError(
                status_code=response.status_code,
                message=upstream_error_message(payload),
                payload=payload,
            )

        text = extract_candidate_text(payload)
        if not text:
            logger.warning(f"Gemini returned no text for model {model_id}")
        return InferenceResult(text=text, raw_payload=payload)
