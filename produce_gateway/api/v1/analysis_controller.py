# Standard library imports
import json
import logging
from typing import Any

# External package imports
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

# Local application imports
from ...application.dto.analysis_dto import AnalysisRequest, ErrorResponse
from ...application.use_cases.analysis.analyze_produce import AnalyzeProduceUseCase
from ...core.config import Settings
from ...domain.errors import (
    GENERIC_FAILURE_MESSAGE,
    GatewayError,
    InvalidJSONError,
    InvalidRequestError,
    PayloadTooLargeError,
)
from ...infrastructure.http.body_reader import read_bounded_body
from .dependencies import get_analyze_use_case, get_settings_dependency

logger = logging.getLogger(__name__)


router = APIRouter(tags=["analysis"])


def _error(status_code: int, error: str, **extra: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, **extra).model_dump(exclude_unset=True),
    )


def parse_json_body(raw_body: bytes) -> Any:
    """
    Decode the request body; an empty body counts as an empty object

    Raises:
        InvalidJSONError: If the body is not valid JSON
    """
    if not raw_body:
        return {}
    try:
        return json.loads(raw_body)
    except ValueError as exception:
        raise InvalidJSONError() from exception


def build_analysis_request(payload: Any) -> AnalysisRequest:
    """
    Validate the decoded body; anything that is not an object is treated as ``{}``

    Raises:
        InvalidRequestError: If imageData or model is present but not a string
    """
    if not isinstance(payload, dict):
        payload = {}
    try:
        return AnalysisRequest.model_validate(payload)
    except ValidationError as exception:
        fields = ", ".join(str(err["loc"][0]) for err in exception.errors() if err.get("loc"))
        raise InvalidRequestError(f"Invalid request payload: {fields} must be a string.") from exception


@router.post("/analyze")
async def analyze(
    request: Request,
    settings: Settings = Depends(get_settings_dependency),
    use_case: AnalyzeProduceUseCase = Depends(get_analyze_use_case),
) -> JSONResponse:
    """
    Inspect a produce photo

    Body: ``{"imageData"?: data URL or image URL, "model"?: Gemini model id}``

    Returns:
        200 with ``{provider, choices: [{message: {content}}], raw}``,
        or an error status with ``{error, details?}``
    """
    try:
        raw_body = await read_bounded_body(request.stream(), settings.max_body_bytes)
    except PayloadTooLargeError as exception:
        logger.warning(f"Rejected request body: {exception.message}")
        response = _error(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, exception.message)
        response.headers["Connection"] = "close"
        return response
    except GatewayError as exception:
        logger.error(f"Failed to read request body: {exception.message}", exc_info=True)
        return _error(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, exception.message)

    try:
        analysis_request = build_analysis_request(parse_json_body(raw_body))
    except GatewayError as exception:
        logger.warning(f"Rejected request payload: {exception.message}")
        return _error(exception.status_code, exception.message)

    try:
        result = await use_case.execute(analysis_request)
    except GatewayError as exception:
        logger.error(
            f"Analysis failed with status {exception.status_code}: {exception.message}",
            exc_info=exception.__cause__ is not None,
        )
        return _error(exception.status_code, exception.message, details=exception.payload)
    except Exception as exception:
        logger.error(f"Unexpected analysis failure: {exception}", exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_FAILURE_MESSAGE, details=None)

    return JSONResponse(status_code=status.HTTP_200_OK, content=result.model_dump())
