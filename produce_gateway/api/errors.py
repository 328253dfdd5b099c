"""Exception handlers that keep every error body in the ``{"error": ...}`` shape."""
# External package imports
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ..application.dto.analysis_dto import ErrorResponse

NOT_FOUND_MESSAGE = "Not found"


async def http_exception_handler(request: Request, exception: StarletteHTTPException) -> JSONResponse:
    """
    Unknown paths and unsupported methods both answer 404 Not found.
    """
    if exception.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=ErrorResponse(error=NOT_FOUND_MESSAGE).model_dump(exclude_unset=True),
        )
    return JSONResponse(
        status_code=exception.status_code,
        content=ErrorResponse(error=str(exception.detail)).model_dump(exclude_unset=True),
        headers=getattr(exception, "headers", None),
    )


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
