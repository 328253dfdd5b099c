"""Error taxonomy for the analysis pipeline.

Each error carries the HTTP status the gateway answers with and, for upstream
failures, the payload that is echoed back to the caller as ``details``.
"""
from typing import Any, Optional

GENERIC_FAILURE_MESSAGE = "Gemini request failed."


class ConfigurationError(Exception):
    """Raised at startup when required settings are missing."""


class GatewayError(Exception):
    """Base class for failures that map onto a client response."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.payload = payload


class PayloadTooLargeError(GatewayError):
    status_code = 413

    def __init__(self, message: str = "Payload too large") -> None:
        super().__init__(message)


class InvalidJSONError(GatewayError):
    status_code = 400

    def __init__(self, message: str = "Invalid JSON payload.") -> None:
        super().__init__(message)


class InvalidRequestError(GatewayError):
    status_code = 400


class ImageFetchError(GatewayError):
    """Remote image fetch answered with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Failed to fetch image ({status_code})", status_code=status_code)


class UpstreamError(GatewayError):
    """Gemini answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str, payload: Any = None) -> None:
        super().__init__(message, status_code=status_code, payload=payload)


class UpstreamTimeoutError(GatewayError):
    status_code = 504

    def __init__(self, message: str = "Upstream request timed out.") -> None:
        super().__init__(message)


class TransportError(GatewayError):
    """Connection-level failure; the cause is chained via ``raise ... from``."""

    def __init__(self, message: str = GENERIC_FAILURE_MESSAGE) -> None:
        super().__init__(message)
