"""Constants shared across layers"""

from .media_constants import (
    DATA_URL_SCHEME,
    DEFAULT_IMAGE_MIME_TYPE,
    JSON_MEDIA_TYPE,
    PROVIDER_NAME,
)

__all__ = [
    "DATA_URL_SCHEME",
    "DEFAULT_IMAGE_MIME_TYPE",
    "JSON_MEDIA_TYPE",
    "PROVIDER_NAME",
]
