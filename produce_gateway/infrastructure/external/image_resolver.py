"""Turns a caller-supplied image reference into inline base64 data."""
# Standard library imports
import base64
import logging
import re
from typing import Optional

# External package imports
import httpx

# Local application imports
from ...core.config import Settings
from ...domain.constants import DATA_URL_SCHEME, DEFAULT_IMAGE_MIME_TYPE
from ...domain.errors import (
    ImageFetchError,
    TransportError,
    UpstreamTimeoutError,
)
from ...domain.models import InlineImage
from ..http.body_reader import read_bounded_body

logger = logging.getLogger(__name__)

# Single line only: "." does not match newlines
_DATA_URL_RE = re.compile(r"data:(.+);base64,(.+)")


def parse_data_url(image_ref: str) -> Optional[InlineImage]:
    """
    Parse a strict ``data:<mime>;base64,<payload>`` string.

    Returns:
        InlineImage, or None when the string is not a well-formed data URL
    """
    if not image_ref.startswith(DATA_URL_SCHEME):
        return None
    match = _DATA_URL_RE.fullmatch(image_ref)
    if match is None:
        return None
    return InlineImage(mime_type=match.group(1), data=match.group(2))


def media_type_from_header(content_type: Optional[str]) -> str:
    """Media type of a Content-Type header, without parameters."""
    if not content_type:
        return DEFAULT_IMAGE_MIME_TYPE
    media_type = content_type.split(";", 1)[0].strip()
    return media_type or DEFAULT_IMAGE_MIME_TYPE


class ImageResolver:
    """
    Resolves image references for the analysis pipeline.

    Inline data URLs are decoded locally; everything else (including malformed
    data URLs and the default placeholder) is downloaded on every call.
    """

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient) -> None:
        self.settings = settings
        self.http_client = http_client

    async def resolve(self, image_ref: Optional[str]) -> InlineImage:
        """
        Produce inline image data for a reference.

        Args:
            image_ref: Data URL, remote URL, or None for the default image

        Returns:
            InlineImage with mime type and base64 payload

        Raises:
            ImageFetchError: If the remote server answers with a non-2xx status
            PayloadTooLargeError: If IMAGE_MAX_BYTES is set and exceeded
            TransportError: If the download fails at the connection level
        """
        if image_ref:
            inline = parse_data_url(image_ref)
            if inline is not None:
                return inline
            if image_ref.startswith(DATA_URL_SCHEME):
                logger.debug("Malformed data URL, treating it as a remote reference")

        return await self._fetch(image_ref or self.settings.default_image_url)

    async def _fetch(self, url: str) -> InlineImage:
        logger.info(f"Fetching image from {url}")
        try:
            async with self.http_client.stream("GET", url) as response:
                if not response.is_success:
                    raise ImageFetchError(response.status_code)
                mime_type = media_type_from_header(response.headers.get("content-type"))
                body = await self._read(response)
        except httpx.TimeoutException as exception:
            raise UpstreamTimeoutError("Image fetch timed out.") from exception
        except (httpx.HTTPError, httpx.InvalidURL) as exception:
            raise TransportError() from exception

        return InlineImage(
            mime_type=mime_type,
            data=base64.b64encode(body).decode("ascii"),
        )

    async def _read(self, response: httpx.Response) -> bytes:
        cap = self.settings.image_max_bytes
        if cap is None:
            return await response.aread()
        return await read_bounded_body(response.aiter_bytes(), cap, "Image too large")
