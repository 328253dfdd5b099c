"""Size-bounded consumption of streamed HTTP bodies."""
# Standard library imports
from typing import AsyncIterator

# External package imports
from starlette.requests import ClientDisconnect

# Local application imports
from ...domain.errors import PayloadTooLargeError, TransportError


async def read_bounded_body(
    stream: AsyncIterator[bytes],
    max_bytes: int,
    too_large_message: str = "Payload too large",
) -> bytes:
    """
    Assemble a body from a chunk stream without exceeding a byte budget.

    The stream is consumed in a single pass. As soon as the running total goes
    over ``max_bytes`` no further chunks are read and the stream is closed.

    Args:
        stream: Async iterator of byte chunks (e.g. ``Request.stream()``)
        max_bytes: Largest accepted body size
        too_large_message: Message carried by the size-exceeded error

    Returns:
        The exact bytes received (possibly empty)

    Raises:
        PayloadTooLargeError: If the cumulative size exceeds ``max_bytes``
        TransportError: If the underlying connection fails mid-read
    """
    chunks = []
    received = 0
    try:
        async for chunk in stream:
            if not chunk:
                continue
            received += len(chunk)
            if received > max_bytes:
                await _close_stream(stream)
                raise PayloadTooLargeError(too_large_message)
            chunks.append(chunk)
    except (ClientDisconnect, OSError) as exception:
        raise TransportError("Failed to read request body.") from exception
    return b"".join(chunks)


async def _close_stream(stream: AsyncIterator[bytes]) -> None:
    aclose = getattr(stream, "aclose", None)
    if aclose is not None:
        await aclose()
