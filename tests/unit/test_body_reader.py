"""
Unit tests for produce_gateway.infrastructure.http.body_reader
"""
import pytest
from starlette.requests import ClientDisconnect

from produce_gateway.domain.errors import PayloadTooLargeError, TransportError
from produce_gateway.infrastructure.http.body_reader import read_bounded_body


class ChunkStream:
    """Async chunk source that records how far it was consumed."""

    def __init__(self, chunks, fail_with=None):
        self.chunks = list(chunks)
        self.fail_with = fail_with
        self.yielded = 0
        self.closed = False

    def __aiter__(self):
        return self._gen()

    async def _gen(self):
        try:
            for chunk in self.chunks:
                self.yielded += 1
                yield chunk
            if self.fail_with is not None:
                raise self.fail_with
        finally:
            self.closed = True


class TestReadBoundedBody:
    """Tests for read_bounded_body"""

    @pytest.mark.asyncio
    async def test_returns_exact_bytes_across_chunks(self):
        stream = ChunkStream([b'{"image', b"Data", b'":"x"}'])
        body = await read_bounded_body(stream.__aiter__(), max_bytes=1024)
        assert body == b'{"imageData":"x"}'

    @pytest.mark.asyncio
    async def test_empty_stream_returns_empty_bytes(self):
        body = await read_bounded_body(ChunkStream([]).__aiter__(), max_bytes=10)
        assert body == b""

    @pytest.mark.asyncio
    async def test_body_exactly_at_limit_is_accepted(self):
        body = await read_bounded_body(ChunkStream([b"12345", b"67890"]).__aiter__(), max_bytes=10)
        assert body == b"1234567890"

    @pytest.mark.asyncio
    async def test_over_limit_raises_and_stops_reading(self):
        stream = ChunkStream([b"aaaa", b"bbbb", b"cccc", b"dddd"])
        with pytest.raises(PayloadTooLargeError) as exc_info:
            await read_bounded_body(stream.__aiter__(), max_bytes=10)
        assert exc_info.value.status_code == 413
        assert exc_info.value.message == "Payload too large"
        # third chunk pushed the total over the limit; the fourth is never pulled
        assert stream.yielded == 3
        assert stream.closed is True

    @pytest.mark.asyncio
    async def test_single_oversized_chunk(self):
        with pytest.raises(PayloadTooLargeError):
            await read_bounded_body(ChunkStream([b"x" * 11]).__aiter__(), max_bytes=10)

    @pytest.mark.asyncio
    async def test_custom_message(self):
        with pytest.raises(PayloadTooLargeError, match="Image too large"):
            await read_bounded_body(
                ChunkStream([b"x" * 5]).__aiter__(), max_bytes=4, too_large_message="Image too large"
            )

    @pytest.mark.asyncio
    async def test_client_disconnect_becomes_transport_error(self):
        stream = ChunkStream([b"abc"], fail_with=ClientDisconnect())
        with pytest.raises(TransportError) as exc_info:
            await read_bounded_body(stream.__aiter__(), max_bytes=100)
        assert isinstance(exc_info.value.__cause__, ClientDisconnect)

    @pytest.mark.asyncio
    async def test_os_error_becomes_transport_error(self):
        stream = ChunkStream([], fail_with=ConnectionResetError("reset"))
        with pytest.raises(TransportError):
            await read_bounded_body(stream.__aiter__(), max_bytes=100)
