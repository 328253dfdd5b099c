"""
Shared pytest fixtures for produce gateway tests.
"""
import json
from typing import Callable, List

import httpx
import pytest

from produce_gateway.core.config import Settings

TEST_API_KEY = "test-gemini-key"
GEMINI_BASE = "https://gemini.test/v1"
DEFAULT_IMAGE = "https://images.test/default.jpg"


class RecordingHandler:
    """MockTransport handler that records every request it answers."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        self.respond = respond
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    def json_bodies(self) -> list:
        return [json.loads(r.content) for r in self.requests if r.method == "POST"]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        gemini_api_key=TEST_API_KEY,
        gemini_model="gemini-test",
        gemini_api_base=GEMINI_BASE,
        default_image_url=DEFAULT_IMAGE,
    )


@pytest.fixture
def make_http_client():
    """Factory: AsyncClient backed by httpx.MockTransport and a recording handler."""
    def _make(respond: Callable[[httpx.Request], httpx.Response]):
        handler = RecordingHandler(respond)
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return client, handler
    return _make
