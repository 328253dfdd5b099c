"""
Unit tests for AnalyzeProduceUseCase.
"""
from unittest.mock import AsyncMock

import pytest

from produce_gateway.application.dto.analysis_dto import AnalysisRequest
from produce_gateway.application.use_cases.analysis.analyze_produce import AnalyzeProduceUseCase
from produce_gateway.domain.errors import ImageFetchError, UpstreamError
from produce_gateway.domain.models import InferenceResult, InlineImage

IMAGE = InlineImage(mime_type="image/png", data="AAAA")


@pytest.fixture
def resolver():
    mock = AsyncMock()
    mock.resolve.return_value = IMAGE
    return mock


@pytest.fixture
def gemini():
    mock = AsyncMock()
    mock.infer.return_value = InferenceResult(text="verdict", raw_payload={"candidates": []})
    return mock


class TestAnalyzeProduceUseCase:
    """Tests for AnalyzeProduceUseCase"""

    @pytest.mark.asyncio
    async def test_resolves_then_infers(self, resolver, gemini):
        use_case = AnalyzeProduceUseCase(resolver, gemini)
        request = AnalysisRequest(imageData="data:image/png;base64,AAAA", model="models/gemini-x")

        result = await use_case.execute(request)

        resolver.resolve.assert_awaited_once_with("data:image/png;base64,AAAA")
        gemini.infer.assert_awaited_once_with(IMAGE, "models/gemini-x")
        assert result.model_dump() == {
            "provider": "gemini",
            "choices": [{"message": {"content": "verdict"}}],
            "raw": {"candidates": []},
        }

    @pytest.mark.asyncio
    async def test_empty_fields_are_treated_as_absent(self, resolver, gemini):
        use_case = AnalyzeProduceUseCase(resolver, gemini)
        await use_case.execute(AnalysisRequest(imageData="", model=""))
        resolver.resolve.assert_awaited_once_with(None)
        gemini.infer.assert_awaited_once_with(IMAGE, None)

    @pytest.mark.asyncio
    async def test_image_failure_skips_inference(self, resolver, gemini):
        resolver.resolve.side_effect = ImageFetchError(404)
        use_case = AnalyzeProduceUseCase(resolver, gemini)
        with pytest.raises(ImageFetchError):
            await use_case.execute(AnalysisRequest())
        gemini.infer.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_upstream_failure_propagates(self, resolver, gemini):
        gemini.infer.side_effect = UpstreamError(429, "rate limited", {"error": {}})
        use_case = AnalyzeProduceUseCase(resolver, gemini)
        with pytest.raises(UpstreamError, match="rate limited"):
            await use_case.execute(AnalysisRequest())
