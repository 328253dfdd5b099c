from typing import TYPE_CHECKING

import httpx

from ...application.use_cases.analysis.analyze_produce import AnalyzeProduceUseCase
from ...core.config import Settings
from ...infrastructure.external.gemini_client import GeminiClient
from ...infrastructure.external.image_resolver import ImageResolver

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AnalysisProvider:
    """Analysis provider - registers the image resolver, Gemini client and use case"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register analysis dependencies.
        Clients are stateless singletons; the use case is created on demand.
        """
        settings = container.get(Settings)
        http_client = container.get(httpx.AsyncClient)

        container.register_singleton(ImageResolver, ImageResolver(settings, http_client))
        container.register_singleton(GeminiClient, GeminiClient(settings, http_client))

        container.register_factory(
            AnalyzeProduceUseCase,
            lambda: AnalyzeProduceUseCase(
                image_resolver=container.get(ImageResolver),
                gemini_client=container.get(GeminiClient),
            )
        )
