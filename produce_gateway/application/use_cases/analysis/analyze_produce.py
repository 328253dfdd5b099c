# Standard library imports
import logging

# Local application imports
from ....infrastructure.external.gemini_client import GeminiClient
from ....infrastructure.external.image_resolver import ImageResolver
from ...dto.analysis_dto import AnalysisRequest, AnalysisResponse

logger = logging.getLogger(__name__)


class AnalyzeProduceUseCase:
    """Use case for inspecting a produce photo with the vision model"""

    def __init__(
        self,
        image_resolver: ImageResolver,
        gemini_client: GeminiClient,
    ) -> None:
        self.image_resolver = image_resolver
        self.gemini_client = gemini_client

    async def execute(self, request: AnalysisRequest) -> AnalysisResponse:
        """
        Resolve the image and run the inspection prompt against it

        Args:
            request: Analysis request (image reference and model are optional)

        Returns:
            AnalysisResponse with the model's text and raw upstream payload

        Raises:
            GatewayError: Any resolver or upstream failure, unchanged
        """
        inline_image = await self.image_resolver.resolve(request.image_data or None)
        result = await self.gemini_client.infer(inline_image, request.model or None)

        logger.info(
            f"Analysis complete ({inline_image.mime_type}, {len(result.text)} chars of output)"
        )
        return AnalysisResponse.from_text(result.text, result.raw_payload)
