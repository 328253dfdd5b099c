"""External service clients for the image source and the Gemini API"""

from .gemini_client import GeminiClient
from .image_resolver import ImageResolver

__all__ = [
    "GeminiClient",
    "ImageResolver",
]
