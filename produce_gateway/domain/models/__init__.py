from .inference import InferenceResult, InlineImage

__all__ = ["InlineImage", "InferenceResult"]
