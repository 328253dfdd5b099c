from .analysis_dto import (
    AnalysisRequest,
    AnalysisResponse,
    Choice,
    ChoiceMessage,
    ErrorResponse,
)

__all__ = [
    "AnalysisRequest",
    "AnalysisResponse",
    "Choice",
    "ChoiceMessage",
    "ErrorResponse",
]
