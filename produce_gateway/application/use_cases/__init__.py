from .analysis import AnalyzeProduceUseCase

__all__ = [
    "AnalyzeProduceUseCase",
]
