from .analyze_produce import AnalyzeProduceUseCase

__all__ = ["AnalyzeProduceUseCase"]
