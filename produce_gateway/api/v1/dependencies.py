# External package imports
from fastapi import Request

# Local application imports
from ...application.use_cases.analysis.analyze_produce import AnalyzeProduceUseCase
from ...core.config import Settings
from ...di.container import DIContainer


def get_container(request: Request) -> DIContainer:
    """FastAPI dependency returning the container built by create_application()"""
    return request.app.state.container


def get_settings_dependency(request: Request) -> Settings:
    return get_container(request).get(Settings)


def get_analyze_use_case(request: Request) -> AnalyzeProduceUseCase:
    return get_container(request).get(AnalyzeProduceUseCase)
