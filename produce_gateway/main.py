# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging
import sys

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI

# Local application imports
from .api.errors import register_exception_handlers
from .api.middleware import PermissiveCORSMiddleware
from .api.v1 import analysis_router
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .di.container import DIContainer
from .domain.errors import ConfigurationError
from .infrastructure.http_client_factory import create_http_client

logger = logging.getLogger(__name__)


def build_lifespan(settings: Settings):
    """
    Lifespan factory bound to one settings instance.

    Creates the app's pooled HTTP client (with this settings instance's
    timeout) and DI container at startup and closes the client at shutdown.
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        http_client = create_http_client(settings.upstream_timeout_seconds)
        app.state.container = DIContainer(settings=settings, http_client=http_client)
        logger.info(f"Gateway ready (model={settings.gemini_model}, base={settings.gemini_api_base})")

        yield

        await http_client.aclose()
        logger.info("Application shutdown complete")

    return lifespan


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading (when no settings are passed)
    - Startup validation of the Gemini API key
    - CORS middleware and error handlers
    - API route registration

    Args:
        settings: Explicit settings; read from the environment when omitted

    Returns:
        Configured FastAPI application instance

    Raises:
        ConfigurationError: If the Gemini API key is missing
    """
    if settings is None:
        env_path = Path.cwd() / ".env"
        load_dotenv(env_path)
        settings = get_settings()
    settings.validate()

    application = FastAPI(
        title="Produce Inspection Gateway",
        version="1.0.0",
        description="Forwards produce photos to Gemini and returns a normalized verdict",
        lifespan=build_lifespan(settings),
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    application.state.settings = settings

    application.add_middleware(PermissiveCORSMiddleware)
    register_exception_handlers(application)

    application.include_router(analysis_router)

    return application


def run() -> None:
    """Console entry point: validate configuration and serve with uvicorn."""
    import uvicorn

    load_dotenv(Path.cwd() / ".env")
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        application = create_application(settings)
    except ConfigurationError as exception:
        logger.error(str(exception))
        sys.exit(1)

    logger.info(f"Produce gateway listening on http://localhost:{settings.port}/analyze")
    uvicorn.run(
        application,
        host=settings.host,
        port=settings.port,
        log_config=None,  # Use shared logging config, not uvicorn's
    )
