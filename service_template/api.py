"""FastAPI application factory for the template services."""

import logging
from dataclasses import dataclass

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from . import clock
from .config import Settings, settings as default_settings
from .middleware import install_middleware
from .models import HealthResponse, ServiceInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceConfig:
    """
    Configuration for building a template service application.

    Args:
        name: Service name used for logging and generated docs
        greeting: Plain-text body returned by ``GET /``
        version: Service version reported by ``/info``
        description: Short description for generated docs
        health_service: Extra ``service`` field in the health body, omitted when None
        info_name: Name reported by ``GET /info``; the route exists only when set
        port: Default listening port
    """

    name: str
    greeting: str
    version: str = "1.0.0"
    description: str | None = None
    health_service: str | None = None
    info_name: str | None = None
    port: int = 8080


def create_app(config: ServiceConfig, settings: Settings | None = None) -> FastAPI:
    """
    Create a FastAPI application for a template service.

    Args:
        config: The service to build
        settings: Process settings (defaults to the environment-derived instance)
    """

    settings = settings or default_settings

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    docs_kwargs = {}
    if not settings.docs_enabled:
        docs_kwargs = {"docs_url": None, "redoc_url": None, "openapi_url": None}

    app = FastAPI(
        title=config.name,
        description=config.description or f"{config.name} service",
        version=config.version,
        **docs_kwargs,
    )

    app.state.service_config = config

    install_middleware(app)

    @app.get(
        "/health",
        response_model=HealthResponse,
        response_model_exclude_none=True,
    )
    async def health_check():
        return HealthResponse(
            status="ok",
            timestamp=clock.utc_timestamp(),
            service=config.health_service,
        )

    if config.info_name:
        @app.get("/info", response_model=ServiceInfo)
        async def service_info():
            return ServiceInfo(
                name=config.info_name,
                version=config.version,
                uptime=clock.uptime(),
            )

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return config.greeting

    logger.info(
        "Built %s v%s (info endpoint %s)",
        config.name,
        config.version,
        "enabled" if config.info_name else "disabled",
    )

    return app
