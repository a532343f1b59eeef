"""
FastAPI application for the API gateway.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import structlog
import uvicorn
from fastapi import FastAPI

from .clients.resolver import BackendResolver
from .core.config import Settings, get_settings
from .core.exceptions import gateway_exception_handler, general_exception_handler
from .core.logging import setup_logging
from .schemas.tools import HealthResponse
from .tools.context import AuthPropagator
from .tools.dispatcher import Dispatcher
from .tools.errors import GatewayError
from .tools.operations import build_registry
from .tools.routes import create_tools_router

logger = structlog.get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    resolver: Optional[BackendResolver] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    The tool registry is built and sealed here, before the app can serve
    a request; a duplicate tool name aborts startup.
    """
    settings = settings or get_settings()
    resolver = resolver or BackendResolver.from_settings(settings)

    registry = build_registry(resolver)
    dispatcher = Dispatcher(
        registry,
        AuthPropagator(default_timeout=settings.tool_timeout_seconds),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Starting API gateway", version=app.version, tools=registry.names())
        yield
        await resolver.aclose()
        logger.info("Shutting down API gateway")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.resolver = resolver
    app.state.registry = registry
    app.state.dispatcher = dispatcher

    app.add_exception_handler(GatewayError, gateway_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(create_tools_router(dispatcher))

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(tools=len(registry))

    return app


def run() -> None:
    """Serve the gateway with uvicorn until interrupted."""
    settings = get_settings()
    setup_logging(settings.log_level, json_output=not settings.debug)
    logger.info("API gateway listening", host=settings.host, port=settings.port)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
    )


if __name__ == "__main__":
    run()
