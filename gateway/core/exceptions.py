"""
Global exception handlers for the gateway.

Tool errors are reported to callers as plain text carrying enough detail
(tool name, parameter name) to correct the request; unexpected failures
are logged and answered with a generic message.
"""

import structlog
from fastapi import Request, status
from fastapi.responses import PlainTextResponse

from ..tools.errors import BackendError, GatewayError

logger = structlog.get_logger(__name__)


async def gateway_exception_handler(request: Request, exc: GatewayError) -> PlainTextResponse:
    """Handle tool registry / dispatch errors."""
    log = logger.error if isinstance(exc, BackendError) else logger.warning
    log(
        "Tool request failed",
        path=request.url.path,
        method=request.method,
        status_code=exc.status_code,
        code=exc.code,
        detail=exc.message,
        details=exc.details,
        retryable=exc.retryable,
    )
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def general_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Handle anything that escaped the route."""
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return PlainTextResponse(
        "Internal server error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
