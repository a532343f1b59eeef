"""FastAPI router exposing tool discovery and execution endpoints."""

from __future__ import annotations

import json
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Request, Response
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError as PydanticValidationError

from ..schemas.tools import ExecuteToolRequest, ExecuteToolResponse
from .catalogue import catalogue_json
from .context import bearer_token
from .dispatcher import Dispatcher
from .errors import MalformedRequestError

logger = structlog.get_logger(__name__)

optional_security = HTTPBearer(auto_error=False)


def request_credential(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security),
) -> str:
    """Bearer token of the caller, or an empty string when absent or malformed."""
    if credentials is not None and " " not in credentials.credentials:
        return credentials.credentials
    return bearer_token(request.headers.get("authorization"))


async def _parse_execute_request(request: Request) -> ExecuteToolRequest:
    body = await request.body()
    try:
        data = json.loads(body or b"null")
    except ValueError as exc:
        raise MalformedRequestError("body is not valid JSON") from exc
    if not isinstance(data, dict):
        raise MalformedRequestError("body must be a JSON object")
    try:
        return ExecuteToolRequest.model_validate(data)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ())) or "body"
        raise MalformedRequestError(f"{location}: {first.get('msg', 'invalid value')}") from exc


def create_tools_router(dispatcher: Dispatcher) -> APIRouter:
    """Create the /tools router around a dispatcher and its sealed registry."""

    router = APIRouter(prefix="/tools", tags=["tools"])
    registry = dispatcher.registry

    @router.get("")
    async def list_tools() -> Response:
        logger.info("Listing tools", tools=len(registry))
        return Response(content=catalogue_json(registry), media_type="application/json")

    @router.post("/execute", response_model=ExecuteToolResponse)
    async def execute_tool(
        request: Request,
        credential: str = Depends(request_credential),
    ) -> ExecuteToolResponse:
        payload = await _parse_execute_request(request)
        outcome = await dispatcher.execute(
            payload.tool_name,
            payload.params,
            credential,
            request_id=request.headers.get("x-request-id"),
        )
        return ExecuteToolResponse(success=True, result=outcome.unwrap())

    return router
