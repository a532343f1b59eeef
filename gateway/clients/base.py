"""
Base HTTP client for the backend microservices.

Every request carries the caller's credential from the execution context
and is bounded by the context deadline.
"""

from __future__ import annotations

from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
import structlog

from ..tools.context import ExecutionContext

logger = structlog.get_logger(__name__)


class BackendServiceError(Exception):
    """Raised when a backend microservice call fails."""

    def __init__(self, service: str, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(f"{service} service error: {message}")
        self.service = service
        self.status_code = status_code


def path_segment(value: str) -> str:
    """
    Percent-encode one URL path segment.

    Slashes, ``?`` and ``#`` are encoded so an identifier can never change
    which backend endpoint is addressed.
    """
    if value in ("", ".", ".."):
        raise ValueError(f"invalid path segment {value!r}")
    return quote(value, safe="")


class ServiceClient:
    """Thin async JSON client for one backend microservice."""

    service_name: str = "backend"

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Content-Type": "application/json"},
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        context: ExecutionContext,
        *,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        remaining = context.remaining()
        timeout = self.timeout if remaining is None else min(self.timeout, remaining)

        logger.debug(
            "Backend request",
            service=self.service_name,
            method=method,
            path=path,
            request_id=context.request_id,
            authenticated=context.is_authenticated,
        )

        try:
            response = await self._client.request(
                method,
                path,
                json=json,
                params=params,
                headers=context.auth_headers(),
                timeout=timeout,
            )
        except httpx.TimeoutException as exc:
            raise BackendServiceError(self.service_name, "request timed out") from exc
        except httpx.HTTPError as exc:
            raise BackendServiceError(self.service_name, f"request failed: {exc}") from exc

        if response.is_error:
            raise BackendServiceError(
                self.service_name,
                f"{response.status_code} {_error_message(response)}",
                status_code=response.status_code,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise BackendServiceError(self.service_name, "invalid JSON response") from exc

    async def _get(self, path: str, context: ExecutionContext, **params: Any) -> Any:
        return await self._request("GET", path, context, params=params or None)

    async def _post(self, path: str, context: ExecutionContext, payload: Dict[str, Any]) -> Any:
        return await self._request("POST", path, context, json=payload)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase
    if isinstance(body, dict):
        for key in ("detail", "message", "error"):
            if body.get(key):
                return str(body[key])
    return response.reason_phrase
