"""
Tool dispatcher - resolves a tool by name and runs it.

Invocation lifecycle:
1. Lookup in the sealed registry
2. Execution context built from the caller's credential
3. Argument validation (before any backend call)
4. Operation execution under the context deadline
5. Result or error returned as a DispatchResult value
"""

from __future__ import annotations

import asyncio
import time
from typing import Any, Mapping, Optional
from uuid import uuid4

import structlog
from pydantic import BaseModel, ConfigDict, Field

from .context import AuthPropagator
from .errors import BackendError, DispatchError
from .registry import ToolRegistry
from .values import DynamicValue, to_dynamic, validate_arguments

logger = structlog.get_logger(__name__)


class DispatchResult(BaseModel):
    """Outcome of a single dispatch."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: bool
    tool: str
    result: Any = None
    error: Optional[DispatchError] = Field(None, exclude=True)
    invocation_id: str = Field(..., description="Unique invocation ID for tracing")
    duration_ms: float = Field(..., ge=0, description="Execution time in milliseconds")

    def unwrap(self) -> DynamicValue:
        """Return the result, or raise the dispatch error."""
        if self.error is not None:
            raise self.error
        return self.result


class Dispatcher:
    """Validate-then-invoke front door of the tool registry."""

    def __init__(
        self,
        registry: ToolRegistry,
        propagator: Optional[AuthPropagator] = None,
    ) -> None:
        self.registry = registry
        self.propagator = propagator or AuthPropagator()

    async def execute(
        self,
        name: str,
        args: Optional[Mapping[str, Any]] = None,
        credential: Optional[str] = "",
        *,
        timeout: Optional[float] = None,
        request_id: Optional[str] = None,
    ) -> DispatchResult:
        invocation_id = request_id or str(uuid4())
        started = time.perf_counter()

        def _done(result: Any = None, error: Optional[DispatchError] = None) -> DispatchResult:
            return DispatchResult(
                success=error is None,
                tool=name,
                result=result,
                error=error,
                invocation_id=invocation_id,
                duration_ms=(time.perf_counter() - started) * 1000,
            )

        try:
            capability = self.registry.lookup(name)
        except DispatchError as exc:
            logger.warning("Requested tool not found", tool=name, invocation_id=invocation_id)
            return _done(error=exc)

        context = self.propagator.attach(credential, timeout=timeout, request_id=invocation_id)
        arguments = dict(args or {})

        try:
            validate_arguments(capability.parameters, arguments)
        except DispatchError as exc:
            logger.warning(
                "Tool invocation failed: invalid input",
                tool=name,
                invocation_id=invocation_id,
                error=str(exc),
            )
            return _done(error=exc)

        logger.info(
            "Tool invocation started",
            tool=name,
            invocation_id=invocation_id,
            authenticated=context.is_authenticated,
        )

        try:
            raw = await asyncio.wait_for(
                capability.operation.execute(arguments, context),
                timeout=context.remaining(),
            )
        except DispatchError as exc:
            logger.warning(
                "Tool invocation rejected by operation",
                tool=name,
                invocation_id=invocation_id,
                error=str(exc),
            )
            return _done(error=exc)
        except Exception as exc:
            # only an expired tool deadline is reported as TIMEOUT
            if isinstance(exc, asyncio.TimeoutError) and context.remaining() == 0:
                logger.warning("Tool timed out", tool=name, invocation_id=invocation_id)
                return _done(error=BackendError(name, exc, code="TIMEOUT", retryable=True))
            logger.error(
                "Tool invocation failed: backend error",
                tool=name,
                invocation_id=invocation_id,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return _done(error=BackendError(name, exc))

        outcome = _done(result=to_dynamic(raw))
        logger.info(
            "Tool invocation succeeded",
            tool=name,
            invocation_id=invocation_id,
            duration_ms=outcome.duration_ms,
        )
        return outcome
