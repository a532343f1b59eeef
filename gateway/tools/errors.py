"""Error taxonomy for tool registration and dispatch."""

from __future__ import annotations

from typing import Any, Dict, Optional


class GatewayError(Exception):
    """Base error raised or returned by the tool layer."""

    code: str = "GATEWAY_ERROR"
    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.retryable = retryable
        self.details = details or {}


class DispatchError(GatewayError):
    """Failure observed while dispatching a tool invocation."""

    code = "DISPATCH_ERROR"
    status_code = 400


class NotFoundError(DispatchError):
    """The requested tool is not registered."""

    code = "TOOL_NOT_FOUND"

    def __init__(self, name: str) -> None:
        super().__init__(f"tool {name} not found", details={"tool": name})
        self.name = name


class ValidationError(DispatchError):
    """An argument is missing or does not match its declared type."""

    code = "VALIDATION_ERROR"

    def __init__(self, parameter: str, expected_type: Any, reason: str) -> None:
        expected = getattr(expected_type, "value", expected_type)
        super().__init__(
            f"invalid parameter '{parameter}': {reason}",
            details={"parameter": parameter, "expected_type": expected},
        )
        self.parameter = parameter
        self.expected_type = expected
        self.reason = reason


class MalformedRequestError(DispatchError):
    """The request body cannot be parsed into an invocation."""

    code = "MALFORMED_REQUEST"

    def __init__(self, reason: str) -> None:
        super().__init__(f"malformed request: {reason}")
        self.reason = reason


class BackendError(DispatchError):
    """The bound backend operation failed."""

    code = "BACKEND_ERROR"
    status_code = 502

    def __init__(
        self,
        capability: str,
        cause: BaseException,
        *,
        code: Optional[str] = None,
        retryable: bool = False,
    ) -> None:
        reason = str(cause) or type(cause).__name__
        super().__init__(
            f"{capability} failed: {reason}",
            retryable=retryable,
            details={"tool": capability, "exc_type": type(cause).__name__},
        )
        self.capability = capability
        self.cause = cause
        self.__cause__ = cause
        if code == "TIMEOUT":
            self.code = code
            self.status_code = 504
        elif code:
            self.code = code


class DuplicateCapabilityError(GatewayError):
    """Two capabilities were registered under the same name."""

    code = "DUPLICATE_CAPABILITY"

    def __init__(self, name: str) -> None:
        super().__init__(f"tool {name} is already registered", details={"tool": name})
        self.name = name
