"""Per-invocation execution context and bearer credential propagation."""

from __future__ import annotations

import time
from typing import Dict, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class ExecutionContext(BaseModel):
    """
    Carrier of the caller's credential and deadline for one invocation.

    Passed explicitly from the dispatcher to the operation and on to the
    backend client, which sends auth_headers() with every request.
    """

    model_config = ConfigDict(frozen=True)

    request_id: str = Field(default_factory=lambda: str(uuid4()), description="Invocation id for tracing")
    credential: Optional[str] = Field(None, description="Bearer token forwarded to the backend")
    deadline: Optional[float] = Field(None, description="time.monotonic() value after which the call is abandoned")

    @property
    def is_authenticated(self) -> bool:
        return bool(self.credential)

    def auth_headers(self) -> Dict[str, str]:
        if not self.credential:
            return {}
        return {"Authorization": f"Bearer {self.credential}"}

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, never negative; None if unbounded."""
        if self.deadline is None:
            return None
        return max(self.deadline - time.monotonic(), 0.0)


def bearer_token(header: Optional[str]) -> str:
    """
    Extract the token from an ``Authorization`` header value.

    The header must have exactly two space-separated parts (``Bearer
    <token>``); anything else yields an empty string.
    """
    if not header:
        return ""
    parts = header.split(" ")
    if len(parts) != 2 or not parts[1]:
        return ""
    return parts[1]


class AuthPropagator:
    """Turns an inbound credential into an outbound execution context."""

    def __init__(self, default_timeout: Optional[float] = None) -> None:
        self.default_timeout = default_timeout

    def attach(
        self,
        credential: Optional[str],
        *,
        timeout: Optional[float] = None,
        request_id: Optional[str] = None,
    ) -> ExecutionContext:
        if timeout is None:
            timeout = self.default_timeout
        deadline = time.monotonic() + timeout if timeout is not None else None
        fields = {"credential": credential or None, "deadline": deadline}
        if request_id:
            fields["request_id"] = request_id
        return ExecutionContext(**fields)
