"""HTTP payloads for the tool endpoints."""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator


class ExecuteToolRequest(BaseModel):
    """HTTP payload for POST /tools/execute."""

    tool_name: str = Field(..., description="Tool name")
    params: Dict[str, Any] = Field(default_factory=dict, description="Tool specific arguments")

    @field_validator("tool_name")
    @classmethod
    def _normalize_tool(cls, value: str) -> str:
        """Normalize tool names for consistent routing."""
        normalized = value.strip()
        if not normalized:
            raise ValueError("tool_name must not be empty")
        return normalized

    @field_validator("params", mode="before")
    @classmethod
    def _default_params(cls, value: Any) -> Any:
        return {} if value is None else value


class ExecuteToolResponse(BaseModel):
    success: bool = True
    result: Any = None


class HealthResponse(BaseModel):
    status: str = "ok"
    tools: int
